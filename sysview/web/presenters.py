"""Render a :class:`Snapshot` as an HTML page or a JSON document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from sysview.core.config import APP_NAME
from sysview.models import GeoResult, Snapshot, snapshot_to_dict

from .template_renderer import SimpleTemplateRenderer

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
DASHBOARD_TEMPLATE = "dashboard.html"

template_renderer = SimpleTemplateRenderer(TEMPLATES_DIR)


def _pretty(value: Any) -> str:
    return json.dumps(snapshot_to_dict(value), indent=2)


def render_dashboard(snapshot: Snapshot, geolocation: GeoResult) -> str:
    """Build the full HTML dashboard.

    Values are embedded as pretty-printed JSON without HTML escaping; the page
    is meant for the operator of the host.
    """

    context = {key: _pretty(section) for key, section in snapshot.sections().items()}
    context.update(
        app_name=APP_NAME,
        location=geolocation.location,
        coordinates=geolocation.coordinates,
    )
    return template_renderer.render(DASHBOARD_TEMPLATE, context)


def render_json(snapshot: Snapshot) -> str:
    return json.dumps(snapshot.to_dict(), indent=2)
