"""Web application package for SysView."""

from __future__ import annotations

__all__ = [
    "SnapshotAggregator",
    "create_app",
    "render_dashboard",
    "render_json",
]

from .aggregator import SnapshotAggregator  # noqa: E402
from .presenters import render_dashboard, render_json  # noqa: E402
from .server import create_app  # noqa: E402
