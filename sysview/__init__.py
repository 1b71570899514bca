"""SysView: single-host diagnostic dashboard."""

from __future__ import annotations

__all__ = [
    "create_app",
    "core",
    "data",
    "models",
    "web",
]

__version__ = "1.0.0"

from .web import create_app  # noqa: E402
