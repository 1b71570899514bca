"""Core utilities for SysView."""

from __future__ import annotations

from .config import (
    APP_NAME,
    ENVIRONMENT_DEFAULT,
    ENVIRONMENT_VARIABLE,
    GEOLOCATION,
    GeolocationConfig,
    ServerConfig,
)
from .formatters import format_bytes, format_duration, format_percentage

__all__ = [
    "APP_NAME",
    "ENVIRONMENT_DEFAULT",
    "ENVIRONMENT_VARIABLE",
    "GEOLOCATION",
    "GeolocationConfig",
    "ServerConfig",
    "format_bytes",
    "format_duration",
    "format_percentage",
]
