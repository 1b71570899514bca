"""Global configuration values for the SysView dashboard."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

APP_NAME = "SysView"
PORT_VARIABLE = "PORT"
ENVIRONMENT_VARIABLE = "APP_ENV"
ENVIRONMENT_DEFAULT = "Not set"


@dataclass(frozen=True)
class ServerConfig:
    """Listening address for the HTTP server."""

    host: str = "0.0.0.0"
    port: int = 10000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServerConfig":
        """Build a config honouring the ``PORT`` override.

        Invalid values are reported and ignored so the service still starts
        on the default port.
        """

        environ = os.environ if environ is None else environ
        raw = environ.get(PORT_VARIABLE)
        if raw is None or not raw.strip():
            return cls()
        try:
            port = int(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r", PORT_VARIABLE, raw)
            return cls()
        if not 0 <= port <= 65535:
            logger.warning("Ignoring out-of-range %s=%d", PORT_VARIABLE, port)
            return cls()
        return cls(port=port)


@dataclass(frozen=True)
class GeolocationConfig:
    """Outbound IP geolocation lookup."""

    endpoint: str = "https://ipinfo.io/json"
    timeout_seconds: float = 5.0  # connect and read, each


GEOLOCATION = GeolocationConfig()
