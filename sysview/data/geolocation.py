"""Best-effort IP geolocation lookup."""

from __future__ import annotations

import logging
from typing import Any

import requests

from sysview.core.config import GEOLOCATION
from sysview.models.resource_snapshot import GeoResult

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("city", "region", "country", "loc")


class GeolocationError(ValueError):
    """The service answered, but not with a usable location."""


def _parse_payload(payload: Any) -> GeoResult:
    if not isinstance(payload, dict):
        raise GeolocationError(f"expected a JSON object, got {type(payload).__name__}")
    missing = [name for name in _REQUIRED_FIELDS if not isinstance(payload.get(name), str)]
    if missing:
        raise GeolocationError(f"missing fields: {', '.join(missing)}")
    return GeoResult(
        location=f"{payload['city']}, {payload['region']}, {payload['country']}",
        coordinates=payload["loc"],
    )


class GeolocationClient:
    """Looks up the host's public location with a single GET request.

    :meth:`fetch` never raises: timeouts, HTTP errors and malformed bodies all
    produce :meth:`GeoResult.unavailable` and a warning in the log.
    """

    def __init__(
        self,
        endpoint: str = GEOLOCATION.endpoint,
        timeout: float = GEOLOCATION.timeout_seconds,
        session: requests.Session | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session

    def fetch(self) -> GeoResult:
        try:
            http = self._session or requests
            response = http.get(
                self.endpoint,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            return _parse_payload(response.json())
        except requests.Timeout:
            logger.warning("Geolocation lookup timed out after %ss (%s)", self.timeout, self.endpoint)
        except requests.RequestException as exc:
            logger.warning("Geolocation lookup failed: %s", exc)
        except ValueError as exc:
            # JSON decode errors and GeolocationError
            logger.warning("Geolocation response unusable: %s", exc)
        return GeoResult.unavailable()

    def close(self) -> None:
        if self._session is not None:
            self._session.close()


def fetch_geolocation() -> GeoResult:
    """Look up the host's location with the configured endpoint and timeout."""

    return GeolocationClient().fetch()
