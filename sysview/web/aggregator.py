"""Per-request aggregation of every collector plus the geolocation lookup."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from sysview.data import (
    GeolocationClient,
    HostInfoProvider,
    collect_cpu_snapshot,
    collect_memory_snapshot,
    collect_network_snapshot,
    collect_os_snapshot,
    collect_process_snapshot,
    collect_user_snapshot,
    default_host,
)
from sysview.models import GeoResult, Snapshot

logger = logging.getLogger(__name__)

Collector = Callable[[HostInfoProvider], Any]


class SnapshotAggregator:
    """Runs the collectors for one request and assembles a :class:`Snapshot`.

    The aggregator keeps no per-request state, so a single instance is shared
    by every handler thread.
    """

    def __init__(
        self,
        host: HostInfoProvider | None = None,
        geolocation: GeolocationClient | None = None,
    ) -> None:
        self._host = host or default_host
        self._geolocation = geolocation or GeolocationClient()
        self._providers: dict[str, Collector] = {
            "cpu": collect_cpu_snapshot,
            "memory": collect_memory_snapshot,
            "os": collect_os_snapshot,
            "user": collect_user_snapshot,
            "process": collect_process_snapshot,
            "network": collect_network_snapshot,
        }

    def collect(self) -> Snapshot:
        sections = {key: self._safe_call(key, provider) for key, provider in self._providers.items()}
        return Snapshot(**sections)

    def locate(self) -> GeoResult:
        try:
            return self._geolocation.fetch()
        except Exception as exc:
            logger.exception("Geolocation client raised unexpectedly", exc_info=exc)
            return GeoResult.unavailable()

    def build_snapshot(self, *, embed_geolocation: bool = False) -> tuple[Snapshot, GeoResult]:
        """Return the snapshot and the geolocation result for one request.

        With ``embed_geolocation`` the snapshot also carries the result, which
        is how the JSON view expects it.
        """

        geolocation = self.locate()
        snapshot = self.collect()
        if embed_geolocation:
            snapshot = replace(snapshot, geolocation=geolocation)
        return snapshot, geolocation

    def _safe_call(self, key: str, fn: Collector) -> Any:
        try:
            return fn(self._host)
        except Exception as exc:
            logger.exception("Collector '%s' failed", key, exc_info=exc)
            return None
