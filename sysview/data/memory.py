"""Memory data collection."""

from __future__ import annotations

from sysview.models.resource_snapshot import MemorySnapshot

from .host import HostInfoProvider, default_host


def collect_memory_snapshot(host: HostInfoProvider | None = None) -> MemorySnapshot:
    host = host or default_host
    totals = host.memory_totals()
    if totals is None:
        return MemorySnapshot(total_bytes=0, free_bytes=0)
    total, free = totals
    total = max(0, int(total))
    return MemorySnapshot(total_bytes=total, free_bytes=min(max(0, int(free)), total))
