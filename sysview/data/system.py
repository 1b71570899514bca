"""Operating system summary collection."""

from __future__ import annotations

from sysview.models.resource_snapshot import OSSnapshot

from .host import HostInfoProvider, default_host

UNKNOWN = "unknown"


def collect_os_snapshot(host: HostInfoProvider | None = None) -> OSSnapshot:
    host = host or default_host
    return OSSnapshot(
        platform=host.platform_id() or UNKNOWN,
        os_type=host.os_type() or UNKNOWN,
        release=host.os_release() or UNKNOWN,
        hostname=host.hostname() or UNKNOWN,
        uptime_seconds=host.system_uptime() or 0.0,
    )
