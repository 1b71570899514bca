"""Network interface addresses."""

from __future__ import annotations

from sysview.models.resource_snapshot import NetworkSnapshot

from .host import HostInfoProvider, default_host


def collect_network_snapshot(host: HostInfoProvider | None = None) -> NetworkSnapshot:
    host = host or default_host
    interfaces = host.network_interfaces() or {}
    return NetworkSnapshot(
        interfaces={name: [dict(entry) for entry in entries] for name, entries in interfaces.items()}
    )
