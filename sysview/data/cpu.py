"""CPU data collection utilities."""

from __future__ import annotations

from sysview.models.resource_snapshot import CPUSnapshot

from .host import HostInfoProvider, default_host

DEFAULT_MODEL = "Unknown"
DEFAULT_ARCHITECTURE = "unknown"
DEFAULT_LOAD_AVERAGE = (0.0, 0.0, 0.0)


def collect_cpu_snapshot(host: HostInfoProvider | None = None) -> CPUSnapshot:
    """Return the CPU model, logical core count and load averages."""

    host = host or default_host
    cores = host.cpu_count() or 1
    return CPUSnapshot(
        model=host.cpu_model() or DEFAULT_MODEL,
        cores=max(1, int(cores)),
        architecture=host.architecture() or DEFAULT_ARCHITECTURE,
        load_average=host.load_average() or DEFAULT_LOAD_AVERAGE,
    )
