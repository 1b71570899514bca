"""Details about the SysView process itself."""

from __future__ import annotations

from sysview.core.config import ENVIRONMENT_DEFAULT, ENVIRONMENT_VARIABLE
from sysview.models.resource_snapshot import ProcessMemoryUsage, ProcessSnapshot

from .host import HostInfoProvider, default_host

DEFAULT_TITLE = "python"


def _memory_usage(counters: dict[str, int] | None) -> ProcessMemoryUsage:
    counters = counters or {}
    return ProcessMemoryUsage(
        rss=int(counters.get("rss") or 0),
        vms=int(counters.get("vms") or 0),
        shared=int(counters.get("shared") or 0),
        data=int(counters.get("data") or 0),
    )


def collect_process_snapshot(host: HostInfoProvider | None = None) -> ProcessSnapshot:
    """Return pid, title, interpreter version, uptime, memory and env label.

    Only ``APP_ENV`` is surfaced from the environment; it reads ``"Not set"``
    when absent.
    """

    host = host or default_host
    return ProcessSnapshot(
        pid=host.pid(),
        title=host.process_title() or DEFAULT_TITLE,
        python_version=host.runtime_version(),
        uptime_seconds=host.process_uptime() or 0.0,
        memory_usage=_memory_usage(host.process_memory()),
        environment={ENVIRONMENT_VARIABLE: host.getenv(ENVIRONMENT_VARIABLE) or ENVIRONMENT_DEFAULT},
    )
