"""Data provider package."""

from .cpu import collect_cpu_snapshot
from .geolocation import GeolocationClient, fetch_geolocation
from .host import HostInfoProvider, default_host
from .memory import collect_memory_snapshot
from .network import collect_network_snapshot
from .process import collect_process_snapshot
from .system import collect_os_snapshot
from .user import collect_user_snapshot

__all__ = [
    "GeolocationClient",
    "HostInfoProvider",
    "collect_cpu_snapshot",
    "collect_memory_snapshot",
    "collect_network_snapshot",
    "collect_os_snapshot",
    "collect_process_snapshot",
    "collect_user_snapshot",
    "default_host",
    "fetch_geolocation",
]
