"""Models exported by SysView."""

from .resource_snapshot import (
    COORDINATES_NOT_AVAILABLE,
    LOCATION_NOT_FOUND,
    CPUSnapshot,
    GeoResult,
    MemorySnapshot,
    NetworkSnapshot,
    OSSnapshot,
    ProcessMemoryUsage,
    ProcessSnapshot,
    Snapshot,
    UserSnapshot,
    snapshot_to_dict,
)

__all__ = [
    "COORDINATES_NOT_AVAILABLE",
    "LOCATION_NOT_FOUND",
    "CPUSnapshot",
    "GeoResult",
    "MemorySnapshot",
    "NetworkSnapshot",
    "OSSnapshot",
    "ProcessMemoryUsage",
    "ProcessSnapshot",
    "Snapshot",
    "UserSnapshot",
    "snapshot_to_dict",
]
