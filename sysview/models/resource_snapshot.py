"""Dataclasses representing a single request's view of the host."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from sysview.core.formatters import format_bytes, format_duration, format_percentage

_PRIMITIVE_TYPES = (int, float, str, bool)

LOCATION_NOT_FOUND = "Location not found"
COORDINATES_NOT_AVAILABLE = "Not available"


def snapshot_to_dict(snapshot: Any) -> Any:
    """Convert dataclass snapshots into plain serialisable structures."""

    if snapshot is None:
        return None
    if isinstance(snapshot, _PRIMITIVE_TYPES):
        return snapshot
    if hasattr(snapshot, "to_dict"):
        return snapshot.to_dict()
    if hasattr(snapshot, "_asdict"):
        return snapshot._asdict()
    if hasattr(snapshot, "__dataclass_fields__"):
        return asdict(snapshot)
    if isinstance(snapshot, dict):
        return {key: snapshot_to_dict(value) for key, value in snapshot.items()}
    if isinstance(snapshot, (list, tuple, set)):
        return [snapshot_to_dict(item) for item in snapshot]
    return snapshot


@dataclass(slots=True, frozen=True)
class CPUSnapshot:
    model: str
    cores: int
    architecture: str
    load_average: tuple[float, float, float]

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "cores": self.cores,
            "architecture": self.architecture,
            "load_average": list(self.load_average),
        }


@dataclass(slots=True, frozen=True)
class MemorySnapshot:
    total_bytes: int
    free_bytes: int

    @property
    def total(self) -> str:
        return format_bytes(self.total_bytes)

    @property
    def free(self) -> str:
        return format_bytes(self.free_bytes)

    @property
    def usage(self) -> str:
        """Share of memory in use, e.g. ``"75.00%"``."""

        if self.total_bytes <= 0:
            return format_percentage(0.0)
        return format_percentage(1 - self.free_bytes / self.total_bytes)

    def to_dict(self) -> dict[str, Any]:
        return {"total": self.total, "free": self.free, "usage": self.usage}


@dataclass(slots=True, frozen=True)
class OSSnapshot:
    platform: str
    os_type: str
    release: str
    hostname: str
    uptime_seconds: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": self.platform,
            "type": self.os_type,
            "release": self.release,
            "hostname": self.hostname,
            "uptime": format_duration(self.uptime_seconds),
        }


@dataclass(slots=True, frozen=True)
class UserSnapshot:
    info: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.info)


@dataclass(slots=True, frozen=True)
class ProcessMemoryUsage:
    rss: int
    vms: int
    shared: int
    data: int

    def to_dict(self) -> dict[str, str]:
        return {
            "rss": format_bytes(self.rss),
            "vms": format_bytes(self.vms),
            "shared": format_bytes(self.shared),
            "data": format_bytes(self.data),
        }


@dataclass(slots=True, frozen=True)
class ProcessSnapshot:
    pid: int
    title: str
    python_version: str
    uptime_seconds: float
    memory_usage: ProcessMemoryUsage
    environment: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pid": self.pid,
            "title": self.title,
            "python_version": self.python_version,
            "uptime": format_duration(self.uptime_seconds),
            "memory_usage": self.memory_usage.to_dict(),
            "env": dict(self.environment),
        }


@dataclass(slots=True, frozen=True)
class NetworkSnapshot:
    interfaces: dict[str, list[dict[str, Any]]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return snapshot_to_dict(self.interfaces)


@dataclass(slots=True, frozen=True)
class GeoResult:
    location: str
    coordinates: str

    @classmethod
    def unavailable(cls) -> "GeoResult":
        """The placeholder used whenever the lookup fails."""

        return cls(location=LOCATION_NOT_FOUND, coordinates=COORDINATES_NOT_AVAILABLE)

    def to_dict(self) -> dict[str, str]:
        return {"location": self.location, "coordinates": self.coordinates}


@dataclass(slots=True, frozen=True)
class Snapshot:
    """Everything collected while handling one request.

    Sections are ``None`` only when their collector failed unexpectedly.
    ``geolocation`` is embedded for the JSON view; the HTML view receives the
    lookup result separately.
    """

    cpu: CPUSnapshot | None
    memory: MemorySnapshot | None
    os: OSSnapshot | None
    user: UserSnapshot | None
    process: ProcessSnapshot | None
    network: NetworkSnapshot | None
    geolocation: GeoResult | None = None

    def sections(self) -> dict[str, Any]:
        return {
            "cpu": self.cpu,
            "memory": self.memory,
            "os": self.os,
            "user": self.user,
            "process": self.process,
            "network": self.network,
        }

    def to_dict(self) -> dict[str, Any]:
        data = {key: snapshot_to_dict(value) for key, value in self.sections().items()}
        if self.geolocation is not None:
            data["geolocation"] = self.geolocation.to_dict()
        return data
