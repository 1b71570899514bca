"""Access to live host state.

Every collector reads the machine through a :class:`HostInfoProvider`, so
tests can hand in a deterministic replacement. Methods return ``None`` (or an
empty mapping) when the platform cannot answer; choosing a default is left to
the collectors.
"""

from __future__ import annotations

import getpass
import os
import platform
import socket
import sys
import time
from pathlib import Path
from typing import Any

import psutil

try:
    import pwd
except ImportError:  # pragma: no cover - Windows
    pwd = None  # type: ignore[assignment]

_CPUINFO_PATH = Path("/proc/cpuinfo")


def _family_name(family: object) -> str:
    name = getattr(family, "name", str(family))
    return {"AF_INET": "IPv4", "AF_INET6": "IPv6", "AF_LINK": "MAC", "AF_PACKET": "MAC"}.get(name, name)


def _read_cpuinfo_model() -> str | None:
    if not _CPUINFO_PATH.exists():
        return None
    try:
        text = _CPUINFO_PATH.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    for line in text.splitlines():
        key, _, value = line.partition(":")
        if key.strip() in {"model name", "Hardware", "Processor"} and value.strip():
            return value.strip()
    return None


class HostInfoProvider:
    """Reads the host through psutil and the standard library."""

    # CPU

    def cpu_model(self) -> str | None:
        return _read_cpuinfo_model() or platform.processor() or None

    def cpu_count(self) -> int | None:
        return psutil.cpu_count(logical=True)

    def architecture(self) -> str | None:
        return platform.machine() or None

    def load_average(self) -> tuple[float, float, float] | None:
        try:
            one, five, fifteen = psutil.getloadavg()
        except (OSError, AttributeError):  # pragma: no cover - platform specific
            return None
        return float(one), float(five), float(fifteen)

    # Memory

    def memory_totals(self) -> tuple[int, int] | None:
        """Return ``(total, available)`` in bytes."""

        try:
            mem = psutil.virtual_memory()
        except (OSError, RuntimeError):  # pragma: no cover - should not happen
            return None
        return int(mem.total), int(mem.available)

    # Operating system

    def platform_id(self) -> str | None:
        return sys.platform or None

    def os_type(self) -> str | None:
        return platform.system() or None

    def os_release(self) -> str | None:
        return platform.release() or None

    def hostname(self) -> str | None:
        return socket.gethostname() or platform.node() or None

    def system_uptime(self) -> float | None:
        try:
            boot_time = float(psutil.boot_time())
        except (OSError, RuntimeError):  # pragma: no cover - psutil fallback
            return None
        return max(0.0, time.time() - boot_time)

    # User

    def user_info(self) -> dict[str, Any] | None:
        if pwd is not None and hasattr(os, "getuid"):
            try:
                entry = pwd.getpwuid(os.getuid())
            except KeyError:
                entry = None
            if entry is not None:
                return {
                    "username": entry.pw_name,
                    "uid": entry.pw_uid,
                    "gid": entry.pw_gid,
                    "homedir": entry.pw_dir,
                    "shell": entry.pw_shell or None,
                }
        try:
            username = getpass.getuser()
        except (KeyError, OSError):
            return None
        return {
            "username": username,
            "uid": -1,
            "gid": -1,
            "homedir": str(Path.home()),
            "shell": None,
        }

    # Current process

    def pid(self) -> int:
        return os.getpid()

    def process_title(self) -> str | None:
        try:
            return psutil.Process().name() or None
        except psutil.Error:
            return None

    def runtime_version(self) -> str:
        return platform.python_version()

    def process_uptime(self) -> float | None:
        try:
            created = psutil.Process().create_time()
        except psutil.Error:
            return None
        return max(0.0, time.time() - created)

    def process_memory(self) -> dict[str, int] | None:
        try:
            info = psutil.Process().memory_info()
        except psutil.Error:
            return None
        return {
            "rss": int(info.rss),
            "vms": int(info.vms),
            "shared": int(getattr(info, "shared", 0)),
            "data": int(getattr(info, "data", 0)),
        }

    def getenv(self, name: str) -> str | None:
        return os.environ.get(name)

    # Network

    def network_interfaces(self) -> dict[str, list[dict[str, Any]]]:
        try:
            addrs = psutil.net_if_addrs()
        except OSError:  # pragma: no cover - platform specific
            return {}
        return {
            name: [
                {
                    "family": _family_name(addr.family),
                    "address": addr.address,
                    "netmask": addr.netmask,
                    "broadcast": addr.broadcast,
                    "ptp": addr.ptp,
                }
                for addr in entries
            ]
            for name, entries in addrs.items()
        }


default_host = HostInfoProvider()
"""Shared live provider used when a collector is called without one."""
