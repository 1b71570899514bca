"""Identity of the user running the service."""

from __future__ import annotations

from sysview.models.resource_snapshot import UserSnapshot

from .host import HostInfoProvider, default_host

UNKNOWN_USER = {
    "username": "unknown",
    "uid": -1,
    "gid": -1,
    "homedir": "",
    "shell": None,
}


def collect_user_snapshot(host: HostInfoProvider | None = None) -> UserSnapshot:
    host = host or default_host
    info = host.user_info()
    return UserSnapshot(info=dict(info) if info is not None else dict(UNKNOWN_USER))
