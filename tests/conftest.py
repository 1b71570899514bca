"""Shared fixtures: a deterministic host and a scripted geolocation client."""

from __future__ import annotations

import pytest

from sysview.data.host import HostInfoProvider
from sysview.models import GeoResult


class FakeHost(HostInfoProvider):
    """Host with fixed, known values."""

    def __init__(self, **overrides):
        self.values = {
            "cpu_model": "Fake CPU @ 3.00GHz",
            "cpu_count": 4,
            "architecture": "x86_64",
            "load_average": (1.5, 1.0, 0.5),
            "memory_totals": (1000, 250),
            "platform_id": "linux",
            "os_type": "Linux",
            "os_release": "6.1.0-test",
            "hostname": "testbox",
            "system_uptime": 90061,
            "user_info": {
                "username": "tester",
                "uid": 1000,
                "gid": 1000,
                "homedir": "/home/tester",
                "shell": "/bin/bash",
            },
            "pid": 4242,
            "process_title": "python3",
            "runtime_version": "3.12.1",
            "process_uptime": 3661,
            "process_memory": {"rss": 1024, "vms": 1048576, "shared": 0, "data": 1536},
            "env": {},
            "network_interfaces": {
                "lo": [
                    {
                        "family": "IPv4",
                        "address": "127.0.0.1",
                        "netmask": "255.0.0.0",
                        "broadcast": None,
                        "ptp": None,
                    }
                ],
            },
        }
        self.values.update(overrides)

    def cpu_model(self):
        return self.values["cpu_model"]

    def cpu_count(self):
        return self.values["cpu_count"]

    def architecture(self):
        return self.values["architecture"]

    def load_average(self):
        return self.values["load_average"]

    def memory_totals(self):
        return self.values["memory_totals"]

    def platform_id(self):
        return self.values["platform_id"]

    def os_type(self):
        return self.values["os_type"]

    def os_release(self):
        return self.values["os_release"]

    def hostname(self):
        return self.values["hostname"]

    def system_uptime(self):
        return self.values["system_uptime"]

    def user_info(self):
        return self.values["user_info"]

    def pid(self):
        return self.values["pid"]

    def process_title(self):
        return self.values["process_title"]

    def runtime_version(self):
        return self.values["runtime_version"]

    def process_uptime(self):
        return self.values["process_uptime"]

    def process_memory(self):
        return self.values["process_memory"]

    def getenv(self, name):
        return self.values["env"].get(name)

    def network_interfaces(self):
        return self.values["network_interfaces"]


class StubGeolocation:
    """Stands in for GeolocationClient; returns a fixed result or raises."""

    def __init__(self, result=None, error=None):
        self.result = result or GeoResult(location="Sofia, Sofia-Capital, BG", coordinates="42.6977,23.3219")
        self.error = error
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_host():
    return FakeHost()


@pytest.fixture
def stub_geolocation():
    return StubGeolocation()
