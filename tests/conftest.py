"""Shared fixtures: a scripted hardware accessor and clean environment."""

import pytest

from monitor_client.core.config import Config, MonitorConfig
from monitor_client.core.errors import AccessorError
from monitor_client.core.models import GIB, CpuTicks, FileSystemRoot, NetworkInterface


class FakeHardware:
    """
    Hardware accessor returning scripted readings.

    Sequence arguments are consumed one per call; the last entry repeats
    once the sequence is exhausted. Every counter query is recorded in
    ``calls`` so tests can check ordering against the sleep.
    """

    def __init__(
        self,
        interfaces=None,
        disk_io=None,
        ticks=None,
        memory_total=16 * GIB,
        memory_available=6 * GIB,
        roots=None,
    ):
        self._interfaces = list(interfaces or [[
            NetworkInterface("eth0", ("192.168.1.10",), 1000, 2000),
            NetworkInterface("lo", ("127.0.0.1",), 50, 50),
        ]])
        self._disk_io = list(disk_io or [(0, 0)])
        self._ticks = list(ticks or [CpuTicks(user=10, system=10, idle=80)])
        self._memory_total = memory_total
        self._memory_available = memory_available
        self._roots = roots if roots is not None else [
            FileSystemRoot("/", total_bytes=100 * GIB, free_bytes=40 * GIB),
            FileSystemRoot("/data", total_bytes=50 * GIB, free_bytes=25 * GIB),
        ]
        self.calls = []
        self.fail_on = set()

    def _next(self, name, seq):
        self.calls.append(name)
        if name in self.fail_on:
            raise AccessorError(f"{name} failed")
        value = seq[0]
        if len(seq) > 1:
            seq.pop(0)
        return value

    def sleep(self, seconds):
        self.calls.append(("sleep", seconds))

    def os_family(self):
        return "Linux"

    def os_version(self):
        return "6.1.0"

    def os_bitness(self):
        return 64

    def architecture(self):
        return "x86_64"

    def cpu_name(self):
        return "Intel(R) Xeon(R) CPU E5-2680 v4 @ 2.40GHz"

    def logical_cpu_count(self):
        return 8

    def memory_total(self):
        return self._memory_total

    def memory_available(self):
        return self._memory_available

    def cpu_ticks(self):
        return self._next("cpu_ticks", self._ticks)

    def network_interfaces(self):
        return self._next("network_interfaces", self._interfaces)

    def disk_io_totals(self):
        return self._next("disk_io_totals", self._disk_io)

    def filesystem_roots(self):
        return list(self._roots)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment overrides out of the tests."""
    for var in ("MONITOR_NETWORK_INTERFACE", "MONITOR_SAMPLE_INTERVAL", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def hardware():
    return FakeHardware()


@pytest.fixture
def config():
    return Config(monitor=MonitorConfig(network_interface="eth0", sample_interval_seconds=0.5))
