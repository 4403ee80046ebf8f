"""
Data models for host inventory and utilization readings.

These dataclasses represent the static machine inventory and the
periodic runtime readings produced by the local collector, plus the
raw counter snapshots used while sampling.
"""

from dataclasses import dataclass, field
from typing import Tuple


KIB = 1024
MIB = 1024 ** 2
GIB = 1024 ** 3


@dataclass(frozen=True)
class BaseDetail:
    """Static inventory of the machine."""

    os_arch: str
    os_name: str
    os_version: str
    os_bit: int
    cpu_name: str
    cpu_core: int
    memory: float  # GiB
    disk: float  # GiB, all mounted roots
    ip: str

    def to_dict(self) -> dict:
        """Convert to a dictionary for serialization."""
        return {
            "osArch": self.os_arch,
            "osName": self.os_name,
            "osVersion": self.os_version,
            "osBit": self.os_bit,
            "cpuName": self.cpu_name,
            "cpuCore": self.cpu_core,
            "memory": self.memory,
            "disk": self.disk,
            "ip": self.ip,
        }


@dataclass(frozen=True)
class RuntimeDetail:
    """Utilization reading over one sampling window."""

    cpu_usage: float  # 0.0 - 1.0
    memory_usage: float  # GiB
    disk_usage: float  # GiB
    network_upload: float  # KiB/s
    network_download: float  # KiB/s
    disk_read: float  # MiB/s
    disk_write: float  # MiB/s
    timestamp: int  # ms since epoch

    def to_dict(self) -> dict:
        """Convert to a dictionary for serialization."""
        return {
            "cpuUsage": self.cpu_usage,
            "memoryUsage": self.memory_usage,
            "diskUsage": self.disk_usage,
            "networkUpload": self.network_upload,
            "networkDownload": self.network_download,
            "diskRead": self.disk_read,
            "diskWrite": self.disk_write,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class CpuTicks:
    """Cumulative CPU time per accounting category."""

    user: float = 0.0
    nice: float = 0.0
    system: float = 0.0
    idle: float = 0.0
    iowait: float = 0.0
    irq: float = 0.0
    softirq: float = 0.0
    steal: float = 0.0

    @property
    def total(self) -> float:
        """Sum of all categories."""
        return (
            self.user + self.nice + self.system + self.idle
            + self.iowait + self.irq + self.softirq + self.steal
        )

    @property
    def busy(self) -> float:
        """Time counted as busy: user and system only."""
        return self.user + self.system


@dataclass(frozen=True)
class NetworkInterface:
    """Network interface with its cumulative byte counters."""

    name: str
    ipv4_addresses: Tuple[str, ...] = field(default_factory=tuple)
    bytes_sent: int = 0
    bytes_recv: int = 0


@dataclass(frozen=True)
class FileSystemRoot:
    """Capacity of a single mounted filesystem."""

    mount_point: str
    total_bytes: int = 0
    free_bytes: int = 0

    @property
    def used_bytes(self) -> int:
        """Used space in bytes."""
        return self.total_bytes - self.free_bytes


@dataclass(frozen=True)
class ByteCounters:
    """Network and disk byte counters read at one instant."""

    sent: int
    recv: int
    read: int
    written: int


@dataclass(frozen=True)
class SampleRates:
    """Per-second rates derived from two counter readings."""

    upload: float  # B/s
    download: float  # B/s
    read: float  # B/s
    write: float  # B/s
    cpu_usage: float
