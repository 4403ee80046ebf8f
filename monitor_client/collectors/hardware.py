"""
Hardware accessor.

Thin query surface over psutil and platform. Every failure of the
underlying calls is re-raised as AccessorError.
"""

import functools
import logging
import platform
import socket
import subprocess
import sys
from typing import List, Tuple

import psutil

from ..core.errors import AccessorError
from ..core.models import CpuTicks, FileSystemRoot, NetworkInterface


logger = logging.getLogger(__name__)


def _wrap_errors(func):
    """Re-raise psutil and OS failures as AccessorError."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (psutil.Error, OSError) as e:
            raise AccessorError(f"{func.__name__} failed: {e}") from e

    return wrapper


class HardwareAccessor:
    """
    Reads host hardware and operating system state.

    Uses psutil for counters and capacities, platform for OS identity.
    Holds no state, so one instance can be shared by callers that
    serialize their own access.
    """

    def _os_release(self) -> dict:
        """Distribution identity from os-release, empty where unavailable."""
        reader = getattr(platform, "freedesktop_os_release", None)
        if reader is None:
            return {}
        try:
            return reader()
        except OSError:
            return {}

    def os_family(self) -> str:
        """Distribution name on Linux, platform.system() elsewhere."""
        return self._os_release().get("NAME") or platform.system()

    def os_version(self) -> str:
        """Distribution version on Linux, platform.release() elsewhere."""
        release = self._os_release()
        return release.get("VERSION") or release.get("VERSION_ID") or platform.release()

    def os_bitness(self) -> int:
        if sys.maxsize > 2 ** 32 or "64" in platform.machine():
            return 64
        return 32

    def architecture(self) -> str:
        return platform.machine()

    def cpu_name(self) -> str:
        """Get CPU model name."""
        try:
            if platform.system() == "Darwin":
                result = subprocess.run(
                    ["sysctl", "-n", "machdep.cpu.brand_string"],
                    capture_output=True,
                    text=True,
                )
                name = result.stdout.strip()
                if name:
                    return name
            elif platform.system() == "Linux":
                with open("/proc/cpuinfo", "r") as f:
                    for line in f:
                        if "model name" in line:
                            return line.split(":", 1)[1].strip()
        except OSError as e:
            logger.debug(f"Could not probe CPU model: {e}")
        return platform.processor() or platform.machine()

    @_wrap_errors
    def logical_cpu_count(self) -> int:
        count = psutil.cpu_count(logical=True)
        if not count:
            raise AccessorError("Logical CPU count unavailable")
        return count

    @_wrap_errors
    def memory_total(self) -> int:
        return psutil.virtual_memory().total

    @_wrap_errors
    def memory_available(self) -> int:
        return psutil.virtual_memory().available

    @_wrap_errors
    def cpu_ticks(self) -> CpuTicks:
        """Get cumulative CPU times; categories the platform lacks read 0."""
        times = psutil.cpu_times()
        return CpuTicks(
            user=times.user,
            nice=getattr(times, "nice", 0.0),
            system=times.system,
            idle=times.idle,
            iowait=getattr(times, "iowait", 0.0),
            irq=getattr(times, "irq", 0.0),
            softirq=getattr(times, "softirq", 0.0),
            steal=getattr(times, "steal", 0.0),
        )

    @_wrap_errors
    def network_interfaces(self) -> List[NetworkInterface]:
        """Get all interfaces in enumeration order with IPv4 addresses."""
        stats = psutil.net_io_counters(pernic=True)
        addrs = psutil.net_if_addrs()

        interfaces = []
        for name, io in stats.items():
            ipv4 = tuple(
                addr.address
                for addr in addrs.get(name, [])
                if addr.family == socket.AF_INET
            )
            interfaces.append(
                NetworkInterface(
                    name=name,
                    ipv4_addresses=ipv4,
                    bytes_sent=io.bytes_sent,
                    bytes_recv=io.bytes_recv,
                )
            )
        return interfaces

    @_wrap_errors
    def disk_io_totals(self) -> Tuple[int, int]:
        """Get (read_bytes, write_bytes) summed over all physical disks."""
        # Aggregate counters; on Linux this leaves out partitions, whose
        # traffic is already part of the parent disk
        io = psutil.disk_io_counters(perdisk=False)
        if io is None:
            return 0, 0
        return io.read_bytes, io.write_bytes

    @_wrap_errors
    def filesystem_roots(self) -> List[FileSystemRoot]:
        """Get capacity of every mounted filesystem, one entry per device."""
        roots = []
        seen_devices = set()

        for partition in psutil.disk_partitions(all=False):
            if partition.device in seen_devices:
                continue
            try:
                usage = psutil.disk_usage(partition.mountpoint)
            except OSError as e:
                logger.debug(f"Could not access {partition.mountpoint}: {e}")
                continue
            seen_devices.add(partition.device)
            roots.append(
                FileSystemRoot(
                    mount_point=partition.mountpoint,
                    total_bytes=usage.total,
                    free_bytes=usage.free,
                )
            )
        return roots
