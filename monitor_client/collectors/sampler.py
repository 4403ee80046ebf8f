"""
Delta sampling of cumulative counters.

Network bytes, disk bytes and CPU ticks only ever grow, so rates are
derived from two readings taken a fixed interval apart.
"""

import logging
import time
from typing import Callable

from ..core.errors import ConfigurationError
from ..core.models import ByteCounters, CpuTicks, SampleRates
from .hardware import HardwareAccessor
from .network import find_network_interface


logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 0.5


def calculate_cpu_usage(previous: CpuTicks, current: CpuTicks) -> float:
    """
    Busy fraction between two tick snapshots.

    Busy time is user + system only; nice, irq, softirq, steal, iowait
    and idle all count as not busy. Returns 0.0 when no CPU time
    elapsed between the snapshots.
    """
    total = current.total - previous.total
    if total <= 0:
        return 0.0

    busy = current.busy - previous.busy
    return min(max(busy / total, 0.0), 1.0)


def _rate(name: str, before: float, after: float, interval: float) -> float:
    delta = after - before
    if delta < 0:
        # Counter was reset or wrapped between readings
        logger.warning(f"Counter {name} went backwards ({before} -> {after}), reporting 0")
        return 0.0
    return delta / interval


class DeltaSampler:
    """
    Two-point measurement of network, disk and CPU counters.

    sample() blocks the calling thread for the whole interval. The
    interface is resolved again after the wait so interface list
    changes between readings are tolerated.
    """

    def __init__(
        self,
        hardware: HardwareAccessor,
        interface_name: str,
        interval: float = DEFAULT_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval <= 0:
            raise ConfigurationError(f"sample interval must be positive, got {interval}")
        self._hardware = hardware
        self._interface_name = interface_name
        self._interval = interval
        self._sleep = sleep

    @property
    def interval(self) -> float:
        return self._interval

    def _read_counters(self) -> ByteCounters:
        iface = find_network_interface(self._hardware.network_interfaces(), self._interface_name)
        read, written = self._hardware.disk_io_totals()
        return ByteCounters(
            sent=iface.bytes_sent,
            recv=iface.bytes_recv,
            read=read,
            written=written,
        )

    def sample(self) -> SampleRates:
        """Take two readings ``interval`` seconds apart and derive rates."""
        before = self._read_counters()
        ticks = self._hardware.cpu_ticks()

        self._sleep(self._interval)

        after = self._read_counters()
        cpu_usage = calculate_cpu_usage(ticks, self._hardware.cpu_ticks())

        rates = SampleRates(
            upload=_rate("bytes_sent", before.sent, after.sent, self._interval),
            download=_rate("bytes_recv", before.recv, after.recv, self._interval),
            read=_rate("disk_read_bytes", before.read, after.read, self._interval),
            write=_rate("disk_write_bytes", before.written, after.written, self._interval),
            cpu_usage=cpu_usage,
        )
        logger.debug(f"Sampled {self._interface_name} over {self._interval}s: {rates}")
        return rates
