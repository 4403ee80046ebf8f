"""
Local Machine Collector.

Builds the static inventory and runtime utilization readings of the
local machine from the hardware accessor.
"""

import logging
import time
from typing import List, Optional

from ..core.config import Config, get_default_config_path
from ..core.errors import ConfigurationError, MonitorError
from ..core.models import GIB, KIB, MIB, BaseDetail, RuntimeDetail
from .hardware import HardwareAccessor
from .network import find_network_interface, list_network_interface_names
from .sampler import DeltaSampler


logger = logging.getLogger(__name__)


class LocalCollector:
    """
    Collects inventory and utilization of the local machine.

    The accessor and configuration are passed in explicitly; nothing is
    cached between calls, so every reading reflects one fresh sampling
    window.
    """

    def __init__(self, hardware: HardwareAccessor, config: Config, sleep=time.sleep):
        self._hardware = hardware
        self._interface_name = config.monitor.network_interface
        self._sampler = DeltaSampler(
            hardware,
            self._interface_name,
            interval=config.monitor.sample_interval_seconds,
            sleep=sleep,
        )

    @property
    def interface_name(self) -> str:
        return self._interface_name

    def get_base_detail(self) -> BaseDetail:
        """Get the static inventory of the machine."""
        hardware = self._hardware
        try:
            iface = find_network_interface(hardware.network_interfaces(), self._interface_name)
            if not iface.ipv4_addresses:
                raise ConfigurationError(f"interface has no IPv4 address: {self._interface_name}")

            roots = hardware.filesystem_roots()
            return BaseDetail(
                os_arch=hardware.architecture(),
                os_name=hardware.os_family(),
                os_version=hardware.os_version(),
                os_bit=hardware.os_bitness(),
                cpu_name=hardware.cpu_name(),
                cpu_core=hardware.logical_cpu_count(),
                memory=hardware.memory_total() / GIB,
                disk=sum(r.total_bytes for r in roots) / GIB,
                ip=iface.ipv4_addresses[0],
            )
        except MonitorError as e:
            logger.error(f"Error reading base detail: {e}")
            raise

    def get_runtime_detail(self) -> RuntimeDetail:
        """
        Get a utilization reading.

        Blocks for the configured sample interval. Memory and disk usage
        are read after the wait, and the timestamp is taken last.
        """
        hardware = self._hardware
        try:
            rates = self._sampler.sample()

            memory_used = hardware.memory_total() - hardware.memory_available()
            disk_used = sum(r.used_bytes for r in hardware.filesystem_roots())

            return RuntimeDetail(
                cpu_usage=rates.cpu_usage,
                memory_usage=memory_used / GIB,
                disk_usage=disk_used / GIB,
                network_upload=rates.upload / KIB,
                network_download=rates.download / KIB,
                disk_read=rates.read / MIB,
                disk_write=rates.write / MIB,
                timestamp=int(time.time() * 1000),
            )
        except MonitorError as e:
            logger.error(f"Error reading runtime detail: {e}")
            raise

    def list_network_interface_names(self) -> List[str]:
        """Get all interface names; empty if they cannot be read."""
        try:
            return list_network_interface_names(self._hardware.network_interfaces())
        except MonitorError as e:
            logger.error(f"Error listing network interfaces: {e}")
            return []


def create_collector(config: Optional[Config] = None) -> LocalCollector:
    """Create a collector for the local machine."""
    if config is None:
        config = Config.from_yaml(get_default_config_path())
    return LocalCollector(HardwareAccessor(), config)
