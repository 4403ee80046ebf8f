"""Collectors module for reading local hardware state."""

from .hardware import HardwareAccessor
from .local_collector import LocalCollector, create_collector
from .sampler import DeltaSampler, calculate_cpu_usage

__all__ = [
    "HardwareAccessor",
    "LocalCollector",
    "create_collector",
    "DeltaSampler",
    "calculate_cpu_usage",
]
