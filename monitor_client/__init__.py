"""Host inventory and utilization monitor client."""

from .collectors import LocalCollector, HardwareAccessor, create_collector
from .core import (
    BaseDetail,
    RuntimeDetail,
    Config,
    MonitorError,
    ConfigurationError,
    AccessorError,
)

__all__ = [
    "LocalCollector",
    "HardwareAccessor",
    "create_collector",
    "BaseDetail",
    "RuntimeDetail",
    "Config",
    "MonitorError",
    "ConfigurationError",
    "AccessorError",
]
