"""Core module containing data models, errors and configuration."""

from .models import (
    BaseDetail,
    RuntimeDetail,
    CpuTicks,
    NetworkInterface,
    FileSystemRoot,
)
from .errors import MonitorError, ConfigurationError, AccessorError
from .config import Config

__all__ = [
    "BaseDetail",
    "RuntimeDetail",
    "CpuTicks",
    "NetworkInterface",
    "FileSystemRoot",
    "MonitorError",
    "ConfigurationError",
    "AccessorError",
    "Config",
]
