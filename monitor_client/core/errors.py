"""
Exceptions raised by the monitor client.

Every failure surfaces as a subclass of MonitorError so callers can
decide whether a failed reading is fatal or skipped.
"""


class MonitorError(Exception):
    """Base class for all monitor client errors."""


class ConfigurationError(MonitorError):
    """Configuration does not match the host (e.g. unknown interface)."""


class AccessorError(MonitorError):
    """An operating system or hardware query failed."""
