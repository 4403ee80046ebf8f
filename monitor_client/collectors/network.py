"""Network interface selection and enumeration."""

from typing import Iterable, List

from ..core.errors import ConfigurationError
from ..core.models import NetworkInterface


def find_network_interface(interfaces: Iterable[NetworkInterface], name: str) -> NetworkInterface:
    """
    Return the first interface whose name equals ``name`` exactly.

    Raises ConfigurationError if ``name`` is empty or nothing matches.
    """
    if not name:
        raise ConfigurationError("network interface name must not be empty")

    for iface in interfaces:
        if iface.name == name:
            return iface

    raise ConfigurationError(f"interface not found: {name}")


def list_network_interface_names(interfaces: Iterable[NetworkInterface]) -> List[str]:
    """Names of all interfaces in enumeration order."""
    return [iface.name for iface in interfaces]
