"""Client settings and YAML switch configuration."""

from snapclient.config.reader import (
    SwitchConfig,
    load_config,
    read_config,
    read_ipv4_interfaces,
    read_ports,
    read_sub_ports,
    read_vlans,
    translate_config,
)
from snapclient.config.settings import ClientSettings

__all__ = [
    "ClientSettings",
    "SwitchConfig",
    "load_config",
    "read_config",
    "translate_config",
    "read_ports",
    "read_sub_ports",
    "read_vlans",
    "read_ipv4_interfaces",
]
