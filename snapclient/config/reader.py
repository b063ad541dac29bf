"""YAML switch configuration loading and translation into API records.

Example document::

    ports:
      - name: fpPort1
        mode: 4x10G
      - name: fpPort2
        speed: 10000
    vlans:
      - id: 100
        ports: fpPort2
    interfaces:
      - vlan_id: 100
        addr: 10.0.0.1/24
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from snapclient.exceptions import ConfigError
from snapclient.models.config import IPv4Intf, Port, SubPort, Vlan


@dataclass
class SwitchConfig:
    """Translated configuration, in the order it is pushed to the switch."""

    ports: list[Port] = field(default_factory=list)
    sub_ports: list[SubPort] = field(default_factory=list)
    vlans: list[Vlan] = field(default_factory=list)
    interfaces: list[IPv4Intf] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.ports) + len(self.sub_ports) + len(self.vlans) + len(self.interfaces)


def load_config(path: str | Path) -> dict[str, Any]:
    """Load the first YAML document from ``path``.

    Raises:
        ConfigError: If the file cannot be read or parsed, or its top level
            is not a mapping.
    """
    try:
        with open(path) as f:
            document = next(iter(yaml.safe_load_all(f)), None)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse config file {path}: {e}") from e

    if not isinstance(document, dict):
        raise ConfigError(f"Config file {path} must contain a YAML mapping")

    logger.debug(f"Loaded config {path} with sections {sorted(document)}")
    return document


def _section(config: dict[str, Any], key: str) -> list[Any]:
    entries = config.get(key)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ConfigError(f"'{key}' must be a list, got {type(entries).__name__}")
    for entry in entries:
        if not isinstance(entry, dict):
            raise ConfigError(f"Entry in '{key}' must be a mapping: {entry!r}")
    return entries


def _require(entry: dict[str, Any], key: str, section: str) -> Any:
    if entry.get(key) is None:
        raise ConfigError(f"Entry in '{section}' is missing '{key}': {entry!r}")
    return entry[key]


def _as_int(entry: dict[str, Any], key: str, section: str) -> int:
    value = _require(entry, key, section)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Entry in '{section}' has non-integer '{key}': {entry!r}") from e


def read_ports(config: dict[str, Any]) -> list[Port]:
    """Port breakout records for every ``ports`` entry that sets ``mode``."""
    result: list[Port] = []
    for entry in _section(config, "ports"):
        if entry.get("mode") is not None:
            result.append(
                Port(
                    interface_ref=str(_require(entry, "name", "ports")),
                    breakout_mode=str(entry["mode"]),
                )
            )
    return result


def read_sub_ports(config: dict[str, Any]) -> list[SubPort]:
    """Port speed records for every ``ports`` entry that sets ``speed``."""
    result: list[SubPort] = []
    for entry in _section(config, "ports"):
        if entry.get("speed") is not None:
            result.append(
                SubPort(
                    interface_ref=str(_require(entry, "name", "ports")),
                    speed=_as_int(entry, "speed", "ports"),
                )
            )
    return result


def read_vlans(config: dict[str, Any]) -> list[Vlan]:
    """VLAN records; each carries a single untagged interface."""
    result: list[Vlan] = []
    for entry in _section(config, "vlans"):
        vlan_id = _as_int(entry, "id", "vlans")
        ports = _require(entry, "ports", "vlans")
        if isinstance(ports, list):
            if not ports:
                raise ConfigError(f"Entry in 'vlans' has no ports: {entry!r}")
            if len(ports) > 1:
                logger.warning(f"VLAN {vlan_id}: only the first of {len(ports)} ports is configured")
            ports = ports[0]
            if ports is None:
                raise ConfigError(f"Entry in 'vlans' has an empty port: {entry!r}")
        result.append(Vlan(vlan_id=vlan_id, untagged_interfaces=(str(ports),)))
    return result


def read_ipv4_interfaces(config: dict[str, Any]) -> list[IPv4Intf]:
    """IPv4 interface records, one per ``interfaces`` entry."""
    result: list[IPv4Intf] = []
    for entry in _section(config, "interfaces"):
        vlan_id = _as_int(entry, "vlan_id", "interfaces")
        addr = _require(entry, "addr", "interfaces")
        result.append(IPv4Intf.for_vlan(vlan_id, str(addr)))
    return result


def translate_config(config: dict[str, Any]) -> SwitchConfig:
    """Run all translators over a loaded document."""
    return SwitchConfig(
        ports=read_ports(config),
        sub_ports=read_sub_ports(config),
        vlans=read_vlans(config),
        interfaces=read_ipv4_interfaces(config),
    )


def read_config(path: str | Path) -> SwitchConfig:
    """Load ``path`` and translate it; the raw document is not kept."""
    return translate_config(load_config(path))
