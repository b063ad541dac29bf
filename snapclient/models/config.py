"""Outgoing configuration records, serialized with SnapRoute field names."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ADMIN_STATE_UP = "UP"
STATIC_PROTOCOL = "STATIC"


class ConfigObject(BaseModel):
    """Base for immutable request bodies."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready body using the API's field names."""
        return self.model_dump(by_alias=True)


class Port(ConfigObject):
    """Breakout mode for a physical port (PATCH ``config/Port``)."""

    interface_ref: str = Field(alias="IntfRef")
    breakout_mode: str = Field(alias="BreakOutMode")


class SubPort(ConfigObject):
    """Speed and admin state for a port (PATCH ``config/Port``)."""

    interface_ref: str = Field(alias="IntfRef")
    speed: int = Field(alias="Speed")
    admin_state: str = Field(alias="AdminState", default=ADMIN_STATE_UP)


class Vlan(ConfigObject):
    vlan_id: int = Field(alias="VlanId")
    untagged_interfaces: tuple[str, ...] = Field(alias="UntagIntfList", default=())

    def to_wire(self) -> dict[str, Any]:
        body = super().to_wire()
        body["UntagIntfList"] = list(self.untagged_interfaces)
        return body


class IPv4Intf(ConfigObject):
    """IPv4 address on a VLAN interface; ``IntfRef`` is ``vlan<id>``."""

    interface_ref: str = Field(alias="IntfRef")
    ip_addr: str = Field(alias="IpAddr")

    @classmethod
    def for_vlan(cls, vlan_id: int, ip_addr: str) -> IPv4Intf:
        return cls(interface_ref=f"vlan{vlan_id}", ip_addr=ip_addr)


class NextHopInfo(ConfigObject):
    next_hop_ip: str = Field(alias="NextHopIp")


class IPv4Route(ConfigObject):
    """Static route body for ``config/IPv4Route``."""

    destination_nw: str = Field(alias="DestinationNw")
    network_mask: str = Field(alias="NetworkMask")
    protocol: str = Field(alias="Protocol", default=STATIC_PROTOCOL)
    next_hops: tuple[NextHopInfo, ...] = Field(alias="NextHop", default=())

    def to_wire(self) -> dict[str, Any]:
        body = super().to_wire()
        body["NextHop"] = [hop.to_wire() for hop in self.next_hops]
        return body
