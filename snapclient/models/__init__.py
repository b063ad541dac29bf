"""Data models for the SnapRoute client."""

from snapclient.models.config import IPv4Intf, IPv4Route, NextHopInfo, Port, SubPort, Vlan
from snapclient.models.results import QueryResult, RequestOutcome
from snapclient.models.state import PortStat, PortStateRecord, Route, RouteStateRecord

__all__ = [
    "PortStat",
    "Route",
    "PortStateRecord",
    "RouteStateRecord",
    "Port",
    "SubPort",
    "Vlan",
    "IPv4Intf",
    "NextHopInfo",
    "IPv4Route",
    "QueryResult",
    "RequestOutcome",
]
