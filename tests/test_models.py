"""Tests for state and configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from snapclient.exceptions import ResponseParseError
from snapclient.models.config import IPv4Intf, IPv4Route, NextHopInfo, Port, SubPort, Vlan
from snapclient.models.results import QueryResult, RequestOutcome
from snapclient.models.state import (
    PortStat,
    PortStateRecord,
    Route,
    RouteStateRecord,
    extract_objects,
    find_field,
)

# ── find_field / extract_objects ──────────────────────────────────────


class TestFindField:
    """Test recursive field lookup."""

    def test_top_level(self):
        assert find_field({"IfIndex": 3}, "IfIndex") == 3

    def test_nested_object(self):
        obj = {"ObjectId": "abc", "Object": {"IfIndex": 7, "OperState": "UP"}}
        assert find_field(obj, "IfIndex") == 7

    def test_inside_list(self):
        assert find_field({"a": [{"b": 1}, {"NextHopIp": "1.1.1.1"}]}, "NextHopIp") == "1.1.1.1"

    def test_none_value_is_found(self):
        assert find_field({"NextHopList": None}, "NextHopList") is None

    def test_missing_raises_key_error(self):
        with pytest.raises(KeyError):
            find_field({"Object": {"Other": 1}}, "IfIndex")


class TestExtractObjects:
    """Test extract_objects."""

    def test_objects_array(self):
        assert extract_objects({"Objects": [{"a": 1}]}) == [{"a": 1}]

    def test_empty_objects(self):
        assert extract_objects({"Objects": []}) == []

    def test_null_objects(self):
        assert extract_objects({"Objects": None}) == []

    def test_missing_objects(self):
        with pytest.raises(ResponseParseError, match="no 'Objects'"):
            extract_objects({"MoreExist": False})

    def test_objects_not_a_list(self):
        with pytest.raises(ResponseParseError, match="not an array"):
            extract_objects({"Objects": "nope"})

    def test_body_not_an_object(self):
        with pytest.raises(ResponseParseError):
            extract_objects([1, 2])


# ── state records ─────────────────────────────────────────────────────


class TestPortStateRecord:
    """Test PortStateRecord parsing."""

    def test_up_port(self):
        record = PortStateRecord.from_object({"Object": {"IfIndex": 5, "OperState": "UP"}})
        assert record.to_port_stat() == PortStat(id=5, connected=True)

    def test_down_port(self):
        record = PortStateRecord.from_object({"IfIndex": 2, "OperState": "DOWN"})
        assert record.to_port_stat() == PortStat(id=2, connected=False)

    def test_id_offset(self):
        record = PortStateRecord.from_object({"IfIndex": 0, "OperState": "UP"})
        assert record.to_port_stat(id_offset=1).id == 1

    def test_missing_field(self):
        with pytest.raises(ResponseParseError, match="OperState") as excinfo:
            PortStateRecord.from_object({"IfIndex": 1})
        assert excinfo.value.record == {"IfIndex": 1}

    def test_invalid_if_index(self):
        with pytest.raises(ResponseParseError, match="invalid field"):
            PortStateRecord.from_object({"IfIndex": "eth0", "OperState": "UP"})

    def test_negative_if_index(self):
        with pytest.raises(ResponseParseError):
            PortStateRecord.from_object({"IfIndex": -1, "OperState": "UP"})


class TestRouteStateRecord:
    """Test RouteStateRecord parsing."""

    def test_route_with_next_hop(self):
        obj = {
            "Object": {
                "DestinationNw": "192.168.10.0/24",
                "NextHopList": [{"NextHopIp": "10.0.0.254"}, {"NextHopIp": "10.0.0.253"}],
            }
        }
        assert RouteStateRecord.from_object(obj).to_route() == Route(network="192.168.10.0/24", next_hop="10.0.0.254")

    def test_empty_next_hop_list(self):
        record = RouteStateRecord.from_object({"DestinationNw": "10.1.0.0/24", "NextHopList": []})
        assert record.to_route().next_hop == ""

    def test_null_next_hop_list(self):
        record = RouteStateRecord.from_object({"DestinationNw": "10.1.0.0/24", "NextHopList": None})
        assert record.to_route().next_hop == ""

    def test_missing_next_hop_list(self):
        record = RouteStateRecord.from_object({"DestinationNw": "10.1.0.0/24"})
        assert record.to_route() == Route(network="10.1.0.0/24")

    def test_missing_destination(self):
        with pytest.raises(ResponseParseError, match="DestinationNw"):
            RouteStateRecord.from_object({"NextHopList": []})

    def test_next_hop_without_ip(self):
        with pytest.raises(ResponseParseError):
            RouteStateRecord.from_object({"DestinationNw": "10.1.0.0/24", "NextHopList": [{"Weight": 1}]})


# ── outgoing records ──────────────────────────────────────────────────


class TestConfigRecords:
    """Test wire serialization of configuration records."""

    def test_port(self):
        port = Port(interface_ref="fpPort1", breakout_mode="4x10G")
        assert port.to_wire() == {"IntfRef": "fpPort1", "BreakOutMode": "4x10G"}

    def test_sub_port_forces_admin_state_up(self):
        sub_port = SubPort(interface_ref="fpPort2", speed=10000)
        assert sub_port.to_wire() == {"IntfRef": "fpPort2", "Speed": 10000, "AdminState": "UP"}

    def test_vlan(self):
        vlan = Vlan(vlan_id=100, untagged_interfaces=["fpPort2"])
        assert vlan.to_wire() == {"VlanId": 100, "UntagIntfList": ["fpPort2"]}

    def test_ipv4_intf_for_vlan(self):
        intf = IPv4Intf.for_vlan(10, "10.0.0.1/24")
        assert intf.to_wire() == {"IntfRef": "vlan10", "IpAddr": "10.0.0.1/24"}

    def test_ipv4_route_with_next_hop(self):
        route = IPv4Route(
            destination_nw="192.168.10.0",
            network_mask="255.255.255.0",
            next_hops=(NextHopInfo(next_hop_ip="10.0.0.254"),),
        )
        assert route.to_wire() == {
            "DestinationNw": "192.168.10.0",
            "NetworkMask": "255.255.255.0",
            "Protocol": "STATIC",
            "NextHop": [{"NextHopIp": "10.0.0.254"}],
        }

    def test_ipv4_route_without_next_hop(self):
        route = IPv4Route(destination_nw="10.0.0.1", network_mask="255.255.255.255")
        assert route.to_wire()["NextHop"] == []

    def test_records_are_immutable(self):
        port = Port(interface_ref="fpPort1", breakout_mode="4x10G")
        with pytest.raises(ValidationError):
            port.breakout_mode = "1x40G"


# ── results ───────────────────────────────────────────────────────────


class TestResults:
    """Test result record helpers."""

    def test_query_result_ok(self):
        assert QueryResult().ok is True
        assert QueryResult().items == []

    def test_query_result_error(self):
        from snapclient.exceptions import APIError

        assert QueryResult(error=APIError("down")).ok is False

    def test_request_outcome(self):
        from snapclient.exceptions import APIError

        assert RequestOutcome("POST", "public/v1/config/Vlan", 201).ok is True
        assert RequestOutcome("POST", "public/v1/config/Vlan", 500, APIError("x", 500)).ok is False
