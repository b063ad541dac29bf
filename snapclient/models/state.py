"""Port and route state models, plus the wire records they are parsed from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from snapclient.exceptions import ResponseParseError


@dataclass(frozen=True)
class PortStat:
    """Operational state of a single port."""

    id: int
    connected: bool = False


@dataclass(frozen=True)
class Route:
    """An IPv4 route from the switch routing table.

    ``network`` is the destination network, ``next_hop`` the first next hop
    IP or an empty string when the route has none.
    """

    network: str
    next_hop: str = ""


_MISSING = object()


def find_field(obj: Any, key: str) -> Any:
    """Depth-first search for ``key`` in nested dicts and lists.

    SnapRoute state objects wrap their fields (``{"ObjectId": ..., "Object":
    {...}}``), so fields are looked up wherever they appear in the record.
    Raises ``KeyError`` when the key does not occur anywhere in ``obj``.
    """
    found = _search(obj, key)
    if found is _MISSING:
        raise KeyError(key)
    return found


def _search(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        if key in obj:
            return obj[key]
        values = obj.values()
    elif isinstance(obj, list):
        values = obj
    else:
        return _MISSING

    for value in values:
        found = _search(value, key)
        if found is not _MISSING:
            return found
    return _MISSING


class PortStateRecord(BaseModel):
    """Fields of a ``/state/Ports`` object this client relies on."""

    model_config = ConfigDict(populate_by_name=True)

    if_index: int = Field(alias="IfIndex", ge=0)
    oper_state: str = Field(alias="OperState")

    @classmethod
    def from_object(cls, obj: Any) -> PortStateRecord:
        """Build a record from one entry of the ``Objects`` array."""
        return _parse(cls, obj, ("IfIndex", "OperState"))

    def to_port_stat(self, id_offset: int = 0) -> PortStat:
        return PortStat(id=self.if_index + id_offset, connected=self.oper_state == "UP")


class NextHopRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    next_hop_ip: str = Field(alias="NextHopIp")


class RouteStateRecord(BaseModel):
    """Fields of a ``/state/IPv4Routes`` object this client relies on."""

    model_config = ConfigDict(populate_by_name=True)

    destination_nw: str = Field(alias="DestinationNw")
    next_hop_list: list[NextHopRecord] = Field(alias="NextHopList", default_factory=list)

    @field_validator("next_hop_list", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_object(cls, obj: Any) -> RouteStateRecord:
        """Build a record from one entry of the ``Objects`` array."""
        return _parse(cls, obj, ("DestinationNw",), optional=("NextHopList",))

    def to_route(self) -> Route:
        next_hop = self.next_hop_list[0].next_hop_ip if self.next_hop_list else ""
        return Route(network=self.destination_nw, next_hop=next_hop)


def _parse(model: Any, obj: Any, required: tuple[str, ...], optional: tuple[str, ...] = ()) -> Any:
    fields: dict[str, Any] = {}
    for key in required + optional:
        try:
            fields[key] = find_field(obj, key)
        except KeyError:
            if key in optional:
                continue
            raise ResponseParseError(f"{model.__name__}: missing field '{key}'", record=obj) from None

    try:
        return model.model_validate(fields)
    except ValidationError as e:
        raise ResponseParseError(f"{model.__name__}: {e.error_count()} invalid field(s): {e}", record=obj) from e


def extract_objects(body: Any) -> list[Any]:
    """Return the ``Objects`` array of a state response body."""
    if not isinstance(body, dict):
        raise ResponseParseError("response body is not a JSON object", record=body)
    if "Objects" not in body:
        raise ResponseParseError("response body has no 'Objects' array", record=body)
    objects = body["Objects"]
    if objects is None:
        return []
    if not isinstance(objects, list):
        raise ResponseParseError("'Objects' is not an array", record=body)
    return objects
