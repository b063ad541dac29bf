"""SnapRoute switch client: state queries, initialization and static routes."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, TypeVar

from loguru import logger

from snapclient.address import split_address_into_ip_and_mask
from snapclient.config.reader import SwitchConfig, read_config
from snapclient.config.settings import ClientSettings
from snapclient.exceptions import APIError, ResponseParseError, SwitchError
from snapclient.models.config import ConfigObject, IPv4Route, NextHopInfo
from snapclient.models.results import QueryResult, RequestOutcome
from snapclient.models.state import PortStat, PortStateRecord, Route, RouteStateRecord, extract_objects
from snapclient.transport import (
    ACTION_RESET_CONFIG,
    CONFIG_IPV4_INTF,
    CONFIG_IPV4_ROUTE,
    CONFIG_PORT,
    CONFIG_VLAN,
    STATE_IPV4_ROUTES,
    STATE_PORTS,
    SnapRouteTransport,
)

T = TypeVar("T")


class SnapRouteClient:
    """High-level client for a SnapRoute switch.

    HTTP failures never raise out of the public operations: they are logged
    and reported through the returned ``QueryResult`` / ``RequestOutcome``.
    Every operation opens its own transport, so one client may be shared
    freely.

    Usage::

        client = SnapRouteClient(ClientSettings.from_connect_string("10.0.0.1:8080"))
        for route in client.get_routes():
            print(route.network, route.next_hop)

        client.reset_and_initialize("switch.yml")
        client.add_route("192.168.10.0/24", "10.0.0.254")
    """

    def __init__(self, settings: ClientSettings, transport_factory: Callable[[ClientSettings], Any] | None = None):
        self.settings = settings
        self._transport_factory = transport_factory or SnapRouteTransport

    def _transport(self) -> Any:
        return self._transport_factory(self.settings)

    # ── state queries ─────────────────────────────────────────────────

    def fetch_port_stats(self) -> QueryResult[PortStat]:
        """Query port operational state, keeping error and skipped records."""
        offset = self.settings.port_id_offset
        return self._query(STATE_PORTS, lambda obj: PortStateRecord.from_object(obj).to_port_stat(offset))

    def fetch_routes(self) -> QueryResult[Route]:
        """Query the IPv4 routing table, keeping error and skipped records."""
        return self._query(STATE_IPV4_ROUTES, lambda obj: RouteStateRecord.from_object(obj).to_route())

    def get_port_stats(self) -> list[PortStat]:
        """Get operational state of all ports; empty on any failure."""
        return self.fetch_port_stats().items

    def get_routes(self) -> list[Route]:
        """Get all IPv4 routes; empty on any failure."""
        return self.fetch_routes().items

    def _query(self, endpoint: str, parse: Callable[[Any], T]) -> QueryResult[T]:
        result: QueryResult[T] = QueryResult()
        try:
            with self._transport() as transport:
                objects = extract_objects(transport.get(endpoint))
        except SwitchError as e:
            logger.error(f"{self.settings.connect_string}: {e}")
            result.error = e
            return result

        for obj in objects:
            try:
                result.items.append(parse(obj))
            except ResponseParseError as e:
                logger.warning(f"Skipping record from {endpoint}: {e}")
                result.skipped.append(e)

        return result

    # ── configuration ─────────────────────────────────────────────────

    def reset_routes(self) -> None:
        """Not supported: SnapRoute offers no bulk route reset."""
        logger.warning("reset routes not implemented for snaproute")

    def reset_and_initialize(self, config_file: str | Path | None) -> list[RequestOutcome]:
        """Reset the switch configuration and push the YAML config file.

        The reset request is always sent and its failure is not fatal. With
        an empty ``config_file`` nothing else happens.

        Raises:
            ConfigError: If the config file cannot be read or translated.
        """
        with self._transport() as transport:
            outcomes = [self._send(transport, "POST", ACTION_RESET_CONFIG)]
            if not config_file:
                return outcomes

            config = read_config(config_file)
            outcomes.extend(self._push(transport, config))

        self._log_summary(outcomes)
        return outcomes

    def apply_config(self, config: SwitchConfig) -> list[RequestOutcome]:
        """Push an already translated configuration without resetting first."""
        with self._transport() as transport:
            outcomes = self._push(transport, config)
        self._log_summary(outcomes)
        return outcomes

    def _push(self, transport: Any, config: SwitchConfig) -> list[RequestOutcome]:
        logger.info(
            f"Pushing {len(config.ports)} port(s), {len(config.sub_ports)} sub-port(s), "
            f"{len(config.vlans)} VLAN(s), {len(config.interfaces)} interface(s)"
        )
        outcomes: list[RequestOutcome] = []
        for port in config.ports:
            outcomes.append(self._send(transport, "PATCH", CONFIG_PORT, port))
        for sub_port in config.sub_ports:
            outcomes.append(self._send(transport, "PATCH", CONFIG_PORT, sub_port))
        for vlan in config.vlans:
            outcomes.append(self._send(transport, "POST", CONFIG_VLAN, vlan))
        for interface in config.interfaces:
            outcomes.append(self._send(transport, "POST", CONFIG_IPV4_INTF, interface))
        return outcomes

    # ── static routes ─────────────────────────────────────────────────

    def add_route(self, route_from: str, route_to: str) -> RequestOutcome:
        """Add a static route to ``route_from`` via next hop ``route_to``."""
        ip, mask = split_address_into_ip_and_mask(route_from)
        route = IPv4Route(
            destination_nw=ip,
            network_mask=mask,
            next_hops=(NextHopInfo(next_hop_ip=route_to),),
        )
        with self._transport() as transport:
            return self._send(transport, "POST", CONFIG_IPV4_ROUTE, route)

    def delete_route(self, route_from: str) -> RequestOutcome:
        """Delete the static route to ``route_from``."""
        ip, mask = split_address_into_ip_and_mask(route_from)
        route = IPv4Route(destination_nw=ip, network_mask=mask)
        with self._transport() as transport:
            return self._send(transport, "DELETE", CONFIG_IPV4_ROUTE, route)

    # ── helpers ───────────────────────────────────────────────────────

    def _send(self, transport: Any, method: str, endpoint: str, body: ConfigObject | None = None) -> RequestOutcome:
        data = body.to_wire() if body is not None else None
        send = getattr(transport, method.lower())

        try:
            if data is None:
                status = send(endpoint)
            else:
                status = send(endpoint, data)
        except APIError as e:
            if e.status_code is not None:
                logger.error(f"error code {e.status_code}: {e}")
            else:
                logger.error(f"error {e}")
            return RequestOutcome(method=method, endpoint=endpoint, status_code=e.status_code, error=e)

        logger.info(f"{method} {endpoint} {data or ''} -> {status}")
        return RequestOutcome(method=method, endpoint=endpoint, status_code=status)

    @staticmethod
    def _log_summary(outcomes: list[RequestOutcome]) -> None:
        failed = [o for o in outcomes if not o.ok]
        if failed:
            logger.warning(f"{len(failed)} of {len(outcomes)} request(s) failed")
        else:
            logger.info(f"All {len(outcomes)} request(s) succeeded")


# ── connect-string convenience functions ──────────────────────────────


def _client(connect_string: str) -> SnapRouteClient:
    try:
        settings = ClientSettings.from_connect_string(connect_string)
    except ValueError as e:
        raise APIError(f"Invalid connect string '{connect_string}': {e}") from e
    return SnapRouteClient(settings)


def _failed(method: str, endpoint: str, error: APIError) -> RequestOutcome:
    logger.error(f"error {error}")
    return RequestOutcome(method=method, endpoint=endpoint, error=error)


def get_port_stats(connect_string: str) -> list[PortStat]:
    """Port state for the switch at ``host:port``; empty on failure."""
    try:
        client = _client(connect_string)
    except APIError as e:
        logger.error(f"error {e}")
        return []
    return client.get_port_stats()


def get_routes(connect_string: str) -> list[Route]:
    """IPv4 routes for the switch at ``host:port``; empty on failure."""
    try:
        client = _client(connect_string)
    except APIError as e:
        logger.error(f"error {e}")
        return []
    return client.get_routes()


def reset_routes(connect_string: str) -> None:
    try:
        client = _client(connect_string)
    except APIError as e:
        logger.error(f"error {e}")
        return
    client.reset_routes()


def reset_and_initialize(connect_string: str, config_file: str | Path | None) -> list[RequestOutcome]:
    try:
        client = _client(connect_string)
    except APIError as e:
        return [_failed("POST", ACTION_RESET_CONFIG, e)]
    return client.reset_and_initialize(config_file)


def add_route(connect_string: str, route_from: str, route_to: str) -> RequestOutcome:
    try:
        client = _client(connect_string)
    except APIError as e:
        return _failed("POST", CONFIG_IPV4_ROUTE, e)
    return client.add_route(route_from, route_to)


def delete_route(connect_string: str, route_from: str) -> RequestOutcome:
    try:
        client = _client(connect_string)
    except APIError as e:
        return _failed("DELETE", CONFIG_IPV4_ROUTE, e)
    return client.delete_route(route_from)
