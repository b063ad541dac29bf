"""SnapRoute REST API transport (plain HTTP, JSON bodies, no auth)."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Self

import requests
from loguru import logger

from snapclient.config.settings import ClientSettings
from snapclient.exceptions import APIError, ResponseParseError

API_PATH_V1 = "public/v1"

STATE_PORTS = f"{API_PATH_V1}/state/Ports"
STATE_IPV4_ROUTES = f"{API_PATH_V1}/state/IPv4Routes"
ACTION_RESET_CONFIG = f"{API_PATH_V1}/action/ResetConfig"
CONFIG_PORT = f"{API_PATH_V1}/config/Port"
CONFIG_VLAN = f"{API_PATH_V1}/config/Vlan"
CONFIG_IPV4_INTF = f"{API_PATH_V1}/config/IPv4Intf"
CONFIG_IPV4_ROUTE = f"{API_PATH_V1}/config/IPv4Route"


class SnapRouteTransport:
    """HTTP transport for the SnapRoute management API.

    One ``requests.Session`` per connection; the client opens a fresh
    transport for every public operation::

        with SnapRouteTransport(settings) as transport:
            body = transport.get(STATE_PORTS)
    """

    def __init__(self, settings: ClientSettings):
        self.settings = settings
        self.host = settings.host
        self.port = settings.port
        self.base_url = settings.base_url
        self._session: requests.Session | None = None

    def connect(self) -> None:
        """Open the HTTP session. No request is sent."""
        self._session = requests.Session()
        self._session.headers["Accept"] = "application/json"
        logger.debug(f"Session opened to {self.base_url}")

    def disconnect(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def is_connected(self) -> bool:
        return self._session is not None

    def __enter__(self) -> Self:
        self.connect()
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.disconnect()

    def get(self, endpoint: str) -> Any:
        """Send a GET request and return the parsed JSON body.

        Args:
            endpoint: Path relative to the base URL (e.g. "public/v1/state/Ports").

        Raises:
            APIError: On transport failure or non-2xx status.
            ResponseParseError: If the body is not valid JSON.
        """
        resp = self._send("GET", endpoint)
        try:
            return resp.json()
        except ValueError as e:
            raise ResponseParseError(f"GET {endpoint} returned invalid JSON: {e}", record=resp.text) from e

    def post(self, endpoint: str, data: dict | None = None) -> int:
        """Send a POST request with an optional JSON body; return the status code."""
        return self._send("POST", endpoint, data).status_code

    def patch(self, endpoint: str, data: dict) -> int:
        """Send a PATCH request with a JSON body; return the status code."""
        return self._send("PATCH", endpoint, data).status_code

    def delete(self, endpoint: str, data: dict | None = None) -> int:
        """Send a DELETE request with an optional JSON body; return the status code."""
        return self._send("DELETE", endpoint, data).status_code

    def _send(self, method: str, endpoint: str, data: dict | None = None) -> requests.Response:
        self._ensure_connected()
        assert self._session is not None
        url = f"{self.base_url}/{endpoint}"
        kwargs: dict[str, Any] = {"timeout": self.settings.timeout}
        if data is not None:
            kwargs["json"] = data

        try:
            resp = self._session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise APIError(f"{method} {endpoint} failed: {e}") from e

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise APIError(f"{method} {endpoint} failed: {e}", status_code=resp.status_code) from e

        logger.debug(f"{method} {endpoint} -> {resp.status_code}")
        return resp

    def _ensure_connected(self) -> None:
        if not self.is_connected():
            raise APIError("Not connected. Call connect() first.")
