"""Connection settings passed to the client at construction."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_PORT = 8080


@dataclass(frozen=True)
class ClientSettings:
    """Where the SnapRoute API lives and how to interpret its answers.

    Attributes:
        host: Switch IP address or hostname.
        port: HTTP port of the management API.
        port_id_offset: Added to each port's ``IfIndex`` to form ``PortStat.id``.
        timeout: Per-request timeout in seconds; ``None`` uses transport defaults.
    """

    host: str
    port: int = DEFAULT_API_PORT
    port_id_offset: int = 0
    timeout: float | None = None

    @classmethod
    def from_connect_string(cls, connect_string: str, **kwargs: object) -> ClientSettings:
        """Build settings from a ``host:port`` (or bare ``host``) string.

        Raises:
            ValueError: If the string is empty or the port is not a number.
        """
        connect_string = connect_string.strip()
        if not connect_string:
            raise ValueError("Empty connect string")

        host, sep, port = connect_string.rpartition(":")
        if not sep:
            return cls(host=connect_string, **kwargs)  # type: ignore[arg-type]
        if not host:
            raise ValueError(f"Missing host in connect string '{connect_string}'")
        if not port.isdigit():
            raise ValueError(f"Invalid port in connect string '{connect_string}'")
        return cls(host=host, port=int(port), **kwargs)  # type: ignore[arg-type]

    @property
    def connect_string(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def base_url(self) -> str:
        return f"http://{self.connect_string}"
