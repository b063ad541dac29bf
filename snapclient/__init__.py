"""SnapRoute Switch Client Library.

Reads port and route state from, and pushes YAML-defined configuration to,
a switch running the SnapRoute management REST API.
"""

__version__ = "0.1.0"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from snapclient.address import split_address_into_ip_and_mask  # noqa: E402
from snapclient.client import (  # noqa: E402
    SnapRouteClient,
    add_route,
    delete_route,
    get_port_stats,
    get_routes,
    reset_and_initialize,
    reset_routes,
)
from snapclient.config.settings import ClientSettings  # noqa: E402
from snapclient.exceptions import APIError, ConfigError, ResponseParseError, SwitchError  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "SnapRouteClient",
    "ClientSettings",
    "get_port_stats",
    "get_routes",
    "reset_routes",
    "reset_and_initialize",
    "add_route",
    "delete_route",
    "split_address_into_ip_and_mask",
    "SwitchError",
    "APIError",
    "ConfigError",
    "ResponseParseError",
]
