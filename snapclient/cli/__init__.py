"""Command line front ends for the SnapRoute client."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from snapclient import configure_logging
from snapclient.client import SnapRouteClient
from snapclient.config.settings import ClientSettings


def add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every sub-CLI."""
    parser.add_argument("connect_address", help="SnapRoute API address as host:port")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default: none)")
    parser.add_argument(
        "--port-id-offset",
        type=int,
        default=0,
        help="Offset added to IfIndex when reporting port ids (default: 0)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")


def setup_logging(verbose: bool) -> None:
    configure_logging()
    if not verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")


def build_client(parsed: argparse.Namespace) -> SnapRouteClient:
    """Create a client from parsed connection arguments.

    Raises:
        ValueError: If the connect address is malformed.
    """
    settings = ClientSettings.from_connect_string(
        parsed.connect_address,
        port_id_offset=parsed.port_id_offset,
        timeout=parsed.timeout,
    )
    return SnapRouteClient(settings)
