"""CLI entry point: show port operational state."""

from __future__ import annotations

import argparse
import sys

from tabulate import tabulate

from snapclient.cli import add_connection_arguments, build_client, setup_logging
from snapclient.models.state import PortStat


def format_ports(ports: list[PortStat]) -> str:
    """Render port state as a table."""
    rows = [[p.id, "UP" if p.connected else "DOWN"] for p in sorted(ports, key=lambda p: p.id)]
    return tabulate(rows, headers=["Port", "State"], tablefmt="simple")


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="snapclient-ports",
        description="Show operational state of all ports on a SnapRoute switch.",
    )
    add_connection_arguments(parser)
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> None:
    """Main entry point for port state listing."""
    parsed = parse_args(args)
    setup_logging(parsed.verbose)

    try:
        client = build_client(parsed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    result = client.fetch_port_stats()
    if result.items:
        print(format_ports(result.items))
        up_count = sum(1 for p in result.items if p.connected)
        print(f"\nPorts: {up_count}/{len(result.items)} up")
    elif result.ok:
        print("No ports reported")

    sys.exit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
