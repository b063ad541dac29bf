"""CLI entry point: list, add and delete static routes."""

from __future__ import annotations

import argparse
import sys

from snapclient.cli import add_connection_arguments, build_client, setup_logging
from snapclient.client import SnapRouteClient


def cmd_list(client: SnapRouteClient, args: argparse.Namespace) -> int:
    """Print every route as ``Route <from> --> <to>``."""
    result = client.fetch_routes()
    for route in result.items:
        print(f"Route {route.network} --> {route.next_hop}")
    return 0 if result.ok else 1


def cmd_add(client: SnapRouteClient, args: argparse.Namespace) -> int:
    outcome = client.add_route(args.destination, args.next_hop)
    if outcome.ok:
        print(f"Route {args.destination} --> {args.next_hop} added")
    return 0 if outcome.ok else 1


def cmd_delete(client: SnapRouteClient, args: argparse.Namespace) -> int:
    outcome = client.delete_route(args.destination)
    if outcome.ok:
        print(f"Route {args.destination} deleted")
    return 0 if outcome.ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snapclient-routes",
        description="List, add or delete IPv4 static routes on a SnapRoute switch.",
    )
    add_connection_arguments(parser)

    subparsers = parser.add_subparsers(dest="command", help="Route commands (default: list)")
    subparsers.add_parser("list", help="List all routes")

    add_parser = subparsers.add_parser("add", help="Add a static route")
    add_parser.add_argument("destination", help="Destination network (e.g. 192.168.10.0/24)")
    add_parser.add_argument("next_hop", help="Next hop IP address")

    delete_parser = subparsers.add_parser("delete", help="Delete a static route")
    delete_parser.add_argument("destination", help="Destination network (e.g. 192.168.10.0/24)")

    return parser


def main(args: list[str] | None = None) -> None:
    """Main entry point for route management."""
    parser = build_parser()
    parsed = parser.parse_args(args)
    setup_logging(parsed.verbose)

    try:
        client = build_client(parsed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if parsed.command == "add":
        code = cmd_add(client, parsed)
    elif parsed.command == "delete":
        code = cmd_delete(client, parsed)
    else:
        code = cmd_list(client, parsed)

    sys.exit(code)


if __name__ == "__main__":
    main()
