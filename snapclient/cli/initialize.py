"""CLI entry point: reset a switch and initialize it from a YAML file."""

from __future__ import annotations

import argparse
import sys

from snapclient.cli import add_connection_arguments, build_client, setup_logging
from snapclient.exceptions import SwitchError


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="snapclient-initialize",
        description="Reset a SnapRoute switch and push ports, VLANs and interfaces from a YAML file.",
    )
    add_connection_arguments(parser)
    parser.add_argument("config_file", help="YAML configuration file")
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> None:
    """Main entry point for switch initialization."""
    parsed = parse_args(args)
    setup_logging(parsed.verbose)

    print(f"Connects to: {parsed.connect_address}, initializes switch with config: {parsed.config_file}")

    try:
        client = build_client(parsed)
        outcomes = client.reset_and_initialize(parsed.config_file)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except SwitchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)

    failed = sum(1 for o in outcomes if not o.ok)
    print(f"{len(outcomes) - failed}/{len(outcomes)} requests succeeded")


if __name__ == "__main__":
    main()
