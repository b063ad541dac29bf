"""Orchestrator CLI — dispatches to sub-CLIs.

Sub-commands:
  initialize  Reset the switch and push a YAML configuration
  routes      List, add or delete IPv4 static routes
  ports       Show port operational state

Examples:
  snapclient initialize 10.0.0.1:8080 switch.yml

  snapclient routes 10.0.0.1:8080

  snapclient routes 10.0.0.1:8080 add 192.168.10.0/24 10.0.0.254
"""

from __future__ import annotations

import sys

from tabulate import tabulate

from snapclient import __version__, configure_logging
from snapclient import glogger

COMMANDS = {
    "initialize": ("snapclient.cli.initialize", "Reset switch and push YAML configuration"),
    "routes": ("snapclient.cli.routes", "List, add or delete static routes"),
    "ports": ("snapclient.cli.ports", "Show port operational state"),
}


def _print_usage() -> None:
    print("usage: snapclient <command> [options]\n")
    print("Available commands:")
    for cmd, (_, desc) in COMMANDS.items():
        print(f"  {cmd:14s}  {desc}")
    print("\nRun 'snapclient <command> --help' for command-specific options.")


def _print_startup_banner() -> None:
    table_str = tabulate([["version", __version__]], tablefmt="mixed_grid")
    lines = table_str.split("\n")
    table_width = len(lines[0])
    title = "snapclient starting up"
    title_border = "┍" + "━" * (table_width - 2) + "┑"
    title_row = "│ " + title.center(table_width - 4) + " │"
    separator = lines[0].replace("┍", "┝").replace("┑", "┥").replace("┯", "┿")

    glogger.opt(raw=True).info(
        "\n{}\n", title_border + "\n" + title_row + "\n" + separator + "\n" + "\n".join(lines[1:])
    )


def main() -> None:
    """Main entry point — dispatch to sub-CLI."""
    configure_logging()
    _print_startup_banner()

    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        _print_usage()
        sys.exit(0 if len(sys.argv) >= 2 else 1)

    command = sys.argv[1]
    if command not in COMMANDS:
        print(f"snapclient: unknown command '{command}'\n", file=sys.stderr)
        _print_usage()
        sys.exit(1)

    module_path, _ = COMMANDS[command]

    # Import and call the sub-CLI's main(), passing remaining args
    from importlib import import_module

    module = import_module(module_path)
    module.main(sys.argv[2:])


if __name__ == "__main__":
    main()
