"""CLI parser setup."""

from __future__ import annotations

import argparse

from lb_stats.cli.commands import COMMAND_MODULES


def build_parser() -> argparse.ArgumentParser:
    """Create the main ArgumentParser and register subcommands."""
    parser = argparse.ArgumentParser(prog="lb-stats")
    parser.add_argument("--config", required=False, help="dashboard.yaml path")
    parser.add_argument("--log-config", required=False, help="logging dictConfig YAML path")
    parser.add_argument("--log-level", required=False, help="DEBUG/INFO/WARNING/ERROR")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for module in COMMAND_MODULES:
        module.configure(subparsers)

    return parser
