"""serve command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from lb_stats.cli.context import load_config
from lb_stats.common import UserInputError
from lb_stats.server import run_server


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("serve", help="Serve the CSV exports as /api/data JSON")
    parser.add_argument("--stats-dir", required=False)
    parser.add_argument("--host", required=False)
    parser.add_argument("--port", type=int, required=False)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    config = load_config(args)
    stats_dir = args.stats_dir or config.source.stats_dir
    if not stats_dir:
        raise UserInputError("--stats-dir is required (or source.stats_dir in the config).")

    run_server(
        stats_dir=Path(stats_dir),
        host=args.host or config.server.host,
        port=args.port if args.port is not None else config.server.port,
    )
    return 0
