"""theme command handler."""

from __future__ import annotations

import argparse

from lb_stats.cli.context import build_preferences, load_config


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("theme", help="Show or set the saved theme")
    parser.add_argument("name", nargs="?", help="Theme to save, e.g. dark")
    parser.add_argument("--prefs", required=False, help="Preferences YAML file")
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    preferences = build_preferences(load_config(args), args.prefs)
    if args.name:
        preferences.save_theme(args.name)
    print(f"[OK] theme={preferences.load_theme()}")
    return 0
