"""stats command handler."""

from __future__ import annotations

import argparse

from lb_stats.cli.context import add_dashboard_arguments, build_controller


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("stats", help="Load every dataset and print the summary slots")
    add_dashboard_arguments(parser)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    controller, view = build_controller(args)
    try:
        slots = controller.start()
    finally:
        controller.close()

    if view.error:
        print(f"[ERROR] {view.error}")
        return 1

    for name, value in slots.as_dict().items():
        print(f"[OK] {name}={value if value is not None else ''}")
    return 0
