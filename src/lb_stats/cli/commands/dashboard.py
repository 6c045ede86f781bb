"""dashboard command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from lb_stats.cli.context import add_dashboard_arguments, build_controller
from lb_stats.ui import render_dashboard_page


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("dashboard", help="Write a static dashboard page")
    parser.add_argument("--out", required=True)
    parser.add_argument("--dataset", required=False, help="Also render this dataset's table")
    add_dashboard_arguments(parser)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    controller, view = build_controller(args)
    try:
        slots = controller.start()
        if args.dataset:
            controller.show_table(args.dataset)
    finally:
        controller.close()

    page = render_dashboard_page(
        slots=slots,
        datasets=controller.datasets,
        theme=view.theme,
        table_view=view.table if args.dataset else None,
        active_dataset=args.dataset,
        error=view.error,
    )

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(page, encoding="utf-8")
    print(f"[OK] dashboard={out_path}")

    if view.error:
        print(f"[WARN] {view.error}")
        return 1
    return 0
