"""table command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from lb_stats.cli.context import add_dashboard_arguments, build_controller
from lb_stats.common import TableView, UserInputError


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("table", help="Show one dataset as a filtered, sorted table")
    parser.add_argument("dataset", nargs="?", help="Dataset type, e.g. watched or reviews")
    parser.add_argument("--csv", required=False, help="Load a static CSV file by path instead")
    parser.add_argument("--search", default="", help="Case-insensitive search term")
    parser.add_argument("--column", default="", help="Restrict the search to one column")
    parser.add_argument(
        "--sort",
        action="append",
        default=[],
        help="Click a column header; repeat the same column to toggle the order",
    )
    parser.add_argument("--out", required=False, help="Write the table HTML to this file")
    add_dashboard_arguments(parser)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    if not args.dataset and not args.csv:
        raise UserInputError("A dataset type or --csv path is required.")

    controller, view = build_controller(args)
    try:
        loaded = controller.show_csv(args.csv) if args.csv else controller.show_table(args.dataset)
    finally:
        controller.close()
    if not loaded:
        print(f"[ERROR] {view.error}")
        return 1

    # sorting reorders the loaded data in place, so filters applied after it keep the order
    for column in args.sort:
        view.click_header(column)
    if args.column:
        view.select_scope(args.column)
    if args.search:
        view.type_search(args.search)

    table = view.table
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(view.table_html, encoding="utf-8")
        print(f"[OK] rows={len(table.rows) if table else 0}")
        print(f"[OK] table={out_path}")
        return 0

    for line in format_table_text(table):
        print(line)
    return 0


def format_table_text(table: TableView | None) -> list[str]:
    if table is None or table.is_empty:
        return ["No data available"]

    lines = ["\t".join(f"{header.name} {header.indicator}" for header in table.headers)]
    lines.extend("\t".join(cell.text for cell in row) for row in table.rows)
    return lines
