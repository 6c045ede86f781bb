"""Shared wiring for CLI commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from lb_stats.config import DashboardConfig, load_dashboard_config
from lb_stats.controller import DashboardController
from lb_stats.source import DataClient, build_data_client
from lb_stats.ui import MemoryView, PreferenceStore


def add_dashboard_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--base-url", required=False, help="Data endpoint base URL")
    parser.add_argument("--stats-dir", required=False, help="Read CSV exports from this directory")
    parser.add_argument("--timeout", type=float, required=False, help="HTTP timeout in seconds")
    parser.add_argument("--prefs", required=False, help="Preferences YAML file")


def load_config(args: argparse.Namespace) -> DashboardConfig:
    config_path = getattr(args, "config", None)
    return load_dashboard_config(Path(config_path) if config_path else None)


def build_client(args: argparse.Namespace, config: DashboardConfig) -> DataClient:
    stats_dir = args.stats_dir or (str(config.source.stats_dir) if config.source.stats_dir else None)
    return build_data_client(
        base_url=args.base_url or config.source.base_url,
        stats_dir=stats_dir,
        timeout=args.timeout if args.timeout is not None else config.source.timeout,
    )


def build_preferences(config: DashboardConfig, prefs_path: str | None = None) -> PreferenceStore:
    return PreferenceStore(
        Path(prefs_path) if prefs_path else config.preferences.path,
        default_theme=config.preferences.default_theme,
    )


def build_controller(args: argparse.Namespace) -> tuple[DashboardController, MemoryView]:
    config = load_config(args)
    view = MemoryView()
    controller = DashboardController(
        client=build_client(args, config),
        view=view,
        preferences=build_preferences(config, getattr(args, "prefs", None)),
        datasets=config.datasets,
    )
    return controller, view
