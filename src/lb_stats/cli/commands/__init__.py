"""CLI command modules."""

from __future__ import annotations

from types import ModuleType

from lb_stats.cli.commands import dashboard, serve, stats, table, theme

COMMAND_MODULES: list[ModuleType] = [serve, stats, table, dashboard, theme]

__all__ = ["COMMAND_MODULES"]
