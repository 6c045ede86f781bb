"""UI bindings: view contract, in-memory view, page rendering and preferences."""

from .page import render_dashboard_page
from .preferences import PreferenceStore
from .view import (
    ALL_COLUMNS_LABEL,
    SLOT_LABELS,
    VIEW_STATS,
    VIEW_TABLE,
    DashboardView,
    MemoryView,
)

__all__ = [
    "ALL_COLUMNS_LABEL",
    "SLOT_LABELS",
    "VIEW_STATS",
    "VIEW_TABLE",
    "DashboardView",
    "MemoryView",
    "PreferenceStore",
    "render_dashboard_page",
]
