"""Table explorer module."""

from .render import NO_DATA_HTML, render_table_html
from .service import (
    NEUTRAL_INDICATOR,
    SORT_INDICATORS,
    TableExplorer,
    TableSurface,
    build_table_view,
    collation_key,
    detect_role_columns,
    filter_records,
    sort_records,
)

__all__ = [
    "NEUTRAL_INDICATOR",
    "NO_DATA_HTML",
    "SORT_INDICATORS",
    "TableExplorer",
    "TableSurface",
    "build_table_view",
    "collation_key",
    "detect_role_columns",
    "filter_records",
    "render_table_html",
    "sort_records",
]
