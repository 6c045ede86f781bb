"""View contracts and the in-process presentation binding."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

from lb_stats.common import StatsSlots, TableView
from lb_stats.explorer import render_table_html

Handler = Callable[[str], object]

VIEW_STATS = "stats"
VIEW_TABLE = "table"

ALL_COLUMNS_LABEL = "All Columns"

SLOT_LABELS = {
    "total_watched": "Total watched",
    "top_year": "Top year",
    "watchlist_length": "Watchlist",
    "average_rating": "Average rating",
    "total_reviews": "Reviews",
    "top_tags": "Top tags",
}


class DashboardView(Protocol):
    """Everything the controller and the explorer need from the UI."""

    def show_table(self, view: TableView) -> None:
        ...

    def set_filter_columns(self, columns: Sequence[str]) -> None:
        ...

    def on_search(self, handler: Handler) -> None:
        ...

    def on_scope_change(self, handler: Handler) -> None:
        ...

    def on_sort(self, handler: Handler) -> None:
        ...

    def set_slots(self, slots: StatsSlots) -> None:
        ...

    def switch_view(self, view_name: str) -> None:
        ...

    def show_error(self, message: str) -> None:
        ...

    def hide_error(self) -> None:
        ...

    def show_loading(self) -> None:
        ...

    def hide_loading(self) -> None:
        ...

    def apply_theme(self, theme: str) -> None:
        ...


class MemoryView:
    """Keeps the rendered UI state in attributes.

    Used by the CLI and tests. ``type_search``, ``select_scope`` and
    ``click_header`` play the part of user input and fire the bound
    handlers.
    """

    def __init__(self) -> None:
        self.slots: dict[str, str] = {}
        self.current_view = VIEW_STATS
        self.table: TableView | None = None
        self.table_html = ""
        self.filter_options: list[tuple[str, str]] = [("", ALL_COLUMNS_LABEL)]
        self.scope_column = ""
        self.search_text = ""
        self.error: str | None = None
        self.loading = False
        self.theme = "default"
        self._search_handlers: list[Handler] = []
        self._scope_handlers: list[Handler] = []
        self._sort_handlers: list[Handler] = []

    # table surface

    def show_table(self, view: TableView) -> None:
        self.table = view
        self.table_html = render_table_html(view)

    def set_filter_columns(self, columns: Sequence[str]) -> None:
        self.filter_options = [("", ALL_COLUMNS_LABEL)]
        self.filter_options.extend((column, column) for column in columns)
        self.scope_column = ""
        self.search_text = ""

    def on_search(self, handler: Handler) -> None:
        _register(self._search_handlers, handler)

    def on_scope_change(self, handler: Handler) -> None:
        _register(self._scope_handlers, handler)

    def on_sort(self, handler: Handler) -> None:
        _register(self._sort_handlers, handler)

    @property
    def listener_count(self) -> int:
        return len(self._search_handlers) + len(self._scope_handlers) + len(self._sort_handlers)

    # simulated input

    def type_search(self, text: str) -> None:
        self.search_text = text
        for handler in list(self._search_handlers):
            handler(text)

    def select_scope(self, column: str) -> None:
        self.scope_column = column
        for handler in list(self._scope_handlers):
            handler(column)

    def click_header(self, column: str) -> None:
        for handler in list(self._sort_handlers):
            handler(column)

    # shell

    def set_slots(self, slots: StatsSlots) -> None:
        for name, value in slots.as_dict().items():
            if value is not None:
                self.slots[name] = value

    def switch_view(self, view_name: str) -> None:
        self.current_view = view_name
        if view_name == VIEW_STATS:
            self.hide_error()

    def show_error(self, message: str) -> None:
        self.error = f"Error: {message}"

    def hide_error(self) -> None:
        self.error = None

    def show_loading(self) -> None:
        self.loading = True

    def hide_loading(self) -> None:
        self.loading = False

    def apply_theme(self, theme: str) -> None:
        self.theme = theme


def _register(handlers: list[Handler], handler: Handler) -> None:
    if handler not in handlers:
        handlers.append(handler)
