"""Tabular data explorer: filter, sort and view-model building for one dataset."""

from __future__ import annotations

from dataclasses import replace
from functools import lru_cache
import locale
import logging
import re
from typing import Callable, Protocol, Sequence
import unicodedata

from lb_stats.common import (
    Cell,
    ColumnRoles,
    Dataset,
    FilterQuery,
    HeaderCell,
    Record,
    SortState,
    TableView,
    UserInputError,
)
from lb_stats.source import DataClient

logger = logging.getLogger(__name__)

SORT_INDICATORS = {"asc": "↑", "desc": "↓"}
NEUTRAL_INDICATOR = "↕"

_LINK_COLUMN_PATTERN = re.compile(r"uri|url|link|movie[-_]?link")
_TITLE_COLUMN_PATTERN = re.compile(r"name|title|film|movie")


class TableSurface(Protocol):
    """Presentation binding the explorer renders into."""

    def show_table(self, view: TableView) -> None:
        ...

    def set_filter_columns(self, columns: Sequence[str]) -> None:
        ...

    def on_search(self, handler: Callable[[str], object]) -> None:
        ...

    def on_scope_change(self, handler: Callable[[str], object]) -> None:
        ...

    def on_sort(self, handler: Callable[[str], object]) -> None:
        ...


def detect_role_columns(columns: Sequence[str]) -> ColumnRoles:
    """Guess the link and title columns from column names.

    Heuristic: the link column is the first name containing uri/url/link,
    the title column the first containing name/title/film/movie (both
    compared lower-cased). Each role is resolved independently, so one
    column may fill both.
    """

    return _detect_role_columns(tuple(columns))


@lru_cache(maxsize=64)
def _detect_role_columns(columns: tuple[str, ...]) -> ColumnRoles:
    link_column = next(
        (column for column in columns if _LINK_COLUMN_PATTERN.search(column.lower())),
        None,
    )
    title_column = next(
        (column for column in columns if _TITLE_COLUMN_PATTERN.search(column.lower())),
        None,
    )
    return ColumnRoles(link_column=link_column, title_column=title_column)


def cell_text(record: Record, column: str) -> str:
    value = record.get(column)
    return "" if value is None else str(value)


def build_table_view(records: Sequence[Record], sort_state: SortState) -> TableView:
    """Build the header and row cells for ``records``. Deterministic in its inputs."""

    if not records:
        return TableView(headers=(), rows=())

    columns = list(records[0].keys())
    headers = tuple(
        HeaderCell(
            name=column,
            indicator=_sort_indicator(column, sort_state),
            active=column == sort_state.column,
        )
        for column in columns
    )

    rows: list[tuple[Cell, ...]] = []
    for record in records:
        roles = detect_role_columns(tuple(record.keys()))
        link = cell_text(record, roles.link_column) if roles.link_column else ""
        rows.append(
            tuple(
                Cell(
                    text=cell_text(record, column),
                    href=link if column == roles.title_column and link else None,
                )
                for column in columns
            )
        )

    return TableView(headers=headers, rows=tuple(rows))


def _sort_indicator(column: str, sort_state: SortState) -> str:
    if sort_state.column and column == sort_state.column:
        return SORT_INDICATORS[sort_state.order]
    return NEUTRAL_INDICATOR


def record_matches(record: Record, query: FilterQuery) -> bool:
    if not query.search_term:
        return True

    needle = query.search_term.lower()
    if query.scope_column:
        return needle in cell_text(record, query.scope_column).lower()
    return any(needle in cell_text(record, column).lower() for column in record)


def filter_records(records: Sequence[Record], query: FilterQuery) -> list[Record]:
    return [record for record in records if record_matches(record, query)]


def collation_key(value: str) -> tuple[str, str]:
    """Locale-aware sort key: accent and case folded first, raw value to break ties."""

    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(char for char in decomposed if not unicodedata.combining(char)).casefold()
    return locale.strxfrm(base), locale.strxfrm(value)


def sort_records(records: list[Record], sort_state: SortState) -> None:
    """Sort ``records`` in place as strings.

    Numeric-looking columns (Year, Rating) are compared as text too, so
    "10" sorts before "9".
    """

    if not sort_state.column:
        return
    records.sort(
        key=lambda record: collation_key(cell_text(record, sort_state.column)),
        reverse=sort_state.order == "desc",
    )


class TableExplorer:
    """Holds one dataset and re-renders it after every load, filter or sort."""

    def __init__(self, client: DataClient, surface: TableSurface | None = None) -> None:
        self._client = client
        self._surface = surface
        self._generation = 0

        self.dataset = Dataset("")
        self.sort_state = SortState()
        self.query = FilterQuery()
        self.last_view = build_table_view([], self.sort_state)

        if surface is not None:
            surface.on_search(self.filter)
            surface.on_scope_change(self.set_scope_column)
            surface.on_sort(self.sort)

    @property
    def current_data(self) -> list[Record]:
        return self.dataset.records

    @property
    def current_dataset(self) -> str:
        return self.dataset.dataset_id

    @property
    def columns(self) -> list[str]:
        return list(self.dataset.columns)

    def load(self, dataset_id: str) -> bool:
        """Fetch and display a dataset. Returns False if a newer load superseded this one."""

        token = self._next_generation()
        records = self._client.fetch_dataset(dataset_id)
        return self._accept(token, dataset_id, records)

    def load_csv(self, path: str) -> bool:
        token = self._next_generation()
        records = self._client.fetch_csv(path)
        return self._accept(token, path, records)

    def render(self, records: Sequence[Record]) -> TableView:
        view = build_table_view(records, self.sort_state)
        self.last_view = view
        if self._surface is not None:
            self._surface.show_table(view)
        return view

    def filter(self, search_term: str) -> list[Record]:
        self.query = replace(self.query, search_term=search_term or "")
        filtered = filter_records(self.current_data, self.query)
        logger.debug(
            "filter %r scope=%r: %d/%d records",
            self.query.search_term,
            self.query.scope_column,
            len(filtered),
            len(self.current_data),
        )
        self.render(filtered)
        return filtered

    def set_scope_column(self, column: str) -> list[Record]:
        column = column or ""
        if column and column not in self.columns:
            raise UserInputError(f"Unknown column: {column}")
        self.query = replace(self.query, scope_column=column)
        return self.filter(self.query.search_term)

    def sort(self, column: str) -> SortState:
        if column not in self.columns:
            raise UserInputError(f"Unknown column: {column}")
        self.sort_state = self.sort_state.toggled(column)
        sort_records(self.current_data, self.sort_state)
        logger.debug("sorted %s by %s %s", self.current_dataset, column, self.sort_state.order)
        self.render(self.current_data)
        return self.sort_state

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _accept(self, token: int, dataset_id: str, records: list[Record]) -> bool:
        if token != self._generation:
            logger.debug("discarding stale load of %s", dataset_id)
            return False

        self.dataset = Dataset(dataset_id, records)
        self.sort_state = SortState()
        self.query = FilterQuery()
        logger.debug("loaded %s: %d records", dataset_id, len(records))

        if self._surface is not None:
            self._surface.set_filter_columns(self.columns)
        self.render(self.current_data)
        return True
