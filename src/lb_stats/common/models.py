"""Shared data models for the stats dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Literal

Record = dict[str, str]
SortOrder = Literal["asc", "desc"]

WATCHED = "watched"
WATCHLIST = "watchlist"
REVIEWS = "reviews"
RATINGS = "ratings"
COMMENTS = "comments"

DATASET_IDS: tuple[str, ...] = (WATCHED, WATCHLIST, REVIEWS, RATINGS, COMMENTS)


@dataclass
class Dataset:
    dataset_id: str
    records: list[Record] = field(default_factory=list)

    @property
    def columns(self) -> tuple[str, ...]:
        if not self.records:
            return ()
        return tuple(self.records[0].keys())

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class SortState:
    column: str = ""
    order: SortOrder = "asc"

    def toggled(self, column: str) -> SortState:
        if column == self.column:
            return SortState(column=column, order="desc" if self.order == "asc" else "asc")
        return SortState(column=column, order="asc")


@dataclass(frozen=True)
class FilterQuery:
    search_term: str = ""
    scope_column: str = ""


@dataclass(frozen=True)
class ColumnRoles:
    link_column: str | None = None
    title_column: str | None = None


@dataclass(frozen=True)
class HeaderCell:
    name: str
    indicator: str
    active: bool


@dataclass(frozen=True)
class Cell:
    text: str
    href: str | None = None


@dataclass(frozen=True)
class TableView:
    headers: tuple[HeaderCell, ...]
    rows: tuple[tuple[Cell, ...], ...]

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass
class StatsSlots:
    """Display slots for the stats view. ``None`` means the slot is unset."""

    total_watched: str | None = None
    top_year: str | None = None
    watchlist_length: str | None = None
    average_rating: str | None = None
    total_reviews: str | None = None
    top_tags: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        return {item.name: getattr(self, item.name) for item in fields(self)}
