"""Common models and exceptions."""

from .exceptions import (
    DashboardError,
    FetchError,
    FormatError,
    ParseError,
    UserInputError,
)
from .models import (
    COMMENTS,
    DATASET_IDS,
    RATINGS,
    REVIEWS,
    WATCHED,
    WATCHLIST,
    Cell,
    ColumnRoles,
    Dataset,
    FilterQuery,
    HeaderCell,
    Record,
    SortOrder,
    SortState,
    StatsSlots,
    TableView,
)

__all__ = [
    "COMMENTS",
    "DATASET_IDS",
    "RATINGS",
    "REVIEWS",
    "WATCHED",
    "WATCHLIST",
    "Cell",
    "ColumnRoles",
    "DashboardError",
    "Dataset",
    "FetchError",
    "FilterQuery",
    "FormatError",
    "HeaderCell",
    "ParseError",
    "Record",
    "SortOrder",
    "SortState",
    "StatsSlots",
    "TableView",
    "UserInputError",
]
