"""Custom exceptions for dashboard failures and command exit mapping."""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for failures surfaced to the dashboard user."""


class UserInputError(DashboardError):
    """Raised when user input or environment is invalid."""


class FetchError(DashboardError):
    """Raised on a non-2xx response or a transport failure."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class FormatError(DashboardError):
    """Raised when fetched data does not have the expected shape."""


class ParseError(DashboardError):
    """Raised when a cell value cannot be read as a number."""
