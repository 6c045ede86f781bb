"""Dashboard controller module."""

from .service import DashboardController

__all__ = ["DashboardController"]
