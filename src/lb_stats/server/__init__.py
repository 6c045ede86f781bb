"""Data endpoint server module."""

from .service import build_server, run_server

__all__ = ["build_server", "run_server"]
