"""Dataset sources: HTTP endpoint, local directory and the CSV parser."""

from __future__ import annotations

from pathlib import Path

from lb_stats.common import UserInputError

from .client import DataClient, HttpDataClient, coerce_records
from .csv_parser import parse_csv
from .local import DirectoryDataClient, dataset_path, read_csv_records

__all__ = [
    "DataClient",
    "DirectoryDataClient",
    "HttpDataClient",
    "build_data_client",
    "coerce_records",
    "dataset_path",
    "parse_csv",
    "read_csv_records",
]


def build_data_client(
    base_url: str | None = None,
    stats_dir: str | None = None,
    timeout: float | None = None,
) -> DataClient:
    """Return the local directory client when a stats dir is given, else the HTTP client."""
    if stats_dir:
        path = Path(stats_dir)
        if not path.is_dir():
            raise UserInputError(f"Stats directory not found: {path}")
        return DirectoryDataClient(path)
    if base_url:
        return HttpDataClient(base_url, timeout=timeout)
    raise UserInputError("Either a base URL or a stats directory is required.")
