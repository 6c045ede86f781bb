from __future__ import annotations

from pathlib import Path
import shutil
from typing import Any

import pytest

from lb_stats.common import FetchError, Record
from lb_stats.source import parse_csv

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


class FakeDataClient:
    """In-memory data client; ``failures`` maps a dataset id to the exception to raise."""

    def __init__(
        self,
        datasets: dict[str, list[Record]] | None = None,
        failures: dict[str, Exception] | None = None,
        csv_files: dict[str, str] | None = None,
    ) -> None:
        self.datasets = datasets or {}
        self.failures = failures or {}
        self.csv_files = csv_files or {}
        self.calls: list[str] = []
        self.closed = False

    def fetch_dataset(self, dataset_id: str) -> list[Record]:
        self.calls.append(dataset_id)
        if dataset_id in self.failures:
            raise self.failures[dataset_id]
        if dataset_id not in self.datasets:
            raise FetchError("HTTP error 404", status=404)
        return [dict(record) for record in self.datasets[dataset_id]]

    def fetch_csv(self, path: str) -> list[Record]:
        self.calls.append(path)
        if path not in self.csv_files:
            raise FetchError(f"Failed to load {path}: HTTP error 404", status=404)
        return parse_csv(self.csv_files[path])

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client_class() -> type[FakeDataClient]:
    return FakeDataClient


@pytest.fixture
def stats_dir(tmp_path: Path) -> Path:
    target = tmp_path / "stats"
    shutil.copytree(FIXTURES_DIR / "stats", target)
    return target


@pytest.fixture
def watched_records() -> list[dict[str, Any]]:
    return [
        {"Date": "2023-01-05", "Name": "Aftersun", "Year": "2022", "Letterboxd URI": "https://boxd.it/ynSO"},
        {"Date": "2023-01-02", "Name": "parasite", "Year": "2019", "Letterboxd URI": "https://boxd.it/hTha"},
        {"Date": "2023-03-01", "Name": "Past Lives", "Year": "2023", "Letterboxd URI": ""},
    ]
