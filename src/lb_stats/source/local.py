"""Dataset access backed by a directory of exported CSV files."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
import re

from lb_stats.common import FetchError, FormatError, Record, UserInputError
from lb_stats.source.csv_parser import parse_csv

logger = logging.getLogger(__name__)

_DATASET_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def dataset_path(stats_dir: Path, dataset_id: str) -> Path:
    """Map a dataset identifier to ``<stats_dir>/<id>.csv``."""

    if not _DATASET_ID_PATTERN.match(dataset_id or ""):
        raise UserInputError(f"Invalid dataset type: {dataset_id!r}")
    return stats_dir / f"{dataset_id}.csv"


def read_csv_records(path: Path) -> list[Record]:
    """Read an export file with the csv module; quoted fields are allowed here."""

    try:
        with path.open(encoding="utf-8-sig", newline="") as file_obj:
            rows = list(csv.reader(file_obj))
    except UnicodeDecodeError as exc:
        raise FormatError(f"CSV read error in {path.name}: {exc}") from exc
    except csv.Error as exc:
        raise FormatError(f"CSV read error in {path.name}: {exc}") from exc

    rows = [row for row in rows if any(cell.strip() for cell in row)]
    if not rows:
        return []

    headers = [header.strip() for header in rows[0]]
    records: list[Record] = []
    for line_no, row in enumerate(rows[1:], start=2):
        if len(row) != len(headers):
            raise FormatError(
                f"CSV format mismatch in {path.name} row {line_no}: "
                f"expected {len(headers)} fields, got {len(row)}"
            )
        records.append({header: value.strip() for header, value in zip(headers, row)})
    return records


class DirectoryDataClient:
    """Reads datasets straight from the stats directory, no server needed."""

    def __init__(self, stats_dir: Path) -> None:
        self.stats_dir = stats_dir

    def fetch_dataset(self, dataset_id: str) -> list[Record]:
        try:
            path = dataset_path(self.stats_dir, dataset_id)
        except UserInputError as exc:
            raise FetchError(str(exc), status=400) from exc

        if not path.is_file():
            raise FetchError(f"Dataset file not found: {path}", status=404)

        try:
            records = read_csv_records(path)
        except OSError as exc:
            raise FetchError(f"Failed to read {path}: {exc}") from exc

        logger.debug("read dataset %s: %d records", dataset_id, len(records))
        return records

    def fetch_csv(self, path: str) -> list[Record]:
        """Read a static CSV file; ``path`` is relative to the stats directory."""

        root = self.stats_dir.resolve()
        file_path = (root / path.lstrip("/")).resolve()
        if not file_path.is_relative_to(root):
            raise FetchError(f"Failed to load {path}: outside {self.stats_dir}", status=400)
        try:
            text = file_path.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise FetchError(f"Failed to load {path}: {exc}") from exc
        return parse_csv(text)

    def close(self) -> None:
        pass
