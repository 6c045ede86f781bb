"""Minimal CSV parser for static export files.

Splits on newlines and commas only. Quoted or escaped fields are not
supported: a comma inside a value changes the field count and the whole
file is rejected.
"""

from __future__ import annotations

from lb_stats.common import FormatError, Record


def parse_csv(text: str) -> list[Record]:
    """Parse CSV text into records keyed by the trimmed header names.

    Raises FormatError for an empty file or when any row's field count
    differs from the header's. No partial result is returned.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        raise FormatError("Empty CSV file")

    headers = [header.strip() for header in lines[0].split(",")]
    records: list[Record] = []
    for line_no, line in enumerate(lines[1:], start=2):
        values = [value.strip() for value in line.split(",")]
        if len(values) != len(headers):
            raise FormatError(
                f"CSV format mismatch on row {line_no}: "
                f"expected {len(headers)} fields, got {len(values)}"
            )
        records.append(dict(zip(headers, values)))
    return records
