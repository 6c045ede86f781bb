"""Data client contracts and the HTTP implementation."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from lb_stats.common import FetchError, FormatError, Record
from lb_stats.source.csv_parser import parse_csv

logger = logging.getLogger(__name__)

_USER_AGENT = "lb-stats/0.1"


class DataClient(Protocol):
    """Fetches one dataset as a list of records."""

    def fetch_dataset(self, dataset_id: str) -> list[Record]:
        ...

    def fetch_csv(self, path: str) -> list[Record]:
        ...

    def close(self) -> None:
        ...


class HttpDataClient:
    """Talks to the ``/api/data`` endpoint and serves static CSV files by path.

    ``timeout`` defaults to None, leaving requests' own behaviour in place.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": _USER_AGENT, "Accept": "application/json"})

    def fetch_dataset(self, dataset_id: str) -> list[Record]:
        response = self._get(f"{self.base_url}/api/data", params={"type": dataset_id})
        try:
            payload = response.json()
        except ValueError as exc:
            raise FormatError(f"Invalid JSON for {dataset_id}: {exc}") from exc

        records = coerce_records(payload, dataset_id)
        logger.debug("fetched dataset %s: %d records", dataset_id, len(records))
        return records

    def fetch_text(self, path: str) -> str:
        url = path if path.startswith(("http://", "https://")) else f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self._get(url)
        except FetchError as exc:
            raise FetchError(f"Failed to load {path}: {exc}", status=exc.status) from exc
        return response.text

    def fetch_csv(self, path: str) -> list[Record]:
        return parse_csv(self.fetch_text(path))

    def close(self) -> None:
        self._session.close()

    def _get(self, url: str, params: dict[str, str] | None = None) -> requests.Response:
        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Request failed: {exc}") from exc

        if not response.ok:
            raise FetchError(f"HTTP error {response.status_code}", status=response.status_code)
        return response


def coerce_records(payload: Any, dataset_id: str) -> list[Record]:
    """Validate a decoded JSON body as a list of string-valued records.

    A JSON ``null`` body is an empty dataset; the endpoint sends it for
    export files that only have a header row.
    """

    if payload is None:
        return []
    if not isinstance(payload, list):
        raise FormatError(f"Expected a JSON array for {dataset_id}, got {type(payload).__name__}")

    records: list[Record] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise FormatError(f"Record {index} of {dataset_id} is not an object")
        records.append(
            {str(key): "" if value is None else str(value) for key, value in item.items()}
        )
    return records
