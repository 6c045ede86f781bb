"""Summary statistics over the five export datasets."""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed
from decimal import ROUND_HALF_UP, Decimal
import logging
import math
from typing import Mapping, Sequence

from lb_stats.common import (
    COMMENTS,
    DATASET_IDS,
    RATINGS,
    REVIEWS,
    WATCHED,
    WATCHLIST,
    FetchError,
    FormatError,
    ParseError,
    Record,
    StatsSlots,
)
from lb_stats.source import DataClient

logger = logging.getLogger(__name__)

TOP_TAGS_LIMIT = 3
NO_TAGS_LABEL = "None"


def parse_rating(value: str | None) -> float:
    """Read a rating cell as a finite float."""

    if value is None:
        raise ParseError("missing rating")
    try:
        number = float(str(value).strip())
    except ValueError as exc:
        raise ParseError(f"not a number: {value!r}") from exc
    if not math.isfinite(number):
        raise ParseError(f"not a finite number: {value!r}")
    return number


def collect_ratings(ratings: Sequence[Record], reviews: Sequence[Record]) -> list[float]:
    """Pool numeric ratings from the ratings list and from rated reviews."""

    raw_values = [record.get("Rating") for record in ratings]
    raw_values.extend(record.get("Rating") for record in reviews if record.get("Rating"))

    values: list[float] = []
    for raw in raw_values:
        try:
            values.append(parse_rating(raw))
        except ParseError as exc:
            logger.debug("skipping rating: %s", exc)
    return values


def top_year(watched: Sequence[Record]) -> tuple[str, int] | None:
    """Most frequent Year; ties go to the year seen first."""

    counts = Counter(record["Year"] for record in watched if record.get("Year"))
    if not counts:
        return None
    # max keeps the first of equal counts, and Counter keeps insertion order
    return max(counts.items(), key=lambda item: item[1])


def format_average(values: Sequence[float]) -> str:
    """Mean with one decimal, halves rounded up (2.25 -> "2.3")."""

    average = Decimal(repr(sum(values) / len(values)))
    return str(average.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def split_tags(value: str | None) -> list[str]:
    if not value:
        return []
    return [tag.strip() for tag in value.split(",") if tag.strip()]


def top_tags(reviews: Sequence[Record], limit: int = TOP_TAGS_LIMIT) -> list[tuple[str, int]]:
    counts: Counter[str] = Counter()
    for record in reviews:
        counts.update(split_tags(record.get("Tags")))
    return counts.most_common(limit)


def format_top_tags(tags: Sequence[tuple[str, int]]) -> str:
    if not tags:
        return NO_TAGS_LABEL
    return ", ".join(f"{tag} ({count})" for tag, count in tags)


class StatsAggregator:
    """Fetches every dataset once and fills the stats display slots."""

    def __init__(self, client: DataClient, datasets: Sequence[str] = DATASET_IDS) -> None:
        self._client = client
        self.datasets = tuple(datasets)
        self.slots = StatsSlots()

    def run(self) -> StatsSlots:
        return self.process(self.load_all())

    def load_all(self) -> dict[str, list[Record]]:
        """Fetch all datasets concurrently. A failed dataset comes back empty."""

        results: dict[str, list[Record]] = {}
        with ThreadPoolExecutor(max_workers=max(1, len(self.datasets))) as executor:
            futures = {
                executor.submit(self._fetch_or_empty, dataset_id): dataset_id
                for dataset_id in self.datasets
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()

        return {dataset_id: results[dataset_id] for dataset_id in self.datasets}

    def process(self, data: Mapping[str, Sequence[Record]]) -> StatsSlots:
        self.slots = StatsSlots()
        self.compute_watched_stats(data.get(WATCHED) or [])
        self.compute_watchlist_stats(data.get(WATCHLIST) or [])
        self.compute_rating_review_stats(data.get(RATINGS) or [], data.get(REVIEWS) or [])
        self.compute_comment_stats(data.get(COMMENTS) or [])
        return self.slots

    def compute_watched_stats(self, watched: Sequence[Record]) -> None:
        if not watched:
            return

        self.slots.total_watched = str(len(watched))
        best = top_year(watched)
        if best is not None:
            year, count = best
            self.slots.top_year = f"{year} ({count})"

    def compute_watchlist_stats(self, watchlist: Sequence[Record]) -> None:
        self.slots.watchlist_length = str(len(watchlist))

    def compute_rating_review_stats(
        self,
        ratings: Sequence[Record],
        reviews: Sequence[Record],
    ) -> None:
        values = collect_ratings(ratings, reviews)
        if values:
            self.slots.average_rating = format_average(values)

        self.slots.total_reviews = str(len(reviews))
        self.slots.top_tags = format_top_tags(top_tags(reviews))

    def compute_comment_stats(self, comments: Sequence[Record]) -> None:
        # no comment metric has a display slot yet
        logger.debug("comments loaded: %d", len(comments))

    def _fetch_or_empty(self, dataset_id: str) -> list[Record]:
        try:
            return self._client.fetch_dataset(dataset_id)
        except (FetchError, FormatError) as exc:
            logger.warning("Failed to load %s: %s", dataset_id, exc)
            return []
