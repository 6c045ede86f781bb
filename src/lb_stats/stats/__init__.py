"""Stats aggregation module."""

from .service import (
    StatsAggregator,
    collect_ratings,
    format_average,
    format_top_tags,
    parse_rating,
    split_tags,
    top_tags,
    top_year,
)

__all__ = [
    "StatsAggregator",
    "collect_ratings",
    "format_average",
    "format_top_tags",
    "parse_rating",
    "split_tags",
    "top_tags",
    "top_year",
]
