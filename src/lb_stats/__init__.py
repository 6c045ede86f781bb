"""Letterboxd export stats: summary metrics and a sortable, filterable table explorer."""

__version__ = "0.1.0"
