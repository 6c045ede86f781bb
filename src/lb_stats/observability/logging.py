"""Logging setup."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(config_path: Path | None = None, level: str | None = None) -> None:
    """Initialise logging from a dictConfig YAML file, or basicConfig when it cannot be loaded."""
    if config_path is not None:
        try:
            with open(config_path, encoding="utf-8") as f:
                config: dict[str, Any] = yaml.safe_load(f)
            logging.config.dictConfig(config)
            if level:
                logging.getLogger().setLevel(level.upper())
            return
        except (OSError, ValueError, TypeError, yaml.YAMLError):
            _basic_config(level)
            logging.getLogger(__name__).warning(
                "logging config could not be applied, using defaults: %s", config_path
            )
            return

    _basic_config(level)


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger."""
    return logging.getLogger(name)


def _basic_config(level: str | None) -> None:
    logging.basicConfig(
        level=(level or "INFO").upper(),
        format=_DEFAULT_FORMAT,
    )
