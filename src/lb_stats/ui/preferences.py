"""Persisted UI preferences (theme)."""

from __future__ import annotations

import logging
from pathlib import Path
import re
from typing import Any

import yaml

from lb_stats.common import UserInputError

logger = logging.getLogger(__name__)

_THEME_KEY = "theme"
_THEME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class PreferenceStore:
    """Stores the theme identifier in a small YAML file."""

    def __init__(self, path: Path, default_theme: str = "default") -> None:
        self.path = path
        self.default_theme = default_theme

    def load_theme(self) -> str:
        data = self._read()
        theme = data.get(_THEME_KEY)
        if isinstance(theme, str) and _THEME_PATTERN.match(theme):
            return theme
        return self.default_theme

    def save_theme(self, theme: str) -> None:
        if not _THEME_PATTERN.match(theme or ""):
            raise UserInputError(f"Invalid theme name: {theme!r}")

        data = self._read()
        data[_THEME_KEY] = theme
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(yaml.safe_dump(data, sort_keys=True), encoding="utf-8")
        logger.debug("theme saved: %s", theme)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            result = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError):
            logger.warning("preferences unreadable, using defaults: %s", self.path)
            return {}
        return result if isinstance(result, dict) else {}
