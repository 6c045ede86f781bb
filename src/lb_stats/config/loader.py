"""YAML based dashboard configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import DashboardConfig, PreferencesConfig, ServerConfig, SourceConfig

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = DashboardConfig()


def load_dashboard_config(config_path: Path | None) -> DashboardConfig:
    """Load dashboard.yaml. Defaults are returned when the file is missing or invalid."""
    if config_path is None:
        return _DEFAULT_CONFIG

    data = _safe_load_yaml(config_path)
    if data is None:
        return _DEFAULT_CONFIG

    try:
        source_raw: dict[str, Any] = data.get("source") or {}
        server_raw: dict[str, Any] = data.get("server") or {}
        prefs_raw: dict[str, Any] = data.get("preferences") or {}

        source = SourceConfig(
            base_url=_optional_str(source_raw.get("base_url", _DEFAULT_CONFIG.source.base_url)),
            stats_dir=_optional_path(source_raw.get("stats_dir")),
            timeout=_optional_float(source_raw.get("timeout")),
        )
        server = ServerConfig(
            host=str(server_raw.get("host", "127.0.0.1")),
            port=int(server_raw.get("port", 8080)),
        )
        preferences = PreferencesConfig(
            path=Path(str(prefs_raw.get("path", ".lb-stats-preferences.yaml"))),
            default_theme=str(prefs_raw.get("default_theme", "default")),
        )

        datasets_raw = data.get("datasets")
        datasets = (
            tuple(str(item) for item in datasets_raw)
            if datasets_raw
            else _DEFAULT_CONFIG.datasets
        )

        return DashboardConfig(
            source=source,
            server=server,
            preferences=preferences,
            datasets=datasets,
        )
    except (AttributeError, TypeError, ValueError):
        logger.warning("dashboard config parse failed, using defaults: %s", config_path)
        return _DEFAULT_CONFIG


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: Any) -> Path | None:
    text = _optional_str(value)
    return Path(text) if text else None


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def _safe_load_yaml(path: Path) -> dict[str, Any] | None:
    """Load a YAML mapping, or None when it cannot be read."""
    try:
        with open(path, encoding="utf-8") as f:
            result = yaml.safe_load(f)
        if isinstance(result, dict):
            return result
        return None
    except (OSError, yaml.YAMLError):
        logger.warning("YAML load failed: %s", path)
        return None
