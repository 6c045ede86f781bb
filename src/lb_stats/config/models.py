"""Dashboard configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lb_stats.common import DATASET_IDS


@dataclass(frozen=True)
class SourceConfig:
    """Where datasets are fetched from."""

    base_url: str | None = "http://127.0.0.1:8080"
    stats_dir: Path | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class ServerConfig:
    """Data endpoint server binding."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass(frozen=True)
class PreferencesConfig:
    """Persisted UI preference location."""

    path: Path = Path(".lb-stats-preferences.yaml")
    default_theme: str = "default"


@dataclass(frozen=True)
class DashboardConfig:
    """Full dashboard configuration (dashboard.yaml)."""

    source: SourceConfig = field(default_factory=SourceConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    preferences: PreferencesConfig = field(default_factory=PreferencesConfig)
    datasets: tuple[str, ...] = DATASET_IDS
