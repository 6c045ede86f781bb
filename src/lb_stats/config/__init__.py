"""Dashboard configuration module."""

from .loader import load_dashboard_config
from .models import DashboardConfig, PreferencesConfig, ServerConfig, SourceConfig

__all__ = [
    "DashboardConfig",
    "PreferencesConfig",
    "ServerConfig",
    "SourceConfig",
    "load_dashboard_config",
]
