"""Top-level dashboard controller wiring navigation to the stats and table views."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from lb_stats.common import DATASET_IDS, DashboardError, StatsSlots
from lb_stats.explorer import TableExplorer
from lb_stats.source import DataClient
from lb_stats.stats import StatsAggregator
from lb_stats.ui import VIEW_STATS, VIEW_TABLE, DashboardView, PreferenceStore

logger = logging.getLogger(__name__)


class DashboardController:
    """Owns one StatsAggregator and one TableExplorer over a shared client.

    All collaborators are injected; nothing is created at import time.
    """

    def __init__(
        self,
        client: DataClient,
        view: DashboardView,
        preferences: PreferenceStore | None = None,
        datasets: Sequence[str] = DATASET_IDS,
    ) -> None:
        self.client = client
        self.view = view
        self.preferences = preferences
        self.datasets = tuple(datasets)
        self.aggregator = StatsAggregator(client, datasets=self.datasets)
        self.explorer = TableExplorer(client, surface=view)
        self.current_view = VIEW_STATS

    def start(self) -> StatsSlots:
        """Apply the saved theme, then run the one-time stats aggregation."""

        if self.preferences is not None:
            self.view.apply_theme(self.preferences.load_theme())

        self.view.show_loading()
        try:
            slots = self.aggregator.run()
            self.view.set_slots(slots)
            self.switch_view(VIEW_STATS)
        except DashboardError as exc:
            logger.error("stats aggregation failed: %s", exc)
            self.view.show_error(str(exc))
        finally:
            self.view.hide_loading()
        return self.aggregator.slots

    def switch_view(self, view_name: str) -> None:
        self.current_view = view_name
        self.view.switch_view(view_name)

    def show_stats(self) -> None:
        self.switch_view(VIEW_STATS)

    def show_table(self, dataset_id: str) -> bool:
        """Navigate to a dataset table. Failures end up in the error banner."""

        self.switch_view(VIEW_TABLE)
        return self._load(lambda: self.explorer.load(dataset_id), dataset_id)

    def show_csv(self, path: str) -> bool:
        self.switch_view(VIEW_TABLE)
        return self._load(lambda: self.explorer.load_csv(path), path)

    def close(self) -> None:
        self.client.close()

    def set_theme(self, theme: str) -> None:
        if self.preferences is not None:
            self.preferences.save_theme(theme)
        self.view.apply_theme(theme)

    def _load(self, action: Callable[[], bool], label: str) -> bool:
        self.view.hide_error()
        self.view.show_loading()
        try:
            return action()
        except DashboardError as exc:
            logger.error("failed to load %s: %s", label, exc)
            self.view.show_error(str(exc))
            return False
        finally:
            self.view.hide_loading()
