# components/dashboard.py
"""
Coordinator: owns the feature collection, the statistic selector, the color
scale derived from them and the selection cell, and keeps registered views
in sync.

The color scale is a pure function of (collection, selector); it is replaced
wholesale when the selector changes and never otherwise.
"""
from __future__ import annotations
import logging
from typing import Any, Callable

from components.scales import ColorScale, build_diverging_scale, build_continuous_scale
from components.selection import SelectionState, InteractionEvent, resolve_basin, DEFAULT_BASIN
from components.stat_utils import (
    StatisticSelector, DEFAULT_SELECTOR, statistic_values, monthly_extent, features_of, basin_name,
)

logger = logging.getLogger(__name__)


def compute_scale(collection, selector: StatisticSelector, monthly_range: tuple[float, float] | None = None) -> ColorScale | None:
    """Color scale for the selected statistic, or None when there is no data."""
    if selector.is_monthly:
        rng = monthly_range if monthly_range is not None else monthly_extent(collection)
        if rng is None:
            return None
        return build_continuous_scale(*rng)
    return build_diverging_scale(statistic_values(collection, selector.key))


class BasinDashboard:
    def __init__(self, collection: dict | None, selector: StatisticSelector = DEFAULT_SELECTOR,
                 selection: SelectionState | None = None, default_basin: str = DEFAULT_BASIN):
        self.collection = collection or {"type": "FeatureCollection", "features": []}
        self.features = features_of(self.collection)
        self.default_basin = default_basin
        self.selection = selection if selection is not None else SelectionState()
        self.monthly_range = monthly_extent(self.collection)
        self.selector = selector
        self.scale = compute_scale(self.collection, selector, self.monthly_range)
        self._renderers: dict[str, Callable[["BasinDashboard"], Any]] = {}
        self._views: dict[str, Any] = {}
        self._unsubscribe = self.selection.subscribe(lambda _value: self.render())

    @property
    def has_data(self) -> bool:
        return bool(self.features)

    def set_selector(self, selector: StatisticSelector) -> bool:
        """Switch statistic/month. Returns False when nothing changed."""
        if (selector.statistic, selector.key) == (self.selector.statistic, self.selector.key):
            return False
        self.selector = selector
        self.scale = compute_scale(self.collection, selector, self.monthly_range)
        logger.debug("Selector -> %s (%r)", selector.key, self.scale)
        self.render()
        return True

    def handle(self, event: InteractionEvent) -> bool:
        return self.selection.handle(event)

    def resolved_feature(self) -> dict | None:
        return resolve_basin(self.features, self.selection.get(), self.default_basin)

    def highlighted_basin(self) -> str | None:
        ft = self.resolved_feature()
        return basin_name(ft) if ft else None

    def register_view(self, name: str, render: Callable[["BasinDashboard"], Any]) -> Any:
        self._renderers[name] = render
        self._views[name] = render(self)
        return self._views[name]

    def render(self) -> dict[str, Any]:
        for name, render in self._renderers.items():
            self._views[name] = render(self)
        return self.views

    @property
    def views(self) -> dict[str, Any]:
        return dict(self._views)

    def close(self) -> None:
        """Stop following the selection; views keep their last render."""
        self._unsubscribe()
