# components/selection.py
"""
The one shared mutable cell of the dashboard: the currently selected basin.

Writers: pointer-enter on a map polygon or a treemap leaf (set), pointer-leave
on a map polygon (clear). Readers: the bar chart and the map outline.
Last writer wins; subscribers are notified synchronously on every write.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Callable

from components.stat_utils import basin_name

logger = logging.getLogger(__name__)

DEFAULT_BASIN = "AMUR"

# (source, kind) -> whether the event sets or clears the selection
_WRITE_RULES = {
    ("map", "enter"):     "set",
    ("treemap", "enter"): "set",
    ("map", "leave"):     "clear",
}


@dataclass(frozen=True)
class InteractionEvent:
    source: str              # "map" | "treemap"
    kind: str                # "enter" | "leave"
    basin: str | None = None


class SelectionState:
    def __init__(self, value: str | None = None):
        self._value = value or None
        self._subscribers: list[Callable[[str | None], None]] = []

    def get(self) -> str | None:
        return self._value

    def set(self, name: str | None) -> None:
        self._value = name or None
        for cb in list(self._subscribers):
            cb(self._value)

    def clear(self) -> None:
        self.set(None)

    def subscribe(self, callback: Callable[[str | None], None]) -> Callable[[], None]:
        """Register `callback(value)`; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def _unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)
        return _unsubscribe

    def handle(self, event: InteractionEvent) -> bool:
        """Apply a pointer event. Returns True when it wrote the cell."""
        action = _WRITE_RULES.get((event.source, event.kind))
        if action == "set" and event.basin:
            self.set(event.basin)
            return True
        if action == "clear":
            self.clear()
            return True
        logger.debug("Ignoring interaction %s", event)
        return False


def resolve_basin(features, name: str | None, default: str | None = DEFAULT_BASIN) -> dict | None:
    """Feature for `name`, falling back to the default basin when it does not resolve.

    No selection at all resolves to None.
    """
    if not name:
        return None
    by_name = {}
    for ft in features or []:
        n = basin_name(ft)
        if n is not None and n not in by_name:
            by_name[n] = ft
    if name in by_name:
        return by_name[name]
    if default is not None and default in by_name:
        logger.debug("Basin %r not in collection; falling back to %r", name, default)
        return by_name[default]
    return None


def hover_basin(hover_data: dict | None) -> str | None:
    """Basin name from a Dash hoverData payload (choropleth or treemap)."""
    if not hover_data:
        return None
    points = hover_data.get("points") or []
    if not points:
        return None
    pt = points[0]
    cd = pt.get("customdata")
    if isinstance(cd, (list, tuple)) and cd and isinstance(cd[0], str):
        return cd[0] or None
    if isinstance(cd, str) and cd:
        return cd
    for key in ("location", "id"):
        v = pt.get(key)
        if isinstance(v, str) and v:
            return v
    return None


def event_from_hover(source: str, hover_data: dict | None) -> InteractionEvent:
    basin = hover_basin(hover_data)
    return InteractionEvent(source, "enter" if basin else "leave", basin)
