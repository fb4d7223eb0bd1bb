# components/scales.py
"""
Value -> color scales for the basin map.

- build_diverging_scale(values, ...)   -> min / cutoff / max, blue-yellow-red
- build_continuous_scale(vmin, vmax)   -> fixed two-stop light-to-dark red
- compute_cutoff(values, ...)          -> percentile | mean | fixed midpoint

Scales interpolate linearly per RGB channel between stops, clamp outside the
domain and never raise on a numeric input.
"""
from __future__ import annotations
import bisect
import logging
import math
import numpy as np
from plotly.colors import hex_to_rgb, find_intermediate_color

from components.colors import (
    DIVERGING_COLORS, DIVERGING_MID, CONTINUOUS_COLORS, NO_DATA_COLOR,
)

logger = logging.getLogger(__name__)

CUTOFF_TYPES = ("percentile", "mean", "fixed")
DEFAULT_CUTOFF_TYPE = "percentile"
DEFAULT_CUTOFF_VALUE = 0.3  # 30th percentile (not the median)


def _to_hex(rgb) -> str:
    # Math.round semantics so .5 always rounds up
    r, g, b = (min(255, max(0, int(math.floor(c + 0.5)))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


class ColorScale:
    """Piecewise-linear color mapping over sorted breakpoints.

    `flat_color` is returned for every input when the domain has zero width.
    """

    def __init__(self, domain, colors, mode: str, flat_color: str | None = None):
        if len(domain) != len(colors) or len(domain) < 2:
            raise ValueError("domain and colors must have the same length (>= 2)")
        self.domain = [float(d) for d in domain]
        self.colors = [c.lower() for c in colors]
        self.mode = mode
        self._rgb = [hex_to_rgb(c) for c in self.colors]
        if flat_color is None:
            flat_color = _to_hex(find_intermediate_color(self._rgb[0], self._rgb[-1], 0.5, colortype="tuple"))
        self.flat_color = flat_color.lower()

    @property
    def breakpoints(self) -> list[float]:
        return list(self.domain)

    @property
    def is_flat(self) -> bool:
        return self.domain[-1] <= self.domain[0]

    def __call__(self, value) -> str:
        try:
            x = float(value)
        except (TypeError, ValueError):
            return NO_DATA_COLOR
        if math.isnan(x):
            return NO_DATA_COLOR
        if self.is_flat:
            return self.flat_color
        d = self.domain
        if x <= d[0] and d[0] < d[1]:
            return self.colors[0]
        if x >= d[-1]:
            return self.colors[-1]
        # a zero-width first segment collapses onto the color at d[1]
        x = max(x, d[0])
        i = bisect.bisect_right(d, x, 1, len(d) - 1) - 1
        t = (x - d[i]) / (d[i + 1] - d[i])
        return _to_hex(find_intermediate_color(self._rgb[i], self._rgb[i + 1], t, colortype="tuple"))

    def to_plotly_colorscale(self) -> list[list]:
        """[[position, color], ...] normalised to 0..1 for colorbars."""
        if self.is_flat:
            return [[0.0, self.flat_color], [1.0, self.flat_color]]
        lo, hi = self.domain[0], self.domain[-1]
        return [[(d - lo) / (hi - lo), c] for d, c in zip(self.domain, self.colors)]

    def __repr__(self) -> str:
        return f"ColorScale(mode={self.mode!r}, breakpoints={self.breakpoints})"


def compute_cutoff(values, cutoff_type: str = DEFAULT_CUTOFF_TYPE, cutoff_value: float = DEFAULT_CUTOFF_VALUE) -> float | None:
    """Midpoint separating 'low' from 'high' colors. None when there are no values."""
    if cutoff_type not in CUTOFF_TYPES:
        raise ValueError(f'Invalid cutoff_type {cutoff_type!r}. Use "percentile", "mean", or "fixed".')
    if cutoff_type == "fixed":
        return float(cutoff_value)
    arr = np.sort(np.asarray(values, dtype=float))
    if arr.size == 0:
        return None
    if cutoff_type == "percentile":
        idx = int(np.floor(arr.size * float(cutoff_value)))
        idx = min(max(idx, 0), arr.size - 1)
        return float(arr[idx])
    return float(np.mean(arr))


def build_diverging_scale(values, cutoff_type: str = DEFAULT_CUTOFF_TYPE, cutoff_value: float = DEFAULT_CUTOFF_VALUE) -> ColorScale | None:
    """Three-stop scale min -> cutoff -> max over the observed values.

    Returns None when there is nothing to scale. An unknown cutoff type is a
    caller error and raises even then.
    """
    cutoff = compute_cutoff(values, cutoff_type, cutoff_value)
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return None
    vmin, vmax = float(arr.min()), float(arr.max())
    # a fixed cutoff may sit outside the data; keep the stops ordered
    if cutoff < vmin or cutoff > vmax:
        logger.warning("Cutoff %s outside data range [%s, %s]; clamping", cutoff, vmin, vmax)
        cutoff = min(max(cutoff, vmin), vmax)
    scale = ColorScale([vmin, cutoff, vmax], DIVERGING_COLORS, mode="diverging", flat_color=DIVERGING_MID)
    logger.debug("Built %r", scale)
    return scale


def build_continuous_scale(vmin: float, vmax: float) -> ColorScale:
    """Two-stop scale over a fixed global range (stable while scrubbing months)."""
    lo, hi = sorted((float(vmin), float(vmax)))
    return ColorScale([lo, hi], CONTINUOUS_COLORS, mode="continuous")
