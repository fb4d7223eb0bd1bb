# components/stat_utils.py
"""
Pull numeric statistics out of basin features.

Two rules for missing values:
- scale building *excludes* them (the domain only reflects real observations)
- chart series *substitute* 0 (a basin always shows 12 bars)
"""
from __future__ import annotations
from dataclasses import dataclass
import numpy as np
import pandas as pd

BASIN_KEY = "RIVERBASIN"
CONTINENT_KEY = "CONTINENT"

MONTHS = ["jan", "feb", "mar", "apr", "may", "jun",
          "jul", "aug", "sep", "oct", "nov", "dec"]
MONTH_LABELS = [m.capitalize() for m in MONTHS]

# statistic -> label shown in the dropdown
STATISTICS = {
    "population": "Population",
    "average":    "Average Scarcity",
    "monthly":    "Monthly Data",
}
NUMERIC_KEYS = ["population", "average", *MONTHS]


@dataclass(frozen=True)
class StatisticSelector:
    """Which statistic colors the map; `month` only matters for 'monthly'."""
    statistic: str = "population"
    month: int = 0

    def __post_init__(self):
        if self.statistic not in STATISTICS:
            raise ValueError(f"Unknown statistic {self.statistic!r}. Use one of {sorted(STATISTICS)}.")
        try:
            month = int(self.month)
        except (TypeError, ValueError):
            raise ValueError(f"Month index must be an integer, got {self.month!r}") from None
        if not 0 <= month <= 11:
            raise ValueError(f"Month index must be in 0..11, got {self.month!r}")

    @property
    def is_monthly(self) -> bool:
        return self.statistic == "monthly"

    @property
    def key(self) -> str:
        """Feature property that holds the displayed value."""
        return MONTHS[int(self.month)] if self.is_monthly else self.statistic


DEFAULT_SELECTOR = StatisticSelector("population")


def features_of(data) -> list[dict]:
    if data is None:
        return []
    if isinstance(data, dict):
        return list(data.get("features") or [])
    return list(data)


def _as_number(v) -> float | None:
    if v is None or isinstance(v, bool):
        return None
    try:
        x = float(v)
    except (TypeError, ValueError):
        return None
    return x if np.isfinite(x) else None


def basin_name(feature: dict) -> str | None:
    name = (feature.get("properties") or {}).get(BASIN_KEY)
    return name if isinstance(name, str) and name else None


def feature_value(feature: dict, prop: str) -> float | None:
    """Numeric value of `prop` on one feature, or None when absent."""
    return _as_number((feature.get("properties") or {}).get(prop))


def basin_frame(data) -> pd.DataFrame:
    """One row per feature, numeric columns coerced (absent -> NaN)."""
    rows = [ft.get("properties") or {} for ft in features_of(data)]
    df = pd.DataFrame(rows)
    for col in [BASIN_KEY, CONTINENT_KEY, *NUMERIC_KEYS]:
        if col not in df.columns:
            df[col] = np.nan
    for col in NUMERIC_KEYS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def statistic_values(data, prop: str) -> list[float]:
    """Observed values of `prop` for scale building; missing values are dropped.

    A property that no feature carries gives an empty list ("no data").
    """
    vals = [feature_value(ft, prop) for ft in features_of(data)]
    return [v for v in vals if v is not None]


def monthly_series(feature: dict | None) -> list[float]:
    """Twelve values jan..dec for the bar chart, 0 where a month is missing."""
    if not feature:
        return [0.0] * 12
    out = []
    for m in MONTHS:
        v = feature_value(feature, m)
        out.append(0.0 if v is None else v)
    return out


def monthly_values(data) -> list[float]:
    """Every observed month value across all features and all twelve months."""
    df = basin_frame(data)
    if df.empty:
        return []
    arr = df[MONTHS].to_numpy(dtype=float).ravel()
    return arr[np.isfinite(arr)].tolist()


def monthly_extent(data) -> tuple[float, float] | None:
    """Global (min, max) over all monthly values, computed once per collection."""
    vals = monthly_values(data)
    if not vals:
        return None
    return float(np.min(vals)), float(np.max(vals))
