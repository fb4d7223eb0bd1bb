import math

import pytest

from components.stat_utils import (
    StatisticSelector, basin_frame, feature_value, monthly_extent, monthly_series,
    monthly_values, statistic_values,
)
from conftest import make_feature


def test_missing_month_is_zero_in_series_and_excluded_from_values(basins):
    nile = basins["features"][1]
    series = monthly_series(nile)
    assert len(series) == 12
    assert series[6] == 0
    jul = statistic_values(basins, "jul")
    # AMUR (7), DANUBE (0.5); NILE has no July and ORPHAN has no months
    assert jul == [7.0, 0.5]


def test_absent_null_and_garbage_all_count_as_missing():
    ft = make_feature("X", population=None, average=None, extra_null=None, bad="n/a", ok="12.5")
    assert feature_value(ft, "population") is None
    assert feature_value(ft, "extra_null") is None
    assert feature_value(ft, "bad") is None
    assert feature_value(ft, "ok") == 12.5
    assert feature_value({"properties": {"average": float("nan")}}, "average") is None


def test_unknown_statistic_yields_no_data(basins):
    assert statistic_values(basins, "rainfall") == []


def test_scale_values_skip_missing(basins):
    assert statistic_values(basins, "average") == [5.0, 10.0, 1.0]
    assert statistic_values(basins, "population") == [1_000_000, 3_000_000, 2_000_000, 500_000]


def test_monthly_extent_spans_all_features_and_months(basins):
    assert monthly_extent(basins) == (0.5, 30.0)
    # 12 + 11 + 12 observations
    assert len(monthly_values(basins)) == 35


def test_empty_collection_degrades_to_no_data():
    empty = {"type": "FeatureCollection", "features": []}
    assert statistic_values(empty, "population") == []
    assert monthly_values(empty) == []
    assert monthly_extent(empty) is None
    assert monthly_extent(None) is None
    assert monthly_series(None) == [0.0] * 12


def test_basin_frame_coerces_numbers(basins):
    df = basin_frame(basins)
    assert list(df["RIVERBASIN"]) == ["AMUR", "NILE", "DANUBE", "ORPHAN"]
    assert math.isnan(df.loc[3, "average"])
    assert df["population"].sum() == 6_500_000


def test_selector_keys_and_validation():
    assert StatisticSelector("population").key == "population"
    assert StatisticSelector("average").key == "average"
    monthly = StatisticSelector("monthly", 6)
    assert monthly.is_monthly and monthly.key == "jul"
    with pytest.raises(ValueError):
        StatisticSelector("rainfall")
    with pytest.raises(ValueError):
        StatisticSelector("monthly", 12)
    with pytest.raises(ValueError):
        StatisticSelector("monthly", None)
    with pytest.raises(ValueError):
        StatisticSelector("monthly", "march")
