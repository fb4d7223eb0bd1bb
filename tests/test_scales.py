import random

import pytest
from plotly.colors import hex_to_rgb

from components.colors import NO_DATA_COLOR
from components.scales import (
    ColorScale, build_continuous_scale, build_diverging_scale, compute_cutoff,
)

LOW, MID, HIGH = "#2c7bb6", "#ffffbf", "#d7191c"


def test_percentile_cutoff_is_thirtieth_percentile():
    values = list(range(1, 11))
    random.Random(3).shuffle(values)
    assert compute_cutoff(values, "percentile", 0.3) == 4


def test_percentile_cutoff_index_is_clamped():
    assert compute_cutoff([1, 2, 3], "percentile", 1.0) == 3
    assert compute_cutoff([1, 2, 3], "percentile", -0.5) == 1


def test_mean_and_fixed_cutoffs():
    assert compute_cutoff([1, 2, 3, 6], "mean") == pytest.approx(3.0)
    assert compute_cutoff([1, 2, 3], "fixed", 2.5) == 2.5


@pytest.mark.parametrize("values", [[1, 2, 3], []])
def test_invalid_cutoff_type_fails_at_construction(values):
    with pytest.raises(ValueError):
        build_diverging_scale(values, cutoff_type="median")


def test_diverging_stops_and_clamping():
    scale = build_diverging_scale(list(range(1, 11)))
    assert scale.mode == "diverging"
    assert scale.breakpoints == [1, 4, 10]
    assert scale(1) == LOW
    assert scale(4) == MID
    assert scale(10) == HIGH
    assert scale(-1e9) == LOW
    assert scale(1e9) == HIGH


def test_diverging_is_monotonic_between_stops():
    scale = build_diverging_scale(list(range(1, 11)))

    def channels(xs):
        return [hex_to_rgb(scale(x)) for x in xs]

    rising = channels([1 + i * 0.25 for i in range(13)])     # 1 .. 4: every channel goes up
    falling = channels([4 + i * 0.5 for i in range(13)])     # 4 .. 10: every channel goes down
    for a, b in zip(rising, rising[1:]):
        assert all(x <= y for x, y in zip(a, b))
    for a, b in zip(falling, falling[1:]):
        assert all(x >= y for x, y in zip(a, b))


def test_single_distinct_value_maps_everything_to_mid():
    scale = build_diverging_scale([5, 5, 5])
    assert scale.breakpoints == [5, 5, 5]
    assert {scale(-3), scale(5), scale(99)} == {MID}
    assert scale.to_plotly_colorscale() == [[0.0, MID], [1.0, MID]]


def test_empty_values_mean_no_scale():
    assert build_diverging_scale([]) is None


def test_fixed_cutoff_outside_data_is_clamped():
    scale = build_diverging_scale([1, 2, 3], "fixed", 10)
    assert scale.breakpoints == [1, 3, 3]
    assert scale(3) == HIGH


def test_cutoff_equal_to_min_has_no_jump_at_min():
    scale = build_diverging_scale([1, 5, 10])
    assert scale.breakpoints == [1, 1, 10]
    assert scale(1) == MID
    assert scale(1.0001) == MID
    assert scale(0) == MID
    assert scale(10) == HIGH


def test_continuous_scale_endpoints_and_midpoint():
    scale = build_continuous_scale(0, 100)
    assert scale.mode == "continuous"
    assert scale.breakpoints == [0, 100]
    assert scale(0) == "#fee5d9"
    assert scale(100) == "#a50f15"
    # (254+165)/2, (229+15)/2, (217+21)/2 rounded half up
    assert scale(50) == "#d27a77"
    assert scale(-5) == "#fee5d9"


def test_scale_is_total_and_idempotent():
    a = build_diverging_scale([3, 1, 4, 1, 5, 9, 2, 6])
    b = build_diverging_scale([3, 1, 4, 1, 5, 9, 2, 6])
    xs = [-10, 0, 1, 2.5, 3, 4.75, 9, 100, float("inf"), float("-inf")]
    assert [a(x) for x in xs] == [b(x) for x in xs]
    assert a(float("nan")) == NO_DATA_COLOR
    assert a("not a number") == NO_DATA_COLOR


def test_plotly_colorscale_positions():
    scale = build_diverging_scale(list(range(1, 11)))
    cs = scale.to_plotly_colorscale()
    assert [c for _, c in cs] == [LOW, MID, HIGH]
    assert [p for p, _ in cs] == pytest.approx([0.0, 1 / 3, 1.0])


def test_color_scale_rejects_mismatched_stops():
    with pytest.raises(ValueError):
        ColorScale([0, 1], ["#000000"], mode="continuous")
