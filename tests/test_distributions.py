"""Distribution layer tests: bounds, preconditions and spatial uniformity."""

import math
from collections import namedtuple

import numpy as np
import pytest

from atrandom import (
    PCG64,
    Color,
    ColorSpace,
    Point,
    Rect,
    Size,
    interpolate,
    offset_at_distance,
    pick_one,
    point_at_distance,
    point_in_rect,
    random_below,
    random_color,
    random_int,
    random_interpolation,
    uniform_real,
)

Vec = namedtuple("Vec", "x y")


class CountingSource:
    """Word source that replays a fixed list of words."""

    def __init__(self, words):
        self.words = list(words)
        self.calls = 0

    def next_u64(self):
        word = self.words[self.calls]
        self.calls += 1
        return word


def _uniform_cdf(values):
    return np.clip(values, 0.0, 1.0)


def _ks_statistic(samples, cdf):
    values = np.sort(np.asarray(samples, dtype=np.float64))
    n = values.size
    expected = cdf(values)
    above = np.arange(1, n + 1) / n - expected
    below = expected - np.arange(0, n) / n
    return float(max(above.max(), below.max()))


def test_uniform_real_reference_values():
    rng = PCG64(0x2288, 0)
    assert uniform_real(rng, 0.0, 1.0) == 0.57571231593000838
    assert uniform_real(rng, 0.0, 1.0) == 0.17970490855670973
    assert uniform_real(rng, -5.0, 5.0) == -3.7666512453462553


def test_uniform_real_closed_over_many_seeds():
    bounds = PCG64(0xB0B)
    for seed in range(10_000):
        a = uniform_real(bounds, -1e6, 1e6)
        b = uniform_real(bounds, -1e6, 1e6)
        value = uniform_real(PCG64(seed), a, b)
        assert min(a, b) <= value <= max(a, b)


def test_uniform_real_degenerate_range_returns_bound():
    for seed in range(200):
        assert uniform_real(PCG64(seed), 3.25, 3.25) == 3.25
        assert uniform_real(PCG64(seed), -0.0, -0.0) == 0.0


def test_uniform_real_reaches_both_ends():
    # a zero word maps to the lower bound, the top draw to the upper bound
    # 1024 * (2**53 + 1) stays below 2**64 and clears the rejection zone
    assert uniform_real(CountingSource([1024]), 2.0, 4.0) == 2.0
    top = CountingSource([(1 << 64) - 1])
    assert uniform_real(top, 2.0, 4.0) == 4.0


def test_uniform_real_rejects_non_finite_bounds():
    with pytest.raises(ValueError):
        uniform_real(PCG64(1), 0.0, math.inf)
    with pytest.raises(ValueError):
        uniform_real(PCG64(1), math.nan, 1.0)
    with pytest.raises(ValueError):
        uniform_real(PCG64(1), -1e308, 1e308)


def test_random_below_reference_values():
    rng = PCG64(0x2288, 0)
    assert [random_below(rng, 3) for _ in range(6)] == [1, 0, 0, 1, 0, 2]


def test_random_below_rejects_biased_zone():
    # 2**64 % 3 == 1, so a word whose low product lands at 0 is redrawn
    source = CountingSource([0, (1 << 64) - 1])
    assert random_below(source, 3) == 2
    assert source.calls == 2


def test_random_below_rejects_zero_bound():
    with pytest.raises(ValueError):
        random_below(PCG64(1), 0)


def test_random_int_reference_values_and_bounds():
    rng = PCG64(0x2288, 0)
    assert [random_int(rng, 1, 6) for _ in range(6)] == [4, 2, 1, 3, 2, 5]
    for _ in range(500):
        assert -3 <= random_int(rng, -3, 3) <= 3
    assert random_int(rng, 9, 9) == 9


def test_random_int_full_word_span():
    source = CountingSource([12345])
    assert random_int(source, 0, (1 << 64) - 1) == 12345


def test_random_int_rejects_reversed_or_wide_ranges():
    with pytest.raises(ValueError):
        random_int(PCG64(1), 5, 4)
    with pytest.raises(ValueError):
        random_int(PCG64(1), 0, 1 << 64)


def test_pick_one_reference_choice():
    assert pick_one(PCG64(0x2288, 0), ["Hello", "Bonjour", "Willkommen"]) == "Bonjour"
    assert pick_one(PCG64(0x2288, 7), ["Hello", "Bonjour", "Willkommen"]) == "Willkommen"


def test_pick_one_covers_every_option():
    rng = PCG64(5)
    seen = {pick_one(rng, "abcd") for _ in range(200)}
    assert seen == set("abcd")


def test_pick_one_accepts_non_sequence_collections():
    assert pick_one(PCG64(5), frozenset({"only"})) == "only"


@pytest.mark.parametrize("empty", [[], (), "", set(), {}])
def test_pick_one_empty_collection_raises(empty):
    with pytest.raises(ValueError, match="non-empty"):
        pick_one(PCG64(1), empty)


@pytest.mark.parametrize(
    "start, end",
    [
        (0.1, 0.7),
        (-3.0, 12.5),
        (Point(0.1, -2.0), Point(7.3, 0.3)),
        (Size(1.5, 2.5), Size(-4.0, 9.1)),
        ((0.2, 0.4, 0.6), (1.1, -0.9, 3.3)),
        (Vec(0.0, 0.0), Vec(1.0, 2.0)),
    ],
)
def test_interpolate_endpoints_are_exact(start, end):
    assert interpolate(start, end, 0.0) == start
    assert interpolate(start, end, 1.0) == end


def test_interpolate_keeps_namedtuple_type():
    midpoint = interpolate(Vec(0.0, 0.0), Vec(1.0, 2.0), 0.5)
    assert isinstance(midpoint, Vec)
    assert midpoint == Vec(0.5, 1.0)
    assert interpolate([0.0, 4.0], [2.0, 0.0], 0.25) == [0.5, 3.0]


def test_interpolate_numpy_vectors():
    start = np.array([0.1, 0.2, 0.3])
    end = np.array([9.0, -4.0, 0.7])
    assert np.array_equal(interpolate(start, end, 0.0), start)
    assert np.array_equal(interpolate(start, end, 1.0), end)
    assert np.allclose(interpolate(start, end, 0.5), (start + end) / 2)


def test_interpolate_animatable_rect():
    start = Rect(0.0, 0.0, 10.0, 10.0)
    end = Rect(10.0, 20.0, 30.0, 40.0)
    assert interpolate(start, end, 0.0) == start
    assert interpolate(start, end, 1.0) == end
    assert interpolate(start, end, 0.5) == Rect(5.0, 10.0, 20.0, 25.0)


def test_interpolate_uses_custom_rule():
    black = Color(0.0, 0.0, 0.0)
    white = Color(1.0, 1.0, 1.0)
    assert interpolate(black, white, 0.5) == Color(0.5, 0.5, 0.5)


def test_interpolate_rejects_mismatched_components():
    with pytest.raises(ValueError):
        interpolate((0.0, 1.0), (1.0,), 0.5)


def test_random_interpolation_stays_between_endpoints():
    rng = PCG64(31)
    for _ in range(500):
        point = random_interpolation(rng, Point(0.0, 10.0), Point(4.0, 2.0))
        assert -1e-12 <= point.x <= 4.0 + 1e-12
        assert 2.0 - 1e-12 <= point.y <= 10.0 + 1e-12
        # one shared fraction for both components
        assert math.isclose(point.x / 4.0, (10.0 - point.y) / 8.0, abs_tol=1e-9)


def test_point_in_rect_stays_inside():
    rng = PCG64(8)
    rect = Rect(-2.0, 5.0, 4.0, -3.0)
    for _ in range(1000):
        assert rect.contains(point_in_rect(rng, rect))


def test_point_in_rect_draws_x_then_y():
    rect = Rect(10.0, 20.0, 5.0, 5.0)
    reference = PCG64(0x2288, 0)
    x = uniform_real(reference, 10.0, 15.0)
    y = uniform_real(reference, 20.0, 25.0)
    assert point_in_rect(PCG64(0x2288, 0), rect) == Point(x, y)


def test_point_at_fixed_distance_lies_on_circle():
    rng = PCG64(12)
    center = Point(3.0, -1.0)
    for _ in range(500):
        point = point_at_distance(rng, center, 2.5)
        assert math.isclose(math.hypot(point.x - center.x, point.y - center.y), 2.5, rel_tol=1e-9)


def test_point_at_distance_respects_annulus():
    rng = PCG64(13)
    center = Point(0.0, 0.0)
    for _ in range(1000):
        point = point_at_distance(rng, center, (1.0, 2.0))
        assert 1.0 - 1e-9 <= math.hypot(point.x, point.y) <= 2.0 + 1e-9


def test_point_at_distance_is_area_uniform():
    rng = PCG64(0xA11CE)
    center = Point(1.0, -2.0)
    radius = 3.0
    squared = []
    plain = []
    for _ in range(4000):
        point = point_at_distance(rng, center, (0.0, radius))
        d2 = (point.x - center.x) ** 2 + (point.y - center.y) ** 2
        squared.append(d2 / radius**2)
        plain.append(math.sqrt(d2) / radius)

    critical = 1.95 / math.sqrt(len(squared))  # alpha = 0.001
    assert _ks_statistic(squared, _uniform_cdf) < critical
    # the radius itself is not uniform: its CDF is x**2
    assert _ks_statistic(plain, _uniform_cdf) > 0.2


def test_offset_at_distance_has_requested_length():
    rng = PCG64(21)
    for _ in range(200):
        offset = offset_at_distance(rng, 10.0)
        assert isinstance(offset, Size)
        assert math.isclose(offset.length, 10.0, rel_tol=1e-9)


def test_offset_matches_point_around_origin():
    offset = offset_at_distance(PCG64(4), (1.0, 3.0))
    point = point_at_distance(PCG64(4), Point(0.0, 0.0), (1.0, 3.0))
    assert (offset.width, offset.height) == (point.x, point.y)


def test_random_color_between_endpoints():
    rng = PCG64(77)
    red = Color(1.0, 0.0, 0.0)
    blue = Color(0.0, 0.0, 1.0)
    for _ in range(100):
        color = random_color(rng, red, blue, ColorSpace.DEVICE)
        assert math.isclose(color.red + color.blue, 1.0)
        assert color.green == 0.0
