"""Sampling helpers layered over any 64-bit word source."""

import math
from collections.abc import Collection, Sequence
from typing import Tuple, TypeVar, Union

from .models import Color, ColorSpace, Point, Rect, Size
from .prng import MASK64, WordSource

T = TypeVar("T")
Distance = Union[float, Tuple[float, float]]

_SIGNIFICAND_SPAN = 1 << 53  # 53-bit significand of a double


def random_below(source: WordSource, upper_bound: int) -> int:
    """Unbiased integer in [0, upper_bound) via multiply-high rejection."""
    if not 0 < upper_bound <= 1 << 64:
        raise ValueError(f"upper_bound must be in 1..2**64, received {upper_bound}")
    product = source.next_u64() * upper_bound
    if product & MASK64 < upper_bound:
        threshold = ((1 << 64) - upper_bound) % upper_bound
        while product & MASK64 < threshold:
            product = source.next_u64() * upper_bound
    return product >> 64


def uniform_real(source: WordSource, lower: float, upper: float) -> float:
    """Real in the closed interval between ``lower`` and ``upper``."""
    width = upper - lower
    if not (math.isfinite(lower) and math.isfinite(upper) and math.isfinite(width)):
        raise ValueError(f"uniform_real needs finite bounds, received [{lower}, {upper}]")
    # one extra slot so the upper bound itself is reachable
    draw = random_below(source, _SIGNIFICAND_SPAN + 1)
    if draw == _SIGNIFICAND_SPAN:
        return upper
    value = width * (draw / _SIGNIFICAND_SPAN) + lower
    # a rounded-up width can overshoot the far bound by an ulp
    return min(max(value, min(lower, upper)), max(lower, upper))


def random_int(source: WordSource, lower: int, upper: int) -> int:
    """Integer in the closed range lower..upper."""
    if lower > upper:
        raise ValueError(f"random_int needs lower <= upper, received {lower}..{upper}")
    span = upper - lower + 1
    if span > 1 << 64:
        raise ValueError("random_int spans at most 2**64 values")
    if span == 1 << 64:
        return lower + source.next_u64()
    return lower + random_below(source, span)


def pick_one(source: WordSource, options: Collection[T]) -> T:
    """Uniformly chosen element of a non-empty collection.

    Non-sequence collections (sets, dict views) are materialised in iteration
    order first, so their picks are only as stable as that order.
    """
    if not isinstance(options, Sequence):
        options = list(options)
    if len(options) == 0:
        raise ValueError("pick_one requires a non-empty collection")
    return options[random_below(source, len(options))]


def interpolate(start, end, amount: float):
    """Blend ``start`` towards ``end`` by ``amount`` in [0, 1]."""
    if hasattr(start, "interpolate"):
        return start.interpolate(end, amount)
    if hasattr(start, "animatable_data"):
        data = interpolate(start.animatable_data, end.animatable_data, amount)
        return start.with_animatable_data(data)
    if isinstance(start, (tuple, list)):
        if len(start) != len(end):
            raise ValueError("interpolate needs endpoints with the same number of components")
        components = [interpolate(a, b, amount) for a, b in zip(start, end)]
        if hasattr(start, "_make"):
            return start._make(components)
        return type(start)(components)
    # weighted form keeps both endpoints exact
    return start * (1 - amount) + end * amount


def random_interpolation(source: WordSource, start, end):
    """Blend between ``start`` and ``end`` by a uniform fraction in [0, 1]."""
    return interpolate(start, end, uniform_real(source, 0.0, 1.0))


def random_color(
    source: WordSource,
    start: Color,
    end: Color,
    color_space: ColorSpace = ColorSpace.PERCEPTUAL,
) -> Color:
    """Mix two colours by a uniform fraction in [0, 1]."""
    return start.mix(end, uniform_real(source, 0.0, 1.0), color_space)


def point_in_rect(source: WordSource, rect: Rect) -> Point:
    """Point inside ``rect``, x drawn before y."""
    x = uniform_real(source, rect.min_x, rect.max_x)
    y = uniform_real(source, rect.min_y, rect.max_y)
    return Point(x, y)


def _radius_range(distance: Distance) -> Tuple[float, float]:
    if isinstance(distance, (int, float)):
        return float(distance), float(distance)
    lower, upper = distance
    return float(lower), float(upper)


def _polar_offset(source: WordSource, distance: Distance) -> Tuple[float, float]:
    r_lo, r_hi = _radius_range(distance)
    theta = uniform_real(source, 0.0, 2 * math.pi)
    # sqrt(u) is the radius inverse CDF for uniform area only when r_lo == 0;
    # an annulus gets extra weight near r_lo
    r = r_lo + (r_hi - r_lo) * math.sqrt(uniform_real(source, 0.0, 1.0))
    return r * math.cos(theta), r * math.sin(theta)


def point_at_distance(source: WordSource, center: Point, distance: Distance) -> Point:
    """Point on the disc/annulus around ``center``; area-uniform when the inner radius is 0."""
    dx, dy = _polar_offset(source, distance)
    return Point(center.x + dx, center.y + dy)


def offset_at_distance(source: WordSource, distance: Distance) -> Size:
    """Offset whose length falls in ``distance``; area-uniform when the inner radius is 0."""
    dx, dy = _polar_offset(source, distance)
    return Size(dx, dy)
