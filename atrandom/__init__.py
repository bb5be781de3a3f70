"""Public package surface for atrandom, seedable PCG sampling."""

from .distributions import (
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
from .models import Color, ColorSpace, Point, Rect, Size
from .prng import DEFAULT_STREAM, PCG32, PCG64, WordSource
from .random_value import RandomValue
from .sampler import SAMPLE_KINDS, SampleConfig, run_sampling
from .seeding import FIXED_STATE_SEED, SeedSource, to_u64

__all__ = [
    "Color",
    "ColorSpace",
    "DEFAULT_STREAM",
    "FIXED_STATE_SEED",
    "PCG32",
    "PCG64",
    "Point",
    "RandomValue",
    "Rect",
    "SAMPLE_KINDS",
    "SampleConfig",
    "SeedSource",
    "Size",
    "WordSource",
    "interpolate",
    "offset_at_distance",
    "pick_one",
    "point_at_distance",
    "point_in_rect",
    "random_below",
    "random_color",
    "random_int",
    "random_interpolation",
    "run_sampling",
    "to_u64",
    "uniform_real",
]
