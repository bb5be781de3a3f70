"""Values that are random once and then stable on every read."""

from collections.abc import Collection
from typing import Callable, Generic, Optional, TypeVar

from . import distributions
from .models import Color, ColorSpace, Point, Rect, Size
from .prng import WordSource
from .seeding import SeedSource

T = TypeVar("T")


class RandomValue(Generic[T]):
    """Re-derives its value from a fresh generator on every read.

    Without an explicit source the object's own identity is the namespace, so
    the value is stable for the object's lifetime. Assigning ``seed`` pins a
    fixed source, making the value reproducible across objects and runs.
    """

    def __init__(self, generator: Callable[[WordSource], T], source: Optional[SeedSource] = None) -> None:
        self._generator = generator
        self._source = source

    @property
    def source(self) -> SeedSource:
        if self._source is None:
            return SeedSource.namespace(id(self))
        return self._source

    @property
    def value(self) -> T:
        return self._generator(self.source.make_generator())

    @property
    def seed(self) -> int:
        return self.source.seed

    @seed.setter
    def seed(self, seed: int) -> None:
        self._source = SeedSource.fixed(seed)

    def __repr__(self) -> str:
        return f"RandomValue(source={self.source!r})"

    @classmethod
    def choice(cls, first: T, *rest: T) -> "RandomValue[T]":
        """Pick from the given options, indexed in argument order.

        Swift's AtRandom appends ``first`` after the rest, so a fixed seed picks
        a different element here than it does there.
        """
        options = (first,) + rest
        return cls(lambda rng: distributions.pick_one(rng, options))

    @classmethod
    def from_collection(cls, values: Collection[T]) -> "RandomValue[T]":
        options = list(values)
        if not options:
            raise ValueError("RandomValue.from_collection requires a non-empty collection")
        return cls(lambda rng: distributions.pick_one(rng, options))

    @classmethod
    def in_range(cls, lower: int, upper: int) -> "RandomValue[int]":
        if lower > upper:
            raise ValueError(f"in_range needs lower <= upper, received {lower}..{upper}")
        return cls(lambda rng: distributions.random_int(rng, lower, upper))

    @classmethod
    def between(cls, start: T, end: T) -> "RandomValue[T]":
        return cls(lambda rng: distributions.random_interpolation(rng, start, end))

    @classmethod
    def color_between(
        cls, start: Color, end: Color, color_space: ColorSpace = ColorSpace.PERCEPTUAL
    ) -> "RandomValue[Color]":
        return cls(lambda rng: distributions.random_color(rng, start, end, color_space))

    @classmethod
    def point_at_distance(cls, distance: distributions.Distance, center: Point) -> "RandomValue[Point]":
        return cls(lambda rng: distributions.point_at_distance(rng, center, distance))

    @classmethod
    def point_in_rect(cls, rect: Rect) -> "RandomValue[Point]":
        return cls(lambda rng: distributions.point_in_rect(rng, rect))

    @classmethod
    def offset(cls, distance: distributions.Distance) -> "RandomValue[Size]":
        return cls(lambda rng: distributions.offset_at_distance(rng, distance))
