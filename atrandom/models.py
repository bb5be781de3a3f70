import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def offset_by(self, size: "Size") -> "Point":
        return Point(self.x + size.width, self.y + size.height)


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0

    def __add__(self, other: "Size") -> "Size":
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: "Size") -> "Size":
        return Size(self.width - other.width, self.height - other.height)

    def __mul__(self, factor: float) -> "Size":
        return Size(self.width * factor, self.height * factor)

    __rmul__ = __mul__

    @property
    def length(self) -> float:
        return math.hypot(self.width, self.height)


@dataclass(frozen=True)
class Rect:
    """Origin plus size; negative sizes extend left/up from the origin."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    def contains(self, point: Point) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    # Animatable: interpolated through its decomposed scalars
    @property
    def animatable_data(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def with_animatable_data(self, data: Tuple[float, float, float, float]) -> "Rect":
        return Rect(*data)


class ColorSpace(str, Enum):
    DEVICE = "device"
    LINEAR = "linear"
    PERCEPTUAL = "perceptual"


def _to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _from_linear(c: float) -> float:
    if c <= 0.0031308:
        return c * 12.92
    return 1.055 * c ** (1 / 2.4) - 0.055


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** (1 / 3), v)


def _linear_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    l_ = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m_ = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s_ = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)
    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def _oklab_to_linear(L: float, a: float, b: float) -> Tuple[float, float, float]:
    l = (L + 0.3963377774 * a + 0.2158037573 * b) ** 3
    m = (L - 0.1055613458 * a - 0.0638541728 * b) ** 3
    s = (L - 0.0894841775 * a - 1.2914855480 * b) ** 3
    return (
        4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def _lerp(a: float, b: float, t: float) -> float:
    return a * (1.0 - t) + b * t


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


@dataclass(frozen=True)
class Color:
    """sRGB colour with opacity, all components in [0, 1]."""

    red: float
    green: float
    blue: float
    opacity: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        digits = value.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected #RRGGBB or #RRGGBBAA, received '{value}'")
        channels = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        return cls(*channels)

    def to_hex(self) -> str:
        channels = (self.red, self.green, self.blue, self.opacity)
        return "#" + "".join(f"{round(_clamp(c, 0.0, 1.0) * 255):02x}" for c in channels)

    def mix(self, other: "Color", amount: float, color_space: ColorSpace = ColorSpace.PERCEPTUAL) -> "Color":
        color_space = ColorSpace(color_space)
        opacity = _lerp(self.opacity, other.opacity, amount)
        if color_space is ColorSpace.DEVICE:
            return Color(
                _lerp(self.red, other.red, amount),
                _lerp(self.green, other.green, amount),
                _lerp(self.blue, other.blue, amount),
                opacity,
            )

        start = [_to_linear(c) for c in (self.red, self.green, self.blue)]
        end = [_to_linear(c) for c in (other.red, other.green, other.blue)]
        if color_space is ColorSpace.PERCEPTUAL:
            start = _linear_to_oklab(*start)
            end = _linear_to_oklab(*end)
            mixed = _oklab_to_linear(*(_lerp(a, b, amount) for a, b in zip(start, end)))
        else:
            mixed = tuple(_lerp(a, b, amount) for a, b in zip(start, end))
        r, g, b = (_clamp(_from_linear(c), 0.0, 1.0) for c in mixed)
        return Color(r, g, b, opacity)

    def interpolate(self, other: "Color", amount: float) -> "Color":
        return self.mix(other, amount, ColorSpace.DEVICE)
