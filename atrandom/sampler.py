"""Deterministic sampling runs, fully driven by the configured seed."""

import logging
import math
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional

from . import distributions
from .models import Color, ColorSpace, Point, Rect
from .prng import PCG64
from .seeding import SeedSource

logger = logging.getLogger(__name__)

SAMPLE_KINDS = ("words", "real", "int", "choice", "interpolate", "point", "rect", "offset", "color")


@dataclass
class SampleConfig:
    """Configuration for one sampling session."""

    seed: int = 0  # fixed seed; ignored when namespace is set
    namespace: Optional[int] = None
    kind: str = "real"
    count: int = 10
    lower: float = 0.0
    upper: float = 1.0
    options: tuple[str, ...] = ()
    center: tuple[float, float] = (0.0, 0.0)
    radius_min: float = 0.0
    radius_max: float = 1.0
    rect: tuple[float, float, float, float] = (0.0, 0.0, 1.0, 1.0)
    color_from: str = "#000000"
    color_to: str = "#ffffff"
    color_space: str = ColorSpace.PERCEPTUAL.value

    def source(self) -> SeedSource:
        if self.namespace is not None:
            return SeedSource.namespace(self.namespace)
        return SeedSource.fixed(self.seed)


def _as_int(value: float, name: str) -> int:
    if not float(value).is_integer():
        raise ValueError(f"kind 'int' needs integral bounds, received {name}={value}")
    return int(value)


def _strategy(cfg: SampleConfig) -> Callable[[PCG64], Any]:
    """Resolve the per-draw sampling function for ``cfg.kind``."""

    if cfg.kind == "words":
        return lambda rng: f"0x{rng.next_u64():016x}"
    if cfg.kind == "real":
        return lambda rng: distributions.uniform_real(rng, cfg.lower, cfg.upper)
    if cfg.kind == "int":
        lower, upper = _as_int(cfg.lower, "lower"), _as_int(cfg.upper, "upper")
        if lower > upper:
            raise ValueError(f"kind 'int' needs lower <= upper, received {lower}..{upper}")
        return lambda rng: distributions.random_int(rng, lower, upper)
    if cfg.kind == "choice":
        if not cfg.options:
            raise ValueError("kind 'choice' requires at least one option")
        return lambda rng: distributions.pick_one(rng, cfg.options)
    if cfg.kind == "interpolate":
        return lambda rng: distributions.random_interpolation(rng, cfg.lower, cfg.upper)
    if cfg.kind == "point":
        center = Point(*cfg.center)
        distance = (cfg.radius_min, cfg.radius_max)
        return lambda rng: _pair(distributions.point_at_distance(rng, center, distance))
    if cfg.kind == "rect":
        rect = Rect(*cfg.rect)
        return lambda rng: _pair(distributions.point_in_rect(rng, rect))
    if cfg.kind == "offset":
        distance = (cfg.radius_min, cfg.radius_max)
        return lambda rng: _pair(distributions.offset_at_distance(rng, distance))
    if cfg.kind == "color":
        start, end = Color.from_hex(cfg.color_from), Color.from_hex(cfg.color_to)
        space = ColorSpace(cfg.color_space)
        return lambda rng: distributions.random_color(rng, start, end, space).to_hex()
    raise ValueError(f"Unknown sample kind '{cfg.kind}'. Expected one of: {', '.join(SAMPLE_KINDS)}")


def _pair(value: Any) -> List[float]:
    if isinstance(value, Point):
        return [value.x, value.y]
    return [value.width, value.height]


def _summarize(cfg: SampleConfig, samples: List[Any]) -> Dict[str, Any]:
    summary: Dict[str, Any] = {"count": len(samples)}
    if not samples:
        return summary

    if cfg.kind in ("real", "int", "interpolate"):
        summary["min"] = min(samples)
        summary["max"] = max(samples)
        summary["mean"] = round(sum(samples) / len(samples), 6)
    elif cfg.kind in ("point", "offset"):
        cx, cy = cfg.center if cfg.kind == "point" else (0.0, 0.0)
        distances = [math.hypot(x - cx, y - cy) for x, y in samples]
        summary["min_distance"] = round(min(distances), 6)
        summary["max_distance"] = round(max(distances), 6)
        # r = r_lo + d*sqrt(u) gives E[r^2] = r_lo^2 + 4/3*r_lo*d + d^2/2 (d = r_hi - r_lo)
        summary["mean_squared_distance"] = round(sum(d * d for d in distances) / len(distances), 6)
    elif cfg.kind == "rect":
        summary["mean"] = [
            round(sum(x for x, _ in samples) / len(samples), 6),
            round(sum(y for _, y in samples) / len(samples), 6),
        ]
    elif cfg.kind == "choice":
        summary["frequencies"] = dict(Counter(samples))
    else:
        summary["unique"] = len(set(samples))
    return summary


def run_sampling(cfg: SampleConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` samples from one fresh generator."""

    if cfg.count < 0:
        raise ValueError(f"count must be non-negative, received {cfg.count}")

    draw = _strategy(cfg)
    source = cfg.source()
    logger.debug("sampling kind=%s count=%d source=%s seed=%#x", cfg.kind, cfg.count, source.kind, source.seed)

    rng = source.make_generator()
    samples = [draw(rng) for _ in range(cfg.count)]

    return {
        "config": asdict(cfg),
        "source": {"kind": source.kind, "seed": source.seed},
        "samples": samples,
        "summary": _summarize(cfg, samples),
    }


if __name__ == "__main__":
    import json

    result = run_sampling(SampleConfig())
    print(json.dumps(result, indent=2))
