"""Command line harness for deterministic atrandom sampling runs."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "sample_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from atrandom import SAMPLE_KINDS, ColorSpace, SampleConfig, run_sampling


def _parse_int(value: str) -> int:
    """Accept decimal or 0x-prefixed hex, including negatives."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer seed, received '{value}'.") from exc


def _parse_floats(count: int, label: str):
    def parse(value: str) -> tuple[float, ...]:
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if len(parts) != count:
            raise argparse.ArgumentTypeError(
                f"{label} expects {count} comma-separated numbers, received '{value}'."
            )
        try:
            return tuple(float(part) for part in parts)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"{label} must contain numbers.") from exc

    return parse


def _parse_options(value: str) -> tuple[str, ...]:
    options = tuple(part.strip() for part in value.split(",") if part.strip())
    if not options:
        raise argparse.ArgumentTypeError("Option list cannot be empty.")
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw reproducible samples from a seeded PCG generator")
    parser.add_argument("--kind", choices=SAMPLE_KINDS, default="real", help="Distribution to sample")
    parser.add_argument("--count", type=int, default=10, help="Number of draws from one generator")
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=0,
        help="Fixed seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--namespace",
        type=_parse_int,
        default=None,
        help="Derive the generator from a namespace value instead of the fixed seed",
    )
    parser.add_argument("--lower", type=float, default=0.0, help="Lower bound for real/int/interpolate")
    parser.add_argument("--upper", type=float, default=1.0, help="Upper bound for real/int/interpolate")
    parser.add_argument(
        "--options",
        type=_parse_options,
        default=(),
        help="Comma-separated choices for --kind choice (e.g. Hello,Bonjour,Willkommen)",
    )
    parser.add_argument(
        "--center",
        type=_parse_floats(2, "--center"),
        default=(0.0, 0.0),
        metavar="x,y",
        help="Center point for --kind point",
    )
    parser.add_argument("--radius_min", type=float, default=0.0, help="Inner radius for point/offset")
    parser.add_argument("--radius_max", type=float, default=1.0, help="Outer radius for point/offset")
    parser.add_argument(
        "--rect",
        type=_parse_floats(4, "--rect"),
        default=(0.0, 0.0, 1.0, 1.0),
        metavar="x,y,w,h",
        help="Rectangle for --kind rect",
    )
    parser.add_argument("--color_from", default="#000000", help="First colour for --kind color")
    parser.add_argument("--color_to", default="#ffffff", help="Second colour for --kind color")
    parser.add_argument(
        "--color_space",
        choices=[space.value for space in ColorSpace],
        default=ColorSpace.PERCEPTUAL.value,
        help="Colour space used when mixing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "sample_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cfg = SampleConfig(
        seed=args.seed,
        namespace=args.namespace,
        kind=args.kind,
        count=args.count,
        lower=args.lower,
        upper=args.upper,
        options=args.options,
        center=args.center,
        radius_min=args.radius_min,
        radius_max=args.radius_max,
        rect=args.rect,
        color_from=args.color_from,
        color_to=args.color_to,
        color_space=args.color_space,
    )
    try:
        result = run_sampling(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
