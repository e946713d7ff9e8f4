"""Command line harness for the Marsaglia universal generator."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "uni_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from unirand import InvalidSeed, SampleConfig, run_sample
from unirand.sample import MIN_PRECISION


def _parse_count(value: str) -> int:
    """Parse a strictly positive draw count."""

    try:
        count = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Count must be an integer.") from exc

    if count < 1:
        raise argparse.ArgumentTypeError(f"Count must be positive, received {count}.")
    return count


def _parse_precision(value: str) -> int:
    try:
        precision = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Precision must be an integer.") from exc

    if precision < MIN_PRECISION:
        raise argparse.ArgumentTypeError(
            f"Precision must be at least {MIN_PRECISION}, received {precision}."
        )
    return precision


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"Unknown log level: {value}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw values from Marsaglia's universal generator")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=170,
        help="Generator seed in [0, 900000000] (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument("--count", type=_parse_count, default=1, help="Number of values to draw")
    parser.add_argument(
        "--precision",
        type=_parse_precision,
        default=8,
        help="Decimal places kept for reported values",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "uni_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument(
        "--log-level",
        type=_parse_log_level,
        default=logging.WARNING,
        help="Logging verbosity (e.g. DEBUG, INFO, WARNING)",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level)

    cfg = SampleConfig(seed=args.seed, count=args.count, precision=args.precision)
    try:
        result = run_sample(cfg)
    except InvalidSeed as exc:
        parser.error(exc.reason)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
