"""Command line harness for inspecting a seeded tails random stream."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_draws.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from tails_random import DrawConfig, run_draws

logger = logging.getLogger("tails_random.cli")


def _non_negative_int(value: str) -> int:
    """Parse a count-like CLI option."""

    try:
        parsed = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc

    if parsed < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer, received {parsed}.")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw values from the tails seedable PRNG")
    parser.add_argument("--seed", default="", help="Seed string (any text, empty allowed)")
    parser.add_argument(
        "--count",
        type=_non_negative_int,
        default=5,
        help="Number of draws to record",
    )
    parser.add_argument(
        "--skip",
        type=_non_negative_int,
        default=0,
        help="Draws to discard before recording starts",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_draws.json under the repository root."
        ),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log verbosity (written to stderr)",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")

    cfg = DrawConfig(seed=args.seed, count=args.count, skip=args.skip)
    result = run_draws(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("report written to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
