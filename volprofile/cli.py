"""
Command-line entry point for volume profile queries.

Loads the profile for a symbol through the fallback chain and reports the
expected cumulative volume and normalized execution target for a period.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from volprofile.errors import InvalidRangeError
from volprofile.logging.config import configure_logging, get_logger
from volprofile.profile.loader import ProfileLoader
from volprofile.utils.time import parse_clock


def _clock(value: str):
    try:
        return parse_clock(value, "%H:%M:%S" if value.count(":") == 2 else "%H:%M")
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid time {value!r}, expected HH:MM or HH:MM:SS") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="volprofile",
        description="Query an intraday volume profile.",
    )
    parser.add_argument("--symbol", default="0700_HK", help="Instrument profile to load first")
    parser.add_argument("--market", default=None, help="Market default profile (default: from config)")
    parser.add_argument("--from", dest="from_time", type=_clock, default=_clock("09:30"),
                        help="Start of the execution period")
    parser.add_argument("--to", dest="to_time", type=_clock, default=_clock("11:30"),
                        help="End of the execution period")
    parser.add_argument("--at", dest="at_time", type=_clock, default=_clock("10:15"),
                        help="Instant to compute the normalized target for")
    parser.add_argument("--config-dir", type=Path, default=None, help="Directory holding markets.yaml")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.json_logs)
    logger = get_logger("volprofile.cli")

    loader = ProfileLoader.create(market=args.market, config_dir=args.config_dir)
    profile = loader.load(symbol=args.symbol)

    try:
        cumulative = profile.cumulative_percentage(args.from_time, args.to_time)
        target = profile.normalized_target(args.at_time, args.from_time, args.to_time)
    except InvalidRangeError as e:
        logger.error("Invalid query range", reason=str(e))
        return 2

    logger.info("Entry at period start", entry=profile.describe_entry(args.from_time))
    logger.info(
        "Cumulative volume",
        from_time=str(args.from_time),
        to_time=str(args.to_time),
        cumulative=f"{cumulative * 100:.2f}%",
        origin=profile.origin,
    )
    logger.info(
        "Normalized target",
        at_time=str(args.at_time),
        from_time=str(args.from_time),
        to_time=str(args.to_time),
        target=f"{target * 100:.2f}%",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
