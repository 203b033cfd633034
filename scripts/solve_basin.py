#!/usr/bin/env python3
"""Find the fewest ticks needed to cross a blizzard basin.

Reads the basin from a file (or stdin) and prints a single integer.

Environment (a .env file in the working directory is loaded first):
    BASIN_TRIPS            Number of crossings (default: 1)
    BASIN_MAX_EXPANSIONS   BFS expansion budget per crossing (default: none)
    BASIN_LOG_LEVEL        Logging level (default: WARNING)

Usage:
    # Single crossing
    python scripts/solve_basin.py input.txt

    # There, back for the snacks, and there again
    python scripts/solve_basin.py input.txt --trips 3

    # From stdin, reporting the blizzard period
    cat input.txt | python scripts/solve_basin.py --show-period
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.basin.config import SolverConfig
from src.basin.cycle import CycleCache
from src.basin.errors import BasinError
from src.basin.parser import from_text
from src.basin.search import trip_time
from src.basin.solve import crossing_waypoints

logger = logging.getLogger("solve_basin")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        description="Fewest ticks to cross a blizzard basin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Basin file, or - for stdin (default: -)",
    )

    parser.add_argument(
        "--trips",
        type=int,
        default=None,
        help="Number of crossings, alternating direction (default: BASIN_TRIPS or 1)",
    )

    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="BFS expansion budget per crossing (default: BASIN_MAX_EXPANSIONS or none)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (default: BASIN_LOG_LEVEL or WARNING)",
    )

    parser.add_argument(
        "--show-period",
        action="store_true",
        help="Also print the blizzard period to stderr",
    )

    return parser


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = SolverConfig.from_env()
        config = SolverConfig(
            trips=args.trips if args.trips is not None else config.trips,
            max_expansions=(
                args.max_expansions if args.max_expansions is not None else config.max_expansions
            ),
            log_level=args.log_level or config.log_level,
        )
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        text = read_input(args.input)
    except OSError as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    try:
        initial = from_text(text)
        cache = CycleCache.build(initial)
        if args.show_period:
            print(f"Blizzard period: {cache.period}", file=sys.stderr)
        answer = trip_time(
            cache,
            crossing_waypoints(initial, config.trips),
            max_expansions=config.max_expansions,
        )
    except BasinError as e:
        logger.debug("Solve failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
