"""End-to-end solving: basin text in, fewest ticks out."""

import logging
from typing import Callable

from src.basin.config import SolverConfig
from src.basin.cycle import CycleCache
from src.basin.parser import from_text
from src.basin.search import trip_time
from src.basin.types import Pos, Snapshot

logger = logging.getLogger(__name__)


def crossing_waypoints(initial: Snapshot, trips: int) -> list[Pos]:
    """Start, end, start, ... for ``trips`` crossings (trips + 1 waypoints)."""
    start, end = initial.start(), initial.end()
    return [start if i % 2 == 0 else end for i in range(trips + 1)]


def solve(
    input_text: str,
    trips: int = 1,
    max_expansions: int | None = None,
    should_abort: Callable[[], bool] | None = None,
) -> int:
    """Fewest ticks to cross the basin ``trips`` times.

    Legs alternate start->end, end->start, ... and each leg starts when the
    previous one arrives.

    Raises:
        ParseError: If the text is not a well-formed basin
        UnreachableError: If some leg cannot be completed
        SearchAbortedError: If ``should_abort`` fired or the budget ran out
        ValueError: If trips < 1
    """
    if trips < 1:
        raise ValueError(f"trips must be >= 1, got {trips}")

    initial = from_text(input_text)
    cache = CycleCache.build(initial)

    total = trip_time(
        cache,
        crossing_waypoints(initial, trips),
        should_abort=should_abort,
        max_expansions=max_expansions,
    )
    logger.info(f"Crossed the basin {trips} time(s) in {total} ticks")
    return total


def solve_with_config(input_text: str, config: SolverConfig) -> int:
    return solve(input_text, trips=config.trips, max_expansions=config.max_expansions)
