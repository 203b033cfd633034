"""Breadth-first search through the moving basin.

A search state is (position, tick). From (p, t) the walker may stay at p or
step to one of its four neighbours, landing at tick t+1; a move is legal iff
the destination is open in the snapshot for t+1. Every move costs one tick, so
BFS reaches each state at its earliest possible tick.

Visited states are keyed on (position, tick % period). Two states that share
a position and a residue class face the same basin from then on, and BFS
dequeues ticks in non-decreasing order, so only the first arrival in a class
can lead anywhere new. This bounds the search to area x period states and
makes an unreachable target end the search instead of looping forever.
"""

import logging
from collections import deque
from typing import Callable, NamedTuple, Sequence

from src.basin.cycle import CycleCache
from src.basin.errors import SearchAbortedError, UnreachableError
from src.basin.types import Pos

logger = logging.getLogger(__name__)


class SearchState(NamedTuple):
    """The walker at ``pos`` after ``tick`` ticks of basin time."""

    pos: Pos
    tick: int


def _successors(cache: CycleCache, state: SearchState) -> list[SearchState]:
    t = state.tick + 1
    nxt = cache.at(t)
    return [SearchState(p, t) for p in (state.pos, *state.pos.neighbours()) if nxt.is_open(p)]


def _bfs(
    cache: CycleCache,
    start: Pos,
    end: Pos,
    start_tick: int,
    should_abort: Callable[[], bool] | None,
    max_expansions: int | None,
) -> tuple[SearchState, dict[tuple[Pos, int], SearchState | None]]:
    if start_tick < 0:
        raise ValueError(f"start_tick must be non-negative, got {start_tick}")
    if max_expansions is not None and max_expansions < 1:
        raise ValueError(f"max_expansions must be >= 1, got {max_expansions}")

    period = cache.period
    origin = SearchState(Pos(*start), start_tick)
    parents: dict[tuple[Pos, int], SearchState | None] = {
        (origin.pos, start_tick % period): None
    }
    if origin.pos == end:
        return origin, parents

    frontier: deque[SearchState] = deque([origin])
    expanded = 0

    while frontier:
        if should_abort is not None and should_abort():
            raise SearchAbortedError(expanded, "abort requested")
        if max_expansions is not None and expanded >= max_expansions:
            raise SearchAbortedError(expanded, f"expansion budget of {max_expansions} used up")

        state = frontier.popleft()
        expanded += 1

        for succ in _successors(cache, state):
            key = (succ.pos, succ.tick % period)
            if key in parents:
                continue
            parents[key] = state
            if succ.pos == end:
                logger.debug(
                    f"Reached {tuple(end)} at tick {succ.tick} after {expanded} expansions"
                )
                return succ, parents
            frontier.append(succ)

    raise UnreachableError(origin.pos, Pos(*end), start_tick, len(parents))


def shortest_time(
    cache: CycleCache,
    start: Pos,
    end: Pos,
    start_tick: int = 0,
    should_abort: Callable[[], bool] | None = None,
    max_expansions: int | None = None,
) -> int:
    """Fewest ticks needed to walk from ``start`` to ``end``.

    Args:
        cache: Blizzard cycle of the basin
        start: Walker's position at ``start_tick``
        end: Target position
        start_tick: Basin time at which the walk begins
        should_abort: Polled before each expansion; returning True stops the search
        max_expansions: Optional cap on the number of states expanded

    Returns:
        Elapsed ticks from ``start_tick`` until the walker first stands on ``end``

    Raises:
        UnreachableError: If no sequence of moves reaches ``end``
        SearchAbortedError: If ``should_abort`` fired or the budget ran out
    """
    goal, _ = _bfs(cache, start, end, start_tick, should_abort, max_expansions)
    return goal.tick - start_tick


def shortest_path(
    cache: CycleCache,
    start: Pos,
    end: Pos,
    start_tick: int = 0,
    should_abort: Callable[[], bool] | None = None,
    max_expansions: int | None = None,
) -> list[SearchState]:
    """Like shortest_time, but return every state of one fastest walk.

    The list runs from (start, start_tick) to the first arrival at ``end``
    inclusive, so ``len(path) - 1`` equals the shortest time.
    """
    goal, parents = _bfs(cache, start, end, start_tick, should_abort, max_expansions)
    period = cache.period

    path = [goal]
    parent = parents[(goal.pos, goal.tick % period)]
    while parent is not None:
        path.append(parent)
        parent = parents[(parent.pos, parent.tick % period)]
    path.reverse()
    return path


def trip_time(
    cache: CycleCache,
    waypoints: Sequence[Pos],
    start_tick: int = 0,
    should_abort: Callable[[], bool] | None = None,
    max_expansions: int | None = None,
) -> int:
    """Total ticks to visit ``waypoints`` in order.

    Each leg begins at the tick the previous leg arrived, so blizzard timing
    carries over between legs. ``max_expansions`` applies per leg.

    Raises:
        ValueError: If fewer than two waypoints are given
    """
    if len(waypoints) < 2:
        raise ValueError(f"A trip needs at least two waypoints, got {len(waypoints)}")

    t = start_tick
    for leg, (a, b) in enumerate(zip(waypoints, waypoints[1:]), start=1):
        elapsed = shortest_time(cache, a, b, t, should_abort, max_expansions)
        logger.debug(f"Leg {leg}: {tuple(a)} -> {tuple(b)} took {elapsed} ticks")
        t += elapsed
    return t - start_tick
