"""Precomputed blizzard cycle.

The blizzard layout is a deterministic function of elapsed time and the set
of possible layouts is finite, so ticking from any snapshot must eventually
revisit one. Each blizzard returns to its starting cell after interior_width
(horizontal) or interior_height (vertical) ticks, so the whole basin repeats
after at most lcm(interior_width, interior_height) ticks.

Ticking is a bijection on layouts (every blizzard can be moved back), which
means the first snapshot to recur is always the initial one: the recorded
sequence is a pure cycle with no lead-in.
"""

import logging
from dataclasses import dataclass

from src.basin.simulator import tick
from src.basin.types import Snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CycleCache:
    """Every distinct snapshot of one blizzard period, in tick order.

    Attributes:
        snapshots: snapshots[i] is the basin at any tick t with t % period == i
    """

    snapshots: tuple[Snapshot, ...]

    @property
    def period(self) -> int:
        return len(self.snapshots)

    def __len__(self) -> int:
        return len(self.snapshots)

    def at(self, t: int) -> Snapshot:
        """Return the basin at tick ``t``.

        Raises:
            ValueError: If t is negative
        """
        if t < 0:
            raise ValueError(f"Tick must be non-negative, got {t}")
        return self.snapshots[t % len(self.snapshots)]

    @classmethod
    def build(cls, initial: Snapshot) -> "CycleCache":
        """Tick from ``initial`` until a snapshot repeats and keep the cycle.

        Args:
            initial: Basin at tick 0

        Returns:
            CycleCache whose period is the number of distinct snapshots seen
        """
        seen: dict[Snapshot, int] = {}
        sequence: list[Snapshot] = []

        current = initial
        while current not in seen:
            seen[current] = len(sequence)
            sequence.append(current)
            current = tick(current)

        logger.info(
            f"Blizzard cycle has period {len(sequence)} "
            f"for a {initial.interior_width}x{initial.interior_height} interior"
        )
        return cls(snapshots=tuple(sequence))


def build(initial: Snapshot) -> CycleCache:
    """Build the cycle cache for ``initial``. See CycleCache.build."""
    return CycleCache.build(initial)
