"""Observable quantities of a basin snapshot.

These are the counts the simulator's invariants are stated in: ticking
conserves particle_count and every count_direction, while occupied_cells and
open_cells change whenever blizzards overlap or separate.
"""

from src.basin.types import OPEN, SYMBOL_TO_CELL, WALL, Direction, Snapshot, directions_in


def particle_count(snapshot: Snapshot) -> int:
    """Total number of blizzards, counting every blizzard in a shared cell."""
    return sum(len(directions_in(cell)) for row in snapshot.cells for cell in row)


def count_direction(snapshot: Snapshot, direction: Direction | str) -> int:
    """Count blizzards moving in one direction.

    Args:
        snapshot: Basin state
        direction: A Direction or its symbol (one of ^ v < >)

    Raises:
        ValueError: If a symbol other than ^ v < > is given
    """
    if isinstance(direction, str):
        if direction not in SYMBOL_TO_CELL or SYMBOL_TO_CELL[direction] <= OPEN:
            raise ValueError(f"Invalid direction symbol {direction!r}. Valid: ^ v < >")
        direction = Direction(SYMBOL_TO_CELL[direction])
    return sum(1 for row in snapshot.cells for cell in row if cell > OPEN and cell & direction)


def occupied_cells(snapshot: Snapshot) -> int:
    """Number of cells holding at least one blizzard."""
    return sum(1 for row in snapshot.cells for cell in row if cell > OPEN)


def open_cells(snapshot: Snapshot) -> int:
    """Number of cells the walker could stand on right now, openings included."""
    return sum(1 for row in snapshot.cells for cell in row if cell == OPEN)


def wall_cells(snapshot: Snapshot) -> int:
    return sum(1 for row in snapshot.cells for cell in row if cell == WALL)
