"""Blizzard motion for the basin.

Evolution rules:
- Every blizzard moves one cell per tick in its own direction
- A blizzard that would leave the interior reappears on the opposite
  interior edge (the wall ring and its two openings are never entered)
- Blizzards landing on the same cell share it; their direction bits are
  OR-ed together, so the order in which blizzards are moved does not matter
- Walls never change
"""

from src.basin.types import OPEN, WALL, Cell, Snapshot, directions_in


def tick(snapshot: Snapshot) -> Snapshot:
    """Advance the basin by one tick.

    Args:
        snapshot: Current basin state

    Returns:
        Basin state one tick later
    """
    width, height = snapshot.width, snapshot.height
    inner_w, inner_h = snapshot.interior_width, snapshot.interior_height

    grid: list[list[Cell]] = [
        [WALL if cell == WALL else OPEN for cell in row] for row in snapshot.cells
    ]

    for y, row in enumerate(snapshot.cells):
        for x, cell in enumerate(row):
            if cell <= OPEN:
                continue
            for direction in directions_in(cell):
                dx, dy = direction.offset
                # Wrap within the interior: shift to 0-based interior coords, mod, shift back
                nx = (x - 1 + dx) % inner_w + 1
                ny = (y - 1 + dy) % inner_h + 1
                grid[ny][nx] |= direction

    return Snapshot(
        width=width,
        height=height,
        cells=tuple(tuple(int(c) for c in row) for row in grid),
    )


def run(snapshot: Snapshot, t: int) -> list[Snapshot]:
    """Run the basin for ``t`` ticks.

    Returns:
        Trajectory where trajectory[0] is the input and trajectory[t] the
        state after ``t`` ticks (length t+1)

    Raises:
        ValueError: If t is negative
    """
    if t < 0:
        raise ValueError(f"Tick count t must be non-negative, got {t}")

    trajectory = [snapshot]
    current = snapshot
    for _ in range(t):
        current = tick(current)
        trajectory.append(current)
    return trajectory
