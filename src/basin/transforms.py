"""Symmetry transforms for basin snapshots.

Both mirrors are true symmetries of the blizzard motion (they commute with
evolution):
    tick(mirror_horizontal(S)) == mirror_horizontal(tick(S))
    tick(mirror_vertical(S)) == mirror_vertical(tick(S))

Mirroring keeps the snapshot well-formed: the openings move to the mirrored
columns (horizontal) or swap between top and bottom rows (vertical).
"""

from src.basin.types import OPEN, Cell, Direction, Snapshot

_HORIZONTAL_SWAP = {Direction.LEFT: Direction.RIGHT, Direction.RIGHT: Direction.LEFT}
_VERTICAL_SWAP = {Direction.UP: Direction.DOWN, Direction.DOWN: Direction.UP}


def _swap_bits(cell: Cell, swap: dict[Direction, Direction]) -> Cell:
    if cell <= OPEN:
        return cell
    out = 0
    for d in Direction:
        if cell & d:
            out |= swap.get(d, d)
    return int(out)


def mirror_horizontal(snapshot: Snapshot) -> Snapshot:
    """Reverse every row and swap < with >."""
    cells = tuple(
        tuple(_swap_bits(c, _HORIZONTAL_SWAP) for c in reversed(row)) for row in snapshot.cells
    )
    return Snapshot(width=snapshot.width, height=snapshot.height, cells=cells)


def mirror_vertical(snapshot: Snapshot) -> Snapshot:
    """Reverse the row order and swap ^ with v."""
    cells = tuple(
        tuple(_swap_bits(c, _VERTICAL_SWAP) for c in row) for row in reversed(snapshot.cells)
    )
    return Snapshot(width=snapshot.width, height=snapshot.height, cells=cells)
