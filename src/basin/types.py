"""Type definitions for the blizzard basin.

A basin is a walled rectangle. Every interior cell is either open or holds one
or more blizzards, each drifting in a fixed cardinal direction. Cells are
stored as small integers:

    WALL   = -1
    OPEN   = 0
    other  = bitmask of the Direction flags of the blizzards in the cell
"""

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Final, NamedTuple


class Symbol(str, Enum):
    """Characters used in the textual form of a basin.

    . = open cell
    # = wall
    ^ v < > = blizzard moving up / down / left / right
    """

    OPEN = "."
    WALL = "#"
    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"


class Direction(IntFlag):
    """Cardinal direction of a blizzard, one bit per direction.

    Several directions OR-ed together form the direction set of a cell shared
    by more than one blizzard.
    """

    RIGHT = 0b0001
    LEFT = 0b0010
    DOWN = 0b0100
    UP = 0b1000

    @property
    def offset(self) -> tuple[int, int]:
        """Unit (dx, dy) step of a single direction."""
        return _OFFSETS[self]

    @property
    def symbol(self) -> Symbol:
        return _SYMBOLS[self]


class CellKind(str, Enum):
    """Classification of a single cell."""

    OPEN = "open"
    WALL = "wall"
    OCCUPIED = "occupied"


class Pos(NamedTuple):
    """Cell coordinate: x is the column, y is the row (row 0 is the top)."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> "Pos":
        return Pos(self.x + dx, self.y + dy)

    def neighbours(self) -> list["Pos"]:
        """The four orthogonal neighbours, in Direction order."""
        return [self.shifted(*d.offset) for d in DIRECTIONS]


Cell = int

WALL: Final[Cell] = -1
OPEN: Final[Cell] = 0

# Iteration order used everywhere a cell's direction set is expanded
DIRECTIONS: Final[tuple[Direction, ...]] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)

_OFFSETS: Final[dict[Direction, tuple[int, int]]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_SYMBOLS: Final[dict[Direction, Symbol]] = {
    Direction.UP: Symbol.UP,
    Direction.DOWN: Symbol.DOWN,
    Direction.LEFT: Symbol.LEFT,
    Direction.RIGHT: Symbol.RIGHT,
}

SYMBOL_TO_CELL: Final[dict[str, Cell]] = {
    Symbol.OPEN.value: OPEN,
    Symbol.WALL.value: WALL,
    Symbol.UP.value: int(Direction.UP),
    Symbol.DOWN.value: int(Direction.DOWN),
    Symbol.LEFT.value: int(Direction.LEFT),
    Symbol.RIGHT.value: int(Direction.RIGHT),
}

VALID_SYMBOLS: Final[frozenset[str]] = frozenset(s.value for s in Symbol)


def directions_in(cell: Cell) -> list[Direction]:
    """Expand a cell's direction set into its individual directions."""
    if cell <= OPEN:
        return []
    return [d for d in DIRECTIONS if cell & d]


def classify(cell: Cell) -> CellKind:
    if cell == WALL:
        return CellKind.WALL
    if cell == OPEN:
        return CellKind.OPEN
    return CellKind.OCCUPIED


@dataclass(frozen=True)
class Snapshot:
    """The full basin at one tick.

    Snapshots are immutable and compare/hash by value, so they can be used as
    dictionary keys while searching for the blizzard cycle.

    Attributes:
        width: Number of columns, walls included
        height: Number of rows, walls included
        cells: Row-major cell values, ``cells[y][x]``
    """

    width: int
    height: int
    cells: tuple[tuple[Cell, ...], ...]

    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def interior_width(self) -> int:
        return self.width - 2

    @property
    def interior_height(self) -> int:
        return self.height - 2

    def in_bounds(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def in_interior(self, pos: Pos) -> bool:
        return 1 <= pos.x < self.width - 1 and 1 <= pos.y < self.height - 1

    def cell(self, pos: Pos) -> Cell:
        return self.cells[pos.y][pos.x]

    def kind(self, pos: Pos) -> CellKind:
        return classify(self.cell(pos))

    def is_open(self, pos: Pos) -> bool:
        """True iff ``pos`` is inside the grid and holds neither wall nor blizzard."""
        return self.in_bounds(pos) and self.cells[pos.y][pos.x] == OPEN

    def start(self) -> Pos:
        """The opening in the top wall."""
        return Pos(_opening(self.cells[0]), 0)

    def end(self) -> Pos:
        """The opening in the bottom wall."""
        return Pos(_opening(self.cells[-1]), self.height - 1)

    def render(self) -> str:
        """Draw the snapshot as text.

        A cell shared by several blizzards is drawn as the number of blizzards
        in it, so only overlap-free snapshots render back to parseable text.
        """
        return "\n".join("".join(_render_cell(c) for c in row) for row in self.cells)

    def __str__(self) -> str:
        return self.render()


def _opening(row: tuple[Cell, ...]) -> int:
    for x, cell in enumerate(row):
        if cell != WALL:
            return x
    raise ValueError("Wall row has no opening")


def _render_cell(cell: Cell) -> str:
    if cell == WALL:
        return Symbol.WALL.value
    if cell == OPEN:
        return Symbol.OPEN.value
    directions = directions_in(cell)
    if len(directions) == 1:
        return directions[0].symbol.value
    return str(len(directions))
