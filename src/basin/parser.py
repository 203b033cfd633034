"""Parsing and validation of basin text.

A well-formed basin:
- Is a rectangle of at least 3x3 characters from ``. # ^ v < >``
- Has an outer ring made entirely of ``#`` except one ``.`` opening in the
  top row (the start) and one ``.`` opening in the bottom row (the end)
- Has no walls inside the ring, so every blizzard lives in the interior

Parsing is all-or-nothing: the first problem raises ParseError and no
Snapshot is built.
"""

from typing import Iterable

from src.basin.errors import ParseError
from src.basin.types import SYMBOL_TO_CELL, VALID_SYMBOLS, Snapshot, Symbol


def split_rows(text: str) -> list[str]:
    """Split basin text into rows, dropping surrounding blank lines and whitespace."""
    rows = [line.strip() for line in text.splitlines()]
    while rows and not rows[0]:
        rows.pop(0)
    while rows and not rows[-1]:
        rows.pop()
    return rows


def validate_rows(rows: list[str]) -> None:
    """Validate basin rows, raising ParseError if they are malformed.

    Args:
        rows: One string per grid row, top row first

    Raises:
        ParseError: On the first structural problem found
    """
    if not rows:
        raise ParseError("Basin is empty")

    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ParseError(
                f"Row has {len(row)} cells, expected {width} like the first row", row=y
            )
        for x, c in enumerate(row):
            if c not in VALID_SYMBOLS:
                raise ParseError(
                    f"Invalid character {c!r}. Valid symbols are: {sorted(VALID_SYMBOLS)}",
                    row=y,
                    column=x,
                )

    height = len(rows)
    if width < 3 or height < 3:
        raise ParseError(f"Basin of {width}x{height} has no interior; need at least 3x3")

    wall = Symbol.WALL.value
    for y in range(1, height - 1):
        for x in (0, width - 1):
            if rows[y][x] != wall:
                raise ParseError("Side wall is broken", row=y, column=x)
        for x in range(1, width - 1):
            if rows[y][x] == wall:
                raise ParseError("Walls are only allowed on the outer ring", row=y, column=x)

    _validate_wall_row(rows[0], 0, "start")
    _validate_wall_row(rows[-1], height - 1, "end")


def _validate_wall_row(row: str, y: int, label: str) -> None:
    openings = [x for x, c in enumerate(row) if c != Symbol.WALL.value]
    if not openings:
        raise ParseError(f"Missing {label} opening", row=y)
    if len(openings) > 1:
        raise ParseError(
            f"Expected one {label} opening, found {len(openings)} at columns {openings}", row=y
        )

    x = openings[0]
    if x in (0, len(row) - 1):
        raise ParseError(f"The {label} opening cannot be a corner", row=y, column=x)
    if row[x] != Symbol.OPEN.value:
        raise ParseError(f"The {label} opening must be open, found {row[x]!r}", row=y, column=x)


def is_valid_basin(text: str) -> bool:
    """Check whether text describes a well-formed basin. Never raises."""
    try:
        validate_rows(split_rows(text))
    except ParseError:
        return False
    return True


def from_text(text: str | Iterable[str]) -> Snapshot:
    """Parse a basin into its initial Snapshot.

    Args:
        text: The whole basin as one string, or an iterable of rows

    Returns:
        Snapshot at tick 0

    Raises:
        ParseError: If the text is not a well-formed basin
    """
    if isinstance(text, str):
        rows = split_rows(text)
    else:
        rows = split_rows("\n".join(text))

    validate_rows(rows)

    cells = tuple(tuple(SYMBOL_TO_CELL[c] for c in row) for row in rows)
    return Snapshot(width=len(rows[0]), height=len(rows), cells=cells)
