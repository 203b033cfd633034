"""Exception hierarchy for the blizzard basin solver."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.basin.types import Pos


class BasinError(Exception):
    """Base exception for all basin errors."""


class ParseError(BasinError):
    """Basin text is malformed.

    ``row`` and ``column`` locate the offending character when known
    (0-based, walls included).
    """

    def __init__(self, message: str, row: int | None = None, column: int | None = None):
        if row is not None and column is not None:
            message = f"{message} (row {row}, column {column})"
        elif row is not None:
            message = f"{message} (row {row})"
        super().__init__(message)
        self.row = row
        self.column = column


class UnreachableError(BasinError):
    """The search ran out of states before reaching the target."""

    def __init__(self, start: Pos, end: Pos, start_tick: int, explored: int):
        super().__init__(
            f"No path from {tuple(start)} to {tuple(end)} starting at tick {start_tick} "
            f"({explored} states explored)"
        )
        self.start = start
        self.end = end
        self.start_tick = start_tick
        self.explored = explored


class SearchAbortedError(BasinError):
    """The search was stopped by its abort hook or expansion budget."""

    def __init__(self, expanded: int, reason: str):
        super().__init__(f"Search aborted after {expanded} expansions: {reason}")
        self.expanded = expanded
        self.reason = reason
