from src.basin.config import SolverConfig
from src.basin.cycle import CycleCache, build
from src.basin.errors import BasinError, ParseError, SearchAbortedError, UnreachableError
from src.basin.parser import from_text, is_valid_basin, validate_rows
from src.basin.search import SearchState, shortest_path, shortest_time, trip_time
from src.basin.simulator import run, tick
from src.basin.solve import solve, solve_with_config
from src.basin.types import Direction, Pos, Snapshot, Symbol

__all__ = [
    # Types
    "Direction",
    "Pos",
    "Snapshot",
    "Symbol",
    # Parsing
    "from_text",
    "is_valid_basin",
    "validate_rows",
    # Simulator
    "tick",
    "run",
    # Cycle cache
    "CycleCache",
    "build",
    # Search
    "SearchState",
    "shortest_time",
    "shortest_path",
    "trip_time",
    # Entry points
    "solve",
    "solve_with_config",
    "SolverConfig",
    # Errors
    "BasinError",
    "ParseError",
    "UnreachableError",
    "SearchAbortedError",
]
