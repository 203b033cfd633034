"""Configuration for the basin solver."""

import hashlib
import json
import logging
import os
from dataclasses import dataclass

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SolverConfig:
    """Configuration for one solve.

    Attributes:
        trips: Number of legs to walk, alternating start->end and end->start.
            1 is a single crossing; 3 goes back to the start and out again.
        max_expansions: Optional cap on BFS expansions per leg
        log_level: Name of the logging level used by the command line
    """

    trips: int = 1
    max_expansions: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.trips < 1:
            raise ValueError(f"trips must be >= 1, got {self.trips}")
        if self.max_expansions is not None and self.max_expansions < 1:
            raise ValueError(f"max_expansions must be >= 1, got {self.max_expansions}")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {self.log_level!r}")

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "SolverConfig":
        """Build a config from BASIN_* environment variables.

        Unset variables keep their defaults. Call ``load_dotenv()`` first to
        pick up a ``.env`` file.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if env.get("BASIN_TRIPS"):
            kwargs["trips"] = _parse_int("BASIN_TRIPS", env["BASIN_TRIPS"])
        if env.get("BASIN_MAX_EXPANSIONS"):
            kwargs["max_expansions"] = _parse_int(
                "BASIN_MAX_EXPANSIONS", env["BASIN_MAX_EXPANSIONS"]
            )
        if env.get("BASIN_LOG_LEVEL"):
            kwargs["log_level"] = env["BASIN_LOG_LEVEL"]

        return cls(**kwargs)

    def content_hash(self) -> str:
        """Compute a hash of the settings that affect the answer."""
        content = {
            "trips": self.trips,
            "max_expansions": self.max_expansions,
        }
        content_str = json.dumps(content, sort_keys=True)
        return hashlib.sha256(content_str.encode()).hexdigest()[:16]


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
