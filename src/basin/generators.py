"""Random basin generator.

Builds well-formed basins at a given blizzard density, for exercising the
simulator and the search on more than the hand-written examples.
"""

import random

from src.basin.parser import from_text
from src.basin.types import Snapshot, Symbol

_BLIZZARDS = (Symbol.UP.value, Symbol.DOWN.value, Symbol.LEFT.value, Symbol.RIGHT.value)


def random_basin_text(
    interior_width: int,
    interior_height: int,
    density: float,
    seed: int,
) -> str:
    """Generate the text of a random basin.

    The start opening is above the first interior column and the end opening
    below the last one, like the puzzle inputs.

    Args:
        interior_width: Columns inside the walls (>= 1)
        interior_height: Rows inside the walls (>= 1)
        density: Fraction of interior cells holding a blizzard (0.0 to 1.0)
        seed: Random seed

    Raises:
        ValueError: On non-positive dimensions or a density outside [0, 1]
    """
    if interior_width < 1 or interior_height < 1:
        raise ValueError(
            f"Interior must be at least 1x1, got {interior_width}x{interior_height}"
        )
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0.0, 1.0], got {density}")

    rng = random.Random(seed)

    area = interior_width * interior_height
    num_blizzards = min(area, int(area * density))
    interior = [Symbol.OPEN.value] * area

    positions = list(range(area))
    rng.shuffle(positions)
    for pos in positions[:num_blizzards]:
        interior[pos] = rng.choice(_BLIZZARDS)

    wall = Symbol.WALL.value
    width = interior_width + 2
    top = wall + Symbol.OPEN.value + wall * (width - 2)
    bottom = wall * (width - 2) + Symbol.OPEN.value + wall

    rows = [top]
    for y in range(interior_height):
        cells = "".join(interior[y * interior_width:(y + 1) * interior_width])
        rows.append(wall + cells + wall)
    rows.append(bottom)
    return "\n".join(rows)


def random_basin(
    interior_width: int,
    interior_height: int,
    density: float,
    seed: int,
) -> Snapshot:
    """Generate a random basin and parse it. See random_basin_text."""
    return from_text(random_basin_text(interior_width, interior_height, density, seed))
