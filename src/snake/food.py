from __future__ import annotations
import random
from typing import Iterable, Optional, Set

from . import config
from .state import Position, Segment


class FoodPlacementError(RuntimeError):
    pass


def next_food_position(segments: Iterable[Segment], width: int, height: int,
                       cell_size: int = config.CELL_SIZE,
                       rng: Optional[random.Random] = None,
                       max_attempts: Optional[int] = None) -> Position:
    """Pick a grid-aligned cell inside width x height by rejection sampling.

    A candidate is rejected while its x is used by some segment AND its y is
    used by some segment (not necessarily the same one). This also rejects
    free cells in the rows/columns spanned by the snake.
    """
    cols = width // cell_size
    rows = height // cell_size
    if cols <= 0 or rows <= 0:
        raise FoodPlacementError(f"no cells on a {width}x{height} board with cell size {cell_size}")
    if max_attempts is None:
        max_attempts = config.FOOD_MAX_ATTEMPTS
    rnd = rng or random.Random()
    occupied_x: Set[int] = set()
    occupied_y: Set[int] = set()
    for seg in segments:
        occupied_x.add(seg.position[0])
        occupied_y.add(seg.position[1])

    for _ in range(max_attempts):
        x = rnd.randrange(cols) * cell_size
        y = rnd.randrange(rows) * cell_size
        if not (x in occupied_x and y in occupied_y):
            return (x, y)
    raise FoodPlacementError(f"no free cell found after {max_attempts} attempts")
