from __future__ import annotations
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from . import config


Position = Tuple[int, int]


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


@dataclass(frozen=True)
class Segment:
    """A single cell of the snake, in pixels. The head is flagged."""
    position: Position
    is_head: bool = False


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of one game at a point in time.

    Attributes:
        segments: oldest (tail) first, head last
        direction: where the next tick moves the head
        target_length: segments beyond this are dropped from the tail
        food: pixel position of the food cell, if placed
    """
    segments: Tuple[Segment, ...] = field(default_factory=tuple)
    direction: Direction = Direction.RIGHT
    target_length: int = 3
    food: Optional[Position] = None

    @property
    def head(self) -> Segment:
        return self.segments[-1]

    @property
    def positions(self) -> Tuple[Position, ...]:
        return tuple(s.position for s in self.segments)


def new_game(rng: Optional[random.Random] = None,
             start_length: Optional[int] = None,
             cell_size: int = config.CELL_SIZE,
             width: int = config.BOARD_WIDTH,
             height: int = config.BOARD_HEIGHT,
             max_attempts: Optional[int] = None) -> GameState:
    """Fresh game: head at cell (5, 5) moving right, body trailing to the left, food placed.

    Only the cells between the left edge and the head are laid out; a longer
    start length grows in over the first ticks.
    """
    from .food import next_food_position

    length = config.START_LENGTH if start_length is None else start_length
    if length < 1:
        raise ValueError(f"start length must be at least 1, got {length}")
    head_x = head_y = cell_size * 5
    laid_out = min(length, head_x // cell_size + 1)
    segments = tuple(
        Segment(position=(head_x - i * cell_size, head_y), is_head=(i == 0))
        for i in range(laid_out - 1, -1, -1)
    )
    food = next_food_position(segments, width, height, cell_size=cell_size, rng=rng,
                              max_attempts=max_attempts)
    return GameState(segments=segments, direction=Direction.RIGHT, target_length=length, food=food)
