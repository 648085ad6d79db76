from __future__ import annotations
from dataclasses import replace

from . import config
from .state import Direction, GameState, Position, Segment


def next_head(position: Position, direction: Direction, cell_size: int = config.CELL_SIZE) -> Position:
    return (position[0] + direction.dx * cell_size, position[1] + direction.dy * cell_size)


def step(state: GameState, cell_size: int = config.CELL_SIZE) -> GameState:
    """Advance one cell: new head in front, old head becomes body, tail trimmed to target length.

    No wall, self or food collision is checked; the head may leave the board.
    """
    if not state.segments:
        return state
    old_head = state.segments[-1]
    body = list(state.segments[:-1])
    body.append(Segment(position=old_head.position, is_head=False))
    body.append(Segment(position=next_head(old_head.position, state.direction, cell_size), is_head=True))
    # drop from the oldest end
    excess = len(body) - state.target_length
    if excess > 0:
        body = body[excess:]
    return replace(state, segments=tuple(body))
