from __future__ import annotations
import random
from dataclasses import replace
from typing import Dict, Optional, Tuple

import pygame

from .movement import step
from .state import Direction, GameState, new_game


KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

RESTART_KEY = pygame.K_SPACE


def change_direction(state: GameState, direction: Direction) -> GameState:
    """Turn, unless it would reverse straight into the body."""
    if direction in (state.direction, state.direction.opposite):
        return state
    return replace(state, direction=direction)


def handle_key(state: Optional[GameState], key: int,
               rng: Optional[random.Random] = None) -> Tuple[Optional[GameState], str]:
    """Apply one key press. Returns (new_state, action) with action in turn|restart|ignored.

    An actual turn moves the snake once right away instead of waiting for the next tick.
    """
    if key == RESTART_KEY:
        return new_game(rng=rng), "restart"
    direction = KEY_DIRECTIONS.get(key)
    if direction is None or state is None:
        return state, "ignored"
    turned = change_direction(state, direction)
    if turned.direction == state.direction:
        return state, "ignored"
    return step(turned), "turn"
