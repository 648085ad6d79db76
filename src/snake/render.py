from __future__ import annotations
from typing import Dict, Optional, Tuple

import pygame

from . import config
from .state import GameState


Color = Tuple[int, int, int]


def default_colors() -> Dict[str, Color]:
    return {name: config.color(name) for name in ("snakeBody", "snakeHead", "food", "gridLight", "gridDark")}


class GridRenderer:
    """Draws a GameState snapshot onto a pygame surface. Holds no game state of its own."""

    def __init__(self, cell_size: int = config.CELL_SIZE, colors: Optional[Dict[str, Color]] = None):
        self.cell_size = cell_size
        self.colors = default_colors()
        if colors:
            self.colors.update(colors)

    def draw_background(self, surface: pygame.Surface) -> None:
        # Checkerboard covering the whole surface, partial edge cells included
        width, height = surface.get_size()
        size = self.cell_size
        for row, y in enumerate(range(0, height, size)):
            for col, x in enumerate(range(0, width, size)):
                fill = self.colors["gridLight"] if (col + row) % 2 else self.colors["gridDark"]
                pygame.draw.rect(surface, fill, pygame.Rect(x, y, size, size))

    def draw(self, surface: pygame.Surface, state: Optional[GameState]) -> None:
        self.draw_background(surface)
        if state is None:
            return
        size = self.cell_size
        for seg in state.segments:
            fill = self.colors["snakeHead"] if seg.is_head else self.colors["snakeBody"]
            pygame.draw.rect(surface, fill, pygame.Rect(seg.position[0], seg.position[1], size, size))
        if state.food is not None:
            pygame.draw.ellipse(surface, self.colors["food"], pygame.Rect(state.food[0], state.food[1], size, size))
