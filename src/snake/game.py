from __future__ import annotations
import random
from typing import Optional

import pygame

from . import config
from .controls import handle_key
from .movement import step
from .render import GridRenderer
from .state import GameState, new_game


TICK_EVENT = pygame.USEREVENT + 1


class SnakeGame:
    """Window, tick timer and key routing around the pure game functions.

    Starts idle (board only); the restart key starts the first game.
    """

    def __init__(self, tick_interval_ms: Optional[int] = None, seed: Optional[int] = None,
                 printer=None, verbose: bool = False):
        self.tick_interval_ms = config.TICK_INTERVAL_MS if tick_interval_ms is None else tick_interval_ms
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {self.tick_interval_ms}")
        self.verbose = verbose
        self.print = printer or (lambda *_args, **_kwargs: None)
        self.rng = random.Random(seed)
        self.renderer = GridRenderer()
        self.state: Optional[GameState] = None
        self.running = False

    def _say(self, msg: str) -> None:
        self.print(msg)

    @property
    def started(self) -> bool:
        return self.state is not None

    def start_new_game(self) -> GameState:
        self.state = new_game(rng=self.rng)
        self._say(f"game.start length={self.state.target_length} head={self.state.head.position} "
                  f"food={self.state.food} interval_ms={self.tick_interval_ms}")
        return self.state

    def on_tick(self) -> None:
        if self.state is None:
            return
        self.state = step(self.state)
        if self.verbose and config.VERBOSE_TICKS:
            self._say(f"game.tick head={self.state.head.position}")

    def on_key(self, key: int) -> str:
        state, action = handle_key(self.state, key, rng=self.rng)
        self.state = state
        if action == "restart":
            self._say(f"game.restart head={state.head.position} food={state.food}")
        elif action == "turn" and self.verbose:
            self._say(f"game.turn direction={state.direction.name} head={state.head.position}")
        return action

    def stop(self) -> None:
        self.running = False

    def run(self) -> None:
        pygame.init()
        try:
            screen = pygame.display.set_mode((config.BOARD_WIDTH, config.BOARD_HEIGHT))
            pygame.display.set_caption(config.WINDOW_TITLE)
            clock = pygame.time.Clock()
            pygame.time.set_timer(TICK_EVENT, self.tick_interval_ms)
            self._say("game.ready press SPACE to start")
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.stop()
                    elif event.type == pygame.KEYUP:
                        if event.key == pygame.K_ESCAPE:
                            self.stop()
                        else:
                            self.on_key(event.key)
                    elif event.type == TICK_EVENT:
                        self.on_tick()
                self.renderer.draw(screen, self.state)
                pygame.display.flip()
                clock.tick(config.FPS)
        finally:
            pygame.time.set_timer(TICK_EVENT, 0)
            pygame.quit()
            self._say("game.stop")
