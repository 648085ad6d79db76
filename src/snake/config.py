from __future__ import annotations
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


# Board geometry is fixed; only timing, colours and output are configurable
CELL_SIZE = 20
BOARD_COLS = 20
BOARD_ROWS = 20
BOARD_WIDTH = CELL_SIZE * BOARD_COLS
BOARD_HEIGHT = CELL_SIZE * BOARD_ROWS


# Load config from appconfig.json at repo root, with environment overrides
def _default_config() -> Dict[str, Any]:
    return {
        "game": {
            "tickIntervalMs": 400,
            "startLength": 3  # up to 6 cells are laid out at start, the rest grows in
        },
        "food": {
            "maxAttempts": 10000
        },
        "colors": {
            "snakeBody": [0, 128, 0],      # green
            "snakeHead": [154, 205, 50],   # yellow-green
            "food": [255, 0, 0],
            "gridLight": [255, 255, 255],
            "gridDark": [0, 0, 0]
        },
        "window": {
            "title": "SnakeXenzia",
            "fps": 60
        },
        "verbose": {
            "ticks": False
        }
    }


def _config_path() -> Path:
    env_path = os.getenv("SNAKE_CONFIG")
    if env_path:
        return Path(env_path)
    # repo root assumed two levels up from this file: src/snake/config.py -> repo/
    return Path(__file__).resolve().parents[2] / "appconfig.json"


def _merge(dst: Dict[str, Any], src: Dict[str, Any]) -> None:
    for k, v in src.items():
        if isinstance(v, dict) and isinstance(dst.get(k), dict):
            _merge(dst[k], v)
        else:
            dst[k] = v


def _load_json_config(path: Optional[Path] = None) -> Dict[str, Any]:
    cfg_path = path or _config_path()
    data = _default_config()
    if cfg_path.exists():
        try:
            with cfg_path.open("r", encoding="utf-8") as f:
                user = json.load(f)
        except (OSError, ValueError):
            # If config broken, keep defaults
            user = None
        if isinstance(user, dict):
            _merge(data, user)
    # env override for tick interval if present
    tick = os.getenv("SNAKE_TICK_MS")
    if tick:
        try:
            data.setdefault("game", {})["tickIntervalMs"] = int(tick)
        except ValueError:
            pass
    return data


CONFIG: Dict[str, Any] = _load_json_config()


def cfg(path: str, default: Any = None) -> Any:
    cur: Any = CONFIG
    for p in path.split('.'):
        if not isinstance(cur, dict) or p not in cur:
            return default
        cur = cur[p]
    return cur


def color(name: str) -> Tuple[int, int, int]:
    rgb = cfg(f"colors.{name}") or _default_config()["colors"][name]
    return (int(rgb[0]), int(rgb[1]), int(rgb[2]))


# Module-level constants mapped from CONFIG
TICK_INTERVAL_MS = int(cfg("game.tickIntervalMs", 400))
START_LENGTH = int(cfg("game.startLength", 3))
FOOD_MAX_ATTEMPTS = int(cfg("food.maxAttempts", 10000))
WINDOW_TITLE = cfg("window.title", "SnakeXenzia")
FPS = int(cfg("window.fps", 60))
VERBOSE_TICKS = bool(cfg("verbose.ticks", False))


def reload_config(path: Optional[Path] = None) -> None:
    global CONFIG, TICK_INTERVAL_MS, START_LENGTH, FOOD_MAX_ATTEMPTS, WINDOW_TITLE, FPS, VERBOSE_TICKS
    CONFIG = _load_json_config(path)
    TICK_INTERVAL_MS = int(cfg("game.tickIntervalMs", 400))
    START_LENGTH = int(cfg("game.startLength", 3))
    FOOD_MAX_ATTEMPTS = int(cfg("food.maxAttempts", 10000))
    WINDOW_TITLE = cfg("window.title", "SnakeXenzia")
    FPS = int(cfg("window.fps", 60))
    VERBOSE_TICKS = bool(cfg("verbose.ticks", False))
