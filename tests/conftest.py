"""Test bootstrap: headless pygame and built-in config defaults.

Both must be set before `src.snake.config` and pygame are imported by any test module.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path


HERE = Path(__file__).resolve()
REPO_ROOT = HERE.parents[1]

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ["SNAKE_CONFIG"] = str(HERE.parent / "no-such-appconfig.json")
os.environ.pop("SNAKE_TICK_MS", None)
