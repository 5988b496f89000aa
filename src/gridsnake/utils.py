"""Shared constants and utility helpers for gridsnake."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Tuple
import json
import logging

logger = logging.getLogger(__name__)

GRID_WIDTH = 60
GRID_HEIGHT = 40
CELL_SIZE = 20
FPS = 60

INITIAL_INTERVAL_MS = 80
MIN_INTERVAL_MS = 20
INTERVAL_STEP_MS = 2
INITIAL_FOOD = 10
INITIAL_OBSTACLES = 10
SPAWN_CELL = (5, 5)

BG_COLOR = (0, 0, 0)
GRID_COLOR = (18, 18, 18)
SNAKE_COLOR = (255, 255, 255)
FOOD_COLOR = (0, 255, 0)
ROCK_COLOR = (255, 0, 0)
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)

Direction = Tuple[int, int]
Position = Tuple[int, int]

STILL: Direction = (0, 0)
UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)

DATA_DIR = Path(".gridsnake")
SETTINGS_FILE = DATA_DIR / "settings.json"


def add_direction(position: Position, direction: Direction) -> Position:
    """Move a cell by one step along direction."""
    return (position[0] + direction[0], position[1] + direction[1])


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable %s: %s", path, exc)
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
