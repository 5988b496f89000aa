"""Settings persistence and startup configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
import logging
import pygame

from . import utils
from .utils import (
    CELL_SIZE,
    FPS,
    GRID_HEIGHT,
    GRID_WIDTH,
    INITIAL_FOOD,
    INITIAL_INTERVAL_MS,
    INITIAL_OBSTACLES,
    INTERVAL_STEP_MS,
    MIN_INTERVAL_MS,
    SPAWN_CELL,
    Position,
    load_json,
    save_json,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Constants fixed for the lifetime of a simulation."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    initial_interval_ms: int = INITIAL_INTERVAL_MS
    min_interval_ms: int = MIN_INTERVAL_MS
    interval_step_ms: int = INTERVAL_STEP_MS
    initial_food: int = INITIAL_FOOD
    initial_obstacles: int = INITIAL_OBSTACLES
    spawn_cell: Position = SPAWN_CELL

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid dimensions must be positive")
        if not (0 <= self.spawn_cell[0] < self.width and 0 <= self.spawn_cell[1] < self.height):
            raise ValueError(f"spawn cell {self.spawn_cell} lies outside the grid")
        if self.min_interval_ms <= 0 or self.interval_step_ms < 0:
            raise ValueError("intervals must be positive and the step non-negative")
        if self.min_interval_ms > self.initial_interval_ms:
            raise ValueError("minimum interval exceeds the initial interval")
        if self.initial_food < 0 or self.initial_obstacles < 0:
            raise ValueError("entity counts must be non-negative")
        free_cells = self.width * self.height - 1
        if self.initial_food > free_cells or self.initial_obstacles > free_cells:
            raise ValueError(f"initial food and rocks must each fit on {free_cells} free cells")


@dataclass(slots=True)
class DisplaySettings:
    """Display-related options."""

    cell_size: int = CELL_SIZE
    fps: int = FPS
    show_grid: bool = False


@dataclass(slots=True)
class ControlScheme:
    """Keyboard bindings."""

    up: int = pygame.K_UP
    down: int = pygame.K_DOWN
    left: int = pygame.K_LEFT
    right: int = pygame.K_RIGHT
    restart: int = pygame.K_SPACE


@dataclass(slots=True)
class GameSettings:
    """Persistent settings for the game."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    controls: ControlScheme = field(default_factory=ControlScheme)


class SettingsManager:
    """Load and save game settings."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else utils.SETTINGS_FILE
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = load_json(self.path, {})
        if not isinstance(raw, dict):
            logger.warning("Settings in %s are not an object, using defaults", self.path)
            raw = {}
        settings = GameSettings()

        try:
            settings.simulation = self._load_simulation(raw.get("simulation", {}), settings.simulation)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Invalid simulation settings in %s (%s), using defaults", self.path, exc)

        display = raw.get("display", {})
        try:
            settings.display.cell_size = int(display.get("cell_size", settings.display.cell_size))
            settings.display.fps = int(display.get("fps", settings.display.fps))
            settings.display.show_grid = bool(display.get("show_grid", settings.display.show_grid))
            if settings.display.cell_size <= 0 or settings.display.fps <= 0:
                raise ValueError("cell_size and fps must be positive")
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Invalid display settings in %s (%s), using defaults", self.path, exc)
            settings.display = DisplaySettings()

        controls = raw.get("controls", {})
        try:
            settings.controls = ControlScheme(
                up=int(controls.get("up", settings.controls.up)),
                down=int(controls.get("down", settings.controls.down)),
                left=int(controls.get("left", settings.controls.left)),
                right=int(controls.get("right", settings.controls.right)),
                restart=int(controls.get("restart", settings.controls.restart)),
            )
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Invalid control settings in %s (%s), using defaults", self.path, exc)
        return settings

    @staticmethod
    def _load_simulation(payload: dict, defaults: SimulationConfig) -> SimulationConfig:
        spawn = payload.get("spawn_cell", defaults.spawn_cell)
        if not isinstance(spawn, (list, tuple)) or len(spawn) != 2:
            raise ValueError(f"spawn_cell must be an [x, y] pair, got {spawn!r}")
        return SimulationConfig(
            width=int(payload.get("width", defaults.width)),
            height=int(payload.get("height", defaults.height)),
            initial_interval_ms=int(payload.get("initial_interval_ms", defaults.initial_interval_ms)),
            min_interval_ms=int(payload.get("min_interval_ms", defaults.min_interval_ms)),
            interval_step_ms=int(payload.get("interval_step_ms", defaults.interval_step_ms)),
            initial_food=int(payload.get("initial_food", defaults.initial_food)),
            initial_obstacles=int(payload.get("initial_obstacles", defaults.initial_obstacles)),
            spawn_cell=(int(spawn[0]), int(spawn[1])),
        )

    def save(self) -> None:
        """Persist settings to disk."""
        save_json(self.path, asdict(self.settings))
