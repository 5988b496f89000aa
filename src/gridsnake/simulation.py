"""Lifecycle, locking and periodic ticking around the update engine."""

from __future__ import annotations

import logging
import random
import threading

from .controls import apply_command
from .engine import TickEvent, advance
from .generator import EntityGenerator
from .grid import Grid
from .settings import SimulationConfig
from .state import SimulationState, Snapshot
from .utils import STILL

logger = logging.getLogger(__name__)


def new_state(config: SimulationConfig, grid: Grid, generator: EntityGenerator) -> SimulationState:
    """Build a fresh run: idle snake, new food and rocks, initial speed."""
    return SimulationState(
        head=grid.center,
        body=[config.spawn_cell],
        food=generator.generate(config.initial_food),
        obstacles=generator.generate(config.initial_obstacles),
        interval_ms=config.initial_interval_ms,
        direction=STILL,
        score=0,
        terminated=False,
    )


class Simulation:
    """Thread-safe owner of the simulation state.

    Ticks, commands, resets and snapshots each hold the lock for their whole
    duration, so the ticker thread and the input thread never interleave
    inside one of them.
    """

    def __init__(self, config: SimulationConfig | None = None, seed: int | None = None) -> None:
        self.config = config if config is not None else SimulationConfig()
        self.grid = Grid(self.config.width, self.config.height)
        self.generator = EntityGenerator(self.grid, self.config.spawn_cell, random.Random(seed))
        self._lock = threading.Lock()
        self.ticks = 0
        self._state = new_state(self.config, self.grid, self.generator)

    def reset(self) -> None:
        """Replace the whole state with a freshly initialised one."""
        with self._lock:
            self._state = new_state(self.config, self.grid, self.generator)
            self.ticks = 0
        logger.info("Simulation reset")

    def tick(self) -> TickEvent:
        """Advance one tick."""
        with self._lock:
            event = advance(self._state, self.grid, self.generator, self.config)
            if event is not TickEvent.TERMINATED:
                self.ticks += 1
            return event

    def submit(self, command: object) -> None:
        """Feed one input command; a restart of a finished run resets it."""
        with self._lock:
            restart = apply_command(self._state, command)
            if restart:
                self._state = new_state(self.config, self.grid, self.generator)
                self.ticks = 0
        if restart:
            logger.info("Simulation restarted by command")

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._state.snapshot()

    @property
    def interval_ms(self) -> int:
        with self._lock:
            return self._state.interval_ms

    @property
    def terminated(self) -> bool:
        with self._lock:
            return self._state.terminated


class Ticker(threading.Thread):
    """Background thread that ticks a simulation at its current interval.

    The interval is re-read before every wait, so speed changes apply from
    the next tick on.
    """

    def __init__(self, simulation: Simulation) -> None:
        super().__init__(name="gridsnake-ticker", daemon=True)
        self.simulation = simulation
        self.stop_event = threading.Event()

    def run(self) -> None:
        logger.debug("Ticker started")
        while not self.stop_event.wait(self.simulation.interval_ms / 1000):
            self.simulation.tick()
        logger.debug("Ticker stopped")

    def stop(self, timeout: float | None = 1.0) -> None:
        """Cancel the pending wait and join the thread."""
        self.stop_event.set()
        if self.is_alive():
            self.join(timeout)
