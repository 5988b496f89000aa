"""Shared builders for engine tests."""

from __future__ import annotations

from collections import deque

from gridsnake.generator import EntityGenerator
from gridsnake.grid import Grid
from gridsnake.settings import SimulationConfig
from gridsnake.state import SimulationState
from gridsnake.utils import STILL

SMALL_CONFIG = SimulationConfig(
    width=10,
    height=10,
    initial_interval_ms=80,
    min_interval_ms=20,
    interval_step_ms=2,
    initial_food=1,
    initial_obstacles=0,
)


class ScriptedGenerator(EntityGenerator):
    """Generator that hands out queued cells before falling back to random ones."""

    def __init__(self, grid: Grid, cells: list[tuple[int, int]]) -> None:
        super().__init__(grid, SMALL_CONFIG.spawn_cell)
        self.queue = deque(cells)

    def generate(self, count: int) -> list[tuple[int, int]]:
        out = []
        while self.queue and len(out) < count:
            out.append(self.queue.popleft())
        return out + super().generate(count - len(out))


def make_state(
    head=(5, 5),
    body=None,
    food=None,
    obstacles=None,
    direction=STILL,
    interval_ms=80,
) -> SimulationState:
    return SimulationState(
        head=head,
        body=list(body) if body is not None else [(4, 5)],
        food=list(food) if food is not None else [],
        obstacles=list(obstacles) if obstacles is not None else [],
        interval_ms=interval_ms,
        direction=direction,
    )
