"""Random placement of food and rocks."""

from __future__ import annotations

import random

from .grid import Grid
from .utils import Position


class EntityGenerator:
    """Rejection sampler that never returns the excluded spawn cell.

    Positions are unique within one call to :meth:`generate` but are not
    checked against food, rocks or snake segments already on the board.
    """

    def __init__(self, grid: Grid, excluded: Position, rng: random.Random | None = None) -> None:
        self.grid = grid
        self.excluded = excluded
        self.rng = rng if rng is not None else random.Random()

    @property
    def capacity(self) -> int:
        """Number of cells a single batch can draw from."""
        if self.grid.in_bounds(self.excluded):
            return self.grid.cell_count - 1
        return self.grid.cell_count

    def generate(self, count: int) -> list[Position]:
        """Return exactly count distinct cells, none equal to the excluded cell."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count > self.capacity:
            raise ValueError(f"cannot place {count} entities on {self.capacity} free cells")

        positions: list[Position] = []
        taken: set[Position] = set()
        while len(positions) < count:
            candidate = self.grid.random_cell(self.rng)
            if candidate == self.excluded or candidate in taken:
                continue
            positions.append(candidate)
            taken.add(candidate)
        return positions

    def one(self) -> Position:
        """Return a single admissible cell."""
        return self.generate(1)[0]
