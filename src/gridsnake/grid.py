"""Discrete playfield bounds."""

from __future__ import annotations

from dataclasses import dataclass
import random

from .utils import Position


@dataclass(frozen=True, slots=True)
class Grid:
    """Fixed-size cell grid addressed by (x, y)."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")

    def in_bounds(self, position: Position) -> bool:
        """Check if a cell is inside the grid."""
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def center(self) -> Position:
        return (self.width // 2, self.height // 2)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def random_cell(self, rng: random.Random) -> Position:
        """Sample a cell uniformly."""
        return (rng.randrange(self.width), rng.randrange(self.height))
