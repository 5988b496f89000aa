"""Mutable simulation state and its read-only snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import STILL, Direction, Position


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Immutable view of the board handed to the presentation layer."""

    head: Position
    body: tuple[Position, ...]
    food: tuple[Position, ...]
    obstacles: tuple[Position, ...]
    score: int
    terminated: bool
    direction: Direction
    interval_ms: int


@dataclass(slots=True, eq=False)
class SimulationState:
    """Everything one run of the simulation mutates.

    ``head`` is the authoritative snake position. ``body`` trails one tick
    behind it and always holds at least one segment.
    """

    head: Position
    body: list[Position]
    food: list[Position]
    obstacles: list[Position]
    interval_ms: int
    direction: Direction = STILL
    score: int = 0
    terminated: bool = False

    @property
    def length(self) -> int:
        return len(self.body)

    def snapshot(self) -> Snapshot:
        """Copy the current state into a frozen snapshot."""
        return Snapshot(
            head=self.head,
            body=tuple(self.body),
            food=tuple(self.food),
            obstacles=tuple(self.obstacles),
            score=self.score,
            terminated=self.terminated,
            direction=self.direction,
            interval_ms=self.interval_ms,
        )
