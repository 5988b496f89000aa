"""Single-tick update rules: movement, eating, collisions and speed ramp."""

from __future__ import annotations

from enum import Enum, auto
import logging

from .generator import EntityGenerator
from .grid import Grid
from .settings import SimulationConfig
from .state import SimulationState
from .utils import STILL, Position, add_direction

logger = logging.getLogger(__name__)


class TickEvent(Enum):
    """Outcome of one call to :func:`advance`."""

    IDLE = auto()
    HALTED = auto()
    MOVED = auto()
    ATE = auto()
    HIT_ROCK = auto()
    HIT_SELF = auto()
    TERMINATED = auto()


def next_interval(current_ms: int, config: SimulationConfig) -> int:
    """Shorten the tick interval by one step, never below the floor."""
    return max(config.min_interval_ms, current_ms - config.interval_step_ms)


def shift_body(body: list[Position], old_head: Position) -> None:
    """Let every segment take its predecessor's cell; the first takes the old head."""
    for i in range(len(body) - 1, 0, -1):
        body[i] = body[i - 1]
    body[0] = old_head


def advance(
    state: SimulationState,
    grid: Grid,
    generator: EntityGenerator,
    config: SimulationConfig,
) -> TickEvent:
    """Advance the simulation by one tick and report what happened."""
    if state.terminated:
        return TickEvent.TERMINATED
    if state.direction == STILL:
        return TickEvent.IDLE

    candidate = add_direction(state.head, state.direction)
    if not grid.in_bounds(candidate):
        logger.debug("Halting at wall: %s -> %s", state.head, candidate)
        state.direction = STILL
        return TickEvent.HALTED

    old_head = state.head
    shift_body(state.body, old_head)

    event = TickEvent.MOVED
    for index, food in enumerate(state.food):
        if food != candidate:
            continue
        del state.food[index]
        state.body.append(old_head)
        state.food.append(generator.one())
        state.obstacles.append(generator.one())
        state.score += 1
        state.interval_ms = next_interval(state.interval_ms, config)
        logger.info(
            "Ate food at %s: score=%d length=%d interval=%dms",
            candidate,
            state.score,
            state.length,
            state.interval_ms,
        )
        event = TickEvent.ATE
        break

    if candidate in state.obstacles:
        state.terminated = True
        event = TickEvent.HIT_ROCK

    # A fatal move still commits the head into the colliding cell.
    state.head = candidate

    if candidate in state.body[1:]:
        state.terminated = True
        if event is not TickEvent.HIT_ROCK:
            event = TickEvent.HIT_SELF

    if state.terminated:
        logger.info("Snake crashed (%s) at %s with score %d", event.name, candidate, state.score)
    return event
