"""Keyboard-agnostic input commands and the no-reverse turning rule."""

from __future__ import annotations

from enum import Enum
import logging

from .state import SimulationState
from .utils import DOWN, LEFT, RIGHT, UP, Direction

logger = logging.getLogger(__name__)


class Command(str, Enum):
    """Discrete commands the presentation layer may submit."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESTART = "restart"


COMMAND_DIRECTIONS: dict[Command, Direction] = {
    Command.UP: UP,
    Command.DOWN: DOWN,
    Command.LEFT: LEFT,
    Command.RIGHT: RIGHT,
}


def parse_command(value: object) -> Command | None:
    """Return the matching command, or None for anything unrecognised."""
    if isinstance(value, Command):
        return value
    if isinstance(value, str):
        try:
            return Command(value.strip().lower())
        except ValueError:
            return None
    return None


def resolve_turn(current: Direction, requested: Direction) -> Direction:
    """Apply the per-axis turning rule.

    Vertical moves are accepted only while the snake has no vertical
    component, horizontal moves only while it has no horizontal one.
    """
    if requested in (UP, DOWN) and current[1] == 0:
        return requested
    if requested in (LEFT, RIGHT) and current[0] == 0:
        return requested
    return current


def apply_command(state: SimulationState, command: object) -> bool:
    """Apply a command to the state.

    Returns True when the command asks for a restart of a finished run;
    the caller owns the reset.
    """
    parsed = parse_command(command)
    if parsed is None:
        logger.debug("Ignoring unknown command %r", command)
        return False

    if state.terminated:
        return parsed is Command.RESTART
    if parsed is Command.RESTART:
        return False

    state.direction = resolve_turn(state.direction, COMMAND_DIRECTIONS[parsed])
    return False
