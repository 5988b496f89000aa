from __future__ import annotations

from dataclasses import FrozenInstanceError
import threading
import time

import pytest

from gridsnake.controls import Command
from gridsnake.engine import TickEvent
from gridsnake.settings import SimulationConfig
from gridsnake.simulation import Simulation, Ticker, new_state
from gridsnake.utils import RIGHT, STILL


def _terminate(sim: Simulation) -> None:
    with sim._lock:
        sim._state.terminated = True


def test_new_simulation_matches_initial_configuration() -> None:
    sim = Simulation(seed=1)
    snap = sim.snapshot()
    assert snap.head == (30, 20)
    assert snap.body == ((5, 5),)
    assert snap.direction == STILL
    assert len(snap.food) == 10
    assert len(snap.obstacles) == 10
    assert (5, 5) not in snap.food
    assert (5, 5) not in snap.obstacles
    assert snap.score == 0
    assert snap.interval_ms == 80
    assert not snap.terminated


def test_reset_restores_initial_state() -> None:
    config = SimulationConfig(width=10, height=10, initial_food=3, initial_obstacles=2)
    sim = Simulation(config, seed=5)
    sim.submit(Command.UP)
    for _ in range(3):
        sim.tick()
    _terminate(sim)

    sim.reset()

    snap = sim.snapshot()
    assert snap.head == (5, 5)
    assert snap.body == ((5, 5),)
    assert snap.direction == STILL
    assert snap.score == 0
    assert snap.interval_ms == config.initial_interval_ms
    assert not snap.terminated
    assert len(snap.food) == 3
    assert len(snap.obstacles) == 2
    assert sim.ticks == 0


def test_restart_command_resets_finished_run() -> None:
    sim = Simulation(seed=2)
    sim.submit(Command.RIGHT)
    _terminate(sim)

    sim.submit(Command.LEFT)
    assert sim.terminated
    assert sim.tick() is TickEvent.TERMINATED

    sim.submit(Command.RESTART)
    snap = sim.snapshot()
    assert not snap.terminated
    assert snap.direction == STILL


def test_restart_command_is_ignored_while_running() -> None:
    sim = Simulation(SimulationConfig(initial_food=0, initial_obstacles=0), seed=2)
    sim.submit(Command.RIGHT)
    sim.tick()
    head = sim.snapshot().head
    sim.submit(Command.RESTART)
    assert sim.snapshot().head == head
    assert sim.snapshot().direction == RIGHT


def test_snapshot_is_read_only_copy() -> None:
    sim = Simulation(seed=4)
    snap = sim.snapshot()
    with pytest.raises(FrozenInstanceError):
        snap.score = 5
    sim.submit(Command.DOWN)
    sim.tick()
    assert snap.head == (30, 20)


def test_new_state_uses_generator_counts() -> None:
    sim = Simulation(SimulationConfig(initial_food=4, initial_obstacles=7), seed=9)
    state = new_state(sim.config, sim.grid, sim.generator)
    assert len(state.food) == 4
    assert len(state.obstacles) == 7


def test_ticker_advances_and_stops() -> None:
    config = SimulationConfig(initial_interval_ms=5, min_interval_ms=1, interval_step_ms=1)
    sim = Simulation(config, seed=0)
    ticker = Ticker(sim)
    ticker.start()
    deadline = time.monotonic() + 2.0
    while sim.ticks < 3 and time.monotonic() < deadline:
        time.sleep(0.01)
    ticker.stop()
    assert sim.ticks >= 3
    assert not ticker.is_alive()


def test_ticker_stop_cancels_long_wait() -> None:
    config = SimulationConfig(initial_interval_ms=60_000, min_interval_ms=1)
    sim = Simulation(config, seed=0)
    ticker = Ticker(sim)
    ticker.start()
    started = time.monotonic()
    ticker.stop(timeout=2.0)
    assert not ticker.is_alive()
    assert time.monotonic() - started < 2.0
    assert sim.ticks == 0


def test_concurrent_input_and_ticks_keep_state_consistent() -> None:
    config = SimulationConfig(width=20, height=20, initial_interval_ms=2, min_interval_ms=1, interval_step_ms=1)
    sim = Simulation(config, seed=11)
    ticker = Ticker(sim)
    commands = [Command.UP, Command.LEFT, Command.DOWN, Command.RIGHT, Command.RESTART]

    def feed() -> None:
        for i in range(400):
            sim.submit(commands[i % len(commands)])

    feeder = threading.Thread(target=feed)
    ticker.start()
    feeder.start()
    feeder.join()
    ticker.stop()

    snap = sim.snapshot()
    assert len(snap.body) == snap.score + 1
    assert len(snap.obstacles) == config.initial_obstacles + snap.score
    assert sim.grid.in_bounds(snap.head)
