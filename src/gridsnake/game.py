"""Pygame window: keyboard input in, rendered snapshots out."""

from __future__ import annotations

import logging
import pygame

from .controls import Command
from .settings import GameSettings
from .simulation import Simulation, Ticker
from .state import Snapshot
from .utils import (
    BG_COLOR,
    FOOD_COLOR,
    GAME_OVER_COLOR,
    GRID_COLOR,
    ROCK_COLOR,
    SNAKE_COLOR,
    TEXT_COLOR,
    Position,
)

logger = logging.getLogger(__name__)


class SnakeGame:
    """Renders a :class:`Simulation` and forwards key presses to it.

    The simulation advances on its own ticker thread; this class only reads
    snapshots and submits commands from the pygame thread.
    """

    def __init__(self, settings: GameSettings, seed: int | None = None) -> None:
        pygame.init()
        pygame.font.init()

        self.settings = settings
        self.cell = settings.display.cell_size
        config = settings.simulation
        self.width_px = config.width * self.cell
        self.height_px = config.height * self.cell

        self.screen = pygame.display.set_mode((self.width_px, self.height_px))
        pygame.display.set_caption("Snake Game")
        self.clock = pygame.time.Clock()

        self.score_font = pygame.font.SysFont(None, 24)
        self.title_font = pygame.font.SysFont(None, 36)
        self.body_font = pygame.font.SysFont(None, 24)

        controls = settings.controls
        self.key_commands: dict[int, Command] = {
            controls.up: Command.UP,
            controls.down: Command.DOWN,
            controls.left: Command.LEFT,
            controls.right: Command.RIGHT,
            controls.restart: Command.RESTART,
        }

        self.simulation = Simulation(config, seed=seed)
        self.ticker = Ticker(self.simulation)

    def run(self) -> None:
        """Main event/render loop."""
        self.ticker.start()
        try:
            running = True
            while running:
                self.clock.tick(self.settings.display.fps)
                running = self._handle_events()
                if running:
                    self._render(self.simulation.snapshot())
        finally:
            self.ticker.stop()
            pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return False
            command = self.key_commands.get(event.key)
            if command is not None:
                self.simulation.submit(command)
        return True

    def _render(self, snapshot: Snapshot) -> None:
        self.screen.fill(BG_COLOR)
        if self.settings.display.show_grid:
            self._draw_grid()

        for segment in snapshot.body:
            self._draw_circle(segment, SNAKE_COLOR)
        for food in snapshot.food:
            self._draw_circle(food, FOOD_COLOR)
        for rock in snapshot.obstacles:
            pygame.draw.rect(self.screen, ROCK_COLOR, self._cell_rect(rock))
        pygame.draw.rect(self.screen, SNAKE_COLOR, self._cell_rect(snapshot.head))

        score = self.score_font.render(f"Score: {snapshot.score}", True, TEXT_COLOR)
        self.screen.blit(score, (self.width_px - 100, 10))

        if snapshot.terminated:
            self._render_game_over(snapshot.score)
        pygame.display.flip()

    def _render_game_over(self, score: int) -> None:
        lines = [
            (self.title_font.render("Game Over!", True, GAME_OVER_COLOR), self.height_px // 3),
            (self.body_font.render(f"Score: {score}", True, TEXT_COLOR), self.height_px // 2),
            (
                self.body_font.render("Press Spacebar to play again", True, TEXT_COLOR),
                self.height_px * 2 // 3,
            ),
        ]
        for text, y in lines:
            self.screen.blit(text, ((self.width_px - text.get_width()) // 2, y))

    def _draw_grid(self) -> None:
        for x in range(0, self.width_px, self.cell):
            pygame.draw.line(self.screen, GRID_COLOR, (x, 0), (x, self.height_px))
        for y in range(0, self.height_px, self.cell):
            pygame.draw.line(self.screen, GRID_COLOR, (0, y), (self.width_px, y))

    def _draw_circle(self, cell: Position, color: tuple[int, int, int]) -> None:
        rect = self._cell_rect(cell)
        pygame.draw.circle(self.screen, color, rect.center, self.cell // 2)

    def _cell_rect(self, cell: Position) -> pygame.Rect:
        return pygame.Rect(cell[0] * self.cell, cell[1] * self.cell, self.cell, self.cell)
