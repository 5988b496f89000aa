"""Executable entrypoint for gridsnake."""

from __future__ import annotations

from pathlib import Path
import argparse
import logging

from .game import SnakeGame
from .settings import SettingsManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake with rocks.")
    parser.add_argument("--settings", type=Path, default=None, help="Path to a settings JSON file")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food and rock placement")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Launch the game."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = SettingsManager(args.settings).settings
    SnakeGame(settings, seed=args.seed).run()


if __name__ == "__main__":
    main()
