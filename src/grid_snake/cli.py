"""Command-line launcher for Grid Snake."""

from __future__ import annotations

import argparse
import logging
import sys

from grid_snake.config import GameConfig
from grid_snake.score_store import (
    DEFAULT_HIGHSCORE_PATH,
    FileScoreStore,
    InMemoryScoreStore,
    ScoreStore,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Classic snake on a 15x15 grid.",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open a window and play one game.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; flags below override it.",
    )
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument("--tick-ms", type=int, default=None)
    play_p.add_argument("--highscore-file", type=str, default=None)
    play_p.add_argument(
        "--no-save", action="store_true",
        help="Keep the high score in memory only.",
    )
    play_p.add_argument(
        "--allow-food-on-snake", action="store_true",
        help="Place food anywhere, including on the snake.",
    )

    # --- highscore ---
    hs_p = sub.add_parser("highscore", help="Print the stored high score.")
    hs_p.add_argument("--highscore-file", type=str, default=None)

    return parser


def _config_from_args(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "seed": "seed",
        "tick_ms": "tick_ms",
        "highscore_file": "highscore_path",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if args.allow_food_on_snake:
        overrides["food_avoids_snake"] = False

    return config.replace(**overrides) if overrides else config


def _score_store(config: GameConfig, no_save: bool) -> ScoreStore:
    """Open the high-score file, or copy its value into memory with *no_save*."""
    file_store = FileScoreStore(config.highscore_path)
    if no_save:
        return InMemoryScoreStore(file_store.load())
    return file_store


def _run_play(args: argparse.Namespace) -> int:
    from grid_snake.engine import GameLoop
    from grid_snake.frontend import PygameInput, PygameRenderer
    from grid_snake.runner import run_session

    config = _config_from_args(args)
    loop = GameLoop(config, _score_store(config, args.no_save))
    renderer = PygameRenderer(loop.grid)
    final = run_session(loop, PygameInput(), renderer, config.tick_seconds)
    print(f"Game over! Score: {final.score} High Score: {final.high_score}")  # noqa: T201
    return 0


def _run_highscore(args: argparse.Namespace) -> int:
    store = FileScoreStore(args.highscore_file or DEFAULT_HIGHSCORE_PATH)
    print(store.load())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "highscore": _run_highscore,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
