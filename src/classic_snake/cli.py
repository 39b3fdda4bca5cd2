"""Command-line launcher for the snake game."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from classic_snake.config import GameConfig
from classic_snake.persistence import JsonHighScoreStore

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic-snake",
        description="Classic single-player Snake.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open the game window.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    play_p.add_argument("--grid-size", type=int, default=None)
    play_p.add_argument("--cell-size", type=int, default=None)
    play_p.add_argument("--tick-ms", type=int, default=None)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument("--high-score-file", type=str, default=None)
    play_p.add_argument(
        "--lenient-tail", action="store_true",
        help="Allow moving into the cell the tail is leaving.",
    )

    # --- scores ---
    scores_p = sub.add_parser("scores", help="Show the stored high score.")
    scores_p.add_argument("--high-score-file", type=str, default=None)
    scores_p.add_argument(
        "--reset", action="store_true", help="Clear the stored high score.",
    )

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Write the default configuration to a JSON file.",
    )
    config_p.add_argument("output", help="Destination path.")

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "grid_size": "grid_size",
        "cell_size": "cell_size",
        "tick_ms": "tick_interval_ms",
        "seed": "seed",
        "high_score_file": "high_score_path",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if getattr(args, "lenient_tail", False):
        overrides["solid_tail"] = False

    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from classic_snake.controller import GameController
    from classic_snake.ticker import FrameClockTicker
    from classic_snake.view import PygameView

    config = _resolve_config(args)
    controller = GameController(
        config,
        ticker=FrameClockTicker(),
        store=JsonHighScoreStore(config.high_score_path),
    )
    view = PygameView(controller)
    score = view.run()
    print(f"Score: {score}  High score: {controller.high_score}")  # noqa: T201
    return 0


def _run_scores(args: argparse.Namespace) -> int:
    path = args.high_score_file or GameConfig().high_score_path
    store = JsonHighScoreStore(path)
    if args.reset:
        store.reset()
        logger.info("High score cleared at %s", store.path)
    print(f"High score: {store.load_high_score()}")  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    try:
        GameConfig().save(args.output)
    except OSError as exc:
        logger.error("Could not write config to %s: %s", args.output, exc)
        return 1
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``classic-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "scores": _run_scores,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    except OSError as exc:
        logger.error("Could not read configuration: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
