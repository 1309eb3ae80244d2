"""Headless command-line entry point."""

from __future__ import annotations

import argparse
import logging
import random

from seabattle.app.autoplay import run_autoplay
from seabattle.app.controller import GameController
from seabattle.core.errors import PlacementExhausted
from seabattle.infra.config import GameConfig, load_default_env_files
from seabattle.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Start a grid battle match and print its state read-out as JSON."
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for fleets and targeting")
    parser.add_argument(
        "--autoplay",
        action="store_true",
        help="Let a scripted player fire at random until the match ends",
    )
    parser.add_argument(
        "--max-shots", type=int, default=None, help="Cap on scripted player shots"
    )
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one headless match."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    setup_logging()

    config = GameConfig.from_env()
    seed = args.seed if args.seed is not None else config.seed
    controller = GameController(random.Random(seed), config)
    try:
        controller.start()
    except PlacementExhausted as exc:
        logger.error("Could not start match: %s", exc)
        return 1

    if args.autoplay:
        player_rng = random.Random(None if seed is None else seed + 1)
        max_shots = args.max_shots or config.board_size * config.board_size
        run_autoplay(controller, player_rng, max_shots=max_shots)

    print(controller.render_text(pretty=args.pretty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
