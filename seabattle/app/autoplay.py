"""Scripted player that drives a controller through a whole match."""

from __future__ import annotations

import logging
import random

from seabattle.ai.random_target import pick_target
from seabattle.app.controller import GameController
from seabattle.core.models import Mode

logger = logging.getLogger(__name__)


def run_autoplay(controller: GameController, rng: random.Random, *, max_shots: int = 64) -> int:
    """Fire at random unresolved enemy cells until the match ends.

    After every accepted shot, time is advanced by the opponent delay so the
    reply lands before the next player shot. Returns the number of player
    shots fired.
    """
    shots = 0
    while controller.session.mode is Mode.PLAY and shots < max_shots:
        board = controller.session.enemy_board
        if board is None:
            break
        target = pick_target(board, rng)
        if target is None:
            break
        result = controller.fire(target.x, target.y)
        shots += 1
        if result.opponent_scheduled:
            controller.advance_time(controller.config.opponent_delay_ms)
    logger.info(
        "autoplay_finished shots=%d mode=%s winner=%s",
        shots,
        controller.session.mode.value,
        controller.session.winner.value if controller.session.winner else "none",
    )
    return shots
