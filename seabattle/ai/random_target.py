"""Uniform random targeting over unresolved cells."""

from __future__ import annotations

import random

from seabattle.ai.strategy import TargetingStrategy
from seabattle.core.board import BoardState
from seabattle.core.models import Coord


class RandomTargetAI(TargetingStrategy):
    """Memoryless opponent: every unresolved cell is equally likely.

    Candidates are read from the board itself, so ship cells are neither
    favoured nor avoided.
    """

    def __init__(self, rng: random.Random) -> None:
        super().__init__()
        self._rng = rng

    def pick_target(self, board: BoardState) -> Coord | None:
        return pick_target(board, self._rng)


def pick_target(board: BoardState, rng: random.Random) -> Coord | None:
    """Pick a uniformly random unresolved cell of `board`."""
    candidates = board.unresolved_cells()
    if not candidates:
        return None
    return candidates[rng.randrange(len(candidates))]
