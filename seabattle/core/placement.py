"""Randomized non-overlapping fleet placement."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from seabattle.core.board import BoardState, create_empty_board
from seabattle.core.errors import PlacementExhausted
from seabattle.core.models import (
    BOARD_SIZE,
    FLEET_SIZES,
    PLACEMENT_TRIALS,
    Coord,
    Orientation,
    cells_for,
)

logger = logging.getLogger(__name__)


def place_fleet(
    board: BoardState,
    rng: random.Random,
    sizes: Sequence[int] = FLEET_SIZES,
    max_trials: int = PLACEMENT_TRIALS,
) -> BoardState:
    """Return a copy of `board` with one ship placed per entry of `sizes`.

    Ships are placed in order; each gets up to `max_trials` random
    origin/orientation draws. The input board is left untouched, so a
    `PlacementExhausted` failure never leaves a half-populated board behind.
    """
    placed = board.copy()
    for index, size in enumerate(sizes, start=1):
        cells = _find_spot(placed, rng, size, max_trials)
        if cells is None:
            logger.debug("placement_exhausted ship_index=%d size=%d", index, size)
            raise PlacementExhausted(ship_index=index, size=size, trials=max_trials)
        placed.place_ship(cells)
    return placed


def generate_board(
    rng: random.Random,
    size: int = BOARD_SIZE,
    sizes: Sequence[int] = FLEET_SIZES,
    max_trials: int = PLACEMENT_TRIALS,
) -> BoardState:
    """Create a fresh board and populate it with a random fleet."""
    return place_fleet(create_empty_board(size), rng, sizes, max_trials)


def _find_spot(
    board: BoardState, rng: random.Random, size: int, max_trials: int
) -> tuple[Coord, ...] | None:
    for _ in range(max_trials):
        orientation = Orientation.HORIZONTAL if rng.random() < 0.5 else Orientation.VERTICAL
        origin = Coord(rng.randrange(board.size), rng.randrange(board.size))
        cells = cells_for(origin, size, orientation)
        if board.can_place(cells):
            return cells
    return None
