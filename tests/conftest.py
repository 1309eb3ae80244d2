from __future__ import annotations

import random
from collections.abc import Callable, Sequence

import pytest

from seabattle.app.controller import GameController
from seabattle.core.board import BoardState, create_empty_board
from seabattle.core.models import Coord
from seabattle.infra.config import GameConfig

BoardFactory = Callable[[Sequence[Sequence[tuple[int, int]]]], BoardState]


def _board_from_ships(ships: Sequence[Sequence[tuple[int, int]]], size: int = 8) -> BoardState:
    board = create_empty_board(size)
    for cells in ships:
        board.place_ship(tuple(Coord(x, y) for x, y in cells))
    return board


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def board_factory() -> BoardFactory:
    return _board_from_ships


@pytest.fixture
def classic_board() -> BoardState:
    """Canonical fleet laid out in rows 0, 2, 4, 6 and 7."""
    return _board_from_ships(
        [
            [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)],
            [(0, 2), (1, 2), (2, 2), (3, 2)],
            [(0, 4), (1, 4), (2, 4)],
            [(0, 6), (1, 6), (2, 6)],
            [(6, 7), (7, 7)],
        ]
    )


@pytest.fixture
def controller_factory() -> Callable[..., GameController]:
    def _make(seed: int = 1337, **config_overrides: object) -> GameController:
        config = GameConfig(**config_overrides)  # type: ignore[arg-type]
        return GameController(rng=random.Random(seed), config=config)

    return _make
