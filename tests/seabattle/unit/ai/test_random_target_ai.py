import random
from collections import Counter

import pytest

from engine.api.ai import DecisionContext, create_blackboard
from seabattle.ai.random_target import RandomTargetAI, pick_target
from seabattle.ai.strategy import TargetingStrategy
from seabattle.core.board import create_empty_board
from seabattle.core.models import Coord


def test_pick_target_only_returns_unresolved_cells(classic_board) -> None:
    classic_board.hits[0, :] = True
    classic_board.misses[1:7, :] = True
    rng = random.Random(5)
    picks = {pick_target(classic_board, rng) for _ in range(200)}
    assert picks <= {Coord(x, 7) for x in range(8)}
    assert len(picks) == 8


def test_pick_target_includes_ship_cells_and_water(classic_board) -> None:
    rng = random.Random(11)
    picks = [pick_target(classic_board, rng) for _ in range(400)]
    occupied = [p for p in picks if classic_board.is_occupied(p)]
    assert occupied
    assert len(occupied) < len(picks)


def test_pick_target_is_roughly_uniform() -> None:
    board = create_empty_board(2)
    rng = random.Random(3)
    counts = Counter(pick_target(board, rng) for _ in range(4000))
    assert set(counts) == {Coord(0, 0), Coord(1, 0), Coord(0, 1), Coord(1, 1)}
    assert all(800 < count < 1200 for count in counts.values())


def test_pick_target_returns_none_when_board_exhausted() -> None:
    board = create_empty_board(2)
    board.misses[:, :] = True
    assert pick_target(board, random.Random(1)) is None


def test_decide_fires_through_blackboard(classic_board) -> None:
    ai = RandomTargetAI(random.Random(8))
    action = ai.decide(
        DecisionContext(
            now_ms=540.0,
            blackboard=ai.blackboard,
            observations={TargetingStrategy.OBSERVED_BOARD: classic_board},
        )
    )
    assert action == TargetingStrategy.ACTION_FIRE
    shot = TargetingStrategy.take_decided_shot(ai.blackboard)
    assert classic_board.in_bounds(shot)
    assert not ai.blackboard.has("seabattle.ai.next_shot")


def test_decide_holds_when_no_candidates() -> None:
    board = create_empty_board(2)
    board.hits[:, :] = True
    ai = RandomTargetAI(random.Random(8))
    action = ai.decide(
        DecisionContext(
            now_ms=0.0,
            blackboard=ai.blackboard,
            observations={TargetingStrategy.OBSERVED_BOARD: board},
        )
    )
    assert action == TargetingStrategy.ACTION_HOLD
    with pytest.raises(TypeError):
        TargetingStrategy.take_decided_shot(ai.blackboard)


def test_decide_requires_board_observation() -> None:
    ai = RandomTargetAI(random.Random(8))
    with pytest.raises(TypeError):
        ai.decide(DecisionContext(now_ms=0.0, blackboard=create_blackboard(), observations={}))
