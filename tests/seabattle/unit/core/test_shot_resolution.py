"""Tests for shot resolution and sink accounting."""

import pytest

from seabattle.core.errors import InvalidShotTarget
from seabattle.core.models import Coord
from seabattle.core.shot_resolution import resolve_shot


def test_miss_then_duplicate_changes_nothing(classic_board) -> None:
    first = resolve_shot(classic_board, Coord(2, 3))
    assert (first.duplicate, first.hit, first.sunk, first.ship_id) == (False, False, False, None)
    assert classic_board.misses[3, 2]

    hits_before = classic_board.hits.copy()
    misses_before = classic_board.misses.copy()
    repeat = resolve_shot(classic_board, Coord(2, 3))

    assert repeat.duplicate is True
    assert (classic_board.hits == hits_before).all()
    assert (classic_board.misses == misses_before).all()


def test_duplicate_hit_does_not_double_count(classic_board) -> None:
    first = resolve_shot(classic_board, Coord(0, 0))
    assert first.hit and first.ship_id == 1
    repeat = resolve_shot(classic_board, Coord(0, 0))
    assert repeat.duplicate
    assert classic_board.fleet[0].hit_count == 1
    assert not classic_board.misses[0, 0]


def test_sink_happens_exactly_on_last_cell(board_factory) -> None:
    board = board_factory([[(0, 0), (1, 0)], [(5, 5), (5, 6), (5, 7)]])
    ship = board.fleet[0]

    first = resolve_shot(board, Coord(0, 0))
    assert first.hit and not first.sunk
    assert ship.hit_count == 1
    assert not ship.sunk
    assert board.alive_count == 2

    second = resolve_shot(board, Coord(1, 0))
    assert second.hit and second.sunk
    assert second.ship_id == 1
    assert ship.hit_count == ship.size == 2
    assert ship.sunk
    assert board.alive_count == 1
    assert board.alive_count == sum(1 for s in board.fleet if not s.sunk)


def test_last_ship_sink_drives_alive_count_to_zero(board_factory) -> None:
    board = board_factory([[(0, 0), (1, 0)]])
    resolve_shot(board, Coord(0, 0))
    outcome = resolve_shot(board, Coord(1, 0))
    assert outcome.sunk
    assert board.alive_count == 0
    assert board.all_ships_sunk()


def test_hit_and_miss_never_share_a_cell(classic_board) -> None:
    for y in range(8):
        for x in range(8):
            resolve_shot(classic_board, Coord(x, y))
    assert not (classic_board.hits & classic_board.misses).any()
    assert (classic_board.hits | classic_board.misses).all()
    assert classic_board.alive_count == 0


def test_out_of_bounds_shot_is_rejected_without_mutation(classic_board) -> None:
    with pytest.raises(InvalidShotTarget):
        resolve_shot(classic_board, Coord(8, 0))
    with pytest.raises(ValueError):
        resolve_shot(classic_board, Coord(0, -1))
    assert not classic_board.hits.any()
    assert not classic_board.misses.any()
