"""Read-only projection of a session for presentation layers and tests."""

from __future__ import annotations

from seabattle.core.board import BoardState
from seabattle.core.models import BOARD_SIZE, Coord
from seabattle.core.rules import GameSession

Snapshot = dict[str, object]


def build_snapshot(session: GameSession, *, board_size: int = BOARD_SIZE) -> Snapshot:
    """Build the serializable read-out of `session`.

    Only resolved cells of the enemy board are exposed; its ship layout stays
    hidden. The player's own board, fleet included, is fully visible.
    """
    enemy = session.enemy_board
    player = session.player_board
    size = player.size if player is not None else board_size
    return {
        "mode": session.mode.value,
        "turn": session.turn.value,
        "message": session.message,
        "board": {
            "size": size,
            "origin": "top-left",
            "xDirection": "right",
            "yDirection": "down",
        },
        "fleets": {
            "playerShipsAfloat": _afloat(player),
            "enemyShipsAfloat": _afloat(enemy),
        },
        "shots": {
            "enemyBoardHits": _cells(enemy.hit_cells() if enemy is not None else []),
            "enemyBoardMisses": _cells(enemy.miss_cells() if enemy is not None else []),
            "playerBoardHits": _cells(player.hit_cells() if player is not None else []),
            "playerBoardMisses": _cells(player.miss_cells() if player is not None else []),
        },
        "playerFleet": _fleet(player),
        "hoverCell": session.hover.to_dict() if session.hover is not None else None,
        "winner": session.winner.value if session.winner is not None else "none",
    }


def _afloat(board: BoardState | None) -> int:
    return board.alive_count if board is not None else 0


def _cells(cells: list[Coord]) -> list[dict[str, int]]:
    return [cell.to_dict() for cell in cells]


def _fleet(board: BoardState | None) -> list[dict[str, object]]:
    if board is None:
        return []
    return [
        {
            "id": ship.ship_id,
            "size": ship.size,
            "cells": _cells(list(ship.cells)),
            "hits": ship.hit_count,
            "sunk": ship.sunk,
        }
        for ship in board.fleet
    ]
