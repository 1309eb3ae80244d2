"""Shot outcome evaluation (miss/hit/sunk/duplicate)."""

from __future__ import annotations

from seabattle.core.board import BoardState
from seabattle.core.errors import InvalidShotTarget
from seabattle.core.models import DUPLICATE_SHOT, MISS, Coord, ShotOutcome


def resolve_shot(board: BoardState, coord: Coord) -> ShotOutcome:
    """Resolve a shot against a board, mutating it in place.

    A cell resolves at most once: firing at an already hit or missed cell
    returns a duplicate outcome and changes nothing.
    """
    if not board.in_bounds(coord):
        raise InvalidShotTarget(coord, board.size)
    if board.is_resolved(coord):
        return DUPLICATE_SHOT

    ship_id = int(board.ships[coord.y, coord.x])
    if ship_id == 0:
        board.misses[coord.y, coord.x] = True
        return MISS

    board.hits[coord.y, coord.x] = True
    ship = board.ship_by_id(ship_id)
    ship.hit_count += 1
    sunk = False
    if ship.hit_count >= ship.size and not ship.sunk:
        ship.sunk = True
        board.alive_count -= 1
        sunk = True
    return ShotOutcome(duplicate=False, hit=True, sunk=sunk, ship_id=ship_id)
