"""Game engine error taxonomy."""

from __future__ import annotations

from seabattle.core.models import Coord


class SeaBattleError(Exception):
    """Base class for game engine errors."""


class PlacementExhausted(SeaBattleError):
    """No valid spot was found for a ship within the trial budget."""

    def __init__(self, ship_index: int, size: int, trials: int) -> None:
        super().__init__(
            f"Unable to place ship #{ship_index} (size {size}) after {trials} trials."
        )
        self.ship_index = ship_index
        self.size = size
        self.trials = trials


class InvalidShotTarget(SeaBattleError, ValueError):
    """Shot coordinate is outside the board."""

    def __init__(self, coord: Coord, board_size: int) -> None:
        super().__init__(
            f"Shot at ({coord.x}, {coord.y}) is outside the {board_size}x{board_size} board."
        )
        self.coord = coord
        self.board_size = board_size
