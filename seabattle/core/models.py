"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 8
FLEET_SIZES: tuple[int, ...] = (5, 4, 3, 3, 2)
PLACEMENT_TRIALS = 300
OPPONENT_DELAY_MS = 540


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Mode(StrEnum):
    """Overall match phase."""

    MENU = "menu"
    PLAY = "play"
    OVER = "over"


class Side(StrEnum):
    """One of the two fleets; used for turn ownership and the winner."""

    PLAYER = "player"
    ENEMY = "enemy"

    @property
    def opponent(self) -> Side:
        return Side.ENEMY if self is Side.PLAYER else Side.PLAYER


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate; origin top-left, x grows rightward, y grows downward."""

    x: int
    y: int

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}


@dataclass(slots=True)
class Ship:
    """A placed ship and its damage state."""

    ship_id: int
    size: int
    cells: tuple[Coord, ...]
    hit_count: int = 0
    sunk: bool = False


@dataclass(frozen=True, slots=True)
class ShotOutcome:
    """Result of resolving one shot against a board."""

    duplicate: bool
    hit: bool
    sunk: bool
    ship_id: int | None = None


DUPLICATE_SHOT = ShotOutcome(duplicate=True, hit=False, sunk=False)
MISS = ShotOutcome(duplicate=False, hit=False, sunk=False)


def cells_for(origin: Coord, size: int, orientation: Orientation) -> tuple[Coord, ...]:
    """Compute the cells a ship of `size` covers from `origin`."""
    if orientation is Orientation.HORIZONTAL:
        return tuple(Coord(origin.x + i, origin.y) for i in range(size))
    return tuple(Coord(origin.x, origin.y + i) for i in range(size))
