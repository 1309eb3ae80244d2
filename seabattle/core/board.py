"""Board state representation and occupancy queries."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import numpy as np

from seabattle.core.models import BOARD_SIZE, Coord, Ship


def _grid(size: int, dtype: type) -> np.ndarray:
    return np.zeros((size, size), dtype=dtype)


@dataclass(slots=True)
class BoardState:
    """Numpy-backed board state.

    Grids are indexed ``[y, x]``. ``ships`` holds 0 for water or the 1-based
    ship id; ``hits`` and ``misses`` record resolved cells and are never both
    set for the same cell.
    """

    size: int = BOARD_SIZE
    ships: np.ndarray = field(default_factory=lambda: _grid(BOARD_SIZE, np.int16))
    hits: np.ndarray = field(default_factory=lambda: _grid(BOARD_SIZE, np.bool_))
    misses: np.ndarray = field(default_factory=lambda: _grid(BOARD_SIZE, np.bool_))
    fleet: list[Ship] = field(default_factory=list)
    alive_count: int = 0

    def __post_init__(self) -> None:
        if self.ships.shape != (self.size, self.size):
            self.ships = _grid(self.size, np.int16)
        if self.hits.shape != (self.size, self.size):
            self.hits = _grid(self.size, np.bool_)
        if self.misses.shape != (self.size, self.size):
            self.misses = _grid(self.size, np.bool_)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return within_bounds(coord.x, coord.y, self.size)

    def is_occupied(self, coord: Coord) -> bool:
        return bool(self.ships[coord.y, coord.x] != 0)

    def is_resolved(self, coord: Coord) -> bool:
        """Return whether this cell was previously targeted."""
        return bool(self.hits[coord.y, coord.x] or self.misses[coord.y, coord.x])

    def can_place(self, cells: tuple[Coord, ...]) -> bool:
        """Return whether every cell is in bounds and unoccupied."""
        return all(self.in_bounds(cell) and not self.is_occupied(cell) for cell in cells)

    def place_ship(self, cells: tuple[Coord, ...]) -> Ship:
        """Place a ship on the board using the next 1-based ship id."""
        if not cells or not self.can_place(cells):
            raise ValueError(f"Invalid placement for ship of size {len(cells)}.")
        ship = Ship(ship_id=len(self.fleet) + 1, size=len(cells), cells=cells)
        for cell in cells:
            self.ships[cell.y, cell.x] = ship.ship_id
        self.fleet.append(ship)
        self.alive_count += 1
        return ship

    def ship_by_id(self, ship_id: int) -> Ship:
        ship = self.fleet[ship_id - 1]
        if ship.ship_id != ship_id:
            raise LookupError(f"Fleet index out of sync for ship id {ship_id}.")
        return ship

    def unresolved_cells(self) -> list[Coord]:
        """Return every cell that is neither hit nor missed, row-major."""
        open_ys, open_xs = np.nonzero(~(self.hits | self.misses))
        return [Coord(int(x), int(y)) for y, x in zip(open_ys, open_xs)]

    def resolved_cells(self, grid: np.ndarray) -> list[Coord]:
        ys, xs = np.nonzero(grid)
        return [Coord(int(x), int(y)) for y, x in zip(ys, xs)]

    def hit_cells(self) -> list[Coord]:
        return self.resolved_cells(self.hits)

    def miss_cells(self) -> list[Coord]:
        return self.resolved_cells(self.misses)

    def all_ships_sunk(self) -> bool:
        return self.alive_count <= 0

    def copy(self) -> BoardState:
        """Return an independent copy of grids and fleet records."""
        return BoardState(
            size=self.size,
            ships=self.ships.copy(),
            hits=self.hits.copy(),
            misses=self.misses.copy(),
            fleet=[replace(ship) for ship in self.fleet],
            alive_count=self.alive_count,
        )


def create_empty_board(size: int = BOARD_SIZE) -> BoardState:
    """Create a board with no ships and no resolved cells."""
    return BoardState(size=size)


def within_bounds(x: int, y: int, size: int = BOARD_SIZE) -> bool:
    """Return whether ``(x, y)`` lies on a ``size`` x ``size`` board."""
    return 0 <= x < size and 0 <= y < size


def is_occupied(board: BoardState, x: int, y: int) -> bool:
    """Return whether a ship covers ``(x, y)``."""
    return board.is_occupied(Coord(x, y))
