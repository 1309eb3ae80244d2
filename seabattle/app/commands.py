"""Commands accepted by the game controller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StartGame:
    """Start or restart a match with freshly placed fleets."""


@dataclass(frozen=True, slots=True)
class ReturnToMenu:
    """Leave a finished match."""


@dataclass(frozen=True, slots=True)
class FireAt:
    """Player shot at an enemy board cell."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class HoverCell:
    """Pointer hovering an enemy board cell; None coordinates clear it."""

    x: int | None
    y: int | None


@dataclass(frozen=True, slots=True)
class AdvanceTime:
    """Move logical game time forward."""

    milliseconds: float


Command = StartGame | ReturnToMenu | FireAt | HoverCell | AdvanceTime
