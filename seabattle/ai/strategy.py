"""Opponent targeting strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.api.ai import Agent, Blackboard, DecisionContext, create_blackboard
from seabattle.core.board import BoardState
from seabattle.core.models import Coord


class TargetingStrategy(Agent, ABC):
    """Opponent targeting contract backed by engine AI primitives."""

    ACTION_FIRE = "fire"
    ACTION_HOLD = "hold"
    OBSERVED_BOARD = "player_board"
    _NEXT_SHOT_KEY = "seabattle.ai.next_shot"

    def __init__(self) -> None:
        self._blackboard = create_blackboard()

    @property
    def blackboard(self) -> Blackboard:
        return self._blackboard

    def decide(self, context: DecisionContext) -> str:
        """Expose the strategy through the generic engine Agent contract."""
        board = context.observations.get(self.OBSERVED_BOARD)
        if not isinstance(board, BoardState):
            raise TypeError("expected BoardState observation for targeting")
        target = self.pick_target(board)
        if target is None:
            context.blackboard.remove(self._NEXT_SHOT_KEY)
            return self.ACTION_HOLD
        context.blackboard.set(self._NEXT_SHOT_KEY, target)
        return self.ACTION_FIRE

    @classmethod
    def take_decided_shot(cls, blackboard: Blackboard) -> Coord:
        """Read and clear the pending shot from blackboard."""
        shot = blackboard.remove(cls._NEXT_SHOT_KEY)
        if not isinstance(shot, Coord):
            raise TypeError("expected Coord shot in AI blackboard")
        return shot

    @abstractmethod
    def pick_target(self, board: BoardState) -> Coord | None:
        """Return the next cell to fire at, or None when nothing is left."""
