"""Match state and turn transitions.

Every transition takes the current `GameSession` and returns a new one; boards
are copied before a shot is applied so earlier session values stay valid.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, replace

from seabattle.core.board import BoardState
from seabattle.core.models import (
    BOARD_SIZE,
    FLEET_SIZES,
    PLACEMENT_TRIALS,
    Coord,
    Mode,
    ShotOutcome,
    Side,
)
from seabattle.core.placement import generate_board
from seabattle.core.shot_resolution import resolve_shot

logger = logging.getLogger(__name__)

MENU_MESSAGE = "Press Start"
START_MESSAGE = "Your turn: fire on enemy waters."
REPEAT_MESSAGE = "Already targeted. Choose another enemy cell."

_SHOT_MESSAGES: dict[Side, dict[str, str]] = {
    Side.PLAYER: {
        "miss": "Miss. Enemy preparing response...",
        "hit": "Direct hit!",
        "sunk": "Direct hit. Enemy ship sunk!",
        "win": "Victory! Enemy fleet destroyed.",
    },
    Side.ENEMY: {
        "miss": "Enemy missed. Your turn.",
        "hit": "Enemy scored a hit!",
        "sunk": "Enemy sunk one of your ships!",
        "win": "Defeat. Your fleet has been sunk.",
    },
}


@dataclass(frozen=True, slots=True)
class GameSession:
    """Runtime game session state."""

    mode: Mode = Mode.MENU
    turn: Side = Side.PLAYER
    winner: Side | None = None
    message: str = MENU_MESSAGE
    player_board: BoardState | None = None
    enemy_board: BoardState | None = None
    player_shots: tuple[Coord, ...] = ()
    enemy_shots: tuple[Coord, ...] = ()
    hover: Coord | None = None

    def target_board(self, shooter: Side) -> BoardState | None:
        """Board that `shooter` fires at."""
        return self.enemy_board if shooter is Side.PLAYER else self.player_board


@dataclass(frozen=True, slots=True)
class ShotTransition:
    """Session produced by a shot command plus what happened."""

    session: GameSession
    accepted: bool
    outcome: ShotOutcome | None = None
    coord: Coord | None = None

    @property
    def duplicate(self) -> bool:
        return self.outcome is not None and self.outcome.duplicate

    @property
    def opponent_due(self) -> bool:
        """Whether the enemy now owes a response shot."""
        return (
            self.accepted
            and self.session.mode is Mode.PLAY
            and self.session.turn is Side.ENEMY
        )


def menu_session() -> GameSession:
    return GameSession()


def start_session(
    rng: random.Random,
    *,
    board_size: int = BOARD_SIZE,
    fleet_sizes: Sequence[int] = FLEET_SIZES,
    placement_trials: int = PLACEMENT_TRIALS,
) -> GameSession:
    """Create a fresh match with both fleets placed.

    Raises `PlacementExhausted` if either fleet cannot be placed; nothing is
    returned in that case.
    """
    player_board = generate_board(rng, board_size, fleet_sizes, placement_trials)
    enemy_board = generate_board(rng, board_size, fleet_sizes, placement_trials)
    return GameSession(
        mode=Mode.PLAY,
        turn=Side.PLAYER,
        winner=None,
        message=START_MESSAGE,
        player_board=player_board,
        enemy_board=enemy_board,
    )


def return_to_menu(session: GameSession) -> GameSession:
    """Leave a finished match; ignored unless the match is over."""
    if session.mode is not Mode.OVER:
        return session
    return menu_session()


def set_hover(session: GameSession, coord: Coord | None) -> GameSession:
    """Track the enemy cell under the pointer."""
    if coord is not None:
        board = session.enemy_board
        if board is None or not board.in_bounds(coord):
            coord = None
    if coord == session.hover:
        return session
    return replace(session, hover=coord)


def player_fire(session: GameSession, coord: Coord) -> ShotTransition:
    """Resolve player shot at the enemy board."""
    return _fire(session, Side.PLAYER, coord)


def enemy_fire(session: GameSession, coord: Coord) -> ShotTransition:
    """Resolve enemy shot at the player board."""
    return _fire(session, Side.ENEMY, coord)


def _fire(session: GameSession, shooter: Side, coord: Coord) -> ShotTransition:
    if session.mode is not Mode.PLAY or session.turn is not shooter:
        return ShotTransition(session=session, accepted=False, coord=coord)
    current = session.target_board(shooter)
    if current is None:
        return ShotTransition(session=session, accepted=False, coord=coord)

    board = current.copy()
    outcome = resolve_shot(board, coord)
    if outcome.duplicate:
        notice = REPEAT_MESSAGE if shooter is Side.PLAYER else session.message
        return ShotTransition(
            session=replace(session, message=notice),
            accepted=False,
            outcome=outcome,
            coord=coord,
        )

    messages = _SHOT_MESSAGES[shooter]
    if outcome.sunk:
        message = messages["sunk"]
    elif outcome.hit:
        message = messages["hit"]
    else:
        message = messages["miss"]
    logger.debug(
        "shot_resolved shooter=%s x=%d y=%d hit=%s sunk=%s alive=%d",
        shooter.value,
        coord.x,
        coord.y,
        outcome.hit,
        outcome.sunk,
        board.alive_count,
    )

    if shooter is Side.PLAYER:
        updated = replace(
            session, enemy_board=board, player_shots=(*session.player_shots, coord)
        )
    else:
        updated = replace(
            session, player_board=board, enemy_shots=(*session.enemy_shots, coord)
        )

    if board.all_ships_sunk():
        updated = replace(updated, mode=Mode.OVER, winner=shooter, message=messages["win"])
        logger.info("match_over winner=%s", shooter.value)
    else:
        updated = replace(updated, turn=shooter.opponent, message=message)
    return ShotTransition(session=updated, accepted=True, outcome=outcome, coord=coord)
