"""Application controller owning the match session and opponent timing."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass

from engine.api.ai import DecisionContext
from engine.api.scheduling import TaskScheduler, create_scheduler
from engine.diagnostics.json_codec import dumps_text
from seabattle.ai.random_target import RandomTargetAI
from seabattle.ai.strategy import TargetingStrategy
from seabattle.app.commands import (
    AdvanceTime,
    Command,
    FireAt,
    HoverCell,
    ReturnToMenu,
    StartGame,
)
from seabattle.app.state_projection import Snapshot, build_snapshot
from seabattle.core.board import within_bounds
from seabattle.core.errors import InvalidShotTarget, PlacementExhausted
from seabattle.core.models import Coord, Mode, ShotOutcome, Side
from seabattle.core.rules import (
    GameSession,
    enemy_fire,
    menu_session,
    player_fire,
    return_to_menu,
    set_hover,
    start_session,
)
from seabattle.infra.config import GameConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlayerShotResult:
    """Outcome of a player fire command."""

    accepted: bool
    outcome: ShotOutcome | None
    status: str
    winner: Side | None
    opponent_scheduled: bool

    @property
    def duplicate(self) -> bool:
        return self.outcome is not None and self.outcome.duplicate


class GameController:
    """Owns the current session and serializes every command against it.

    The opponent's reply is deferred through the scheduler. Each scheduled
    reply carries the session generation it was queued for and is dropped if
    a restart or return to menu happened in the meantime.
    """

    def __init__(
        self,
        rng: random.Random,
        config: GameConfig | None = None,
        scheduler: TaskScheduler | None = None,
        strategy: TargetingStrategy | None = None,
    ) -> None:
        self._config = (config or GameConfig()).validate()
        self._rng = rng
        self._scheduler = scheduler if scheduler is not None else create_scheduler()
        self._strategy = strategy if strategy is not None else RandomTargetAI(rng)
        self._session = menu_session()
        self._generation = 0
        self._pending_task: int | None = None
        self._lock = threading.RLock()

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def scheduler(self) -> TaskScheduler:
        return self._scheduler

    @property
    def config(self) -> GameConfig:
        return self._config

    def start(self) -> GameSession:
        """Start a fresh match, replacing any current one.

        Raises `PlacementExhausted` when a fleet cannot be placed; the current
        session and any pending opponent reply are then left as they were.
        """
        with self._lock:
            try:
                session = start_session(
                    self._rng,
                    board_size=self._config.board_size,
                    fleet_sizes=self._config.fleet_sizes,
                    placement_trials=self._config.placement_trials,
                )
            except PlacementExhausted:
                logger.error("session_start_failed generation=%d", self._generation, exc_info=True)
                raise
            self._begin_generation()
            self._session = session
            logger.info(
                "session_started generation=%d board_size=%d ships=%d",
                self._generation,
                self._config.board_size,
                len(self._config.fleet_sizes),
            )
            return session

    def return_to_menu(self) -> bool:
        """Clear a finished match; ignored unless the match is over."""
        with self._lock:
            session = return_to_menu(self._session)
            if session is self._session:
                return False
            self._begin_generation()
            self._session = session
            logger.info("session_closed generation=%d", self._generation)
            return True

    def fire(self, x: int, y: int) -> PlayerShotResult:
        """Apply a player shot at the enemy board."""
        coord = Coord(x, y)
        if not within_bounds(x, y, self._config.board_size):
            raise InvalidShotTarget(coord, self._config.board_size)
        with self._lock:
            transition = player_fire(self._session, coord)
            self._session = transition.session
            if transition.opponent_due:
                self._schedule_opponent_turn()
            return PlayerShotResult(
                accepted=transition.accepted,
                outcome=transition.outcome,
                status=self._session.message,
                winner=self._session.winner,
                opponent_scheduled=transition.opponent_due,
            )

    def hover(self, x: int | None, y: int | None) -> bool:
        """Update the hovered enemy cell; returns whether it changed."""
        with self._lock:
            coord = Coord(x, y) if x is not None and y is not None else None
            session = set_hover(self._session, coord)
            changed = session is not self._session
            self._session = session
            return changed

    def clear_hover(self) -> bool:
        return self.hover(None, None)

    def advance_time(self, milliseconds: float) -> int:
        """Advance game time and run every deferred action now due."""
        with self._lock:
            return self._scheduler.advance(milliseconds)

    def dispatch(self, command: Command) -> object:
        """Route a command object to its handler."""
        if isinstance(command, StartGame):
            return self.start()
        if isinstance(command, ReturnToMenu):
            return self.return_to_menu()
        if isinstance(command, FireAt):
            return self.fire(command.x, command.y)
        if isinstance(command, HoverCell):
            return self.hover(command.x, command.y)
        if isinstance(command, AdvanceTime):
            return self.advance_time(command.milliseconds)
        raise TypeError(f"unsupported command: {type(command).__name__}")

    def snapshot(self) -> Snapshot:
        with self._lock:
            return build_snapshot(self._session, board_size=self._config.board_size)

    def render_text(self, *, pretty: bool = False) -> str:
        """Return the state read-out as JSON text."""
        return dumps_text(self.snapshot(), pretty=pretty)

    def _begin_generation(self) -> None:
        if self._pending_task is not None:
            self._scheduler.cancel(self._pending_task)
            self._pending_task = None
        self._generation += 1
        self._strategy.blackboard.clear()

    def _schedule_opponent_turn(self) -> None:
        generation = self._generation
        self._pending_task = self._scheduler.call_later(
            self._config.opponent_delay_ms,
            lambda: self._run_opponent_turn(generation),
        )
        logger.debug(
            "opponent_turn_scheduled generation=%d delay_ms=%d",
            generation,
            self._config.opponent_delay_ms,
        )

    def _run_opponent_turn(self, generation: int) -> None:
        with self._lock:
            session = self._session
            if (
                generation != self._generation
                or session.mode is not Mode.PLAY
                or session.turn is not Side.ENEMY
            ):
                logger.debug("opponent_turn_discarded generation=%d", generation)
                return
            self._pending_task = None
            decision = self._strategy.decide(
                DecisionContext(
                    now_ms=self._scheduler.now_ms,
                    blackboard=self._strategy.blackboard,
                    observations={TargetingStrategy.OBSERVED_BOARD: session.player_board},
                )
            )
            if decision != TargetingStrategy.ACTION_FIRE:
                logger.debug("opponent_turn_no_target generation=%d", generation)
                return
            shot = TargetingStrategy.take_decided_shot(self._strategy.blackboard)
            self._session = enemy_fire(session, shot).session
