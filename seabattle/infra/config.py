"""Game configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from seabattle.core.models import BOARD_SIZE, FLEET_SIZES, OPPONENT_DELAY_MS, PLACEMENT_TRIALS


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load app env files; later files win over earlier ones."""
    to_load = tuple(paths) if paths is not None else (".env.app", ".env.app.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _int_csv(name: str, default: tuple[int, ...]) -> tuple[int, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        values = tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError:
        return default
    return values or default


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable match configuration."""

    board_size: int = BOARD_SIZE
    fleet_sizes: tuple[int, ...] = FLEET_SIZES
    placement_trials: int = PLACEMENT_TRIALS
    opponent_delay_ms: int = OPPONENT_DELAY_MS
    seed: int | None = None

    @classmethod
    def from_env(cls) -> GameConfig:
        """Load configuration from SEABATTLE_* env vars, falling back to defaults."""
        return cls(
            board_size=_int("SEABATTLE_BOARD_SIZE", BOARD_SIZE),
            fleet_sizes=_int_csv("SEABATTLE_FLEET", FLEET_SIZES),
            placement_trials=_int("SEABATTLE_PLACEMENT_TRIALS", PLACEMENT_TRIALS),
            opponent_delay_ms=_int("SEABATTLE_OPPONENT_DELAY_MS", OPPONENT_DELAY_MS),
            seed=_optional_int("SEABATTLE_SEED"),
        )

    def validate(self) -> GameConfig:
        if self.board_size <= 0:
            raise ValueError("board_size must be > 0")
        if not self.fleet_sizes or any(size <= 0 for size in self.fleet_sizes):
            raise ValueError("fleet_sizes must be a non-empty list of positive sizes")
        if max(self.fleet_sizes) > self.board_size:
            raise ValueError("every ship must fit within the board")
        if sum(self.fleet_sizes) >= self.board_size * self.board_size:
            raise ValueError("fleet must leave open water on the board")
        if self.placement_trials <= 0:
            raise ValueError("placement_trials must be > 0")
        if self.opponent_delay_ms < 0:
            raise ValueError("opponent_delay_ms must be >= 0")
        return self
