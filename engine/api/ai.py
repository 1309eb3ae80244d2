"""Public AI primitive API contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol


class Blackboard(Protocol):
    """Shared AI context storage contract."""

    def set(self, key: str, value: "BlackboardValue") -> None:
        """Set a value for key."""

    def get(self, key: str) -> "BlackboardValue | None":
        """Get value for key if present."""

    def require(self, key: str) -> "BlackboardValue":
        """Get required value or raise KeyError."""

    def has(self, key: str) -> bool:
        """Return whether key exists."""

    def remove(self, key: str) -> "BlackboardValue | None":
        """Remove key and return previous value if present."""

    def snapshot(self) -> dict[str, "BlackboardValue"]:
        """Return a copy of current blackboard values."""


class BlackboardValue(Protocol):
    """Opaque AI blackboard value contract."""


@dataclass(frozen=True, slots=True)
class DecisionContext:
    """Agent decision context for one think step."""

    now_ms: float
    blackboard: Blackboard
    observations: Mapping[str, object]


class Agent(Protocol):
    """AI agent contract."""

    def decide(self, context: DecisionContext) -> str:
        """Return next action identifier."""


def create_blackboard() -> Blackboard:
    """Create default blackboard implementation."""
    from engine.ai.blackboard import RuntimeBlackboard

    return RuntimeBlackboard()
