"""Blackboard implementation."""

from __future__ import annotations

from copy import deepcopy


class RuntimeBlackboard:
    """Dict-backed blackboard shared between an agent and its host."""

    def __init__(self) -> None:
        self._values: dict[str, object] = {}

    def set(self, key: str, value: object) -> None:
        self._values[self._normalize(key)] = value

    def get(self, key: str) -> object | None:
        return self._values.get(key.strip())

    def require(self, key: str) -> object:
        value = self.get(key)
        if value is None:
            raise KeyError(f"missing blackboard key: {key}")
        return value

    def has(self, key: str) -> bool:
        return key.strip() in self._values

    def remove(self, key: str) -> object | None:
        return self._values.pop(key.strip(), None)

    def clear(self) -> None:
        self._values.clear()

    def snapshot(self) -> dict[str, object]:
        return deepcopy(self._values)

    @staticmethod
    def _normalize(key: str) -> str:
        normalized = key.strip()
        if not normalized:
            raise ValueError("key must not be empty")
        return normalized
