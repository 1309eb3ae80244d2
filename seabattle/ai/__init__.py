"""Opponent targeting strategies."""

from seabattle.ai.random_target import RandomTargetAI, pick_target
from seabattle.ai.strategy import TargetingStrategy

__all__ = ["RandomTargetAI", "TargetingStrategy", "pick_target"]
