"""Public engine API contracts."""

from engine.api.ai import (
    Agent,
    Blackboard,
    BlackboardValue,
    DecisionContext,
    create_blackboard,
)
from engine.api.logging import (
    EngineLoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from engine.api.scheduling import TaskScheduler, create_scheduler

__all__ = [
    "Agent",
    "Blackboard",
    "BlackboardValue",
    "DecisionContext",
    "EngineLoggingConfig",
    "TaskScheduler",
    "configure_logging",
    "create_blackboard",
    "create_scheduler",
    "get_logger",
    "shutdown_logging",
]
