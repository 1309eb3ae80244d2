"""Public engine logging API."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EngineLoggingConfig:
    """Engine logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def configure_logging(config: EngineLoggingConfig) -> None:
    """Install root handlers described by `config`."""
    from engine.runtime.logging import configure_engine_logging

    configure_engine_logging(config)


def shutdown_logging() -> None:
    """Stop background log streaming."""
    from engine.runtime.logging import shutdown_engine_logging

    shutdown_engine_logging()


def get_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    from engine.runtime.logging import get_engine_logger

    return get_engine_logger(name)
