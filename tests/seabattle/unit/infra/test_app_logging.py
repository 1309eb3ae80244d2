from __future__ import annotations

import logging
from logging.handlers import QueueHandler

import pytest

from engine.api.logging import shutdown_logging
from seabattle.infra.logging import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield root
    shutdown_logging()
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)


def test_setup_logging_console_only_by_default(monkeypatch, restore_root_logger) -> None:
    monkeypatch.delenv("SEABATTLE_LOG_DIR", raising=False)
    monkeypatch.setenv("SEABATTLE_LOG_LEVEL", "warning")

    setup_logging()

    root = restore_root_logger
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_setup_logging_streams_to_run_file(tmp_path, monkeypatch, restore_root_logger) -> None:
    monkeypatch.setenv("SEABATTLE_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("SEABATTLE_LOG_LEVEL", "INFO")

    setup_logging()
    logging.getLogger("seabattle.test").info("match_over winner=%s", "player")
    shutdown_logging()

    root = restore_root_logger
    assert isinstance(root.handlers[0], QueueHandler)
    files = list((tmp_path / "logs").glob("seabattle_run_*.jsonl"))
    assert len(files) == 1
    content = files[0].read_text(encoding="utf-8")
    assert "match_over winner=player" in content
