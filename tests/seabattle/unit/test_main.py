from __future__ import annotations

import logging

import pytest

from engine.api.logging import shutdown_logging
from engine.diagnostics.json_codec import loads
from seabattle import main as main_module
from seabattle.core.errors import PlacementExhausted


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    for key in ("SEABATTLE_LOG_DIR", "SEABATTLE_SEED", "SEABATTLE_FLEET", "SEABATTLE_BOARD_SIZE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(main_module, "load_default_env_files", lambda: None)
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    shutdown_logging()
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)


def test_main_prints_fresh_match(capsys) -> None:
    assert main_module.main(["--seed", "3"]) == 0
    snapshot = loads(capsys.readouterr().out)
    assert snapshot["mode"] == "play"
    assert snapshot["turn"] == "player"
    assert snapshot["fleets"] == {"playerShipsAfloat": 5, "enemyShipsAfloat": 5}


def test_main_autoplay_reaches_game_over(capsys) -> None:
    assert main_module.main(["--seed", "9", "--autoplay", "--pretty"]) == 0
    out = capsys.readouterr().out
    assert "\n  " in out
    snapshot = loads(out)
    assert snapshot["mode"] == "over"
    assert snapshot["winner"] in {"player", "enemy"}


def test_main_reports_placement_failure(monkeypatch, capsys) -> None:
    def _exhausted(self):
        raise PlacementExhausted(ship_index=1, size=5, trials=300)

    monkeypatch.setattr(main_module.GameController, "start", _exhausted)
    assert main_module.main(["--seed", "1"]) == 1
    assert capsys.readouterr().out == ""
