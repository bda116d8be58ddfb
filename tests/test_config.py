"""Tests for configuration and logging setup."""

from pathlib import Path

import structlog

from castle.config import Config
from castle.logging import configure_logging, get_logger


def test_defaults(monkeypatch):
    for var in ("CASTLE_LOG_LEVEL", "CASTLE_LOG_FILE", "CASTLE_JSON_LOGS"):
        monkeypatch.delenv(var, raising=False)
    config = Config.from_env()
    assert config == Config()
    assert config.log_level == "WARNING"
    assert config.log_file is None
    assert not config.json_logs


def test_from_env(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("CASTLE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CASTLE_LOG_FILE", str(tmp_path / "castle.log"))
    monkeypatch.setenv("CASTLE_JSON_LOGS", "yes")
    config = Config.from_env()
    assert config.log_level == "DEBUG"
    assert config.log_file == tmp_path / "castle.log"
    assert config.json_logs


def test_json_logs_to_file(tmp_path: Path):
    log_file = tmp_path / "castle.log"
    try:
        configure_logging(log_level="INFO", log_file=log_file, json_logs=True)
        logger = get_logger("castle.test")
        logger.info("exit_cleared", room="forest", direction="east")
        logger.debug("command_handled", verb="look")
    finally:
        structlog.reset_defaults()

    text = log_file.read_text()
    assert '"event": "exit_cleared"' in text
    assert '"room": "forest"' in text
    assert "command_handled" not in text
