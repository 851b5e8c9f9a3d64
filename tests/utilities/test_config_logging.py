# tests/utilities/test_config_logging.py
from __future__ import annotations

import logging

from qif_csv.utilities.config_logging import (
    LOGGING,
    build_logging_config,
    configure_logging,
)


def test_build_logging_config_sets_console_level_without_mutating_base():
    # Act
    cfg = build_logging_config("debug")
    # Assert
    assert cfg["handlers"]["console"]["level"] == "DEBUG"
    assert LOGGING["handlers"]["console"]["level"] == "INFO", "Base dict must stay untouched"
    assert "file" not in cfg["handlers"]


def test_build_logging_config_adds_rotating_file_handler(tmp_path):
    # Arrange
    log_file = tmp_path / "logs" / "qif.log"
    # Act
    cfg = build_logging_config("INFO", log_file)
    # Assert
    assert cfg["handlers"]["file"]["class"] == "logging.handlers.RotatingFileHandler"
    assert cfg["handlers"]["file"]["filename"] == str(log_file)
    assert "file" in cfg["loggers"]["qif_csv"]["handlers"]
    assert log_file.parent.is_dir(), "Log directory is created up front"
    assert "file" not in LOGGING["loggers"]["qif_csv"]["handlers"]


def test_configure_logging_writes_to_log_file(tmp_path):
    # Arrange
    log_file = tmp_path / "qif.log"
    configure_logging("WARNING", log_file)
    # Act
    logging.getLogger("qif_csv.test").debug("hello from the test")
    for h in logging.getLogger("qif_csv").handlers:
        h.flush()
    # Assert
    assert "hello from the test" in log_file.read_text(encoding="utf-8")
