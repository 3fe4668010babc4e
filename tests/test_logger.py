"""Tests for logging setup."""

import logging
from datetime import datetime

import pytest
from unittest.mock import patch
from src.core.config import Config
from src.core.logger import log_file_path, setup_logger


@pytest.fixture
def fresh_logger():
    """Logger name that has no handlers yet, removed afterwards."""
    name = "BuildHelperTest"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestLogger:
    """Test cases for setup_logger."""

    def test_console_level_default(self, monkeypatch):
        monkeypatch.delenv(Config.ENV_LOG_LEVEL, raising=False)
        assert Config.get_console_log_level() == "INFO"

    def test_console_level_env(self, monkeypatch):
        monkeypatch.setenv(Config.ENV_LOG_LEVEL, "warning")
        assert Config.get_console_log_level() == "WARNING"

        monkeypatch.setenv(Config.ENV_LOG_LEVEL, "chatty")
        assert Config.get_console_log_level() == "INFO"

    def test_log_file_path(self, tmp_path):
        with patch('src.core.config.Config.LOGS_DIR', tmp_path):
            assert log_file_path(datetime(2024, 3, 5)) == tmp_path / "buildhelper_20240305.log"

    def test_handlers(self, tmp_path, monkeypatch, fresh_logger):
        monkeypatch.setenv(Config.ENV_LOG_LEVEL, "ERROR")
        with patch('src.core.config.Config.LOGS_DIR', tmp_path):
            logger = setup_logger(fresh_logger)
            assert setup_logger(fresh_logger) is logger
            expected_file = str(log_file_path())

        console, file_handler = logger.handlers
        assert console.level == logging.ERROR
        assert file_handler.level == logging.DEBUG
        assert file_handler.baseFilename == expected_file

    def test_unwritable_logs_dir(self, fresh_logger):
        with patch('src.core.config.Config.LOGS_DIR') as mock_logs:
            mock_logs.mkdir.side_effect = PermissionError("read-only")
            logger = setup_logger(fresh_logger)

        assert len(logger.handlers) == 1
