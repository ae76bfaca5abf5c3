#!/usr/bin/env python3
"""
Tests for the centralized logging configuration.
"""

import logging
import os
from pathlib import Path
from unittest.mock import patch

from forecast_client.logging_config import (
    DEFAULT_LOG_FILE,
    configure_from_env,
    get_logger,
    setup_logging,
)


class TestLoggingConfiguration:
    """Test the logging configuration functionality."""

    def test_setup_logging_basic(self, tmp_path):
        """Test basic logging setup with defaults."""
        log_file = tmp_path / "test.log"

        logger = setup_logging(log_file=str(log_file))

        assert isinstance(logger, logging.Logger)
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 2  # Console + file

        logger.info("Test message")

        assert log_file.exists()
        assert "Test message" in log_file.read_text()

    def test_setup_logging_levels(self):
        """Test different logging levels."""
        test_cases = [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ]

        for level_str, expected_level in test_cases:
            logger = setup_logging(level=level_str, enable_file_logging=False)
            assert logger.level == expected_level

    def test_setup_logging_no_file(self):
        """Test logging setup without file logging."""
        logger = setup_logging(enable_file_logging=False)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_setup_logging_file_directory_creation(self, tmp_path):
        """Test that log file directories are created automatically."""
        log_file = tmp_path / "subdir" / "nested" / "test.log"

        logger = setup_logging(log_file=str(log_file))
        logger.info("Test message")

        assert log_file.exists()

    def test_invalid_log_level(self):
        """Invalid level names fall back to INFO."""
        logger = setup_logging(level="INVALID", enable_file_logging=False)
        assert logger.level == logging.INFO

    def test_default_log_file(self, tmp_path, monkeypatch):
        """File logging without a path writes to DEFAULT_LOG_FILE."""
        monkeypatch.chdir(tmp_path)

        logger = setup_logging()
        logger.info("Default file message")

        assert DEFAULT_LOG_FILE == "forecast_client.log"
        assert "Default file message" in (tmp_path / DEFAULT_LOG_FILE).read_text()

    def test_get_logger(self):
        """Test logger retrieval with names."""
        logger1 = get_logger("forecast_client.module1")
        logger2 = get_logger("forecast_client.module2")
        logger3 = get_logger("forecast_client.module1")

        assert logger1.name == "forecast_client.module1"
        assert logger2.name == "forecast_client.module2"
        assert logger1 is logger3

    def test_configure_from_env_defaults(self, tmp_path, monkeypatch):
        """Test environment configuration with defaults."""
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            logger = configure_from_env()

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 2
        assert (tmp_path / "forecast_client.log").exists()

    @patch.dict(
        os.environ,
        {"LOG_LEVEL": "DEBUG", "LOG_FILE": "custom.log", "DISABLE_FILE_LOGGING": "1"},
    )
    def test_configure_from_env_custom(self):
        """Test environment configuration with custom values."""
        logger = configure_from_env()

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1


class TestLoggingIntegration:
    """Test logging integration with library modules."""

    def test_config_module_logging(self, tmp_path):
        """Loading configuration is logged at DEBUG."""
        from forecast_client.config import get_settings

        log_file = Path(tmp_path) / "config.log"
        setup_logging(level="DEBUG", log_file=str(log_file))

        get_settings()

        assert "Loaded configuration from" in log_file.read_text()
