"""
Tests for configuration and logging setup.
"""

import json
import logging

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from string_adder import logging_config
from string_adder.config import Config, load_config
from string_adder.logging_config import (
    JSONFormatter,
    get_correlation_id,
    get_logger,
    set_correlation_id,
    setup_logging,
)


class TestConfig:
    """Tests for Config."""

    def test_defaults(self):
        config = Config()
        assert config.ceiling == 1000
        assert config.strict_headers is True
        assert config.exit_command == "exit"
        assert config.validate() == []

    def test_from_env(self, monkeypatch):
        """Should read settings from the environment."""
        monkeypatch.setenv("ADDER_CEILING", "500")
        monkeypatch.setenv("ADDER_STRICT_HEADERS", "false")
        monkeypatch.setenv("ADDER_EXIT_COMMAND", "quit")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = load_config()
        assert config.ceiling == 500
        assert config.strict_headers is False
        assert config.exit_command == "quit"
        assert config.log_level == "DEBUG"

    def test_bad_int_falls_back(self, monkeypatch):
        """Should use the default for unparsable integers."""
        monkeypatch.setenv("ADDER_CEILING", "lots")
        assert Config.from_env().ceiling == 1000

    def test_invalid_values_raise(self):
        """Should reject invalid settings."""
        with pytest.raises(ValueError):
            Config(ceiling=-1)
        with pytest.raises(ValueError):
            Config(exit_command="  ")
        with pytest.raises(ValueError):
            Config(log_level="LOUD")


class TestLogging:
    """Tests for the logging helpers."""

    def test_get_logger_prefix(self):
        assert get_logger("adder").name == "string_adder.adder"

    def test_json_formatter_includes_correlation_id(self):
        """Should emit JSON with the current correlation ID."""
        record = logging.LogRecord(
            "string_adder.test", logging.WARNING, __file__, 1, "hello %s", ("there",), None
        )
        set_correlation_id("abc123")
        try:
            data = json.loads(JSONFormatter().format(record))
        finally:
            set_correlation_id(None)

        assert data["message"] == "hello there"
        assert data["level"] == "WARNING"
        assert data["correlation_id"] == "abc123"
        assert get_correlation_id() is None

    def test_setup_logging_configures_once(self, monkeypatch):
        """Should install one handler and ignore later calls."""
        package_logger = logging.getLogger("string_adder")
        monkeypatch.setattr(logging_config, "_logging_configured", False)
        monkeypatch.setattr(package_logger, "handlers", [])
        monkeypatch.setattr(package_logger, "level", package_logger.level)

        setup_logging(level="ERROR")
        setup_logging(level="DEBUG", json_format=True)

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.ERROR
