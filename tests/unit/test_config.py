"""
Unit tests for configuration and logging setup.
"""

import json
import logging

import pytest

from containership.bootstrap import (
    ContainershipConfig,
    JSONFormatter,
    LoggingConfig,
    get_config,
    load_config,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Undo handlers added by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestConfigFromEnv:
    """Tests for environment-based configuration."""

    def test_defaults(self, monkeypatch):
        """Test defaults without environment variables."""
        for var in ("CONTAINERSHIP_LOG_LEVEL", "CONTAINERSHIP_SERIAL_PREFIX",
                    "CONTAINERSHIP_ENVIRONMENT", "CONTAINERSHIP_DEBUG"):
            monkeypatch.delenv(var, raising=False)
        config = ContainershipConfig.from_env()
        assert config.environment == "development"
        assert config.debug is False
        assert config.logging.level == "INFO"
        assert config.serial.prefix == "KON"

    def test_env_overrides(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("CONTAINERSHIP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CONTAINERSHIP_JSON_LOGS", "true")
        monkeypatch.setenv("CONTAINERSHIP_DEBUG", "true")
        config = ContainershipConfig.from_env()
        assert config.logging.level == "DEBUG"
        assert config.logging.json_logs is True
        assert config.debug is True


class TestConfigFromFile:
    """Tests for JSON file configuration."""

    def test_file_values(self, tmp_path):
        """Test file values are applied over the environment."""
        path = tmp_path / "containership.json"
        path.write_text(json.dumps({
            "environment": "test",
            "logging": {"level": "WARNING", "unknown_key": 1},
            "serial": {"prefix": "TST"},
        }))
        config = ContainershipConfig.from_file(str(path))
        assert config.environment == "test"
        assert config.logging.level == "WARNING"
        assert not hasattr(config.logging, "unknown_key")
        assert config.serial.prefix == "TST"
        assert set(config.to_dict()) == {"environment", "debug", "version", "logging", "serial"}

    def test_missing_file_falls_back(self, tmp_path):
        """Test a missing file falls back to environment config."""
        config = ContainershipConfig.from_file(str(tmp_path / "nope.json"))
        assert isinstance(config, ContainershipConfig)

    def test_default_location(self, tmp_path, monkeypatch):
        """Test load_config picks up ./containership.json."""
        (tmp_path / "containership.json").write_text(json.dumps({"environment": "local"}))
        monkeypatch.chdir(tmp_path)
        assert load_config().environment == "local"
        assert get_config().environment == "local"

    def test_to_dict(self):
        """Test config serialization."""
        d = ContainershipConfig(logging=LoggingConfig(level="ERROR")).to_dict()
        assert d["logging"]["level"] == "ERROR"
        assert d["serial"]["prefix"] == "KON"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level(self, restore_root_logger):
        """Test the root logger level is applied."""
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_file_handler(self, tmp_path, restore_root_logger):
        """Test a log file receives records."""
        log_file = tmp_path / "out.log"
        setup_logging(level="INFO", log_file=str(log_file))
        logging.getLogger("containership.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello file" in log_file.read_text()

    def test_json_formatter(self):
        """Test JSON records carry level, logger and message."""
        record = logging.LogRecord("containership.x", logging.WARNING, __file__, 1,
                                   "watch out", None, None)
        data = json.loads(JSONFormatter().format(record))
        assert data["level"] == "WARNING"
        assert data["logger"] == "containership.x"
        assert data["message"] == "watch out"
