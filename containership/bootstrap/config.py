"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from ..core.constants import DEFAULT_SERIAL_PREFIX

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("CONTAINERSHIP_LOG_LEVEL", "INFO"),
            format=os.getenv("CONTAINERSHIP_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("CONTAINERSHIP_LOG_FILE"),
            json_logs=os.getenv("CONTAINERSHIP_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class SerialConfig:
    """Serial number assignment configuration."""

    prefix: str = DEFAULT_SERIAL_PREFIX

    @classmethod
    def from_env(cls) -> "SerialConfig":
        return cls(
            prefix=os.getenv("CONTAINERSHIP_SERIAL_PREFIX", DEFAULT_SERIAL_PREFIX),
        )


@dataclass
class ContainershipConfig:
    """Root configuration."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    serial: SerialConfig = field(default_factory=SerialConfig)

    @classmethod
    def from_env(cls) -> "ContainershipConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("CONTAINERSHIP_ENVIRONMENT", "development"),
            debug=os.getenv("CONTAINERSHIP_DEBUG", "false").lower() == "true",
            logging=LoggingConfig.from_env(),
            serial=SerialConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "ContainershipConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "ContainershipConfig":
        """Create config from dictionary, file values over environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("logging", "serial"):
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
            "serial": {
                "prefix": self.serial.prefix,
            },
        }


# Global config instance
_config: Optional[ContainershipConfig] = None


def load_config(filepath: str = None) -> ContainershipConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        ContainershipConfig instance
    """
    global _config

    if filepath:
        _config = ContainershipConfig.from_file(filepath)
    else:
        default_paths = [
            "./containership.json",
            "./config/containership.json",
            os.path.expanduser("~/.containership/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = ContainershipConfig.from_file(path)
                return _config

        _config = ContainershipConfig.from_env()

    logger.debug(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> ContainershipConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the loaded configuration so the next get_config() reloads it."""
    global _config
    _config = None
