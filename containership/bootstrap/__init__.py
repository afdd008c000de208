"""
bootstrap/ - Bootstrap Layer

Configuration loading and logging setup.
"""

from .config import (
    ContainershipConfig,
    LoggingConfig,
    SerialConfig,
    load_config,
    get_config,
    reset_config,
)

from .logging_setup import (
    JSONFormatter,
    setup_logging,
)


__all__ = [
    # Config
    "ContainershipConfig",
    "LoggingConfig",
    "SerialConfig",
    "load_config",
    "get_config",
    "reset_config",
    # Logging
    "JSONFormatter",
    "setup_logging",
]
