"""Configuration module for project-info."""

from typing import Optional

from .logger import (
    create_module_logger,
    setup_session_logging,
)
from .models import LogLevel, OutputFormat
from .settings import Config


def setup_logging(config: Config):
    """Setup logging configuration."""
    return setup_session_logging(config)


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
        setup_logging(_config)
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
    setup_logging(config)


# Convenience exports
__all__ = [
    "Config",
    "LogLevel",
    "OutputFormat",
    "get_config",
    "set_config",
    "setup_logging",
    "create_module_logger",
]
