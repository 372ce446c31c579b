"""Logging setup for project-info.

Stdout carries the rendered descriptor, so every sink configured here writes
to stderr or to a file.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


class SessionLogger:
    """Owns the loguru sinks for one invocation."""

    def __init__(self, config):
        self.config = config
        self._setup_loggers()

    def _setup_loggers(self):
        # Remove default logger
        logger.remove()

        console_level = "DEBUG" if self.config.verbose else self.config.log_level.value
        logger.add(
            sys.stderr,
            level=console_level,
            format=self._get_console_format(),
            colorize=None,
        )

        if self.config.log_file:
            log_path = Path(self.config.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                str(log_path),
                level="DEBUG",
                format=self._get_file_format(),
                rotation=self.config.log_rotation,
                retention=self.config.log_retention,
            )
            logger.debug(f"File logging enabled: {log_path}")

    def _get_console_format(self) -> str:
        """Get console log format based on verbose setting."""
        if self.config.verbose:
            return ("<green>{time:HH:mm:ss.SSS}</green> | "
                   "<level>{level: <8}</level> | "
                   "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                   "<level>{message}</level>")
        else:
            return ("<green>{time:HH:mm:ss}</green> | "
                   "<level>{level: <8}</level> | "
                   "<level>{message}</level>")

    def _get_file_format(self) -> str:
        """Get file log format."""
        return "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra} | {name}:{function}:{line} | {message}"


# Global session logger instance
_session_logger: Optional[SessionLogger] = None


def setup_session_logging(config) -> SessionLogger:
    """Setup session-based logging system."""
    global _session_logger

    _session_logger = SessionLogger(config)
    return _session_logger


def create_module_logger(module_name: str):
    """Create a logger bound to one reactor module."""
    return logger.bind(module=module_name)
