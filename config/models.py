"""Data models for configuration module."""

from enum import Enum


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class OutputFormat(str, Enum):
    """Descriptor rendering formats."""

    JSON = "json"
    SUMMARY = "summary"
