"""Configuration settings for project-info."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .models import LogLevel


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Config(BaseModel):
    """Main configuration class."""

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.WARNING)
    log_file: Optional[str] = Field(default=None)
    verbose: bool = Field(default=False)
    log_rotation: str = Field(default="10 MB")
    log_retention: str = Field(default="7 days")

    # Inspection defaults
    default_compliance_level: int = Field(default=7)
    reports_dir: str = Field(default="surefire-reports")  # under the build directory
    generated_sources_dir: str = Field(default="generated-sources")  # under the output directory
    classpath_file: str = Field(default="classpath.txt")  # under the build directory

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        env_file = Path(".env")
        if env_file.exists():
            load_dotenv(env_file)

        return cls(
            log_level=LogLevel(os.getenv("PINFO_LOG_LEVEL", "WARNING").upper()),
            log_file=os.getenv("PINFO_LOG_FILE") or None,
            verbose=_env_flag("PINFO_VERBOSE"),
            log_rotation=os.getenv("PINFO_LOG_ROTATION", "10 MB"),
            log_retention=os.getenv("PINFO_LOG_RETENTION", "7 days"),
            default_compliance_level=int(os.getenv("PINFO_DEFAULT_COMPLIANCE_LEVEL", "7")),
            reports_dir=os.getenv("PINFO_REPORTS_DIR", "surefire-reports"),
            generated_sources_dir=os.getenv("PINFO_GENERATED_SOURCES_DIR", "generated-sources"),
            classpath_file=os.getenv("PINFO_CLASSPATH_FILE", "classpath.txt"),
        )
