"""Configuration management for Scribe Agent tools."""

import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_EXCLUDED_FILES = "dist,bun.lock"
DEFAULT_SUMMARY_FILE_LIMIT = 50


@dataclass
class AgentConfig:
    """
    Configuration for Scribe Agent tools.

    Attributes:
        excluded_files: Paths skipped by the change lister (build output, lock files)
        summary_file_limit: Maximum number of files listed in a commit message body
        log_level: Level applied to the scribe_agent logger hierarchy
    """

    excluded_files: List[str] = field(
        default_factory=lambda: os.getenv(
            "SCRIBE_AGENT_EXCLUDED_FILES", DEFAULT_EXCLUDED_FILES
        ).split(",")
    )

    summary_file_limit: int = field(
        default_factory=lambda: int(
            os.getenv("SCRIBE_AGENT_SUMMARY_FILE_LIMIT", str(DEFAULT_SUMMARY_FILE_LIMIT))
        )
    )

    log_level: str = field(default_factory=lambda: os.getenv("SCRIBE_AGENT_LOG_LEVEL", "WARNING"))

    def validate(self) -> None:
        """Validate configuration and raise ValueError if invalid."""
        if self.summary_file_limit <= 0:
            raise ValueError("summary_file_limit must be a positive integer")

        self.log_level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

        # Clean up excluded file names (strip whitespace, drop empties)
        self.excluded_files = [name.strip() for name in self.excluded_files if name.strip()]

    def is_excluded(self, path: str) -> bool:
        """Check whether a changed file is on the exclusion list."""
        return path in self.excluded_files

    def __post_init__(self) -> None:
        """Post-initialization validation."""
        self.validate()


def configure_logging(config: AgentConfig) -> logging.Logger:
    """
    Apply the configured log level to the scribe_agent logger hierarchy.

    Handlers are left to the host application.

    Args:
        config: Agent configuration

    Returns:
        The package root logger
    """
    package_logger = logging.getLogger("scribe_agent")
    package_logger.setLevel(config.log_level)
    return package_logger
