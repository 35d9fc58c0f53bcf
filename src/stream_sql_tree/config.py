"""Configuration management for stream-sql-tree.

This module provides a pydantic-based configuration system that loads settings
from environment variables (and an optional ``.env`` file).
"""

import logging
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Configuration settings for stream-sql-tree.

    All settings can be overridden by setting the corresponding environment
    variable.

    Environment Variables:
        STREAM_SQL_TREE_LOG_LEVEL: Logging level name (e.g., 'DEBUG', 'INFO')
        STREAM_SQL_TREE_INDENT: Spaces per indentation level in formatted SQL
        STREAM_SQL_TREE_KNOWN_ROW_FORMATS: JSON list of accepted row formats,
            e.g. '["json", "avro"]'

    Example:
        >>> config = Config()
        >>> config.indent
        3
    """

    model_config = SettingsConfigDict(
        env_prefix="STREAM_SQL_TREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Logging level name")

    indent: int = Field(
        default=3, ge=0, description="Number of spaces per indentation level in formatted SQL"
    )

    known_row_formats: List[str] = Field(
        default_factory=lambda: ["json", "avro", "protobuf", "csv"],
        description="Row formats accepted by the statement validator",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def configure_logging(self) -> None:
        """Configure the root logger with ``log_level``."""
        logging.basicConfig(
            level=self.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    def __repr__(self) -> str:
        return (
            f"Config("
            f"log_level={self.log_level!r}, "
            f"indent={self.indent!r}, "
            f"known_row_formats={self.known_row_formats!r}"
            f")"
        )


def load_config() -> Config:
    """Load configuration from environment variables.

    Returns:
        A Config instance with settings loaded from environment.
    """
    return Config()
