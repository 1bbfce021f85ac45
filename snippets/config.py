"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
- database connection settings
- file helper encoding and buffer size
- date formats, default locale and timezone
- text pipeline stages used by the demo
- logging level and format

Configuration can be overridden via environment variables:
- SNP_DB_DSN=sqlite:///tmp/demo.db
- SNP_FILES_ENCODING=latin-1
- SNP_DATES_LOCALE=fr
- SNP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseSettings):
    """Database connection configuration.

    Environment variables prefixed with SNP_DB_.
    """

    model_config = SettingsConfigDict(env_prefix="SNP_DB_")

    dsn: str = "memory://snippets"


class FilesConfig(BaseSettings):
    """File helper configuration.

    Environment variables prefixed with SNP_FILES_.
    """

    model_config = SettingsConfigDict(env_prefix="SNP_FILES_")

    work_dir: Path = Field(default_factory=Path.cwd)
    encoding: str = "utf-8"
    buffer_size: int = 64 * 1024
    input_file: str = "input.txt"
    output_file: str = "output.txt"
    large_file: str = "large.txt"
    line_copy_file: str = "io_copy.txt"
    bulk_copy_file: str = "nio_copy.txt"

    def path(self, name: str) -> Path:
        """Resolve a file name against the work directory."""
        return self.work_dir / name


class DatesConfig(BaseSettings):
    """Date/time helper configuration.

    Environment variables prefixed with SNP_DATES_.
    """

    model_config = SettingsConfigDict(env_prefix="SNP_DATES_")

    display_format: str = "%d-%m-%Y %H:%M:%S"
    parse_format: str = "%d-%m-%Y"
    days_to_add: int = 10
    locale: str = "ru"
    timezone: str = "UTC"


class TextConfig(BaseSettings):
    """Text pipeline configuration.

    Environment variables prefixed with SNP_TEXT_.
    """

    model_config = SettingsConfigDict(env_prefix="SNP_TEXT_")

    # Innermost stage first
    stages: List[str] = Field(
        default_factory=lambda: ["replace_spaces", "trim", "upper"]
    )


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with SNP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SNP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.dates.locale)
        print(config.files.path(config.files.input_file))

    Environment variables prefixed with SNP_.
    """

    model_config = SettingsConfigDict(env_prefix="SNP_")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    files: FilesConfig = Field(default_factory=FilesConfig)
    dates: DatesConfig = Field(default_factory=DatesConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format from configuration.

    Meant to be called once by the process entry point.
    """
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format, force=True)
