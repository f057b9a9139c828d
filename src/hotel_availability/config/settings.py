"""Runtime configuration for the availability shell.

Relies on pydantic-settings so that environment variables (prefixed with ``AVAIL_``)
can override defaults. Command-line flags take precedence over both.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Captures runtime configuration for the availability shell."""

    hotels_path: Optional[Path] = Field(default=None, description="JSON file holding hotel records")
    bookings_path: Optional[Path] = Field(default=None, description="JSON file holding booking records")
    log_level: str = Field(default="WARNING")
    log_dir: Path = Field(default=Path("data/logs"), description="Directory for availability.log")
    file_logging: bool = Field(
        default=False, description="If true, mirror log output to a file under log_dir"
    )
    prompt: str = Field(default="> ", description="Prompt printed before each command is read")

    model_config = SettingsConfigDict(
        env_prefix="AVAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("hotels_path", "bookings_path", mode="before")
    def _expand_input_path(cls, value: str | Path | None) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @field_validator("log_dir", mode="before")
    def _expand_log_dir(cls, value: str | Path) -> Path:
        if isinstance(value, Path):
            return value
        return Path(value).expanduser()

    @field_validator("log_level")
    def _validate_log_level(cls, value: str) -> str:
        normalised = value.strip().upper()
        if normalised not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}")
        return normalised

    def log_directory(self) -> Optional[Path]:
        """Directory for the log file, or ``None`` when file logging is off."""
        return self.log_dir if self.file_logging else None
