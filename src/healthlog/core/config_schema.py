"""Pydantic models for config validation.

Opt-in schema validation for ``Config.config_data``.  Call
``Config.validated()`` to obtain a typed, validated ``HealthLogConfig``
instance.  Dict-based access keeps working unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, field_validator

from .config import DEFAULT_TIMEZONE, DEFAULT_WINDOW_MINUTES


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    data_dir: Path
    entries_dir: Path
    report_file: Path

    @field_validator("data_dir", "entries_dir", "report_file", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class CheckerConfig(BaseModel):
    """Duplicate check-in window settings."""

    window_minutes: int = DEFAULT_WINDOW_MINUTES
    timezone: str = DEFAULT_TIMEZONE

    @field_validator("window_minutes")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"window_minutes must be >= 0, got {v}")
        return v

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone {v!r}") from e
        return v

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    file: Path | None = None

    @field_validator("level")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper()


class HealthLogConfig(BaseModel):
    """Top-level validated configuration."""

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig
    checker: CheckerConfig = CheckerConfig()
    logging: LoggingConfig = LoggingConfig()
