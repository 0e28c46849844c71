# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Configuration for fluentdi logging.

Settings are read from ``FLUENTDI_LOGGING_*`` environment variables; the
default level is WARNING.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log levels accepted by ``FLUENTDI_LOGGING_LEVEL``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def stdlib_level(self) -> int:
        return logging.getLevelNamesMapping()[self.value]


class LoggingSettings(BaseSettings):
    """How fluentdi loggers filter and render records."""

    model_config = SettingsConfigDict(
        env_prefix="FLUENTDI_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: LogLevel = Field(default=LogLevel.WARNING, description="Minimum level emitted")
    json_format: bool = Field(default=False, description="Render records as JSON")
    include_timestamp: bool = Field(default=True, description="Prefix records with a timestamp")
    include_level: bool = Field(default=True, description="Append the level name")
    console_enabled: bool = Field(default=True, description="Write records to stderr")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.upper()
        return v
