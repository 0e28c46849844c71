# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""Assertion settings loading and caching.

Settings are read from ``FLUENTDI_*`` environment variables the first time
they are requested and cached until :func:`reset_settings` is called.
"""

from __future__ import annotations

import functools

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssertionSettings(BaseSettings):
    """Settings that shape how assertions report failures."""

    model_config = SettingsConfigDict(
        env_prefix="FLUENTDI_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    identifier: str = Field(
        default="services",
        min_length=1,
        description="Label used for the subject in failure messages",
    )
    log_failures: bool = Field(
        default=True, description="Log every assertion failure at debug level"
    )
    implicit_count: int = Field(
        default=1,
        ge=0,
        description="Expected number of registrations when no count is given",
    )


@functools.cache
def get_settings() -> AssertionSettings:
    """Return the cached assertion settings, loading them on first use."""
    return AssertionSettings()


def reset_settings() -> None:
    """Clear the settings cache so the next call reloads from the environment."""
    get_settings.cache_clear()
