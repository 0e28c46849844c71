# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""Service lifetimes."""

from __future__ import annotations

from enum import Enum


class ServiceLifetime(str, Enum):
    """How long a resolved service instance lives.

    - SINGLETON: one instance per provider
    - SCOPED: one instance per scope
    - TRANSIENT: a new instance per resolution
    """

    SINGLETON = "singleton"
    SCOPED = "scoped"
    TRANSIENT = "transient"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.display_name
