# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi

"""
Public API for fluentdi logging.
"""

from __future__ import annotations

from fluentdi.logging.config import LoggingSettings, LogLevel
from fluentdi.logging.logger import (
    CONTEXT_ATTRIBUTE,
    FluentLogger,
    StructuredFormatter,
    get_logger,
)

__all__ = [
    "CONTEXT_ATTRIBUTE",
    "FluentLogger",
    "LogLevel",
    "LoggingSettings",
    "StructuredFormatter",
    "get_logger",
]
