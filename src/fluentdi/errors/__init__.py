# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi

"""
Error handling for fluentdi.
"""

from __future__ import annotations

from fluentdi.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    FluentDIError,
)
from fluentdi.errors.registry import ErrorRegistry, registry

__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "ErrorRegistry",
    "ErrorSeverity",
    "FluentDIError",
    "INTERNAL",
    "INTERNAL_ERROR",
    "registry",
]
