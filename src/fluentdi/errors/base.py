# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Base error classes for fluentdi.

This module provides the foundation for structured error handling with
error codes, contextual information, and error categories.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final

from fluentdi.errors.registry import registry


class ErrorSeverity(str, Enum):
    """Severity levels for fluentdi errors."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory:
    """Named group of error codes, such as ASSERTION or DI."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ErrorCategory({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCategory):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @classmethod
    def get_or_create(cls, name: str) -> ErrorCategory:
        """Get or create an error category."""
        return registry.get_or_create("category", name, lambda: cls(name))


INTERNAL: Final = ErrorCategory.get_or_create("INTERNAL")


class ErrorCode:
    """Error code associated with a category."""

    def __init__(self, code: str, category: ErrorCategory | None = None) -> None:
        """Initialize a new error code.

        Args:
            code: Unique identifier for this error code
            category: The category this error code belongs to
        """
        self.code = code
        self.category = category or INTERNAL

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.category.name!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.code == other
        if not isinstance(other, ErrorCode):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> ErrorCode:
        """Get or create an error code."""
        return registry.get_or_create("code", name, lambda: cls(name, category))


INTERNAL_ERROR: Final = ErrorCode.get_or_create("INTERNAL_ERROR", INTERNAL)


class FluentDIError(Exception):
    """
    Base error class for fluentdi errors.
    Should only be subclassed for package-specific errors, not instantiated directly.
    """

    message: str
    code: ErrorCode
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> FluentDIError:
        if cls is FluentDIError:
            raise TypeError(
                "Do not instantiate FluentDIError directly; subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode = INTERNAL_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new error.

        Args:
            message: Human-readable error message
            code: ErrorCode object containing the code and category
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Merged into the context
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        full_context = dict(context or {})
        full_context.update(kwargs)

        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> FluentDIError:
        """Add a key-value pair to the error context and return self for chaining."""
        self.context[key] = value
        return self

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
