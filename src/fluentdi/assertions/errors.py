# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Error classes raised by fluentdi assertions.

Assertion failures derive from ``AssertionError`` so test runners report them
as failures. Programmer errors, such as a missing registration store or an
implementation type that cannot satisfy the service type, do not.
"""

from __future__ import annotations

from typing import Any, Final

from fluentdi.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FluentDIError

ASSERTION = ErrorCategory.get_or_create("ASSERTION")
ASSERTION_FAILED: Final = ErrorCode.get_or_create("ASSERTION_FAILED", ASSERTION)
ASSERTION_COUNT_MISMATCH: Final = ErrorCode.get_or_create(
    "ASSERTION_COUNT_MISMATCH", ASSERTION
)
ASSERTION_LIFETIME_MISMATCH: Final = ErrorCode.get_or_create(
    "ASSERTION_LIFETIME_MISMATCH", ASSERTION
)
ASSERTION_IMPLEMENTATION_MISMATCH: Final = ErrorCode.get_or_create(
    "ASSERTION_IMPLEMENTATION_MISMATCH", ASSERTION
)
ASSERTION_SERVICE_NOT_FOUND: Final = ErrorCode.get_or_create(
    "ASSERTION_SERVICE_NOT_FOUND", ASSERTION
)
ASSERTION_COLLECTION_SIZE: Final = ErrorCode.get_or_create(
    "ASSERTION_COLLECTION_SIZE", ASSERTION
)
ASSERTION_SERVICE_CONSTRUCTION: Final = ErrorCode.get_or_create(
    "ASSERTION_SERVICE_CONSTRUCTION", ASSERTION
)

ARGUMENT = ErrorCategory.get_or_create("ARGUMENT")
ARGUMENT_NULL: Final = ErrorCode.get_or_create("ARGUMENT_NULL", ARGUMENT)
ARGUMENT_IMPLEMENTATION_TYPE: Final = ErrorCode.get_or_create(
    "ARGUMENT_IMPLEMENTATION_TYPE", ARGUMENT
)


class AssertionFailure(FluentDIError, AssertionError):
    """A registration store did not meet an expectation."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ASSERTION_FAILED,
        **context: Any,
    ) -> None:
        super().__init__(message, code=code, severity=ErrorSeverity.ERROR, context=context)

    @property
    def expected(self) -> Any:
        return self.context.get("expected")

    @property
    def actual(self) -> Any:
        return self.context.get("actual")


class ArgumentNullError(FluentDIError, ValueError):
    """A required argument, usually the registration store, was None."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(
            message or f"{argument} cannot be None",
            code=ARGUMENT_NULL,
            severity=ErrorSeverity.CRITICAL,
            context={"argument": argument},
        )


class ImplementationTypeError(FluentDIError, TypeError):
    """An implementation type cannot satisfy the service type it is checked against."""

    def __init__(self, implementation_type: Any, service_type: Any) -> None:
        impl_name = getattr(implementation_type, "__qualname__", repr(implementation_type))
        service_name = getattr(service_type, "__qualname__", repr(service_type))
        super().__init__(
            f"{impl_name} does not implement {service_name}",
            code=ARGUMENT_IMPLEMENTATION_TYPE,
            severity=ErrorSeverity.CRITICAL,
            context={
                "implementation_type": impl_name,
                "service_type": service_name,
            },
        )
