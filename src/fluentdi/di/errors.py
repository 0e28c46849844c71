# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Error classes for the fluentdi registration host.

These errors come from building descriptors and resolving services; they are
never assertion failures.
"""

from __future__ import annotations

from typing import Any, Final

from fluentdi.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FluentDIError

DI = ErrorCategory.get_or_create("DI")
DI_ERROR: Final = ErrorCode.get_or_create("DI_ERROR", DI)
DI_SERVICE_NOT_REGISTERED: Final = ErrorCode.get_or_create(
    "DI_SERVICE_NOT_REGISTERED", DI
)
DI_SERVICE_CREATION: Final = ErrorCode.get_or_create("DI_SERVICE_CREATION", DI)
DI_SCOPE_ERROR: Final = ErrorCode.get_or_create("DI_SCOPE_ERROR", DI)
DI_DISPOSED: Final = ErrorCode.get_or_create("DI_DISPOSED", DI)
DI_INVALID_DESCRIPTOR: Final = ErrorCode.get_or_create("DI_INVALID_DESCRIPTOR", DI)
DI_CIRCULAR_DEPENDENCY: Final = ErrorCode.get_or_create("DI_CIRCULAR_DEPENDENCY", DI)


def _type_name(service_type: Any) -> str:
    return getattr(service_type, "__qualname__", None) or str(service_type)


class DIError(FluentDIError):
    """Base class for all registration host errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = DI_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        **context: Any,
    ) -> None:
        super().__init__(message, code=code, severity=severity, context=context)


class ServiceNotRegisteredError(DIError, KeyError):
    """Raised when resolving a service type that has no registration."""

    def __init__(self, service_type: Any) -> None:
        self.service_type = service_type
        super().__init__(
            f"Service {_type_name(service_type)} is not registered",
            code=DI_SERVICE_NOT_REGISTERED,
            service_type_name=_type_name(service_type),
        )


class ServiceCreationError(DIError):
    """Raised when constructing a service instance fails.

    The original exception is chained as ``__cause__`` by the raiser.
    """

    def __init__(self, service_type: Any, original_error: BaseException) -> None:
        self.service_type = service_type
        self.original_error = original_error
        super().__init__(
            f"Failed to create service {_type_name(service_type)}: {original_error}",
            code=DI_SERVICE_CREATION,
            service_type_name=_type_name(service_type),
            error_type=type(original_error).__name__,
        )


class ScopeError(DIError):
    """Raised for scope misuse, such as resolving a scoped service from the root."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, code=DI_SCOPE_ERROR, **context)

    @classmethod
    def outside_scope(cls, service_type: Any) -> ScopeError:
        return cls(
            f"Cannot resolve scoped service {_type_name(service_type)} outside of a scope",
            service_type_name=_type_name(service_type),
        )


class DisposedError(DIError):
    """Raised when a disposed provider or scope is used."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Cannot perform '{operation}' on a disposed provider or scope",
            code=DI_DISPOSED,
            operation=operation,
        )


class InvalidDescriptorError(DIError, ValueError):
    """Raised when a descriptor does not name exactly one implementation source."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, code=DI_INVALID_DESCRIPTOR, **context)


class CircularDependencyError(DIError):
    """Raised when a service depends on itself through its factories."""

    def __init__(self, dependency_chain: list[str]) -> None:
        self.dependency_chain = dependency_chain
        super().__init__(
            "Circular dependency detected: " + " -> ".join(dependency_chain),
            code=DI_CIRCULAR_DEPENDENCY,
            dependency_chain=dependency_chain,
        )
