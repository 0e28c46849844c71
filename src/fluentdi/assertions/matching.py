# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Selection and predicates over a registration store.

Nothing here raises for a mismatch: each check returns a MatchResult and the
caller decides how to report it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from fluentdi.assertions import execution
from fluentdi.assertions.errors import (
    ASSERTION_COUNT_MISMATCH,
    ASSERTION_IMPLEMENTATION_MISMATCH,
    ASSERTION_LIFETIME_MISMATCH,
    ASSERTION_SERVICE_NOT_FOUND,
)
from fluentdi.di.descriptor import ServiceDescriptor
from fluentdi.di.lifetime import ServiceLifetime
from fluentdi.errors.base import ErrorCode
from fluentdi.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a single check; on failure it carries what diverged."""

    ok: bool
    template: str = ""
    args: tuple[Any, ...] = ()
    code: ErrorCode | None = None
    expected: Any = None
    actual: Any = None
    service_type: Any = None

    @classmethod
    def success(cls) -> MatchResult:
        return cls(ok=True)

    @classmethod
    def failure(
        cls,
        template: str,
        *args: Any,
        code: ErrorCode,
        expected: Any,
        actual: Any,
        service_type: Any,
    ) -> MatchResult:
        return cls(
            ok=False,
            template=template,
            args=args,
            code=code,
            expected=expected,
            actual=actual,
            service_type=service_type,
        )

    def __bool__(self) -> bool:
        return self.ok


def select(
    descriptors: Iterable[ServiceDescriptor[Any]], service_type: Any
) -> list[ServiceDescriptor[Any]]:
    """Return every descriptor registered for ``service_type``, in store order."""
    return [d for d in descriptors if d.service_type == service_type]


def check_count(
    subset: list[ServiceDescriptor[Any]], expected: int, service_type: Any
) -> MatchResult:
    actual = len(subset)
    if actual == expected:
        return MatchResult.success()
    return MatchResult.failure(
        execution.COUNT_MISMATCH,
        expected,
        actual,
        code=ASSERTION_COUNT_MISMATCH,
        expected=expected,
        actual=actual,
        service_type=service_type,
    )


def check_any(subset: list[ServiceDescriptor[Any]], service_type: Any) -> MatchResult:
    """Fail when nothing is registered for ``service_type``."""
    if subset:
        return MatchResult.success()
    return MatchResult.failure(
        execution.SERVICE_NOT_FOUND,
        code=ASSERTION_SERVICE_NOT_FOUND,
        expected=service_type,
        actual=None,
        service_type=service_type,
    )


def check_lifetime(
    subset: list[ServiceDescriptor[Any]], lifetime: ServiceLifetime
) -> MatchResult:
    """Fail on the first registration whose lifetime differs from ``lifetime``."""
    offending = next((d for d in subset if d.lifetime != lifetime), None)
    if offending is None:
        return MatchResult.success()
    return MatchResult.failure(
        execution.LIFETIME_MISMATCH,
        lifetime,
        offending.lifetime,
        code=ASSERTION_LIFETIME_MISMATCH,
        expected=lifetime,
        actual=offending.lifetime,
        service_type=offending.service_type,
    )


def check_implementation(
    subset: list[ServiceDescriptor[Any]], implementation_type: type, service_type: Any
) -> MatchResult:
    """Fail when no registration uses ``implementation_type``.

    The reported actual value is the first registration using anything else.
    """
    if any(d.implementation_type == implementation_type for d in subset):
        return MatchResult.success()
    offending = next(
        (d for d in subset if d.implementation_type != implementation_type), None
    )
    actual = offending.implementation_type if offending is not None else None
    return MatchResult.failure(
        execution.IMPLEMENTATION_MISMATCH,
        implementation_type,
        actual,
        code=ASSERTION_IMPLEMENTATION_MISMATCH,
        expected=implementation_type,
        actual=actual,
        service_type=service_type,
    )


def satisfies(implementation_type: Any, service_type: Any) -> bool:
    """Return whether ``implementation_type`` can stand in for ``service_type``.

    Service types that cannot be checked at runtime (protocols without
    ``runtime_checkable``, parameterized generics) are accepted as-is.
    """
    if not isinstance(implementation_type, type):
        return False
    try:
        return issubclass(implementation_type, service_type)
    except TypeError:
        logger.debug(
            "Cannot check %s against %s at runtime; skipping",
            implementation_type.__qualname__,
            getattr(service_type, "__qualname__", service_type),
        )
        return True
