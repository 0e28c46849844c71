# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Failure reporting for fluentdi assertions.

Every failing check ends here: the message template is filled with the
subject label, the formatted values and the caller's reason, then raised as
an :class:`AssertionFailure`.

Templates use ``{context}`` for the subject label, ``{service}`` for the
service type, ``{reason}`` for the caller-supplied reason and positional
``{0}``, ``{1}`` ... for values.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from fluentdi.assertions.errors import ASSERTION_FAILED, AssertionFailure
from fluentdi.config import get_settings
from fluentdi.di.lifetime import ServiceLifetime
from fluentdi.logging import get_logger

if TYPE_CHECKING:
    from fluentdi.assertions.matching import MatchResult
    from fluentdi.errors.base import ErrorCode

logger = get_logger(__name__)

COUNT_MISMATCH: Final = (
    "Expected {context} to have {0} service(s) of type {service} registered{reason}, "
    "but found {1}."
)
LIFETIME_MISMATCH: Final = (
    "Expected {context} to have a {0} of type {service} registered{reason}, but found {1}."
)
IMPLEMENTATION_MISMATCH: Final = (
    "Expected {context} to have an implementation of type {0} registered{reason}, "
    "but found {1}."
)
SERVICE_NOT_FOUND: Final = (
    "Expected {context} to have a service of type {service} registered{reason}, "
    "but found none."
)
COLLECTION_SIZE: Final = "Expected {context} to contain {0} item(s){reason}, but found {1}."
SERVICE_CONSTRUCTION: Final = (
    "Expected {context} to resolve a service of type {service}{reason}, "
    "but construction failed with {0}."
)

NULL_VALUE: Final = "<null>"


def format_value(value: Any) -> str:
    """Render a value the way failure messages show it."""
    if value is None:
        return NULL_VALUE
    if isinstance(value, ServiceLifetime):
        return value.display_name
    if isinstance(value, type):
        return value.__qualname__
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    if isinstance(value, str):
        return f'"{value}"'
    return str(getattr(value, "__qualname__", value))


def format_service_type(service_type: Any) -> str:
    """Render a service type by name; identifier tokens such as strings are not quoted."""
    if service_type is None:
        return NULL_VALUE
    return str(getattr(service_type, "__qualname__", service_type))


def format_reason(because: str = "", *because_args: Any) -> str:
    """Build the reason fragment inserted at ``{reason}``.

    Blank reasons produce an empty string. Otherwise the reason is formatted
    with ``because_args``, prefixed with "because" unless it already starts
    with it, and preceded by a single space.
    """
    if because_args:
        because = because.format(*because_args)
    reason = because.strip()
    if not reason:
        return ""
    if not reason.lower().startswith("because"):
        reason = f"because {reason}"
    return f" {reason}"


class AssertionChain:
    """Evaluates a condition and raises a formatted failure when it does not hold.

    Usage:
        AssertionChain("services").because_of(because, *args).for_condition(
            actual == expected
        ).fail_with(COLLECTION_SIZE, expected, actual)
    """

    def __init__(self, identifier: str | None = None) -> None:
        self.identifier = identifier or get_settings().identifier
        self._reason = ""
        self._raw_reason = ""
        self._condition = False

    def because_of(self, because: str = "", *because_args: Any) -> AssertionChain:
        self._raw_reason = because.format(*because_args) if because_args else because
        self._reason = format_reason(because, *because_args)
        return self

    def for_condition(self, condition: bool) -> AssertionChain:
        self._condition = bool(condition)
        return self

    def given(self, result: MatchResult) -> None:
        """Raise the failure described by ``result`` unless it succeeded."""
        if result.ok:
            return
        self.fail_with(
            result.template,
            *result.args,
            code=result.code,
            expected=result.expected,
            actual=result.actual,
            service_type=result.service_type,
        )

    def fail_with(
        self,
        template: str,
        *args: Any,
        code: ErrorCode = ASSERTION_FAILED,
        cause: BaseException | None = None,
        **context: Any,
    ) -> None:
        """Raise an AssertionFailure built from ``template`` unless the condition holds."""
        if self._condition:
            return

        message = template.format(
            *(format_value(arg) for arg in args),
            context=self.identifier,
            service=format_service_type(context.get("service_type")),
            reason=self._reason,
        )
        failure = AssertionFailure(
            message,
            code=code,
            subject=self.identifier,
            reason=self._raw_reason,
            **context,
        )
        if get_settings().log_failures:
            logger.debug("Assertion failed", **failure.to_dict())
        if cause is not None:
            raise failure from cause
        raise failure


def execute(identifier: str | None = None) -> AssertionChain:
    """Start a new assertion chain for the given subject label."""
    return AssertionChain(identifier)
