# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Assertions on a whole registration store.

Contains a number of methods to assert that a ServiceCollection (or any
iterable of service descriptors) has registered the expected services.

Example:
    ```python
    should(services).locate_service(ICache).with_implementation(RedisCache).as_singleton()
    should(services).contain_transient(IHandler, count=2)
    ```
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import Any, TypeVar

from fluentdi.assertions import matching
from fluentdi.assertions.constraint import AndConstraint
from fluentdi.assertions.errors import (
    ASSERTION_COLLECTION_SIZE,
    ASSERTION_SERVICE_CONSTRUCTION,
    ArgumentNullError,
)
from fluentdi.assertions.execution import (
    COLLECTION_SIZE,
    SERVICE_CONSTRUCTION,
    execute,
)
from fluentdi.assertions.service import ServiceAssertions
from fluentdi.config import get_settings
from fluentdi.di.descriptor import ServiceDescriptor
from fluentdi.di.errors import DIError
from fluentdi.di.lifetime import ServiceLifetime
from fluentdi.di.provider import ServiceProvider
from fluentdi.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class ServiceCollectionAssertions:
    """Assertions on a registration store.

    ``None`` is accepted as the subject; every assertion method then raises
    :class:`ArgumentNullError` instead of failing.
    """

    def __init__(
        self,
        subject: Iterable[ServiceDescriptor[Any]] | None,
        identifier: str | None = None,
    ) -> None:
        # Single-pass iterables would be exhausted by the first check
        if subject is not None and not isinstance(subject, Collection):
            subject = tuple(subject)
        self.subject = subject
        self.identifier = identifier or get_settings().identifier

    def renew(self) -> ServiceCollectionAssertions:
        """Return a fresh assertions object over the same subject."""
        return type(self)(self.subject, self.identifier)

    def not_be_null(self) -> None:
        """Raise ArgumentNullError when there is no registration store."""
        if self.subject is None:
            raise ArgumentNullError(
                self.identifier,
                f"cannot assert on a null {self.identifier} collection",
            )

    def _descriptors(self) -> list[ServiceDescriptor[Any]]:
        self.not_be_null()
        return list(self.subject)

    def have_count(
        self, expected: int, because: str = "", *because_args: Any
    ) -> AndConstraint[ServiceCollectionAssertions]:
        """Asserts that the store holds exactly ``expected`` registrations in total.

        Args:
            expected: The expected number of registrations.
            because: A phrase explaining why the assertion is needed. If it does
                not start with "because", that word is prepended automatically.
            because_args: Values formatted into ``because`` with ``str.format``.
        """
        actual = len(self._descriptors())
        execute(self.identifier).because_of(because, *because_args).for_condition(
            actual == expected
        ).fail_with(
            COLLECTION_SIZE,
            expected,
            actual,
            code=ASSERTION_COLLECTION_SIZE,
            expected=expected,
            actual=actual,
        )
        return AndConstraint(self)

    def locate_service(self, service_type: type[T]) -> ServiceAssertions[T]:
        """Select the registrations of ``service_type`` for further checks.

        Finding nothing is not a failure here; the checks that follow report it.
        """
        filtered = matching.select(self._descriptors(), service_type)
        logger.debug(
            "Located %d registration(s) of %s",
            len(filtered),
            getattr(service_type, "__qualname__", service_type),
        )
        return ServiceAssertions(self, service_type, filtered)

    have_service = locate_service

    def contain_service(
        self,
        service_type: type[T],
        lifetime: ServiceLifetime,
        count: int | None = None,
        implementation: type | None = None,
        because: str = "",
        *because_args: Any,
    ) -> AndConstraint[ServiceCollectionAssertions]:
        """Single-call form of ``locate_service`` and its refinements.

        Equivalent to::

            locate_service(service_type)
                .with_implementation(implementation)  # when given
                .with_count(count)                    # when given
                .as_lifetime(lifetime)
        """
        located = self.locate_service(service_type)
        if implementation is not None:
            located.with_implementation(implementation, because, *because_args)
        if count is not None:
            located.with_count(count, because, *because_args)
        return located.as_lifetime(lifetime, because, *because_args)

    def contain_singleton(
        self,
        service_type: type[T],
        implementation: type | None = None,
        count: int | None = None,
        because: str = "",
        *because_args: Any,
    ) -> AndConstraint[ServiceCollectionAssertions]:
        return self.contain_service(
            service_type,
            ServiceLifetime.SINGLETON,
            count,
            implementation,
            because,
            *because_args,
        )

    def contain_scoped(
        self,
        service_type: type[T],
        implementation: type | None = None,
        count: int | None = None,
        because: str = "",
        *because_args: Any,
    ) -> AndConstraint[ServiceCollectionAssertions]:
        return self.contain_service(
            service_type,
            ServiceLifetime.SCOPED,
            count,
            implementation,
            because,
            *because_args,
        )

    def contain_transient(
        self,
        service_type: type[T],
        implementation: type | None = None,
        count: int | None = None,
        because: str = "",
        *because_args: Any,
    ) -> AndConstraint[ServiceCollectionAssertions]:
        return self.contain_service(
            service_type,
            ServiceLifetime.TRANSIENT,
            count,
            implementation,
            because,
            *because_args,
        )

    def initialize(
        self, because: str = "", *because_args: Any
    ) -> AndConstraint[ServiceCollectionAssertions]:
        """Resolve every registered service once to surface construction errors.

        Services are resolved inside a single scope, in registration order. The
        first failure is raised as an AssertionFailure chained to the
        underlying error.
        """
        descriptors = self._descriptors()
        service_types = list(dict.fromkeys(d.service_type for d in descriptors))

        with ServiceProvider(descriptors) as provider, provider.create_scope() as scope:
            for service_type in service_types:
                try:
                    scope.resolve(service_type)
                except DIError as exc:
                    cause = exc.__cause__ or exc
                    execute(self.identifier).because_of(
                        because, *because_args
                    ).fail_with(
                        SERVICE_CONSTRUCTION,
                        cause,
                        code=ASSERTION_SERVICE_CONSTRUCTION,
                        cause=exc,
                        service_type=service_type,
                        actual=cause,
                    )
        logger.info("Resolved %d service type(s) without error", len(service_types))
        return AndConstraint(self)

    def __repr__(self) -> str:
        return f"ServiceCollectionAssertions({self.subject!r})"


def should(
    services: Iterable[ServiceDescriptor[Any]] | None, identifier: str | None = None
) -> ServiceCollectionAssertions:
    """Entry point: ``should(services).locate_service(IFoo).as_singleton()``."""
    return ServiceCollectionAssertions(services, identifier)
