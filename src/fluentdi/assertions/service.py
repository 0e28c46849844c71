# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Assertions on the registrations of a single service type.

Obtained from :meth:`ServiceCollectionAssertions.locate_service`. Refinements
(``with_count``, ``with_implementation``) check immediately and return the
same object; the lifetime checks end the chain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from fluentdi.assertions import matching
from fluentdi.assertions.constraint import AndConstraint
from fluentdi.assertions.errors import ImplementationTypeError
from fluentdi.assertions.execution import execute
from fluentdi.config import get_settings
from fluentdi.di.descriptor import ServiceDescriptor
from fluentdi.di.lifetime import ServiceLifetime

if TYPE_CHECKING:
    from fluentdi.assertions.collection import ServiceCollectionAssertions

TService = TypeVar("TService")

IMPLICIT_COUNT_REASON = "only one registration is expected when no count is given"


class ServiceAssertions(Generic[TService]):
    """Collection of assertions on the registrations of ``service_type``."""

    def __init__(
        self,
        parent: ServiceCollectionAssertions,
        service_type: type[TService],
        filtered: list[ServiceDescriptor[Any]],
    ) -> None:
        self._parent = parent
        self.service_type = service_type
        self._filtered = filtered
        self._count = get_settings().implicit_count
        self._count_set = False

    @property
    def registrations(self) -> list[ServiceDescriptor[Any]]:
        """The matching registrations, in store order."""
        return list(self._filtered)

    @property
    def expected_count(self) -> int:
        return self._count

    def with_count(
        self, expected: int, because: str = "", *because_args: Any
    ) -> ServiceAssertions[TService]:
        """Asserts that exactly ``expected`` registrations exist for the service type.

        The count is remembered and re-checked by the terminal lifetime check.

        Args:
            expected: the expected number of registrations
            because: A phrase explaining why the assertion is needed. If it does
                not start with "because", that word is prepended automatically.
            because_args: Values formatted into ``because`` with ``str.format``.
        """
        if expected < 0:
            raise ValueError(f"expected count cannot be negative, got {expected}")
        self._count = expected
        self._count_set = True
        self._check_count(because, *because_args)
        return self

    def with_implementation(
        self, implementation_type: type, because: str = "", *because_args: Any
    ) -> ServiceAssertions[TService]:
        """Asserts that some registration of the service uses ``implementation_type``.

        Chain the call to check several implementations.

        Raises:
            ImplementationTypeError: If ``implementation_type`` cannot satisfy the
                service type; this is a usage error, not an assertion failure.
            AssertionFailure: If nothing is registered, or no registration uses
                the implementation.
        """
        if not matching.satisfies(implementation_type, self.service_type):
            raise ImplementationTypeError(implementation_type, self.service_type)

        chain = execute(self._parent.identifier).because_of(because, *because_args)
        chain.given(matching.check_any(self._filtered, self.service_type))
        chain.given(
            matching.check_implementation(
                self._filtered, implementation_type, self.service_type
            )
        )
        return self

    def as_lifetime(
        self, lifetime: ServiceLifetime, because: str = "", *because_args: Any
    ) -> AndConstraint[ServiceCollectionAssertions]:
        """Asserts that every registration of the service has ``lifetime``.

        At least one registration must exist before the count and lifetime are
        checked. Unless ``with_count`` was called, exactly one registration is
        expected.
        """
        lifetime = ServiceLifetime(lifetime)
        chain = execute(self._parent.identifier).because_of(because, *because_args)
        chain.given(matching.check_any(self._filtered, self.service_type))

        if self._count_set:
            self._check_count(because, *because_args)
        else:
            self._check_count(because or IMPLICIT_COUNT_REASON, *because_args)

        chain.given(matching.check_lifetime(self._filtered, lifetime))
        return AndConstraint(self._parent.renew())

    def as_singleton(
        self, because: str = "", *because_args: Any
    ) -> AndConstraint[ServiceCollectionAssertions]:
        """Asserts that the service is registered as a singleton."""
        return self.as_lifetime(ServiceLifetime.SINGLETON, because, *because_args)

    def as_scoped(
        self, because: str = "", *because_args: Any
    ) -> AndConstraint[ServiceCollectionAssertions]:
        """Asserts that the service is registered as scoped."""
        return self.as_lifetime(ServiceLifetime.SCOPED, because, *because_args)

    def as_transient(
        self, because: str = "", *because_args: Any
    ) -> AndConstraint[ServiceCollectionAssertions]:
        """Asserts that the service is registered as transient."""
        return self.as_lifetime(ServiceLifetime.TRANSIENT, because, *because_args)

    def _check_count(self, because: str, *because_args: Any) -> None:
        execute(self._parent.identifier).because_of(because, *because_args).given(
            matching.check_count(self._filtered, self._count, self.service_type)
        )

    def __repr__(self) -> str:
        name = getattr(self.service_type, "__qualname__", self.service_type)
        return f"ServiceAssertions({name}, {len(self._filtered)} registrations)"
