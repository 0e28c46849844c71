# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Ordered registration store.

A ServiceCollection records service descriptors in the order they are added.
Unlike a resolving container it keeps every registration, including several
for the same service type, so that tests can inspect exactly what was
registered.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, overload

from fluentdi.di.descriptor import ServiceDescriptor, ServiceFactory
from fluentdi.di.lifetime import ServiceLifetime
from fluentdi.logging import get_logger

if TYPE_CHECKING:
    from fluentdi.assertions.collection import ServiceCollectionAssertions
    from fluentdi.di.provider import ServiceProvider

T = TypeVar("T")

logger = get_logger(__name__)


class ServiceCollection:
    """Ordered, duplicate-allowing list of service descriptors."""

    def __init__(self, descriptors: Iterable[ServiceDescriptor[Any]] = ()) -> None:
        self._descriptors: list[ServiceDescriptor[Any]] = []
        for descriptor in descriptors:
            self.add(descriptor)

    def add(self, descriptor: ServiceDescriptor[Any]) -> ServiceCollection:
        """Append a descriptor and return the collection for chaining."""
        if not isinstance(descriptor, ServiceDescriptor):
            raise TypeError(
                f"Expected a ServiceDescriptor, got {type(descriptor).__name__}"
            )
        self._descriptors.append(descriptor)
        logger.debug("Registered %r", descriptor)
        return self

    def _add_with_lifetime(
        self,
        lifetime: ServiceLifetime,
        service_type: type[T],
        implementation: type | ServiceFactory | None,
    ) -> ServiceCollection:
        if implementation is None or isinstance(implementation, type):
            descriptor = ServiceDescriptor.describe(service_type, implementation, lifetime)
        elif callable(implementation):
            descriptor = ServiceDescriptor.from_factory(service_type, implementation, lifetime)
        else:
            raise TypeError(
                "implementation must be a type or a factory callable, "
                f"got {type(implementation).__name__}"
            )
        return self.add(descriptor)

    def add_singleton(
        self, service_type: type[T], implementation: type | ServiceFactory | None = None
    ) -> ServiceCollection:
        return self._add_with_lifetime(ServiceLifetime.SINGLETON, service_type, implementation)

    def add_scoped(
        self, service_type: type[T], implementation: type | ServiceFactory | None = None
    ) -> ServiceCollection:
        return self._add_with_lifetime(ServiceLifetime.SCOPED, service_type, implementation)

    def add_transient(
        self, service_type: type[T], implementation: type | ServiceFactory | None = None
    ) -> ServiceCollection:
        return self._add_with_lifetime(ServiceLifetime.TRANSIENT, service_type, implementation)

    def add_instance(self, service_type: type[T], instance: T) -> ServiceCollection:
        """Register a ready-made singleton instance."""
        return self.add(ServiceDescriptor.from_instance(service_type, instance))

    def service_types(self) -> list[type]:
        """Return the distinct registered service types in registration order."""
        seen: dict[type, None] = {}
        for descriptor in self._descriptors:
            seen.setdefault(descriptor.service_type, None)
        return list(seen)

    def build_service_provider(self) -> ServiceProvider:
        from fluentdi.di.provider import ServiceProvider

        return ServiceProvider(self._descriptors)

    def should(self, identifier: str | None = None) -> ServiceCollectionAssertions:
        """Start a fluent assertion on this collection."""
        from fluentdi.assertions.collection import ServiceCollectionAssertions

        return ServiceCollectionAssertions(self, identifier)

    def __iter__(self) -> Iterator[ServiceDescriptor[Any]]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    @overload
    def __getitem__(self, index: int) -> ServiceDescriptor[Any]: ...

    @overload
    def __getitem__(self, index: slice) -> list[ServiceDescriptor[Any]]: ...

    def __getitem__(self, index: int | slice) -> Any:
        return self._descriptors[index]

    def __contains__(self, service_type: object) -> bool:
        return any(d.service_type == service_type for d in self._descriptors)

    def __repr__(self) -> str:
        return f"ServiceCollection({len(self._descriptors)} registrations)"
