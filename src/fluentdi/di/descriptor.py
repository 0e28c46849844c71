# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Service descriptor for the fluentdi registration host.

A descriptor binds a requested service type to the way an instance is
obtained (a concrete type, a factory, or a ready-made instance) and the
lifetime of that instance.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from fluentdi.di.errors import InvalidDescriptorError
from fluentdi.di.lifetime import ServiceLifetime

if TYPE_CHECKING:
    from fluentdi.di.provider import ServiceResolver

T = TypeVar("T")

ServiceFactory = Callable[["ServiceResolver"], Any]


@dataclass(frozen=True, eq=False)
class ServiceDescriptor(Generic[T]):
    """Immutable registration of a service type.

    Attributes:
        service_type: The type requested when resolving
        lifetime: The lifetime of resolved instances
        implementation_type: The concrete type, or None for factory registrations
        implementation_factory: Callable receiving the resolver and returning an instance
        implementation_instance: A pre-built singleton instance
    """

    service_type: type[T]
    lifetime: ServiceLifetime
    implementation_type: type | None = None
    implementation_factory: ServiceFactory | None = None
    implementation_instance: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.lifetime, ServiceLifetime):
            object.__setattr__(self, "lifetime", ServiceLifetime(self.lifetime))

        has_factory = self.implementation_factory is not None
        has_instance = self.implementation_instance is not None

        if has_factory and (has_instance or self.implementation_type is not None):
            raise InvalidDescriptorError(
                "A factory registration cannot also name an implementation type or instance",
                service_type_name=self._service_name,
            )
        if has_instance:
            if self.lifetime is not ServiceLifetime.SINGLETON:
                raise InvalidDescriptorError(
                    "Instance registrations must be singletons",
                    service_type_name=self._service_name,
                    lifetime=self.lifetime.value,
                )
            object.__setattr__(
                self, "implementation_type", type(self.implementation_instance)
            )
        elif not has_factory and self.implementation_type is None:
            raise InvalidDescriptorError(
                "A descriptor needs an implementation type, factory or instance",
                service_type_name=self._service_name,
            )

    @property
    def _service_name(self) -> str:
        return getattr(self.service_type, "__qualname__", str(self.service_type))

    @property
    def is_factory(self) -> bool:
        return self.implementation_factory is not None

    @property
    def is_instance(self) -> bool:
        return self.implementation_instance is not None

    @classmethod
    def describe(
        cls,
        service_type: type[T],
        implementation_type: type | None = None,
        lifetime: ServiceLifetime = ServiceLifetime.TRANSIENT,
    ) -> ServiceDescriptor[T]:
        """Describe a type registration; the service type is its own implementation by default."""
        return cls(
            service_type=service_type,
            lifetime=lifetime,
            implementation_type=implementation_type or service_type,
        )

    @classmethod
    def singleton(
        cls, service_type: type[T], implementation_type: type | None = None
    ) -> ServiceDescriptor[T]:
        return cls.describe(service_type, implementation_type, ServiceLifetime.SINGLETON)

    @classmethod
    def scoped(
        cls, service_type: type[T], implementation_type: type | None = None
    ) -> ServiceDescriptor[T]:
        return cls.describe(service_type, implementation_type, ServiceLifetime.SCOPED)

    @classmethod
    def transient(
        cls, service_type: type[T], implementation_type: type | None = None
    ) -> ServiceDescriptor[T]:
        return cls.describe(service_type, implementation_type, ServiceLifetime.TRANSIENT)

    @classmethod
    def from_factory(
        cls,
        service_type: type[T],
        factory: ServiceFactory,
        lifetime: ServiceLifetime = ServiceLifetime.TRANSIENT,
    ) -> ServiceDescriptor[T]:
        return cls(
            service_type=service_type,
            lifetime=lifetime,
            implementation_factory=factory,
        )

    @classmethod
    def from_instance(cls, service_type: type[T], instance: T) -> ServiceDescriptor[T]:
        return cls(
            service_type=service_type,
            lifetime=ServiceLifetime.SINGLETON,
            implementation_instance=instance,
        )

    def __repr__(self) -> str:
        if self.is_factory:
            source = f"factory={self.implementation_factory!r}"
        else:
            source = f"implementation={getattr(self.implementation_type, '__qualname__', None)}"
        return (
            f"ServiceDescriptor({self._service_name}, {source}, "
            f"lifetime={self.lifetime.display_name})"
        )
