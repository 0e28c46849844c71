# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Synchronous service resolution for fluentdi.

The provider exists so that a registration store can be smoke-tested: every
registered service is resolved once to surface construction errors. It
supports three lifetimes:

- Singleton: one instance per provider
- Scoped: one instance per scope
- Transient: new instance per resolution
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterable
from types import TracebackType
from typing import Any, Protocol, TypeVar, cast, runtime_checkable

from fluentdi.di.descriptor import ServiceDescriptor
from fluentdi.di.disposal import dispose_services
from fluentdi.di.errors import (
    CircularDependencyError,
    DIError,
    DisposedError,
    ScopeError,
    ServiceCreationError,
    ServiceNotRegisteredError,
)
from fluentdi.di.lifetime import ServiceLifetime
from fluentdi.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

# Types being constructed in the current context, outermost first
_DEPENDENCY_CHAIN: contextvars.ContextVar[tuple[Any, ...]] = contextvars.ContextVar(
    "_fluentdi_dependency_chain", default=()
)


def _type_name(service_type: Any) -> str:
    return getattr(service_type, "__qualname__", None) or str(service_type)


@runtime_checkable
class ServiceResolver(Protocol):
    """What a factory receives to resolve its own dependencies."""

    def resolve(self, service_type: type[T]) -> T: ...

    def get_service(self, service_type: type[T]) -> T | None: ...


class _ResolverBase:
    """Shared resolution logic for the root provider and its scopes."""

    _provider: ServiceProvider
    _instances: dict[Any, Any]
    _created: list[Any]
    _disposed: bool

    def _check_not_disposed(self, operation: str) -> None:
        if self._disposed:
            raise DisposedError(operation)

    @property
    def is_root(self) -> bool:
        raise NotImplementedError

    def resolve(self, service_type: type[T]) -> T:
        """Resolve a service instance.

        Raises:
            ServiceNotRegisteredError: If the service type is not registered
            ScopeError: If a scoped service is resolved from the root provider
            CircularDependencyError: If resolution re-enters a type under construction
            ServiceCreationError: If constructing the instance raised
        """
        self._check_not_disposed("resolve")
        descriptor = self._provider.descriptor_for(service_type)
        if descriptor is None:
            raise ServiceNotRegisteredError(service_type)

        match descriptor.lifetime:
            case ServiceLifetime.SINGLETON:
                return cast("T", self._provider._resolve_cached(descriptor))
            case ServiceLifetime.SCOPED:
                if self.is_root:
                    raise ScopeError.outside_scope(service_type)
                return cast("T", self._resolve_cached(descriptor))
            case _:
                instance = self._provider._create(descriptor, self)
                self._created.append(instance)
                return cast("T", instance)

    def get_service(self, service_type: type[T]) -> T | None:
        """Resolve a service, or return None when it is not registered."""
        self._check_not_disposed("get_service")
        if self._provider.descriptor_for(service_type) is None:
            return None
        return self.resolve(service_type)

    def _resolve_cached(self, descriptor: ServiceDescriptor[Any]) -> Any:
        key = descriptor.service_type
        if key not in self._instances:
            instance = self._provider._create(descriptor, self)
            self._instances[key] = instance
            # Caller-supplied instances are owned by the caller
            if not descriptor.is_instance:
                self._created.append(instance)
        return self._instances[key]

    def dispose(self) -> None:
        """Dispose every instance created through this resolver (idempotent)."""
        if self._disposed:
            return
        self._disposed = True
        created, self._created = self._created, []
        self._instances.clear()
        dispose_services(created)


class ServiceScope(_ResolverBase):
    """A resolution scope holding scoped instances; use as a context manager."""

    def __init__(self, provider: ServiceProvider) -> None:
        self._provider = provider
        self._instances = {}
        self._created = []
        self._disposed = False

    @property
    def is_root(self) -> bool:
        return False

    @property
    def provider(self) -> ServiceProvider:
        return self._provider

    def __enter__(self) -> ServiceScope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()


class ServiceProvider(_ResolverBase):
    """Root resolver built from a sequence of descriptors.

    When several descriptors share a service type the last one wins, so
    resolution follows the most recent registration.
    """

    def __init__(self, descriptors: Iterable[ServiceDescriptor[Any]]) -> None:
        self._provider = self
        self._registrations: dict[Any, ServiceDescriptor[Any]] = {}
        for descriptor in descriptors:
            self._registrations[descriptor.service_type] = descriptor
        self._instances = {}
        self._created = []
        self._scopes: list[ServiceScope] = []
        self._disposed = False

    @property
    def is_root(self) -> bool:
        return True

    def descriptor_for(self, service_type: Any) -> ServiceDescriptor[Any] | None:
        return self._registrations.get(service_type)

    def create_scope(self) -> ServiceScope:
        """Create a new scope for scoped services.

        Example:
            ```python
            with provider.create_scope() as scope:
                service = scope.resolve(IService)
            ```
        """
        self._check_not_disposed("create_scope")
        scope = ServiceScope(self)
        self._scopes.append(scope)
        return scope

    def _create(self, descriptor: ServiceDescriptor[Any], resolver: _ResolverBase) -> Any:
        if descriptor.is_instance:
            return descriptor.implementation_instance

        service_type = descriptor.service_type
        chain = _DEPENDENCY_CHAIN.get()
        if service_type in chain:
            raise CircularDependencyError(
                [_type_name(t) for t in (*chain, service_type)]
            )

        token = _DEPENDENCY_CHAIN.set((*chain, service_type))
        try:
            if descriptor.is_factory:
                return descriptor.implementation_factory(resolver)
            return descriptor.implementation_type()
        except DIError:
            raise
        except Exception as exc:
            error = ServiceCreationError(service_type, exc).add_context(
                "resolver", "root" if resolver.is_root else "scope"
            )
            logger.warning(
                "Failed to create service %s",
                _type_name(service_type),
                **error.to_dict(),
            )
            raise error from exc
        finally:
            _DEPENDENCY_CHAIN.reset(token)

    def dispose(self) -> None:
        """Dispose open scopes, then singleton instances."""
        if self._disposed:
            return
        for scope in reversed(self._scopes):
            scope.dispose()
        self._scopes.clear()
        super().dispose()

    def __enter__(self) -> ServiceProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()
