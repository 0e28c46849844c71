"""Shared registrations for the assertion tests."""

import pytest
from registrations import ISingleton, IScoped, ITransient, Scoped, Singleton, Transient

from fluentdi import ServiceCollection


@pytest.fixture
def services() -> ServiceCollection:
    """One registration per lifetime."""
    services = ServiceCollection()
    services.add_singleton(ISingleton, Singleton)
    services.add_transient(ITransient, Transient)
    services.add_scoped(IScoped, Scoped)
    return services
