"""Tests for the ordered registration store."""

from __future__ import annotations

import pytest

from fluentdi.assertions import ServiceCollectionAssertions
from fluentdi.di import ServiceCollection, ServiceDescriptor, ServiceLifetime


class IMailer: ...


class SmtpMailer(IMailer): ...


class NullMailer(IMailer): ...


class IClock: ...


def test_keeps_duplicates_in_order() -> None:
    services = ServiceCollection()
    services.add_singleton(IMailer, SmtpMailer).add_transient(IMailer, NullMailer)

    assert len(services) == 2
    assert [d.implementation_type for d in services] == [SmtpMailer, NullMailer]
    assert services[1].lifetime is ServiceLifetime.TRANSIENT


def test_add_scoped_without_implementation_registers_self() -> None:
    services = ServiceCollection().add_scoped(SmtpMailer)

    assert services[0].implementation_type is SmtpMailer


def test_callable_implementation_becomes_factory() -> None:
    services = ServiceCollection().add_singleton(IMailer, lambda resolver: NullMailer())

    assert services[0].is_factory


def test_add_instance() -> None:
    mailer = SmtpMailer()

    services = ServiceCollection().add_instance(IMailer, mailer)

    assert services[0].implementation_instance is mailer


def test_rejects_non_descriptors() -> None:
    with pytest.raises(TypeError):
        ServiceCollection().add("IMailer")  # type: ignore[arg-type]


def test_rejects_non_callable_implementation() -> None:
    with pytest.raises(TypeError):
        ServiceCollection().add_singleton(IMailer, 42)  # type: ignore[arg-type]


def test_contains_and_service_types() -> None:
    services = ServiceCollection(
        [
            ServiceDescriptor.singleton(IMailer, SmtpMailer),
            ServiceDescriptor.singleton(IClock),
            ServiceDescriptor.singleton(IMailer, NullMailer),
        ]
    )

    assert IMailer in services
    assert SmtpMailer not in services
    assert services.service_types() == [IMailer, IClock]


def test_should_starts_assertions() -> None:
    services = ServiceCollection()

    assertions = services.should("registry")

    assert isinstance(assertions, ServiceCollectionAssertions)
    assert assertions.subject is services
    assert assertions.identifier == "registry"
