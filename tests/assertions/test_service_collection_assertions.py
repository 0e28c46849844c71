"""Tests for the fluent chain on a registration store.

Covers locating a service, refining by count and implementation, and the
terminal lifetime checks for every lifetime.
"""

from __future__ import annotations

import pytest
from registrations import (
    IScoped,
    ISingleton,
    ITransient,
    Scoped,
    ScopedOther,
    Singleton,
    SingletonOther,
    Transient,
    TransientOther,
    Unrelated,
)

from fluentdi import (
    AndConstraint,
    ArgumentNullError,
    AssertionFailure,
    ImplementationTypeError,
    ServiceCollection,
    ServiceCollectionAssertions,
    should,
)
from fluentdi.assertions.errors import (
    ASSERTION_COUNT_MISMATCH,
    ASSERTION_SERVICE_NOT_FOUND,
)


class TestNullStore:
    """A missing store is a usage error, never an assertion failure."""

    def test_locate_service_raises_argument_null(self) -> None:
        with pytest.raises(ArgumentNullError) as exc_info:
            should(None).locate_service(ISingleton).as_singleton()

        assert not isinstance(exc_info.value, AssertionError)
        assert exc_info.value.argument == "services"

    @pytest.mark.parametrize(
        "call",
        [
            lambda a: a.have_count(0),
            lambda a: a.locate_service(ISingleton),
            lambda a: a.have_service(ISingleton),
            lambda a: a.contain_singleton(ISingleton),
            lambda a: a.contain_scoped(IScoped),
            lambda a: a.contain_transient(ITransient, Transient, 1),
            lambda a: a.initialize(),
            lambda a: a.not_be_null(),
        ],
    )
    def test_every_entry_point_raises_argument_null(self, call) -> None:
        with pytest.raises(ArgumentNullError):
            call(should(None))


class TestLocateService:
    def test_missing_service_is_not_a_failure_until_checked(
        self, services: ServiceCollection
    ) -> None:
        located = should(services).locate_service(Unrelated)

        assert located.registrations == []

    def test_missing_service_fails_as_none_found(
        self, services: ServiceCollection
    ) -> None:
        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service(Unrelated).as_singleton()

        assert exc_info.value.code == ASSERTION_SERVICE_NOT_FOUND
        assert exc_info.value.message == (
            "Expected services to have a service of type Unrelated registered, "
            "but found none."
        )

    def test_with_count_on_missing_service_reports_count(
        self, services: ServiceCollection
    ) -> None:
        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service(Unrelated).with_count(2)

        assert exc_info.value.code == ASSERTION_COUNT_MISMATCH
        assert exc_info.value.actual == 0

    @pytest.mark.parametrize("terminal", ["as_singleton", "as_scoped", "as_transient"])
    def test_missing_service_fails_every_lifetime(
        self, services: ServiceCollection, terminal: str
    ) -> None:
        located = should(services).locate_service(Unrelated)

        with pytest.raises(AssertionFailure) as exc_info:
            getattr(located, terminal)()

        assert exc_info.value.code == ASSERTION_SERVICE_NOT_FOUND

    def test_duplicate_registration_reports_implicit_count_reason(
        self, services: ServiceCollection
    ) -> None:
        services.add_singleton(ISingleton, Singleton)

        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service(ISingleton).as_singleton()

        assert exc_info.value.code == ASSERTION_COUNT_MISMATCH
        assert exc_info.value.message == (
            "Expected services to have 1 service(s) of type ISingleton registered "
            "because only one registration is expected when no count is given, "
            "but found 2."
        )

    def test_missing_service_with_zero_count_fails_as_none_found(
        self, services: ServiceCollection
    ) -> None:
        located = should(services).locate_service(Unrelated).with_count(0)

        with pytest.raises(AssertionFailure) as exc_info:
            located.as_transient()

        assert exc_info.value.message == (
            "Expected services to have a service of type Unrelated registered, "
            "but found none."
        )

    def test_registrations_keep_store_order(self, services: ServiceCollection) -> None:
        services.add_transient(ISingleton, SingletonOther)

        located = should(services).locate_service(ISingleton)

        assert [d.implementation_type for d in located.registrations] == [
            Singleton,
            SingletonOther,
        ]

    def test_collection_should_method(self, services: ServiceCollection) -> None:
        services.should().locate_service(ISingleton).as_singleton()


class TestSingleton:
    def test_contains_singleton(self, services: ServiceCollection) -> None:
        should(services).locate_service(ISingleton).as_singleton()

    def test_contains_singleton_with_implementation(
        self, services: ServiceCollection
    ) -> None:
        should(services).locate_service(ISingleton).with_implementation(
            Singleton
        ).as_singleton()

    def test_wrong_implementation_fails(self, services: ServiceCollection) -> None:
        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service(ISingleton).with_implementation(
                SingletonOther
            )

        assert exc_info.value.message == (
            "Expected services to have an implementation of type SingletonOther "
            "registered, but found Singleton."
        )
        assert exc_info.value.expected is SingletonOther
        assert exc_info.value.actual is Singleton

    def test_two_singletons_with_count(self, services: ServiceCollection) -> None:
        services.add_singleton(ISingleton, Singleton)

        should(services).locate_service(ISingleton).with_count(2).as_singleton()

    def test_transient_is_not_singleton(self, services: ServiceCollection) -> None:
        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service(ITransient).as_singleton()

        assert exc_info.value.message == (
            "Expected services to have a Singleton of type ITransient registered, "
            "but found Transient."
        )

    def test_many_singletons_without_count_fail(
        self, services: ServiceCollection
    ) -> None:
        services.add_singleton(ISingleton, Singleton)

        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service(ISingleton).as_singleton()

        assert exc_info.value.expected == 1
        assert exc_info.value.actual == 2

    def test_mixed_lifetimes_fail_on_first_offender(
        self, services: ServiceCollection
    ) -> None:
        services.add_transient(ISingleton, Singleton)

        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service(ISingleton).with_count(2).as_singleton()

        assert "but found Transient." in exc_info.value.message


class TestScoped:
    def test_contains_scoped(self, services: ServiceCollection) -> None:
        should(services).locate_service(IScoped).as_scoped()

    def test_two_scoped_with_count(self, services: ServiceCollection) -> None:
        services.add_scoped(IScoped, Scoped)

        should(services).locate_service(IScoped).with_count(2).as_scoped()

    def test_singleton_is_not_scoped(self, services: ServiceCollection) -> None:
        with pytest.raises(AssertionFailure):
            should(services).locate_service(ISingleton).as_scoped()

    def test_many_scoped_without_count_fail(self, services: ServiceCollection) -> None:
        services.add_scoped(IScoped, Scoped)

        with pytest.raises(AssertionFailure):
            should(services).locate_service(IScoped).as_scoped()

    def test_contains_scoped_with_implementation(
        self, services: ServiceCollection
    ) -> None:
        should(services).locate_service(IScoped).with_implementation(Scoped).as_scoped()

    def test_wrong_scoped_implementation_fails(
        self, services: ServiceCollection
    ) -> None:
        with pytest.raises(AssertionFailure):
            should(services).locate_service(IScoped).with_implementation(ScopedOther)


class TestTransient:
    def test_contains_transient(self, services: ServiceCollection) -> None:
        should(services).locate_service(ITransient).as_transient()

    def test_two_transients_with_count(self, services: ServiceCollection) -> None:
        services.add_transient(ITransient, Transient)

        should(services).locate_service(ITransient).with_count(2).as_transient()

    def test_singleton_is_not_transient(self, services: ServiceCollection) -> None:
        with pytest.raises(AssertionFailure):
            should(services).locate_service(ISingleton).as_transient()

    def test_many_transients_without_count_fail(
        self, services: ServiceCollection
    ) -> None:
        services.add_transient(ITransient, Transient)

        with pytest.raises(AssertionFailure):
            should(services).locate_service(ITransient).as_transient()

    def test_contains_transient_with_implementation(
        self, services: ServiceCollection
    ) -> None:
        should(services).locate_service(ITransient).with_implementation(
            Transient
        ).as_transient()

    def test_wrong_transient_implementation_fails(
        self, services: ServiceCollection
    ) -> None:
        with pytest.raises(AssertionFailure):
            should(services).locate_service(ITransient).with_implementation(
                TransientOther
            ).as_transient()

    def test_one_of_several_implementations_matches(
        self, services: ServiceCollection
    ) -> None:
        services.add_transient(ITransient, TransientOther)

        should(services).locate_service(ITransient).with_implementation(
            Transient
        ).with_implementation(TransientOther).with_count(2).as_transient()


class TestImplementationBound:
    def test_unrelated_implementation_is_a_usage_error(
        self, services: ServiceCollection
    ) -> None:
        with pytest.raises(ImplementationTypeError) as exc_info:
            should(services).locate_service(ISingleton).with_implementation(Unrelated)

        assert not isinstance(exc_info.value, AssertionError)

    def test_non_type_implementation_is_a_usage_error(
        self, services: ServiceCollection
    ) -> None:
        with pytest.raises(ImplementationTypeError):
            should(services).locate_service(ISingleton).with_implementation(
                Singleton()  # type: ignore[arg-type]
            )

    def test_missing_service_with_implementation_fails_as_none_found(
        self, services: ServiceCollection
    ) -> None:
        class IMissing: ...

        class Missing(IMissing): ...

        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service(IMissing).with_implementation(Missing)

        assert exc_info.value.message.endswith("but found none.")


class TestHaveCount:
    def test_counts_whole_store(self, services: ServiceCollection) -> None:
        should(services).have_count(3)

    def test_wrong_total_fails(self, services: ServiceCollection) -> None:
        with pytest.raises(AssertionFailure) as exc_info:
            should(services).have_count(4, "we registered {0} services", "four")

        assert exc_info.value.message == (
            "Expected services to contain 4 item(s) because we registered four "
            "services, but found 3."
        )
        assert exc_info.value.context["reason"] == "we registered four services"

    def test_accepts_plain_iterables(self, services: ServiceCollection) -> None:
        generator = (descriptor for descriptor in services)

        assertions = should(generator)

        assertions.have_count(3)
        assertions.locate_service(IScoped).as_scoped()


class TestChaining:
    def test_terminal_check_returns_fresh_assertions(
        self, services: ServiceCollection
    ) -> None:
        constraint = should(services).locate_service(ISingleton).as_singleton()

        assert isinstance(constraint, AndConstraint)
        assert isinstance(constraint.and_, ServiceCollectionAssertions)
        constraint.and_.locate_service(IScoped).as_scoped().and_.have_count(3)

    def test_custom_identifier_labels_messages(
        self, services: ServiceCollection
    ) -> None:
        with pytest.raises(AssertionFailure) as exc_info:
            should(services, "container").have_count(1)

        assert exc_info.value.message.startswith("Expected container to contain")
        assert exc_info.value.context["subject"] == "container"

    def test_because_already_prefixed_is_kept(
        self, services: ServiceCollection
    ) -> None:
        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service(ITransient).as_scoped(
                "because handlers are per request"
            )

        assert "registered because handlers are per request, but found" in (
            exc_info.value.message
        )


class TestServiceKeys:
    """Service types may be identifier tokens rather than classes."""

    def test_string_key_is_named_without_quotes(self) -> None:
        services = ServiceCollection().add_transient("mailer", Transient)

        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service("mailer").as_singleton()

        assert exc_info.value.message == (
            "Expected services to have a Singleton of type mailer registered, "
            "but found Transient."
        )

    def test_missing_string_key(self) -> None:
        services = ServiceCollection().add_transient("mailer", Transient)

        with pytest.raises(AssertionFailure) as exc_info:
            should(services).locate_service("cache").as_scoped()

        assert exc_info.value.message == (
            "Expected services to have a service of type cache registered, "
            "but found none."
        )

    def test_string_key_with_implementation(self) -> None:
        services = ServiceCollection().add_transient("mailer", Transient)

        should(services).locate_service("mailer").with_implementation(
            Transient
        ).as_transient()
