"""Tests for the fixtures shipped with the pytest plugin."""

from __future__ import annotations

import pytest

from fluentdi import AssertionFailure, ServiceCollection, should


class IClock: ...


class SystemClock(IClock): ...


def test_service_collection_fixture_is_empty(service_collection: ServiceCollection) -> None:
    should(service_collection).have_count(0)

    service_collection.add_singleton(IClock, SystemClock)

    should(service_collection).contain_singleton(IClock, SystemClock)


def test_settings_fixture_reloads_environment(
    fluentdi_settings: pytest.MonkeyPatch, service_collection: ServiceCollection
) -> None:
    fluentdi_settings.setenv("FLUENTDI_IDENTIFIER", "app services")
    fluentdi_settings.setenv("FLUENTDI_IMPLICIT_COUNT", "2")
    service_collection.add_transient(IClock, SystemClock)

    with pytest.raises(AssertionFailure) as exc_info:
        should(service_collection).contain_transient(IClock)

    assert exc_info.value.message.startswith(
        "Expected app services to have 2 service(s) of type IClock"
    )
