# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""pytest fixtures for testing service registrations.

Loaded automatically through the ``pytest11`` entry point once fluentdi is
installed; otherwise add ``pytest_plugins = ["fluentdi.pytest_plugin"]``.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from fluentdi.config import reset_settings
from fluentdi.di import ServiceCollection


@pytest.fixture
def service_collection() -> ServiceCollection:
    """A fresh, empty registration store for each test."""
    return ServiceCollection()


@pytest.fixture
def fluentdi_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Reload assertion settings around a test.

    Set ``FLUENTDI_*`` variables through the yielded monkeypatch before the
    first assertion runs.
    """
    reset_settings()
    yield monkeypatch
    reset_settings()
