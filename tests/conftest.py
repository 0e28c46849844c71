"""Top-level pytest configuration for fluentdi."""

import pytest

from fluentdi.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test load assertion settings from a clean cache."""
    reset_settings()
    yield
    reset_settings()
