# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""Configuration for fluentdi assertions."""

from fluentdi.config.settings import AssertionSettings, get_settings, reset_settings

__all__ = [
    "AssertionSettings",
    "get_settings",
    "reset_settings",
]
