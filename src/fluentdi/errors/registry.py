# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""Process-wide registry of error categories and codes."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


class ErrorRegistry:
    """Singleton holding one instance per (kind, name) pair.

    Categories and codes are created lazily the first time a module asks for
    them, so two modules naming the same code share one object.
    """

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()
    _entries: dict[tuple[str, str], Any]

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._entries = {}
                cls._instance = instance
            return cls._instance

    def get_or_create(self, kind: str, name: str, factory: Callable[[], T]) -> T:
        """Return the entry registered under ``kind`` and ``name``, creating it once."""
        key = (kind, name)
        with self._lock:
            if key not in self._entries:
                self._entries[key] = factory()
            return self._entries[key]


registry = ErrorRegistry()
