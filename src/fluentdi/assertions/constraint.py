# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""Continuation returned by a passing terminal assertion."""

from __future__ import annotations

from typing import Generic, TypeVar

TAssertions = TypeVar("TAssertions")


class AndConstraint(Generic[TAssertions]):
    """Lets a passing assertion be followed by another on the same subject.

    Example:
        should(services).contain_singleton(ICache).and_.have_count(3)
    """

    __slots__ = ("_parent",)

    def __init__(self, parent: TAssertions) -> None:
        self._parent = parent

    @property
    def and_(self) -> TAssertions:
        return self._parent

    def __repr__(self) -> str:
        return f"AndConstraint({self._parent!r})"
