# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi

"""
Fluent assertions over service registrations.
"""

from __future__ import annotations

from fluentdi.assertions.errors import (
    ArgumentNullError,
    AssertionFailure,
    ImplementationTypeError,
)
from fluentdi.assertions.execution import (
    AssertionChain,
    execute,
    format_reason,
    format_service_type,
    format_value,
)
from fluentdi.assertions.matching import MatchResult
from fluentdi.assertions.constraint import AndConstraint
from fluentdi.assertions.service import ServiceAssertions
from fluentdi.assertions.collection import ServiceCollectionAssertions, should

__all__ = [
    "AndConstraint",
    "ArgumentNullError",
    "AssertionChain",
    "AssertionFailure",
    "ImplementationTypeError",
    "MatchResult",
    "ServiceAssertions",
    "ServiceCollectionAssertions",
    "execute",
    "format_reason",
    "format_service_type",
    "format_value",
    "should",
]
