# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi

"""
fluentdi: fluent assertions for service registrations.

Example:
    ```python
    from fluentdi import ServiceCollection, should

    services = ServiceCollection()
    services.add_singleton(ICache, RedisCache)

    should(services).locate_service(ICache).with_implementation(RedisCache).as_singleton()
    ```
"""

from __future__ import annotations

from fluentdi.assertions import (
    AndConstraint,
    ArgumentNullError,
    AssertionFailure,
    ImplementationTypeError,
    ServiceAssertions,
    ServiceCollectionAssertions,
    should,
)
from fluentdi.di import (
    ServiceCollection,
    ServiceDescriptor,
    ServiceLifetime,
    ServiceProvider,
)

__version__ = "0.1.0"

__all__ = [
    "AndConstraint",
    "ArgumentNullError",
    "AssertionFailure",
    "ImplementationTypeError",
    "ServiceAssertions",
    "ServiceCollection",
    "ServiceCollectionAssertions",
    "ServiceDescriptor",
    "ServiceLifetime",
    "ServiceProvider",
    "should",
]
