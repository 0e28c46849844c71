# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi

"""
Registration host for fluentdi: descriptors, the ordered collection they live
in, and a small synchronous provider used to smoke-test them.
"""

from __future__ import annotations

from fluentdi.di.collection import ServiceCollection
from fluentdi.di.descriptor import ServiceDescriptor, ServiceFactory
from fluentdi.di.errors import (
    CircularDependencyError,
    DIError,
    DisposedError,
    InvalidDescriptorError,
    ScopeError,
    ServiceCreationError,
    ServiceNotRegisteredError,
)
from fluentdi.di.lifetime import ServiceLifetime
from fluentdi.di.provider import ServiceProvider, ServiceResolver, ServiceScope

__all__ = [
    "CircularDependencyError",
    "DIError",
    "DisposedError",
    "InvalidDescriptorError",
    "ScopeError",
    "ServiceCollection",
    "ServiceCreationError",
    "ServiceDescriptor",
    "ServiceFactory",
    "ServiceLifetime",
    "ServiceNotRegisteredError",
    "ServiceProvider",
    "ServiceResolver",
    "ServiceScope",
]
