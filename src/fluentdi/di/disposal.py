# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Service disposal for the fluentdi registration host.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from fluentdi.logging import get_logger

logger = get_logger(__name__)


def dispose_service(service: Any) -> None:
    """Dispose a service if it exposes a callable ``dispose`` or ``close``."""
    for name in ("dispose", "close"):
        method = getattr(service, name, None)
        if callable(method):
            logger.debug("Disposing %s via %s()", type(service).__name__, name)
            method()
            return


def dispose_services(services: Iterable[Any]) -> None:
    """Dispose services in reverse creation order."""
    for service in reversed(list(services)):
        dispose_service(service)
