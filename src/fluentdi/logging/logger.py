# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: fluentdi
"""
Logger implementation for fluentdi.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured context data.
"""

from __future__ import annotations

import enum
import json
import logging
import sys
from logging import StreamHandler
from typing import Any

from fluentdi.logging.config import LoggingSettings

CONTEXT_ATTRIBUTE = "fluentdi_context"


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        extra: dict[str, Any] = dict(getattr(record, CONTEXT_ATTRIBUTE, None) or {})

        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        return self._format_text(message, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "name": record.name,
            **{k: self._json_value(v) for k, v in extra.items()},
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message

        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _json_value(self, value: Any) -> Any:
        if isinstance(value, (str, int, float, bool)) or value is None:
            return value
        return self._format_value(value)

    def _format_value(self, value: Any) -> str:
        """Format a value for text output.

        Args:
            value: Value to format

        Returns:
            Formatted value string
        """
        if isinstance(value, str):
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, type):
            return value.__qualname__
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, BaseException):
            return f"{type(value).__name__}({value})"
        try:
            return json.dumps(value)
        except TypeError:
            return str(value)


class FluentLogger:
    """Default logger implementation for fluentdi.

    Wraps a standard library logger; keyword arguments passed to a log call
    travel on the record as structured context.

    Example:
        ```python
        logger.debug("Located %d registration(s)", 2, service="ICache")
        ```
    """

    def __init__(
        self,
        name: str,
        settings: LoggingSettings | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            settings: Optional logger settings (loads from environment if None)
        """
        self.name = name
        self._settings = settings or LoggingSettings()
        self._logger = logging.getLogger(name)
        self._configure()

    def _configure(self) -> None:
        self._logger.setLevel(self._settings.level.stdlib_level)

        # Only replace handlers this class installed
        for handler in list(self._logger.handlers):
            if isinstance(handler.formatter, StructuredFormatter):
                self._logger.removeHandler(handler)

        if self._settings.console_enabled:
            console = StreamHandler(sys.stderr)
            console.setFormatter(
                StructuredFormatter(
                    json_format=self._settings.json_format,
                    include_timestamp=self._settings.include_timestamp,
                    include_level=self._settings.include_level,
                )
            )
            self._logger.addHandler(console)

    def _log(self, level: int, msg: str, *args: Any, **context: Any) -> None:
        self._logger.log(level, msg, *args, extra={CONTEXT_ATTRIBUTE: context})

    def debug(self, msg: str, *args: Any, **context: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **context)

    def info(self, msg: str, *args: Any, **context: Any) -> None:
        self._log(logging.INFO, msg, *args, **context)

    def warning(self, msg: str, *args: Any, **context: Any) -> None:
        self._log(logging.WARNING, msg, *args, **context)


def get_logger(name: str) -> FluentLogger:
    """Get a logger configured from ``FLUENTDI_LOGGING_*`` settings.

    Args:
        name: Logger name (typically __name__)
    """
    return FluentLogger(name, settings=LoggingSettings())
