"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

This module provides a structured logger that outputs one JSON object per
log line.

Design:
- JSON output (compatible with log aggregators)
- Wraps Python's logging module
- Contextual metadata (component, path, operation, etc.)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="cli")
    >>> logger.info(
    ...     event=LogEvent.OPERATION_COMPLETED,
    ...     message="Union computed",
    ...     metadata={'operation': 'union', 'points': 8}
    ... )

Output:
    {
        "timestamp": "2026-10-18T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "cli",
        "event": "operation.completed",
        "message": "Union computed",
        "metadata": {"operation": "union", "points": 8}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "cli", "files")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "cli")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: polyset.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"polyset.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(getattr(logging, level), json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.POLYGON_LOADED,
            ...     message="Loaded square.csv",
            ...     metadata={'points': 4}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log WARNING level message."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Example:
            >>> try:
            ...     read_polygon("missing.csv")
            ... except FileNotFoundError as e:
            ...     logger.error(
            ...         event=LogEvent.FILE_ERROR,
            ...         message="Failed to read polygon",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter.

    StructuredLogger already serializes the record to JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("cli", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
