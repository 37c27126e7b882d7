"""
Structured Logging for polyset
==============================

Bounded Context: Observability

JSON-structured logging for the I/O and CLI layers. The geometric core
does not log.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from polyset_io.logging import create_logger, LogEvent
    >>> logger = create_logger("cli")
    >>> logger.info(
    ...     event=LogEvent.OPERATION_COMPLETED,
    ...     message="Union computed",
    ...     metadata={'points': 8}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
