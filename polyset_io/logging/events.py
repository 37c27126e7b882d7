"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<category>.<action>

    component: polygon, operation, config, render, error
    category: loaded, written, completed
    action: skipped, invalid_operand
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - polygon.*: Polygon file reading/writing
    - operation.*: Set operations
    - config.*, render.*: CLI support
    - error.*: Error conditions
    """

    # ========== Polygon I/O Events ==========
    POLYGON_LOADED = "polygon.loaded"
    """Polygon read from a delimited text file."""

    POLYGON_WRITTEN = "polygon.written"
    """Polygon written to a delimited text file."""

    POLYGON_LINE_SKIPPED = "polygon.line_skipped"
    """Unparseable line skipped while reading a polygon."""

    # ========== Operation Events ==========
    OPERATION_COMPLETED = "operation.completed"
    """Set operation produced a result."""

    OPERATION_INVALID_OPERAND = "operation.invalid_operand"
    """Set operation rejected an invalid operand."""

    # ========== CLI Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration loaded from YAML."""

    RENDER_WRITTEN = "render.written"
    """Rendered image written to disk."""

    # ========== Error Events ==========
    FILE_ERROR = "error.file"
    """Failed to read or write a file."""

    CLI_ERROR = "error.cli"
    """Command failed at the CLI boundary."""
