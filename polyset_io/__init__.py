"""
polyset I/O Package
===================

Bounded Context: Persistence and observability around the geometric core.

Architecture:
- files.py: delimited text reader/writer, console formatting
- logging/: Structured JSON logging

Public API
----------
Files:
    read_polygon, write_polygon, format_polygon, parse_line

Logging:
    LogEvent, StructuredLogger, create_logger

Example:
    >>> from polyset_io import read_polygon, write_polygon
    >>> from polyset_geometry import compute_union
    >>>
    >>> a = read_polygon("square.csv")
    >>> b = read_polygon("triangle.csv")
    >>> write_polygon(compute_union(a, b), "output.csv")
"""

from .files import read_polygon, write_polygon, format_polygon, parse_line
from .logging import LogEvent, StructuredLogger, create_logger

__all__ = [
    # Files
    'read_polygon',
    'write_polygon',
    'format_polygon',
    'parse_line',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]

__version__ = "1.0.0"
