"""
Polygon File I/O
================

Bounded Context: Delimited text persistence for polygons.

Format:
- Reading: one point per line, x and y separated by whitespace and/or a
  comma. Blank lines are ignored, unparseable lines (e.g. an "x,y"
  header) are skipped with a warning.
- Writing: "x,y" header, then one "x,y" pair per line in canonical order.

Both directions accept an optional StructuredLogger; without one, a
module-level logger for component "files" is used.
"""

import math
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from polyset_geometry.polygon import Polygon

from .logging import LogEvent, StructuredLogger, create_logger

_DELIMITER = re.compile(r"[,\s]+")

_default_logger: Optional[StructuredLogger] = None


def _get_logger(logger: Optional[StructuredLogger]) -> StructuredLogger:
    global _default_logger
    if logger is not None:
        return logger
    if _default_logger is None:
        _default_logger = create_logger("files")
    return _default_logger


def parse_line(line: str) -> Optional[Tuple[float, float]]:
    """
    Parse one "x y" / "x,y" line.

    Returns:
        (x, y) or None if the line does not hold exactly two finite numbers
    """
    fields = [f for f in _DELIMITER.split(line.strip()) if f]
    if len(fields) != 2:
        return None

    try:
        x, y = float(fields[0]), float(fields[1])
    except ValueError:
        return None

    if not (math.isfinite(x) and math.isfinite(y)):
        return None

    return x, y


def read_polygon(
    path: Union[str, Path],
    logger: Optional[StructuredLogger] = None,
) -> Polygon:
    """
    Load a polygon from a delimited text file.

    Args:
        path: File to read
        logger: Structured logger (optional)

    Returns:
        Polygon in canonical order

    Raises:
        FileNotFoundError: If the file does not exist
    """
    logger = _get_logger(logger)
    path = Path(path)

    if not path.is_file():
        logger.error(
            event=LogEvent.FILE_ERROR,
            message="Polygon file not found",
            metadata={'path': str(path)},
        )
        raise FileNotFoundError(f"Polygon file not found: {path}")

    coordinates: List[Tuple[float, float]] = []
    with open(path) as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue

            pair = parse_line(line)
            if pair is None:
                logger.warning(
                    event=LogEvent.POLYGON_LINE_SKIPPED,
                    message="Error parsing line",
                    metadata={'path': str(path), 'line': line_number, 'text': line.rstrip("\n")},
                )
                continue

            coordinates.append(pair)

    polygon = Polygon.from_coordinates(coordinates)
    logger.info(
        event=LogEvent.POLYGON_LOADED,
        message=f"Polygon read from file: {path}",
        metadata={'path': str(path), 'points': polygon.get_number_of_points()},
    )
    return polygon


def write_polygon(
    polygon: Polygon,
    path: Union[str, Path],
    logger: Optional[StructuredLogger] = None,
) -> Path:
    """
    Write a polygon as "x,y" lines with a header.

    Parent directories are created as needed.

    Returns:
        Path written
    """
    logger = _get_logger(logger)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        f.write("x,y\n")
        for point in polygon:
            f.write(f"{point.x!r},{point.y!r}\n")

    logger.info(
        event=LogEvent.POLYGON_WRITTEN,
        message=f"Polygon written to file: {path}",
        metadata={'path': str(path), 'points': polygon.get_number_of_points()},
    )
    return path


def format_polygon(polygon: Polygon) -> str:
    """Console representation: header line, then (x,y) pairs comma-separated."""
    return str(polygon)
