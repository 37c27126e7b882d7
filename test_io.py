"""
Polygon File I/O and Structured Logging Tests
=============================================

Usage:
    pytest test_io.py
"""

import json
import logging

import pytest

from polyset_geometry import Polygon, compute_union
from polyset_io import (
    LogEvent,
    create_logger,
    format_polygon,
    parse_line,
    read_polygon,
    write_polygon,
)


def test_parse_line_accepts_space_and_comma_delimiters():
    assert parse_line("1 2") == (1.0, 2.0)
    assert parse_line("1.5,-2") == (1.5, -2.0)
    assert parse_line("  3 ,\t4  \n") == (3.0, 4.0)


@pytest.mark.parametrize("line", ["x,y", "1", "1 2 3", "a b", "nan 1", "1 inf"])
def test_parse_line_rejects_malformed(line):
    assert parse_line(line) is None


def test_read_whitespace_file(tmp_path):
    path = tmp_path / "square.txt"
    path.write_text("0 0\n4 0\n\n4 4\n0 4\n")

    polygon = read_polygon(path)
    expected = Polygon.from_coordinates([(0, 0), (4, 0), (4, 4), (0, 4)])
    assert polygon.equals(expected)


def test_read_skips_and_logs_unparseable_lines(tmp_path, caplog):
    path = tmp_path / "triangle.csv"
    path.write_text("x,y\n0,0\nnot a point\n2,0\n1,2\n")

    with caplog.at_level(logging.WARNING, logger="polyset.files"):
        polygon = read_polygon(path)

    assert polygon.get_number_of_points() == 3

    skipped = [json.loads(r.getMessage()) for r in caplog.records]
    skipped = [entry for entry in skipped if entry['event'] == LogEvent.POLYGON_LINE_SKIPPED.value]
    assert [entry['metadata']['line'] for entry in skipped] == [1, 3]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_polygon(tmp_path / "missing.csv")


def test_write_then_read_preserves_polygon(tmp_path):
    a = Polygon.from_coordinates([(0, 0), (2, 0), (2, 2), (0, 2)])
    b = Polygon.from_coordinates([(1, 1), (3, 1), (3, 3), (1, 3)])
    result = compute_union(a, b)

    path = write_polygon(result, tmp_path / "out" / "union.csv")

    lines = path.read_text().splitlines()
    assert lines[0] == "x,y"
    assert lines[1] == "0.0,2.0"
    assert len(lines) == 1 + result.get_number_of_points()

    assert read_polygon(path).equals(result)


def test_write_preserves_full_precision(tmp_path):
    polygon = Polygon.from_coordinates([(0.1, 0.2), (1 / 3, 0), (0, 2 / 3)])
    path = write_polygon(polygon, tmp_path / "precise.csv")
    assert read_polygon(path).points == polygon.points


def test_format_polygon_matches_str():
    polygon = Polygon.from_coordinates([(0, 0), (1, 0), (0.5, 1)])
    text = format_polygon(polygon)
    assert text == str(polygon)
    assert text.startswith("Polygon coordinates:\n")


def test_structured_logger_emits_json(caplog):
    logger = create_logger("test")

    with caplog.at_level(logging.INFO, logger="polyset.test"):
        logger.info(
            event=LogEvent.OPERATION_COMPLETED,
            message="union computed",
            metadata={'points': 8},
        )
        logger.error(
            event=LogEvent.CLI_ERROR,
            message="failed",
            exc_info=ValueError("boom"),
        )

    info, error = [json.loads(r.getMessage()) for r in caplog.records]
    assert info['component'] == "test"
    assert info['event'] == "operation.completed"
    assert info['metadata'] == {'points': 8}
    assert error['level'] == "ERROR"
    assert error['exception'] == {'type': 'ValueError', 'message': 'boom'}
