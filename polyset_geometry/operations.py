"""
Set Operation Engine
====================

Boolean set operations on simple polygons by vertex classification.

Algorithm (shared by all operations):
1. Seed a candidate vertex set from the operands' vertices
2. Add every intersection between an edge of A and an edge of B
3. Keep the candidates the operation selects (winding number test)
4. Rebuild a polygon from the survivors (canonical angular order)

Based on https://stackoverflow.com/questions/7915734/intersection-and-union-of-polygons

Operand policy:
- Empty polygon = empty region (identity for union, absorbing for intersection)
- Non-empty invalid operand -> InvalidOperandError, checked before any
  empty short-cut
- Results are returned as found, so operands touching at a point or along
  an edge give a 1- or 2-point (invalid) polygon
"""

from enum import Enum
from functools import reduce
from typing import Callable, Dict, Iterable, List, Sequence, Set

from polyset_geometry.config import DEFAULT_GEOMETRY, GeometryConfig
from polyset_geometry.geometry.primitives import (
    Location,
    Point,
    point_in_polygon,
    segments_intersect,
)
from polyset_geometry.polygon import Polygon


class SetOperation(str, Enum):
    """Boolean operation applied to a pair of polygons."""

    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"


class InvalidOperandError(ValueError):
    """Raised when a non-empty operand fails Polygon.is_valid()."""

    def __init__(self, operand: str, reason: str):
        self.operand = operand
        self.reason = reason
        super().__init__(f"Invalid operand {operand}: {reason}")


def _check_operand(polygon: Polygon, name: str, config: GeometryConfig) -> None:
    if not polygon.is_valid(config):
        raise InvalidOperandError(name, polygon.invalid_reason(config))


def _check_operands(a: Polygon, b: Polygon, config: GeometryConfig) -> None:
    """Validate every non-empty operand. Empty operands are the empty region."""
    if not a.is_empty:
        _check_operand(a, "A", config)
    if not b.is_empty:
        _check_operand(b, "B", config)


def _edge_intersections(a: Polygon, b: Polygon) -> Set[Point]:
    """All points where an edge of a meets an edge of b."""
    intersections = set()
    for a_start, a_end in a.edges():
        for b_start, b_end in b.edges():
            point = segments_intersect(a_start, a_end, b_start, b_end)
            if point is not None:
                intersections.add(point)
    return intersections


def _build_result(points: Iterable[Point]) -> Polygon:
    return Polygon(points=tuple(points))


def compute_union(a: Polygon, b: Polygon, config: GeometryConfig = DEFAULT_GEOMETRY) -> Polygon:
    """
    Union of A and B.

    Keeps every candidate that is not strictly inside either operand
    (boundary and exterior points survive).

    Raises:
        InvalidOperandError: If a non-empty operand is invalid
    """
    _check_operands(a, b, config)
    if a.is_empty:
        return b.copy()
    if b.is_empty:
        return a.copy()

    candidates = set(a.points) | set(b.points)
    candidates |= _edge_intersections(a, b)

    eps = config.epsilon
    return _build_result(
        p for p in sorted(candidates)
        if not (
            point_in_polygon(p, a.points, eps) == Location.INSIDE
            or point_in_polygon(p, b.points, eps) == Location.INSIDE
        )
    )


def compute_intersection(
    a: Polygon, b: Polygon, config: GeometryConfig = DEFAULT_GEOMETRY
) -> Polygon:
    """
    Intersection of A and B.

    Seeds with the vertices of each operand lying inside or on the other,
    adds edge intersections, then drops anything outside either operand.

    Raises:
        InvalidOperandError: If a non-empty operand is invalid
    """
    _check_operands(a, b, config)
    if a.is_empty or b.is_empty:
        return Polygon()

    eps = config.epsilon
    candidates = {p for p in a.points if point_in_polygon(p, b.points, eps) != Location.OUTSIDE}
    candidates |= {p for p in b.points if point_in_polygon(p, a.points, eps) != Location.OUTSIDE}
    candidates |= _edge_intersections(a, b)

    return _build_result(
        p for p in sorted(candidates)
        if not (
            point_in_polygon(p, a.points, eps) == Location.OUTSIDE
            or point_in_polygon(p, b.points, eps) == Location.OUTSIDE
        )
    )


def compute_subtraction(
    a: Polygon, b: Polygon, config: GeometryConfig = DEFAULT_GEOMETRY
) -> Polygon:
    """
    Difference A - B.

    Vertices of B strictly inside A are taken as they are. Vertices of A
    and edge intersections are kept unless strictly inside B.

    Raises:
        InvalidOperandError: If a non-empty operand is invalid
    """
    _check_operands(a, b, config)
    if a.is_empty:
        return Polygon()
    if b.is_empty:
        return a.copy()

    eps = config.epsilon
    result: List[Point] = [
        p for p in b.points if point_in_polygon(p, a.points, eps) == Location.INSIDE
    ]

    candidates = set(a.points) | _edge_intersections(a, b)
    result.extend(
        p for p in sorted(candidates)
        if point_in_polygon(p, b.points, eps) != Location.INSIDE
    )

    return _build_result(result)


_OPERATIONS: Dict[SetOperation, Callable[[Polygon, Polygon, GeometryConfig], Polygon]] = {
    SetOperation.UNION: compute_union,
    SetOperation.INTERSECTION: compute_intersection,
    SetOperation.DIFFERENCE: compute_subtraction,
}


def apply_operation(
    a: Polygon,
    b: Polygon,
    op: SetOperation,
    config: GeometryConfig = DEFAULT_GEOMETRY,
) -> Polygon:
    """Dispatch a binary set operation by enum value."""
    return _OPERATIONS[SetOperation(op)](a, b, config)


def apply_ops(
    polygons: Sequence[Polygon],
    op: SetOperation,
    config: GeometryConfig = DEFAULT_GEOMETRY,
) -> Polygon:
    """
    Left-fold a set operation over a sequence of polygons.

    The fold is seeded with the first polygon:
    op(op(polygons[0], polygons[1]), polygons[2]) ...

    Args:
        polygons: Operands in fold order
        op: Operation to apply
        config: Geometry policy

    Returns:
        Resulting polygon (empty for an empty sequence)

    Raises:
        InvalidOperandError: If any non-empty operand is invalid; operand
            is reported by its index in the sequence. A degenerate (1- or
            2-point) intermediate result is rejected as an operand too.
    """
    op = SetOperation(op)
    polygons = list(polygons)
    if not polygons:
        return Polygon()

    def step(acc, indexed):
        index, polygon = indexed
        try:
            return apply_operation(acc, polygon, op, config)
        except InvalidOperandError as e:
            if e.operand == "B":
                operand = f"#{index}"
            elif index == 1:
                operand = "#0"
            else:
                operand = f"accumulated result before #{index}"
            raise InvalidOperandError(operand, e.reason) from e

    first = polygons[0]
    if not first.is_empty and len(polygons) == 1:
        _check_operand(first, "#0", config)

    return reduce(step, enumerate(polygons[1:], start=1), first.copy())
