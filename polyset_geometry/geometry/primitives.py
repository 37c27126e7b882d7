"""
Geometric Primitives Module
===========================

Pure geometric predicates - NO state, NO side effects.

Design:
- Immutable Point value object (frozen dataclass)
- Paul Bourke's parametric solution for segment intersection
- Winding number for point-in-polygon, epsilon-tolerant
- Epsilon injected by caller, defaults to GeometryConfig
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from polyset_geometry.config import DEFAULT_GEOMETRY


@dataclass(frozen=True, order=True)
class Point:
    """
    Immutable 2D point.

    Equality is exact on both coordinates. Ordering is lexicographic
    (x, then y) and only exists so points can be deduplicated and
    iterated deterministically; it has no geometric meaning.

    Attributes:
        x: x-coordinate
        y: y-coordinate
    """

    x: float
    y: float

    def __post_init__(self):
        """Coerce to float and reject non-finite coordinates."""
        x, y = float(self.x), float(self.y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")

        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def equals(self, other: "Point") -> bool:
        """Exact coordinate equality."""
        return self.x == other.x and self.y == other.y

    def less_than(self, other: "Point") -> bool:
        """Lexicographic order used for deduplication."""
        if self.x == other.x:
            return self.y < other.y
        return self.x < other.x

    def as_tuple(self) -> tuple:
        return (self.x, self.y)


class Location(str, Enum):
    """Classification of a point against a polygon."""

    INSIDE = "inside"
    ON_BOUNDARY = "on_boundary"
    OUTSIDE = "outside"


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> Optional[Point]:
    """
    Intersect the finite segments p1->p2 and p3->p4.

    Args:
        p1: Segment A start
        p2: Segment A end
        p3: Segment B start
        p4: Segment B end

    Returns:
        Intersection point, or None if the segments are parallel,
        coincident or would need to be longer to meet.
    """
    denom = (p4.y - p3.y) * (p2.x - p1.x) - (p4.x - p3.x) * (p2.y - p1.y)

    # Parallel or coincident. Overlap is not reported.
    if denom == 0:
        return None

    normal_a = (p4.x - p3.x) * (p1.y - p3.y) - (p4.y - p3.y) * (p1.x - p3.x)
    normal_b = (p2.x - p1.x) * (p1.y - p3.y) - (p2.y - p1.y) * (p1.x - p3.x)

    fract_a = normal_a / denom
    fract_b = normal_b / denom

    if 0.0 <= fract_a <= 1.0 and 0.0 <= fract_b <= 1.0:
        return Point(
            x=p1.x + fract_a * (p2.x - p1.x),
            y=p1.y + fract_a * (p2.y - p1.y),
        )

    return None


def substitute_point_in_line(p1: Point, p2: Point, query: Point) -> float:
    """
    Signed area of (p1, p2, query).

    Returns:
        > 0: query lies left of the directed line p1->p2
        = 0: query lies on the line
        < 0: query lies right of the line
    """
    return (query.y - p1.y) * (p2.x - p1.x) - (query.x - p1.x) * (p2.y - p1.y)


def point_on_segment_bounds(
    query: Point,
    start: Point,
    end: Point,
    epsilon: float = DEFAULT_GEOMETRY.epsilon,
) -> bool:
    """Check query lies in the segment's bounding box, inflated by epsilon. Assumes collinearity."""
    return (
        min(start.x, end.x) - epsilon <= query.x <= max(start.x, end.x) + epsilon
        and min(start.y, end.y) - epsilon <= query.y <= max(start.y, end.y) + epsilon
    )


def point_in_polygon(
    query: Point,
    vertices: Sequence[Point],
    epsilon: float = DEFAULT_GEOMETRY.epsilon,
) -> Location:
    """
    Classify a point against a polygon with the winding number algorithm.

    The first edge found collinear with the query (within epsilon) decides
    the result on its own: ON_BOUNDARY if the query falls within that edge's
    bounds, OUTSIDE otherwise. Remaining edges are not examined.

    Args:
        query: Point to classify
        vertices: Polygon vertices in contour order
        epsilon: Collinearity tolerance

    Returns:
        Location of the query point
    """
    winding_number = 0
    n = len(vertices)

    for i in range(n):
        start = vertices[i]
        end = vertices[(i + 1) % n]
        cross = substitute_point_in_line(start, end, query)

        if abs(cross) < epsilon:
            if point_on_segment_bounds(query, start, end, epsilon):
                return Location.ON_BOUNDARY
            return Location.OUTSIDE

        if start.y <= query.y:
            # Upward crossing
            if end.y > query.y and cross > epsilon:
                winding_number += 1
        else:
            # Downward crossing
            if end.y <= query.y and cross < -epsilon:
                winding_number -= 1

    return Location.INSIDE if winding_number != 0 else Location.OUTSIDE


def ccw_orientation_key(reference: Point, point: Point) -> float:
    """Polar angle of point around reference, in radians. Sort key only."""
    return math.atan2(point.y - reference.y, point.x - reference.x)
