"""
Geometry Layer
==============

Bounded Context: Pure geometric primitives and vertex ordering.

Responsibilities:
- Point value object (exact equality, lexicographic order)
- Segment intersection
- Point-in-polygon (winding number)
- Canonical contour ordering
- NO state, NO logging, NO I/O
"""

from polyset_geometry.geometry.primitives import (
    Point,
    Location,
    segments_intersect,
    substitute_point_in_line,
    point_on_segment_bounds,
    point_in_polygon,
    ccw_orientation_key,
)
from polyset_geometry.geometry.ordering import (
    CounterClockwiseOrder,
    canonicalize,
    centroid,
)

__all__ = [
    "Point",
    "Location",
    "segments_intersect",
    "substitute_point_in_line",
    "point_on_segment_bounds",
    "point_in_polygon",
    "ccw_orientation_key",
    "CounterClockwiseOrder",
    "canonicalize",
    "centroid",
]
