"""
Polyset Geometry v1.0
=====================

Bounded Context: Boolean set operations on simple planar polygons.

Design Philosophy:
- Separation of Concerns: Primitives, Ordering, Entity, Operations separated
- Immutable values: Point and Polygon are frozen dataclasses
- Explicit policy: epsilon and validity strictness travel in GeometryConfig
- Fail Fast: invalid operands raise, they do not silently yield empty results

Architecture:

    polyset_geometry/
    ├── geometry/          # Pure primitives (immutable, stateless)
    │   ├── primitives.py  # Point, segments_intersect, point_in_polygon
    │   └── ordering.py    # canonicalize (angular order around centroid)
    │
    ├── polygon.py         # Polygon value object (validity, equality)
    ├── operations.py      # union, intersection, difference, apply_ops
    ├── config.py          # GeometryConfig, RenderConfig, PolysetConfig
    │
    └── rendering/         # Visualization (stateless drawing)
        └── visualizer.py  # PolygonVisualizer

Usage:

    from polyset_geometry import Polygon, compute_union, apply_ops, SetOperation

    square = Polygon.from_coordinates([(0, 0), (2, 0), (2, 2), (0, 2)])
    other = Polygon.from_coordinates([(1, 1), (3, 1), (3, 3), (1, 3)])

    union = compute_union(square, other)
    print(union)

    merged = apply_ops([square, other], SetOperation.UNION)
"""

from polyset_geometry.config import (
    GeometryConfig,
    RenderConfig,
    PolysetConfig,
    DEFAULT_GEOMETRY,
)
from polyset_geometry.geometry import (
    Point,
    Location,
    segments_intersect,
    point_in_polygon,
    ccw_orientation_key,
    canonicalize,
)
from polyset_geometry.polygon import Polygon
from polyset_geometry.operations import (
    SetOperation,
    InvalidOperandError,
    compute_union,
    compute_intersection,
    compute_subtraction,
    apply_operation,
    apply_ops,
)

__all__ = [
    # Config
    "GeometryConfig",
    "RenderConfig",
    "PolysetConfig",
    "DEFAULT_GEOMETRY",
    # Primitives
    "Point",
    "Location",
    "segments_intersect",
    "point_in_polygon",
    "ccw_orientation_key",
    "canonicalize",
    # Entity
    "Polygon",
    # Operations
    "SetOperation",
    "InvalidOperandError",
    "compute_union",
    "compute_intersection",
    "compute_subtraction",
    "apply_operation",
    "apply_ops",
]

__version__ = "1.0.0"
