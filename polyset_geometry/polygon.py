"""
Polygon Entity Module
=====================

Immutable polygon value object.

Design:
- Frozen dataclass holding a tuple of Points
- Canonical vertex order re-established on every construction
- Validity is a query, not a constructor check (empty and degenerate
  polygons are legitimate values, e.g. an empty intersection)
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np

from polyset_geometry.config import DEFAULT_GEOMETRY, GeometryConfig
from polyset_geometry.geometry.ordering import canonicalize
from polyset_geometry.geometry.primitives import Point, segments_intersect

PointLike = Union[Point, Sequence[float]]


def _as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise ValueError(f"Expected an (x, y) pair, got {value!r}")
    return Point(x=x, y=y)


@dataclass(frozen=True, eq=False)
class Polygon:
    """
    Immutable simple polygon.

    Attributes:
        points: Vertices in canonical contour order

    Example:
        >>> square = Polygon.from_coordinates([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> square.get_number_of_points()
        4
    """

    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        """Normalize vertices and establish canonical order."""
        points = [_as_point(p) for p in self.points]
        object.__setattr__(self, "points", tuple(canonicalize(points)))

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[PointLike]) -> "Polygon":
        """Build a polygon from (x, y) pairs."""
        return cls(points=tuple(coordinates))

    def copy(self) -> "Polygon":
        return Polygon(points=self.points)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_number_of_points(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    def edges(self) -> Iterator[Tuple[Point, Point]]:
        """Directed edges (v_i, v_{i+1}), wrapping around to the first vertex."""
        n = len(self.points)
        for i in range(n):
            yield self.points[i], self.points[(i + 1) % n]

    def self_intersects(self) -> bool:
        """True if any two non-adjacent edges touch or cross."""
        n = len(self.points)
        edges = list(self.edges())
        for i in range(n):
            for j in range(i + 1, n):
                # Adjacent edges share a vertex
                if (i + 1) % n == j or (j + 1) % n == i:
                    continue
                if segments_intersect(*edges[i], *edges[j]) is not None:
                    return True
        return False

    def is_valid(self, config: GeometryConfig = DEFAULT_GEOMETRY) -> bool:
        """
        Basic sanity check before set operations.

        Args:
            config: strict_validity additionally rejects self-intersecting
                contours (O(n^2) edge pair scan)

        Returns:
            True if the polygon can be used as an operand
        """
        if len(self.points) < 3:
            return False

        if config.strict_validity and self.self_intersects():
            return False

        return True

    def invalid_reason(self, config: GeometryConfig = DEFAULT_GEOMETRY) -> str:
        """Human-readable reason why is_valid() fails, empty string if valid."""
        if len(self.points) < 3:
            return f"needs at least 3 points, got {len(self.points)}"
        if config.strict_validity and self.self_intersects():
            return "contour is self-intersecting"
        return ""

    def equals(self, other: "Polygon", config: GeometryConfig = DEFAULT_GEOMETRY) -> bool:
        """
        Exact equality of two valid polygons.

        Both must be valid, have the same number of points and equal
        coordinates pointwise in canonical order.
        """
        if not (self.is_valid(config) and other.is_valid(config)):
            return False

        if len(self.points) != len(other.points):
            return False

        return all(a.equals(b) for a, b in zip(self.points, other.points))

    # ------------------------------------------------------------------
    # Export surface
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def to_list(self) -> List[Tuple[float, float]]:
        return [p.as_tuple() for p in self.points]

    @property
    def vertices(self) -> np.ndarray:
        """Read-only Nx2 float array of the vertices."""
        vertices = np.array(self.to_list(), dtype=np.float64).reshape(-1, 2)
        vertices.flags.writeable = False
        return vertices

    def __str__(self) -> str:
        """Human-readable representation."""
        coords = ",".join(f"({p.x:g},{p.y:g})" for p in self.points)
        return f"Polygon coordinates:\n{coords}\n"

    def __repr__(self) -> str:
        return f"Polygon(points={self.to_list()!r})"
