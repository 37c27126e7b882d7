"""
Polygon Ordering Module
=======================

Canonical vertex order for polygons: descending polar angle around the
centroid. With y growing downward (image coordinates) this walks the
contour counter-clockwise.

This is centroid-angle sorting, not a hull algorithm: convex input yields
a simple contour, concave input may not.
"""

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from polyset_geometry.geometry.primitives import Point, ccw_orientation_key


def centroid(points: Iterable[Point]) -> Point:
    """Arithmetic mean of the points."""
    coords = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    if len(coords) == 0:
        raise ValueError("Cannot compute centroid of an empty point set")

    mean_x, mean_y = coords.mean(axis=0)
    return Point(x=float(mean_x), y=float(mean_y))


@dataclass(frozen=True)
class CounterClockwiseOrder:
    """
    Sort key ordering points by descending polar angle around a reference.

    Attributes:
        reference: Pivot the angles are measured around (the centroid)
    """

    reference: Point

    def key(self, point: Point) -> float:
        return -ccw_orientation_key(self.reference, point)

    def precedes(self, a: Point, b: Point) -> bool:
        """True if a comes before b in the ordering."""
        return ccw_orientation_key(self.reference, a) > ccw_orientation_key(self.reference, b)

    def sort(self, points: Iterable[Point]) -> List[Point]:
        return sorted(points, key=self.key)


def canonicalize(points: Iterable[Point]) -> List[Point]:
    """
    Sort points into canonical contour order.

    Fewer than three points are returned as given. Angle ties keep the
    order the sort produces.

    Args:
        points: Unordered vertices

    Returns:
        New list in canonical order
    """
    points = list(points)
    if len(points) < 3:
        return points

    return CounterClockwiseOrder(reference=centroid(points)).sort(points)
