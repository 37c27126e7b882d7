"""
Set Operation Engine Tests
==========================

Usage:
    pytest test_operations.py
"""

import pytest

from polyset_geometry import (
    GeometryConfig,
    InvalidOperandError,
    Point,
    Polygon,
    SetOperation,
    apply_operation,
    apply_ops,
    compute_intersection,
    compute_subtraction,
    compute_union,
)


@pytest.fixture
def square_a():
    return Polygon.from_coordinates([(0, 0), (2, 0), (2, 2), (0, 2)])


@pytest.fixture
def square_b():
    return Polygon.from_coordinates([(1, 1), (3, 1), (3, 3), (1, 3)])


def point_set(polygon):
    return set(polygon.to_list())


# ----------------------------------------------------------------------
# Union
# ----------------------------------------------------------------------

def test_union_of_overlapping_squares(square_a, square_b):
    result = compute_union(square_a, square_b)

    assert result.to_list() == [
        (0.0, 2.0), (1.0, 2.0), (1.0, 3.0), (3.0, 3.0),
        (3.0, 1.0), (2.0, 1.0), (2.0, 0.0), (0.0, 0.0),
    ]
    assert result.is_valid()


def test_union_is_commutative(square_a, square_b):
    assert compute_union(square_a, square_b).equals(compute_union(square_b, square_a))


def test_union_with_contained_triangle_is_the_square():
    square = Polygon.from_coordinates([(0, 0), (4, 0), (4, 4), (0, 4)])
    triangle = Polygon.from_coordinates([(1, 1), (3, 1), (2, 3)])

    assert compute_union(square, triangle).equals(square)
    assert compute_union(triangle, square).equals(square)


def test_union_of_disjoint_squares_keeps_all_vertices(square_a):
    far = Polygon.from_coordinates([(5, 5), (6, 5), (6, 6), (5, 6)])
    result = compute_union(square_a, far)
    assert point_set(result) == point_set(square_a) | point_set(far)


# ----------------------------------------------------------------------
# Intersection
# ----------------------------------------------------------------------

def test_intersection_of_overlapping_squares(square_a, square_b):
    result = compute_intersection(square_a, square_b)
    expected = Polygon.from_coordinates([(1, 1), (2, 1), (2, 2), (1, 2)])
    assert result.equals(expected)


def test_intersection_is_commutative(square_a, square_b):
    assert compute_intersection(square_a, square_b).equals(
        compute_intersection(square_b, square_a)
    )


def test_intersection_of_disjoint_polygons_is_empty(square_a):
    far = Polygon.from_coordinates([(5, 5), (6, 5), (6, 6), (5, 6)])
    result = compute_intersection(square_a, far)
    assert result.get_number_of_points() == 0


def test_intersection_with_contained_triangle_is_the_triangle():
    square = Polygon.from_coordinates([(0, 0), (4, 0), (4, 4), (0, 4)])
    triangle = Polygon.from_coordinates([(1, 1), (3, 1), (2, 3)])
    assert compute_intersection(square, triangle).equals(triangle)


def test_intersection_of_crossing_triangles_adds_edge_intersections():
    up = Polygon.from_coordinates([(0, 0), (4, 0), (2, 4)])
    down = Polygon.from_coordinates([(0, 3), (4, 3), (2, -1)])
    result = compute_intersection(up, down)

    # Hexagram core: 6 edge crossings, no vertex of either lies in the other
    assert result.get_number_of_points() == 6
    assert Point(1.5, 3.0) in result.points
    assert Point(2.5, 3.0) in result.points


def test_squares_touching_at_a_corner_intersect_in_that_corner(square_a):
    corner = Polygon.from_coordinates([(2, 2), (4, 2), (4, 4), (2, 4)])
    result = compute_intersection(square_a, corner)

    assert result.to_list() == [(2.0, 2.0)]
    assert not result.is_valid()


def test_squares_sharing_an_edge_intersect_in_that_edge(square_a):
    neighbour = Polygon.from_coordinates([(2, 0), (4, 0), (4, 2), (2, 2)])
    result = compute_intersection(square_a, neighbour)

    assert result.get_number_of_points() == 2
    assert point_set(result) == {(2.0, 0.0), (2.0, 2.0)}


# ----------------------------------------------------------------------
# Difference
# ----------------------------------------------------------------------

def test_difference_of_overlapping_squares(square_a, square_b):
    result = compute_subtraction(square_a, square_b)
    assert point_set(result) == {
        (0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (1.0, 1.0), (1.0, 2.0), (0.0, 2.0)
    }
    # L-shape walked around its centroid (1, 1)
    assert result.to_list() == [
        (0.0, 2.0), (1.0, 2.0), (1.0, 1.0), (2.0, 1.0), (2.0, 0.0), (0.0, 0.0)
    ]


def test_difference_is_not_commutative(square_a, square_b):
    a_minus_b = compute_subtraction(square_a, square_b)
    b_minus_a = compute_subtraction(square_b, square_a)
    assert point_set(a_minus_b) != point_set(b_minus_a)
    assert not a_minus_b.equals(b_minus_a)


def test_difference_with_disjoint_polygon_is_unchanged(square_a):
    far = Polygon.from_coordinates([(5, 5), (6, 5), (6, 6), (5, 6)])
    assert compute_subtraction(square_a, far).equals(square_a)


def test_difference_keeps_operand_vertices_inside_a():
    square = Polygon.from_coordinates([(0, 0), (4, 0), (4, 4), (0, 4)])
    triangle = Polygon.from_coordinates([(1, 1), (3, 1), (2, 3)])
    result = compute_subtraction(square, triangle)
    assert point_set(result) == point_set(square) | point_set(triangle)


# ----------------------------------------------------------------------
# Operand policy
# ----------------------------------------------------------------------

def test_empty_operand_is_the_empty_region(square_a):
    empty = Polygon()

    assert compute_union(empty, square_a).equals(square_a)
    assert compute_union(square_a, empty).equals(square_a)
    assert compute_intersection(empty, square_a).is_empty
    assert compute_intersection(square_a, empty).is_empty
    assert compute_subtraction(empty, square_a).is_empty
    assert compute_subtraction(square_a, empty).equals(square_a)


@pytest.mark.parametrize("operation", [compute_union, compute_intersection, compute_subtraction])
def test_degenerate_operand_raises(operation, square_a):
    segment = Polygon.from_coordinates([(0, 0), (1, 1)])

    with pytest.raises(InvalidOperandError) as excinfo:
        operation(square_a, segment)
    assert excinfo.value.operand == "B"
    assert "at least 3" in excinfo.value.reason

    with pytest.raises(InvalidOperandError) as excinfo:
        operation(segment, square_a)
    assert excinfo.value.operand == "A"


@pytest.mark.parametrize("operation", [compute_union, compute_intersection, compute_subtraction])
def test_empty_operand_does_not_hide_an_invalid_one(operation):
    empty = Polygon()
    segment = Polygon.from_coordinates([(0, 0), (1, 1)])

    with pytest.raises(InvalidOperandError) as excinfo:
        operation(empty, segment)
    assert excinfo.value.operand == "B"

    with pytest.raises(InvalidOperandError) as excinfo:
        operation(segment, empty)
    assert excinfo.value.operand == "A"


def test_invalid_operand_error_is_a_value_error():
    assert issubclass(InvalidOperandError, ValueError)


def test_self_intersecting_operand_depends_on_strictness(square_a):
    crossing = Polygon.from_coordinates([(3, 0), (1, 0), (2, 0), (-3, 3), (-3, -3)])

    with pytest.raises(InvalidOperandError, match="self-intersecting"):
        compute_union(square_a, crossing)

    lenient = GeometryConfig(strict_validity=False)
    result = compute_union(square_a, crossing, lenient)
    assert not result.is_empty


# ----------------------------------------------------------------------
# apply_operation / apply_ops
# ----------------------------------------------------------------------

def test_apply_operation_dispatches(square_a, square_b):
    assert apply_operation(square_a, square_b, SetOperation.UNION).equals(
        compute_union(square_a, square_b)
    )
    assert apply_operation(square_a, square_b, "intersection").equals(
        compute_intersection(square_a, square_b)
    )


def test_apply_ops_union_seeds_with_first_polygon(square_a, square_b):
    result = apply_ops([square_a, square_b], SetOperation.UNION)
    assert result.equals(compute_union(square_a, square_b))


def test_apply_ops_folds_left(square_a, square_b):
    third = Polygon.from_coordinates([(1.5, 0), (2.5, 0), (2.5, 2.5), (1.5, 2.5)])
    expected = compute_intersection(compute_intersection(square_a, square_b), third)
    result = apply_ops([square_a, square_b, third], SetOperation.INTERSECTION)
    assert result.equals(expected)


def test_apply_ops_single_and_empty_sequences(square_a):
    assert apply_ops([square_a], SetOperation.DIFFERENCE).equals(square_a)
    assert apply_ops([], SetOperation.UNION).is_empty


def test_apply_ops_reports_operand_index(square_a, square_b):
    segment = Polygon.from_coordinates([(0, 0), (1, 1)])

    with pytest.raises(InvalidOperandError) as excinfo:
        apply_ops([square_a, square_b, segment], SetOperation.UNION)
    assert excinfo.value.operand == "#2"

    with pytest.raises(InvalidOperandError) as excinfo:
        apply_ops([segment, square_a], SetOperation.UNION)
    assert excinfo.value.operand == "#0"

    with pytest.raises(InvalidOperandError):
        apply_ops([segment], SetOperation.UNION)


def test_apply_ops_rejects_invalid_operand_next_to_empty_one():
    segment = Polygon.from_coordinates([(0, 0), (1, 1)])

    with pytest.raises(InvalidOperandError) as excinfo:
        apply_ops([Polygon(), segment], SetOperation.UNION)
    assert excinfo.value.operand == "#1"

    with pytest.raises(InvalidOperandError) as excinfo:
        apply_ops([segment, Polygon()], SetOperation.UNION)
    assert excinfo.value.operand == "#0"


def test_apply_ops_rejects_degenerate_intermediate_result(square_a):
    corner = Polygon.from_coordinates([(2, 2), (4, 2), (4, 4), (2, 4)])

    with pytest.raises(InvalidOperandError) as excinfo:
        apply_ops([square_a, corner, square_a], SetOperation.INTERSECTION)
    assert excinfo.value.operand == "accumulated result before #2"
    assert "at least 3" in excinfo.value.reason


def test_apply_ops_continues_past_empty_intersection(square_a):
    far = Polygon.from_coordinates([(5, 5), (6, 5), (6, 6), (5, 6)])
    result = apply_ops([square_a, far, square_a], SetOperation.INTERSECTION)
    assert result.is_empty
