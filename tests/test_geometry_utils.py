"""
Tests for the tolerance-aware predicates in geometry_utils.

The point-on-segment table uses a tolerance slightly above 1e-9 so that
offsets of 1e-10 and 1e-9 count as "on" while 1e-7 does not.
"""
from __future__ import annotations

import math

import pytest

from boundarypaths.model.geometry_primitives import Point, Vector
from boundarypaths.model.geometry_utils import (
    angle_between_two_lines,
    angle_between_two_lines_3d,
    are_parallel,
    are_parallel_3d,
    do_intersect,
    double_compare,
    is_bound_by,
    is_point_on_line,
    is_point_on_line_3d,
    is_point_on_line_not_ends,
    point_compare,
)

TOL = 1e-8 / 9


def p2(x: float, y: float) -> Point:
    return Point(x, y, 0.0, dim=2)


def test_double_compare_relative_and_absolute() -> None:
    """Large values compare relatively, values near zero absolutely."""
    assert double_compare(1e6, 1e6 * (1 + 1e-12), 1e-11)
    assert not double_compare(1e6, 1e6 * (1 + 1e-9), 1e-11)
    assert double_compare(0.0, 5e-12, 1e-11)
    assert double_compare(1.8e-16, -3e-16, 1e-11)
    assert not double_compare(0.0, 1e-6, 1e-11)


def test_point_compare_requires_same_dimension() -> None:
    """A 2D point never equals a 3D point, even at the same coordinates."""
    assert point_compare(p2(1, 2), p2(1, 2))
    assert not point_compare(p2(1, 2), Point(1, 2, 0.0))
    assert point_compare(Point(1, 2, 3), Point(1, 2, 3 + 1e-13))


def test_angle_between_two_lines_signed_2d() -> None:
    """The 2D angle is signed, counter-clockwise positive."""
    o = p2(0, 0)
    assert math.isclose(angle_between_two_lines(o, p2(1, 0), p2(0, 1)), math.pi / 2)
    assert math.isclose(angle_between_two_lines(o, p2(0, 1), p2(1, 0)), -math.pi / 2)
    assert math.isclose(abs(angle_between_two_lines(o, p2(1, 0), p2(-1, 0))), math.pi)


def test_angle_between_two_lines_3d_unsigned() -> None:
    o = Point(0, 0, 0)
    assert math.isclose(angle_between_two_lines_3d(o, Point(0, 1, 0), Point(1, 0, 0)), math.pi / 2)
    assert math.isclose(angle_between_two_lines_3d(o, Point(1, 0, 0), Point(0, 1, 0)), math.pi / 2)
    assert math.isclose(angle_between_two_lines_3d(o, Point(1, 1, 0), Point(0, 0, 5)), math.pi / 2)


def test_are_parallel_direction_matters() -> None:
    """Parallel means same direction; opposite directions need allow_opposite."""
    assert are_parallel(p2(0, 0), p2(1, 1), p2(5, 0), p2(7, 2), 1e-12)
    assert not are_parallel(p2(0, 0), p2(1, 1), p2(7, 2), p2(5, 0), 1e-12)
    assert are_parallel(p2(0, 0), p2(1, 1), p2(7, 2), p2(5, 0), 1e-12, allow_opposite=True)
    assert not are_parallel(p2(0, 0), p2(1, 0), p2(0, 0), p2(1, 1), 1e-12, allow_opposite=True)
    assert are_parallel_3d(Point(0, 0, 0), Point(0, 0, 1), Point(1, 1, 1), Point(1, 1, 4), 1e-12)


@pytest.mark.parametrize(
    "test, p1, p2_, expected",
    [
        ((2, 2), (1, 1), (10, 10), True),
        ((1 - 1e-10, 1 - 1e-9), (1, 1), (10, 10), True),
        ((10 + 1e-10, 10 + 1e-9), (1, 1), (10, 10), True),
        ((2, 2 + 1e-10), (1, 1), (10, 10), True),
        ((-2, -2), (1, 1), (10, 10), False),
        ((11, 11), (1, 1), (10, 10), False),
        ((2, 3), (1, 1), (10, 10), False),
        ((2 + 1e-7, 2), (1, 1), (10, 10), False),
        ((1e-10, 2), (0, 1), (0, 10), True),
        ((1e-6, 2), (0, 1), (0, 10), False),
        ((0, 11), (0, 1), (0, 10), False),
        ((5, 3), (1, 3), (10, 3), True),
        ((5, 3 + 1e-6), (1, 3), (10, 3), False),
    ],
)
def test_is_point_on_line(test, p1, p2_, expected) -> None:
    assert is_point_on_line(p2(*test), p2(*p1), p2(*p2_), TOL) is expected


def test_is_point_on_line_3d() -> None:
    a, b = Point(1, 1, 1), Point(10, 10, 10)
    assert is_point_on_line_3d(Point(2, 2, 2), a, b, TOL)
    assert is_point_on_line_3d(Point(10, 10, 10 + 1e-10), a, b, TOL)
    assert not is_point_on_line_3d(Point(2, 2, 2 + 1e-6), a, b, TOL)
    assert not is_point_on_line_3d(Point(11, 11, 11), a, b, TOL)


def test_is_point_on_line_not_ends() -> None:
    """Endpoints are excluded, interior points are kept."""
    a, b = p2(0, 0), p2(4, 0)
    assert not is_point_on_line_not_ends(p2(0, 0), a, b, 1e-8)
    assert not is_point_on_line_not_ends(p2(4, 0), a, b, 1e-8)
    assert is_point_on_line_not_ends(p2(1, 0), a, b, 1e-8)


def test_is_bound_by_either_order() -> None:
    assert is_bound_by(1.0, 0.0, 2.0, 1e-11)
    assert is_bound_by(1.0, 2.0, 0.0, 1e-11)
    assert is_bound_by(2.0 + 1e-12, 0.0, 2.0, 1e-11)
    assert not is_bound_by(2.1, 2.0, 0.0, 1e-11)


@pytest.mark.parametrize(
    "a1, a2, b1, b2, expected",
    [
        # proper crossing
        ((0, 0), (2, 2), (0, 2), (2, 0), True),
        # crossing with one vertical segment
        ((1, -1), (1, 1), (0, 0), (2, 0), True),
        ((0, 0), (2, 0), (1, -1), (1, 1), True),
        # shared endpoint
        ((0, 0), (1, 1), (1, 1), (2, 0), False),
        # T junction touching the other segment
        ((0, 0), (2, 0), (1, 0), (1, 1), False),
        # collinear overlap, horizontal and diagonal
        ((0, 0), (2, 0), (1, 0), (3, 0), False),
        ((0, 0), (2, 2), (1, 1), (3, 3), False),
        # identical and reversed identical
        ((0, 0), (2, 2), (0, 0), (2, 2), False),
        ((0, 0), (2, 2), (2, 2), (0, 0), False),
        # overlapping boxes but the lines meet outside the segments
        ((0, 0), (1, 1), (0, 3), (3, 0), False),
        ((0, 0), (0, 1), (-1, 0.9), (1, 3), False),
        # both vertical
        ((0, 0), (0, 2), (0, 1), (0, 3), False),
        # disjoint
        ((0, 0), (1, 0), (0, 1), (1, 1), False),
    ],
)
def test_do_intersect(a1, a2, b1, b2, expected) -> None:
    assert do_intersect(p2(*a1), p2(*a2), p2(*b1), p2(*b2), 1e-11) is expected


def test_do_intersect_is_symmetric() -> None:
    a1, a2, b1, b2 = p2(0, 0), p2(3, 1), p2(1, 2), p2(2, -2)
    assert do_intersect(a1, a2, b1, b2, 1e-11)
    assert do_intersect(b1, b2, a1, a2, 1e-11)
    assert do_intersect(a2, a1, b2, b1, 1e-11)


def test_vector_cross_and_normalize() -> None:
    u = Point(1, 3, 3) - Point(1, 3, 2)
    v = Point(2, 3, 1) - Point(1, 3, 2)
    assert u.cross(v) == Vector(0.0, 1.0, 0.0)
    assert Vector(0.0, 3.0, 4.0).normalize() == Vector(0.0, 0.6, 0.8)
    assert Vector(0.0, 0.0, 0.0).normalize() == Vector(0.0, 0.0, 0.0)
