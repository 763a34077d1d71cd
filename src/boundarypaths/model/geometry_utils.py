"""
Tolerance-aware geometric predicates shared by Path and the merge logic.

All functions take Point values. The 2D variants only look at x and y; the
``_3d`` variants use all three coordinates.
"""
from __future__ import annotations

from math import atan2, hypot, pi, sin

from boundarypaths.config import CLOSE_POINT_TOLERANCE, DBL_TOLERANCE
from boundarypaths.model.geometry_primitives import Point, Vector


def double_compare(a: float, b: float, tol: float = DBL_TOLERANCE) -> bool:
    """
    Compare two floats with a relative tolerance that falls back to an
    absolute one near zero.

    Args:
        a: First value.
        b: Second value.
        tol: Tolerance, used both as absolute bound and relative to the larger magnitude.

    Returns:
        True if the values are considered equal.
    """
    if a == b:
        return True
    diff = abs(a - b)
    if diff < tol:
        return True
    return diff < tol * max(abs(a), abs(b))


def compare_xy(p: Point, q: Point, tol: float = DBL_TOLERANCE) -> bool:
    return double_compare(p.x, q.x, tol) and double_compare(p.y, q.y, tol)


def compare_xyz(p: Point, q: Point, tol: float = DBL_TOLERANCE) -> bool:
    return compare_xy(p, q, tol) and double_compare(p.z, q.z, tol)


def point_compare(p: Point, q: Point, tol: float = DBL_TOLERANCE) -> bool:
    """Equality of two points of the same dimensionality within ``tol``."""
    if p.dim != q.dim:
        return False
    if p.dim == 2:
        return compare_xy(p, q, tol)
    return compare_xyz(p, q, tol)


def is_close_point(p: Point, q: Point, tol: float = CLOSE_POINT_TOLERANCE) -> bool:
    """Tighter variant of ``point_compare`` used to deduplicate vertices."""
    return point_compare(p, q, tol)


def _xy(v: Vector) -> Vector:
    return Vector(v.x, v.y, 0.0)


def angle_between_two_lines(origin: Point, p1: Point, p2: Point) -> float:
    """
    Signed angle in the XY plane between the rays origin->p1 and origin->p2.

    Returns:
        Angle in radians in (-pi, pi], positive for a counter-clockwise turn from p1 to p2.
    """
    return (p1 - origin).signed_angle_to(p2 - origin)


def angle_between_two_lines_3d(origin: Point, p1: Point, p2: Point) -> float:
    """
    Unsigned angle between the rays origin->p1 and origin->p2.

    Returns:
        Angle in radians in [0, pi].
    """
    return (p1 - origin).angle_to(p2 - origin)


def are_parallel(
    a1: Point,
    a2: Point,
    b1: Point,
    b2: Point,
    tol: float,
    *,
    allow_opposite: bool = False
) -> bool:
    """
    Check whether the segments a1-a2 and b1-b2 point in the same direction (XY only).

    Args:
        a1, a2: First segment.
        b1, b2: Second segment.
        tol: Angular tolerance in radians.
        allow_opposite: Also accept segments pointing in opposite directions.
    """
    theta = _xy(a2 - a1).signed_angle_to(_xy(b2 - b1))
    if abs(theta) < tol:
        return True
    return allow_opposite and abs(abs(theta) - pi) < tol


def are_parallel_3d(
    a1: Point,
    a2: Point,
    b1: Point,
    b2: Point,
    tol: float,
    *,
    allow_opposite: bool = False
) -> bool:
    theta = (a2 - a1).angle_to(b2 - b1)
    if theta < tol:
        return True
    return allow_opposite and abs(theta - pi) < tol


def is_point_on_line(test: Point, p1: Point, p2: Point, tol: float) -> bool:
    """
    Check whether ``test`` lies on the segment p1-p2 (XY only), endpoints included.

    The point has to leave p1 in the direction of the segment (angle within
    ``tol``), stay within ``tol * length`` of the segment and not run past p2.

    Args:
        test: Point under test.
        p1: Segment start.
        p2: Segment end.
        tol: Tolerance, angular in radians and relative to the segment length.

    Returns:
        True if the point is on the segment.
    """
    if compare_xy(test, p1, tol) or compare_xy(test, p2, tol):
        return True

    direction = _xy(p2 - p1)
    offset = _xy(test - p1)
    length = hypot(direction.x, direction.y)
    length_test = hypot(offset.x, offset.y)

    theta = direction.signed_angle_to(offset)
    if abs(theta) > tol:
        return False
    if abs(sin(theta) * length_test) > tol * length:
        return False
    if length_test > length + tol * length:
        return False
    return True


def is_point_on_line_3d(test: Point, p1: Point, p2: Point, tol: float) -> bool:
    if compare_xyz(test, p1, tol) or compare_xyz(test, p2, tol):
        return True

    direction = p2 - p1
    offset = test - p1
    length = direction.magnitude
    length_test = offset.magnitude

    theta = direction.angle_to(offset)
    if theta > tol:
        return False
    if abs(sin(theta) * length_test) > tol * length:
        return False
    if length_test > length + tol * length:
        return False
    return True


def is_point_on_line_not_ends(test: Point, p1: Point, p2: Point, tol: float) -> bool:
    """Same as ``is_point_on_line`` but false when ``test`` coincides with an endpoint."""
    if compare_xy(test, p1, tol) or compare_xy(test, p2, tol):
        return False
    return is_point_on_line(test, p1, p2, tol)


def is_point_on_line_not_ends_3d(test: Point, p1: Point, p2: Point, tol: float) -> bool:
    if compare_xyz(test, p1, tol) or compare_xyz(test, p2, tol):
        return False
    return is_point_on_line_3d(test, p1, p2, tol)


def is_bound_by(t: float, t1: float, t2: float, tol: float) -> bool:
    """Inclusive range test ``t in [t1, t2]`` widened by ``tol``; t1 and t2 in either order."""
    return min(t1, t2) - tol <= t <= max(t1, t2) + tol


def _crosses_vertical(x: float, y1: float, y2: float, s1: Point, s2: Point, tol: float) -> bool:
    # Vertical segment at x from y1 to y2 against a non-vertical segment s1-s2.
    if double_compare(x, s1.x, tol) or double_compare(x, s2.x, tol):
        return False
    if not min(s1.x, s2.x) < x < max(s1.x, s2.x):
        return False
    y = s1.y + (x - s1.x) * (s2.y - s1.y) / (s2.x - s1.x)
    if double_compare(y, y1, tol) or double_compare(y, y2, tol):
        return False
    return min(y1, y2) < y < max(y1, y2)


def do_intersect(a1: Point, a2: Point, b1: Point, b2: Point, tol: float) -> bool:
    """
    Check whether the segments a1-a2 and b1-b2 cross at a point interior to both (XY only).

    Touching at an endpoint, parallel segments and collinear overlaps are not
    intersections. Identical segments (in either direction) are not either.

    Args:
        a1, a2: First segment.
        b1, b2: Second segment.
        tol: Tolerance for coordinate comparisons.

    Returns:
        True for a proper crossing.
    """
    if compare_xy(a1, b1, tol) and compare_xy(a2, b2, tol):
        return False
    if compare_xy(a1, b2, tol) and compare_xy(a2, b1, tol):
        return False

    x1, y1, x2, y2 = a1.x, a1.y, a2.x, a2.y
    xt1, yt1, xt2, yt2 = b1.x, b1.y, b2.x, b2.y

    # Disjoint bounding boxes, touching boxes included
    if max(x1, x2) < min(xt1, xt2) + tol:
        return False
    if min(x1, x2) > max(xt1, xt2) - tol:
        return False
    if max(y1, y2) < min(yt1, yt2) + tol:
        return False
    if min(y1, y2) > max(yt1, yt2) - tol:
        return False

    a_vertical = x1 == x2
    b_vertical = xt1 == xt2
    if a_vertical and b_vertical:
        return False
    if a_vertical:
        return _crosses_vertical(x1, y1, y2, b1, b2, tol)
    if b_vertical:
        return _crosses_vertical(xt1, yt1, yt2, a1, a2, tol)

    m = (y2 - y1) / (x2 - x1)
    b = y1 - m * x1
    mt = (yt2 - yt1) / (xt2 - xt1)
    bt = yt1 - mt * xt1

    if double_compare(m, mt, tol):
        return False

    xint = (bt - b) / (m - mt)
    if any(double_compare(xint, x, tol) for x in (x1, x2, xt1, xt2)):
        return False

    return min(x1, x2) < xint < max(x1, x2) and min(xt1, xt2) < xint < max(xt1, xt2)
