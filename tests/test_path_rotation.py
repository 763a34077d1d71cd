"""
Tests for the plane normal, the rotation into the canonical XY frame and
the plane distance.
"""
from __future__ import annotations

import math

import pytest

from boundarypaths.model.diagnostics import DiagnosticCode, DiagnosticLog, PathUsageError
from boundarypaths.model.geometry_primitives import Point
from boundarypaths.model.path import Path


def test_normal_of_mr(mr_path: Path) -> None:
    """(1,3,2) is the first vertex with an exact right angle; its edges give the normal (0,1,0)."""
    n = mr_path.normal
    assert n is not None
    assert (n.x, n.y, n.z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-15)


def test_normal_of_sqr2_is_unit(sqr2_path: Path) -> None:
    n = sqr2_path.normal
    assert math.isclose(n.magnitude, 1.0, rel_tol=1e-12)
    # Plane x*0.5 + z*sqrt(3)/2 = 1, up to orientation
    assert abs(n.x) == pytest.approx(0.5, abs=1e-12)
    assert abs(n.y) == pytest.approx(0.0, abs=1e-12)
    assert abs(n.z) == pytest.approx(math.sqrt(3) / 2, abs=1e-12)


def test_2d_path_has_no_normal(m_path: Path) -> None:
    assert m_path.calculate_normal()
    assert not m_path.has_normal


def test_collinear_path_has_no_normal(log: DiagnosticLog) -> None:
    path = Path.from_points("line", [(0, 0, 0), (1, 1, 1), (2, 2, 2)], closed=False)
    assert not path.has_normal
    assert not path.calculate_normal(log)
    assert log.codes() == [DiagnosticCode.COLLINEAR_PATH]

    assert path.rotate_to_xy_plane(log) is None
    assert log.codes()[-1] == DiagnosticCode.MISSING_NORMAL


def test_two_point_3d_path_has_no_normal() -> None:
    path = Path.from_points("pair", [(0, 0, 0), (1, 1, 1)], closed=False)
    assert not path.calculate_normal()


def test_rotate_mr_angles_and_frame(mr_path: Path) -> None:
    rotated = mr_path.rotate_to_xy_plane()
    assert rotated is not None
    assert rotated.theta == pytest.approx(-math.pi / 2)
    assert rotated.phi == pytest.approx(-math.pi / 2)
    # World (x, 3, z) maps to (-z, -x, 3)
    for world, canonical in zip(mr_path.points, rotated.points):
        assert canonical.x == pytest.approx(-world.z, abs=1e-12)
        assert canonical.y == pytest.approx(-world.x, abs=1e-12)
        assert canonical.z == pytest.approx(3.0, abs=1e-12)
    n = rotated.normal
    assert abs(n.z) == pytest.approx(1.0)


def test_rotation_does_not_touch_source(sqr2_path: Path) -> None:
    before = list(sqr2_path.points)
    rotated = sqr2_path.rotate_to_xy_plane()
    assert rotated is not sqr2_path
    assert rotated.points is not sqr2_path.points
    assert sqr2_path.points == before
    assert not sqr2_path.is_rotated
    assert rotated.is_rotated
    # All vertices share one z in the canonical frame
    z0 = rotated.points[0].z
    assert all(p.z == pytest.approx(z0, abs=1e-12) for p in rotated.points)
    assert abs(z0) == pytest.approx(1.0, abs=1e-12)


def test_theta_stays_within_quarter_turn() -> None:
    """A normal pointing into -x must not produce |theta| > 90 degrees."""
    path = Path.from_points("wall", [(0, 0, 0), (0, 0, 1), (0, 1, 1), (0, 1, 0)], closed=True)
    rotated = path.rotate_to_xy_plane()
    assert abs(rotated.theta) <= math.pi / 2
    z0 = rotated.points[0].z
    assert all(p.z == pytest.approx(z0, abs=1e-12) for p in rotated.points)


def test_rotating_twice_is_a_usage_error(mr_path: Path) -> None:
    rotated = mr_path.rotate_to_xy_plane()
    with pytest.raises(PathUsageError):
        rotated.rotate_to_xy_plane()


def test_non_planar_path_is_rejected(log: DiagnosticLog) -> None:
    path = Path.from_points("warped", [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0.5)], closed=True)
    assert path.rotate_to_xy_plane(log) is None
    assert DiagnosticCode.NON_PLANAR_PATH in log.codes()


def test_2d_rotation_is_identity(m_path: Path) -> None:
    rotated = m_path.rotate_to_xy_plane()
    assert rotated.is_rotated
    assert rotated.points == m_path.points
    assert rotated.rotate_point(1.5, 2.5) == (1.5, 2.5, 0.0)


def test_rotate_point_on_unrotated_path_is_identity(mr_path: Path) -> None:
    assert mr_path.rotate_point(1.0, 2.0, 3.0) == (1.0, 2.0, 3.0)


def test_rotate_point_with_spin(mr_path: Path) -> None:
    """The half turn negates x and z of the canonical coordinates."""
    rotated = mr_path.rotate_to_xy_plane()
    x, y, z = rotated.rotate_point(0.5, 3.0, 1.0)
    xs, ys, zs = rotated.rotate_point(0.5, 3.0, 1.0, spin_180_degrees=True)
    assert (xs, ys, zs) == pytest.approx((-x, y, -z))


def test_rotate_to_path(mr_path: Path) -> None:
    """A second path in the same plane lands in the reference frame."""
    reference = mr_path.rotate_to_xy_plane()
    square = Path.from_points("sq", [(0, 3, 0), (1, 3, 0), (1, 3, 1), (0, 3, 1)], closed=True)
    square.rotate_to_path(reference)
    assert square.is_rotated
    for p in square.points:
        assert p.z == pytest.approx(reference.points[0].z, abs=1e-12)
    assert square.bounding_box.xmin == pytest.approx(-1.0, abs=1e-12)
    assert square.bounding_box.xmax == pytest.approx(0.0, abs=1e-12)
    # The inherited rotation lets world points be queried directly
    assert square.is_point_inside(0.5, 3.0, 0.5)
    assert not square.is_point_inside(1.5, 3.0, 0.5)

    # Already rotated: nothing changes
    before = list(square.points)
    square.rotate_to_path(reference, spin_180_degrees=True)
    assert square.points == before


def test_rotate_to_path_with_spin(mr_path: Path) -> None:
    reference = mr_path.rotate_to_xy_plane()
    square = Path.from_points("sq", [(0, 3, 0), (1, 3, 0), (1, 3, 1), (0, 3, 1)], closed=True)
    square.rotate_to_path(reference, spin_180_degrees=True)
    assert square.points[2].x == pytest.approx(1.0, abs=1e-12)
    assert square.points[2].z == pytest.approx(-3.0, abs=1e-12)
    assert square.is_point_inside(0.5, 3.0, 0.5)


def test_rotate_to_unrotated_path_is_a_usage_error(mr_path: Path) -> None:
    other = Path.from_points("sq", [(0, 3, 0), (1, 3, 0), (1, 3, 1)], closed=True)
    with pytest.raises(PathUsageError):
        other.rotate_to_path(mr_path)


def test_distance_from_point(sqr2_path: Path, mr_path: Path) -> None:
    assert mr_path.distance_from_point(5.0, 7.5, -2.0) == pytest.approx(4.5)
    assert mr_path.distance_from_point(0.0, 3.0, 9.0) == pytest.approx(0.0)
    # sqr2 lies in the plane 0.5*x + sqrt(3)/2*z = 1
    assert sqr2_path.distance_from_point(0.0, 0.0, 0.0) == pytest.approx(1.0, abs=1e-12)
    assert sqr2_path.distance_from_point(0.5, 4.0, math.sqrt(3) / 2) == pytest.approx(0.0, abs=1e-12)


def test_distance_needs_normal_and_points(m_path: Path) -> None:
    with pytest.raises(PathUsageError):
        m_path.distance_from_point(0.0, 0.0, 0.0)
    with pytest.raises(PathUsageError):
        Path().distance_from_point(0.0, 0.0, 0.0)


def test_clone_is_independent(mr_path: Path) -> None:
    copy = mr_path.clone()
    copy.points[0] = Point(9, 9, 9)
    copy.set_name("other")
    assert mr_path.points[0] == Point(0, 3, 0)
    assert mr_path.name == "mr"
    assert copy.normal == mr_path.normal
