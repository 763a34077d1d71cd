"""
Boundary Paths
==============
A Path is an ordered list of vertices read from a ``Path ... EndPath`` block.
Open paths describe polylines (pieces of a boundary), closed paths describe
polygons (ports, material interfaces, whole boundaries).

Working frame
-------------
3D paths live in an arbitrary plane. All containment and intersection queries
are answered in a canonical frame where that plane is parallel to XY:

1. ``calculate_normal`` finds the plane normal from the vertex whose interior
   angle is closest to 90 degrees (the best conditioned cross product).
2. ``rotate_to_xy_plane`` returns a NEW path rotated about z by ``theta`` and
   then about y by ``phi`` so that the normal points along z.
3. Queries on the rotated path take world coordinates and map them through the
   same rotation (``rotate_point``) before testing.

2D paths are already canonical; rotating one yields a copy with an identity
rotation so that the same query code serves both cases.

Status reporting
----------------
Validation problems go to a ``DiagnosticLog`` and the method returns False.
Calling a query on a path that is not in the right state (not rotated, no
normal, no points) raises ``PathUsageError``.
"""
from __future__ import annotations

import copy
import logging
from math import atan2, cos, pi, sin, sqrt
from typing import IO, List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from boundarypaths.config import (
    CLOSE_POINT_TOLERANCE,
    DBL_TOLERANCE,
    LINE_TOLERANCE,
    PARALLEL_TOLERANCE,
    PLANARITY_TOLERANCE,
    POINT_LOWER_LIMIT,
    POINT_UPPER_LIMIT,
)
from boundarypaths.model.diagnostics import DiagnosticCode, DiagnosticLog, PathUsageError
from boundarypaths.model.geometry_primitives import BoundingBox, Point, Vector
from boundarypaths.model.geometry_utils import (
    angle_between_two_lines,
    angle_between_two_lines_3d,
    are_parallel,
    are_parallel_3d,
    compare_xy,
    compare_xyz,
    do_intersect,
    double_compare,
    is_bound_by,
    is_close_point,
    is_point_on_line,
    is_point_on_line_3d,
    is_point_on_line_not_ends,
    is_point_on_line_not_ends_3d,
)
from boundarypaths.model.input_file import InputFile, get_token_pair
from boundarypaths.model.scalar_field import FieldKind, FieldLimits, ScalarField

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Edge = Tuple[int, Point, Point]


class Path:
    """
    A named, ordered list of vertices, open or closed, with its derived geometry.

    The bounding box and plane normal are refreshed whenever the vertex list
    changes through ``load``, ``subdivide_2d``/``subdivide_3d`` or a rotation.
    A path returned by ``rotate_to_xy_plane`` (or rotated by ``rotate_to_path``)
    stores its vertices in the working frame together with the rotation that
    produced them; only such a path answers containment queries.

    Args:
        start_line: Line of the ``Path`` keyword in the input, -1 if built in code.
        end_line: Line of the ``EndPath`` keyword in the input, -1 if built in code.
    """

    def __init__(self, start_line: int = -1, end_line: int = -1) -> None:
        self.start_line = start_line
        self.end_line = end_line
        self.name_field = ScalarField(["name"], FieldKind.STRING)
        self.closed_field = ScalarField(["closed"], FieldKind.BOOL)
        self.points: List[Point] = []
        self.tol: float = DBL_TOLERANCE
        self._dim: Optional[int] = None

        self._rotated: bool = False
        self._spin: bool = False
        self._theta: float = 0.0
        self._phi: float = 0.0
        self._sin_theta: float = 0.0
        self._cos_theta: float = 1.0
        self._sin_phi: float = 0.0
        self._cos_phi: float = 1.0

        self._normal: Optional[Vector] = None
        self._bounding_box: Optional[BoundingBox] = None

    @classmethod
    def from_points(
        cls,
        name: str,
        points: Sequence[Point | Sequence[float]],
        closed: bool,
        start_line: int = -1,
        end_line: int = -1
    ) -> Path:
        """Builds a fully initialized path without going through an input file."""
        path = cls(start_line, end_line)
        path.set_name(name)
        path.set_closed(closed)
        for p in points:
            path.push_point(p if isinstance(p, Point) else Point.from_sequence(p))
        path.calculate_bounding_box()
        path.calculate_normal()
        return path

    def __repr__(self) -> str:
        return f"Path(name={self.name!r}, points={len(self.points)}, closed={self.closed}, rotated={self._rotated})"

    # --- Basic attributes ---

    @property
    def name(self) -> str:
        return self.name_field.string_value

    @property
    def closed(self) -> bool:
        return self.closed_field.loaded and self.closed_field.bool_value

    def is_closed(self) -> bool:
        return self.closed

    @property
    def dim(self) -> int:
        if self._dim is not None:
            return self._dim
        if self.points:
            return self.points[0].dim
        return 3

    @property
    def is_rotated(self) -> bool:
        return self._rotated

    @property
    def theta(self) -> float:
        return self._theta

    @property
    def phi(self) -> float:
        return self._phi

    @property
    def normal(self) -> Optional[Vector]:
        return self._normal

    @property
    def has_normal(self) -> bool:
        return self._normal is not None

    @property
    def bounding_box(self) -> BoundingBox:
        if self._bounding_box is None:
            raise PathUsageError(f"Bounding box of path '{self.name}' read before it was calculated.")
        return self._bounding_box

    def set_name(self, name: str) -> None:
        self.name_field.set(name)

    def set_closed(self, closed: bool) -> None:
        self.closed_field.set(closed)

    def push_point(self, point: Point) -> None:
        if self._dim is None:
            self._dim = point.dim
        self.points.append(point)

    def pop_point(self) -> Point:
        return self.points.pop()

    def start_point(self) -> Point:
        return self.points[0]

    def end_point(self) -> Point:
        """Last vertex of the polyline; for a closed path the walk ends back at the first."""
        if self.closed:
            return self.points[0]
        return self.points[-1]

    def in_block(self, line_number: int) -> bool:
        return self.start_line <= line_number <= self.end_line

    def compare(self, index: int, point: Point) -> bool:
        """True if vertex ``index`` equals ``point`` within the path tolerance."""
        if self.dim == 2:
            return compare_xy(self.points[index], point, self.tol)
        return compare_xyz(self.points[index], point, self.tol)

    def edges(self) -> List[Edge]:
        """(index, start, end) of every edge, the closing edge last with index ``len(points) - 1``."""
        n = len(self.points)
        result: List[Edge] = [(i, self.points[i], self.points[i + 1]) for i in range(n - 1)]
        if self.closed and n > 2:
            result.append((n - 1, self.points[-1], self.points[0]))
        return result

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([p.to_array() for p in self.points]).reshape(-1, 3)

    def clone(self) -> Path:
        return copy.deepcopy(self)

    # --- Input ---

    def load(self, dim: int, inputs: InputFile, log: DiagnosticLog) -> bool:
        """
        Reads the keyword lines between ``start_line`` and ``end_line``.

        Every line must be exactly one of ``name=``, ``point=`` or ``closed=``.
        Problems are recorded and reading continues with the next line.

        Args:
            dim: Number of coordinates each point must have (2 or 3).
            inputs: The file the block was found in.
            log: Receives every problem found.

        Returns:
            True if every line was accepted.
        """
        ok = True
        self._dim = dim
        point_limits = FieldLimits(lower=POINT_LOWER_LIMIT, upper=POINT_UPPER_LIMIT)

        line_number = inputs.get_next_line_number(self.start_line)
        last_line = inputs.get_previous_line_number(self.end_line)
        while line_number <= last_line:
            token, value = get_token_pair(inputs.get_line(line_number))
            recognized = 0

            if self.name_field.match_alias(token):
                recognized += 1
                if not self.name_field.load(token, value, line_number, log):
                    ok = False

            if token.lower() == "point":
                recognized += 1
                point_field = ScalarField(["point"], FieldKind.POINT, limits=point_limits)
                if point_field.load(token, value, line_number, log, dim=dim):
                    self.points.append(point_field.point_value)
                else:
                    ok = False

            if self.closed_field.match_alias(token):
                recognized += 1
                if not self.closed_field.load(token, value, line_number, log):
                    ok = False

            if recognized != 1:
                log.error(
                    DiagnosticCode.UNRECOGNIZED_KEYWORD,
                    f"Unrecognized keyword at line {line_number}.",
                    line_number,
                )
                ok = False

            line_number = inputs.get_next_line_number(line_number)

        self.calculate_bounding_box()
        self.calculate_normal()
        logger.debug(f"Loaded path '{self.name}' with {len(self.points)} point(s) from line {self.start_line}")
        return ok

    def check(self, log: DiagnosticLog) -> bool:
        """Structural checks after loading. All violations are reported."""
        ok = True
        if not self.name_field.loaded:
            log.error(DiagnosticCode.MISSING_NAME, f"Path block at line {self.start_line} must specify a name.", self.start_line)
            ok = False

        if not self.closed_field.loaded:
            log.error(
                DiagnosticCode.MISSING_CLOSED,
                f"Path block at line {self.start_line} must specify \"closed\".",
                self.start_line,
            )
            ok = False

        if not self.points:
            log.error(DiagnosticCode.MISSING_POINTS, f"Path block at line {self.start_line} must specify points.", self.start_line)
            ok = False
        elif len(self.points) == 1:
            log.error(
                DiagnosticCode.SINGLE_POINT,
                f"Path block at line {self.start_line} must specify more than one point.",
                self.start_line,
            )
            ok = False

        if len(self.points) == 2 and self.closed:
            log.error(
                DiagnosticCode.CLOSED_WITH_TWO_POINTS,
                f"Path block at line {self.start_line} cannot be closed with just two points.",
                self.start_line,
            )
            ok = False

        return ok

    def check_bounding_box(
        self,
        lower_left: Sequence[float],
        upper_right: Sequence[float],
        log: DiagnosticLog,
        tol: float = DBL_TOLERANCE
    ) -> bool:
        """
        Checks that every vertex lies inside the world box, enlarged by ``tol``.

        Args:
            lower_left: (xmin, ymin[, zmin]) of the mesh.
            upper_right: (xmax, ymax[, zmax]) of the mesh.
            log: Receives one error per offending vertex.
            tol: Absolute slack added on every side.
        """
        ok = True
        check_z = self.dim == 3 and len(lower_left) > 2 and len(upper_right) > 2
        for p in self.points:
            outside = (
                p.x < lower_left[0] - tol or p.x > upper_right[0] + tol
                or p.y < lower_left[1] - tol or p.y > upper_right[1] + tol
            )
            if check_z:
                outside = outside or p.z < lower_left[2] - tol or p.z > upper_right[2] + tol
            if outside:
                log.error(
                    DiagnosticCode.POINT_OUTSIDE_BOUNDING_BOX,
                    f"Path block at line {self.start_line} has point {p.format(self.dim)} "
                    f"outside of the mesh bounding box.",
                    self.start_line,
                )
                ok = False
        return ok

    # --- Derived geometry ---

    def calculate_bounding_box(self) -> None:
        self._bounding_box = BoundingBox.from_points(self.points)

    def calculate_normal(self, log: Optional[DiagnosticLog] = None) -> bool:
        """
        Computes the unit plane normal of a 3D path.

        The vertex whose interior angle is closest to 90 degrees supplies the
        two edge vectors. 2D paths have no normal and succeed trivially.

        Returns:
            False if there are fewer than 3 points or the points are collinear.
        """
        if self.dim == 2:
            return True

        self._normal = None
        n = len(self.points)
        if n < 3:
            return False

        candidates = [(i - 1, i, i + 1) for i in range(1, n - 1)]
        if self.closed:
            candidates.append((n - 1, 0, 1))
            candidates.append((n - 2, n - 1, 0))

        best = candidates[0]
        best_theta = 0.0
        best_diff = float("inf")
        for prev, i, nxt in candidates:
            theta = angle_between_two_lines_3d(self.points[i], self.points[prev], self.points[nxt])
            diff = abs(theta - pi / 2)
            if diff < best_diff:
                best_diff = diff
                best = (prev, i, nxt)
                best_theta = theta

        prev, i, nxt = best
        v = self.points[prev] - self.points[i]
        u = self.points[nxt] - self.points[i]
        normal = u.cross(v)

        if best_theta < self.tol or abs(best_theta - pi) < self.tol or normal.magnitude == 0.0:
            if log is not None:
                log.error(
                    DiagnosticCode.COLLINEAR_PATH,
                    f"Path block at line {self.start_line} has collinear points; no plane can be determined.",
                    self.start_line,
                )
            return False

        self._normal = normal.normalize()
        return True

    def distance_from_point(self, x: float, y: float, z: float) -> float:
        """Perpendicular distance from (x, y, z) to the plane of the path."""
        if self._normal is None:
            raise PathUsageError(f"Path '{self.name}' has no plane normal.")
        if not self.points:
            raise PathUsageError(f"Path '{self.name}' has no points.")
        n = self._normal.to_array()
        d = -float(np.dot(n, self.points[0].to_array()))
        return abs(float(np.dot(n, np.array([x, y, z]))) + d) / float(np.linalg.norm(n))

    # --- Rotation ---

    def _set_rotation(self, theta: float, phi: float, spin: bool = False) -> None:
        self._theta = theta
        self._phi = phi
        self._spin = spin
        self._sin_theta = sin(theta)
        self._cos_theta = cos(theta)
        self._sin_phi = sin(phi)
        self._cos_phi = cos(phi)

    def rotation_matrix(self, spin_180_degrees: Optional[bool] = None) -> npt.NDArray[np.float64]:
        """Ry(phi) @ Rz(theta), optionally followed by a half turn about y."""
        spin = self._spin if spin_180_degrees is None else spin_180_degrees
        rz = np.array([
            [self._cos_theta, -self._sin_theta, 0.0],
            [self._sin_theta, self._cos_theta, 0.0],
            [0.0, 0.0, 1.0],
        ])
        ry = np.array([
            [self._cos_phi, 0.0, self._sin_phi],
            [0.0, 1.0, 0.0],
            [-self._sin_phi, 0.0, self._cos_phi],
        ])
        matrix = ry @ rz
        if spin:
            matrix = np.diag([-1.0, 1.0, -1.0]) @ matrix
        return matrix

    def rotate_point(
        self,
        x: float,
        y: float,
        z: float = 0.0,
        spin_180_degrees: Optional[bool] = None
    ) -> Tuple[float, float, float]:
        """
        Maps a world point into this path's working frame.

        Args:
            x, y, z: World coordinates.
            spin_180_degrees: Add a half turn about y. None uses the spin the
                path inherited from ``rotate_to_path``.

        Returns:
            The rotated coordinates, or the input unchanged if the path is not rotated.
        """
        if not self._rotated:
            return (x, y, z)
        r = self.rotation_matrix(spin_180_degrees) @ np.array([x, y, z])
        return (float(r[0]), float(r[1]), float(r[2]))

    def _rotated_points(self, points: Sequence[Point], matrix: npt.NDArray[np.float64]) -> List[Point]:
        if not points:
            return []
        coords = np.array([p.to_array() for p in points]) @ matrix.T
        return [p.moved_to(float(c[0]), float(c[1]), float(c[2])) for p, c in zip(points, coords)]

    def rotate_to_xy_plane(self, log: Optional[DiagnosticLog] = None) -> Optional[Path]:
        """
        Returns a rotated copy whose plane is parallel to XY. The source is left untouched.

        Args:
            log: Receives geometric consistency errors.

        Returns:
            The rotated path, or None if there is no normal or the points are not coplanar.
        """
        if self._rotated:
            raise PathUsageError(f"Path '{self.name}' is already rotated.")

        if self.dim == 2:
            rotated = self.clone()
            rotated._rotated = True
            rotated._set_rotation(0.0, 0.0)
            return rotated

        if self._normal is None:
            if log is not None:
                log.error(
                    DiagnosticCode.MISSING_NORMAL,
                    f"Path block at line {self.start_line} has no plane normal and cannot be rotated.",
                    self.start_line,
                )
            return None

        nx, ny, nz = self._normal.x, self._normal.y, self._normal.z
        theta = -atan2(ny, nx)
        cnx = sqrt(nx * nx + ny * ny)
        phi = -angle_between_two_lines_3d(Point(0.0, 0.0, 0.0), Point(cnx, 0.0, nz), Point(0.0, 0.0, 1.0))

        # Keep theta within +-90 degrees; the flipped phi compensates
        if theta > pi / 2:
            theta -= pi
            phi = -phi
        elif theta < -pi / 2:
            theta += pi
            phi = -phi

        rotated = self.clone()
        rotated._rotated = True
        rotated._set_rotation(theta, phi)
        rotated.points = rotated._rotated_points(self.points, rotated.rotation_matrix())

        z_values = [p.z for p in rotated.points]
        allowed = PLANARITY_TOLERANCE * max(1.0, self.bounding_box.extent)
        if max(z_values) - min(z_values) > allowed:
            if log is not None:
                log.error(
                    DiagnosticCode.NON_PLANAR_PATH,
                    f"Path block at line {self.start_line} does not lie in a single plane.",
                    self.start_line,
                )
            return None

        rotated.calculate_bounding_box()
        rotated.calculate_normal()
        logger.debug(f"Rotated path '{self.name}' to the XY plane (theta={theta:.6g}, phi={phi:.6g})")
        return rotated

    def rotate_to_path(self, other: Path, spin_180_degrees: bool = False) -> None:
        """
        Rotates this path in place with the rotation of ``other``.

        The rotation parameters are adopted as well, so world points passed to
        later queries on this path are mapped into the same frame.
        """
        if not other.is_rotated:
            raise PathUsageError(f"Cannot rotate to path '{other.name}' because it is not rotated.")
        if self._rotated:
            return

        self._rotated = True
        self._set_rotation(other.theta, other.phi, spin_180_degrees)
        self.points = self._rotated_points(self.points, self.rotation_matrix())
        self.calculate_bounding_box()
        self.calculate_normal()

    # --- Containment and topology ---

    def _require_rotated(self, operation: str) -> None:
        if not self._rotated:
            raise PathUsageError(f"{operation} requires a rotated path; call rotate_to_xy_plane() on '{self.name}' first.")

    def sum_of_angles(self, x: float, y: float) -> float:
        """Signed angle swept by the edges as seen from (x, y); +-2*pi inside a closed path."""
        test = Point(x, y, 0.0, dim=2)
        return sum(angle_between_two_lines(test, a, b) for _, a, b in self.edges())

    def _winds_around(self, x: float, y: float) -> bool:
        theta = self.sum_of_angles(x, y)
        return double_compare(theta, 2 * pi, self.tol) or double_compare(theta, -2 * pi, self.tol)

    def _in_bounding_box(self, x: float, y: float) -> bool:
        box = self.bounding_box
        return is_bound_by(x, box.xmin, box.xmax, self.tol) and is_bound_by(y, box.ymin, box.ymax, self.tol)

    def _on_edge(self, x: float, y: float) -> bool:
        test = Point(x, y, 0.0, dim=2)
        return any(is_point_on_line(test, a, b, self.tol) for _, a, b in self.edges())

    def is_point_inside(self, x: float, y: float, z: float = 0.0) -> bool:
        """
        Boundary-inclusive containment of a world point.

        The point has to lie in the plane of the path (its rotated z equal to
        the z of any vertex).
        """
        self._require_rotated("is_point_inside")
        if not self.points:
            return False

        xr, yr, zr = self.rotate_point(x, y, z)
        if not any(double_compare(zr, p.z, self.tol) for p in self.points):
            return False
        if not self._in_bounding_box(xr, yr):
            return False
        if self._on_edge(xr, yr):
            return True
        return self._winds_around(xr, yr)

    def is_point_interior(self, x: float, y: float, z: float = 0.0) -> bool:
        """Boundary-exclusive containment. The plane test only uses the first vertex."""
        self._require_rotated("is_point_interior")
        if not self.points:
            return False

        xr, yr, zr = self.rotate_point(x, y, z)
        if not double_compare(zr, self.points[0].z, self.tol):
            return False
        if not self._in_bounding_box(xr, yr):
            return False
        if self._on_edge(xr, yr):
            return False
        return self._winds_around(xr, yr)

    def does_line_intersect(self, p1: Point, p2: Point) -> bool:
        """True if the world segment p1-p2 properly crosses any edge of this path."""
        self._require_rotated("does_line_intersect")
        if len(self.points) < 2:
            return False

        a = p1.moved_to(*self.rotate_point(p1.x, p1.y, p1.z))
        b = p2.moved_to(*self.rotate_point(p2.x, p2.y, p2.z))
        z0 = self.points[0].z
        if not (double_compare(a.z, z0, self.tol) and double_compare(b.z, z0, self.tol)):
            return False

        return any(do_intersect(a, b, c, d, self.tol) for _, c, d in self.edges())

    def is_path_overlap(self, test: Path) -> bool:
        """True if any edge of ``test`` (world coordinates) crosses this path."""
        return any(self.does_line_intersect(a, b) for _, a, b in test.edges())

    def is_path_inside(self, test: Path) -> bool:
        """True if every vertex of ``test`` is inside this path and no edge crosses it."""
        if not all(self.is_point_inside(p.x, p.y, p.z) for p in test.points):
            return False
        return not self.is_path_overlap(test)

    def is_segment_on_line(self, p1: Point, p2: Point) -> Optional[int]:
        """
        Finds the edge that contains the whole segment p1-p2.

        Returns:
            The edge index (``len(points) - 1`` for the closing edge), or None.
        """
        on_line = is_point_on_line_3d if self.dim == 3 else is_point_on_line
        for i, a, b in self.edges():
            if on_line(p1, a, b, LINE_TOLERANCE) and on_line(p2, a, b, LINE_TOLERANCE):
                return i
        return None

    # --- Subdivision ---

    def _subdivide(self, test: Path, three_d: bool) -> bool:
        if not self.points or not test.points:
            return False

        on_line = is_point_on_line_not_ends_3d if three_d else is_point_on_line_not_ends
        parallel = are_parallel_3d if three_d else are_parallel

        n = len(self.points)
        new_points: List[Point] = [self.points[0]]
        modified = False
        for i, a, b in self.edges():
            inserts: List[Point] = []
            for _, ta, tb in test.edges():
                if not parallel(ta, tb, a, b, PARALLEL_TOLERANCE, allow_opposite=True):
                    continue
                for candidate in (ta, tb):
                    if not on_line(candidate, a, b, LINE_TOLERANCE):
                        continue
                    if any(is_close_point(candidate, q, CLOSE_POINT_TOLERANCE) for q in inserts):
                        continue
                    inserts.append(candidate)

            inserts.sort(key=a.distance_to)
            for q in inserts:
                if is_close_point(q, new_points[-1], CLOSE_POINT_TOLERANCE):
                    continue
                new_points.append(q)
                modified = True

            if i < n - 1:
                new_points.append(b)

        if modified:
            logger.debug(f"Subdivided path '{self.name}' against '{test.name}': {n} -> {len(new_points)} points")
            self.points = new_points
            self.calculate_bounding_box()
            self.calculate_normal()
        return modified

    def subdivide_2d(self, test: Path) -> bool:
        """
        Inserts the endpoints of ``test`` edges that overlap edges of this path.

        Only collinear partial overlaps are handled; crossings are left alone.

        Returns:
            True if vertices were inserted.
        """
        return self._subdivide(test, three_d=False)

    def subdivide_3d(self, test: Path) -> bool:
        return self._subdivide(test, three_d=True)

    # --- Output ---

    def dump(self, indent: str = "") -> str:
        """Human readable state of the path for debugging."""
        lines = [
            f"{indent}Path",
            f"{indent}   name={self.name}",
        ]
        lines.extend(f"{indent}   point={p.format(self.dim)}" for p in self.points)
        lines.append(f"{indent}   closed={'true' if self.closed else 'false'}")
        lines.append(f"{indent}   tolerance={self.tol:g}")
        lines.append(f"{indent}   rotated={'true' if self._rotated else 'false'}")
        lines.append(f"{indent}   theta={self._theta:.16g}  phi={self._phi:.16g}  spin={self._spin}")
        lines.append(f"{indent}   sin_theta={self._sin_theta:.16g}  cos_theta={self._cos_theta:.16g}")
        lines.append(f"{indent}   sin_phi={self._sin_phi:.16g}  cos_phi={self._cos_phi:.16g}")
        if self._bounding_box is not None:
            box = self._bounding_box
            lines.append(f"{indent}   bounding_box=({box.xmin:g},{box.ymin:g},{box.zmin:g})-({box.xmax:g},{box.ymax:g},{box.zmax:g})")
        if self._normal is not None:
            lines.append(f"{indent}   normal=({self._normal.x:.16g},{self._normal.y:.16g},{self._normal.z:.16g})")
        lines.append(f"{indent}EndPath")
        return "\n".join(lines)

    def output(self, stream: IO[str], force_dim: Optional[int] = None) -> None:
        """Writes the path as an input block, 2D or 3D as forced."""
        dim = force_dim or self.dim
        stream.write("Path\n")
        stream.write(f"   name={self.name}\n")
        for p in self.points:
            stream.write(f"   point={p.format(dim)}\n")
        stream.write(f"   closed={'true' if self.closed else 'false'}\n")
        stream.write("EndPath\n")
