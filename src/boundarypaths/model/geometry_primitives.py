"""
Geometric Primitives for boundary paths.

Points are immutable values: a Path owns a list of them and replaces entries
instead of editing them in place, so clones and rotated copies never share
mutable state with their source.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, TYPE_CHECKING
import math
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0, 0.0)
        return Vector(self.x / mag, self.y / mag, self.z / mag)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def angle_to(self, other: Vector) -> float:
        """Unsigned angle in radians between this vector and another, in [0, pi]."""
        return math.atan2(self.cross(other).magnitude, self.dot(other))

    def signed_angle_to(self, other: Vector) -> float:
        """Signed angle in the XY plane from this vector to another, in (-pi, pi]."""
        return math.atan2(self.x * other.y - self.y * other.x, self.x * other.x + self.y * other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Point:
    """
    A vertex of a boundary path.

    ``dim`` records whether the point was specified as (x, y) or (x, y, z).
    2D points keep ``z == 0.0`` so that they can pass through the same
    rotation code as 3D points.
    """
    x: float
    y: float
    z: float = 0.0
    dim: int = 3

    @classmethod
    def from_sequence(cls, coords: Sequence[float]) -> Point:
        """Builds a 2D point from two coordinates or a 3D point from three."""
        if len(coords) == 2:
            return cls(float(coords[0]), float(coords[1]), 0.0, dim=2)
        if len(coords) == 3:
            return cls(float(coords[0]), float(coords[1]), float(coords[2]), dim=3)
        raise ValueError(f"A point needs 2 or 3 coordinates, got {len(coords)}.")

    def __sub__(self, other: Point) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Point from a Point.")

    @property
    def coordinates(self) -> tuple[float, ...]:
        if self.dim == 2:
            return (self.x, self.y)
        return (self.x, self.y, self.z)

    def distance_to(self, other: Point) -> float:
        if self.dim == 2:
            return math.hypot(self.x - other.x, self.y - other.y)
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def moved_to(self, x: float, y: float, z: float) -> Point:
        """Same dimensionality, new coordinates."""
        return Point(x, y, z, self.dim)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    def format(self, dim: Optional[int] = None, precision: int = 16) -> str:
        """Formats the point as it is written in input files, e.g. ``(1,2)``."""
        dim = self.dim if dim is None else dim
        values = (self.x, self.y) if dim == 2 else (self.x, self.y, self.z)
        return "(" + ",".join(f"{v:.{precision}g}" for v in values) + ")"


@dataclass
class BoundingBox:
    """Axis aligned extent of a set of points."""
    xmin: float
    xmax: float
    ymin: float
    ymax: float
    zmin: float
    zmax: float

    @classmethod
    def empty(cls) -> BoundingBox:
        return cls(math.inf, -math.inf, math.inf, -math.inf, math.inf, -math.inf)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> BoundingBox:
        if not points:
            return cls.empty()
        coords = np.array([p.to_array() for p in points])
        lower = coords.min(axis=0)
        upper = coords.max(axis=0)
        return cls(
            float(lower[0]), float(upper[0]),
            float(lower[1]), float(upper[1]),
            float(lower[2]), float(upper[2]),
        )

    @property
    def lower_left(self) -> tuple[float, float, float]:
        return (self.xmin, self.ymin, self.zmin)

    @property
    def upper_right(self) -> tuple[float, float, float]:
        return (self.xmax, self.ymax, self.zmax)

    @property
    def extent(self) -> float:
        """Length of the diagonal, 0.0 for an empty box."""
        if self.xmin > self.xmax:
            return 0.0
        return math.sqrt((self.xmax - self.xmin) ** 2 + (self.ymax - self.ymin) ** 2 + (self.zmax - self.zmin) ** 2)
