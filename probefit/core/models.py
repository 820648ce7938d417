"""Core data models for probe point capture and geometry fitting."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

# Allowed drift of a unit vector's length before it is rejected
UNIT_LENGTH_TOLERANCE = 1e-9


class GeometryType(str, Enum):
    """Geometric primitives the fitting engine can produce."""

    CIRCLE = "CIRCLE"
    PLANE = "PLANE"
    LINE = "LINE"


@dataclass(frozen=True)
class Point3D:
    """A probe position in millimetres."""

    x: float
    y: float
    z: float

    @classmethod
    def coerce(cls, value: Union["Point3D", Sequence[float], Any]) -> "Point3D":
        """Build a point from a Point3D, an (x, y, z) sequence or an x/y/z object."""
        if isinstance(value, cls):
            return value
        if hasattr(value, "x") and hasattr(value, "y") and hasattr(value, "z"):
            return cls(float(value.x), float(value.y), float(value.z))
        try:
            x, y, z = value
        except (TypeError, ValueError):
            raise ValueError(f"Cannot interpret {value!r} as a 3D point")
        return cls(float(x), float(y), float(z))

    def __sub__(self, other: "Point3D") -> "Point3D":
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: "Point3D") -> float:
        """Dot product treating both points as vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        """Euclidean length treating the point as a vector."""
        return math.sqrt(self.dot(self))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


def _check_unit(vector: Point3D, name: str) -> None:
    if abs(vector.norm() - 1.0) > UNIT_LENGTH_TOLERANCE:
        raise ValueError(f"{name} must be a unit vector, got length {vector.norm()}")


def _check_non_negative(value: float, name: str) -> None:
    if not value >= 0:
        raise ValueError(f"{name} must be non-negative")


@dataclass(frozen=True)
class CircleFit:
    """Best-fit or exact circle in the XY plane.

    ``center.z`` is the mean z of the input points; the fit itself only uses x/y.
    """

    center: Point3D
    radius: float
    residual: float  # RMS of (distance from center - radius), mm
    point_count: int

    def __post_init__(self) -> None:
        """Validate circle parameters."""
        _check_non_negative(self.radius, "Circle radius")
        _check_non_negative(self.residual, "Circle residual")

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.CIRCLE

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius


@dataclass(frozen=True)
class PlaneEquation:
    """Coefficients of ``a*x + b*y + c*z + d = 0``."""

    a: float
    b: float
    c: float
    d: float

    def evaluate(self, point: Point3D) -> float:
        """Signed distance of a point from the plane (normal is unit length)."""
        return self.a * point.x + self.b * point.y + self.c * point.z + self.d


@dataclass(frozen=True)
class PlaneFit:
    """Best-fit plane through the centroid of the input points."""

    normal: Point3D
    point: Point3D  # centroid
    equation: PlaneEquation
    residual: float  # RMS perpendicular distance, mm
    point_count: int

    def __post_init__(self) -> None:
        """Validate plane parameters."""
        _check_unit(self.normal, "Plane normal")
        _check_non_negative(self.residual, "Plane residual")

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.PLANE


@dataclass(frozen=True)
class LineFit:
    """Best-fit or exact 3D line."""

    point: Point3D  # centroid, or first point for the exact solver
    direction: Point3D
    residual: float  # RMS perpendicular distance, mm
    point_count: int

    def __post_init__(self) -> None:
        """Validate line parameters."""
        _check_unit(self.direction, "Line direction")
        _check_non_negative(self.residual, "Line residual")

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.LINE


FitResult = Union[CircleFit, PlaneFit, LineFit]


def point_to_dict(point: Point3D) -> Dict[str, float]:
    return {"x": point.x, "y": point.y, "z": point.z}


def to_points(points: Iterable[Any]) -> List[Point3D]:
    """Coerce an iterable of point-like values into a fresh list of Point3D."""
    return [Point3D.coerce(p) for p in points]
