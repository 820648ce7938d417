"""probefit - Best-fit circles, planes and lines from measurement-arm probe points."""

__version__ = "0.1.0"

# Core models
from .core.exceptions import (
    CoincidentPointsError,
    CollinearPointsError,
    FitError,
    InsufficientPointsError,
    WrongPointCountError,
)
from .core.models import (
    CircleFit,
    GeometryType,
    LineFit,
    PlaneEquation,
    PlaneFit,
    Point3D,
)
from .core.store import FitRecord, PointRecord, PointStore

# Fitting engine
from .geometry import (
    GeometryProcessor,
    circle_from_3_points,
    distance,
    distance_2d,
    fit_circle,
    fit_line,
    fit_plane,
    line_from_2_points,
)

__all__ = [
    "fit_circle",
    "circle_from_3_points",
    "fit_plane",
    "fit_line",
    "line_from_2_points",
    "distance",
    "distance_2d",
    "GeometryProcessor",
    "Point3D",
    "CircleFit",
    "PlaneFit",
    "PlaneEquation",
    "LineFit",
    "GeometryType",
    "PointStore",
    "PointRecord",
    "FitRecord",
    "FitError",
    "InsufficientPointsError",
    "WrongPointCountError",
    "CollinearPointsError",
    "CoincidentPointsError",
]
