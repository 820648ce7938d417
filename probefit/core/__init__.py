"""Core module for probe geometry fitting."""

from .exceptions import (
    CoincidentPointsError,
    CollinearPointsError,
    FitError,
    InsufficientPointsError,
    WrongPointCountError,
)
from .models import CircleFit, GeometryType, LineFit, PlaneEquation, PlaneFit, Point3D

__all__ = [
    "Point3D",
    "CircleFit",
    "PlaneFit",
    "PlaneEquation",
    "LineFit",
    "GeometryType",
    "FitError",
    "InsufficientPointsError",
    "WrongPointCountError",
    "CollinearPointsError",
    "CoincidentPointsError",
]
