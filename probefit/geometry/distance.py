"""Point-to-point distance calculations."""

import math

from ..core.models import Point3D


def distance(p1, p2) -> float:
    """Euclidean distance between two points in 3D."""
    a = Point3D.coerce(p1)
    b = Point3D.coerce(p2)
    dx = b.x - a.x
    dy = b.y - a.y
    dz = b.z - a.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def distance_2d(p1, p2) -> float:
    """Euclidean distance in the XY plane, ignoring z."""
    a = Point3D.coerce(p1)
    b = Point3D.coerce(p2)
    dx = b.x - a.x
    dy = b.y - a.y
    return math.sqrt(dx * dx + dy * dy)
