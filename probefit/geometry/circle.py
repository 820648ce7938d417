"""Circle fitting in the XY plane.

Two solvers are provided:

- ``fit_circle``: algebraic (Kasa) least-squares fit over three or more points.
  The normal equations of the linearized circle equation are built from raw
  moments and solved with Cramer's rule.
- ``circle_from_3_points``: the exact circumcircle of three points.

Both only use x/y; the z of the returned center is the mean input z.
"""

import logging
import math
from typing import Iterable, List

from ..config import DEGENERACY_TOLERANCE, EXACT_POINTS, MIN_POINTS
from ..core.exceptions import (
    CollinearPointsError,
    InsufficientPointsError,
    WrongPointCountError,
)
from ..core.models import CircleFit, Point3D, to_points
from .moments import circle_moments, rms

logger = logging.getLogger(__name__)


def fit_circle(points: Iterable) -> CircleFit:
    """Fit a circle to three or more points by algebraic least squares.

    Args:
        points: Sequence of points; only x and y take part in the fit

    Returns:
        CircleFit whose radius is the RMS distance of the points to the center

    Raises:
        InsufficientPointsError: If fewer than 3 points are given
        CollinearPointsError: If the normal equations are singular
    """
    pts = to_points(points)
    n = len(pts)
    if n < MIN_POINTS["CIRCLE"]:
        raise InsufficientPointsError("fit_circle", MIN_POINTS["CIRCLE"], n)

    m = circle_moments(pts)

    a = n * m.sxx - m.sx * m.sx
    b = n * m.sxy - m.sx * m.sy
    c = n * m.syy - m.sy * m.sy
    d = 0.5 * (n * (m.sxxx + m.sxyy) - m.sx * (m.sxx + m.syy))
    e = 0.5 * (n * (m.sxxy + m.syyy) - m.sy * (m.sxx + m.syy))

    denominator = a * c - b * b
    if abs(denominator) < DEGENERACY_TOLERANCE:
        raise CollinearPointsError("fit_circle", denominator)

    center_x = (d * c - b * e) / denominator
    center_y = (a * e - b * d) / denominator

    distances = [math.hypot(p.x - center_x, p.y - center_y) for p in pts]
    radius = rms(distances)
    residual = rms(dist - radius for dist in distances)

    logger.debug(
        f"Fitted circle to {n} points: center=({center_x:.3f}, {center_y:.3f}), "
        f"r={radius:.3f}, residual={residual:.4f}"
    )

    return CircleFit(
        center=Point3D(center_x, center_y, m.sz / n),
        radius=radius,
        residual=residual,
        point_count=n,
    )


def circle_from_3_points(points: Iterable) -> CircleFit:
    """Exact circle through three points (circumcircle in XY).

    Raises:
        WrongPointCountError: If the count is not exactly 3
        CollinearPointsError: If the three points are collinear in XY
    """
    pts: List[Point3D] = to_points(points)
    if len(pts) != EXACT_POINTS["CIRCLE"]:
        raise WrongPointCountError(
            "circle_from_3_points", EXACT_POINTS["CIRCLE"], len(pts)
        )

    p1, p2, p3 = pts
    ax = p2.x - p1.x
    ay = p2.y - p1.y
    bx = p3.x - p1.x
    by = p3.y - p1.y

    denom = 2 * (ax * by - ay * bx)
    if abs(denom) < DEGENERACY_TOLERANCE:
        raise CollinearPointsError("circle_from_3_points", denom)

    a2 = ax * ax + ay * ay
    b2 = bx * bx + by * by

    center_x = p1.x + (by * a2 - ay * b2) / denom
    center_y = p1.y + (ax * b2 - bx * a2) / denom
    radius = math.hypot(p1.x - center_x, p1.y - center_y)

    logger.debug(
        f"Exact circle: center=({center_x:.3f}, {center_y:.3f}), r={radius:.3f}"
    )

    return CircleFit(
        center=Point3D(center_x, center_y, (p1.z + p2.z + p3.z) / 3),
        radius=radius,
        residual=0.0,
        point_count=3,
    )
