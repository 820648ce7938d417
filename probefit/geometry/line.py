"""3D line fitting."""

import logging
from typing import Iterable

import numpy as np

from ..config import DEGENERACY_TOLERANCE, EXACT_POINTS, MIN_POINTS
from ..core.exceptions import (
    CoincidentPointsError,
    InsufficientPointsError,
    WrongPointCountError,
)
from ..core.models import LineFit, Point3D, to_points
from .moments import CovarianceSums, centroid, covariance, rms

logger = logging.getLogger(__name__)

LINE_METHODS = ("principal_axis", "eigen")


def _direction_from_diagonal(cov: CovarianceSums) -> Point3D:
    """Direction from the dominant diagonal covariance term.

    The dominant axis component is fixed to 1 and the others are the
    off-diagonal ratios. Exact when the points are collinear.
    """
    if cov.xx >= cov.yy and cov.xx >= cov.zz:
        dominant = cov.xx
        if dominant < DEGENERACY_TOLERANCE:
            raise CoincidentPointsError("fit_line", dominant)
        return Point3D(1.0, cov.xy / dominant, cov.xz / dominant)
    elif cov.yy >= cov.xx and cov.yy >= cov.zz:
        dominant = cov.yy
        if dominant < DEGENERACY_TOLERANCE:
            raise CoincidentPointsError("fit_line", dominant)
        return Point3D(cov.xy / dominant, 1.0, cov.yz / dominant)
    else:
        dominant = cov.zz
        if dominant < DEGENERACY_TOLERANCE:
            raise CoincidentPointsError("fit_line", dominant)
        return Point3D(cov.xz / dominant, cov.yz / dominant, 1.0)


def _direction_from_eigen(cov: CovarianceSums) -> Point3D:
    eigenvalues, eigenvectors = np.linalg.eigh(cov.as_matrix())
    if eigenvalues[-1] < DEGENERACY_TOLERANCE:
        raise CoincidentPointsError("fit_line", float(eigenvalues[-1]))
    return Point3D(*(float(v) for v in eigenvectors[:, -1]))


def fit_line(points: Iterable, method: str = "principal_axis") -> LineFit:
    """Fit a line through the centroid of two or more points.

    Args:
        points: Sequence of points
        method: "principal_axis" (default) or "eigen" for the eigenvector of the
            largest covariance eigenvalue

    Returns:
        LineFit anchored at the centroid

    Raises:
        InsufficientPointsError: If fewer than 2 points are given
        CoincidentPointsError: If all points coincide
    """
    if method not in LINE_METHODS:
        raise ValueError(
            f"Unknown line method: {method}. Available options: "
            + ", ".join(LINE_METHODS)
        )

    pts = to_points(points)
    n = len(pts)
    if n < MIN_POINTS["LINE"]:
        raise InsufficientPointsError("fit_line", MIN_POINTS["LINE"], n)

    center = centroid(pts)
    cov = covariance(pts, center)

    if method == "eigen":
        candidate = _direction_from_eigen(cov)
    else:
        candidate = _direction_from_diagonal(cov)

    length = candidate.norm()
    direction = Point3D(
        candidate.x / length, candidate.y / length, candidate.z / length
    )

    def perpendicular(p: Point3D) -> float:
        offset = p - center
        along = offset.dot(direction)
        return Point3D(
            offset.x - along * direction.x,
            offset.y - along * direction.y,
            offset.z - along * direction.z,
        ).norm()

    residual = rms(perpendicular(p) for p in pts)

    logger.debug(
        f"Fitted line to {n} points ({method}): direction=({direction.x:.4f}, "
        f"{direction.y:.4f}, {direction.z:.4f}), residual={residual:.4f}"
    )

    return LineFit(point=center, direction=direction, residual=residual, point_count=n)


def line_from_2_points(points: Iterable) -> LineFit:
    """Exact line through two points, anchored at the first one.

    Raises:
        WrongPointCountError: If the count is not exactly 2
        CoincidentPointsError: If the points are closer than the tolerance
    """
    pts = to_points(points)
    if len(pts) != EXACT_POINTS["LINE"]:
        raise WrongPointCountError("line_from_2_points", EXACT_POINTS["LINE"], len(pts))

    p1, p2 = pts
    delta = p2 - p1
    length = delta.norm()
    if length < DEGENERACY_TOLERANCE:
        raise CoincidentPointsError("line_from_2_points", length)

    return LineFit(
        point=p1,
        direction=Point3D(delta.x / length, delta.y / length, delta.z / length),
        residual=0.0,
        point_count=2,
    )
