"""Best-fit plane through a set of 3D points."""

import logging
from typing import Iterable

import numpy as np

from ..config import DEGENERACY_TOLERANCE, MIN_POINTS
from ..core.exceptions import CollinearPointsError, InsufficientPointsError
from ..core.models import PlaneEquation, PlaneFit, Point3D, to_points
from .moments import CovarianceSums, centroid, covariance, rms

logger = logging.getLogger(__name__)

PLANE_METHODS = ("principal_minor", "eigen")


def _normal_from_minors(cov: CovarianceSums) -> Point3D:
    """Normal candidate from the dominant 2x2 principal minor of the covariance.

    Approximates the smallest-eigenvalue eigenvector without a decomposition.
    Exact for planes aligned with a coordinate plane; tilted planes can pick a
    poor axis.
    """
    det_xy = cov.xx * cov.yy - cov.xy * cov.xy
    det_xz = cov.xx * cov.zz - cov.xz * cov.xz
    det_yz = cov.yy * cov.zz - cov.yz * cov.yz

    # Every 2x2 minor of a rank-1 covariance vanishes
    best = max(det_xy, det_xz, det_yz)
    if best < DEGENERACY_TOLERANCE:
        raise CollinearPointsError("fit_plane", best)

    if det_xy > det_xz and det_xy > det_yz:
        return Point3D(cov.xy, cov.xz, -(cov.xx + cov.yy))
    elif det_xz > det_yz:
        return Point3D(cov.xz, -(cov.xx + cov.zz), cov.xy)
    else:
        return Point3D(-(cov.yy + cov.zz), cov.yz, cov.xy)


def _normal_from_eigen(cov: CovarianceSums) -> Point3D:
    eigenvalues, eigenvectors = np.linalg.eigh(cov.as_matrix())
    # Ascending order: a plane needs two significant axes
    if eigenvalues[1] < DEGENERACY_TOLERANCE:
        raise CollinearPointsError("fit_plane", float(eigenvalues[1]))
    return Point3D(*(float(v) for v in eigenvectors[:, 0]))


def fit_plane(points: Iterable, method: str = "principal_minor") -> PlaneFit:
    """Fit a plane through the centroid of three or more points.

    Args:
        points: Sequence of points
        method: "principal_minor" (default) chooses the normal from the
            covariance minors; "eigen" takes the eigenvector of the smallest
            covariance eigenvalue

    Returns:
        PlaneFit with unit normal and ``d = -normal . centroid``

    Raises:
        InsufficientPointsError: If fewer than 3 points are given
        CollinearPointsError: If the points do not determine a normal
    """
    if method not in PLANE_METHODS:
        raise ValueError(
            f"Unknown plane method: {method}. Available options: "
            + ", ".join(PLANE_METHODS)
        )

    pts = to_points(points)
    n = len(pts)
    if n < MIN_POINTS["PLANE"]:
        raise InsufficientPointsError("fit_plane", MIN_POINTS["PLANE"], n)

    center = centroid(pts)
    cov = covariance(pts, center)

    if method == "eigen":
        candidate = _normal_from_eigen(cov)
    else:
        candidate = _normal_from_minors(cov)

    length = candidate.norm()
    if length < DEGENERACY_TOLERANCE:
        raise CollinearPointsError("fit_plane", length)

    normal = Point3D(candidate.x / length, candidate.y / length, candidate.z / length)
    equation = PlaneEquation(
        a=normal.x, b=normal.y, c=normal.z, d=-normal.dot(center)
    )
    residual = rms(equation.evaluate(p) for p in pts)

    logger.debug(
        f"Fitted plane to {n} points ({method}): normal=({normal.x:.4f}, "
        f"{normal.y:.4f}, {normal.z:.4f}), residual={residual:.4f}"
    )

    return PlaneFit(
        normal=normal,
        point=center,
        equation=equation,
        residual=residual,
        point_count=n,
    )
