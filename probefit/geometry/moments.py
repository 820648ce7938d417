"""Moment accumulators shared by the best-fit operations.

Each accumulator is an immutable NamedTuple built by a single ``reduce`` over the
input points, so a fit never keeps mutable counters between points.
"""

from functools import reduce
from typing import List, NamedTuple

import numpy as np

from ..core.models import Point3D


class CircleMoments(NamedTuple):
    """Raw x/y moments up to third order (plus the z sum for the center height)."""

    n: int = 0
    sx: float = 0.0
    sy: float = 0.0
    sz: float = 0.0
    sxx: float = 0.0
    syy: float = 0.0
    sxy: float = 0.0
    sxxx: float = 0.0
    syyy: float = 0.0
    sxxy: float = 0.0
    sxyy: float = 0.0

    def add(self, p: Point3D) -> "CircleMoments":
        x2 = p.x * p.x
        y2 = p.y * p.y
        return CircleMoments(
            n=self.n + 1,
            sx=self.sx + p.x,
            sy=self.sy + p.y,
            sz=self.sz + p.z,
            sxx=self.sxx + x2,
            syy=self.syy + y2,
            sxy=self.sxy + p.x * p.y,
            sxxx=self.sxxx + x2 * p.x,
            syyy=self.syyy + y2 * p.y,
            sxxy=self.sxxy + x2 * p.y,
            sxyy=self.sxyy + p.x * y2,
        )


class CoordinateSums(NamedTuple):
    """First-order sums used for the centroid."""

    n: int = 0
    sx: float = 0.0
    sy: float = 0.0
    sz: float = 0.0

    def add(self, p: Point3D) -> "CoordinateSums":
        return CoordinateSums(self.n + 1, self.sx + p.x, self.sy + p.y, self.sz + p.z)

    def centroid(self) -> Point3D:
        return Point3D(self.sx / self.n, self.sy / self.n, self.sz / self.n)


class CovarianceSums(NamedTuple):
    """Second moments of centered coordinates (unnormalized covariance)."""

    xx: float = 0.0
    xy: float = 0.0
    xz: float = 0.0
    yy: float = 0.0
    yz: float = 0.0
    zz: float = 0.0

    def add(self, d: Point3D) -> "CovarianceSums":
        return CovarianceSums(
            xx=self.xx + d.x * d.x,
            xy=self.xy + d.x * d.y,
            xz=self.xz + d.x * d.z,
            yy=self.yy + d.y * d.y,
            yz=self.yz + d.y * d.z,
            zz=self.zz + d.z * d.z,
        )

    def as_matrix(self) -> np.ndarray:
        """Symmetric 3x3 matrix form."""
        return np.array(
            [
                [self.xx, self.xy, self.xz],
                [self.xy, self.yy, self.yz],
                [self.xz, self.yz, self.zz],
            ]
        )


def circle_moments(points: List[Point3D]) -> CircleMoments:
    return reduce(CircleMoments.add, points, CircleMoments())


def centroid(points: List[Point3D]) -> Point3D:
    """Arithmetic mean of the points."""
    return reduce(CoordinateSums.add, points, CoordinateSums()).centroid()


def covariance(points: List[Point3D], center: Point3D) -> CovarianceSums:
    """Covariance sums of the points about ``center``."""
    return reduce(
        CovarianceSums.add, (p - center for p in points), CovarianceSums()
    )


def rms(values) -> float:
    """Root mean square of an iterable of floats."""
    arr = np.fromiter(values, dtype=float)
    if arr.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(arr * arr)))
