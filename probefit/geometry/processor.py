"""Geometry-mode dispatch and capture bookkeeping."""

import logging
from typing import Iterable, Optional

from ..core.models import FitResult, GeometryType, to_points
from ..core.store import FitRecord, PointStore, now_millis
from .circle import circle_from_3_points, fit_circle
from .line import fit_line, line_from_2_points
from .plane import fit_plane

logger = logging.getLogger(__name__)


class GeometryProcessor:
    """Run the fit that matches a geometry mode and record it in a point store."""

    def __init__(
        self,
        plane_method: str = "principal_minor",
        line_method: str = "principal_axis",
        exact: bool = False,
    ) -> None:
        """Initialize geometry processor.

        Args:
            plane_method: Normal selection method passed to ``fit_plane``
            line_method: Direction selection method passed to ``fit_line``
            exact: Use the closed-form circle solver when given exactly 3 points
        """
        self.plane_method = plane_method
        self.line_method = line_method
        self.exact = exact

    def fit(self, geometry_type: GeometryType, points: Iterable) -> FitResult:
        """Fit ``points`` as the given primitive.

        Lines with exactly two points always use the exact 2-point solver.
        """
        geometry_type = GeometryType(geometry_type)
        pts = to_points(points)

        if geometry_type == GeometryType.CIRCLE:
            if self.exact and len(pts) == 3:
                return circle_from_3_points(pts)
            return fit_circle(pts)
        elif geometry_type == GeometryType.PLANE:
            return fit_plane(pts, method=self.plane_method)
        else:
            if len(pts) == 2:
                return line_from_2_points(pts)
            return fit_line(pts, method=self.line_method)

    def capture(
        self,
        store: PointStore,
        geometry_type: GeometryType,
        points: Iterable,
        geometry_id: Optional[str] = None,
    ) -> FitRecord:
        """Fit ``points`` and append them with the result to ``store``.

        The store is only modified when the fit succeeds.

        Returns:
            FitRecord linking the result to the new point indices
        """
        geometry_type = GeometryType(geometry_type)
        if geometry_id is not None and _geometry_id_in_use(store, geometry_id):
            raise ValueError(f"Geometry ID already in use: {geometry_id}")

        pts = to_points(points)
        result = self.fit(geometry_type, pts)

        geometry_id = geometry_id or _new_geometry_id(store, geometry_type)
        first_index = store.point_count
        for p in pts:
            store.add_point(p.x, p.y, p.z, geometry_type.value, geometry_id)

        record = FitRecord(
            geometry_id=geometry_id,
            type=geometry_type,
            result=result,
            point_indices=list(range(first_index, store.point_count)),
        )
        store.set_fit(record)
        logger.info(
            f"Captured {geometry_type.value} {geometry_id} from {len(pts)} points"
        )
        return record


def _geometry_id_in_use(store: PointStore, geometry_id: str) -> bool:
    return store.get_fit(geometry_id) is not None or bool(
        store.points_by_geometry(geometry_id)
    )


def _new_geometry_id(store: PointStore, geometry_type: GeometryType) -> str:
    """``<TYPE>_<millis>``, suffixed ``_2``, ``_3``... within one millisecond."""
    base = f"{geometry_type.value}_{now_millis()}"
    geometry_id = base
    suffix = 2
    while _geometry_id_in_use(store, geometry_id):
        geometry_id = f"{base}_{suffix}"
        suffix += 1
    return geometry_id
