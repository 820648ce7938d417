"""Captured point records and the fits computed from them."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from .models import FitResult, GeometryType, Point3D


def now_millis() -> int:
    """Current time as integer milliseconds since the epoch."""
    return int(datetime.now().timestamp() * 1000)


@dataclass
class PointRecord:
    """A captured point with its capture metadata."""

    number: int  # 1-based position in the store
    type: str  # e.g. BOUNDARY, HOLE_CENTER, LIVE, CIRCLE, PLANE, LINE
    x: float
    y: float
    z: float
    geometry_id: Optional[str] = None
    timestamp: int = field(default_factory=now_millis)

    @property
    def position(self) -> Point3D:
        return Point3D(self.x, self.y, self.z)


@dataclass
class FitRecord:
    """A fit result linked to the store indices of the points it used."""

    geometry_id: str
    type: GeometryType
    result: FitResult
    point_indices: List[int]
    timestamp: int = field(default_factory=now_millis)


@dataclass
class PointStore:
    """Ordered collection of captured points plus stored fit results."""

    points: List[PointRecord] = field(default_factory=list)
    fits: Dict[str, FitRecord] = field(default_factory=dict)

    def add_point(
        self,
        x: float,
        y: float,
        z: float,
        type: str,
        geometry_id: Optional[str] = None,
        timestamp: Optional[int] = None,
    ) -> PointRecord:
        """Append a point and return its record."""
        record = PointRecord(
            number=len(self.points) + 1,
            type=type,
            x=x,
            y=y,
            z=z,
            geometry_id=geometry_id,
            timestamp=timestamp if timestamp is not None else now_millis(),
        )
        self.points.append(record)
        return record

    def get_point(self, index: int) -> Optional[PointRecord]:
        if 0 <= index < len(self.points):
            return self.points[index]
        return None

    def delete_point(self, index: int) -> Optional[PointRecord]:
        """Remove the point at ``index`` and renumber the rest."""
        if not 0 <= index < len(self.points):
            return None
        deleted = self.points.pop(index)
        self._renumber()
        return deleted

    def insert_point(self, record: PointRecord, index: int) -> None:
        """Insert an existing record at ``index`` and renumber."""
        self.points.insert(index, record)
        self._renumber()

    def clear(self) -> None:
        self.points = []
        self.fits = {}

    @property
    def point_count(self) -> int:
        return len(self.points)

    def points_by_type(self, type: str) -> List[PointRecord]:
        return [p for p in self.points if p.type == type]

    def points_by_geometry(self, geometry_id: str) -> List[PointRecord]:
        return [p for p in self.points if p.geometry_id == geometry_id]

    def set_fit(self, record: FitRecord) -> None:
        self.fits[record.geometry_id] = record

    def get_fit(self, geometry_id: str) -> Optional[FitRecord]:
        return self.fits.get(geometry_id)

    def delete_fit(self, geometry_id: str) -> None:
        self.fits.pop(geometry_id, None)

    def statistics(self) -> Dict[str, object]:
        """Point totals, counts per point type and number of stored fits."""
        by_type: Dict[str, int] = {}
        for point in self.points:
            by_type[point.type] = by_type.get(point.type, 0) + 1
        return {
            "total": len(self.points),
            "by_type": by_type,
            "geometry_count": len(self.fits),
        }

    def _renumber(self) -> None:
        for i, point in enumerate(self.points):
            point.number = i + 1
