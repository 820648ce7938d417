"""CSV persistence of captured points and their fits.

File layout::

    Point,Type,X,Y,Z,GeometryID,Timestamp
    1,CIRCLE,10.000,0.000,0.000,CIRCLE_1700000000000,1700000000000
    ...

    Geometry Calculations
    ID,Type,Details
    CIRCLE_1700000000000,CIRCLE,"Center: (...) mm, Radius: ... mm, Residual: ... mm"

The geometry block is written for reference only; reading restores points.
"""

import csv
import io
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..config import (
    COORDINATE_DECIMALS,
    CSV_GEOMETRY_HEADER,
    CSV_GEOMETRY_MARKER,
    CSV_POINT_HEADER,
    DEFAULT_UNITS,
)
from ..core.models import Point3D
from ..core.store import PointStore
from ..reporting.formatters import format_fit_details, inches_to_mm, unit_converter

logger = logging.getLogger(__name__)


def generate_csv(
    store: PointStore, units: str = DEFAULT_UNITS, include_geometry: bool = True
) -> str:
    """Render the store as CSV text.

    Raises:
        ValueError: If the store holds no points
    """
    if not store.points:
        raise ValueError("No points to export")

    convert = unit_converter(units)
    c = COORDINATE_DECIMALS
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow(CSV_POINT_HEADER)
    for point in store.points:
        writer.writerow(
            [
                point.number,
                point.type,
                f"{convert(point.x):.{c}f}",
                f"{convert(point.y):.{c}f}",
                f"{convert(point.z):.{c}f}",
                point.geometry_id or "",
                point.timestamp,
            ]
        )

    if include_geometry and store.fits:
        writer.writerow([])
        writer.writerow([CSV_GEOMETRY_MARKER])
        writer.writerow(CSV_GEOMETRY_HEADER)
        for geometry_id, record in store.fits.items():
            writer.writerow(
                [
                    geometry_id,
                    record.type.value,
                    format_fit_details(record.result, units),
                ]
            )

    return buffer.getvalue()


def write_points_csv(
    store: PointStore,
    output_path: Union[str, Path],
    units: str = DEFAULT_UNITS,
    include_geometry: bool = True,
) -> None:
    """Write the store to a CSV file."""
    content = generate_csv(store, units, include_geometry)
    with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
        csvfile.write(content)
    logger.info(f"Saved {store.point_count} points to {output_path}")


def parse_points_csv(text: str, units: str = DEFAULT_UNITS) -> PointStore:
    """Parse CSV text into a new store.

    Args:
        text: CSV content in the layout written by ``generate_csv``
        units: Units of the coordinates in the file; converted to mm

    Raises:
        ValueError: If the text holds no data rows
    """
    unit_converter(units)  # validates the unit name
    rows = [row for row in csv.reader(io.StringIO(text)) if any(c.strip() for c in row)]
    if len(rows) < 2:
        raise ValueError("Invalid CSV file: no point rows")

    store = PointStore()
    for row in rows[1:]:
        if CSV_GEOMETRY_MARKER in row[0]:
            break
        if len(row) < 5:
            logger.debug(f"Skipping short CSV row: {row}")
            continue
        try:
            x, y, z = (float(value) for value in row[2:5])
            timestamp = int(row[6]) if len(row) > 6 and row[6].strip() else None
        except ValueError:
            logger.warning(f"Skipping malformed CSV row: {row}")
            continue
        if units == "inches":
            x, y, z = inches_to_mm(x), inches_to_mm(y), inches_to_mm(z)
        geometry_id: Optional[str] = row[5] if len(row) > 5 and row[5] else None
        store.add_point(x, y, z, row[1], geometry_id, timestamp)

    return store


def read_points_csv(
    input_path: Union[str, Path], units: str = DEFAULT_UNITS
) -> PointStore:
    """Load points from a CSV file into a new store."""
    with open(input_path, newline="", encoding="utf-8") as csvfile:
        store = parse_points_csv(csvfile.read(), units)
    logger.info(f"Loaded {store.point_count} points from {input_path}")
    return store


def point_positions(
    store: PointStore, geometry_id: Optional[str] = None
) -> List[Point3D]:
    """Positions of all points, or of those tagged with ``geometry_id``."""
    records = store.points_by_geometry(geometry_id) if geometry_id else store.points
    return [record.position for record in records]
