"""Input/Output operations for point CSV files."""

from .csv_io import (
    generate_csv,
    parse_points_csv,
    point_positions,
    read_points_csv,
    write_points_csv,
)

__all__ = [
    "generate_csv",
    "parse_points_csv",
    "point_positions",
    "read_points_csv",
    "write_points_csv",
]
