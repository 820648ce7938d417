"""Pytest configuration and fixtures."""

import math
from pathlib import Path

import pytest


@pytest.fixture
def circle_points():
    """Eight points on a circle centered at (3, -2) with radius 5, z = 1."""
    from probefit.core.models import Point3D

    return [
        Point3D(
            3 + 5 * math.cos(math.radians(angle)),
            -2 + 5 * math.sin(math.radians(angle)),
            1.0,
        )
        for angle in range(0, 360, 45)
    ]


@pytest.fixture
def square_plane_points():
    """Four corners of a 10mm square at z = 5."""
    return [(0, 0, 5), (10, 0, 5), (0, 10, 5), (10, 10, 5)]


@pytest.fixture
def diagonal_line_points():
    """Three points on the x = y = z diagonal."""
    return [(0, 0, 0), (5, 5, 5), (10, 10, 10)]


@pytest.fixture
def sample_store():
    """Return a point store with a mix of point types."""
    from probefit.core.store import PointStore

    store = PointStore()
    store.add_point(0.0, 0.0, 0.0, "BOUNDARY", timestamp=1000)
    store.add_point(25.4, 50.8, -2.5, "HOLE_CENTER", timestamp=2000)
    store.add_point(1.5, 2.25, 3.125, "BOUNDARY", timestamp=3000)
    return store


@pytest.fixture
def circle_csv(tmp_path) -> Path:
    """Write a CSV of three circle points plus one unrelated point."""
    path = tmp_path / "points.csv"
    path.write_text(
        "Point,Type,X,Y,Z,GeometryID,Timestamp\n"
        "1,CIRCLE,10.000,0.000,0.000,CIRCLE_1,1000\n"
        "2,CIRCLE,0.000,10.000,0.000,CIRCLE_1,1001\n"
        "3,CIRCLE,-10.000,0.000,0.000,CIRCLE_1,1002\n"
        "4,BOUNDARY,50.000,50.000,0.000,,1003\n",
        encoding="utf-8",
    )
    return path
