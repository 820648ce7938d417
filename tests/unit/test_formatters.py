"""Unit tests for result formatting."""

import json

import pytest

from probefit.core.models import CircleFit, LineFit, PlaneEquation, PlaneFit, Point3D
from probefit.reporting import (
    fit_to_dict,
    format_fit_details,
    inches_to_mm,
    mm_to_inches,
)


@pytest.fixture
def circle():
    return CircleFit(Point3D(12.3456, -7.0, 1.0), 25.4, 0.00012, 5)


@pytest.fixture
def plane():
    return PlaneFit(
        normal=Point3D(0.0, 0.0, -1.0),
        point=Point3D(5.0, 5.0, 5.0),
        equation=PlaneEquation(0.0, 0.0, -1.0, 5.0),
        residual=0.0,
        point_count=4,
    )


@pytest.fixture
def line():
    return LineFit(Point3D(1.0, 2.0, 3.0), Point3D(0.6, 0.8, 0.0), 0.0, 2)


class TestFormatFitDetails:
    """Test one-line detail strings."""

    def test_circle(self, circle):
        """Test circle details in millimetres."""
        assert format_fit_details(circle) == (
            "Center: (12.346, -7.000) mm, Radius: 25.400 mm, Residual: 0.0001 mm"
        )

    def test_circle_inches(self, circle):
        """Test circle lengths are converted to inches."""
        assert "Radius: 1.000 in" in format_fit_details(circle, "inches")

    def test_plane(self, plane):
        """Test plane details."""
        assert format_fit_details(plane) == (
            "Normal: (0.0000, 0.0000, -1.0000), "
            "Equation: 0.0000x + 0.0000y + -1.0000z + 5.0000 = 0, "
            "Residual: 0.0000 mm"
        )

    def test_line(self, line):
        """Test line details."""
        assert format_fit_details(line) == (
            "Point: (1.000, 2.000, 3.000) mm, "
            "Direction: (0.6000, 0.8000, 0.0000), "
            "Residual: 0.0000 mm"
        )

    def test_unknown_result(self):
        """Test unsupported objects are rejected."""
        with pytest.raises(TypeError):
            format_fit_details(Point3D(0, 0, 0))


class TestFitToDict:
    """Test JSON-ready dictionaries."""

    def test_circle(self, circle):
        """Test circle fields and rounding."""
        data = fit_to_dict(circle)

        assert data["type"] == "CIRCLE"
        assert data["center"] == {"x": 12.346, "y": -7.0, "z": 1.0}
        assert data["radius"] == 25.4
        assert data["residual"] == 0.0001
        assert data["point_count"] == 5

    def test_plane_is_serializable(self, plane):
        """Test plane dict survives json.dumps."""
        data = json.loads(json.dumps(fit_to_dict(plane)))

        assert data["equation"] == {"a": 0.0, "b": 0.0, "c": -1.0, "d": 5.0}
        assert data["point"] == {"x": 5.0, "y": 5.0, "z": 5.0}

    def test_line(self, line):
        """Test line fields."""
        data = fit_to_dict(line)
        assert data["direction"] == {"x": 0.6, "y": 0.8, "z": 0.0}

    def test_defaults_to_millimetres(self, circle):
        """Test the unit label without a units argument."""
        assert fit_to_dict(circle)["units"] == "mm"

    def test_circle_inches(self, circle):
        """Test circle lengths are converted to inches."""
        data = fit_to_dict(circle, "inches")

        assert data["units"] == "inches"
        assert data["center"] == {"x": 0.486, "y": -0.276, "z": 0.039}
        assert data["radius"] == 1.0
        assert data["residual"] == 0.0

    def test_plane_inches_keeps_unit_normal(self, plane):
        """Test only the plane offset and position scale with units."""
        data = fit_to_dict(plane, "inches")

        assert data["normal"] == {"x": 0.0, "y": 0.0, "z": -1.0}
        assert data["equation"] == {"a": 0.0, "b": 0.0, "c": -1.0, "d": 0.1969}
        assert data["point"] == {"x": 0.197, "y": 0.197, "z": 0.197}

    def test_unknown_units(self, line):
        """Test unsupported units are rejected."""
        with pytest.raises(ValueError, match="Unsupported units"):
            fit_to_dict(line, "cm")


class TestUnits:
    """Test unit conversion."""

    def test_conversion(self):
        """Test mm and inch conversion."""
        assert mm_to_inches(25.4) == pytest.approx(1.0)
        assert inches_to_mm(2.0) == pytest.approx(50.8)
