"""Integration tests for CLI functionality."""

import json

import pytest
from click.testing import CliRunner

from probefit.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCLIBasicFunctionality:
    """Test basic CLI functionality."""

    def test_cli_help_command(self, runner):
        """Test CLI help command."""
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "fit" in result.output
        assert "distance" in result.output


class TestCLIFitCommand:
    """Test the fit command against CSV input."""

    def test_fit_circle_text(self, runner, circle_csv):
        """Test fitting the tagged circle points."""
        result = runner.invoke(
            main, ["fit", "circle", str(circle_csv), "--geometry-id", "CIRCLE_1"]
        )

        assert result.exit_code == 0, result.output
        assert result.output.startswith("CIRCLE: Center: (")
        assert "Radius: 10.000 mm" in result.output

    def test_fit_circle_exact_json(self, runner, circle_csv):
        """Test the exact solver with JSON output."""
        result = runner.invoke(
            main,
            [
                "fit",
                "CIRCLE",
                str(circle_csv),
                "--geometry-id",
                "CIRCLE_1",
                "--exact",
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["type"] == "CIRCLE"
        assert data["radius"] == 10.0
        assert data["residual"] == 0.0
        assert data["point_count"] == 3

    def test_fit_circle_json_in_inches(self, runner, circle_csv):
        """Test JSON output reports lengths in the requested units."""
        result = runner.invoke(
            main,
            [
                "fit",
                "circle",
                str(circle_csv),
                "--geometry-id",
                "CIRCLE_1",
                "--units",
                "inches",
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["units"] == "inches"
        assert data["radius"] == 10.0
        assert data["center"]["x"] == pytest.approx(0.0, abs=1e-3)

    def test_fit_line_writes_output(self, runner, tmp_path):
        """Test a line fit saved to a report file."""
        points_csv = tmp_path / "line.csv"
        points_csv.write_text(
            "Point,Type,X,Y,Z,GeometryID,Timestamp\n"
            "1,LINE,0,0,0,,1\n"
            "2,LINE,5,5,5,,2\n"
            "3,LINE,10,10,10,,3\n"
        )
        report = tmp_path / "out" / "line.txt"

        result = runner.invoke(
            main, ["fit", "line", str(points_csv), "-o", str(report)]
        )

        assert result.exit_code == 0, result.output
        assert "Direction: (0.5774, 0.5774, 0.5774)" in report.read_text()

    def test_fit_collinear_circle_fails(self, runner, tmp_path):
        """Test degenerate input exits with an error message."""
        points_csv = tmp_path / "collinear.csv"
        points_csv.write_text(
            "Point,Type,X,Y,Z,GeometryID,Timestamp\n"
            "1,CIRCLE,0,0,0,,1\n"
            "2,CIRCLE,1,1,0,,2\n"
            "3,CIRCLE,2,2,0,,3\n"
        )

        result = runner.invoke(main, ["fit", "circle", str(points_csv)])

        assert result.exit_code != 0
        assert "CIRCLE calculation failed" in result.output
        assert "collinear" in result.output

    def test_fit_too_few_points(self, runner, circle_csv):
        """Test an unknown geometry ID leaves no points to fit."""
        result = runner.invoke(
            main, ["fit", "plane", str(circle_csv), "--geometry-id", "NONE"]
        )

        assert result.exit_code != 0
        assert "at least 3" in result.output


class TestCLIOtherCommands:
    """Test distance and summary commands."""

    def test_distance(self, runner):
        """Test 3D distance."""
        result = runner.invoke(main, ["distance", "0", "0", "0", "3", "4", "0"])

        assert result.exit_code == 0
        assert result.output.strip() == "5.000"

    def test_distance_negative_coordinates(self, runner):
        """Test coordinates below zero are read as numbers, not options."""
        result = runner.invoke(
            main, ["distance", "-3", "0", "-1.5", "0", "-4", "-1.5"]
        )

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "5.000"

    def test_distance_2d(self, runner):
        """Test planar distance ignores z."""
        result = runner.invoke(
            main, ["distance", "0", "0", "10", "3", "4", "-90", "--2d"]
        )

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "5.000"

    def test_distance_bad_coordinate(self, runner):
        """Test non-numeric coordinates are rejected."""
        result = runner.invoke(main, ["distance", "0", "0", "x", "3", "4", "0"])

        assert result.exit_code != 0
        assert "is not a valid float" in result.output

    def test_distance_missing_coordinate(self, runner):
        """Test five coordinates are not enough."""
        result = runner.invoke(main, ["distance", "0", "0", "0", "3", "4"])

        assert result.exit_code != 0

    def test_summary(self, runner, circle_csv):
        """Test point statistics output."""
        result = runner.invoke(main, ["summary", str(circle_csv)])

        assert result.exit_code == 0
        assert "Points: 4" in result.output
        assert "CIRCLE: 3" in result.output
        assert "Geometry IDs: CIRCLE_1" in result.output
