"""Command-line interface for probefit."""

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from .config import DEFAULT_UNITS, SUPPORTED_UNITS
from .core.models import GeometryType
from .geometry import GeometryProcessor, distance, distance_2d
from .geometry.line import LINE_METHODS
from .geometry.plane import PLANE_METHODS
from .io import point_positions, read_points_csv
from .reporting import fit_to_dict, format_fit_details


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option()
def main() -> None:
    """probefit - Best-fit geometry from measurement-arm probe points."""
    pass


@main.command()
@click.argument(
    "geometry",
    type=click.Choice([g.value for g in GeometryType], case_sensitive=False),
)
@click.argument("points_csv", type=click.Path(exists=True))
@click.option("--geometry-id", help="Only use points tagged with this geometry ID")
@click.option(
    "--exact", is_flag=True, help="Use the exact solver for 3-point circles"
)
@click.option(
    "--plane-method",
    type=click.Choice(PLANE_METHODS),
    default=PLANE_METHODS[0],
    help="Plane normal selection",
)
@click.option(
    "--line-method",
    type=click.Choice(LINE_METHODS),
    default=LINE_METHODS[0],
    help="Line direction selection",
)
@click.option(
    "--units",
    type=click.Choice(SUPPORTED_UNITS),
    default=DEFAULT_UNITS,
    help="Units of the CSV coordinates and of the report",
)
@click.option(
    "--format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--output", "-o", type=click.Path(), help="Output file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def fit(
    geometry: str,
    points_csv: str,
    geometry_id: Optional[str],
    exact: bool,
    plane_method: str,
    line_method: str,
    units: str,
    format: str,
    output: Optional[str],
    verbose: bool,
) -> None:
    """Fit a circle, plane or line to the points in a CSV file."""
    _configure_logging(verbose)
    geometry_type = GeometryType(geometry.upper())

    try:
        store = read_points_csv(points_csv, units=units)
        points = point_positions(store, geometry_id)
        if verbose:
            click.echo(f"Fitting {geometry_type.value} to {len(points)} points")

        processor = GeometryProcessor(
            plane_method=plane_method, line_method=line_method, exact=exact
        )
        result = processor.fit(geometry_type, points)
    except ValueError as e:
        raise click.ClickException(f"{geometry_type.value} calculation failed: {e}")

    if format == "json":
        report = json.dumps(fit_to_dict(result, units), indent=2)
    else:
        report = f"{geometry_type.value}: {format_fit_details(result, units)}"

    click.echo(report)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(report + "\n", encoding="utf-8")
        click.echo(f"Report saved to: {output_path}")


@main.command(
    name="distance", context_settings={"ignore_unknown_options": True}
)
@click.argument("p1", nargs=3, type=float)
@click.argument("p2", nargs=3, type=float)
@click.option("--2d", "planar", is_flag=True, help="Ignore the z coordinate")
def distance_command(
    p1: Tuple[float, float, float], p2: Tuple[float, float, float], planar: bool
) -> None:
    """Distance between points X1 Y1 Z1 and X2 Y2 Z2 (mm)."""
    value = distance_2d(p1, p2) if planar else distance(p1, p2)
    click.echo(f"{value:.3f}")


@main.command()
@click.argument("points_csv", type=click.Path(exists=True))
@click.option(
    "--units",
    type=click.Choice(SUPPORTED_UNITS),
    default=DEFAULT_UNITS,
    help="Units of the CSV coordinates",
)
def summary(points_csv: str, units: str) -> None:
    """Show point counts of a CSV file."""
    try:
        store = read_points_csv(points_csv, units=units)
    except ValueError as e:
        raise click.ClickException(f"Failed to read points: {e}")

    stats = store.statistics()
    click.echo(f"Points: {stats['total']}")
    for point_type, count in sorted(stats["by_type"].items()):
        click.echo(f"  {point_type}: {count}")
    geometry_ids = sorted({p.geometry_id for p in store.points if p.geometry_id})
    if geometry_ids:
        click.echo(f"Geometry IDs: {', '.join(geometry_ids)}")


if __name__ == "__main__":
    main()
