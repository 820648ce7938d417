"""Fixed-point formatting of fit results for display and persistence."""

from typing import Any, Callable, Dict

from ..config import (
    COORDINATE_DECIMALS,
    DEFAULT_UNITS,
    MM_PER_INCH,
    RESIDUAL_DECIMALS,
    SUPPORTED_UNITS,
    VECTOR_DECIMALS,
)
from ..core.models import CircleFit, FitResult, LineFit, PlaneFit, point_to_dict


def mm_to_inches(mm: float) -> float:
    return mm / MM_PER_INCH


def inches_to_mm(inches: float) -> float:
    return inches * MM_PER_INCH


def unit_converter(units: str) -> Callable[[float], float]:
    """Return a mm -> ``units`` conversion function."""
    if units not in SUPPORTED_UNITS:
        raise ValueError(
            f"Unsupported units: {units}. Available options: "
            + ", ".join(SUPPORTED_UNITS)
        )
    return mm_to_inches if units == "inches" else (lambda value: value)


def unit_label(units: str) -> str:
    return "in" if units == "inches" else "mm"


def format_fit_details(result: FitResult, units: str = DEFAULT_UNITS) -> str:
    """One-line description of a fit.

    Lengths are converted to ``units``; unit vectors and plane coefficients are
    dimensionless and printed as-is.
    """
    convert = unit_converter(units)
    u = unit_label(units)
    c = COORDINATE_DECIMALS
    v = VECTOR_DECIMALS
    r = RESIDUAL_DECIMALS

    if isinstance(result, CircleFit):
        return (
            f"Center: ({convert(result.center.x):.{c}f}, "
            f"{convert(result.center.y):.{c}f}) {u}, "
            f"Radius: {convert(result.radius):.{c}f} {u}, "
            f"Residual: {convert(result.residual):.{r}f} {u}"
        )
    elif isinstance(result, PlaneFit):
        eq = result.equation
        return (
            f"Normal: ({result.normal.x:.{v}f}, {result.normal.y:.{v}f}, "
            f"{result.normal.z:.{v}f}), "
            f"Equation: {eq.a:.{v}f}x + {eq.b:.{v}f}y + {eq.c:.{v}f}z + "
            f"{eq.d:.{v}f} = 0, "
            f"Residual: {convert(result.residual):.{r}f} {u}"
        )
    elif isinstance(result, LineFit):
        return (
            f"Point: ({convert(result.point.x):.{c}f}, "
            f"{convert(result.point.y):.{c}f}, "
            f"{convert(result.point.z):.{c}f}) {u}, "
            f"Direction: ({result.direction.x:.{v}f}, {result.direction.y:.{v}f}, "
            f"{result.direction.z:.{v}f}), "
            f"Residual: {convert(result.residual):.{r}f} {u}"
        )
    raise TypeError(f"Unknown fit result type: {type(result).__name__}")


def _rounded(values: Dict[str, float], decimals: int) -> Dict[str, float]:
    return {key: round(value, decimals) for key, value in values.items()}


def fit_to_dict(result: FitResult, units: str = DEFAULT_UNITS) -> Dict[str, Any]:
    """JSON-ready dictionary of a fit, rounded to the display precision.

    Lengths (positions, radius, plane offset ``d`` and residual) are converted
    to ``units``; unit vectors and ``a``, ``b``, ``c`` are dimensionless.
    """
    convert = unit_converter(units)
    c = COORDINATE_DECIMALS
    v = VECTOR_DECIMALS
    data: Dict[str, Any] = {"type": result.geometry_type.value, "units": units}

    def position(p):
        return _rounded({k: convert(val) for k, val in point_to_dict(p).items()}, c)

    if isinstance(result, CircleFit):
        data["center"] = position(result.center)
        data["radius"] = round(convert(result.radius), c)
    elif isinstance(result, PlaneFit):
        data["normal"] = _rounded(point_to_dict(result.normal), v)
        data["point"] = position(result.point)
        eq = result.equation
        data["equation"] = _rounded(
            {"a": eq.a, "b": eq.b, "c": eq.c, "d": convert(eq.d)}, v
        )
    elif isinstance(result, LineFit):
        data["point"] = position(result.point)
        data["direction"] = _rounded(point_to_dict(result.direction), v)
    else:
        raise TypeError(f"Unknown fit result type: {type(result).__name__}")

    data["residual"] = round(convert(result.residual), RESIDUAL_DECIMALS)
    data["point_count"] = result.point_count
    return data
