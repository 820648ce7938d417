"""Report generation for fit results."""

from .formatters import fit_to_dict, format_fit_details, inches_to_mm, mm_to_inches
from .json_reporter import JSONReporter

__all__ = [
    "JSONReporter",
    "fit_to_dict",
    "format_fit_details",
    "inches_to_mm",
    "mm_to_inches",
]
