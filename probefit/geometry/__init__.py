"""Geometry fitting engine: circles, planes, lines and distances."""

from .circle import circle_from_3_points, fit_circle
from .distance import distance, distance_2d
from .line import fit_line, line_from_2_points
from .plane import fit_plane
from .processor import GeometryProcessor

__all__ = [
    "fit_circle",
    "circle_from_3_points",
    "fit_plane",
    "fit_line",
    "line_from_2_points",
    "distance",
    "distance_2d",
    "GeometryProcessor",
]
