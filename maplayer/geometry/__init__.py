"""Geometry model: points, lines, polygons and circles with their measures."""

from maplayer.geometry.types import GeometryKind, Style
from maplayer.geometry.base import Geometry, Surface
from maplayer.geometry.point import Point
from maplayer.geometry.line import Line
from maplayer.geometry.polygon import Polygon
from maplayer.geometry.circle import Circle
from maplayer.geometry.interop import from_shapely, to_shapely

__all__ = [
    "GeometryKind",
    "Style",
    "Geometry",
    "Surface",
    "Point",
    "Line",
    "Polygon",
    "Circle",
    "from_shapely",
    "to_shapely",
]
