"""Vector geometry and layer model for map authoring.

Points, lines, polygons and circles with their measures, grouped into
layers that carry an attribute table, a CRS tag and a bounding box.
"""

from maplayer.geometry import (
    Circle,
    Geometry,
    GeometryKind,
    Line,
    Point,
    Polygon,
    Style,
    Surface,
)
from maplayer.layer import Attributes, Layer, load_features

__all__ = [
    "Attributes",
    "Circle",
    "Geometry",
    "GeometryKind",
    "Layer",
    "Line",
    "Point",
    "Polygon",
    "Style",
    "Surface",
    "load_features",
]

__version__ = "1.0.0"
