"""Conversion between model geometries and Shapely objects.

Circles have no Shapely counterpart; they become a buffered point and
cannot be converted back.
"""

from typing import Union

from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
)
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from maplayer.core.exceptions import UnsupportedGeometryError
from maplayer.geometry.base import Geometry
from maplayer.geometry.circle import Circle
from maplayer.geometry.line import Line
from maplayer.geometry.point import Point
from maplayer.geometry.polygon import Polygon
from maplayer.geometry.types import GeometryKind

CIRCLE_QUAD_SEGMENTS = 64


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """Build the Shapely equivalent of a model geometry."""
    if not isinstance(geometry, Geometry):
        raise UnsupportedGeometryError(geometry)

    kind = geometry.kind
    if kind is GeometryKind.POINT:
        return ShapelyPoint(geometry.x, geometry.y, geometry.z)
    if kind is GeometryKind.LINE:
        if len(geometry.vertices) < 2:
            return LineString()
        return LineString(list(geometry.coordinates()))
    if kind is GeometryKind.POLYGON:
        if len(geometry.vertices) < 3:
            return ShapelyPolygon()
        return ShapelyPolygon(list(geometry.coordinates()))
    if kind is GeometryKind.CIRCLE:
        centre = ShapelyPoint(geometry.centre.x, geometry.centre.y)
        return centre.buffer(geometry.radius, quad_segs=CIRCLE_QUAD_SEGMENTS)
    raise UnsupportedGeometryError(geometry)


def _points(coords) -> list[Point]:
    points = []
    for coord in coords:
        z = coord[2] if len(coord) > 2 else 0.0
        points.append(Point(coord[0], coord[1], z))
    return points


def from_shapely(shape: BaseGeometry) -> Union[Geometry, list[Geometry]]:
    """Convert a Shapely geometry.

    Single-part shapes map to one geometry. Multi-part shapes and
    collections map to a list, ready for Layer.add_multi_geometry().
    Polygon holes are dropped; only the exterior ring is kept.
    """
    if isinstance(shape, ShapelyPoint):
        if shape.is_empty:
            raise UnsupportedGeometryError(shape)
        return _points([shape.coords[0]])[0]

    if isinstance(shape, LineString):
        return Line(vertices=_points(shape.coords))

    if isinstance(shape, ShapelyPolygon):
        if shape.is_empty:
            return Polygon()
        ring = list(shape.exterior.coords)
        if len(ring) > 1 and ring[0] == ring[-1]:
            ring = ring[:-1]
        return Polygon(vertices=_points(ring))

    if isinstance(shape, (MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)):
        group: list[Geometry] = []
        for part in shape.geoms:
            converted = from_shapely(part)
            if isinstance(converted, list):
                group.extend(converted)
            else:
                group.append(converted)
        return group

    raise UnsupportedGeometryError(shape)
