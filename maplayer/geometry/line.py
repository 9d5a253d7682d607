"""Line geometry and the vertex handling shared with Polygon."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from maplayer.config import get_settings
from maplayer.core.exceptions import VertexIndexError
from maplayer.geometry.base import Coordinate, Geometry
from maplayer.geometry.point import Point
from maplayer.geometry.types import GeometryKind, Style

logger = logging.getLogger(__name__)


def _default_stroke_width() -> float:
    return get_settings().default_stroke_width


class VertexChain:
    """Ordered, mutable vertex list with bounds-checked edits.

    Users declare ``vertices: list[Point]`` and set ``MIN_VERTICES``.
    """

    MIN_VERTICES = 2
    vertices: list[Point]

    def _accept_vertices(self, vertices: Optional[list[Point]]) -> list[Point]:
        """Copy the given vertices, degrading to empty below the minimum."""
        vertices = list(vertices or [])
        if len(vertices) < self.MIN_VERTICES:
            if vertices:
                logger.debug(
                    f"{type(self).__name__} needs at least {self.MIN_VERTICES} vertices, "
                    f"got {len(vertices)}; created empty"
                )
            return []
        return vertices

    def add_vertex(self, point: Point, index: Optional[int] = None) -> None:
        """Append ``point``, or insert it before position ``index``."""
        if index is None:
            self.vertices.append(point)
            return
        if not 0 <= index <= len(self.vertices):
            raise VertexIndexError(index, len(self.vertices), "insert")
        self.vertices.insert(index, point)

    def remove_vertex(self, index: int) -> Point:
        if not 0 <= index < len(self.vertices):
            raise VertexIndexError(index, len(self.vertices), "remove")
        return self.vertices.pop(index)

    def get_vertex(self, index: int) -> Point:
        if not 0 <= index < len(self.vertices):
            raise VertexIndexError(index, len(self.vertices), "lookup")
        return self.vertices[index]

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def coordinates(self) -> Iterator[Coordinate]:
        for vertex in self.vertices:
            yield (vertex.x, vertex.y, vertex.z)

    def _vertices_str(self, label: str) -> str:
        return f"{label}{{vertices={', '.join(str(v) for v in self.vertices)}}}"


@dataclass
class Line(VertexChain, Geometry):
    """An open polyline; vertex order is the line direction."""

    MIN_VERTICES = 2

    vertices: list[Point] = field(default_factory=list)
    stroke_width: float = field(default_factory=_default_stroke_width)
    style: Style = field(default_factory=Style, repr=False)

    def __post_init__(self):
        self.vertices = self._accept_vertices(self.vertices)
        self.stroke_width = float(self.stroke_width)

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.LINE

    def length(self) -> float:
        """Sum of the 3D distances between consecutive vertices."""
        length = 0.0
        for current, following in zip(self.vertices, self.vertices[1:]):
            length += current.distance_to(following)
        return length

    def __str__(self) -> str:
        return self._vertices_str("Line")
