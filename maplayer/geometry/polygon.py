"""Polygon geometry."""

from __future__ import annotations

from dataclasses import dataclass, field

from maplayer.geometry.base import Surface
from maplayer.geometry.line import Line, VertexChain, _default_stroke_width
from maplayer.geometry.point import Point
from maplayer.geometry.types import GeometryKind, Style


@dataclass
class Polygon(VertexChain, Surface):
    """A ring of at least 3 ordered vertices, clockwise or not.

    The ring is closed implicitly: the last vertex connects back to the
    first for the area, and the closing vertex is never stored.
    """

    MIN_VERTICES = 3

    vertices: list[Point] = field(default_factory=list)
    stroke_width: float = field(default_factory=_default_stroke_width)
    style: Style = field(default_factory=Style, repr=False)

    def __post_init__(self):
        self.vertices = self._accept_vertices(self.vertices)
        self.stroke_width = float(self.stroke_width)

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.POLYGON

    def area(self) -> float:
        """Shoelace formula over the closed ring."""
        count = len(self.vertices)
        if count < 3:
            return 0.0

        total = 0.0
        for i in range(count):
            a = self.vertices[i]
            b = self.vertices[(i + 1) % count]
            total += (a.x + b.x) * (a.y - b.y)
        return abs(0.5 * total)

    def perimeter(self) -> float:
        """Length of the vertex list walked as an open line.

        The edge from the last vertex back to the first is not included;
        use closed_perimeter() for the full ring.
        """
        return Line(vertices=self.vertices).length()

    def closed_perimeter(self) -> float:
        if len(self.vertices) < 2:
            return 0.0
        return self.perimeter() + self.vertices[-1].distance_to(self.vertices[0])

    def __str__(self) -> str:
        return self._vertices_str("Polygon")
