"""Geometry capabilities shared by every shape in a layer.

A geometry carries a Style (colour and opacity) and reports its own
GeometryKind. Closed shapes additionally implement the Surface measures.
Drawing is left to a rendering collaborator, see maplayer.rendering.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from maplayer.geometry.types import GeometryKind, Style

Coordinate = tuple[float, float, float]
Extent = tuple[float, float, float, float]


class Geometry(ABC):
    """Capability interface for Point, Line, Polygon and Circle.

    Subclasses are dataclasses that declare a ``style`` field.
    """

    style: Style

    @property
    @abstractmethod
    def kind(self) -> GeometryKind:
        """The concrete kind, used for classification instead of class names."""

    @abstractmethod
    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every (x, y, z) the geometry is built from."""

    def extent(self) -> Optional[Extent]:
        """Return (min_x, min_y, max_x, max_y), or None without coordinates."""
        coords = list(self.coordinates())
        if not coords:
            return None
        xs = [c[0] for c in coords]
        ys = [c[1] for c in coords]
        return min(xs), min(ys), max(xs), max(ys)

    def set_rgb(self, red: int, green: int, blue: int) -> None:
        self.style.set_rgb(red, green, blue)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.style.rgb

    @property
    def red(self) -> int:
        return self.style.rgb[0]

    @property
    def green(self) -> int:
        return self.style.rgb[1]

    @property
    def blue(self) -> int:
        return self.style.rgb[2]

    @property
    def opacity(self) -> int:
        return self.style.opacity

    @opacity.setter
    def opacity(self, value: int) -> None:
        self.style.set_opacity(value)


class Surface(Geometry):
    """A closed geometry with measurable area and perimeter."""

    @abstractmethod
    def area(self) -> float:
        """Area in square units of the layer CRS."""

    @abstractmethod
    def perimeter(self) -> float:
        """Boundary length in units of the layer CRS."""
