"""Circle geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

from maplayer.geometry.base import Coordinate, Extent, Surface
from maplayer.geometry.point import Point
from maplayer.geometry.types import GeometryKind, Style


@dataclass
class Circle(Surface):
    """A circle given by its centre point and radius.

    A negative radius is not rejected; the measures are then meaningless.
    """

    centre: Point = field(default_factory=lambda: Point(0.0, 0.0))
    radius: float = 0.0
    style: Style = field(default_factory=Style, repr=False)

    def __post_init__(self):
        self.radius = float(self.radius)

    @classmethod
    def from_coordinates(cls, x: float, y: float, z: float, radius: float) -> Circle:
        return cls(centre=Point(x, y, z), radius=radius)

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.CIRCLE

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def coordinates(self) -> Iterator[Coordinate]:
        yield (self.centre.x, self.centre.y, self.centre.z)

    def extent(self) -> Optional[Extent]:
        cx, cy, r = self.centre.x, self.centre.y, abs(self.radius)
        return cx - r, cy - r, cx + r, cy + r

    def __str__(self) -> str:
        return f"Circle{{centrePoint={self.centre}, radius={self.radius}}}"
