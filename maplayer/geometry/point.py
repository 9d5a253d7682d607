"""Point geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from maplayer.config import get_settings
from maplayer.geometry.base import Coordinate, Geometry
from maplayer.geometry.types import GeometryKind, Style


def _default_radius() -> float:
    return get_settings().default_point_radius


@dataclass
class Point(Geometry):
    """A coordinate in 3D space. In planar use z stays 0.

    ``radius`` is only a display hint for the renderer, it takes no part
    in any measurement.
    """

    x: float
    y: float
    z: float = 0.0
    radius: float = field(default_factory=_default_radius)
    style: Style = field(default_factory=Style, repr=False)

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
        self.radius = float(self.radius)

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.POINT

    def coordinates(self) -> Iterator[Coordinate]:
        yield (self.x, self.y, self.z)

    def distance_to(self, other: Point) -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def __str__(self) -> str:
        return f"Point{{x={self.x}, y={self.y}, z={self.z}}}"
