"""Feature object validation schemas.

Loaders hand layers plain dicts; these models check them and build the
matching geometry.
"""

import math
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from maplayer.geometry.base import Geometry
from maplayer.geometry.circle import Circle
from maplayer.geometry.line import Line
from maplayer.geometry.point import Point
from maplayer.geometry.polygon import Polygon
from maplayer.geometry.types import Style

Coords = tuple[float, float, float]


def _validate_coords(v: Any, label: str = "point") -> Coords:
    if not isinstance(v, (list, tuple)):
        raise ValueError(f"{label} must be an array [x, y] or [x, y, z]")
    if len(v) not in (2, 3):
        raise ValueError(f"{label} must have 2 or 3 coordinates, got {len(v)}")

    try:
        values = [float(c) for c in v]
    except (TypeError, ValueError) as e:
        raise ValueError(f"{label} coordinates must be numbers: {e}")

    if not all(math.isfinite(c) for c in values):
        raise ValueError(f"{label} coordinates must be finite numbers (not NaN or Infinity)")

    if len(values) == 2:
        values.append(0.0)
    return (values[0], values[1], values[2])


def _validate_vertex_list(v: Any, minimum: int) -> list[Coords]:
    if not isinstance(v, list):
        raise ValueError("vertices must be an array")
    if len(v) < minimum:
        raise ValueError(f"vertices must have at least {minimum} points, got {len(v)}")
    return [_validate_coords(point, f"vertex[{i}]") for i, point in enumerate(v)]


class FeatureBase(BaseModel):
    """Style fields shared by every feature object."""

    rgb: Optional[tuple[int, int, int]] = None
    opacity: Optional[int] = Field(default=None, ge=0, le=255)

    @field_validator("rgb")
    @classmethod
    def rgb_in_range(cls, v: Optional[tuple[int, int, int]]) -> Optional[tuple[int, int, int]]:
        if v is not None and not all(0 <= c <= 255 for c in v):
            raise ValueError("rgb channels must be between 0 and 255")
        return v

    def _style(self) -> Style:
        style = Style()
        if self.rgb is not None:
            style.set_rgb(*self.rgb)
        if self.opacity is not None:
            style.set_opacity(self.opacity)
        return style


class PointObject(FeatureBase):
    type: Literal["POINT"]
    position: Coords
    radius: Optional[float] = Field(default=None, ge=0)

    @field_validator("position", mode="before")
    @classmethod
    def validate_position(cls, v: Any) -> Coords:
        return _validate_coords(v)

    def to_geometry(self) -> Point:
        x, y, z = self.position
        point = Point(x, y, z, style=self._style())
        if self.radius is not None:
            point.radius = self.radius
        return point


class LineObject(FeatureBase):
    type: Literal["LINE"]
    vertices: list[Coords]
    stroke_width: Optional[float] = Field(default=None, ge=0)

    @field_validator("vertices", mode="before")
    @classmethod
    def validate_vertices(cls, v: Any) -> list[Coords]:
        return _validate_vertex_list(v, Line.MIN_VERTICES)

    def to_geometry(self) -> Line:
        line = Line(vertices=[Point(*c) for c in self.vertices], style=self._style())
        if self.stroke_width is not None:
            line.stroke_width = self.stroke_width
        return line


class PolygonObject(FeatureBase):
    type: Literal["POLYGON"]
    vertices: list[Coords]
    stroke_width: Optional[float] = Field(default=None, ge=0)

    @field_validator("vertices", mode="before")
    @classmethod
    def validate_vertices(cls, v: Any) -> list[Coords]:
        return _validate_vertex_list(v, Polygon.MIN_VERTICES)

    def to_geometry(self) -> Polygon:
        polygon = Polygon(vertices=[Point(*c) for c in self.vertices], style=self._style())
        if self.stroke_width is not None:
            polygon.stroke_width = self.stroke_width
        return polygon


class CircleObject(FeatureBase):
    type: Literal["CIRCLE"]
    centre: Coords
    radius: float = Field(..., ge=0)

    @field_validator("centre", mode="before")
    @classmethod
    def validate_centre(cls, v: Any) -> Coords:
        return _validate_coords(v, "centre")

    def to_geometry(self) -> Circle:
        return Circle(centre=Point(*self.centre), radius=self.radius, style=self._style())


FeatureObject = Annotated[
    Union[PointObject, LineObject, PolygonObject, CircleObject],
    Field(discriminator="type"),
]

_feature_adapter = TypeAdapter(FeatureObject)

VALID_TYPES = {"POINT", "LINE", "POLYGON", "CIRCLE"}


def _format_validation_error(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(x) for x in err.get('loc', []))}: {err.get('msg', '')}"
        for err in e.errors()
    )


def validate_single_object(obj: Any, index: int) -> tuple[Optional[Geometry], list[str], list[str]]:
    """
    Validate a single feature object.

    Returns:
        (geometry, warnings, errors)
        - geometry is None if validation failed
    """
    warnings: list[str] = []
    errors: list[str] = []

    if not isinstance(obj, dict):
        errors.append(f"object[{index}]: must be a dict, got {type(obj).__name__}")
        return None, warnings, errors

    obj_type = obj.get("type")
    if obj_type not in VALID_TYPES:
        errors.append(f"object[{index}]: invalid type '{obj_type}', must be one of {sorted(VALID_TYPES)}")
        return None, warnings, errors

    try:
        validated = _feature_adapter.validate_python(obj)
    except ValidationError as e:
        errors.append(f"object[{index}]: {_format_validation_error(e)}")
        return None, warnings, errors

    if isinstance(validated, CircleObject) and validated.radius == 0:
        warnings.append(f"object[{index}]: circle has zero radius")
    if validated.opacity == 0:
        warnings.append(f"object[{index}]: opacity 0 renders invisible")

    return validated.to_geometry(), warnings, errors


def validate_feature_objects(
    objects: Any,
    max_objects: Optional[int] = None,
) -> tuple[list[Geometry], list[str], list[str]]:
    """
    Validate a list of feature objects.

    Returns:
        (geometries, all_warnings, all_errors)
        - If all_errors is non-empty, validation failed
        - geometries contains only successfully validated objects
    """
    all_warnings: list[str] = []
    all_errors: list[str] = []
    geometries: list[Geometry] = []

    if not isinstance(objects, list):
        all_errors.append("objects must be an array")
        return [], all_warnings, all_errors

    if max_objects is not None and len(objects) > max_objects:
        all_errors.append(f"too many objects: {len(objects)} (max {max_objects})")
        return [], all_warnings, all_errors

    for i, obj in enumerate(objects):
        geometry, warnings, errors = validate_single_object(obj, i)
        all_warnings.extend(warnings)
        all_errors.extend(errors)
        if geometry is not None:
            geometries.append(geometry)

    return geometries, all_warnings, all_errors
