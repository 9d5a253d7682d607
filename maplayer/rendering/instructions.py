"""Render instructions handed to the drawing collaborator.

Each geometry is turned into a shape description plus its style. The
collaborator does all painting, anti-aliasing and compositing. Only polygons
are filled, at half the stroke opacity; circles are stroked outlines.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from maplayer.core.exceptions import UnsupportedGeometryError
from maplayer.geometry.base import Geometry
from maplayer.geometry.types import GeometryKind
from maplayer.layer.layer import Layer

Channel = Annotated[int, Field(ge=0, le=255)]


class PathShape(BaseModel):
    """Polyline through the given points; closed paths return to the start."""

    type: Literal["path"] = "path"
    points: list[tuple[float, float]]
    closed: bool = False


class EllipseShape(BaseModel):
    """Ellipse given by its centre and radii."""

    type: Literal["ellipse"] = "ellipse"
    centre_x: float
    centre_y: float
    radius_x: float = Field(..., ge=0)
    radius_y: float = Field(..., ge=0)


class RenderInstruction(BaseModel):
    kind: GeometryKind
    shape: Annotated[Union[PathShape, EllipseShape], Field(discriminator="type")]
    colour_rgb: tuple[Channel, Channel, Channel]
    opacity: Channel
    fill_opacity: Optional[Channel] = None
    stroke_width: Optional[float] = None


def fill_opacity_for(opacity: int) -> int:
    return opacity // 2


def build_render_instruction(geometry: Geometry) -> RenderInstruction:
    """Describe one geometry for the renderer, dispatching on its kind."""
    if not isinstance(geometry, Geometry):
        raise UnsupportedGeometryError(geometry)

    kind = geometry.kind
    base = {
        "kind": kind,
        "colour_rgb": geometry.rgb,
        "opacity": geometry.opacity,
    }

    if kind is GeometryKind.POINT:
        radius = abs(geometry.radius)
        shape = EllipseShape(
            centre_x=geometry.x,
            centre_y=geometry.y,
            radius_x=radius,
            radius_y=radius,
        )
        return RenderInstruction(shape=shape, **base)

    if kind is GeometryKind.LINE:
        shape = PathShape(points=[(v.x, v.y) for v in geometry.vertices])
        return RenderInstruction(shape=shape, stroke_width=geometry.stroke_width, **base)

    if kind is GeometryKind.POLYGON:
        shape = PathShape(points=[(v.x, v.y) for v in geometry.vertices], closed=True)
        return RenderInstruction(
            shape=shape,
            stroke_width=geometry.stroke_width,
            fill_opacity=fill_opacity_for(geometry.opacity),
            **base,
        )

    if kind is GeometryKind.CIRCLE:
        radius = abs(geometry.radius)
        shape = EllipseShape(
            centre_x=geometry.centre.x,
            centre_y=geometry.centre.y,
            radius_x=radius,
            radius_y=radius,
        )
        return RenderInstruction(shape=shape, **base)

    raise UnsupportedGeometryError(geometry)


def layer_render_instructions(layer: Layer) -> list[RenderInstruction]:
    """Instructions for single geometries first, then grouped ones."""
    return [build_render_instruction(g) for g in layer.iter_all_geometries()]
