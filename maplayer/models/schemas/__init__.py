"""Pydantic schemas for feature payloads and layer extents."""

from maplayer.models.schemas.extent import BoundingBox
from maplayer.models.schemas.features import (
    CircleObject,
    LineObject,
    PointObject,
    PolygonObject,
    validate_feature_objects,
)

__all__ = [
    "BoundingBox",
    "CircleObject",
    "LineObject",
    "PointObject",
    "PolygonObject",
    "validate_feature_objects",
]
