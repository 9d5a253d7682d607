"""Populate layers from validated feature objects."""

import logging
from typing import Any, Optional, Sequence

from maplayer.core.exceptions import InvalidFeatureObjectError
from maplayer.layer.layer import Layer
from maplayer.models.schemas.features import validate_feature_objects

logger = logging.getLogger(__name__)


def load_features(
    layer: Layer,
    objects: list[Any],
    rows: Optional[Sequence[Sequence[str]]] = None,
    max_objects: Optional[int] = None,
) -> list[str]:
    """
    Validate feature objects and add them to a layer.

    Nothing is added unless every object validates. When ``rows`` is given
    it must hold one attribute row per object, in the same order.
    Raises InvalidFeatureObjectError on any validation error.
    Returns the validation warnings.
    """
    geometries, warnings, errors = validate_feature_objects(objects, max_objects=max_objects)

    if rows is not None and len(rows) != len(objects):
        errors.append(f"got {len(rows)} attribute rows for {len(objects)} objects")

    if errors:
        raise InvalidFeatureObjectError(errors)

    for geometry in geometries:
        layer.add_geometry(geometry)
    for row in rows or []:
        layer.add_attribute_row(row)

    logger.debug(f"Loaded {len(geometries)} features into layer {layer.name or '<unnamed>'}")
    return warnings
