"""Layer: geometries, geometry groups, attributes and their common extent."""

import logging
import threading
from typing import Iterable, Iterator, Optional, Sequence

from maplayer.config import get_settings
from maplayer.core.exceptions import UnsupportedGeometryError
from maplayer.geometry.base import Extent, Geometry
from maplayer.geometry.point import Point
from maplayer.geometry.polygon import Polygon
from maplayer.geometry.types import GeometryKind
from maplayer.layer.attributes import Attributes
from maplayer.models.schemas.extent import BoundingBox

logger = logging.getLogger(__name__)


def _check_geometry(geometry: object) -> Geometry:
    if not isinstance(geometry, Geometry):
        raise UnsupportedGeometryError(geometry)
    return geometry


def merge_extents(extents: Iterable[Optional[Extent]]) -> Optional[Extent]:
    """Smallest extent covering all given ones; None entries are skipped."""
    merged: Optional[Extent] = None
    for extent in extents:
        if extent is None:
            continue
        if merged is None:
            merged = extent
            continue
        merged = (
            min(merged[0], extent[0]),
            min(merged[1], extent[1]),
            max(merged[2], extent[2]),
            max(merged[3], extent[3]),
        )
    return merged


class Layer:
    """A collection of geometries and geometry groups with an attribute table.

    Row ``i`` of the attribute table is expected to describe geometry ``i``;
    that pairing is the loader's responsibility. Every insertion recomputes
    the bounding box and the set of geometry kinds under one lock, so a
    concurrent reader sees either the state before or after an insertion.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        geometries: Optional[Sequence[Geometry]] = None,
        multi_geometries: Optional[Sequence[Sequence[Geometry]]] = None,
        attributes: Optional[Attributes] = None,
        crs: Optional[str] = None,
    ):
        self.name = name
        self._lock = threading.RLock()
        self._geometries: list[Geometry] = [_check_geometry(g) for g in geometries or []]
        self._multi_geometries: list[list[Geometry]] = [
            [_check_geometry(g) for g in group] for group in multi_geometries or []
        ]
        self._attributes = attributes.copy() if attributes is not None else Attributes()
        self._crs = crs if crs is not None else get_settings().default_crs
        self._extent: Optional[Extent] = None
        self._kinds: set[GeometryKind] = set()
        self._refresh()

    # Geometry access

    def iter_all_geometries(self) -> Iterator[Geometry]:
        """Single geometries first, then the members of every group."""
        with self._lock:
            snapshot = list(self._geometries)
            for group in self._multi_geometries:
                snapshot.extend(group)
        yield from snapshot

    @property
    def geometries(self) -> list[Geometry]:
        with self._lock:
            return list(self._geometries)

    @property
    def multi_geometries(self) -> list[list[Geometry]]:
        with self._lock:
            return [list(group) for group in self._multi_geometries]

    @property
    def attributes(self) -> Attributes:
        """Copy of the attribute table.

        Edits to the returned table do not reach the layer; use
        ``add_attribute_row`` and ``set_column_names`` instead.
        """
        with self._lock:
            return self._attributes.copy()

    # Mutation

    def add_geometry(self, geometry: Geometry) -> None:
        geometry = _check_geometry(geometry)
        with self._lock:
            self._geometries.append(geometry)
            self._refresh()

    def add_multi_geometry(self, group: Sequence[Geometry]) -> None:
        members = [_check_geometry(g) for g in group]
        with self._lock:
            self._multi_geometries.append(members)
            self._refresh()

    def add_attribute_row(self, row: Sequence[str], index: Optional[int] = None) -> None:
        with self._lock:
            self._attributes.add_row(row, index)

    def set_column_names(self, names: Sequence[str]) -> None:
        with self._lock:
            self._attributes.set_column_names(names)

    def clear_layer(self) -> None:
        """Remove all geometries, groups and attributes at once."""
        with self._lock:
            self._geometries.clear()
            self._multi_geometries.clear()
            self._attributes.clear()
            self._extent = None
            self._kinds = set()
        logger.info(f"Cleared layer {self.name or '<unnamed>'}")

    def recalculate_bounding_box(self) -> None:
        """Recompute extent and kinds after owned geometries were edited in place."""
        with self._lock:
            self._refresh()

    def _refresh(self) -> None:
        extents = []
        kinds = set()
        for geometry in self._all_unlocked():
            extents.append(geometry.extent())
            kinds.add(geometry.kind)
        self._extent = merge_extents(extents)
        self._kinds = kinds
        logger.debug(f"Layer {self.name or '<unnamed>'} extent recomputed: {self._extent}")

    def _all_unlocked(self) -> Iterator[Geometry]:
        yield from self._geometries
        for group in self._multi_geometries:
            yield from group

    # Derived state

    def bounding_box(self) -> Optional[Polygon]:
        """Extent as a 4-vertex rectangle, or None if nothing has coordinates."""
        with self._lock:
            extent = self._extent
        if extent is None:
            return None
        min_x, min_y, max_x, max_y = extent
        return Polygon(vertices=[
            Point(min_x, min_y),
            Point(max_x, min_y),
            Point(max_x, max_y),
            Point(min_x, max_y),
        ])

    def extent(self) -> Optional[BoundingBox]:
        with self._lock:
            extent = self._extent
        if extent is None:
            return None
        min_x, min_y, max_x, max_y = extent
        return BoundingBox(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)

    @property
    def kinds(self) -> frozenset[GeometryKind]:
        with self._lock:
            return frozenset(self._kinds)

    def has_kind(self, kind: GeometryKind) -> bool:
        with self._lock:
            return kind in self._kinds

    def has_geometry(self) -> bool:
        with self._lock:
            return bool(self._kinds)

    @property
    def crs(self) -> Optional[str]:
        return self._crs

    @crs.setter
    def crs(self, value: Optional[str]) -> None:
        self._crs = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._geometries)

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"Layer(name={self.name!r}, geometries={len(self._geometries)}, "
                f"multi_geometries={len(self._multi_geometries)}, crs={self._crs!r})"
            )
