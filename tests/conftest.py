"""Shared pytest fixtures for geometry and layer tests."""

import pytest

from maplayer.config import get_settings
from maplayer.geometry import Circle, Line, Point, Polygon
from maplayer.layer import Attributes, Layer


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; drop the cache so env overrides never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def unit_square() -> Polygon:
    return Polygon(vertices=[
        Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)
    ])


@pytest.fixture
def rectangle() -> Polygon:
    """4 x 3 rectangle with its lower left corner at (2, 1)."""
    return Polygon(vertices=[
        Point(2, 1), Point(6, 1), Point(6, 4), Point(2, 4)
    ])


@pytest.fixture
def three_four_line() -> Line:
    return Line(vertices=[Point(0, 0, 0), Point(3, 4, 0)])


@pytest.fixture
def unit_circle() -> Circle:
    return Circle(centre=Point(10, 10), radius=1)


@pytest.fixture
def parcel_attributes() -> Attributes:
    return Attributes(
        column_names=["id", "name", "landuse"],
        rows=[["1", "North field", "arable"], ["2", "Mill pond", "water"]],
    )


@pytest.fixture
def empty_layer() -> Layer:
    return Layer(name="parcels", crs="EPSG:25832")
