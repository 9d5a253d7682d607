"""Unit tests for the shared geometry style capability."""

import pytest

from maplayer.core.exceptions import InvalidStyleError
from maplayer.geometry import Circle, Line, Point, Polygon, Style


@pytest.fixture(params=["point", "line", "polygon", "circle"])
def geometry(request):
    factories = {
        "point": lambda: Point(1, 1),
        "line": lambda: Line(vertices=[Point(0, 0), Point(1, 1)]),
        "polygon": lambda: Polygon(vertices=[Point(0, 0), Point(1, 0), Point(0, 1)]),
        "circle": lambda: Circle(centre=Point(0, 0), radius=1),
    }
    return factories[request.param]()


class TestStyleDefaults:
    def test_black_and_transparent(self, geometry):
        assert geometry.rgb == (0, 0, 0)
        assert geometry.opacity == 0

    def test_each_geometry_owns_its_style(self):
        first, second = Point(0, 0), Point(0, 0)
        first.set_rgb(10, 20, 30)
        assert second.rgb == (0, 0, 0)


class TestStyleMutation:
    def test_set_rgb(self, geometry):
        geometry.set_rgb(12, 34, 56)
        assert (geometry.red, geometry.green, geometry.blue) == (12, 34, 56)

    def test_set_opacity(self, geometry):
        geometry.opacity = 255
        assert geometry.opacity == 255

    @pytest.mark.parametrize("rgb", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
    def test_channel_out_of_range(self, geometry, rgb):
        with pytest.raises(InvalidStyleError):
            geometry.set_rgb(*rgb)
        assert geometry.rgb == (0, 0, 0)

    def test_opacity_out_of_range(self, geometry):
        with pytest.raises(ValueError):
            geometry.opacity = 300

    def test_non_integer_channel(self):
        with pytest.raises(InvalidStyleError):
            Style(rgb=(0.5, 0, 0))

    def test_wrong_channel_count(self):
        with pytest.raises(InvalidStyleError):
            Style(rgb=(1, 2))
