"""Unit tests for feature object validation and layer loading."""

import pytest

from maplayer.core.exceptions import InvalidFeatureObjectError
from maplayer.geometry import Circle, GeometryKind, Line, Point, Polygon
from maplayer.layer import load_features
from maplayer.models.schemas.features import (
    FeatureBase,
    validate_feature_objects,
    validate_single_object,
)


@pytest.fixture
def valid_objects():
    return [
        {"type": "POINT", "position": [1, 2], "radius": 4},
        {"type": "LINE", "vertices": [[0, 0], [3, 4]], "stroke_width": 1.5},
        {
            "type": "POLYGON",
            "vertices": [[0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 1, 1]],
            "rgb": [255, 0, 0],
            "opacity": 200,
        },
        {"type": "CIRCLE", "centre": [10, 10], "radius": 2},
    ]


class TestValidateFeatureObjects:
    def test_builds_geometries(self, valid_objects):
        geometries, warnings, errors = validate_feature_objects(valid_objects)
        assert errors == []
        assert warnings == []
        assert [type(g) for g in geometries] == [Point, Line, Polygon, Circle]

    def test_point_fields(self, valid_objects):
        geometries, _, _ = validate_feature_objects(valid_objects)
        point = geometries[0]
        assert (point.x, point.y, point.z, point.radius) == (1.0, 2.0, 0.0, 4.0)

    def test_style_applied(self, valid_objects):
        geometries, _, _ = validate_feature_objects(valid_objects)
        polygon = geometries[2]
        assert polygon.rgb == (255, 0, 0)
        assert polygon.opacity == 200
        assert polygon.area() == 1.0

    def test_stroke_width_applied(self, valid_objects):
        geometries, _, _ = validate_feature_objects(valid_objects)
        assert geometries[1].stroke_width == 1.5
        assert geometries[1].length() == 5.0

    def test_not_a_list(self):
        geometries, _, errors = validate_feature_objects({"type": "POINT"})
        assert geometries == []
        assert errors == ["objects must be an array"]

    def test_max_objects(self, valid_objects):
        _, _, errors = validate_feature_objects(valid_objects, max_objects=2)
        assert "too many objects" in errors[0]

    def test_partial_failure_keeps_valid(self, valid_objects):
        objects = valid_objects + [{"type": "ARC"}]
        geometries, _, errors = validate_feature_objects(objects)
        assert len(geometries) == 4
        assert len(errors) == 1
        assert errors[0].startswith("object[4]: invalid type 'ARC'")


class TestValidateSingleObject:
    @pytest.mark.parametrize("index, expected", [(0, Point), (1, Line), (2, Polygon), (3, Circle)])
    def test_each_type_builds_its_geometry(self, valid_objects, index, expected):
        geometry, _, errors = validate_single_object(valid_objects[index], index)
        assert errors == []
        assert type(geometry) is expected

    def test_base_model_builds_nothing(self):
        assert "to_geometry" not in vars(FeatureBase)

    def test_not_a_dict(self):
        geometry, _, errors = validate_single_object([1, 2], 0)
        assert geometry is None
        assert "must be a dict" in errors[0]

    def test_polygon_needs_three_vertices(self):
        geometry, _, errors = validate_single_object(
            {"type": "POLYGON", "vertices": [[0, 0], [1, 1]]}, 3
        )
        assert geometry is None
        assert errors[0].startswith("object[3]:")
        assert "at least 3" in errors[0]

    def test_line_needs_two_vertices(self):
        _, _, errors = validate_single_object({"type": "LINE", "vertices": [[0, 0]]}, 0)
        assert "at least 2" in errors[0]

    @pytest.mark.parametrize("position", [[float("nan"), 0], [0, float("inf")], [1], [1, 2, 3, 4], "1,2"])
    def test_bad_position(self, position):
        geometry, _, errors = validate_single_object({"type": "POINT", "position": position}, 0)
        assert geometry is None
        assert errors

    def test_negative_circle_radius(self):
        _, _, errors = validate_single_object({"type": "CIRCLE", "centre": [0, 0], "radius": -1}, 0)
        assert errors

    def test_rgb_out_of_range(self):
        _, _, errors = validate_single_object(
            {"type": "POINT", "position": [0, 0], "rgb": [0, 300, 0]}, 0
        )
        assert errors

    def test_zero_radius_warning(self):
        geometry, warnings, errors = validate_single_object(
            {"type": "CIRCLE", "centre": [0, 0], "radius": 0}, 2
        )
        assert errors == []
        assert geometry.kind is GeometryKind.CIRCLE
        assert warnings == ["object[2]: circle has zero radius"]

    def test_zero_opacity_warning(self):
        _, warnings, _ = validate_single_object(
            {"type": "POINT", "position": [0, 0], "opacity": 0}, 0
        )
        assert "renders invisible" in warnings[0]


class TestLoadFeatures:
    def test_populates_layer(self, empty_layer, valid_objects):
        rows = [["1", "well"], ["2", "fence"], ["3", "barn"], ["4", "tree"]]
        warnings = load_features(empty_layer, valid_objects, rows=rows)
        assert warnings == []
        assert len(empty_layer) == 4
        assert empty_layer.attributes.get_row(3) == ["4", "tree"]
        assert empty_layer.kinds == set(GeometryKind)
        extent = empty_layer.extent()
        assert (extent.min_x, extent.min_y, extent.max_x, extent.max_y) == (0, 0, 12, 12)

    def test_any_error_adds_nothing(self, empty_layer, valid_objects):
        objects = valid_objects + [{"type": "POINT", "position": [0]}]
        with pytest.raises(InvalidFeatureObjectError) as exc_info:
            load_features(empty_layer, objects)
        assert len(exc_info.value.errors) == 1
        assert exc_info.value.code == "INVALID_FEATURE_OBJECT"
        assert empty_layer.has_geometry() is False

    def test_row_count_mismatch(self, empty_layer, valid_objects):
        with pytest.raises(InvalidFeatureObjectError, match="attribute rows"):
            load_features(empty_layer, valid_objects, rows=[["1"]])
        assert len(empty_layer) == 0
