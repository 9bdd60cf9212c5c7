"""Tests for geodesic_polyline model classes.

Tests: GeoPoint, PathOptions, DisplayOptions, InverseResult, MultiPolyline
Focus: Value semantics, input coercion, validation, numpy/shapely conversion
"""

import numpy as np
import pytest
from shapely.geometry import MultiLineString

from geodesic_polyline.constants import PathConfig, StyleConfig
from geodesic_polyline.model.geo_point import GeoPoint
from geodesic_polyline.model.multi_polyline import MultiPolyline
from geodesic_polyline.model.path_options import DisplayOptions, PathOptions
from geodesic_polyline.model.results import InverseResult


# =============================================================================
# GEOPOINT
# =============================================================================


class TestGeoPoint:
    """GeoPoint - immutable (lat, lon) value."""

    def test_coordinate_orders(self) -> None:
        point = GeoPoint(lat=46.5, lon=10.25)
        assert point.lat_lon == (46.5, 10.25)
        assert point.lon_lat == (10.25, 46.5)

    def test_value_equality_and_hashable(self) -> None:
        assert GeoPoint(lat=1.0, lon=2.0) == GeoPoint(lat=1.0, lon=2.0)
        assert len({GeoPoint(lat=1.0, lon=2.0), GeoPoint(lat=1.0, lon=2.0)}) == 1

    def test_frozen(self) -> None:
        point = GeoPoint(lat=1.0, lon=2.0)
        with pytest.raises(AttributeError):
            point.lat = 5.0  # type: ignore[misc]

    def test_mirrored(self) -> None:
        """Antimeridian continuation keeps latitude and negates longitude."""
        assert GeoPoint(lat=10.0, lon=179.999).mirrored() == GeoPoint(lat=10.0, lon=-179.999)

    def test_coerce_accepts_point_tuple_and_mappings(self) -> None:
        expected = GeoPoint(lat=50.0, lon=-5.0)
        assert GeoPoint.coerce(expected) is expected
        assert GeoPoint.coerce((50.0, -5.0)) == expected
        assert GeoPoint.coerce([50, -5]) == expected
        assert GeoPoint.coerce({"lat": 50.0, "lng": -5.0}) == expected
        assert GeoPoint.coerce({"lat": 50.0, "lon": -5.0}) == expected

    def test_coerce_rejects_garbage(self) -> None:
        with pytest.raises(ValueError, match="lat"):
            GeoPoint.coerce({"latitude": 50.0, "lng": -5.0})
        with pytest.raises(ValueError, match="Cannot interpret"):
            GeoPoint.coerce((50.0,))
        with pytest.raises(ValueError, match="Cannot interpret"):
            GeoPoint.coerce("50,-5")

    def test_repr_rounds(self) -> None:
        assert repr(GeoPoint(lat=1.0, lon=2.0)) == "GeoPoint(lat=1.000000, lon=2.000000)"


# =============================================================================
# OPTIONS
# =============================================================================


class TestPathOptions:
    """PathOptions - subdivision, dashing, wrapping."""

    def test_defaults(self) -> None:
        options = PathOptions()
        assert options.steps == PathConfig.DEFAULT_STEPS == 10
        assert options.dash == 1.0
        assert options.wrap is True
        assert not options.is_dashed

    def test_dashed(self) -> None:
        assert PathOptions(dash=0.5).is_dashed

    @pytest.mark.parametrize("steps", [0, -3, 2.5, True])
    def test_invalid_steps_rejected(self, steps: object) -> None:
        with pytest.raises(ValueError, match="steps"):
            PathOptions(steps=steps)  # type: ignore[arg-type]

    @pytest.mark.parametrize("dash", [0.0, -0.5, 1.01])
    def test_invalid_dash_rejected(self, dash: float) -> None:
        with pytest.raises(ValueError, match="dash"):
            PathOptions(dash=dash)


class TestDisplayOptions:
    """DisplayOptions - renderer styling defaults."""

    def test_defaults_from_style_config(self) -> None:
        display = DisplayOptions()
        assert display.color == StyleConfig.PATH_COLOR
        assert display.width_px == StyleConfig.PATH_WIDTH_PX
        assert display.opacity == StyleConfig.PATH_OPACITY


class TestInverseResult:
    """InverseResult - computed vs. coincident results."""

    def test_coincident_factory(self) -> None:
        result = InverseResult.coincident_points()
        assert result.coincident
        assert not result.approximate
        assert result.distance_m == 0.0
        assert result.initial_bearing is None and result.final_bearing is None

    def test_computed_zero_is_not_coincident(self) -> None:
        """A computed result is distinguishable from the coincident marker."""
        result = InverseResult(distance_m=0.0, initial_bearing=0.0, final_bearing=0.0)
        assert not result.coincident
        assert result != InverseResult.coincident_points()


# =============================================================================
# MULTIPOLYLINE
# =============================================================================


class TestMultiPolyline:
    """MultiPolyline - segment container with numpy/shapely views."""

    @pytest.fixture
    def split_line(self) -> MultiPolyline:
        """Eastward line split at the antimeridian, plus a lone dash-end point."""
        return MultiPolyline.from_lists(
            [
                [GeoPoint(lat=0.0, lon=178.0), GeoPoint(lat=0.5, lon=179.999)],
                [GeoPoint(lat=0.5, lon=-179.999), GeoPoint(lat=1.0, lon=-178.0), GeoPoint(lat=1.5, lon=-177.0)],
                [GeoPoint(lat=2.0, lon=-176.0)],
            ]
        )

    def test_empty(self) -> None:
        mp = MultiPolyline()
        assert mp.segment_count == 0
        assert mp.point_count == 0
        assert mp.max_longitude_jump() == 0.0
        assert mp.as_arrays() == []

    def test_counts_and_sequence_protocol(self, split_line: MultiPolyline) -> None:
        assert split_line.segment_count == len(split_line) == 3
        assert split_line.point_count == 6
        assert split_line[1][0] == GeoPoint(lat=0.5, lon=-179.999)
        assert [len(segment) for segment in split_line] == [2, 3, 1]

    def test_from_lists_freezes(self) -> None:
        source = [[GeoPoint(lat=0.0, lon=0.0)]]
        mp = MultiPolyline.from_lists(source)
        source[0].append(GeoPoint(lat=1.0, lon=1.0))
        assert mp.point_count == 1
        assert isinstance(mp.segments[0], tuple)

    def test_as_arrays_lon_lat_order(self, split_line: MultiPolyline) -> None:
        arrays = split_line.as_arrays()
        assert [arr.shape for arr in arrays] == [(2, 2), (3, 2), (1, 2)]
        np.testing.assert_allclose(arrays[0][0], [178.0, 0.0])

    def test_max_longitude_jump_within_segments_only(self, split_line: MultiPolyline) -> None:
        """The 359.998° jump between segments is not a jump inside a segment."""
        assert split_line.max_longitude_jump() == pytest.approx(1.999)

    def test_unsplit_jump_detected(self) -> None:
        mp = MultiPolyline.from_lists([[GeoPoint(lat=0.0, lon=179.0), GeoPoint(lat=0.0, lon=-179.0)]])
        assert mp.max_longitude_jump() == pytest.approx(358.0)

    def test_to_shapely_skips_single_point_segments(self, split_line: MultiPolyline) -> None:
        geom = split_line.to_shapely()
        assert isinstance(geom, MultiLineString)
        assert len(geom.geoms) == 2

    def test_to_geojson(self, split_line: MultiPolyline) -> None:
        geojson = split_line.to_geojson()
        assert geojson["type"] == "MultiLineString"
        assert len(geojson["coordinates"]) == 2
        assert tuple(geojson["coordinates"][0][0]) == pytest.approx((178.0, 0.0))

    def test_repr(self, split_line: MultiPolyline) -> None:
        assert repr(split_line) == "MultiPolyline(segments=3, points=6)"
