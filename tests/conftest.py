"""Shared pytest fixtures for geodesic_polyline tests.

Reference points come from published Vincenty examples:
    - Flinders Peak -> Buninyong (Vincenty 1975 / Veness), 54,972.271 m
    - Land's End -> John o' Groats (Veness), ~969,954 m, initial bearing ~9.1419°
    - Tokyo -> San Francisco crosses the antimeridian once

COORDINATES: GeoPoint(lat, lon) everywhere; GeoJSON fixtures use [lon, lat].
"""

import pytest

from geodesic_polyline.core.geodesic_solver import GeodesicSolver
from geodesic_polyline.model.geo_point import GeoPoint
from geodesic_polyline.model.path_options import PathOptions


# =============================================================================
# REFERENCE POINTS
# =============================================================================


@pytest.fixture
def flinders_peak() -> GeoPoint:
    """-37°57'03.72030", 144°25'29.52440"."""
    return GeoPoint(lat=-37.95103342, lon=144.42486789)


@pytest.fixture
def buninyong() -> GeoPoint:
    """-37°39'10.15610", 143°55'35.38390"."""
    return GeoPoint(lat=-37.65282114, lon=143.92649554)


@pytest.fixture
def lands_end() -> GeoPoint:
    return GeoPoint(lat=50.06632, lon=-5.71475)


@pytest.fixture
def john_o_groats() -> GeoPoint:
    return GeoPoint(lat=58.64402, lon=-3.07009)


@pytest.fixture
def tokyo() -> GeoPoint:
    return GeoPoint(lat=35.6762, lon=139.6503)


@pytest.fixture
def san_francisco() -> GeoPoint:
    return GeoPoint(lat=37.7749, lon=-122.4194)


# =============================================================================
# SOLVER / OPTIONS
# =============================================================================


@pytest.fixture
def solver() -> GeodesicSolver:
    """WGS-84 solver with the default non-convergence policy."""
    return GeodesicSolver()


@pytest.fixture
def strict_solver() -> GeodesicSolver:
    """WGS-84 solver that raises instead of nudging on non-convergence."""
    return GeodesicSolver(nudge_on_non_convergence=False)


@pytest.fixture
def dashed_options() -> PathOptions:
    """10 steps per leg, half of each step drawn."""
    return PathOptions(steps=10, dash=0.5)


# =============================================================================
# GEOJSON DATA
# =============================================================================


@pytest.fixture
def feature_collection() -> dict:
    """LineString, Point and Polygon-with-hole features, in that order."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"name": "LE-JOG"},
                "geometry": {"type": "LineString", "coordinates": [[-5.71475, 50.06632], [-3.07009, 58.64402]]},
            },
            {
                "type": "Feature",
                "properties": {"name": "marker"},
                "geometry": {"type": "Point", "coordinates": [0.0, 0.0]},
            },
            {
                "type": "Feature",
                "properties": {"name": "square"},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [
                        [[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0], [0.0, 0.0]],
                        [[2.0, 2.0], [2.0, 4.0], [4.0, 4.0], [4.0, 2.0], [2.0, 2.0]],
                    ],
                },
            },
        ],
    }
