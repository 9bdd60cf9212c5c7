"""GeoJSON input boundary.

Extracts waypoint sequences from GeoJSON:
- LineString: one polyline
- MultiLineString: one polyline per line
- Polygon: one polyline per ring (exterior first, then holes), parsed with shapely

Lines are read from their raw coordinates, so a one-point line yields a
one-point polyline. Polygons that shapely rejects are skipped with a warning.

Point and MultiPoint features cannot be drawn as geodesic lines; they and any
other geometry kind are logged as warnings and skipped without aborting the
remaining features.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Union

from shapely.errors import GEOSException
from shapely.geometry import shape

from geodesic_polyline.model.geo_point import GeoPoint

logger = logging.getLogger(__name__)

SUPPORTED_GEOMETRY_TYPES = ("LineString", "MultiLineString", "Polygon")
POINT_GEOMETRY_TYPES = ("Point", "MultiPoint")


def _iter_geometries(data: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    """Flatten FeatureCollection / Feature / bare geometry into geometry dicts."""
    kind = data.get("type")
    if kind == "FeatureCollection":
        features = data.get("features", [])
    else:
        features = [data]

    geometries = []
    for feature in features:
        geometry = feature.get("geometry") if feature.get("type") == "Feature" else feature
        if geometry is None:
            logger.warning("GeoJSON feature without geometry, skipping")
            continue
        geometries.append(geometry)
    return geometries


def _coords_to_points(coords: Any) -> list[GeoPoint]:
    """GeoJSON (lon, lat[, z]) coordinates to GeoPoints."""
    return [GeoPoint(lat=float(c[1]), lon=float(c[0])) for c in coords]


def read_polylines(geojson: Union[str, Mapping[str, Any]]) -> list[list[GeoPoint]]:
    """Extract all drawable waypoint sequences from a GeoJSON object.

    Args:
        geojson: GeoJSON FeatureCollection, Feature or geometry, as dict or JSON string

    Returns:
        Waypoint sequences in document order.
    """
    data = json.loads(geojson) if isinstance(geojson, str) else geojson

    polylines: list[list[GeoPoint]] = []
    for geometry in _iter_geometries(data):
        kind = geometry.get("type")
        if kind in POINT_GEOMETRY_TYPES:
            logger.warning(f"{kind} cannot be drawn as a geodesic line, skipping")
            continue
        if kind not in SUPPORTED_GEOMETRY_TYPES:
            logger.warning(f"Drawing {kind} as a geodesic is not supported, skipping")
            continue

        if kind == "LineString":
            polylines.append(_coords_to_points(geometry.get("coordinates", [])))
            continue
        if kind == "MultiLineString":
            polylines.extend(_coords_to_points(line) for line in geometry.get("coordinates", []))
            continue

        try:
            polygon = shape(geometry)
        except (GEOSException, ValueError) as e:
            logger.warning(f"Malformed {kind} in GeoJSON, skipping: {e}")
            continue
        rings = [polygon.exterior, *polygon.interiors]
        polylines.extend(_coords_to_points(ring.coords) for ring in rings)

    logger.debug(f"Read {len(polylines)} polylines from GeoJSON")
    return polylines
