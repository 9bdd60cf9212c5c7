"""Boundary adapters: GeoJSON input and pydeck rendering.

Neither adapter contains geodesic math; they only translate between
MultiPolyline / waypoint sequences and external formats.
"""

from geodesic_polyline.adapters.geojson import read_polylines
from geodesic_polyline.adapters.pydeck_layer import build_deck, build_path_layer, path_layer_data

__all__ = [
    "read_polylines",
    "path_layer_data",
    "build_path_layer",
    "build_deck",
]
