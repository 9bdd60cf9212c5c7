"""Value types for geodesic path generation.

- GeoPoint: Geometry atom (lat, lon)
- DirectResult / InverseResult: Vincenty solver outputs
- PathOptions: Subdivision, dashing and wrapping settings
- DisplayOptions: Renderer styling passed through untouched
- MultiPolyline: Output geometry, split at the antimeridian
"""

from geodesic_polyline.model.geo_point import GeoPoint
from geodesic_polyline.model.multi_polyline import MultiPolyline
from geodesic_polyline.model.path_options import DisplayOptions, PathOptions
from geodesic_polyline.model.results import DirectResult, InverseResult

__all__ = [
    "GeoPoint",
    "DirectResult",
    "InverseResult",
    "PathOptions",
    "DisplayOptions",
    "MultiPolyline",
]
