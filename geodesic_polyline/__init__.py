"""Geodesic Polyline - Vincenty geodesics drawn as antimeridian-safe polylines.

Turns waypoint sequences into geodesic (shortest path on the ellipsoid)
polylines and circles, split wherever they cross the +/-180 meridian so flat
map renderers never draw a line across the whole world.

Modules:
    core: Numerical backbone (ellipsoid, Vincenty solver, intersection, stats)
    model: Data structures (GeoPoint, PathOptions, MultiPolyline, solver results)
    generators: Geometry generation (SegmentBuilder, PathBuilder, CircleGenerator)
    adapters: GeoJSON input (shapely) and pydeck PathLayer output

Example:
    from geodesic_polyline import Geodesic
    from geodesic_polyline.model import PathOptions

    geo = Geodesic([(35.68, 139.69), (37.77, -122.42)], options=PathOptions(steps=50))
    geo.multi_polyline.segment_count  # 2
"""

from geodesic_polyline.geodesic import Geodesic

__all__ = ["Geodesic"]
