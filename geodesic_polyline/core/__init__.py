"""Core geodesic math.

This module provides the numerical backbone of path generation:
- Ellipsoid: Reference ellipsoid constants (WGS-84 default)
- GeodesicSolver: Vincenty direct and inverse solutions
- intersection: Spherical intersection of two paths (antimeridian crossings)
- compute_stats: Distance and count statistics over a MultiPolyline
"""

from geodesic_polyline.core.ellipsoid import WGS84, Ellipsoid
from geodesic_polyline.core.geodesic_solver import (
    GeodesicSolver,
    NonConvergentError,
    normalize_bearing,
)
from geodesic_polyline.core.intersection import intersection
from geodesic_polyline.core.stats_aggregator import PolylineStats, compute_stats

__all__ = [
    # Ellipsoid
    "Ellipsoid",
    "WGS84",
    # Solver
    "GeodesicSolver",
    "NonConvergentError",
    "normalize_bearing",
    # Intersection
    "intersection",
    # Stats
    "PolylineStats",
    "compute_stats",
]
