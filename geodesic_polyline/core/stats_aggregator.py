"""Aggregate statistics over a generated MultiPolyline."""

from dataclasses import dataclass
from typing import Optional

from geodesic_polyline.core.geodesic_solver import GeodesicSolver
from geodesic_polyline.model.multi_polyline import MultiPolyline


@dataclass(frozen=True)
class PolylineStats:
    """Summary of a MultiPolyline.

    Attributes:
        distance_m: Sum of geodesic distances between consecutive points of
            every segment (gaps between segments are not counted)
        point_count: Total number of vertices
        segment_count: Number of segments after antimeridian splitting
    """

    distance_m: float
    point_count: int
    segment_count: int


def compute_stats(multi_polyline: MultiPolyline, solver: Optional[GeodesicSolver] = None) -> PolylineStats:
    """Sum per-pair inverse distances and count points and segments.

    Args:
        multi_polyline: Geometry to summarize
        solver: Solver for the inverse distances (default WGS-84)

    Returns:
        PolylineStats. Coincident consecutive points contribute 0 m.
    """
    solver = solver or GeodesicSolver()
    distance_m = 0.0
    for segment in multi_polyline:
        for p1, p2 in zip(segment, segment[1:]):
            distance_m += solver.inverse(p1=p1, p2=p2).distance_m

    return PolylineStats(
        distance_m=distance_m,
        point_count=multi_polyline.point_count,
        segment_count=multi_polyline.segment_count,
    )
