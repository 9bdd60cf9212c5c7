"""Geometry generation on top of the geodesic solver.

- SegmentBuilder: State machine accumulating segments (start_segment / append_point)
- PathBuilder: Continuous and dashed geodesic paths through waypoints
- CircleGenerator: Geodesic circles of fixed radius
- antimeridian: Crossing detection, location and segment splitting shared by both
"""

from geodesic_polyline.generators.antimeridian import (
    crosses_antimeridian,
    locate_crossing,
    split_segment,
)
from geodesic_polyline.generators.circle_generator import CircleGenerator
from geodesic_polyline.generators.path_builder import PathBuilder
from geodesic_polyline.generators.segment_builder import SegmentBuilder, SegmentContext

__all__ = [
    "SegmentBuilder",
    "SegmentContext",
    "PathBuilder",
    "CircleGenerator",
    "crosses_antimeridian",
    "locate_crossing",
    "split_segment",
]
