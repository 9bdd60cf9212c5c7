"""PathBuilder - Geodesic multi-polylines from waypoint sequences.

For every leg (consecutive waypoint pair) the Vincenty inverse gives the
initial bearing and length; the Vincenty direct then places PathOptions.steps
points along the geodesic. Whenever a step jumps more than 180 degrees of
longitude the open segment is closed at the antimeridian and a new segment
starts on the other side.

**Continuous (dash == 1):**
    Every subdivided point is appended; segments only break at the antimeridian.

**Dashed (dash < 1):**
    Each step draws from the previous dash end to a dash start at
    distance * s / steps - distance / steps * (1 - dash), then leaves a gap up
    to the dash end at distance * s / steps, which opens the next segment.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from geodesic_polyline.core.geodesic_solver import GeodesicSolver
from geodesic_polyline.generators.antimeridian import crosses_antimeridian, locate_crossing, split_segment
from geodesic_polyline.generators.segment_builder import SegmentBuilder
from geodesic_polyline.model.geo_point import GeoPoint
from geodesic_polyline.model.multi_polyline import MultiPolyline
from geodesic_polyline.model.path_options import PathOptions
from geodesic_polyline.model.results import InverseResult

logger = logging.getLogger(__name__)


class PathBuilder:
    """Builds geodesic MultiPolylines from one or more waypoint sequences.

    Example:
        builder = PathBuilder(options=PathOptions(steps=20))
        path = builder.build(polylines=[[GeoPoint(lat=35.7, lon=139.7), GeoPoint(lat=37.6, lon=-122.4)]])
        path.segment_count  # 2 - split at the antimeridian
    """

    def __init__(
        self,
        options: Optional[PathOptions] = None,
        solver: Optional[GeodesicSolver] = None,
    ) -> None:
        self.options = options or PathOptions()
        self.solver = solver or GeodesicSolver()

    def build(self, polylines: Iterable[Sequence[GeoPoint]]) -> MultiPolyline:
        """Generate the geodesic MultiPolyline for all input polylines.

        Each input polyline starts a new segment, so it contributes at least one
        (possibly empty) segment. Legs between identical points are skipped.

        Args:
            polylines: Waypoint sequences; points may be any GeoPoint.coerce() input

        Returns:
            MultiPolyline in input order.
        """
        builder = SegmentBuilder()
        for waypoints in polylines:
            points = [GeoPoint.coerce(p) for p in waypoints]
            builder.start_segment()
            for point_a, point_b in zip(points, points[1:]):
                if point_a == point_b:
                    continue
                inverse = self.solver.inverse(p1=point_a, p2=point_b)
                if inverse.coincident:
                    continue
                self._begin_leg(builder=builder, point_a=point_a)
                if self.options.is_dashed:
                    self._trace_dashed_leg(builder=builder, point_a=point_a, inverse=inverse)
                else:
                    self._trace_leg(builder=builder, point_a=point_a, inverse=inverse)

        result = builder.to_multi_polyline()
        logger.debug(f"Built geodesic path: {result.segment_count} segments, {result.point_count} points")
        return result

    def _begin_leg(self, builder: SegmentBuilder, point_a: GeoPoint) -> None:
        """Emit the leg start unless the open segment already ends on it."""
        last = builder.last_point
        if last == point_a:
            return
        if last is not None and crosses_antimeridian(last, point_a):
            builder.start_segment()
        builder.append_point(point=point_a)

    def _point_at(self, point_a: GeoPoint, bearing: float, distance_m: float) -> GeoPoint:
        return self.solver.direct(
            origin=point_a,
            initial_bearing_deg=bearing,
            distance_m=distance_m,
            wrap=self.options.wrap,
        ).point

    def _trace_leg(self, builder: SegmentBuilder, point_a: GeoPoint, inverse: InverseResult) -> None:
        """Append the subdivided points of one leg."""
        steps = self.options.steps
        bearing = inverse.initial_bearing
        prev = point_a
        step = 1
        while step <= steps:
            gp = self._point_at(point_a, bearing, inverse.distance_m / steps * step)
            if crosses_antimeridian(prev, gp):
                crossing = locate_crossing(origin=point_a, bearing_deg=bearing, prev=prev, nxt=gp)
                prev, consumed = split_segment(builder=builder, crossing=crossing, nxt=gp)
                if consumed:
                    step += 1
                continue

            builder.append_point(point=gp)
            prev = gp
            step += 1

    def _trace_dashed_leg(self, builder: SegmentBuilder, point_a: GeoPoint, inverse: InverseResult) -> None:
        """Append dash start/end points of one leg, one segment per dash."""
        steps = self.options.steps
        bearing = inverse.initial_bearing
        step_m = inverse.distance_m / steps
        gap_m = step_m * (1 - self.options.dash)
        prev = point_a
        step = 1
        while step <= steps:
            dash_start = self._point_at(point_a, bearing, step_m * step - gap_m)
            if crosses_antimeridian(prev, dash_start):
                crossing = locate_crossing(origin=point_a, bearing_deg=bearing, prev=prev, nxt=dash_start)
                prev, consumed = split_segment(builder=builder, crossing=crossing, nxt=dash_start)
                if not consumed:
                    continue
            else:
                builder.append_point(point=dash_start)

            builder.start_segment()
            dash_end = self._point_at(point_a, bearing, step_m * step)
            builder.append_point(point=dash_end)
            prev = dash_end
            step += 1
