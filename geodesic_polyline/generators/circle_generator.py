"""CircleGenerator - Geodesic circles of fixed radius around a center.

Vertices are placed with the Vincenty direct solution at bearings
0, 360/steps, 2*360/steps, ... 360 from the center, so the ring closes on its
first vertex. Antimeridian jumps are split exactly as in PathBuilder.
"""

import logging
from typing import Optional

from geodesic_polyline.core.geodesic_solver import GeodesicSolver
from geodesic_polyline.generators.antimeridian import crosses_antimeridian, locate_crossing, split_segment
from geodesic_polyline.generators.segment_builder import SegmentBuilder
from geodesic_polyline.model.geo_point import GeoPoint
from geodesic_polyline.model.multi_polyline import MultiPolyline
from geodesic_polyline.model.path_options import PathOptions

logger = logging.getLogger(__name__)


class CircleGenerator:
    """Generates geodesic circles (all points at equal geodesic distance from a center).

    Example:
        generator = CircleGenerator(options=PathOptions(steps=36))
        circle = generator.create_circle(center=GeoPoint(lat=0.0, lon=179.9), radius_m=100_000)
        circle.segment_count  # 3 - crosses the antimeridian twice
    """

    def __init__(
        self,
        options: Optional[PathOptions] = None,
        solver: Optional[GeodesicSolver] = None,
    ) -> None:
        self.options = options or PathOptions()
        self.solver = solver or GeodesicSolver()

    def create_circle(self, center: GeoPoint, radius_m: float) -> MultiPolyline:
        """Generate the circle of radius_m around center.

        Args:
            center: Circle center (any GeoPoint.coerce() input)
            radius_m: Geodesic radius in meters

        Returns:
            MultiPolyline with steps + 1 vertices plus two points per antimeridian crossing.

        Raises:
            ValueError: If radius_m is negative.
        """
        if radius_m < 0:
            raise ValueError(f"Circle radius must be >= 0, got {radius_m}")
        center = GeoPoint.coerce(center)
        steps = self.options.steps

        builder = SegmentBuilder()
        builder.start_segment()
        prev = self._vertex(center=center, bearing=0.0, radius_m=radius_m)
        builder.append_point(point=prev)

        step = 1
        while step <= steps:
            gp = self._vertex(center=center, bearing=360 / steps * step, radius_m=radius_m)
            if crosses_antimeridian(prev, gp):
                inverse = self.solver.inverse(p1=prev, p2=gp)
                crossing = None
                if not inverse.coincident:
                    crossing = locate_crossing(origin=prev, bearing_deg=inverse.initial_bearing, prev=prev, nxt=gp)
                prev, consumed = split_segment(builder=builder, crossing=crossing, nxt=gp)
                if consumed:
                    step += 1
                continue

            builder.append_point(point=gp)
            prev = gp
            step += 1

        result = builder.to_multi_polyline()
        logger.debug(
            f"Built circle r={radius_m:.0f}m around {center}: {result.segment_count} segments, "
            f"{result.point_count} points"
        )
        return result

    def _vertex(self, center: GeoPoint, bearing: float, radius_m: float) -> GeoPoint:
        return self.solver.direct(
            origin=center,
            initial_bearing_deg=bearing,
            distance_m=radius_m,
            wrap=self.options.wrap,
        ).point
