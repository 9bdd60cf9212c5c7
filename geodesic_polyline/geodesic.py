"""Geodesic - Stateful facade binding waypoints to a drawable MultiPolyline.

Holds the generation options, display options, solver and the current
geometry. Every mutating call (set_latlngs, geojson, create_circle) replaces
the geometry; get_stats, to_layer and to_deck read it.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

import pydeck as pdk

from geodesic_polyline.adapters.geojson import read_polylines
from geodesic_polyline.adapters.pydeck_layer import build_deck, build_path_layer
from geodesic_polyline.constants import StyleConfig
from geodesic_polyline.core.ellipsoid import Ellipsoid
from geodesic_polyline.core.geodesic_solver import GeodesicSolver
from geodesic_polyline.core.stats_aggregator import PolylineStats, compute_stats
from geodesic_polyline.generators.circle_generator import CircleGenerator
from geodesic_polyline.generators.path_builder import PathBuilder
from geodesic_polyline.model.geo_point import GeoPoint
from geodesic_polyline.model.multi_polyline import MultiPolyline
from geodesic_polyline.model.path_options import DisplayOptions, PathOptions

logger = logging.getLogger(__name__)


def _is_single_polyline(latlngs: Sequence[Any]) -> bool:
    """True if latlngs is one waypoint sequence rather than a list of them."""
    if not latlngs:
        return True
    first = latlngs[0]
    if isinstance(first, (GeoPoint, Mapping)):
        return True
    if not first:
        return False
    # (lat, lon) pair of numbers vs. a nested sequence of points
    return not isinstance(first[0], (Sequence, Mapping, GeoPoint))


class Geodesic:
    """Geodesic polyline / circle with its styling.

    Example:
        geo = Geodesic([(50.06, -5.71), (58.64, -3.07)], options=PathOptions(steps=20))
        geo.get_stats().distance_m     # ~969954 m
        geo.to_deck().to_html("route.html")
    """

    def __init__(
        self,
        latlngs: Optional[Sequence[Any]] = None,
        options: Optional[PathOptions] = None,
        display: Optional[DisplayOptions] = None,
        ellipsoid: Optional[Ellipsoid] = None,
        solver: Optional[GeodesicSolver] = None,
    ) -> None:
        self.options = options or PathOptions()
        self.display = display or DisplayOptions()
        if solver is None:
            solver = GeodesicSolver(ellipsoid=ellipsoid) if ellipsoid is not None else GeodesicSolver()
        self.solver = solver
        self._latlngs: list[list[GeoPoint]] = []
        self.multi_polyline = MultiPolyline()
        if latlngs is not None:
            self.set_latlngs(latlngs)

    @property
    def latlngs(self) -> list[list[GeoPoint]]:
        """Input waypoint sequences the current geometry was built from."""
        return [list(points) for points in self._latlngs]

    def set_latlngs(self, latlngs: Sequence[Any]) -> MultiPolyline:
        """Replace the geometry with the geodesic path through latlngs.

        Args:
            latlngs: One waypoint sequence or a list of waypoint sequences.
                Points may be GeoPoint, (lat, lon) or {"lat", "lng"/"lon"}.

        Returns:
            The new MultiPolyline.
        """
        polylines = [latlngs] if _is_single_polyline(latlngs) else list(latlngs)
        return self._build(polylines)

    def geojson(self, data: Union[str, Mapping[str, Any]]) -> MultiPolyline:
        """Replace the geometry with geodesics through every supported GeoJSON feature."""
        return self._build(read_polylines(data))

    def _build(self, polylines: Sequence[Sequence[Any]]) -> MultiPolyline:
        self._latlngs = [[GeoPoint.coerce(p) for p in points] for points in polylines]
        self.multi_polyline = PathBuilder(options=self.options, solver=self.solver).build(self._latlngs)
        logger.info(
            f"Geodesic path from {len(self._latlngs)} polylines: "
            f"{self.multi_polyline.segment_count} segments, {self.multi_polyline.point_count} points"
        )
        return self.multi_polyline

    def create_circle(self, center: Any, radius_m: float) -> MultiPolyline:
        """Replace the geometry with a geodesic circle of radius_m around center."""
        center = GeoPoint.coerce(center)
        self._latlngs = [[center]]
        self.multi_polyline = CircleGenerator(options=self.options, solver=self.solver).create_circle(
            center=center, radius_m=radius_m
        )
        logger.info(
            f"Geodesic circle r={radius_m:.0f}m around {center}: {self.multi_polyline.segment_count} segments"
        )
        return self.multi_polyline

    def get_stats(self) -> PolylineStats:
        """Distance, point and segment counts of the current geometry."""
        return compute_stats(multi_polyline=self.multi_polyline, solver=self.solver)

    def to_layer(self, layer_id: str = StyleConfig.LAYER_ID) -> pdk.Layer:
        """PathLayer of the current geometry styled with the display options."""
        return build_path_layer(multi_polyline=self.multi_polyline, display=self.display, layer_id=layer_id)

    def to_deck(self) -> pdk.Deck:
        """Standalone Deck centered on the first point of the current geometry."""
        return build_deck(multi_polyline=self.multi_polyline, display=self.display)

    def __repr__(self) -> str:
        return f"Geodesic({self.multi_polyline!r}, options={self.options})"
