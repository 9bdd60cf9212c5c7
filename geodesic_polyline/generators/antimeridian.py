"""Antimeridian crossing detection and location.

Shared by PathBuilder and CircleGenerator. A step "crosses" when consecutive
longitudes differ by more than PathConfig.MAX_LON_JUMP_DEG. The crossing point
is found by intersecting the path with the meridian just inside the
antimeridian on the side the path is leaving.
"""

import logging
from typing import TYPE_CHECKING, Optional

from geodesic_polyline.constants import PathConfig
from geodesic_polyline.core.intersection import intersection
from geodesic_polyline.model.geo_point import GeoPoint

if TYPE_CHECKING:
    from geodesic_polyline.generators.segment_builder import SegmentBuilder

logger = logging.getLogger(__name__)


def crosses_antimeridian(prev: GeoPoint, nxt: GeoPoint) -> bool:
    """True if the step prev -> nxt jumps more than 180 degrees of longitude."""
    return abs(nxt.lon - prev.lon) > PathConfig.MAX_LON_JUMP_DEG


def locate_crossing(origin: GeoPoint, bearing_deg: float, prev: GeoPoint, nxt: GeoPoint) -> Optional[GeoPoint]:
    """Locate where the path (origin, bearing) crosses the antimeridian between prev and nxt.

    The anchor meridian sits at -INTERSECT_LON for an eastward jump in the
    numbers (path leaving the western edge) and +INTERSECT_LON otherwise.

    Args:
        origin: Point the path is defined from (leg start, or previous circle vertex)
        bearing_deg: Initial bearing of the path at origin
        prev: Last emitted point before the jump
        nxt: First point after the jump

    Returns:
        Crossing point on the side of prev, or None if the intersection is
        degenerate or its mirrored continuation would still jump against nxt.
    """
    anchor_lon = -PathConfig.INTERSECT_LON if nxt.lon - prev.lon > 0 else PathConfig.INTERSECT_LON
    anchor = GeoPoint(lat=PathConfig.INTERSECT_ANCHOR_LAT, lon=anchor_lon)
    crossing = intersection(origin, bearing_deg, anchor, PathConfig.INTERSECT_ANCHOR_BEARING)
    if crossing is None:
        logger.debug(f"No antimeridian intersection between {prev} and {nxt}")
        return None
    if crosses_antimeridian(crossing.mirrored(), nxt):
        logger.debug(f"Discarding antimeridian intersection {crossing}: continuation still jumps to {nxt}")
        return None
    logger.debug(f"Antimeridian crossing at {crossing} between {prev} and {nxt}")
    return crossing


def split_segment(builder: "SegmentBuilder", crossing: Optional[GeoPoint], nxt: GeoPoint) -> tuple[GeoPoint, bool]:
    """Close the open segment at a dateline jump and start the next one.

    With a crossing point the open segment ends on the crossing and the new
    segment starts at its mirrored continuation; nxt is not consumed and must
    be emitted again from there. Without one the new segment starts at nxt.

    Args:
        builder: Segment builder in EXTENDING state
        crossing: Result of locate_crossing()
        nxt: Point that triggered the jump

    Returns:
        (new previous point, whether nxt was consumed)
    """
    if crossing is not None:
        builder.append_point(point=crossing)
        builder.start_segment()
        continuation = crossing.mirrored()
        builder.append_point(point=continuation)
        return continuation, False

    builder.start_segment()
    builder.append_point(point=nxt)
    return nxt, True
