"""Result values of the Vincenty direct and inverse solutions.

- DirectResult: start point + bearing + distance => end point
- InverseResult: two points => distance + bearings

Coincident points are a structured InverseResult with coincident=True rather
than a bare zero, so callers can tell "no geodesic" from a computed distance.
"""

from dataclasses import dataclass
from typing import Optional

from geodesic_polyline.model.geo_point import GeoPoint


@dataclass(frozen=True)
class DirectResult:
    """Destination of a direct geodesic problem.

    Attributes:
        point: Destination point
        final_bearing: Bearing at the destination, degrees in [0, 360)
    """

    point: GeoPoint
    final_bearing: float


@dataclass(frozen=True)
class InverseResult:
    """Solution of an inverse geodesic problem.

    Attributes:
        distance_m: Geodesic distance in meters, rounded to millimeters
        initial_bearing: Bearing at the first point, degrees in [0, 360).
            None for coincident points.
        final_bearing: Bearing at the second point, degrees in [0, 360).
            None for coincident points.
        coincident: True if both points are the same location
        approximate: True if the iteration did not converge and the result was
            computed for a slightly shifted target point
    """

    distance_m: float
    initial_bearing: Optional[float]
    final_bearing: Optional[float]
    coincident: bool = False
    approximate: bool = False

    @staticmethod
    def coincident_points() -> "InverseResult":
        """Factory for the zero-distance result of coincident points."""
        return InverseResult(distance_m=0.0, initial_bearing=None, final_bearing=None, coincident=True)
