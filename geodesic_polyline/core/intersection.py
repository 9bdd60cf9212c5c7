"""Intersection of two great-circle paths, each given by a point and a bearing.

Spherical, not ellipsoidal: it is only used to pin down where a short
subdivided step crosses the antimeridian, where the difference between
sphere and ellipsoid is negligible.

After Ed Williams' Aviation Formulary and C. Veness' geodesy library.
"""

from math import acos, asin, atan2, cos, degrees, pi, radians, sin, sqrt
from typing import Optional

from geodesic_polyline.constants import PathConfig
from geodesic_polyline.model.geo_point import GeoPoint


def _clamped_acos(value: float) -> float:
    """acos with its argument clamped to [-1, 1] to absorb rounding."""
    return acos(max(-1.0, min(1.0, value)))


def intersection(
    p1: GeoPoint,
    bearing1_deg: float,
    p2: GeoPoint,
    bearing2_deg: float,
) -> Optional[GeoPoint]:
    """Find where the paths (p1, bearing1) and (p2, bearing2) cross.

    Args:
        p1: First point
        bearing1_deg: Initial bearing from p1 in degrees
        p2: Second point
        bearing2_deg: Initial bearing from p2 in degrees

    Returns:
        Intersection point with longitude normalized to [-180, 180), or None if
        the points coincide, the paths are the same great circle (infinite
        intersections) or the paths diverge (ambiguous intersection).

    Example:
        intersection(GeoPoint(lat=51.8853, lon=0.2545), 108.55, GeoPoint(lat=49.0034, lon=2.5735), 32.44)
        # GeoPoint(lat=50.907800, lon=4.508400)
    """
    phi1, lambda1 = radians(p1.lat), radians(p1.lon)
    phi2, lambda2 = radians(p2.lat), radians(p2.lon)
    theta13 = radians(bearing1_deg)
    theta23 = radians(bearing2_deg)
    d_phi = phi2 - phi1
    d_lambda = lambda2 - lambda1

    # Angular distance p1-p2
    half_chord_sq = sin(d_phi / 2) * sin(d_phi / 2) + cos(phi1) * cos(phi2) * sin(d_lambda / 2) * sin(d_lambda / 2)
    delta12 = 2 * asin(min(1.0, sqrt(half_chord_sq)))
    if delta12 == 0:
        return None

    # Initial/final bearings between the two points
    theta_a = _clamped_acos((sin(phi2) - sin(phi1) * cos(delta12)) / (sin(delta12) * cos(phi1)))
    theta_b = _clamped_acos((sin(phi1) - sin(phi2) * cos(delta12)) / (sin(delta12) * cos(phi2)))

    if sin(d_lambda) > 0:
        theta12 = theta_a
        theta21 = 2 * pi - theta_b
    else:
        theta12 = 2 * pi - theta_a
        theta21 = theta_b

    alpha1 = (theta13 - theta12 + pi) % (2 * pi) - pi  # angle 2-1-3
    alpha2 = (theta21 - theta23 + pi) % (2 * pi) - pi  # angle 1-2-3

    eps = PathConfig.INTERSECT_COLINEAR_EPS
    if abs(sin(alpha1)) < eps and abs(sin(alpha2)) < eps:
        return None  # infinite intersections
    if sin(alpha1) * sin(alpha2) < 0:
        return None  # ambiguous intersection

    alpha3 = _clamped_acos(-cos(alpha1) * cos(alpha2) + sin(alpha1) * sin(alpha2) * cos(delta12))
    delta13 = atan2(sin(delta12) * sin(alpha1) * sin(alpha2), cos(alpha2) + cos(alpha1) * cos(alpha3))
    phi3 = asin(max(-1.0, min(1.0, sin(phi1) * cos(delta13) + cos(phi1) * sin(delta13) * cos(theta13))))
    d_lambda13 = atan2(sin(theta13) * sin(delta13) * cos(phi1), cos(delta13) - sin(phi1) * sin(phi3))
    lambda3 = (lambda1 + d_lambda13 + 3 * pi) % (2 * pi) - pi

    return GeoPoint(lat=degrees(phi3), lon=degrees(lambda3))
