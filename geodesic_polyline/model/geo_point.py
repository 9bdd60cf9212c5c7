"""GeoPoint - The fundamental geometry atom.

A GeoPoint is a single geographic coordinate (latitude, longitude in degrees)
on the reference ellipsoid. It is an immutable value: waypoints, subdivided
path vertices and antimeridian crossing points are all GeoPoints.

Ranges are not validated. Callers own degenerate input; the solvers only need
trigonometric functions to accept the values.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class GeoPoint:
    """A point on the ellipsoid.

    Attributes:
        lat: Latitude in decimal degrees, nominally [-90, 90]
        lon: Longitude in decimal degrees, nominally [-180, 180]. Unwrapped
            longitudes (e.g. 190.0) are allowed when path wrapping is disabled.

    Example:
        point = GeoPoint(lat=50.06632, lon=-5.71475)
    """

    lat: float
    lon: float

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.lon, self.lat)

    def mirrored(self) -> "GeoPoint":
        """Same latitude, negated longitude.

        Used as the continuation point on the far side of the antimeridian:
        (10.0, 179.999) continues as (10.0, -179.999).
        """
        return GeoPoint(lat=self.lat, lon=-self.lon)

    @classmethod
    def coerce(cls, value: Union["GeoPoint", Sequence[float], Mapping[str, Any]]) -> "GeoPoint":
        """Build a GeoPoint from any supported point-like value.

        Accepts a GeoPoint, a (lat, lon) pair, or a mapping with "lat" and
        "lng" or "lon" keys (Leaflet-style LatLng dicts).

        Raises:
            ValueError: If the value cannot be interpreted as a point.
        """
        if isinstance(value, GeoPoint):
            return value
        if isinstance(value, Mapping):
            lon = value.get("lng", value.get("lon"))
            if "lat" not in value or lon is None:
                raise ValueError(f"Point mapping needs 'lat' and 'lng'/'lon' keys, got {dict(value)}")
            return cls(lat=float(value["lat"]), lon=float(lon))
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) >= 2:
            return cls(lat=float(value[0]), lon=float(value[1]))
        raise ValueError(f"Cannot interpret {value!r} as a (lat, lon) point")

    def __repr__(self) -> str:
        return f"GeoPoint(lat={self.lat:.6f}, lon={self.lon:.6f})"
