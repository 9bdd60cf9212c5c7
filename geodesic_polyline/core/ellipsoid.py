"""Reference ellipsoid constants."""

from dataclasses import dataclass

from geodesic_polyline.constants import EllipsoidConfig


@dataclass(frozen=True)
class Ellipsoid:
    """Oblate reference ellipsoid.

    Attributes:
        a: Semi-major axis in meters
        b: Semi-minor axis in meters, approximately a * (1 - f)
        f: Flattening
    """

    a: float
    b: float
    f: float

    @classmethod
    def from_name(cls, name: str) -> "Ellipsoid":
        """Look up one of the configured ellipsoids (see EllipsoidConfig.ELLIPSOIDS).

        Raises:
            ValueError: If the name is not configured.
        """
        if name not in EllipsoidConfig.ELLIPSOIDS:
            raise ValueError(f"Unknown ellipsoid '{name}', expected one of {sorted(EllipsoidConfig.ELLIPSOIDS)}")
        a, b, f = EllipsoidConfig.ELLIPSOIDS[name]
        return cls(a=a, b=b, f=f)


WGS84 = Ellipsoid.from_name(EllipsoidConfig.DEFAULT)
