"""Vincenty direct and inverse solutions on an oblate ellipsoid.

Provides the geodesic backbone for path and circle generation:
- direct: start point + initial bearing + distance => destination + final bearing
- inverse: two points => distance + initial/final bearings

Both solutions iterate on the auxiliary sphere until the change drops below
SolverConfig.CONVERGENCE_EPS (1e-12 rad, well below a millimeter).
Distances are meters, bearings are degrees clockwise from north.

Degenerate cases:
- Coincident points: inverse returns InverseResult.coincident_points()
- Equatorial lines (cos^2(alpha) == 0): cos(2*sigma_m) is taken as 0
- Non-convergence: direct raises NonConvergentError; inverse retries once with
  the target longitude shifted by SolverConfig.NUDGE_DEG (flagging the result
  approximate) unless the solver was built with nudge_on_non_convergence=False

Formulas after T. Vincenty, "Direct and Inverse Solutions of Geodesics on the
Ellipsoid with application of nested equations", Survey Review XXIII, 1975.
"""

import logging
from dataclasses import replace
from math import atan2, cos, degrees, pi, radians, sin, sqrt, tan
from typing import Optional

from geodesic_polyline.constants import SolverConfig
from geodesic_polyline.core.ellipsoid import WGS84, Ellipsoid
from geodesic_polyline.model.geo_point import GeoPoint
from geodesic_polyline.model.results import DirectResult, InverseResult

logger = logging.getLogger(__name__)


class NonConvergentError(ArithmeticError):
    """Raised when a Vincenty iteration exceeds its iteration cap.

    Attributes:
        iterations: Number of iterations performed before giving up
    """

    def __init__(self, message: str, iterations: int) -> None:
        super().__init__(message)
        self.iterations = iterations


def normalize_bearing(bearing_deg: float) -> float:
    """Map any bearing in degrees onto [0, 360)."""
    return (bearing_deg + 360) % 360


def _series_a_b(u_sq: float) -> tuple[float, float]:
    """Vincenty's A and B series expansions in u^2."""
    big_a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    return big_a, big_b


def _delta_sigma(big_b: float, sin_sigma: float, cos_sigma: float, cos_2sigma_m: float) -> float:
    return (
        big_b
        * sin_sigma
        * (
            cos_2sigma_m
            + big_b
            / 4
            * (
                cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m)
                - big_b / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma * sin_sigma) * (-3 + 4 * cos_2sigma_m * cos_2sigma_m)
            )
        )
    )


class GeodesicSolver:
    """Vincenty direct/inverse solver bound to one reference ellipsoid.

    The solver holds no mutable state; one instance can be shared freely.

    Example:
        solver = GeodesicSolver()
        inv = solver.inverse(p1=GeoPoint(lat=50.06632, lon=-5.71475), p2=GeoPoint(lat=58.64402, lon=-3.07009))
        inv.distance_m  # 969954.166
        dest = solver.direct(origin=GeoPoint(lat=50.06632, lon=-5.71475), initial_bearing_deg=inv.initial_bearing,
                             distance_m=inv.distance_m)
    """

    def __init__(
        self,
        ellipsoid: Ellipsoid = WGS84,
        nudge_on_non_convergence: Optional[bool] = None,
    ) -> None:
        """Initialize solver.

        Args:
            ellipsoid: Reference ellipsoid (default WGS-84)
            nudge_on_non_convergence: Retry non-converging inverse queries with a
                shifted target instead of raising. Defaults to
                SolverConfig.NUDGE_ON_NON_CONVERGENCE.
        """
        self.ellipsoid = ellipsoid
        if nudge_on_non_convergence is None:
            nudge_on_non_convergence = SolverConfig.NUDGE_ON_NON_CONVERGENCE
        self.nudge_on_non_convergence = nudge_on_non_convergence

    def direct(
        self,
        origin: GeoPoint,
        initial_bearing_deg: float,
        distance_m: float,
        wrap: bool = True,
    ) -> DirectResult:
        """Solve the direct problem: destination from start, bearing and distance.

        Args:
            origin: Start point
            initial_bearing_deg: Initial bearing in degrees clockwise from north
            distance_m: Distance along the geodesic in meters
            wrap: Normalize the destination longitude to [-180, 180). If False the
                raw sum origin.lon + delta_lon is returned, which keeps longitudes
                continuous across the antimeridian.

        Returns:
            DirectResult with destination point and final bearing in [0, 360).

        Raises:
            NonConvergentError: If sigma does not settle within
                SolverConfig.DIRECT_MAX_ITERATIONS iterations.
        """
        a, b, f = self.ellipsoid.a, self.ellipsoid.b, self.ellipsoid.f
        phi1 = radians(origin.lat)
        lambda1 = radians(origin.lon)
        alpha1 = radians(initial_bearing_deg)
        s = distance_m

        sin_alpha1 = sin(alpha1)
        cos_alpha1 = cos(alpha1)

        # Reduced latitude
        tan_u1 = (1 - f) * tan(phi1)
        cos_u1 = 1 / sqrt(1 + tan_u1 * tan_u1)
        sin_u1 = tan_u1 * cos_u1

        sigma1 = atan2(tan_u1, cos_alpha1)
        sin_alpha = cos_u1 * sin_alpha1
        cos_sq_alpha = 1 - sin_alpha * sin_alpha
        u_sq = cos_sq_alpha * (a * a - b * b) / (b * b)
        big_a, big_b = _series_a_b(u_sq)

        sigma = s / (b * big_a)
        for _ in range(SolverConfig.DIRECT_MAX_ITERATIONS):
            cos_2sigma_m = cos(2 * sigma1 + sigma)
            sin_sigma = sin(sigma)
            cos_sigma = cos(sigma)
            delta_sigma = _delta_sigma(big_b, sin_sigma, cos_sigma, cos_2sigma_m)
            sigma_prev = sigma
            sigma = s / (b * big_a) + delta_sigma
            if abs(sigma - sigma_prev) <= SolverConfig.CONVERGENCE_EPS:
                break
        else:
            raise NonConvergentError(
                f"Vincenty direct failed to converge from {origin} "
                f"(bearing={initial_bearing_deg}, distance={distance_m}m)",
                iterations=SolverConfig.DIRECT_MAX_ITERATIONS,
            )

        x = sin_u1 * sin_sigma - cos_u1 * cos_sigma * cos_alpha1
        phi2 = atan2(
            sin_u1 * cos_sigma + cos_u1 * sin_sigma * cos_alpha1,
            (1 - f) * sqrt(sin_alpha * sin_alpha + x * x),
        )
        lam = atan2(sin_sigma * sin_alpha1, cos_u1 * cos_sigma - sin_u1 * sin_sigma * cos_alpha1)
        big_c = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
        delta_lon = lam - (1 - big_c) * f * sin_alpha * (
            sigma + big_c * sin_sigma * (cos_2sigma_m + big_c * cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m))
        )

        if wrap:
            lambda2 = (lambda1 + delta_lon + 3 * pi) % (2 * pi) - pi
        else:
            lambda2 = lambda1 + delta_lon

        rev_az = atan2(sin_alpha, -x)

        return DirectResult(
            point=GeoPoint(lat=degrees(phi2), lon=degrees(lambda2)),
            final_bearing=normalize_bearing(degrees(rev_az)),
        )

    def inverse(self, p1: GeoPoint, p2: GeoPoint) -> InverseResult:
        """Solve the inverse problem: distance and bearings between two points.

        Args:
            p1: Start point
            p2: End point

        Returns:
            InverseResult with distance rounded to millimeters and bearings in
            [0, 360). Coincident points give InverseResult.coincident_points().
            A result computed for a shifted target is flagged approximate=True.

        Raises:
            NonConvergentError: If lambda does not settle within
                SolverConfig.INVERSE_MAX_ITERATIONS iterations and either nudging
                is disabled or the nudged retry fails as well.
        """
        try:
            return self._solve_inverse(p1=p1, p2=p2)
        except NonConvergentError:
            if not self.nudge_on_non_convergence:
                raise
            shifted = GeoPoint(lat=p2.lat, lon=p2.lon + SolverConfig.NUDGE_DEG)
            logger.warning(f"Vincenty inverse failed to converge for {p1} -> {p2}, retrying with target {shifted}")

        return replace(self._solve_inverse(p1=p1, p2=shifted), approximate=True)

    def _solve_inverse(self, p1: GeoPoint, p2: GeoPoint) -> InverseResult:
        """Single Vincenty inverse pass without any fallback."""
        a, b, f = self.ellipsoid.a, self.ellipsoid.b, self.ellipsoid.f
        phi1, lambda1 = radians(p1.lat), radians(p1.lon)
        phi2, lambda2 = radians(p2.lat), radians(p2.lon)

        big_l = lambda2 - lambda1
        tan_u1 = (1 - f) * tan(phi1)
        cos_u1 = 1 / sqrt(1 + tan_u1 * tan_u1)
        sin_u1 = tan_u1 * cos_u1
        tan_u2 = (1 - f) * tan(phi2)
        cos_u2 = 1 / sqrt(1 + tan_u2 * tan_u2)
        sin_u2 = tan_u2 * cos_u2

        lam = big_l
        for _ in range(SolverConfig.INVERSE_MAX_ITERATIONS):
            sin_lam = sin(lam)
            cos_lam = cos(lam)
            sin_sq_sigma = (cos_u2 * sin_lam) ** 2 + (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
            sin_sigma = sqrt(sin_sq_sigma)
            if sin_sigma == 0:
                return InverseResult.coincident_points()
            cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
            sigma = atan2(sin_sigma, cos_sigma)
            sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
            cos_sq_alpha = 1 - sin_alpha * sin_alpha
            # Equatorial line: cos^2(alpha) = 0
            cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha if cos_sq_alpha != 0 else 0.0
            big_c = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
            lam_prev = lam
            lam = big_l + (1 - big_c) * f * sin_alpha * (
                sigma + big_c * sin_sigma * (cos_2sigma_m + big_c * cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m))
            )
            if abs(lam - lam_prev) <= SolverConfig.CONVERGENCE_EPS:
                break
        else:
            raise NonConvergentError(
                f"Vincenty inverse failed to converge for {p1} -> {p2}",
                iterations=SolverConfig.INVERSE_MAX_ITERATIONS,
            )

        u_sq = cos_sq_alpha * (a * a - b * b) / (b * b)
        big_a, big_b = _series_a_b(u_sq)
        delta_sigma = _delta_sigma(big_b, sin_sigma, cos_sigma, cos_2sigma_m)
        s = b * big_a * (sigma - delta_sigma)

        fwd_az = atan2(cos_u2 * sin_lam, cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam)
        rev_az = atan2(cos_u1 * sin_lam, -sin_u1 * cos_u2 + cos_u1 * sin_u2 * cos_lam)

        return InverseResult(
            distance_m=round(s, SolverConfig.DISTANCE_DECIMALS),
            initial_bearing=normalize_bearing(degrees(fwd_az)),
            final_bearing=normalize_bearing(degrees(rev_az)),
        )
