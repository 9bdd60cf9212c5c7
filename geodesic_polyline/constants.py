"""Configuration constants for geodesic_polyline.

All configurable parameters are centralized here for easy tuning.

Classes:
    EllipsoidConfig: Reference ellipsoids (a, b, f) available to the solver
    SolverConfig: Vincenty iteration tolerances, caps and fallback policy
    PathConfig: Path subdivision defaults and antimeridian split parameters
    StyleConfig: Default display options passed through to the renderer
    MapConfig: Default pydeck view parameters
"""


class EllipsoidConfig:
    """Reference ellipsoids as (semi-major axis a, semi-minor axis b, flattening f).

    Axes in meters. The set is fixed; other datums are not supported.
    """

    ELLIPSOIDS = {
        "WGS84": (6378137.0, 6356752.3142, 1 / 298.257223563),
        "GRS80": (6378137.0, 6356752.314140, 1 / 298.257222101),
        "Airy1830": (6377563.396, 6356256.909, 1 / 299.3249646),
        "AiryModified": (6377340.189, 6356034.448, 1 / 299.3249646),
        "Intl1924": (6378388.0, 6356911.946, 1 / 297.0),
        "Bessel1841": (6377397.155, 6356078.963, 1 / 299.152815351),
    }
    DEFAULT = "WGS84"
    assert DEFAULT in ELLIPSOIDS


class SolverConfig:
    """Vincenty direct/inverse iteration parameters."""

    # Stop iterating once sigma (direct) or lambda (inverse) changes by less than this (radians)
    CONVERGENCE_EPS = 1e-12

    # Iteration caps. Realistic distances converge in a handful of iterations;
    # near-antipodal inverse queries are the ones that hit the cap.
    DIRECT_MAX_ITERATIONS = 1000
    INVERSE_MAX_ITERATIONS = 100

    # Inverse distances are rounded to millimeters
    DISTANCE_DECIMALS = 3

    # Non-convergence policy for the inverse solver: shift the target longitude
    # by NUDGE_DEG and retry once (result flagged approximate), or raise.
    NUDGE_ON_NON_CONVERGENCE = True
    NUDGE_DEG = -0.01


class PathConfig:
    """Path generation defaults and antimeridian split parameters."""

    # PathOptions defaults
    DEFAULT_STEPS = 10  # Subdivision points per leg
    DEFAULT_DASH = 1.0  # 1 = continuous line, < 1 = fraction of each step drawn
    DEFAULT_WRAP = True  # Normalize destination longitude to [-180, 180)

    # A longitude jump larger than this between consecutive points means the
    # dateline was crossed
    MAX_LON_JUMP_DEG = 180.0

    # Crossing point is located by intersecting the path with the meridian
    # running north from (INTERSECT_ANCHOR_LAT, +/-INTERSECT_LON)
    INTERSECT_LON = 179.999
    INTERSECT_ANCHOR_LAT = -89.0
    INTERSECT_ANCHOR_BEARING = 0.0
    # Paths whose angles at both points have |sin| below this run along the
    # same great circle
    INTERSECT_COLINEAR_EPS = 1e-12


class StyleConfig:
    """Default display options (pass-through to the renderer)."""

    PATH_COLOR = (0, 0, 255, 255)  # Blue, RGBA 0-255
    PATH_WIDTH_PX = 3
    PATH_OPACITY = 1.0
    LAYER_ID = "geodesic"


class MapConfig:
    """Default pydeck view parameters."""

    DEFAULT_ZOOM = 2
    DEFAULT_PITCH = 0
    MAP_STYLE = "light"
