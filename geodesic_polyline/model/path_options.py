"""Path generation and display options.

PathOptions controls the geometry (subdivision, dashing, longitude wrapping).
DisplayOptions is renderer styling passed through untouched.
"""

from dataclasses import dataclass

from geodesic_polyline.constants import PathConfig, StyleConfig


@dataclass(frozen=True)
class PathOptions:
    """Geometry options for path and circle generation.

    Attributes:
        steps: Number of subdivided points per leg (circle: number of vertices)
        dash: Fraction of each step that is drawn, in (0, 1]. 1 draws a
            continuous line; smaller values produce dashes.
        wrap: Normalize destination longitudes to [-180, 180). When False,
            longitudes stay continuous and may exceed +/-180.
    """

    steps: int = PathConfig.DEFAULT_STEPS
    dash: float = PathConfig.DEFAULT_DASH
    wrap: bool = PathConfig.DEFAULT_WRAP

    def __post_init__(self) -> None:
        """Validate option ranges."""
        if isinstance(self.steps, bool) or not isinstance(self.steps, int) or self.steps < 1:
            raise ValueError(f"steps must be an integer >= 1, got {self.steps!r}")
        if not 0 < self.dash <= 1:
            raise ValueError(f"dash must be in (0, 1], got {self.dash!r}")

    @property
    def is_dashed(self) -> bool:
        """True if only part of each step is drawn."""
        return self.dash < 1


@dataclass(frozen=True)
class DisplayOptions:
    """Renderer styling, no effect on geometry.

    Attributes:
        color: RGBA color, components 0-255
        width_px: Line width in pixels
        opacity: Layer opacity 0.0-1.0
    """

    color: tuple[int, int, int, int] = StyleConfig.PATH_COLOR
    width_px: float = StyleConfig.PATH_WIDTH_PX
    opacity: float = StyleConfig.PATH_OPACITY
