"""MultiPolyline - The output geometry of path and circle generation.

An ordered collection of segments, each an ordered run of GeoPoints that is
continuous in longitude. Antimeridian crossings end one segment and start the
next, so a renderer can draw every segment as a plain line.

Once built, a MultiPolyline is never modified.
"""

from dataclasses import dataclass
from typing import Iterator

import numpy as np
from shapely.geometry import MultiLineString, mapping

from geodesic_polyline.model.geo_point import GeoPoint


@dataclass(frozen=True)
class MultiPolyline:
    """Ordered segments of ordered points.

    Attributes:
        segments: Tuple of segments; each segment is a tuple of GeoPoints.
            Segments may hold a single point (dash end markers) or none
            (input polylines without any non-degenerate leg).
    """

    segments: tuple[tuple[GeoPoint, ...], ...] = ()

    @classmethod
    def from_lists(cls, segments: list[list[GeoPoint]]) -> "MultiPolyline":
        """Freeze a list of point lists."""
        return cls(segments=tuple(tuple(segment) for segment in segments))

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def point_count(self) -> int:
        """Total number of vertices across all segments."""
        return sum(len(segment) for segment in self.segments)

    def __iter__(self) -> Iterator[tuple[GeoPoint, ...]]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __getitem__(self, index: int) -> tuple[GeoPoint, ...]:
        return self.segments[index]

    def as_arrays(self) -> list[np.ndarray]:
        """Return one (N, 2) float array of [lon, lat] rows per segment."""
        return [np.array([p.lon_lat for p in segment], dtype=float).reshape(-1, 2) for segment in self.segments]

    def max_longitude_jump(self) -> float:
        """Largest absolute longitude difference between consecutive points of any segment.

        Returns 0.0 if no segment has two points. A correctly split
        MultiPolyline never exceeds 180.
        """
        jumps = [np.abs(np.diff(arr[:, 0])).max() for arr in self.as_arrays() if len(arr) > 1]
        return float(max(jumps)) if jumps else 0.0

    def to_shapely(self) -> MultiLineString:
        """Convert drawable segments (two or more points) to a shapely MultiLineString.

        Coordinates are (lon, lat), matching GeoJSON.
        """
        lines = [[p.lon_lat for p in segment] for segment in self.segments if len(segment) > 1]
        return MultiLineString(lines)

    def to_geojson(self) -> dict:
        """Serialize as a GeoJSON MultiLineString geometry dict."""
        return mapping(self.to_shapely())

    def __repr__(self) -> str:
        return f"MultiPolyline(segments={self.segment_count}, points={self.point_count})"
