"""Segment builder - state machine that accumulates a MultiPolyline.

Uses python-statemachine so the split control flow of path and circle
generation is explicit instead of hidden in index bookkeeping.

States:
    IDLE: Nothing built yet (initial)
    STARTING: A new, still empty segment is open
    EXTENDING: The open segment holds at least one point

Transitions:
    IDLE -> STARTING: start_segment
    STARTING -> STARTING: start_segment (leaves an empty segment behind)
    EXTENDING -> STARTING: start_segment (antimeridian split, dash gap, next input polyline)
    STARTING -> EXTENDING: append_point
    EXTENDING -> EXTENDING: append_point

append_point from IDLE raises TransitionNotAllowed: every point belongs to a
segment that was explicitly started.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from statemachine import State, StateMachine

from geodesic_polyline.model.geo_point import GeoPoint
from geodesic_polyline.model.multi_polyline import MultiPolyline


@dataclass
class SegmentContext:
    """Mutable segment lists owned by one SegmentBuilder."""

    segments: list[list[GeoPoint]] = field(default_factory=list)


class SegmentBuilder(StateMachine):
    """Builds segments point by point; freeze with to_multi_polyline().

    Example:
        builder = SegmentBuilder()
        builder.start_segment()
        builder.append_point(point=GeoPoint(lat=0.0, lon=179.0))
        builder.append_point(point=GeoPoint(lat=0.0, lon=179.999))
        builder.start_segment()
        builder.append_point(point=GeoPoint(lat=0.0, lon=-179.999))
        builder.to_multi_polyline().segment_count  # 2
    """

    idle = State("Idle", initial=True)
    starting = State("Starting")
    extending = State("Extending")

    start_segment = idle.to(starting) | starting.to(starting) | extending.to(starting)
    append_point = starting.to(extending) | extending.to(extending)

    def __init__(self, context: SegmentContext | None = None) -> None:
        """Initialize builder.

        Args:
            context: Segment storage (creates new if None)
        """
        super().__init__(model=context or SegmentContext())

    @property
    def context(self) -> SegmentContext:
        """Alias for model."""
        return self.model

    # ==========================================================================
    # Transition Actions
    # ==========================================================================

    def before_start_segment(self) -> None:
        """Open a new empty segment."""
        self.context.segments.append([])

    def before_append_point(self, point: GeoPoint) -> None:
        """Add point to the open segment."""
        self.context.segments[-1].append(point)

    # ==========================================================================
    # State Checks
    # ==========================================================================

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_starting(self) -> bool:
        return self.starting.is_active

    @property
    def is_extending(self) -> bool:
        return self.extending.is_active

    @property
    def last_point(self) -> Optional[GeoPoint]:
        """Last point of the open segment, None if it is empty or nothing was started."""
        if not self.is_extending:
            return None
        return self.context.segments[-1][-1]

    def to_multi_polyline(self) -> MultiPolyline:
        """Freeze the accumulated segments."""
        return MultiPolyline.from_lists(self.context.segments)

    def __repr__(self) -> str:
        return f"SegmentBuilder(state={self.current_state.name}, segments={len(self.context.segments)})"
