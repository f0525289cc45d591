"""Geometric bounds of computed paths.

Bounds cover the full extent of every segment, not just its end points:
arcs include any axis-aligned extreme inside their sweep, and Bezier bounds
come from the curve's derivative roots via fontTools.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from fontTools.misc.bezierTools import calcCubicBounds

from serpentine.core.geometry import angular_offset
from serpentine.domain import Arc, Bezier, EllipseArc, Line, Point, Segment


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Left edge
        min_y: Bottom edge
        max_x: Right edge
        max_y: Top edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Bounds":
        xs: list[float] = []
        ys: list[float] = []
        for point in points:
            xs.append(point.x)
            ys.append(point.y)
        return cls(min(xs), min(ys), max(xs), max(ys))

    def union(self, other: "Bounds") -> "Bounds":
        return Bounds(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)


def _angles_within(start: float, counterclockwise: bool, sweep: float, candidates: list[float]) -> list[float]:
    """Candidate angles the arc passes through."""
    return [
        angle for angle in candidates
        if angular_offset(start, angle, counterclockwise) <= sweep
    ]


def segment_bounds(segment: Segment) -> Bounds:
    """Calculate the bounding box of a single segment.

    Args:
        segment: Any segment variant

    Returns:
        Bounds enclosing the whole segment
    """
    if isinstance(segment, Line):
        return Bounds.from_points([segment.start, segment.end])

    if isinstance(segment, Bezier):
        x_min, y_min, x_max, y_max = calcCubicBounds(
            segment.start.to_tuple(),
            segment.cp1.to_tuple(),
            segment.cp2.to_tuple(),
            segment.end.to_tuple(),
        )
        return Bounds(x_min, y_min, x_max, y_max)

    if isinstance(segment, Arc):
        # Axis extremes of a circle sit at multiples of pi/2
        cardinals = [0.0, math.pi / 2, math.pi, 3 * math.pi / 2]
        extremes = _angles_within(
            segment.start_angle, segment.counterclockwise, segment.sweep, cardinals
        )
        points = [segment.start_point, segment.end_point]
        points.extend(segment.point_at_angle(angle) for angle in extremes)
        return Bounds.from_points(points)

    if isinstance(segment, EllipseArc):
        cos_r = math.cos(segment.rotation)
        sin_r = math.sin(segment.rotation)
        t_x = math.atan2(-segment.radius_y * sin_r, segment.radius_x * cos_r)
        t_y = math.atan2(segment.radius_y * cos_r, segment.radius_x * sin_r)
        candidates = [t_x, t_x + math.pi, t_y, t_y + math.pi]
        extremes = _angles_within(
            segment.start_angle, segment.counterclockwise, segment.sweep, candidates
        )
        points = [segment.start_point, segment.end_point]
        points.extend(segment.point_at_angle(angle) for angle in extremes)
        return Bounds.from_points(points)

    raise TypeError(f"Unsupported segment type: {type(segment).__name__}")


def calculate_path_bounds(segments: Iterable[Segment]) -> Bounds:
    """Calculate the bounding box of a whole path.

    Args:
        segments: Segments of the path

    Returns:
        Bounds enclosing every segment

    Raises:
        ValueError: If there are no segments
    """
    result: Bounds | None = None
    for segment in segments:
        box = segment_bounds(segment)
        result = box if result is None else result.union(box)
    if result is None:
        raise ValueError("Cannot calculate bounds of an empty path")
    return result
