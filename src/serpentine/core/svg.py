"""SVG path-data serialization.

Flattens a segment list into a single SVG ``d`` attribute: lines become
``L``, Beziers ``C`` and both arc variants elliptical-arc ``A`` commands.
SVG's positive-angle sweep flag matches the ``counterclockwise`` flag.
"""

import math
from collections.abc import Callable, Sequence

from serpentine.domain import TAU, Arc, Bezier, EllipseArc, Line, Point, Segment

# Gap (in path units) above which a new subpath is started
_CONTINUITY_TOLERANCE = 1e-6


def _fmt(value: float, precision: int) -> str:
    """Format a number compactly (no trailing zeros, no negative zero)."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _point(point: Point, precision: int) -> str:
    return f"{_fmt(point.x, precision)} {_fmt(point.y, precision)}"


def _arc_commands(
    radius_x: float,
    radius_y: float,
    rotation: float,
    sweep: float,
    counterclockwise: bool,
    end_at: Callable[[float], Point],
    start_angle: float,
    end_angle: float,
    precision: int,
) -> list[str]:
    """Elliptical-arc commands for one arc.

    A single SVG arc cannot describe a full turn (its end point equals its
    start point), so sweeps near a full turn are split at their midpoint.
    """
    radii = f"{_fmt(radius_x, precision)} {_fmt(radius_y, precision)} {_fmt(math.degrees(rotation), precision)}"
    sweep_flag = 1 if counterclockwise else 0

    if sweep >= TAU - 1e-9:
        direction = 1.0 if counterclockwise else -1.0
        middle = start_angle + direction * sweep / 2.0
        return [
            f"A {radii} 0 {sweep_flag} {_point(end_at(middle), precision)}",
            f"A {radii} 0 {sweep_flag} {_point(end_at(end_angle), precision)}",
        ]

    large_arc = 1 if sweep > math.pi else 0
    return [f"A {radii} {large_arc} {sweep_flag} {_point(end_at(end_angle), precision)}"]


def segment_to_svg(segment: Segment, precision: int = 3) -> list[str]:
    """SVG drawing commands for one segment (without the initial move).

    Args:
        segment: Segment to serialize
        precision: Decimal places for coordinates

    Returns:
        List of SVG path commands
    """
    if isinstance(segment, Line):
        return [f"L {_point(segment.end, precision)}"]

    if isinstance(segment, Bezier):
        return [
            f"C {_point(segment.cp1, precision)} "
            f"{_point(segment.cp2, precision)} "
            f"{_point(segment.end, precision)}"
        ]

    if isinstance(segment, Arc):
        return _arc_commands(
            segment.radius, segment.radius, 0.0, segment.sweep, segment.counterclockwise,
            segment.point_at_angle, segment.start_angle, segment.end_angle, precision,
        )

    if isinstance(segment, EllipseArc):
        return _arc_commands(
            segment.radius_x, segment.radius_y, segment.rotation, segment.sweep,
            segment.counterclockwise, segment.point_at_angle,
            segment.start_angle, segment.end_angle, precision,
        )

    raise TypeError(f"Unsupported segment type: {type(segment).__name__}")


def path_to_svg(segments: Sequence[Segment], closed: bool = False, precision: int = 3) -> str:
    """Serialize a path into SVG path data.

    Args:
        segments: Segments in traversal order
        closed: Append a ``Z`` close command
        precision: Decimal places for coordinates

    Returns:
        SVG ``d`` attribute value; empty string for an empty path

    Examples:
        >>> path_to_svg([Line(Point(0, 0), Point(10, 0))])
        'M 0 0 L 10 0'
    """
    if not segments:
        return ""

    commands: list[str] = []
    current: Point | None = None
    for segment in segments:
        start = segment.start_point
        if current is None or current.distance_to(start) > _CONTINUITY_TOLERANCE:
            commands.append(f"M {_point(start, precision)}")
        commands.extend(segment_to_svg(segment, precision))
        current = segment.end_point

    if closed:
        commands.append("Z")
    return " ".join(commands)
