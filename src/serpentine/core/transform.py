"""Scaling of computed paths.

Scaling about the origin maps lines and Beziers point by point. A circular
arc stays circular under uniform scaling but becomes an elliptical arc when
the two factors differ in magnitude. Negative factors mirror the path, which
reverses the direction of every arc.
"""

import math

from serpentine.core.geometry import normalize_angle
from serpentine.domain import Arc, Bezier, EllipseArc, Line, PathData, Point, Segment


def _scale_point(point: Point, sx: float, sy: float) -> Point:
    return Point(point.x * sx, point.y * sy)


def _mirror_parameters(
    rotation: float, start: float, end: float, counterclockwise: bool, sx: float, sy: float
) -> tuple[float, float, float, bool]:
    """Rotation, angles and direction of an ellipse after sign flips.

    Flipping y negates the rotation and both parametric angles and reverses
    the direction. Flipping x is a y flip followed by a half-turn rotation.
    """
    if sy < 0:
        rotation, start, end, counterclockwise = -rotation, -start, -end, not counterclockwise
    if sx < 0:
        rotation, start, end, counterclockwise = -rotation, -start, -end, not counterclockwise
        rotation += math.pi
    return rotation, start, end, counterclockwise


def scale_segment(segment: Segment, sx: float, sy: float) -> Segment:
    """Scale one segment about the origin.

    Args:
        segment: Segment to scale
        sx: Horizontal factor (non-zero)
        sy: Vertical factor (non-zero)

    Returns:
        Scaled segment; an Arc turns into an EllipseArc when ``|sx| != |sy|``

    Raises:
        ValueError: If a factor is zero, or a rotated ellipse arc is scaled
            non-uniformly
    """
    if sx == 0 or sy == 0:
        raise ValueError("Scale factors must be non-zero")

    if isinstance(segment, Line):
        return Line(start=_scale_point(segment.start, sx, sy), end=_scale_point(segment.end, sx, sy))

    if isinstance(segment, Bezier):
        return Bezier(
            start=_scale_point(segment.start, sx, sy),
            cp1=_scale_point(segment.cp1, sx, sy),
            cp2=_scale_point(segment.cp2, sx, sy),
            end=_scale_point(segment.end, sx, sy),
        )

    if isinstance(segment, Arc):
        rotation, start, end, ccw = _mirror_parameters(
            0.0, segment.start_angle, segment.end_angle, segment.counterclockwise, sx, sy
        )
        # A circle is symmetric under rotation, so fold it into the angles
        start = normalize_angle(start + rotation)
        end = normalize_angle(end + rotation)
        center = _scale_point(segment.center, sx, sy)
        if abs(sx) == abs(sy):
            return Arc(center, segment.radius * abs(sx), start, end, ccw)
        return EllipseArc(
            center=center,
            radius_x=segment.radius * abs(sx),
            radius_y=segment.radius * abs(sy),
            rotation=0.0,
            start_angle=start,
            end_angle=end,
            counterclockwise=ccw,
        )

    if isinstance(segment, EllipseArc):
        uniform = abs(sx) == abs(sy)
        if not uniform and abs(math.sin(segment.rotation)) > 1e-12:
            raise ValueError("Non-uniform scaling of a rotated ellipse arc is not supported")
        rotation, start, end, ccw = _mirror_parameters(
            segment.rotation, segment.start_angle, segment.end_angle,
            segment.counterclockwise, sx, sy,
        )
        if not uniform:
            # Axis-aligned: rotation is 0 or pi, fold it into the angles
            start, end, rotation = start + rotation, end + rotation, 0.0
        return EllipseArc(
            center=_scale_point(segment.center, sx, sy),
            radius_x=segment.radius_x * abs(sx),
            radius_y=segment.radius_y * abs(sy),
            rotation=normalize_angle(rotation),
            start_angle=normalize_angle(start),
            end_angle=normalize_angle(end),
            counterclockwise=ccw,
        )

    raise TypeError(f"Unsupported segment type: {type(segment).__name__}")


def scale_path(path: PathData, sx: float, sy: float) -> PathData:
    """Scale every segment of a path about the origin.

    Args:
        path: Path to scale
        sx: Horizontal factor (non-zero)
        sy: Vertical factor (non-zero)

    Returns:
        New PathData with scaled segments
    """
    return PathData(segments=[scale_segment(segment, sx, sy) for segment in path.segments])
