"""Geometric helpers shared by the hull, mirror and axis components.

This module provides core mathematical utilities for:
- Signed area calculation (shoelace formula)
- Domain-safe inverse cosine
- Angle normalization for points and for bidirectional axes
- Rotation and reflection about the origin

All functions are pure and stateless.
"""

import math

from serpentine.domain import TAU, Point


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def clamp_unit(value: float) -> float:
    """Clamp a value into [-1, 1]."""
    return max(-1.0, min(1.0, value))


def safe_acos(value: float) -> float:
    """Inverse cosine that tolerates ratios pushed past +/-1 by rounding.

    Args:
        value: Cosine value, possibly fractionally outside [-1, 1]

    Returns:
        Angle in [0, pi]
    """
    return math.acos(clamp_unit(value))


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi]."""
    return math.atan2(math.sin(angle), math.cos(angle))


def fold_axis_angle(angle: float) -> float:
    """Fold an angle into [0, pi).

    Axes are bidirectional lines, so ``a`` and ``a + pi`` name the same axis.
    """
    folded = angle % math.pi
    # Rounding in the modulo can land exactly on pi
    return 0.0 if folded >= math.pi else folded


def angular_offset(from_angle: float, to_angle: float, counterclockwise: bool) -> float:
    """Angle to travel from one direction to another, in [0, 2*pi).

    Args:
        from_angle: Starting direction in radians
        to_angle: Target direction in radians
        counterclockwise: Travel toward increasing angle when True

    Returns:
        Non-negative travel angle less than a full turn
    """
    raw = to_angle - from_angle if counterclockwise else from_angle - to_angle
    offset = raw % TAU
    return 0.0 if offset >= TAU else offset


def direction_angle(origin: Point, target: Point) -> float:
    """Angle of the vector from origin to target."""
    return math.atan2(target.y - origin.y, target.x - origin.x)


def rotate_about_origin(point: Point, angle: float) -> Point:
    """Rotate a point about the origin.

    Args:
        point: Point to rotate
        angle: Rotation in radians (counterclockwise positive)

    Returns:
        Rotated point
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(point.x * cos_a - point.y * sin_a, point.x * sin_a + point.y * cos_a)


def reflect_across_line(point: Point, line_angle: float) -> Point:
    """Reflect a point across a line through the origin.

    Reflection across the line at angle ``b`` is the rotation by ``2b`` of
    the point's mirror image across the x axis.

    Args:
        point: Point to reflect
        line_angle: Angle of the mirror line in radians

    Returns:
        Reflected point
    """
    cos_2b = math.cos(2.0 * line_angle)
    sin_2b = math.sin(2.0 * line_angle)
    return Point(point.x * cos_2b + point.y * sin_2b, point.x * sin_2b - point.y * cos_2b)
