"""Symmetry-axis constraints for interactive dragging.

When a drag is constrained, the raw pointer delta is collapsed onto the
nearest of a small set of axes: the two cardinal axes plus, under mirror
symmetry, every mirror plane and every bisector between adjacent planes.
Axes are bidirectional lines, so every angle is kept in ``[0, pi)``.
"""

import math
from collections.abc import Sequence

from serpentine.config import AxisConfig
from serpentine.core.geometry import fold_axis_angle
from serpentine.domain import MirrorConfig, Point

AXIS_DEDUP_TOLERANCE = 0.001


def calculate_constraint_axes(
    mirror_config: MirrorConfig, tolerance: float = AXIS_DEDUP_TOLERANCE
) -> list[float]:
    """Calculate all constraint axes for a mirror configuration.

    For N planes the candidates are the cardinal axes (0 and pi/2), each
    plane angle ``start + i*pi/N`` and each bisector ``start + (i + 0.5)*pi/N``.

    Args:
        mirror_config: Mirror configuration
        tolerance: Angles closer than this count as the same axis

    Returns:
        Sorted, deduplicated axis angles in [0, pi)

    Examples:
        >>> calculate_constraint_axes(MirrorConfig(plane_count=0))
        [0.0, 1.5707963267948966]
    """
    candidates = [0.0, math.pi / 2]

    if mirror_config.is_active:
        step = mirror_config.angle_step
        candidates.extend(mirror_config.plane_angles())
        candidates.extend(
            mirror_config.start_angle + (i + 0.5) * step
            for i in range(mirror_config.plane_count)
        )

    axes: list[float] = []
    for angle in candidates:
        folded = fold_axis_angle(angle)
        # Just below pi is the same line as 0
        if math.pi - folded < tolerance:
            folded = 0.0
        if all(abs(folded - axis) >= tolerance for axis in axes):
            axes.append(folded)

    return sorted(axes)


def _axis_distance(angle: float, axis: float) -> float:
    """Angular distance between two folded angles, across the 0/pi seam."""
    return min(
        abs(angle - axis),
        abs(angle - axis + math.pi),
        abs(angle - axis - math.pi),
    )


def constrain_to_nearest_axis(delta: Point, axes: Sequence[float]) -> Point:
    """Project a movement vector onto the nearest constraint axis.

    The result is the vector projection of ``delta`` onto the axis line, so
    its magnitude is generally smaller than ``|delta|``.

    Args:
        delta: Desired movement vector
        axes: Constraint axis angles in [0, pi)

    Returns:
        Constrained movement vector; ``delta`` itself when it has zero length
        or no axes are given

    Examples:
        >>> constrain_to_nearest_axis(Point(3.0, 4.0), [0.0])
        Point(x=3.0, y=0.0)
    """
    if (delta.x == 0 and delta.y == 0) or not axes:
        return delta

    movement = fold_axis_angle(math.atan2(delta.y, delta.x))
    closest = min(axes, key=lambda axis: _axis_distance(movement, axis))

    # Project onto both directions along the axis and keep the stronger one
    cos1 = math.cos(closest)
    sin1 = math.sin(closest)
    cos2 = math.cos(closest + math.pi)
    sin2 = math.sin(closest + math.pi)

    proj1 = delta.x * cos1 + delta.y * sin1
    proj2 = delta.x * cos2 + delta.y * sin2

    if abs(proj1) >= abs(proj2):
        return Point(proj1 * cos1, proj1 * sin1)
    return Point(proj2 * cos2, proj2 * sin2)


class AxisConstraintSolver:
    """Snaps drag deltas to the axes of one mirror configuration.

    The axis set is computed once per configuration; create a new solver
    when the configuration changes.

    Example:
        solver = AxisConstraintSolver(MirrorConfig(plane_count=3))
        snapped = solver.constrain(Point(dx, dy))
    """

    def __init__(self, mirror_config: MirrorConfig, config: AxisConfig | None = None) -> None:
        """Initialize solver.

        Args:
            mirror_config: Mirror configuration defining the axes
            config: Axis settings (defaults when None)
        """
        self.mirror_config = mirror_config
        self.config = config or AxisConfig()
        self.axes = calculate_constraint_axes(mirror_config, self.config.dedup_tolerance)

    def constrain(self, delta: Point) -> Point:
        """Project a drag delta onto the nearest axis."""
        return constrain_to_nearest_axis(delta, self.axes)

    def nearest_axis(self, delta: Point) -> float | None:
        """Angle of the axis a delta would snap to (None for a zero delta)."""
        if delta.x == 0 and delta.y == 0:
            return None
        movement = fold_axis_angle(math.atan2(delta.y, delta.x))
        return min(self.axes, key=lambda axis: _axis_distance(movement, axis))
