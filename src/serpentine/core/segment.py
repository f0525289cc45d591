"""Outer tangent computation between consecutive circles.

The hull only ever uses the external tangent of a pair: the path must never
pass between two circles. Which of the two external tangents is used
depends on the path's handedness, so the tangent always sits on the outer
side of the traversal.

Key classes:
- SegmentFactory: Computes tangent pairs and builds connector segments
- TangentPair: Tangent points of a non-degenerate pair
- DegeneratePair: Marker for a pair where one disk contains the other
"""

import math
from dataclasses import dataclass

from serpentine.core.geometry import direction_angle, normalize_angle, safe_acos
from serpentine.domain import Bezier, Circle, Line, Point


@dataclass(frozen=True, slots=True)
class TangentPair:
    """Tangent connection from one circle to the next.

    For a straight tangent both angles are equal: the two radii to the
    tangent points are parallel. A bowed connector rotates its end points
    apart by ``bow`` radians on each circle.

    Attributes:
        source: Circle the connector leaves
        target: Circle the connector arrives at
        start_angle: Angle of the start point on the source circle
        end_angle: Angle of the end point on the target circle
        bow: Rotation applied to both end points (0.0 for a straight line)
    """

    source: Circle
    target: Circle
    start_angle: float
    end_angle: float
    bow: float = 0.0

    @property
    def start(self) -> Point:
        return self.source.point_at(self.start_angle)

    @property
    def end(self) -> Point:
        return self.target.point_at(self.end_angle)


@dataclass(frozen=True, slots=True)
class DegeneratePair:
    """Pair without an external tangent.

    One disk lies inside the other (``d <= |r1 - r2|``), or the centers
    coincide.

    Attributes:
        source: First circle of the pair
        target: Second circle of the pair
        inner_is_source: True when the source is the contained circle
    """

    source: Circle
    target: Circle
    inner_is_source: bool

    @property
    def inner(self) -> Circle:
        return self.source if self.inner_is_source else self.target


class SegmentFactory:
    """Computes external tangents for one fixed path handedness.

    For a counterclockwise path the outside of the hull lies to the right of
    travel, so the tangent normal is the center-to-center direction rotated
    by ``-phi``; a clockwise path uses ``+phi``.
    """

    def __init__(self, counterclockwise: bool) -> None:
        """Initialize factory.

        Args:
            counterclockwise: Path handedness; arcs travel toward increasing angle
        """
        self.counterclockwise = counterclockwise
        self._direction = 1.0 if counterclockwise else -1.0

    def tangent(self, source: Circle, target: Circle) -> TangentPair | DegeneratePair:
        """Compute the outer tangent from source to target.

        Args:
            source: Circle the tangent leaves
            target: Circle the tangent arrives at

        Returns:
            TangentPair, or DegeneratePair when one disk contains the other
        """
        r1 = source.radius
        r2 = target.radius
        distance = source.center.distance_to(target.center)

        if distance == 0.0 or distance <= abs(r1 - r2):
            return DegeneratePair(source=source, target=target, inner_is_source=r1 < r2)

        theta = direction_angle(source.center, target.center)
        phi = safe_acos((r1 - r2) / distance)
        normal = normalize_angle(theta - self._direction * phi)

        return TangentPair(source=source, target=target, start_angle=normal, end_angle=normal)

    def bow(self, pair: TangentPair, angle: float) -> TangentPair:
        """Rotate a pair's end points to bow the connector.

        A positive angle pulls both ends back into their circles' outer
        arcs so the connector bulges away from the hull; a negative angle
        bends it inward.

        Args:
            pair: Straight tangent pair
            angle: Rotation applied to each end point in radians

        Returns:
            New TangentPair with rotated end points
        """
        if angle == 0.0:
            return pair
        shift = self._direction * angle
        return TangentPair(
            source=pair.source,
            target=pair.target,
            start_angle=normalize_angle(pair.start_angle - shift),
            end_angle=normalize_angle(pair.end_angle + shift),
            bow=angle,
        )

    def connector(self, pair: TangentPair) -> Line | Bezier:
        """Build the segment joining a pair's tangent points.

        Straight pairs become a Line. Bowed pairs become a Bezier whose
        control handles follow the circle tangents at each end, so the
        curve meets the neighbouring arcs without a corner.

        Args:
            pair: Tangent pair

        Returns:
            Line or Bezier from the source tangent point to the target one
        """
        start = pair.start
        end = pair.end
        if pair.bow == 0.0:
            return Line(start=start, end=end)

        handle = start.distance_to(end) / 3.0
        out_x, out_y = self._travel_direction(pair.start_angle)
        in_x, in_y = self._travel_direction(pair.end_angle)
        return Bezier(
            start=start,
            cp1=Point(start.x + handle * out_x, start.y + handle * out_y),
            cp2=Point(end.x - handle * in_x, end.y - handle * in_y),
            end=end,
        )

    def _travel_direction(self, angle: float) -> tuple[float, float]:
        """Unit direction of travel along a circle at the given angle."""
        return (-self._direction * math.sin(angle), self._direction * math.cos(angle))
