"""Drawable path segments.

A computed path is an ordered list of segments drawn from a tagged union:
- Line: Straight tangent connector
- Bezier: Cubic connector bowed by the global stretch
- Arc: Circular arc around one circle
- EllipseArc: Elliptical arc (arcs under non-uniform scaling)

Every segment computes its ``length`` from its own parameters when it is
constructed, so a length can never disagree with the geometry it labels.
Lengths of curved segments without a closed form use fixed-step polyline
summation, which keeps repeated computations bit-identical.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from serpentine.domain.circle import Point
from serpentine.exceptions import SegmentFormatError

TAU = 2.0 * math.pi

# Fixed sample counts for polyline length summation
BEZIER_LENGTH_SAMPLES = 32
ELLIPSE_LENGTH_SAMPLES = 64


class SegmentType(str, Enum):
    """Tag identifying a segment's variant."""

    LINE = "line"
    BEZIER = "bezier"
    ARC = "arc"
    ELLIPSE_ARC = "ellipse-arc"


def arc_sweep(start_angle: float, end_angle: float, counterclockwise: bool) -> float:
    """Angle travelled from start to end in the given direction.

    Counterclockwise means toward increasing angle. The result lies in
    ``[0, 2*pi)``, except that an end angle a whole non-zero number of turns
    from the start counts as one full turn.

    Args:
        start_angle: Start angle in radians
        end_angle: End angle in radians
        counterclockwise: Direction of travel

    Returns:
        Swept angle in radians
    """
    raw = end_angle - start_angle if counterclockwise else start_angle - end_angle
    sweep = raw % TAU
    if sweep == 0.0 and raw != 0.0:
        return TAU
    return sweep


def _polyline_length(points: list[Point]) -> float:
    return sum(points[i].distance_to(points[i + 1]) for i in range(len(points) - 1))


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment between two points.

    Attributes:
        start: Start point
        end: End point
        length: Euclidean distance from start to end
    """

    start: Point
    end: Point
    length: float = field(init=False)

    segment_type: ClassVar[SegmentType] = SegmentType.LINE

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", self.start.distance_to(self.end))

    @property
    def start_point(self) -> Point:
        return self.start

    @property
    def end_point(self) -> Point:
        return self.end

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.segment_type.value,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "length": self.length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Line":
        return cls(start=Point.from_dict(data["start"]), end=Point.from_dict(data["end"]))


@dataclass(frozen=True, slots=True)
class Bezier:
    """Cubic Bezier segment.

    Attributes:
        start: Start point
        cp1: First control point
        cp2: Second control point
        end: End point
        length: Arc length from fixed-step polyline summation
    """

    start: Point
    cp1: Point
    cp2: Point
    end: Point
    length: float = field(init=False)

    segment_type: ClassVar[SegmentType] = SegmentType.BEZIER

    def __post_init__(self) -> None:
        samples = [self.point_at(i / BEZIER_LENGTH_SAMPLES) for i in range(BEZIER_LENGTH_SAMPLES + 1)]
        object.__setattr__(self, "length", _polyline_length(samples))

    @property
    def start_point(self) -> Point:
        return self.start

    @property
    def end_point(self) -> Point:
        return self.end

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t in [0, 1]."""
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3.0 * mt * mt * t
        c = 3.0 * mt * t * t
        d = t * t * t
        return Point(
            a * self.start.x + b * self.cp1.x + c * self.cp2.x + d * self.end.x,
            a * self.start.y + b * self.cp1.y + c * self.cp2.y + d * self.end.y,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.segment_type.value,
            "start": self.start.to_dict(),
            "cp1": self.cp1.to_dict(),
            "cp2": self.cp2.to_dict(),
            "end": self.end.to_dict(),
            "length": self.length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bezier":
        return cls(
            start=Point.from_dict(data["start"]),
            cp1=Point.from_dict(data["cp1"]),
            cp2=Point.from_dict(data["cp2"]),
            end=Point.from_dict(data["end"]),
        )


@dataclass(frozen=True, slots=True)
class Arc:
    """Circular arc.

    Angles are measured from the +x axis with ``atan2``; a counterclockwise
    arc travels toward increasing angle.

    Attributes:
        center: Circle center
        radius: Circle radius
        start_angle: Angle of the start point in radians
        end_angle: Angle of the end point in radians
        counterclockwise: Direction of travel
        length: ``radius * sweep``
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    counterclockwise: bool
    length: float = field(init=False)

    segment_type: ClassVar[SegmentType] = SegmentType.ARC

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", self.radius * self.sweep)

    @property
    def sweep(self) -> float:
        """Swept angle in radians."""
        return arc_sweep(self.start_angle, self.end_angle, self.counterclockwise)

    def point_at_angle(self, angle: float) -> Point:
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    @property
    def start_point(self) -> Point:
        return self.point_at_angle(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at_angle(self.end_angle)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.segment_type.value,
            "center": self.center.to_dict(),
            "radius": self.radius,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "counterclockwise": self.counterclockwise,
            "length": self.length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Arc":
        return cls(
            center=Point.from_dict(data["center"]),
            radius=float(data["radius"]),
            start_angle=float(data["start_angle"]),
            end_angle=float(data["end_angle"]),
            counterclockwise=bool(data["counterclockwise"]),
        )


@dataclass(frozen=True, slots=True)
class EllipseArc:
    """Elliptical arc.

    Points are ``center + R(rotation) * (radius_x * cos t, radius_y * sin t)``
    for parametric angle ``t`` running from ``start_angle`` to ``end_angle``.

    Attributes:
        center: Ellipse center
        radius_x: Semi-axis along the rotated x direction
        radius_y: Semi-axis along the rotated y direction
        rotation: Rotation of the x semi-axis in radians
        start_angle: Parametric start angle
        end_angle: Parametric end angle
        counterclockwise: Direction of travel in parameter space
        length: Exact for circular radii, fixed-step polyline otherwise
    """

    center: Point
    radius_x: float
    radius_y: float
    rotation: float
    start_angle: float
    end_angle: float
    counterclockwise: bool
    length: float = field(init=False)

    segment_type: ClassVar[SegmentType] = SegmentType.ELLIPSE_ARC

    def __post_init__(self) -> None:
        sweep = self.sweep
        if self.radius_x == self.radius_y:
            length = self.radius_x * sweep
        else:
            direction = 1.0 if self.counterclockwise else -1.0
            step = direction * sweep / ELLIPSE_LENGTH_SAMPLES
            samples = [
                self.point_at_angle(self.start_angle + i * step)
                for i in range(ELLIPSE_LENGTH_SAMPLES + 1)
            ]
            length = _polyline_length(samples)
        object.__setattr__(self, "length", length)

    @property
    def sweep(self) -> float:
        """Swept parametric angle in radians."""
        return arc_sweep(self.start_angle, self.end_angle, self.counterclockwise)

    def point_at_angle(self, t: float) -> Point:
        local_x = self.radius_x * math.cos(t)
        local_y = self.radius_y * math.sin(t)
        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        return Point(
            self.center.x + local_x * cos_r - local_y * sin_r,
            self.center.y + local_x * sin_r + local_y * cos_r,
        )

    @property
    def start_point(self) -> Point:
        return self.point_at_angle(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at_angle(self.end_angle)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.segment_type.value,
            "center": self.center.to_dict(),
            "radius_x": self.radius_x,
            "radius_y": self.radius_y,
            "rotation": self.rotation,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "counterclockwise": self.counterclockwise,
            "length": self.length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EllipseArc":
        return cls(
            center=Point.from_dict(data["center"]),
            radius_x=float(data["radius_x"]),
            radius_y=float(data["radius_y"]),
            rotation=float(data.get("rotation", 0.0)),
            start_angle=float(data["start_angle"]),
            end_angle=float(data["end_angle"]),
            counterclockwise=bool(data["counterclockwise"]),
        )


Segment = Line | Bezier | Arc | EllipseArc

_SEGMENT_CLASSES: dict[str, type[Line] | type[Bezier] | type[Arc] | type[EllipseArc]] = {
    SegmentType.LINE.value: Line,
    SegmentType.BEZIER.value: Bezier,
    SegmentType.ARC.value: Arc,
    SegmentType.ELLIPSE_ARC.value: EllipseArc,
}


def segment_from_dict(data: dict[str, Any]) -> Segment:
    """Deserialize any segment variant from its dictionary form.

    Stored lengths are ignored and recomputed from the geometry.

    Args:
        data: Dictionary with a ``type`` tag

    Returns:
        Segment instance

    Raises:
        SegmentFormatError: If the tag is unknown or fields are missing
    """
    segment_type = data.get("type")
    segment_class = _SEGMENT_CLASSES.get(str(segment_type))
    if segment_class is None:
        raise SegmentFormatError(f"unknown segment type {segment_type!r}")
    try:
        return segment_class.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise SegmentFormatError(f"{segment_type}: {e}") from e
