"""Core geometric input types.

This module defines the values the hull is computed from:
- Point: A 2D point
- Circle: A user-placed circle the path threads through
- MirrorConfig: The radial mirror symmetry applied to mirrored circles
"""

import math
from dataclasses import dataclass
from typing import Any

from serpentine.exceptions import InvalidCircleError, InvalidMirrorConfigError


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Circle:
    """A circle the hull threads through.

    Identity belongs to the caller; the geometry core only reads circles and
    never keeps them between calls. Mirror images produced by the expander
    carry a back-reference to the circle they were generated from.

    Attributes:
        id: Caller-owned identifier
        center: Center point
        radius: Radius, strictly positive
        mirrored: Whether the circle is duplicated under the mirror group
        source_id: Id of the source circle (mirror images only)
        mirror_index: Index of the group element that produced this image
    """

    id: str
    center: Point
    radius: float
    mirrored: bool = False
    source_id: str | None = None
    mirror_index: int = 0

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius <= 0:
            raise InvalidCircleError(self.id, f"radius must be positive, got {self.radius}")

    @property
    def is_mirror_image(self) -> bool:
        """True for circles generated by mirror expansion."""
        return self.source_id is not None

    def point_at(self, angle: float) -> Point:
        """Point on the circumference at the given angle.

        Args:
            angle: Angle in radians measured from the +x axis

        Returns:
            Point on the circle
        """
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the circle
        """
        data: dict[str, Any] = {
            "id": self.id,
            "x": self.center.x,
            "y": self.center.y,
            "radius": self.radius,
            "mirrored": self.mirrored,
        }
        if self.source_id is not None:
            data["source_id"] = self.source_id
            data["mirror_index"] = self.mirror_index
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Circle":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a circle

        Returns:
            Circle instance
        """
        return cls(
            id=str(data["id"]),
            center=Point(float(data["x"]), float(data["y"])),
            radius=float(data["radius"]),
            mirrored=bool(data.get("mirrored", False)),
            source_id=data.get("source_id"),
            mirror_index=int(data.get("mirror_index", 0)),
        )


@dataclass(frozen=True, slots=True)
class MirrorConfig:
    """Radial mirror symmetry.

    ``plane_count`` mirror planes pass through the origin, spaced ``pi / N``
    apart starting at ``start_angle``. Together they generate a dihedral group
    of order ``2N``. A plane count of zero disables mirroring.

    Attributes:
        plane_count: Number of mirror planes (N >= 0)
        start_angle: Angle of the first plane in radians
    """

    plane_count: int = 0
    start_angle: float = 0.0

    def __post_init__(self) -> None:
        if self.plane_count < 0:
            raise InvalidMirrorConfigError(
                f"plane_count must be >= 0, got {self.plane_count}"
            )

    @property
    def is_active(self) -> bool:
        """True when at least one mirror plane is configured."""
        return self.plane_count > 0

    @property
    def angle_step(self) -> float:
        """Angular spacing between adjacent planes (0.0 when inactive)."""
        if not self.is_active:
            return 0.0
        return math.pi / self.plane_count

    @property
    def group_order(self) -> int:
        """Number of elements in the generated symmetry group."""
        return 2 * self.plane_count if self.is_active else 1

    def plane_angles(self) -> list[float]:
        """Angles of every mirror plane line."""
        step = self.angle_step
        return [self.start_angle + i * step for i in range(self.plane_count)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"plane_count": self.plane_count, "start_angle": self.start_angle}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MirrorConfig":
        """Deserialize from dictionary."""
        return cls(
            plane_count=int(data.get("plane_count", 0)),
            start_angle=float(data.get("start_angle", 0.0)),
        )
