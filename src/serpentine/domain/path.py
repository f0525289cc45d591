"""Computed path container."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from serpentine.domain.segment import Segment, SegmentType, segment_from_dict


@dataclass
class PathData:
    """Ordered list of drawable segments produced by the hull builder.

    An empty segment list is a normal "nothing to draw" result.

    Attributes:
        segments: Segments in traversal order
    """

    segments: list[Segment] = field(default_factory=list)

    @property
    def total_length(self) -> float:
        """Sum of all segment lengths."""
        return sum(segment.length for segment in self.segments)

    def is_empty(self) -> bool:
        """Check if there is nothing to draw.

        Returns:
            True if the path has no segments
        """
        return len(self.segments) == 0

    def count_by_type(self) -> dict[SegmentType, int]:
        """Number of segments of each type present in the path."""
        return dict(Counter(segment.segment_type for segment in self.segments))

    def is_continuous(self, tolerance: float = 1e-6, closed: bool = False) -> bool:
        """Check that every segment starts where the previous one ended.

        Args:
            tolerance: Maximum allowed gap between consecutive segments
            closed: Also require the last segment to end at the first one's start

        Returns:
            True if the path has no gaps larger than the tolerance
        """
        pairs = list(zip(self.segments, self.segments[1:]))
        if closed and self.segments:
            pairs.append((self.segments[-1], self.segments[0]))
        return all(
            prev.end_point.distance_to(nxt.start_point) <= tolerance
            for prev, nxt in pairs
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the serialized segments and total length
        """
        return {
            "segments": [segment.to_dict() for segment in self.segments],
            "total_length": self.total_length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathData":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            PathData instance
        """
        return cls(segments=[segment_from_dict(s) for s in data.get("segments", [])])
