"""Domain models for serpentine.

This module contains the value types exchanged with the geometry core:
circles and mirror settings going in, segments and paths coming out. All
models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Free of rendering or document-store concerns

Key classes:
- Point: A 2D point
- Circle: A circle the path threads through
- MirrorConfig: Radial mirror symmetry settings
- PathOptions: Topology flags and connector stretch
- Line, Bezier, Arc, EllipseArc: Drawable segment variants
- PathData: Ordered segment list
"""

from serpentine.domain.circle import Circle, MirrorConfig, Point
from serpentine.domain.options import PathMode, PathOptions
from serpentine.domain.path import PathData
from serpentine.domain.segment import (
    TAU,
    Arc,
    Bezier,
    EllipseArc,
    Line,
    Segment,
    SegmentType,
    arc_sweep,
    segment_from_dict,
)

__all__: list[str] = [
    "TAU",
    # Enums
    "PathMode",
    "SegmentType",
    # Core types
    "Point",
    "Circle",
    "MirrorConfig",
    "PathOptions",
    "Line",
    "Bezier",
    "Arc",
    "EllipseArc",
    "Segment",
    "PathData",
    # Helpers
    "arc_sweep",
    "segment_from_dict",
]
