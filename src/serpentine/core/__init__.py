"""Core geometry algorithms for serpentine.

This module contains the core algorithms for:

- Outer tangent computation between circle pairs
- Radial mirror expansion of circles
- Tangent hull construction (connectors, arcs, topology variants)
- Symmetry-axis constraints for interactive dragging
- Path bounds, SVG serialization and scaling

All services are designed to be:
- Stateless (safe to call from anywhere, safe to memoize)
- Pure (no side effects beyond debug logging)
- Free of exceptions for geometric degeneracy

Key functions:
- compute_tangent_hull: Build a path from circles, order and flags
- calculate_constraint_axes: Axis angles for a mirror configuration
- constrain_to_nearest_axis: Project a drag delta onto the nearest axis
- calculate_path_bounds: Full geometric extent of a path
- path_to_svg: SVG path data for a path
- scale_path: Scale a path about the origin

Key classes:
- SegmentFactory: External tangents for one handedness
- MirrorExpander: Circle orbits under the mirror group
- TangentHullBuilder: Orchestrates hull construction
- AxisConstraintSolver: Snaps deltas for one mirror configuration
"""

from serpentine.core.axis import (
    AxisConstraintSolver,
    calculate_constraint_axes,
    constrain_to_nearest_axis,
)
from serpentine.core.bounds import Bounds, calculate_path_bounds, segment_bounds
from serpentine.core.geometry import signed_area
from serpentine.core.hull import TangentHullBuilder, compute_tangent_hull
from serpentine.core.mirror import MirrorExpander
from serpentine.core.segment import DegeneratePair, SegmentFactory, TangentPair
from serpentine.core.svg import path_to_svg
from serpentine.core.transform import scale_path, scale_segment

__all__ = [
    # Axis constraints
    "AxisConstraintSolver",
    # Bounds
    "Bounds",
    "DegeneratePair",
    # Mirror expansion
    "MirrorExpander",
    # Tangents
    "SegmentFactory",
    # Hull
    "TangentHullBuilder",
    "TangentPair",
    "calculate_constraint_axes",
    "calculate_path_bounds",
    "compute_tangent_hull",
    "constrain_to_nearest_axis",
    "path_to_svg",
    "scale_path",
    "scale_segment",
    "segment_bounds",
    "signed_area",
]
