"""Path topology options.

The editor exposes path topology as a single mode button that cycles
through five states. ``PathOptions`` stores the underlying flags and
derives the mode from them.
"""

from dataclasses import dataclass, replace
from enum import Enum


class PathMode(str, Enum):
    """Path topology as presented by the mode button.

    - TANGENT: Open path, tangent chain only
    - LEFT_ARC: Open path wrapping around the back of the first circle
    - RIGHT_ARC: Open path wrapping around the back of the last circle
    - BOTH_ARCS: Open path wrapping around both end circles
    - CLOSED: Closed loop from the last circle back to the first
    """

    TANGENT = "tangent"
    LEFT_ARC = "left-arc"
    RIGHT_ARC = "right-arc"
    BOTH_ARCS = "both-arcs"
    CLOSED = "closed"


_MODE_CYCLE = (
    PathMode.TANGENT,
    PathMode.LEFT_ARC,
    PathMode.RIGHT_ARC,
    PathMode.BOTH_ARCS,
    PathMode.CLOSED,
)


@dataclass(frozen=True, slots=True)
class PathOptions:
    """Topology flags and connector stretch for one hull computation.

    Attributes:
        closed: Treat the circle order as cyclic
        use_start_point: Wrap around the back of the first circle (open paths only)
        use_end_point: Wrap around the back of the last circle (open paths only)
        global_stretch: Connector bow; 0.0 keeps straight tangent lines
    """

    closed: bool = False
    use_start_point: bool = False
    use_end_point: bool = False
    global_stretch: float = 0.0

    @property
    def wraps_start(self) -> bool:
        """True when an open path gets a cap arc on its first circle."""
        return not self.closed and self.use_start_point

    @property
    def wraps_end(self) -> bool:
        """True when an open path gets a cap arc on its last circle."""
        return not self.closed and self.use_end_point

    @property
    def mode(self) -> PathMode:
        """Mode corresponding to the current flags."""
        if self.closed:
            return PathMode.CLOSED
        if self.use_start_point and self.use_end_point:
            return PathMode.BOTH_ARCS
        if self.use_start_point:
            return PathMode.LEFT_ARC
        if self.use_end_point:
            return PathMode.RIGHT_ARC
        return PathMode.TANGENT

    @classmethod
    def from_mode(cls, mode: PathMode, global_stretch: float = 0.0) -> "PathOptions":
        """Build options from a path mode.

        Args:
            mode: Desired path mode
            global_stretch: Connector stretch to carry over

        Returns:
            PathOptions with flags matching the mode
        """
        return cls(
            closed=mode == PathMode.CLOSED,
            use_start_point=mode in (PathMode.LEFT_ARC, PathMode.BOTH_ARCS),
            use_end_point=mode in (PathMode.RIGHT_ARC, PathMode.BOTH_ARCS),
            global_stretch=global_stretch,
        )

    def cycle_mode(self) -> "PathOptions":
        """Options for the next mode in button order, keeping the stretch."""
        index = _MODE_CYCLE.index(self.mode)
        next_mode = _MODE_CYCLE[(index + 1) % len(_MODE_CYCLE)]
        return PathOptions.from_mode(next_mode, global_stretch=self.global_stretch)

    def with_stretch(self, global_stretch: float) -> "PathOptions":
        """Copy of these options with a different stretch."""
        return replace(self, global_stretch=global_stretch)
