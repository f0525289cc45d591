"""Tangent hull construction.

This module turns an ordered set of circles into the drawable outline that
threads them:

1. Resolve the traversal order and expand mirrored circles
2. Fix the path handedness from the signed area of the ordered centers
3. Drop circles nested inside a neighbour (no external tangent exists)
4. Compute the outer tangent of each adjacent pair (plus the wrap pair of a
   closed path)
5. Stitch arcs around each circle between consecutive tangent points,
   adding cap arcs on the end circles of open paths when requested

The computation is pure: identical inputs always produce identical segments.

Key classes:
- TangentHullBuilder: Orchestrates the steps above

Key functions:
- compute_tangent_hull: One-call convenience wrapper
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from serpentine.config import HullConfig
from serpentine.core.geometry import angular_offset, direction_angle, signed_area
from serpentine.core.mirror import MirrorExpander
from serpentine.core.segment import DegeneratePair, SegmentFactory, TangentPair
from serpentine.domain import TAU, Arc, Circle, MirrorConfig, PathData, PathOptions, Segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _ArcSlot:
    """Place in the layout where an arc wraps one circle.

    Attributes:
        circle: Circle the arc runs around
        incoming: Index of the pair arriving at the circle (None for a start cap)
        outgoing: Index of the pair leaving the circle (None for an end cap)
        back_angle: Cap end point angle on the side without a pair
    """

    circle: Circle
    incoming: int | None
    outgoing: int | None
    back_angle: float = 0.0

    def angles(self, pairs: list[TangentPair]) -> tuple[float, float]:
        start = pairs[self.incoming].end_angle if self.incoming is not None else self.back_angle
        end = pairs[self.outgoing].start_angle if self.outgoing is not None else self.back_angle
        return start, end

    def touching(self) -> list[int]:
        return [i for i in (self.incoming, self.outgoing) if i is not None]


class TangentHullBuilder:
    """Builds tangent hull paths from circles, order and topology options.

    Manages the complete computation:
    1. Filter the order to existing circles and expand mirror images
    2. Choose one handedness for the whole path
    3. Reduce nested circles, compute tangents, bow connectors
    4. Lay out connectors and arcs in traversal order

    Example:
        builder = TangentHullBuilder()
        path = builder.build(
            circles=[a, b],
            order=["a", "b"],
            options=PathOptions(closed=True),
        )
    """

    def __init__(
        self,
        config: HullConfig | None = None,
        expander: MirrorExpander | None = None,
    ) -> None:
        """Initialize hull builder.

        Args:
            config: Hull settings (defaults when None)
            expander: Mirror expander (a fresh one when None)
        """
        self.config = config or HullConfig()
        self.expander = expander or MirrorExpander()

    def build(
        self,
        circles: Sequence[Circle],
        order: Sequence[str],
        options: PathOptions | None = None,
        mirror_config: MirrorConfig | None = None,
    ) -> PathData:
        """Compute the tangent hull.

        Args:
            circles: Available circles
            order: Circle ids in traversal order; unknown ids are ignored
            options: Topology flags and stretch (open tangent chain when None)
            mirror_config: Mirror symmetry (none when None)

        Returns:
            PathData with segments in traversal order; empty when fewer than
            two circles take part
        """
        options = options or PathOptions()
        mirror_config = mirror_config or MirrorConfig()

        sequence = self.expander.expand(self.resolve_order(circles, order), mirror_config)
        if len(sequence) < 2:
            return PathData()

        counterclockwise = signed_area([circle.center for circle in sequence]) >= 0.0
        factory = SegmentFactory(counterclockwise)

        survivors, pairs = self._tangent_pairs(sequence, factory, options.closed)
        if len(survivors) < 2:
            return PathData(segments=self._lone_circle(survivors, options, counterclockwise))

        layout = self._layout(survivors, pairs, options)
        if options.global_stretch != 0.0:
            pairs = self._bow_pairs(pairs, layout, factory, options.global_stretch)

        segments: list[Segment] = []
        for item in layout:
            if isinstance(item, _ArcSlot):
                start, end = item.angles(pairs)
                arc = self._arc(item.circle, start, end, counterclockwise)
                if arc is not None:
                    segments.append(arc)
            else:
                segments.append(factory.connector(pairs[item]))

        logger.debug(
            "Tangent hull: %d circles (%d after nesting), %d segments, ccw=%s",
            len(sequence), len(survivors), len(segments), counterclockwise
        )
        return PathData(segments=segments)

    @staticmethod
    def resolve_order(circles: Sequence[Circle], order: Sequence[str]) -> list[Circle]:
        """Map ids to circles, silently dropping ids with no circle.

        Args:
            circles: Available circles
            order: Circle ids in traversal order

        Returns:
            Circles in traversal order
        """
        by_id = {circle.id: circle for circle in circles}
        return [by_id[circle_id] for circle_id in order if circle_id in by_id]

    @staticmethod
    def _adjacent_indices(count: int, closed: bool) -> list[tuple[int, int]]:
        if closed:
            return [(i, (i + 1) % count) for i in range(count)]
        return [(i, i + 1) for i in range(count - 1)]

    def _tangent_pairs(
        self, sequence: list[Circle], factory: SegmentFactory, closed: bool
    ) -> tuple[list[Circle], list[TangentPair]]:
        """Compute tangents, dropping the inner circle of any nested pair.

        Removing a circle makes its neighbours adjacent, which can expose a
        new nested pair, so the scan restarts until every pair has a tangent.

        Returns:
            Surviving circles and one tangent pair per adjacent pair
        """
        survivors = list(sequence)
        while len(survivors) >= 2:
            pairs: list[TangentPair] = []
            for i, j in self._adjacent_indices(len(survivors), closed):
                result = factory.tangent(survivors[i], survivors[j])
                if isinstance(result, DegeneratePair):
                    logger.debug(
                        "Dropping nested circle %s (inside %s)",
                        result.inner.id,
                        result.target.id if result.inner_is_source else result.source.id,
                    )
                    del survivors[i if result.inner_is_source else j]
                    break
                pairs.append(result)
            else:
                return survivors, pairs
        return survivors, []

    def _layout(
        self, survivors: list[Circle], pairs: list[TangentPair], options: PathOptions
    ) -> list[int | _ArcSlot]:
        """Order connectors (pair indices) and arc slots along the path."""
        count = len(pairs)
        layout: list[int | _ArcSlot] = []

        if options.wraps_start:
            first, second = survivors[0], survivors[1]
            back = direction_angle(second.center, first.center)
            layout.append(_ArcSlot(first, incoming=None, outgoing=0, back_angle=back))

        for k in range(count):
            layout.append(k)
            if options.closed:
                layout.append(_ArcSlot(pairs[k].target, incoming=k, outgoing=(k + 1) % count))
            elif k + 1 < count:
                layout.append(_ArcSlot(pairs[k].target, incoming=k, outgoing=k + 1))

        if options.wraps_end:
            previous, last = survivors[-2], survivors[-1]
            back = direction_angle(previous.center, last.center)
            layout.append(_ArcSlot(last, incoming=count - 1, outgoing=None, back_angle=back))

        return layout

    def _bow_pairs(
        self,
        pairs: list[TangentPair],
        layout: list[int | _ArcSlot],
        factory: SegmentFactory,
        stretch: float,
    ) -> list[TangentPair]:
        """Rotate connector end points according to the global stretch.

        The rotation is limited per connector so that no neighbouring arc
        can shrink past zero (positive stretch) or grow past a full turn
        (negative stretch); each arc's room is shared between the
        connectors touching it.
        """
        requested = stretch * self.config.max_stretch_angle
        requested = max(-math.pi / 2, min(math.pi / 2, requested))
        if requested == 0.0:
            return pairs

        limits = [abs(requested)] * len(pairs)
        for item in layout:
            if not isinstance(item, _ArcSlot):
                continue
            start, end = item.angles(pairs)
            sweep = self._sweep(start, end, factory.counterclockwise)
            room = sweep if requested > 0 else TAU - sweep
            touching = item.touching()
            for index in touching:
                limits[index] = min(limits[index], room / len(touching))

        return [
            factory.bow(pair, math.copysign(limit, requested))
            for pair, limit in zip(pairs, limits)
        ]

    def _sweep(self, start: float, end: float, counterclockwise: bool) -> float:
        """Arc sweep with near-zero and near-full-turn values treated as zero."""
        sweep = angular_offset(start, end, counterclockwise)
        if sweep < self.config.min_arc_sweep or TAU - sweep < self.config.min_arc_sweep:
            return 0.0
        return sweep

    def _arc(self, circle: Circle, start: float, end: float, counterclockwise: bool) -> Arc | None:
        if self._sweep(start, end, counterclockwise) == 0.0:
            return None
        return Arc(
            center=circle.center,
            radius=circle.radius,
            start_angle=start,
            end_angle=end,
            counterclockwise=counterclockwise,
        )

    @staticmethod
    def _lone_circle(
        survivors: list[Circle], options: PathOptions, counterclockwise: bool
    ) -> list[Segment]:
        """Segments when nesting leaves a single circle.

        A closed path becomes the circle itself, drawn as two half arcs; an
        open path has nothing to connect.
        """
        if not options.closed or not survivors:
            return []
        circle = survivors[0]
        return [
            Arc(circle.center, circle.radius, 0.0, math.pi, counterclockwise),
            Arc(circle.center, circle.radius, math.pi, 0.0, counterclockwise),
        ]


def compute_tangent_hull(
    circles: Sequence[Circle],
    order: Sequence[str],
    stretch: float = 0.0,
    closed: bool = False,
    use_start: bool = False,
    use_end: bool = False,
    mirror_config: MirrorConfig | None = None,
    config: HullConfig | None = None,
) -> PathData:
    """Compute the tangent hull for one set of inputs.

    Args:
        circles: Available circles
        order: Circle ids in traversal order; unknown ids are ignored
        stretch: Connector bow; 0.0 keeps straight tangent lines
        closed: Treat the order as cyclic
        use_start: Wrap around the back of the first circle (open paths)
        use_end: Wrap around the back of the last circle (open paths)
        mirror_config: Mirror symmetry (none when None)
        config: Hull settings (defaults when None)

    Returns:
        PathData with segments in traversal order
    """
    options = PathOptions(
        closed=closed,
        use_start_point=use_start,
        use_end_point=use_end,
        global_stretch=stretch,
    )
    builder = TangentHullBuilder(config=config)
    return builder.build(circles, order, options, mirror_config)
