"""Radial mirror expansion of circles.

A mirror configuration with N planes through the origin generates a
dihedral group of order 2N: N rotations by multiples of ``2*pi/N`` and N
reflections across the plane lines. Each mirrored circle is replaced by its
orbit under that group.
"""

import logging
import math

from serpentine.core.geometry import angular_offset, reflect_across_line, rotate_about_origin
from serpentine.domain import Circle, MirrorConfig, Point

logger = logging.getLogger(__name__)


class MirrorExpander:
    """Expands mirrored circles into their full set of images.

    Group elements are indexed ``0..2N-1``: indices below N are rotations by
    ``2*pi*k/N`` (index 0 is the identity), indices from N on are
    reflections across plane ``k - N``.

    Example:
        expander = MirrorExpander()
        circles = expander.expand(circles, MirrorConfig(plane_count=2))
    """

    def expand(self, circles: list[Circle], mirror_config: MirrorConfig) -> list[Circle]:
        """Replace every mirrored circle by its orbit, keeping order.

        The images of a circle are inserted where the circle stood, so the
        traversal stays local to the source instead of jumping to the end of
        the sequence.

        Args:
            circles: Circles in traversal order
            mirror_config: Mirror symmetry to apply

        Returns:
            New list with mirrored circles expanded; unchanged copy when the
            configuration has no planes
        """
        if not mirror_config.is_active:
            return list(circles)

        expanded: list[Circle] = []
        for circle in circles:
            if circle.mirrored:
                expanded.extend(self.orbit(circle, mirror_config))
            else:
                expanded.append(circle)

        logger.debug(
            "Mirror expansion: %d circles -> %d (planes=%d)",
            len(circles), len(expanded), mirror_config.plane_count
        )
        return expanded

    def orbit(self, circle: Circle, mirror_config: MirrorConfig) -> list[Circle]:
        """All images of one circle under the mirror group.

        The source circle comes first, followed by the other images in
        counterclockwise order of their polar angle around the origin.

        Args:
            circle: Source circle
            mirror_config: Mirror symmetry to apply

        Returns:
            ``2N`` circles (the source itself for N = 0)
        """
        if not mirror_config.is_active:
            return [circle]

        source_angle = math.atan2(circle.center.y, circle.center.x)
        images: list[tuple[float, int, Circle]] = []

        for index in range(1, mirror_config.group_order):
            center = self.apply(index, circle.center, mirror_config)
            image = Circle(
                id=f"{circle.id}@{index}",
                center=center,
                radius=circle.radius,
                mirrored=False,
                source_id=circle.id,
                mirror_index=index,
            )
            offset = angular_offset(source_angle, math.atan2(center.y, center.x), True)
            images.append((offset, index, image))

        images.sort(key=lambda item: (item[0], item[1]))
        return [circle, *(image for _, _, image in images)]

    def apply(self, index: int, point: Point, mirror_config: MirrorConfig) -> Point:
        """Apply one group element to a point.

        Args:
            index: Group element index in ``0..2N-1``
            point: Point to transform
            mirror_config: Mirror symmetry defining the group

        Returns:
            Transformed point
        """
        n = mirror_config.plane_count
        if index < n:
            return rotate_about_origin(point, 2.0 * math.pi * index / n)
        plane = index - n
        return reflect_across_line(point, mirror_config.start_angle + plane * mirror_config.angle_step)
