"""Unit tests for radial mirror expansion."""

import math

import pytest

from serpentine.core.mirror import MirrorExpander
from serpentine.domain import Circle, MirrorConfig, Point


@pytest.fixture
def expander():
    return MirrorExpander()


class TestMirrorExpander:
    """Tests for MirrorExpander class."""

    def test_inactive_config_is_identity(self, expander):
        """Test zero planes leaves the sequence unchanged."""
        circles = [Circle("a", Point(1, 2), 1.0, mirrored=True), Circle("b", Point(5, 0), 1.0)]
        result = expander.expand(circles, MirrorConfig())
        assert result == circles
        assert result is not circles

    @pytest.mark.parametrize("planes", [1, 2, 3, 6])
    def test_orbit_size(self, expander, planes):
        """Test a mirrored circle expands to 2N circles."""
        circle = Circle("c", Point(5, 1), 1.5, mirrored=True)
        orbit = expander.orbit(circle, MirrorConfig(plane_count=planes))
        assert len(orbit) == 2 * planes
        assert all(image.radius == 1.5 for image in orbit)

    def test_images_keep_back_reference(self, expander):
        """Test images point back to their source."""
        circle = Circle("c", Point(5, 1), 1.0, mirrored=True)
        orbit = expander.orbit(circle, MirrorConfig(plane_count=2))

        assert orbit[0] is circle
        for image in orbit[1:]:
            assert image.source_id == "c"
            assert image.is_mirror_image
            assert not image.mirrored
            assert image.id == f"c@{image.mirror_index}"

    def test_orbit_order_is_counterclockwise(self, expander):
        """Test images follow the source in counterclockwise polar order."""
        circle = Circle("c", Point(5, 1), 1.0, mirrored=True)
        orbit = expander.orbit(circle, MirrorConfig(plane_count=2))

        centers = [(round(c.center.x, 9), round(c.center.y, 9)) for c in orbit]
        assert centers == [(5.0, 1.0), (-5.0, 1.0), (-5.0, -1.0), (5.0, -1.0)]

    def test_orbit_radius_preserved(self, expander):
        """Test every image lies at the source's distance from the origin."""
        circle = Circle("c", Point(3, 4), 1.0, mirrored=True)
        for image in expander.orbit(circle, MirrorConfig(plane_count=5, start_angle=0.3)):
            assert math.hypot(image.center.x, image.center.y) == pytest.approx(5.0)

    def test_expand_keeps_images_in_place(self, expander):
        """Test images replace their source in the traversal order."""
        circles = [
            Circle("a", Point(-10, 0), 1.0),
            Circle("m", Point(5, 1), 1.0, mirrored=True),
            Circle("b", Point(10, 10), 1.0),
        ]
        result = expander.expand(circles, MirrorConfig(plane_count=1))

        assert [c.id for c in result] == ["a", "m", "m@1", "b"]

    def test_reflection_element(self, expander):
        """Test reflection elements mirror across their plane."""
        config = MirrorConfig(plane_count=1, start_angle=0.0)
        image = expander.apply(1, Point(3, 4), config)
        assert image.x == pytest.approx(3.0)
        assert image.y == pytest.approx(-4.0)

    def test_rotation_element(self, expander):
        """Test rotation elements turn by 2*pi*k/N."""
        config = MirrorConfig(plane_count=4)
        image = expander.apply(1, Point(1, 0), config)
        assert image.x == pytest.approx(0.0, abs=1e-12)
        assert image.y == pytest.approx(1.0)

    def test_identity_element(self, expander):
        """Test element zero leaves points in place."""
        config = MirrorConfig(plane_count=3, start_angle=1.0)
        image = expander.apply(0, Point(2, -7), config)
        assert image.x == pytest.approx(2.0)
        assert image.y == pytest.approx(-7.0)
