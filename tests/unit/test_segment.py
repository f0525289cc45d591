"""Unit tests for outer tangent computation."""

import math

import pytest

from serpentine.core.segment import DegeneratePair, SegmentFactory, TangentPair
from serpentine.domain import Bezier, Circle, Line, Point


def _dot(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * bx + ay * by


def _assert_perpendicular(pair: TangentPair) -> None:
    """Both radii to the tangent points are perpendicular to the tangent line."""
    dx = pair.end.x - pair.start.x
    dy = pair.end.y - pair.start.y
    length = math.hypot(dx, dy)
    for circle, point in ((pair.source, pair.start), (pair.target, pair.end)):
        rx = (point.x - circle.center.x) / circle.radius
        ry = (point.y - circle.center.y) / circle.radius
        assert abs(_dot(rx, ry, dx / length, dy / length)) < 1e-9


class TestSegmentFactory:
    """Tests for SegmentFactory class."""

    @pytest.fixture
    def ccw(self):
        return SegmentFactory(counterclockwise=True)

    @pytest.fixture
    def cw(self):
        return SegmentFactory(counterclockwise=False)

    def test_equal_radii_ccw(self, ccw):
        """Test a counterclockwise path runs below a left-to-right pair."""
        a = Circle("a", Point(0, 0), 2.0)
        b = Circle("b", Point(10, 0), 2.0)

        pair = ccw.tangent(a, b)

        assert isinstance(pair, TangentPair)
        assert pair.start_angle == pytest.approx(-math.pi / 2)
        assert pair.start.y == pytest.approx(-2.0)
        assert pair.end.x == pytest.approx(10.0)
        assert pair.end.y == pytest.approx(-2.0)

    def test_equal_radii_cw(self, cw):
        """Test a clockwise path runs above a left-to-right pair."""
        a = Circle("a", Point(0, 0), 2.0)
        b = Circle("b", Point(10, 0), 2.0)

        pair = cw.tangent(a, b)

        assert pair.start_angle == pytest.approx(math.pi / 2)
        assert pair.start.y == pytest.approx(2.0)

    @pytest.mark.parametrize(
        ("r1", "r2", "target"),
        [
            (3.0, 1.0, Point(10, 0)),
            (1.0, 3.0, Point(10, 0)),
            (2.0, 0.5, Point(-4, 7)),
            (0.2, 4.0, Point(3, -9)),
        ],
    )
    def test_tangent_is_perpendicular_to_radii(self, ccw, cw, r1, r2, target):
        """Test the tangent line is perpendicular to both radii."""
        a = Circle("a", Point(1, 1), r1)
        b = Circle("b", target, r2)
        for factory in (ccw, cw):
            pair = factory.tangent(a, b)
            assert isinstance(pair, TangentPair)
            _assert_perpendicular(pair)

    def test_tangent_points_lie_on_circles(self, ccw):
        """Test tangent points sit on their circles."""
        a = Circle("a", Point(0, 0), 3.0)
        b = Circle("b", Point(10, 4), 1.0)
        pair = ccw.tangent(a, b)
        assert pair.start.distance_to(a.center) == pytest.approx(3.0)
        assert pair.end.distance_to(b.center) == pytest.approx(1.0)

    def test_nested_pair(self, ccw):
        """Test a contained circle gives a degenerate pair."""
        big = Circle("big", Point(0, 0), 5.0)
        small = Circle("small", Point(1, 0), 1.0)

        result = ccw.tangent(big, small)

        assert isinstance(result, DegeneratePair)
        assert result.inner is small
        assert not result.inner_is_source

    def test_internally_touching_pair_is_degenerate(self, ccw):
        """Test d == |r1 - r2| has no usable external tangent."""
        big = Circle("big", Point(0, 0), 5.0)
        small = Circle("small", Point(4, 0), 1.0)
        assert isinstance(ccw.tangent(small, big), DegeneratePair)

    def test_coincident_centers(self, ccw):
        """Test identical circles are degenerate and drop the target."""
        a = Circle("a", Point(2, 2), 1.0)
        b = Circle("b", Point(2, 2), 1.0)
        result = ccw.tangent(a, b)
        assert isinstance(result, DegeneratePair)
        assert result.inner is b

    def test_straight_connector_is_line(self, ccw):
        """Test an unbowed pair becomes a Line."""
        a = Circle("a", Point(0, 0), 1.0)
        b = Circle("b", Point(5, 0), 1.0)
        connector = ccw.connector(ccw.tangent(a, b))
        assert isinstance(connector, Line)
        assert connector.length == pytest.approx(5.0)

    def test_bow_rotates_end_points(self, ccw):
        """Test bowing moves the ends back along each circle."""
        a = Circle("a", Point(0, 0), 1.0)
        b = Circle("b", Point(5, 0), 1.0)
        pair = ccw.tangent(a, b)

        bowed = ccw.bow(pair, math.pi / 8)

        assert bowed.start_angle == pytest.approx(pair.start_angle - math.pi / 8)
        assert bowed.end_angle == pytest.approx(pair.end_angle + math.pi / 8)
        assert bowed.bow == math.pi / 8

    def test_zero_bow_returns_pair(self, ccw):
        """Test a zero bow leaves the pair untouched."""
        a = Circle("a", Point(0, 0), 1.0)
        b = Circle("b", Point(5, 0), 1.0)
        pair = ccw.tangent(a, b)
        assert ccw.bow(pair, 0.0) is pair

    def test_bowed_connector_is_tangent_to_circles(self, ccw):
        """Test Bezier handles follow the circle tangents at both ends."""
        a = Circle("a", Point(0, 0), 1.0)
        b = Circle("b", Point(5, 0), 1.0)
        pair = ccw.bow(ccw.tangent(a, b), math.pi / 6)

        connector = ccw.connector(pair)

        assert isinstance(connector, Bezier)
        assert connector.start == pair.start
        assert connector.end == pair.end
        # Handles are perpendicular to the radii at the end points
        for center, point, handle in (
            (a.center, connector.start, connector.cp1),
            (b.center, connector.end, connector.cp2),
        ):
            rx, ry = point.x - center.x, point.y - center.y
            hx, hy = handle.x - point.x, handle.y - point.y
            assert abs(_dot(rx, ry, hx, hy)) < 1e-9
