"""Tests for domain models to verify they work correctly."""

import math

import pytest

from serpentine.domain import (
    TAU,
    Arc,
    Bezier,
    Circle,
    EllipseArc,
    Line,
    MirrorConfig,
    PathData,
    PathMode,
    PathOptions,
    Point,
    SegmentType,
    arc_sweep,
    segment_from_dict,
)
from serpentine.exceptions import (
    InvalidCircleError,
    InvalidMirrorConfigError,
    SegmentFormatError,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_distance_to(self) -> None:
        """Test Euclidean distance."""
        assert Point(0.0, 0.0).distance_to(Point(3.0, 4.0)) == pytest.approx(5.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, -200.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestCircle:
    """Tests for Circle class."""

    def test_circle_creation(self) -> None:
        """Test basic circle creation."""
        circle = Circle("a", Point(1.0, 2.0), 3.0)
        assert circle.id == "a"
        assert circle.radius == 3.0
        assert not circle.mirrored
        assert not circle.is_mirror_image

    @pytest.mark.parametrize("radius", [0.0, -1.0, math.nan, math.inf])
    def test_invalid_radius(self, radius: float) -> None:
        """Test that non-positive or non-finite radii are rejected."""
        with pytest.raises(InvalidCircleError, match="radius must be positive"):
            Circle("bad", Point(0.0, 0.0), radius)

    def test_point_at(self) -> None:
        """Test points on the circumference."""
        circle = Circle("a", Point(10.0, 0.0), 2.0)
        top = circle.point_at(math.pi / 2)
        assert top.x == pytest.approx(10.0)
        assert top.y == pytest.approx(2.0)

    def test_circle_serialization(self) -> None:
        """Test circle serialization keeps mirror back-references."""
        image = Circle("a@1", Point(-1.0, 0.0), 1.0, source_id="a", mirror_index=1)
        data = image.to_dict()
        assert data["source_id"] == "a"
        restored = Circle.from_dict(data)
        assert restored == image
        assert restored.is_mirror_image

    def test_plain_circle_has_no_back_reference(self) -> None:
        """Test that a plain circle serializes without mirror fields."""
        data = Circle("a", Point(0.0, 0.0), 1.0, mirrored=True).to_dict()
        assert "source_id" not in data
        assert data["mirrored"] is True


class TestMirrorConfig:
    """Tests for MirrorConfig class."""

    def test_default_is_inactive(self) -> None:
        """Test that the default configuration disables mirroring."""
        config = MirrorConfig()
        assert not config.is_active
        assert config.angle_step == 0.0
        assert config.group_order == 1
        assert config.plane_angles() == []

    def test_plane_angles(self) -> None:
        """Test plane spacing of pi / N from the start angle."""
        config = MirrorConfig(plane_count=3, start_angle=0.1)
        assert config.group_order == 6
        assert config.plane_angles() == pytest.approx(
            [0.1, 0.1 + math.pi / 3, 0.1 + 2 * math.pi / 3]
        )

    def test_negative_plane_count(self) -> None:
        """Test that a negative plane count is rejected."""
        with pytest.raises(InvalidMirrorConfigError):
            MirrorConfig(plane_count=-1)

    def test_serialization(self) -> None:
        """Test mirror config serialization."""
        config = MirrorConfig(plane_count=4, start_angle=0.5)
        assert MirrorConfig.from_dict(config.to_dict()) == config


class TestPathOptions:
    """Tests for PathOptions and PathMode."""

    def test_default_mode(self) -> None:
        """Test that default options describe an open tangent chain."""
        options = PathOptions()
        assert options.mode == PathMode.TANGENT
        assert not options.wraps_start
        assert not options.wraps_end

    def test_mode_cycle(self) -> None:
        """Test that the mode button cycles through all five modes."""
        options = PathOptions(global_stretch=0.3)
        seen = []
        for _ in range(5):
            options = options.cycle_mode()
            seen.append(options.mode)
        assert seen == [
            PathMode.LEFT_ARC,
            PathMode.RIGHT_ARC,
            PathMode.BOTH_ARCS,
            PathMode.CLOSED,
            PathMode.TANGENT,
        ]
        assert options.global_stretch == 0.3

    def test_closed_ignores_end_flags(self) -> None:
        """Test that cap flags have no effect on closed paths."""
        options = PathOptions(closed=True, use_start_point=True, use_end_point=True)
        assert options.mode == PathMode.CLOSED
        assert not options.wraps_start
        assert not options.wraps_end

    def test_from_mode(self) -> None:
        """Test building flags from a mode."""
        options = PathOptions.from_mode(PathMode.BOTH_ARCS)
        assert not options.closed
        assert options.use_start_point
        assert options.use_end_point

    def test_with_stretch(self) -> None:
        """Test replacing the stretch keeps the topology."""
        options = PathOptions(closed=True).with_stretch(-0.5)
        assert options.closed
        assert options.global_stretch == -0.5


class TestArcSweep:
    """Tests for arc sweep calculation."""

    def test_counterclockwise_sweep(self) -> None:
        """Test sweep toward increasing angle."""
        assert arc_sweep(-math.pi / 2, math.pi / 2, True) == pytest.approx(math.pi)

    def test_clockwise_sweep(self) -> None:
        """Test sweep toward decreasing angle."""
        assert arc_sweep(0.0, math.pi / 2, False) == pytest.approx(3 * math.pi / 2)

    def test_zero_sweep(self) -> None:
        """Test identical angles give no sweep."""
        assert arc_sweep(1.0, 1.0, True) == 0.0

    def test_full_turn(self) -> None:
        """Test an end angle one turn away counts as a full circle."""
        assert arc_sweep(0.0, TAU, True) == TAU


class TestSegments:
    """Tests for segment variants."""

    def test_line_length(self) -> None:
        """Test line length is the distance between its ends."""
        line = Line(Point(0.0, 0.0), Point(3.0, 4.0))
        assert line.length == pytest.approx(5.0)
        assert line.segment_type == SegmentType.LINE

    def test_length_is_not_an_argument(self) -> None:
        """Test that length is derived, never passed in."""
        with pytest.raises(TypeError):
            Line(Point(0.0, 0.0), Point(1.0, 0.0), 99.0)  # type: ignore

    def test_arc_length(self) -> None:
        """Test arc length is radius times sweep."""
        arc = Arc(Point(0.0, 0.0), 2.0, 0.0, math.pi / 2, True)
        assert arc.length == pytest.approx(math.pi)
        assert arc.end_point.x == pytest.approx(0.0, abs=1e-12)
        assert arc.end_point.y == pytest.approx(2.0)

    def test_straight_bezier_length(self) -> None:
        """Test a Bezier with collinear, evenly spaced controls."""
        bezier = Bezier(Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0), Point(3.0, 0.0))
        assert bezier.length == pytest.approx(3.0)

    def test_curved_bezier_length(self) -> None:
        """Test a curved Bezier is longer than its chord."""
        bezier = Bezier(Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0), Point(1.0, 0.0))
        assert 1.0 < bezier.length < 3.0
        assert bezier.point_at(0.5).y == pytest.approx(0.75)

    def test_circular_ellipse_arc_length(self) -> None:
        """Test equal radii give the exact circular length."""
        arc = EllipseArc(Point(0.0, 0.0), 2.0, 2.0, 0.0, 0.0, math.pi, True)
        assert arc.length == pytest.approx(2.0 * math.pi)

    def test_elliptic_quarter_length(self) -> None:
        """Test a quarter of a 2x1 ellipse against Ramanujan's perimeter."""
        arc = EllipseArc(Point(0.0, 0.0), 2.0, 1.0, 0.0, 0.0, math.pi / 2, True)
        perimeter = math.pi * (3 * 3.0 - math.sqrt((3 * 2.0 + 1.0) * (2.0 + 3 * 1.0)))
        assert arc.length == pytest.approx(perimeter / 4, rel=1e-3)

    def test_rotated_ellipse_point(self) -> None:
        """Test the x semi-axis follows the rotation."""
        arc = EllipseArc(Point(1.0, 1.0), 2.0, 1.0, math.pi / 2, 0.0, math.pi, True)
        assert arc.start_point.x == pytest.approx(1.0)
        assert arc.start_point.y == pytest.approx(3.0)

    def test_segment_from_dict(self) -> None:
        """Test decoding dispatches on the type tag and recomputes length."""
        data = Arc(Point(1.0, 1.0), 1.0, 0.0, math.pi, False).to_dict()
        data["length"] = -1.0
        segment = segment_from_dict(data)
        assert isinstance(segment, Arc)
        assert not segment.counterclockwise
        assert segment.length == pytest.approx(math.pi)

    def test_segment_from_dict_unknown_type(self) -> None:
        """Test an unknown tag raises SegmentFormatError."""
        with pytest.raises(SegmentFormatError, match="unknown segment type"):
            segment_from_dict({"type": "spline"})

    def test_segment_from_dict_missing_field(self) -> None:
        """Test a missing field raises SegmentFormatError."""
        with pytest.raises(SegmentFormatError):
            segment_from_dict({"type": "line", "start": {"x": 0, "y": 0}})


class TestPathData:
    """Tests for PathData class."""

    @pytest.fixture
    def square_path(self) -> PathData:
        corners = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        return PathData(
            segments=[Line(corners[i], corners[(i + 1) % 4]) for i in range(4)]
        )

    def test_empty_path(self) -> None:
        """Test an empty path."""
        path = PathData()
        assert path.is_empty()
        assert path.total_length == 0.0
        assert path.is_continuous(closed=True)

    def test_total_length(self, square_path: PathData) -> None:
        """Test total length sums segment lengths."""
        assert square_path.total_length == pytest.approx(4.0)
        assert square_path.count_by_type() == {SegmentType.LINE: 4}

    def test_continuity(self, square_path: PathData) -> None:
        """Test closed continuity checks the wrap-around join."""
        assert square_path.is_continuous(closed=True)
        open_path = PathData(segments=square_path.segments[:3])
        assert open_path.is_continuous()
        assert not open_path.is_continuous(closed=True)

    def test_gap_detected(self) -> None:
        """Test a gap between segments breaks continuity."""
        path = PathData(
            segments=[
                Line(Point(0, 0), Point(1, 0)),
                Line(Point(1, 0.1), Point(2, 0)),
            ]
        )
        assert not path.is_continuous()

    def test_path_serialization(self, square_path: PathData) -> None:
        """Test path serialization."""
        data = square_path.to_dict()
        assert data["total_length"] == pytest.approx(4.0)
        restored = PathData.from_dict(data)
        assert restored.segments == square_path.segments
