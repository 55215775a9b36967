"""Unit tests for the path builders and the facade.

Tests:
    - Path: implicit move/line insertion, arc sweep, transform, reversal
    - box outlines: circle, rounded rectangle, zero corner radius
    - marks: checkmark, radio, mixed variants, unchecked parity
    - presets: path_for_box_outline / path_for_state dispatch
"""

import math
import unittest

import pytest

from tricheck.core.models import BoxType, CheckState, MarkType, PathConfig
from tricheck.geom.feature_points import FeaturePoints
from tricheck.geom.primitives import Point
from tricheck.paths.path import ArcTo, Close, LineTo, MoveTo, Path
from tricheck.paths.presets import CheckboxPathPresets, path_for_box_outline, path_for_state
from tricheck.utils.errors import TriCheckError, TriCheckValidationError


def assert_point(p, x, y, tol=1e-9):
    assert p.x == pytest.approx(x, abs=tol)
    assert p.y == pytest.approx(y, abs=tol)


class TestPath(unittest.TestCase):

    def test_arc_on_empty_path_opens_subpath(self):
        path = Path().add_arc(Point(0.0, 0.0), 2.0, 0.0, math.pi / 2)
        self.assertIsInstance(path.ops[0], MoveTo)
        self.assertEqual(path.ops[0].point, Point(2.0, 0.0))
        assert_point(path.current_point, 0.0, 2.0)

    def test_arc_away_from_current_point_adds_line(self):
        path = Path().move_to(Point(10.0, 10.0)).add_arc(Point(0.0, 0.0), 2.0, 0.0, math.pi)
        self.assertEqual([type(op) for op in path], [MoveTo, LineTo, ArcTo])

    def test_line_on_empty_path_is_move(self):
        path = Path().line_to(Point(1.0, 1.0))
        self.assertEqual([type(op) for op in path], [MoveTo])

    def test_close_returns_to_subpath_start(self):
        path = Path().move_to(Point(1.0, 1.0)).line_to(Point(5.0, 1.0)).close()
        self.assertTrue(path.is_closed)
        self.assertEqual(path.current_point, Point(1.0, 1.0))

    def test_clockwise_sweep_wraps(self):
        arc = ArcTo(Point(0.0, 0.0), 1.0, 0.0, -math.pi / 2, clockwise=True)
        self.assertAlmostEqual(arc.sweep, 1.5 * math.pi)

    def test_counter_clockwise_sweep_is_negative(self):
        arc = ArcTo(Point(0.0, 0.0), 1.0, 0.0, -math.pi / 2, clockwise=False)
        self.assertAlmostEqual(arc.sweep, -math.pi / 2)

    def test_full_turn(self):
        arc = ArcTo(Point(0.0, 0.0), 1.0, -1.0, 2 * math.pi - 1.0)
        self.assertAlmostEqual(arc.sweep, 2 * math.pi)
        assert_point(arc.end_point, arc.start_point.x, arc.start_point.y)

    def test_transform_scales_then_translates(self):
        path = Path().move_to(Point(10.0, 20.0)).add_arc(Point(10.0, 10.0), 10.0, math.pi / 2, math.pi)
        out = path.transformed(0.5, (3.0, 4.0))
        self.assertEqual(out.ops[0].point, Point(8.0, 14.0))
        arc = out.ops[1]
        self.assertEqual(arc.center, Point(8.0, 9.0))
        self.assertEqual(arc.radius, 5.0)
        # original untouched
        self.assertEqual(path.ops[0].point, Point(10.0, 20.0))

    def test_transform_rejects_non_positive_scale(self):
        with self.assertRaises(TriCheckValidationError):
            Path().move_to(Point(0.0, 0.0)).apply_transform(0.0)

    def test_reversed_polyline(self):
        path = Path().move_to(Point(0.0, 0.0)).line_to(Point(1.0, 0.0)).line_to(Point(2.0, 1.0))
        self.assertEqual(path.reversed().points, [Point(2.0, 1.0), Point(1.0, 0.0), Point(0.0, 0.0)])

    def test_reversed_rejects_arcs(self):
        path = Path().add_arc(Point(0.0, 0.0), 1.0, 0.0, 1.0)
        with self.assertRaises(TriCheckError):
            path.reversed()


class TestBoxOutline(unittest.TestCase):

    def test_circle_outline(self):
        cfg = PathConfig(size=100.0, box_line_width=2.0, box_type=BoxType.CIRCLE)
        path = path_for_box_outline(cfg)
        self.assertEqual([type(op) for op in path], [MoveTo, ArcTo, Close])
        arc = path.ops[1]
        self.assertEqual(arc.radius, 49.0)
        self.assertEqual(arc.center, Point(50.0, 50.0))
        self.assertAlmostEqual(arc.sweep, 2 * math.pi)
        self.assertAlmostEqual(arc.start_angle, -math.radians(45.0))

    def test_circle_starts_at_box_intersection(self):
        cfg = PathConfig(size=100.0, box_line_width=2.0, box_type=BoxType.CIRCLE)
        start = path_for_box_outline(cfg).ops[0].point
        p = FeaturePoints(cfg).box_intersection_point
        assert_point(start, p.x, p.y)

    def test_rounded_rect_outline(self):
        cfg = PathConfig(size=100.0, box_line_width=2.0, corner_radius=10.0, box_type=BoxType.ROUNDED_RECT)
        path = path_for_box_outline(cfg)
        self.assertTrue(path.is_closed)
        self.assertEqual(path.count(MoveTo), 1)
        self.assertEqual(path.count(ArcTo), 5)
        self.assertEqual(path.count(LineTo), 4)
        total = sum(op.sweep for op in path if isinstance(op, ArcTo))
        self.assertAlmostEqual(total, 2 * math.pi)

        start = path.ops[0].point
        offset = 10.0 * math.sqrt(2) / 2
        assert_point(start, 89.0 + offset, 11.0 - offset)
        # Last arc ends where the path started
        last_arc = [op for op in path if isinstance(op, ArcTo)][-1]
        assert_point(last_arc.end_point, start.x, start.y)

    def test_rounded_rect_edges(self):
        cfg = PathConfig(size=100.0, box_line_width=2.0, corner_radius=10.0, box_type=BoxType.ROUNDED_RECT)
        lines = [op.point for op in path_for_box_outline(cfg) if isinstance(op, LineTo)]
        expected = [(99.0, 89.0), (11.0, 99.0), (1.0, 11.0), (89.0, 1.0)]
        for p, (x, y) in zip(lines, expected):
            assert_point(p, x, y)

    def test_zero_corner_radius_is_sharp(self):
        cfg = PathConfig(size=100.0, box_line_width=2.0, corner_radius=0.0, box_type=BoxType.ROUNDED_RECT)
        path = path_for_box_outline(cfg)
        self.assertEqual(path.count(ArcTo), 0)
        self.assertEqual(path.count(LineTo), 4)
        self.assertTrue(path.is_closed)
        self.assertEqual(
            path.points,
            [Point(99.0, 1.0), Point(99.0, 99.0), Point(1.0, 99.0), Point(1.0, 1.0), Point(99.0, 1.0)],
        )


class TestMarks(unittest.TestCase):

    def test_checkmark_polyline(self):
        cfg = PathConfig(size=24.0, box_line_width=1.0, corner_radius=3.0, box_type=BoxType.ROUNDED_RECT)
        path = path_for_state(cfg, CheckState.CHECKED)
        fp = FeaturePoints(cfg)
        self.assertFalse(path.is_closed)
        self.assertEqual(len(path.points), 3)
        self.assertEqual(path.points, [fp.short_arm_end_point, fp.middle_point, fp.long_arm_end_point])
        assert_point(path.points[0], 5.88, 12.72, tol=1e-9)
        assert_point(path.points[1], 10.56, 16.788, tol=1e-9)

    def test_radio_is_scaled_box(self):
        for box_type in (BoxType.CIRCLE, BoxType.ROUNDED_RECT):
            with self.subTest(box_type=box_type):
                cfg = PathConfig(size=40.0, box_line_width=2.0, corner_radius=6.0, box_type=box_type,
                                 mark_type=MarkType.RADIO)
                radio = path_for_state(cfg, CheckState.CHECKED)
                box = path_for_box_outline(cfg)
                self.assertEqual(radio, box.transformed(0.665, (40.0 * 0.1675, 40.0 * 0.1675)))
                sample = box.ops[0].point
                mapped = radio.ops[0].point
                assert_point(mapped, sample.x * 0.665 + 6.7, sample.y * 0.665 + 6.7, tol=1e-9)

    def test_radio_dot_is_concentric(self):
        cfg = PathConfig(size=24.0, box_type=BoxType.CIRCLE, mark_type=MarkType.RADIO)
        arc = [op for op in path_for_state(cfg, "checked") if isinstance(op, ArcTo)][0]
        assert_point(arc.center, 12.0, 12.0, tol=1e-9)
        self.assertAlmostEqual(arc.radius, 11.5 * 0.665)

    def test_mixed_radio_is_reversed_line(self):
        cfg = PathConfig(size=24.0, mark_type=MarkType.RADIO)
        path = path_for_state(cfg, CheckState.MIXED)
        self.assertEqual(path.points, [Point(18.0, 12.0), Point(6.0, 12.0)])

    def test_unchecked_matches_checked(self):
        for mark_type in MarkType:
            for box_type in BoxType:
                with self.subTest(mark_type=mark_type, box_type=box_type):
                    cfg = PathConfig(box_type=box_type, mark_type=mark_type)
                    self.assertEqual(
                        path_for_state(cfg, CheckState.UNCHECKED),
                        path_for_state(cfg, CheckState.CHECKED),
                    )


@pytest.mark.parametrize("size", [1.0, 17.0, 24.0, 33.3, 100.0])
@pytest.mark.parametrize("box_type", list(BoxType))
def test_mixed_checkmark_points(size, box_type):
    cfg = PathConfig(size=size, box_line_width=0.5, corner_radius=0.25, box_type=box_type)
    points = path_for_state(cfg, "mixed").points
    assert [p.y for p in points] == [size / 2.0] * 3
    assert [p.x for p in points] == [0.25 * size, 0.5 * size, 0.75 * size]


def test_path_for_state_is_deterministic(square_config):
    for state in CheckState:
        assert path_for_state(square_config, state) == path_for_state(square_config, state)
    assert path_for_box_outline(square_config) == path_for_box_outline(square_config)


def test_each_call_returns_new_path(square_config):
    presets = CheckboxPathPresets(square_config)
    a = presets.path_for_mark()
    a.line_to(Point(0.0, 0.0))
    assert presets.path_for_mark() != a


def test_facade_validates_config():
    with pytest.raises(TriCheckValidationError):
        CheckboxPathPresets(PathConfig(size=24.0, corner_radius=13.0, box_type=BoxType.ROUNDED_RECT))


def test_degenerate_size_still_builds():
    cfg = PathConfig(size=0.0, box_line_width=0.0, corner_radius=0.0, box_type=BoxType.ROUNDED_RECT)
    for state in CheckState:
        for p in path_for_state(cfg, state).points:
            assert math.isfinite(p.x) and math.isfinite(p.y)
    assert path_for_box_outline(cfg).count(ArcTo) == 0
