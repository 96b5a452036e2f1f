from __future__ import annotations

import math
import unittest

from scorescene_core.render.path import PathBuilder, format_number, normalize_angle, round_to_precision


class PathPrimitiveTests(unittest.TestCase):
    def test_move_and_line_emit_compact_commands(self) -> None:
        path = PathBuilder()
        path.move_to(10, 20)
        path.line_to(100, 200)
        self.assertEqual(path.d, "M10 20L100 200")
        self.assertEqual((path.pen.x, path.pen.y), (100, 200))

    def test_curves_use_comma_separated_point_pairs(self) -> None:
        path = PathBuilder()
        path.move_to(0, 0)
        path.bezier_curve_to(10, 20, 30, 40, 50, 60)
        path.quadratic_curve_to(50, 50, 100, 0)
        self.assertEqual(path.d, "M0 0C10 20,30 40,50 60Q50 50,100 0")
        self.assertEqual((path.pen.x, path.pen.y), (100, 0))

    def test_operands_are_rounded_before_embedding(self) -> None:
        path = PathBuilder()
        path.move_to(1.23456, 2.0004)
        self.assertEqual(path.d, "M1.235 2")

    def test_precision_is_configurable(self) -> None:
        path = PathBuilder(precision_places=1)
        path.line_to(1.26, 0.04)
        self.assertEqual(path.d, "L1.3 0")

    def test_negative_precision_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PathBuilder(precision_places=-1)

    def test_close_keeps_pen_position(self) -> None:
        path = PathBuilder()
        path.move_to(0, 0)
        path.line_to(5, 5)
        path.close_path()
        self.assertTrue(path.d.endswith("Z"))
        self.assertEqual((path.pen.x, path.pen.y), (5, 5))

    def test_pen_is_unplaced_until_first_move(self) -> None:
        path = PathBuilder()
        self.assertFalse(path.pen.placed)
        path.move_to(1, 2)
        self.assertTrue(path.pen.placed)
        path.reset()
        self.assertFalse(path.pen.placed)
        self.assertEqual(path.d, "")

    def test_nan_operands_propagate_without_error(self) -> None:
        path = PathBuilder()
        path.line_to(math.nan, 1)
        self.assertEqual(path.d, "LNaN 1")


class ArcTests(unittest.TestCase):
    def test_full_circle_is_split_into_two_half_arcs(self) -> None:
        path = PathBuilder()
        path.arc(50, 50, 25, 0, 2 * math.pi, False)
        self.assertEqual(path.d, "M75 50 A25 25 0 0 1 25 50 A25 25 0 0 1 75 50")
        self.assertEqual(path.d.count("A"), 2)
        self.assertEqual((path.pen.x, path.pen.y), (75, 50))

    def test_counterclockwise_full_circle_uses_negative_sweep(self) -> None:
        path = PathBuilder()
        path.arc(0, 0, 10, 0, -2 * math.pi, True)
        self.assertEqual(path.d, "M10 0 A10 10 0 0 0 -10 0 A10 10 0 0 0 10 0")

    def test_coincident_normalized_angles_are_a_full_circle(self) -> None:
        path = PathBuilder()
        path.arc(0, 0, 10, 0, 0, False)
        self.assertEqual(path.d.count("A"), 2)
        path.reset()
        path.arc(0, 0, 10, math.pi / 2, math.pi / 2 + 4 * math.pi, False)
        self.assertEqual(path.d.count("A"), 2)

    def test_quarter_arc_clockwise(self) -> None:
        path = PathBuilder()
        path.arc(0, 0, 10, 0, math.pi / 2, False)
        self.assertEqual(path.d, "M10 0 A10 10 0 0 1 0 10")
        self.assertEqual((path.pen.x, path.pen.y), (0, 10))

    def test_quarter_arc_counterclockwise_takes_the_long_way(self) -> None:
        path = PathBuilder()
        path.arc(0, 0, 10, 0, math.pi / 2, True)
        self.assertEqual(path.d, "M10 0 A10 10 0 1 0 0 10")

    def test_large_flag_flips_when_start_wraps_past_end(self) -> None:
        path = PathBuilder()
        path.arc(0, 0, 10, 7 * math.pi / 4, math.pi / 4, False)
        self.assertEqual(path.d, "M7.071 -7.071 A10 10 0 0 1 7.071 7.071")


class NumberHelperTests(unittest.TestCase):
    def test_normalize_angle_range(self) -> None:
        self.assertAlmostEqual(normalize_angle(-math.pi / 2), 3 * math.pi / 2)
        self.assertEqual(normalize_angle(2 * math.pi), 0.0)
        self.assertAlmostEqual(normalize_angle(5 * math.pi), math.pi)

    def test_rounding_is_half_up(self) -> None:
        self.assertEqual(round_to_precision(2.5, 0), 3.0)
        self.assertEqual(round_to_precision(-2.5, 0), -2.0)
        self.assertTrue(math.isnan(round_to_precision(math.nan)))
        self.assertEqual(round_to_precision(math.inf), math.inf)

    def test_format_number_drops_trailing_zero(self) -> None:
        self.assertEqual(format_number(10.0), "10")
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(-0.0), "0")
        self.assertEqual(format_number(math.nan), "NaN")
        self.assertEqual(format_number(-math.inf), "-Infinity")


if __name__ == "__main__":
    unittest.main()
