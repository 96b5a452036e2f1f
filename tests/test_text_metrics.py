from __future__ import annotations

import unittest

from scorescene_ui.text.font import FontSpec
from scorescene_ui.text.glyph_widths import GLYPH_ADVANCE_WIDTHS
from scorescene_ui.text.metrics import (
    FamilyMetrics,
    GlyphMetricsEstimator,
    TextMetrics,
    is_symbol_char,
    symbol_advance_px,
    text_box,
)


BRAVURA_20PX = FontSpec(family="Bravura", size="20px")


class SymbolWidthTests(unittest.TestCase):
    def test_known_glyph_uses_advance_table(self) -> None:
        metrics = GlyphMetricsEstimator().measure("\ue0a4", BRAVURA_20PX)
        self.assertAlmostEqual(metrics.width, 1.18 * 20 / 4)

    def test_glyph_widths_are_summed(self) -> None:
        metrics = GlyphMetricsEstimator().measure("\ue0a4\ue262", BRAVURA_20PX)
        self.assertAlmostEqual(metrics.width, 10.88)

    def test_unknown_private_use_glyph_gets_quarter_em(self) -> None:
        self.assertNotIn(0xF000, GLYPH_ADVANCE_WIDTHS)
        metrics = GlyphMetricsEstimator().measure("\uf000", BRAVURA_20PX)
        self.assertAlmostEqual(metrics.width, 5.0)

    def test_plain_character_after_glyph_uses_fallback_width(self) -> None:
        metrics = GlyphMetricsEstimator().measure("\ue0a4A", BRAVURA_20PX)
        self.assertAlmostEqual(metrics.width, 5.9 + 0.55 * 20)

    def test_leading_plain_character_uses_average_width(self) -> None:
        metrics = GlyphMetricsEstimator().measure("A\ue0a4", BRAVURA_20PX)
        self.assertAlmostEqual(metrics.width, 2 * 20 * 0.25)

    def test_family_stack_resolves_to_first_family(self) -> None:
        font = FontSpec(family="Bravura, Academico, serif", size="20px")
        metrics = GlyphMetricsEstimator().measure("\ue0a4", font)
        self.assertAlmostEqual(metrics.width, 5.9)

    def test_symbol_range_bounds(self) -> None:
        self.assertTrue(is_symbol_char("\ue000"))
        self.assertTrue(is_symbol_char("\uf8ff"))
        self.assertFalse(is_symbol_char("A"))
        self.assertAlmostEqual(symbol_advance_px("\ue262", 4.0), 0.996)


class TextFontMetricsTests(unittest.TestCase):
    def test_arial_points_are_converted_to_pixels(self) -> None:
        metrics = GlyphMetricsEstimator().measure("Hello", FontSpec(family="Arial", size="12pt"))
        size_px = 12 * 1.333
        self.assertAlmostEqual(metrics.width, 5 * size_px * 0.52)
        self.assertAlmostEqual(metrics.font_bounding_box_ascent, size_px * 0.76)
        self.assertAlmostEqual(metrics.font_bounding_box_descent, size_px * 0.24)
        self.assertAlmostEqual(metrics.actual_bounding_box_right, metrics.width)
        self.assertEqual(metrics.actual_bounding_box_left, 0.0)

    def test_symbolic_family_vertical_metrics(self) -> None:
        metrics = GlyphMetricsEstimator().measure("\ue0a4", BRAVURA_20PX)
        self.assertAlmostEqual(metrics.font_bounding_box_ascent, 16.0)
        self.assertAlmostEqual(metrics.font_bounding_box_descent, 4.0)
        self.assertAlmostEqual(metrics.em_height_ascent, 16.0)

    def test_unknown_family_uses_fallback(self) -> None:
        estimator = GlyphMetricsEstimator()
        self.assertEqual(estimator.family_metrics("Comic Sans"), FamilyMetrics(0.55, 0.8, 0.2))
        metrics = estimator.measure("ab", FontSpec(family="Comic Sans", size="10px"))
        self.assertAlmostEqual(metrics.width, 11.0)

    def test_family_lookup_ignores_case_and_quotes(self) -> None:
        estimator = GlyphMetricsEstimator()
        self.assertEqual(estimator.family_metrics('"Times New Roman", serif').avg_char_width, 0.48)

    def test_custom_family_table(self) -> None:
        estimator = GlyphMetricsEstimator(families={"mono": FamilyMetrics(0.6, 0.7, 0.3)})
        metrics = estimator.measure("abc", FontSpec(family="Mono", size="10px"))
        self.assertAlmostEqual(metrics.width, 18.0)

    def test_width_grows_with_length_and_scales_with_size(self) -> None:
        estimator = GlyphMetricsEstimator()
        small = FontSpec(family="Academico", size="10pt")
        large = FontSpec(family="Academico", size="20pt")
        widths = [estimator.measure("a" * n, small).width for n in range(1, 6)]
        self.assertEqual(widths, sorted(widths))
        self.assertAlmostEqual(estimator.measure("abc", large).width, 2 * estimator.measure("abc", small).width)

    def test_empty_text_is_all_zero(self) -> None:
        self.assertEqual(GlyphMetricsEstimator().measure("", BRAVURA_20PX), TextMetrics())


class TextBoxTests(unittest.TestCase):
    def test_box_sits_above_baseline(self) -> None:
        box = text_box(TextMetrics(width=30.0, font_bounding_box_ascent=8.0, font_bounding_box_descent=2.0))
        self.assertEqual((box.x, box.y, box.width, box.height), (0.0, -8.0, 30.0, 10.0))


if __name__ == "__main__":
    unittest.main()
