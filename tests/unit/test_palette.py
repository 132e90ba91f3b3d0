import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from synthsun_renderer.models import BLACK, Color, Hue
from synthsun_renderer.palette import (
    BASE_COLORS,
    DEFAULT_PALETTE,
    GRID_COLOR,
    build_palette,
    intensity_ranks,
    palette,
)


class PaletteTableTests(unittest.TestCase):
    def test_fifteen_entries(self):
        self.assertEqual(len(DEFAULT_PALETTE), 15)
        self.assertEqual(DEFAULT_PALETTE.as_array().shape, (3, 5, 3))

    def test_darkest_rank_is_black(self):
        for hue in Hue:
            self.assertEqual(DEFAULT_PALETTE[hue, 4], BLACK)

    def test_ranks_never_brighten(self):
        for hue in Hue:
            row = DEFAULT_PALETTE.row(hue)
            for brighter, darker in zip(row, row[1:]):
                self.assertGreaterEqual(brighter.r, darker.r)
                self.assertGreaterEqual(brighter.g, darker.g)
                self.assertGreaterEqual(brighter.b, darker.b)

    def test_scaling_truncates(self):
        self.assertEqual(
            DEFAULT_PALETTE.row(Hue.RED),
            (Color(200, 0, 123), Color(150, 0, 92), Color(100, 0, 61), Color(50, 0, 30), BLACK),
        )
        self.assertEqual(DEFAULT_PALETTE[Hue.CYAN, 1], Color(0, 150, 142))
        self.assertEqual(DEFAULT_PALETTE[Hue.BLUE, 3], Color(11, 6, 50))

    def test_table_is_read_only(self):
        with self.assertRaises(ValueError):
            DEFAULT_PALETTE.as_array()[0, 0, 0] = 1

    def test_custom_base_colors(self):
        table = build_palette([Color(4, 8, 12), Color(0, 0, 0), Color(255, 255, 255)])
        self.assertEqual(table[Hue.BLUE, 2], Color(2, 4, 6))
        self.assertEqual(table[Hue.RED, 3], Color(63, 63, 63))


class LookupTests(unittest.TestCase):
    def test_full_intensity_is_base(self):
        for hue in Hue:
            self.assertEqual(palette(hue, 1.0), BASE_COLORS[hue])

    def test_zero_intensity_is_black(self):
        for hue in Hue:
            self.assertEqual(palette(hue, 0.0), BLACK)

    def test_banding(self):
        self.assertEqual(palette(Hue.RED, 0.2), Color(50, 0, 30))
        self.assertEqual(palette(Hue.RED, 0.9), Color(200, 0, 123))
        self.assertEqual(palette(Hue.RED, 0.5), Color(100, 0, 61))

    def test_halves_round_away_from_zero(self):
        # (1 - 0.875) * 4 == 0.5 and (1 - 0.375) * 4 == 2.5 exactly.
        self.assertEqual(palette(Hue.RED, 0.875), DEFAULT_PALETTE[Hue.RED, 1])
        self.assertEqual(palette(Hue.RED, 0.375), DEFAULT_PALETTE[Hue.RED, 3])

    def test_out_of_range_intensity_fails(self):
        with self.assertRaises(ValueError):
            palette(Hue.RED, 1.5)
        with self.assertRaises(ValueError):
            palette(Hue.CYAN, -0.1)

    def test_vectorized_ranks_match_scalar(self):
        values = np.array([0.0, 0.125, 0.375, 0.5, 0.625, 0.875, 1.0])
        self.assertEqual(intensity_ranks(values).tolist(), [4, 4, 3, 2, 2, 1, 0])
        with self.assertRaises(ValueError):
            intensity_ranks(np.array([0.5, 1.01]))

    def test_grid_color(self):
        self.assertEqual(GRID_COLOR, Color(0, 200, 190))


if __name__ == "__main__":
    unittest.main()
