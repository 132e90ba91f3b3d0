"""Fixed 3x5 color table and intensity lookup."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .models import BLACK, Color, Hue
from .rounding import round_half_away, round_half_away_array

# Paletton picks, brightened. Originals: (29, 14, 115), (0, 101, 97), (131, 0, 80).
BASE_COLORS: tuple[Color, Color, Color] = (
    Color(47, 24, 200),  # BLUE
    Color(0, 200, 190),  # CYAN
    Color(200, 0, 123),  # RED
)

SHADE_FACTORS = (1.0, 0.75, 0.5, 0.25)
RANKS = len(SHADE_FACTORS) + 1


class Palette:
    """Read-only table of five shades per hue, brightest (rank 0) to black (rank 4)."""

    __slots__ = ("_rows", "_array")

    def __init__(self, rows: Sequence[Sequence[Color]]) -> None:
        if len(rows) != len(Hue) or any(len(row) != RANKS for row in rows):
            raise ValueError(f"palette must be {len(Hue)}x{RANKS}")
        self._rows: tuple[tuple[Color, ...], ...] = tuple(tuple(row) for row in rows)
        arr = np.array([[c.as_tuple() for c in row] for row in self._rows], dtype=np.uint8)
        arr.setflags(write=False)
        self._array = arr

    def __getitem__(self, key: tuple[Hue, int]) -> Color:
        hue, rank = key
        return self._rows[int(hue)][rank]

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows)

    def row(self, hue: Hue) -> tuple[Color, ...]:
        return self._rows[int(hue)]

    def as_array(self) -> np.ndarray:
        """(hues, ranks, 3) uint8 view, not writeable."""
        return self._array

    def lookup(self, hue: Hue, intensity: float) -> Color:
        return self[hue, intensity_rank(intensity)]

    def lookup_array(self, hue: Hue, intensities: np.ndarray) -> np.ndarray:
        return self._array[int(hue)][intensity_ranks(intensities)]


def build_palette(base_colors: Sequence[Color] = BASE_COLORS) -> Palette:
    rows = [[base.scaled(f) for f in SHADE_FACTORS] + [BLACK] for base in base_colors]
    return Palette(rows)


def _check_intensity(value: float) -> None:
    if value > 1.0 or value < 0.0:
        raise ValueError(f"intensity must be in [0, 1], got {value!r}")


def intensity_rank(intensity: float) -> int:
    _check_intensity(intensity)
    return round_half_away((1.0 - intensity) * 4.0)


def intensity_ranks(intensities: np.ndarray) -> np.ndarray:
    if intensities.size and (intensities.max() > 1.0 or intensities.min() < 0.0):
        raise ValueError("intensity must be in [0, 1]")
    return round_half_away_array((1.0 - intensities) * 4.0)


DEFAULT_PALETTE = build_palette()


def palette(hue: Hue, intensity: float, table: Palette = DEFAULT_PALETTE) -> Color:
    """Quantize ``intensity`` into one of five bands of ``hue``."""
    return table.lookup(hue, intensity)


GRID_COLOR = palette(Hue.CYAN, 1.0)
