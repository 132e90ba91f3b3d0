"""Half-away-from-zero rounding, scalar and vectorized.

Python's ``round`` and ``numpy.round`` round halves to even, which would shift
palette bands and rasterized pixels at exact .5 boundaries.
"""

from __future__ import annotations

import math

import numpy as np


def round_half_away(value: float) -> int:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(-whole if value < 0 else whole)


def round_half_away_array(values: np.ndarray) -> np.ndarray:
    magnitude = np.abs(values)
    whole = np.floor(magnitude)
    whole = whole + (magnitude - whole >= 0.5)
    return np.where(values < 0, -whole, whole).astype(np.int64)
