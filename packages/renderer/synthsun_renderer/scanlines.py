"""CRT-style scanline darkening."""

from __future__ import annotations

import numpy as np


def apply_scanlines(canvas: np.ndarray, keep_color: tuple[int, int, int]) -> np.ndarray:
    """Halve every channel on even rows, in place, except pixels equal to ``keep_color``.

    Grid pixels keep full brightness on every row.
    """
    even = canvas[0::2]
    keep = np.all(even == np.asarray(keep_color, dtype=canvas.dtype), axis=-1)
    even[~keep] //= 2
    return canvas
