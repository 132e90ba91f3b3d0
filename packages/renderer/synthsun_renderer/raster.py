"""Digital Differential Analyzer line rasterization."""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from .models import Point, Segment
from .rounding import round_half_away


def rasterize(start: Point, end: Point) -> Iterator[Point]:
    """Yield the pixels covered by ``start``-``end``.

    The start point itself is not emitted; a zero-length segment yields its
    single point. Lines going up-right are traced from ``end`` instead, which
    moves the excluded endpoint to the other end. Points may fall outside any
    canvas and must be bounds-checked by the caller.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    if dx != 0 and dy / dx < 0 and start.x < end.x:
        start, end = end, start
        dx, dy = -dx, -dy

    steps = max(abs(dx), abs(dy))
    if steps == 0:
        yield Point(start.x, start.y)
        return

    x_inc = dx / steps
    y_inc = dy / steps
    x_k = float(start.x)
    y_k = float(start.y)
    for _ in range(steps):
        x_k += x_inc
        y_k += y_inc
        yield Point(round_half_away(x_k), round_half_away(y_k))


def rasterize_segment(segment: Segment) -> Iterator[Point]:
    return rasterize(segment.start, segment.end)


def paint_segments(canvas: np.ndarray, segments: Iterable[Segment], color: tuple[int, int, int]) -> int:
    """Paint every in-canvas pixel of ``segments``; returns the number written."""
    height, width = canvas.shape[:2]
    painted = 0
    for segment in segments:
        for x, y in rasterize_segment(segment):
            if 0 <= x < width and 0 <= y < height:
                canvas[y, x] = color
                painted += 1
    return painted
