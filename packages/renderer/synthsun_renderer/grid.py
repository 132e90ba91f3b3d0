"""Perspective grid of cyan lines for one animation frame."""

from __future__ import annotations

from .models import Point, Segment
from .scene import DEFAULT_SCENE, SceneParams


def vertical_segments(scene: SceneParams = DEFAULT_SCENE) -> list[Segment]:
    """Converging rails: wide spread at the bottom edge, narrow at the horizon."""
    n = scene.n_vert_lines
    half_w = scene.width / 2.0
    segments: list[Segment] = []
    for i in range(-(n // 2), n // 2 + 1):
        start_rel = 30.0 * i / n
        end_rel = 2.0 * i / n
        start = Point(int((start_rel + 1.0) * half_w), scene.height)
        end = Point(int((end_rel + 1.0) * half_w), scene.lines_top)
        segments.append(Segment(start, end))
    return segments


def _horizontal(y: int, scene: SceneParams) -> Segment:
    return Segment(Point(0, y), Point(scene.width, y))


def scan_line_rows(v_offset: int, scene: SceneParams = DEFAULT_SCENE) -> list[int]:
    """Rows of the horizontal lines, in emission order.

    The first two rows are the fixed horizon line and the line that stands in
    for the one scrolling off the bottom.
    """
    top = scene.lines_top
    rows = [top, top + int(v_offset * scene.minimum_speed)]

    span = scene.lines_max_distance - scene.lines_min_distance
    steps_without_line = 0
    for y in range(top, scene.height):
        dist_from_top = (y - top) / (scene.height - top)
        next_scan_line = int(span * dist_from_top + scene.lines_min_distance)
        if steps_without_line >= next_scan_line:
            # Far lines scroll slower than near ones.
            rows.append(y + int(v_offset * (dist_from_top + scene.minimum_speed)))
            steps_without_line = 0
        steps_without_line += 1
    return rows


def horizontal_segments(v_offset: int, scene: SceneParams = DEFAULT_SCENE) -> list[Segment]:
    return [_horizontal(y, scene) for y in scan_line_rows(v_offset, scene)]


def grid_segments(v_offset: int, scene: SceneParams = DEFAULT_SCENE) -> list[Segment]:
    return vertical_segments(scene) + horizontal_segments(v_offset, scene)
