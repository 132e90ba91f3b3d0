"""Fixed scene geometry for the sunset animation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SceneParams:
    # Canvas
    width: int = 640
    height: int = 480
    # Vertical position of the sun centre
    sun_position_y: float = 220.0
    # Radius of the solid sun disk
    sun_radius: float = 75.0
    # Number of cyan vertical lines (one more is drawn for the centre)
    n_vert_lines: int = 80
    # Horizon: top of the grid, bottom of the sky
    lines_top: int = 240
    # Horizontal line spacing near the viewer and near the horizon
    lines_max_distance: int = 50
    lines_min_distance: int = 10
    # Keeps the top-most animated line moving
    minimum_speed: float = 0.2
    # Semi-axes of the reflection ellipse
    sun_reflection_a: float = 100.0
    sun_reflection_b: float = 350.0

    @property
    def frame_count(self) -> int:
        """Number of distinct frames before the scroll animation loops."""
        return self.lines_max_distance

    def wrap_offset(self, counter: int) -> int:
        return counter % self.lines_max_distance


DEFAULT_SCENE = SceneParams()
