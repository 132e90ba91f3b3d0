"""Frame composer: background, grid and scanlines into one RGB888 buffer."""

from __future__ import annotations

import logging
from functools import lru_cache

import numpy as np

from .background import shade_background
from .grid import grid_segments
from .models import FrameBuffer, Hue
from .palette import DEFAULT_PALETTE, Palette
from .raster import paint_segments
from .scanlines import apply_scanlines
from .scene import DEFAULT_SCENE, SceneParams

_log = logging.getLogger("synthsun.renderer")


class SunsetRenderer:
    """Renders animation frames for a fixed scene.

    The shaded background does not depend on the frame offset, so it is
    computed once and copied into each frame. Instances hold no other state
    and may be shared across threads.
    """

    def __init__(self, scene: SceneParams = DEFAULT_SCENE, table: Palette = DEFAULT_PALETTE) -> None:
        self.scene = scene
        self.table = table
        self.grid_color = table.lookup(Hue.CYAN, 1.0).as_tuple()
        sky = shade_background(scene, table)
        sky.setflags(write=False)
        self._background = sky

    @property
    def width(self) -> int:
        return self.scene.width

    @property
    def height(self) -> int:
        return self.scene.height

    @property
    def frame_count(self) -> int:
        return self.scene.frame_count

    def render_array(self, v_offset: int) -> np.ndarray:
        if not 0 <= v_offset < self.scene.lines_max_distance:
            raise ValueError(f"frame offset must be in [0, {self.scene.lines_max_distance}), got {v_offset}")

        canvas = self._background.copy()
        _log.debug("background done", extra={"event": "background_done", "offset": v_offset})

        painted = paint_segments(canvas, grid_segments(v_offset, self.scene), self.grid_color)
        _log.debug("lines done", extra={"event": "lines_done", "offset": v_offset, "pixels": painted})

        apply_scanlines(canvas, self.grid_color)
        _log.debug("scanlines done", extra={"event": "scanlines_done", "offset": v_offset})
        return canvas

    def render_frame(self, v_offset: int) -> FrameBuffer:
        canvas = self.render_array(v_offset)
        return FrameBuffer(
            width=self.width,
            height=self.height,
            pixel_format="RGB888",
            bytes=canvas.tobytes(),
            offset=v_offset,
        )


@lru_cache(maxsize=None)
def default_renderer() -> SunsetRenderer:
    return SunsetRenderer()


def render_frame(v_offset: int) -> FrameBuffer:
    """Render one frame of the default scene."""
    return default_renderer().render_frame(v_offset)
