"""Renderer package for the synthsun sunset animation."""

from .background import background, shade_background
from .frame import SunsetRenderer, default_renderer, render_frame
from .grid import grid_segments, horizontal_segments, scan_line_rows, vertical_segments
from .models import BLACK, Color, FrameBuffer, Hue, Point, Segment
from .palette import BASE_COLORS, DEFAULT_PALETTE, GRID_COLOR, Palette, build_palette, palette
from .raster import paint_segments, rasterize
from .scanlines import apply_scanlines
from .scene import DEFAULT_SCENE, SceneParams

__all__ = [
    "BASE_COLORS",
    "BLACK",
    "Color",
    "DEFAULT_PALETTE",
    "DEFAULT_SCENE",
    "FrameBuffer",
    "GRID_COLOR",
    "Hue",
    "Palette",
    "Point",
    "SceneParams",
    "Segment",
    "SunsetRenderer",
    "apply_scanlines",
    "background",
    "build_palette",
    "default_renderer",
    "grid_segments",
    "horizontal_segments",
    "paint_segments",
    "palette",
    "rasterize",
    "render_frame",
    "scan_line_rows",
    "shade_background",
    "vertical_segments",
]
