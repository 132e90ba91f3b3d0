"""Sky, sun and water reflection shading."""

from __future__ import annotations

import math

import numpy as np

from .models import Color, Hue
from .palette import DEFAULT_PALETTE, Palette
from .scene import DEFAULT_SCENE, SceneParams

REFLECTION_INTENSITY = 0.2
GLOW_INTENSITY = 0.65
# Divisor applied to the canvas diagonal to get the glow falloff distance.
FALLOFF_DIVISOR = 1.5


def max_glow_distance(scene: SceneParams = DEFAULT_SCENE) -> float:
    w = float(scene.width)
    h = float(scene.height)
    return math.sqrt(w * w + h * h) / FALLOFF_DIVISOR


def in_reflection(x: float, y: float, scene: SceneParams = DEFAULT_SCENE) -> bool:
    dx = x - scene.width / 2.0
    dy = y - scene.sun_position_y
    a = scene.sun_reflection_a
    b = scene.sun_reflection_b
    return dx * dx / (a * a) + dy * dy / (b * b) < 1.0


def sky_intensity(x: float, y: float, scene: SceneParams = DEFAULT_SCENE) -> float:
    dx = x - scene.width / 2.0
    dy = y - scene.sun_position_y
    distance = math.sqrt(dx * dx + dy * dy)
    if distance > scene.sun_radius:
        return max(0.0, GLOW_INTENSITY - distance / max_glow_distance(scene))
    return 1.0


def background(x: int, y: int, scene: SceneParams = DEFAULT_SCENE, table: Palette = DEFAULT_PALETTE) -> Color:
    if y > scene.lines_top:
        return table.lookup(Hue.RED, REFLECTION_INTENSITY if in_reflection(x, y, scene) else 0.0)
    return table.lookup(Hue.RED, sky_intensity(x, y, scene))


def shade_background(scene: SceneParams = DEFAULT_SCENE, table: Palette = DEFAULT_PALETTE) -> np.ndarray:
    """Whole-canvas ``background``: an (height, width, 3) uint8 array.

    Uses the same float64 operations in the same order as the per-pixel
    function so both agree on every pixel.
    """
    ys, xs = np.mgrid[0 : scene.height, 0 : scene.width].astype(np.float64)
    dx = xs - scene.width / 2.0
    dy = ys - scene.sun_position_y

    a = scene.sun_reflection_a
    b = scene.sun_reflection_b
    inside = dx * dx / (a * a) + dy * dy / (b * b) < 1.0
    water = np.where(inside, REFLECTION_INTENSITY, 0.0)

    distance = np.sqrt(dx * dx + dy * dy)
    glow = np.maximum(0.0, GLOW_INTENSITY - distance / max_glow_distance(scene))
    sky = np.where(distance > scene.sun_radius, glow, 1.0)

    intensity = np.where(ys > scene.lines_top, water, sky)
    return table.lookup_array(Hue.RED, intensity)
