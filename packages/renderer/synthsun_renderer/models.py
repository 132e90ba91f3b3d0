"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple


class Hue(IntEnum):
    BLUE = 0
    CYAN = 1
    RED = 2


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def scaled(self, factor: float) -> Color:
        # Truncates toward zero, channels never exceed the base value.
        return Color(int(self.r * factor), int(self.g * factor), int(self.b * factor))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)


class Point(NamedTuple):
    x: int
    y: int


class Segment(NamedTuple):
    start: Point
    end: Point


@dataclass(frozen=True)
class FrameBuffer:
    width: int
    height: int
    pixel_format: str
    bytes: bytes
    offset: int = 0

    def pixel(self, x: int, y: int) -> Color:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        i = (y * self.width + x) * 3
        return Color(self.bytes[i], self.bytes[i + 1], self.bytes[i + 2])
