"""Typed models shared by frame sinks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from synthsun_renderer.models import FrameBuffer


class SurfaceState(str, Enum):
    CLOSED = "Closed"
    OPEN = "Open"
    QUIT_REQUESTED = "QuitRequested"


@dataclass(frozen=True)
class SavedFrame:
    offset: int
    path: Path
    bytes_written: int


class FrameSink(Protocol):
    def write(self, frame: FrameBuffer) -> SavedFrame: ...


class FrameSurface(Protocol):
    def poll_quit(self) -> bool: ...

    def present(self, frame: FrameBuffer) -> None: ...
