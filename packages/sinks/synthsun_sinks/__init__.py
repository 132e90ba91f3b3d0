"""Frame sinks: PNG sequence files and an on-screen preview window."""

from .file_sink import PngFrameSink, frame_filename, frame_to_image, save_frame
from .models import FrameSink, FrameSurface, SavedFrame, SurfaceState
from .window import QtPreviewSurface, qt_available

__all__ = [
    "FrameSink",
    "FrameSurface",
    "PngFrameSink",
    "QtPreviewSurface",
    "SavedFrame",
    "SurfaceState",
    "frame_filename",
    "frame_to_image",
    "qt_available",
    "save_frame",
]
