"""PNG sequence sink for batch export."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from synthsun_renderer.models import FrameBuffer

from .models import SavedFrame

FILE_PREFIX = "out"
INDEX_DIGITS = 5


def frame_filename(offset: int) -> str:
    return f"{FILE_PREFIX}{offset:0{INDEX_DIGITS}d}.png"


def frame_to_image(frame: FrameBuffer) -> Image.Image:
    if frame.pixel_format != "RGB888":
        raise ValueError(f"unsupported pixel format: {frame.pixel_format}")
    return Image.frombytes("RGB", (frame.width, frame.height), frame.bytes)


class PngFrameSink:
    """Writes each frame as ``out%05d.png`` into one output directory.

    Errors from creating or writing a file propagate unchanged; a failed
    frame is never retried.
    """

    def __init__(self, output_dir: Path | str = "out") -> None:
        self.output_dir = Path(output_dir)

    def prepare(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir

    def path_for(self, offset: int) -> Path:
        return self.output_dir / frame_filename(offset)

    def write(self, frame: FrameBuffer) -> SavedFrame:
        path = self.path_for(frame.offset)
        image = frame_to_image(frame)
        with path.open("wb") as fh:
            image.save(fh, format="PNG")
            size = fh.tell()
        return SavedFrame(offset=frame.offset, path=path, bytes_written=size)


def save_frame(frame: FrameBuffer, path: Path | str) -> Path:
    """Write a single frame to an explicit path, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame_to_image(frame).save(path, format="PNG")
    return path
