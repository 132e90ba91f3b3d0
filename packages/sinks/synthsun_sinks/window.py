"""On-screen preview surface backed by a Qt window."""

from __future__ import annotations

from typing import Any

from synthsun_renderer.models import FrameBuffer

from .models import SurfaceState

try:
    from PySide6.QtCore import Qt
    from PySide6.QtGui import QImage, QPixmap
    from PySide6.QtWidgets import QApplication, QLabel
except Exception:  # pragma: no cover
    QApplication = None
    QLabel = None


if QLabel is not None:

    class _PreviewLabel(QLabel):
        def __init__(self) -> None:
            super().__init__()
            self.state = SurfaceState.OPEN

        def closeEvent(self, event) -> None:  # noqa: N802
            self.state = SurfaceState.CLOSED
            super().closeEvent(event)

        def keyPressEvent(self, event) -> None:  # noqa: N802
            if event.key() in (Qt.Key.Key_Escape, Qt.Key.Key_Q):
                self.state = SurfaceState.QUIT_REQUESTED
                return
            super().keyPressEvent(event)


class QtPreviewSurface:
    """Window that shows frames and reports quit between frames.

    ``poll_quit`` drains pending window events without blocking.
    """

    def __init__(self, width: int, height: int, scale: int = 1, title: str = "synthsun") -> None:
        if QApplication is None:
            raise RuntimeError("PySide6 is required")
        self.width = width
        self.height = height
        self.scale = max(1, int(scale))
        self._app: Any = QApplication.instance() or QApplication([])
        self._window = _PreviewLabel()
        self._window.setWindowTitle(title)
        self._window.setFixedSize(width * self.scale, height * self.scale)
        self._window.show()

    @property
    def state(self) -> SurfaceState:
        return self._window.state

    def poll_quit(self) -> bool:
        self._app.processEvents()
        return self._window.state is not SurfaceState.OPEN

    def present(self, frame: FrameBuffer) -> None:
        image = QImage(frame.bytes, frame.width, frame.height, frame.width * 3, QImage.Format.Format_RGB888).copy()
        pixmap = QPixmap.fromImage(image)
        if self.scale != 1:
            pixmap = pixmap.scaled(
                frame.width * self.scale,
                frame.height * self.scale,
                Qt.AspectRatioMode.IgnoreAspectRatio,
                Qt.TransformationMode.FastTransformation,
            )
        self._window.setPixmap(pixmap)
        self._window.repaint()

    def close(self) -> None:
        if self._window.state is not SurfaceState.CLOSED:
            self._window.close()
        self._app.processEvents()


def qt_available() -> bool:
    return QApplication is not None
