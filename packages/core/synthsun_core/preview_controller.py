"""Live preview loop: poll quit, render, present, repeat."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from synthsun_renderer import SunsetRenderer
from synthsun_sinks import FrameSurface

from .logging_setup import get_logger
from .performance import BudgetStatus, PerformanceController


@dataclass
class PreviewStats:
    frames: int = 0
    elapsed_s: float = 0.0
    fps: float = 0.0
    next_offset: int = 0
    frame_delay_ms: int = 0
    last_budget: BudgetStatus | None = None


class PreviewController:
    """Single-threaded loop; a frame is never interrupted once started."""

    def __init__(
        self,
        renderer: SunsetRenderer,
        surface: FrameSurface,
        frame_delay_ms: int = 33,
        performance: PerformanceController | None = None,
        sample_every: int = 30,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.renderer = renderer
        self.surface = surface
        self.frame_delay_ms = max(0, int(frame_delay_ms))
        self.performance = performance
        self.sample_every = max(1, sample_every)
        self._sleep = sleep
        self._clock = clock
        self._counter = 0
        self._logger = get_logger("preview")

    def step(self) -> int:
        """Render and present the next frame; returns its offset."""
        offset = self._counter
        self.surface.present(self.renderer.render_frame(offset))
        self._counter = self.renderer.scene.wrap_offset(offset + 1)
        return offset

    def run(self, max_frames: int | None = None) -> PreviewStats:
        stats = PreviewStats(frame_delay_ms=self.frame_delay_ms)
        start = self._clock()
        window_start = start
        window_frames = 0

        self._logger.info("preview started", extra={"event": "preview_start"})
        while not self.surface.poll_quit():
            if max_frames is not None and stats.frames >= max_frames:
                break
            self.step()
            stats.frames += 1
            window_frames += 1

            if self.performance is not None and window_frames >= self.sample_every:
                now = self._clock()
                fps = window_frames / max(now - window_start, 1e-9)
                budget = self.performance.sample(fps, self.frame_delay_ms)
                if budget.recommended_delay_ms != self.frame_delay_ms:
                    self._logger.info(
                        f"frame delay {self.frame_delay_ms} -> {budget.recommended_delay_ms} ms",
                        extra={"event": "pacing_adjusted", "warning": budget.warning, "fps": fps},
                    )
                self.frame_delay_ms = budget.recommended_delay_ms
                stats.last_budget = budget
                window_start = now
                window_frames = 0

            if self.frame_delay_ms > 0:
                self._sleep(self.frame_delay_ms / 1000.0)

        stats.elapsed_s = self._clock() - start
        stats.fps = stats.frames / stats.elapsed_s if stats.elapsed_s > 0 else 0.0
        stats.next_offset = self._counter
        stats.frame_delay_ms = self.frame_delay_ms
        self._logger.info(
            "preview stopped",
            extra={"event": "preview_stop", "frames": stats.frames, "fps": stats.fps},
        )
        return stats
