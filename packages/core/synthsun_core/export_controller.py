"""Batch PNG export: one independent render task per frame offset."""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Iterable

from synthsun_renderer import SunsetRenderer
from synthsun_sinks import PngFrameSink, SavedFrame

from .logging_setup import get_logger
from .performance import BudgetStatus, PerformanceController


@dataclass
class ExportReport:
    output_dir: str
    frames: int = 0
    elapsed_s: float = 0.0
    bytes_written: int = 0
    workers: int = 0
    files: list[str] = field(default_factory=list)
    budget: BudgetStatus | None = None


class ExportController:
    def __init__(
        self,
        renderer: SunsetRenderer,
        sink: PngFrameSink,
        workers: int = 0,
        performance: PerformanceController | None = None,
    ) -> None:
        self.renderer = renderer
        self.sink = sink
        self.workers = workers
        self.performance = performance
        self._logger = get_logger("export")

    def _export_one(self, offset: int) -> SavedFrame:
        frame = self.renderer.render_frame(offset)
        saved = self.sink.write(frame)
        self._logger.info(
            f"frame {offset} saved",
            extra={"event": "frame_saved", "offset": offset, "path": str(saved.path)},
        )
        return saved

    def run(self, offsets: Iterable[int] | None = None) -> ExportReport:
        todo = list(range(self.renderer.frame_count)) if offsets is None else list(offsets)
        workers = max(1, self.workers or len(todo))
        report = ExportReport(output_dir=str(self.sink.output_dir), workers=workers)

        self.sink.prepare()
        start = time.perf_counter()
        saved: list[SavedFrame] = []

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="synthsun-export") as pool:
            futures = {pool.submit(self._export_one, offset): offset for offset in todo}
            for future in as_completed(futures):
                offset = futures[future]
                try:
                    saved.append(future.result())
                except Exception as exc:
                    for pending in futures:
                        pending.cancel()
                    self._logger.error(
                        f"frame {offset} export failed: {exc}",
                        extra={"event": "frame_failed", "offset": offset},
                    )
                    raise RuntimeError(f"frame {offset} export failed: {exc}") from exc

        report.elapsed_s = time.perf_counter() - start
        saved.sort(key=lambda s: s.offset)
        report.frames = len(saved)
        report.bytes_written = sum(s.bytes_written for s in saved)
        report.files = [str(s.path) for s in saved]

        if self.performance is not None and report.elapsed_s > 0:
            report.budget = self.performance.sample(report.frames / report.elapsed_s, 0)

        self._logger.info(
            f"generated animation in {report.elapsed_s:.3f} s",
            extra={"event": "export_done", "frames": report.frames, "elapsed_s": report.elapsed_s},
        )
        return report
