"""Runtime performance budgeting and frame pacing hints."""

from __future__ import annotations

from dataclasses import dataclass

try:
    import psutil
except Exception:  # pragma: no cover
    psutil = None

MIN_DELAY_MS = 0
MAX_DELAY_MS = 1000


@dataclass(frozen=True)
class PerformanceTargets:
    cpu_percent_max: float = 90.0
    rss_mb_max: float = 512.0
    fps_min: float = 10.0
    fps_max: float = 30.0


@dataclass(frozen=True)
class BudgetStatus:
    cpu_percent: float
    rss_mb: float
    fps: float
    overloaded: bool
    warning: str | None
    recommended_delay_ms: int


class PerformanceController:
    def __init__(self, targets: PerformanceTargets | None = None) -> None:
        self.targets = targets or PerformanceTargets()
        self._process = psutil.Process() if psutil is not None else None
        if self._process is not None:
            # Prime non-blocking CPU measurement.
            self._process.cpu_percent(interval=None)

    def measure(self) -> tuple[float, float]:
        if self._process is None:
            return 0.0, 0.0
        cpu = float(self._process.cpu_percent(interval=None))
        rss_mb = float(self._process.memory_info().rss) / (1024 * 1024)
        return cpu, rss_mb

    def sample(self, fps: float, delay_ms: int) -> BudgetStatus:
        cpu, rss_mb = self.measure()
        overloaded = cpu > self.targets.cpu_percent_max or rss_mb > self.targets.rss_mb_max

        warning = None
        rec_delay = delay_ms

        if overloaded:
            warning = "resource_overload"
            rec_delay = min(MAX_DELAY_MS, int(delay_ms * 1.25) + 5)
        elif fps < self.targets.fps_min:
            warning = "below_fps_target"
            rec_delay = max(MIN_DELAY_MS, delay_ms - 5)
        elif fps > self.targets.fps_max:
            warning = "above_fps_target"
            rec_delay = min(MAX_DELAY_MS, delay_ms + 5)

        return BudgetStatus(
            cpu_percent=cpu,
            rss_mb=rss_mb,
            fps=float(fps),
            overloaded=overloaded,
            warning=warning,
            recommended_delay_ms=rec_delay,
        )
