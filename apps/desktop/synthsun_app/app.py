"""Live preview runtime: Qt window driven by the preview loop."""

from __future__ import annotations

from synthsun_core import AppConfig, PerformanceController, PerformanceTargets, PreviewController, load_config
from synthsun_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from synthsun_renderer import SunsetRenderer
from synthsun_sinks import QtPreviewSurface


def _performance(cfg: AppConfig) -> PerformanceController:
    return PerformanceController(
        PerformanceTargets(
            cpu_percent_max=cfg.performance.cpu_percent_max,
            rss_mb_max=cfg.performance.rss_mb_max,
            fps_min=cfg.performance.fps_min,
            fps_max=cfg.performance.fps_max,
        )
    )


def run_preview(cfg: AppConfig | None = None, max_frames: int | None = None) -> int:
    cfg = cfg or load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files)
    install_crash_hooks()
    logger = get_logger()

    renderer = SunsetRenderer()
    surface = QtPreviewSurface(
        renderer.width,
        renderer.height,
        scale=cfg.preview.scale,
        title=cfg.preview.title,
    )
    controller = PreviewController(
        renderer,
        surface,
        frame_delay_ms=cfg.preview.frame_delay_ms,
        performance=_performance(cfg),
    )
    try:
        stats = controller.run(max_frames=max_frames)
    finally:
        surface.close()

    logger.info("app shutdown", extra={"event": "shutdown", "frames": stats.frames})
    return 0
