"""CLI entrypoints for synthsun batch export, single frames, live preview and diagnostics."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from synthsun_core import (
    ExportController,
    PerformanceController,
    PerformanceTargets,
    build_doctor_payload,
    load_config,
)
from synthsun_core.logging_setup import configure_logging, install_crash_hooks
from synthsun_renderer import DEFAULT_SCENE, SunsetRenderer
from synthsun_sinks import PngFrameSink, save_frame


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def cmd_export(args: argparse.Namespace) -> int:
    cfg = load_config()
    out_dir = Path(args.out_dir or cfg.export.output_dir).expanduser()
    workers = cfg.export.workers if args.workers is None else max(0, args.workers)

    controller = ExportController(
        renderer=SunsetRenderer(),
        sink=PngFrameSink(out_dir),
        workers=workers,
        performance=PerformanceController(
            PerformanceTargets(
                cpu_percent_max=cfg.performance.cpu_percent_max,
                rss_mb_max=cfg.performance.rss_mb_max,
                fps_min=cfg.performance.fps_min,
                fps_max=cfg.performance.fps_max,
            )
        ),
    )
    report = controller.run()
    payload = asdict(report)
    payload.pop("files")
    payload["message"] = f"Generated animation in {report.elapsed_s:.3f} s."
    _print_json(payload)
    return 0


def cmd_render_frame(args: argparse.Namespace) -> int:
    renderer = SunsetRenderer()
    offset = renderer.scene.wrap_offset(args.offset)
    frame = renderer.render_frame(offset)
    path = save_frame(frame, Path(args.out).expanduser())
    _print_json({"offset": offset, "path": str(path), "width": frame.width, "height": frame.height})
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    from .app import run_preview

    cfg = load_config()
    if args.scale is not None:
        cfg.preview.scale = max(1, min(4, args.scale))
    if args.delay_ms is not None:
        cfg.preview.frame_delay_ms = max(0, min(1000, args.delay_ms))
    return run_preview(cfg, max_frames=args.max_frames)


def cmd_doctor(_args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(load_config()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="synthsun", description="Procedural sunset-over-water animation")
    parser.add_argument("--verbose", action="store_true", help="Log per-stage render progress")
    sub = parser.add_subparsers(dest="command", required=True)

    export_cmd = sub.add_parser("export", help=f"Render all {DEFAULT_SCENE.frame_count} frames to PNG files")
    export_cmd.add_argument("--out-dir", default=None, help="Output directory (default from config: out)")
    export_cmd.add_argument("--workers", type=int, default=None, help="Worker threads, 0 for one per frame")
    export_cmd.set_defaults(func=cmd_export)

    frame_cmd = sub.add_parser("render-frame", help="Render a single frame to a PNG file")
    frame_cmd.add_argument("--offset", type=int, default=0, help="Frame offset, wrapped to the animation length")
    frame_cmd.add_argument("--out", required=True, help="Destination PNG path")
    frame_cmd.set_defaults(func=cmd_render_frame)

    preview_cmd = sub.add_parser("preview", help="Show the animation in a window until closed")
    preview_cmd.add_argument("--scale", type=int, default=None, help="Integer window zoom, 1-4")
    preview_cmd.add_argument("--delay-ms", type=int, default=None, help="Initial delay between frames")
    preview_cmd.add_argument("--max-frames", type=int, default=None, help=argparse.SUPPRESS)
    preview_cmd.set_defaults(func=cmd_preview)

    doctor_cmd = sub.add_parser("doctor", help="Print environment and configuration diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        keep_files=load_config().diagnostics.keep_log_files,
        console=False,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    install_crash_hooks()
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
