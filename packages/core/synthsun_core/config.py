"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1


@dataclass
class ExportConfig:
    output_dir: str = "out"
    # 0 means one worker per frame.
    workers: int = 0


@dataclass
class PreviewConfig:
    frame_delay_ms: int = 33
    scale: int = 1
    title: str = "synthsun"


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class PerformanceConfig:
    cpu_percent_max: float = 90.0
    rss_mb_max: float = 512.0
    fps_min: float = 10.0
    fps_max: float = 30.0


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    export: ExportConfig = field(default_factory=ExportConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Synthsun"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Synthsun"
    return Path.home() / ".config" / "synthsun"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_export(cfg: AppConfig) -> None:
    cfg.export.output_dir = str(cfg.export.output_dir or "out")
    cfg.export.workers = max(0, min(256, int(cfg.export.workers)))


def _normalize_preview(cfg: AppConfig) -> None:
    cfg.preview.frame_delay_ms = max(0, min(1000, int(cfg.preview.frame_delay_ms)))
    cfg.preview.scale = max(1, min(4, int(cfg.preview.scale)))
    cfg.preview.title = str(cfg.preview.title or "synthsun")


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.keep_log_files = max(2, int(cfg.diagnostics.keep_log_files))


def _normalize_performance(cfg: AppConfig) -> None:
    cfg.performance.cpu_percent_max = float(max(1.0, cfg.performance.cpu_percent_max))
    cfg.performance.rss_mb_max = float(max(64.0, cfg.performance.rss_mb_max))
    cfg.performance.fps_min = float(max(1.0, cfg.performance.fps_min))
    cfg.performance.fps_max = float(max(cfg.performance.fps_min, cfg.performance.fps_max))


def normalize(cfg: AppConfig) -> AppConfig:
    _normalize_export(cfg)
    _normalize_preview(cfg)
    _normalize_diagnostics(cfg)
    _normalize_performance(cfg)
    return cfg


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(raw.get("config_version", CONFIG_VERSION)),
        export=_merge(ExportConfig, raw.get("export", {})),
        preview=_merge(PreviewConfig, raw.get("preview", {})),
        diagnostics=_merge(DiagnosticsConfig, raw.get("diagnostics", {})),
        performance=_merge(PerformanceConfig, raw.get("performance", {})),
    )
    return normalize(cfg)


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
