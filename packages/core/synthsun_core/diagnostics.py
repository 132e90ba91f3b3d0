"""Environment report for the ``doctor`` command."""

from __future__ import annotations

import platform
from dataclasses import asdict
from datetime import datetime, timezone
from importlib import metadata
from typing import Any

from synthsun_renderer import DEFAULT_SCENE
from synthsun_sinks import qt_available

from .config import AppConfig, config_path
from .logging_setup import log_dir

_DISTRIBUTIONS = ("numpy", "Pillow", "psutil", "PySide6")


def library_versions() -> dict[str, str | None]:
    versions: dict[str, str | None] = {}
    for name in _DISTRIBUTIONS:
        try:
            versions[name] = metadata.version(name)
        except metadata.PackageNotFoundError:
            versions[name] = None
    return versions


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "libraries": library_versions(),
        "preview_available": qt_available(),
        "config_path": str(config_path()),
        "log_dir": str(log_dir()),
        "config": asdict(cfg),
        "scene": asdict(DEFAULT_SCENE),
    }
