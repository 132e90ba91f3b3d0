"""Core app services for settings, logging, batch export and live preview."""

from .config import AppConfig, load_config, save_config
from .diagnostics import build_doctor_payload
from .export_controller import ExportController, ExportReport
from .performance import BudgetStatus, PerformanceController, PerformanceTargets
from .preview_controller import PreviewController, PreviewStats

__all__ = [
    "AppConfig",
    "BudgetStatus",
    "ExportController",
    "ExportReport",
    "PerformanceController",
    "PerformanceTargets",
    "PreviewController",
    "PreviewStats",
    "build_doctor_payload",
    "load_config",
    "save_config",
]
