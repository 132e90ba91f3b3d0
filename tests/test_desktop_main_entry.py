from __future__ import annotations

import runpy
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for _pkg in ("packages/renderer", "packages/sinks", "packages/core", "apps/desktop"):
    sys.path.insert(0, str(ROOT / _pkg))

import synthsun_app.__main__ as desktop_main


def test_main_defaults_to_export(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(desktop_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = desktop_main.main([])
    assert rc == 0
    assert calls == [["export"]]


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(desktop_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = desktop_main.main(["render-frame", "--offset", "3", "--out", "f.png"])
    assert rc == 0
    assert calls == [["render-frame", "--offset", "3", "--out", "f.png"]]


def test_main_module_runpath_without_package_context() -> None:
    main_path = ROOT / "apps" / "desktop" / "synthsun_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result
