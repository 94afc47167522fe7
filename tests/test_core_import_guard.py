import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"


def _load_guard():
    spec = importlib.util.spec_from_file_location("check_core_imports", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None  # for mypy
    spec.loader.exec_module(module)
    return module


def test_core_import_guard_passes():
    exit_code = _load_guard().main()
    assert exit_code == 0, "core import guard failed"


def test_core_import_guard_flags_relative_facade_import(tmp_path, monkeypatch):
    guard = _load_guard()
    core = tmp_path / "src" / "easypanel_sdk" / "core"
    core.mkdir(parents=True)
    bad = core / "leaky.py"
    bad.write_text("from ..resources import ServicesResource\n")
    monkeypatch.setattr(guard, "REPO_ROOT", tmp_path)

    errors = guard.scan_file(bad)

    assert len(errors) == 1
    assert "easypanel_sdk.resources" in errors[0]


def test_core_import_guard_flags_absolute_facade_import(tmp_path, monkeypatch):
    guard = _load_guard()
    core = tmp_path / "src" / "easypanel_sdk" / "core"
    core.mkdir(parents=True)
    bad = core / "leaky.py"
    bad.write_text("from easypanel_sdk import easypanel\nimport json\n")
    monkeypatch.setattr(guard, "REPO_ROOT", tmp_path)

    assert guard.scan_file(bad)
