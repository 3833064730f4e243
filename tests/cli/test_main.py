# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the uiderive CLI entry point."""

import sys
from pathlib import Path

import pytest

from uiderive.cli.main import main

# ###############
# Helpers
# ###############

FORMS = """\
from dataclasses import dataclass
from typing import Annotated

from uiderive import derive, ui


@derive
@dataclass
class Settings:
    age: Annotated[int, ui("slider(min = 0, max = 100)")] = 18
    turbo: Annotated[bool, ui("checkbox")] = False
"""

BROKEN = FORMS.replace('ui("checkbox")', 'ui("checkbox(foo = 1)")')


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["uiderive", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- init tests --------


def test_init_creates_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """init writes a .uiderive.yaml file with the default build directory."""
    assert _run(monkeypatch, "init", str(tmp_path)) == 0
    content = (tmp_path / ".uiderive.yaml").read_text(encoding="utf-8")
    assert "build-directory: .uiderive-build" in content


def test_init_default_directory_uses_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "init") == 0
    assert (tmp_path / ".uiderive.yaml").exists()


def test_init_fails_if_config_already_exists(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".uiderive.yaml").write_text("build-directory: out\n", encoding="utf-8")
    assert _run(monkeypatch, "init", str(tmp_path)) == 1


def test_init_fails_if_directory_does_not_exist(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "init", str(tmp_path / "nonexistent")) == 1


# -------- check tests --------


def test_check_without_sources(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "plain.py").write_text("VALUE = 1\n", encoding="utf-8")
    assert _run(monkeypatch, "check", str(tmp_path)) == 0
    assert "No annotated dataclasses found." in capsys.readouterr().out


def test_check_valid_project(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "forms.py").write_text(FORMS, encoding="utf-8")
    assert _run(monkeypatch, "check", str(tmp_path)) == 0
    out = capsys.readouterr().out
    assert "Checking 1 source file(s)..." in out
    assert "No issues found in 1 dataclass(es)." in out


def test_check_reports_annotation_errors(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "forms.py").write_text(BROKEN, encoding="utf-8")
    assert _run(monkeypatch, "check", str(tmp_path)) == 1
    err = capsys.readouterr().err
    assert "line 11, column 41: Unexpected parameter." in err


def test_check_skips_excluded_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".uiderive.yaml").write_text("build-directory: out\nexclude:\n  - legacy/*\n", encoding="utf-8")
    (tmp_path / "legacy").mkdir()
    (tmp_path / "legacy" / "forms.py").write_text(BROKEN, encoding="utf-8")
    assert _run(monkeypatch, "check", str(tmp_path)) == 0


def test_check_invalid_config(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / ".uiderive.yaml").write_text("marker: ui\n", encoding="utf-8")
    assert _run(monkeypatch, "check", str(tmp_path)) == 1
    assert "missing required field 'build-directory'" in capsys.readouterr().err


# -------- build tests --------


def test_build_writes_modules(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "app").mkdir()
    (tmp_path / "app" / "forms.py").write_text(FORMS, encoding="utf-8")
    assert _run(monkeypatch, "build", str(tmp_path)) == 0
    artifact = tmp_path / ".uiderive-build" / "app" / "forms_ui.py"
    assert artifact.exists()
    out = capsys.readouterr().out
    assert ".uiderive-build/app/forms_ui.py: compiled (Settings)" in out
    assert "Built 1 module(s) into '.uiderive-build'." in out


def test_build_force(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "forms.py").write_text(FORMS, encoding="utf-8")
    assert _run(monkeypatch, "build", str(tmp_path), "--force") == 0
    assert _run(monkeypatch, "build", str(tmp_path), "--force") == 0
    assert capsys.readouterr().out.count("forms_ui.py: compiled (Settings)") == 2


def test_build_fails_on_errors(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "forms.py").write_text(BROKEN, encoding="utf-8")
    assert _run(monkeypatch, "build", str(tmp_path)) == 1
    assert "Compile error in" in capsys.readouterr().err


# -------- show tests --------


def test_show_prints_generated_code(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "forms.py"
    source.write_text(FORMS, encoding="utf-8")
    assert _run(monkeypatch, "show", str(source)) == 0
    out = capsys.readouterr().out
    assert "class SettingsEvents:" in out
    assert "def draw_settings(ui, ext):" in out
    assert "_rt.SliderParams(label='age', min=0, max=100)" in out


def test_show_unknown_aggregate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "forms.py"
    source.write_text(FORMS, encoding="utf-8")
    assert _run(monkeypatch, "show", str(source), "--aggregate", "Missing") == 1


def test_show_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "show", str(tmp_path / "missing.py")) == 1
