# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Smoke tests for the preset CLI."""

from __future__ import annotations

import json
from pathlib import Path
from types import ModuleType

import pytest
from typer.testing import CliRunner

import lintpresets.cli
from lintpresets.cli.app import app
from lintpresets.errors import EngineError

from conftest import ScriptedEngine

_PLAIN = ["--no-color", "--no-emoji"]


def test_cli_package_exposes_app_module() -> None:
    assert isinstance(lintpresets.cli.app, ModuleType)
    assert lintpresets.cli.app.app is app


def test_layers_command_lists_every_layer() -> None:
    result = CliRunner().invoke(app, [*_PLAIN, "layers"])

    assert result.exit_code == 0
    for name in ("base", "functional", "functional-library"):
        assert name in result.stdout


def test_show_unknown_layer_fails() -> None:
    result = CliRunner().invoke(app, [*_PLAIN, "show", "nonexistent"])

    assert result.exit_code == 2
    assert "unknown layer" in result.stdout


def test_show_trace_lists_overrides() -> None:
    result = CliRunner().invoke(app, [*_PLAIN, "show", "base", "--trace"])

    assert result.exit_code == 0
    assert "base provenance" in result.stdout


def test_check_command_passes_for_shipped_layers() -> None:
    result = CliRunner().invoke(app, [*_PLAIN, "check"])

    assert result.exit_code == 0
    assert "every layer extends its parent" in result.stdout


def test_export_json() -> None:
    result = CliRunner().invoke(app, [*_PLAIN, "export", "functional-library", "--format", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert "functype" in payload["plugins"]


def test_export_js_module() -> None:
    result = CliRunner().invoke(app, [*_PLAIN, "export", "base"])

    assert result.exit_code == 0
    assert result.stdout.startswith("import ")
    assert "export default [" in result.stdout


def test_preset_command() -> None:
    result = CliRunner().invoke(app, [*_PLAIN, "preset", "prettier"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["printWidth"] == 120


def test_verify_command_reports_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "snippet.ts"
    source.write_text("let x = 1\nconsole.log(x)\n", encoding="utf-8")
    monkeypatch.setattr("lintpresets.cli.app.default_engine", lambda root: ScriptedEngine())

    result = CliRunner().invoke(app, [*_PLAIN, "verify", "functional", str(source)])

    assert result.exit_code == 1
    assert "functional/no-let" in result.stdout


def test_verify_command_clean_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "snippet.ts"
    source.write_text("const x = 1\nconsole.log(x)\n", encoding="utf-8")
    monkeypatch.setattr("lintpresets.cli.app.default_engine", lambda root: ScriptedEngine())

    result = CliRunner().invoke(app, [*_PLAIN, "verify", "functional", str(source)])

    assert result.exit_code == 0
    assert "no diagnostics" in result.stdout


def test_verify_command_engine_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "snippet.ts"
    source.write_text("const x = 1\n", encoding="utf-8")

    class BrokenEngine:
        def analyze(self, source: str, config: object, filename: str) -> list[object]:
            raise EngineError("analysis engine failed with exit status 2", returncode=2, stderr="boom")

    monkeypatch.setattr("lintpresets.cli.app.default_engine", lambda root: BrokenEngine())

    result = CliRunner().invoke(app, [*_PLAIN, "verify", "base", str(source)])

    assert result.exit_code == 3
    assert "boom" in result.stdout
