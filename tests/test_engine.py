# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ESLint subprocess engine."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any

import pytest

from lintpresets import layers
from lintpresets.config import EngineSettings
from lintpresets.engine import AnalysisEngine, EslintEngine, parse_eslint_report
from lintpresets.errors import EngineError
from lintpresets.harness import sanitize
from lintpresets.severity import DiagnosticSeverity

_REPORT = [
    {
        "filePath": "/work/test.ts",
        "messages": [
            {
                "ruleId": "simple-import-sort/imports",
                "severity": 2,
                "message": "Run autofix to sort these imports!",
                "line": 1,
                "column": 1,
            },
            {"ruleId": "functype/prefer-option", "severity": 1, "message": " Prefer Option ", "line": 3},
        ],
    },
]


def test_parse_eslint_report_keeps_emission_order() -> None:
    diagnostics = parse_eslint_report(json.dumps(_REPORT))

    assert [diagnostic.rule_id for diagnostic in diagnostics] == [
        "simple-import-sort/imports",
        "functype/prefer-option",
    ]
    assert diagnostics[0].severity is DiagnosticSeverity.ERROR
    assert diagnostics[1].severity is DiagnosticSeverity.WARNING
    assert diagnostics[1].message == "Prefer Option"
    assert diagnostics[1].column is None


def test_parse_eslint_report_fatal_message() -> None:
    payload = [
        {
            "filePath": "<text>",
            "messages": [{"ruleId": None, "fatal": True, "severity": 2, "message": "Parsing error: '}' expected."}],
        },
    ]

    (diagnostic,) = parse_eslint_report(json.dumps(payload))

    assert diagnostic.fatal
    assert diagnostic.rule_id is None


@pytest.mark.parametrize("stdout", ["not json", '{"messages": []}'])
def test_parse_eslint_report_rejects_bad_output(stdout: str) -> None:
    with pytest.raises(EngineError):
        parse_eslint_report(stdout)


def test_parse_eslint_report_empty_output() -> None:
    assert parse_eslint_report("") == []


def _fake_run(captured: dict[str, Any], *, returncode: int, stdout: str, stderr: str = "") -> Any:
    def fake_run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        config_path = Path(args[args.index("--config") + 1])
        captured["args"] = args
        captured["kwargs"] = kwargs
        captured["config_path"] = config_path
        captured["module"] = config_path.read_text(encoding="utf-8")
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)

    return fake_run


def test_eslint_engine_runs_generated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}
    monkeypatch.setattr("lintpresets.engine.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("lintpresets.engine.subprocess.run", _fake_run(captured, returncode=1, stdout=json.dumps(_REPORT)))
    engine = EslintEngine(EngineSettings(command=("npx", "eslint"), extra_args=("--no-warn-ignored",)), root=tmp_path)

    diagnostics = engine.analyze("import x from 'y'\n", sanitize(layers.base()), "test.ts")

    assert isinstance(engine, AnalysisEngine)
    assert [diagnostic.rule_id for diagnostic in diagnostics][0] == "simple-import-sort/imports"
    args = captured["args"]
    assert args[:2] == ["/usr/bin/npx", "eslint"]
    assert args[args.index("--stdin-filename") + 1] == "test.ts"
    assert args[-1] == "--no-warn-ignored"
    assert captured["kwargs"]["input"] == "import x from 'y'\n"
    assert captured["kwargs"]["cwd"] == str(tmp_path.resolve())
    assert captured["config_path"].parent == tmp_path.resolve()
    assert not captured["config_path"].exists()
    assert 'from "eslint-plugin-simple-import-sort"' in captured["module"]


def test_eslint_engine_crash_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}
    monkeypatch.setattr("lintpresets.engine.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(
        "lintpresets.engine.subprocess.run",
        _fake_run(captured, returncode=2, stdout="", stderr="Could not find plugin"),
    )
    engine = EslintEngine(root=tmp_path)

    with pytest.raises(EngineError) as excinfo:
        engine.analyze("const x = 1\n", layers.base(), "test.ts")

    assert excinfo.value.returncode == 2
    assert "Could not find plugin" in excinfo.value.stderr
    assert not captured["config_path"].exists()


def test_eslint_engine_missing_executable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("lintpresets.engine.shutil.which", lambda name: None)
    engine = EslintEngine(root=tmp_path)

    with pytest.raises(EngineError, match="not found"):
        engine.analyze("const x = 1\n", layers.base(), "test.ts")
    assert list(tmp_path.iterdir()) == []


def test_eslint_engine_ignores_inline_configuration(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}
    monkeypatch.setattr("lintpresets.engine.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("lintpresets.engine.subprocess.run", _fake_run(captured, returncode=0, stdout="[]"))
    engine = EslintEngine(root=tmp_path)
    source = '/* eslint functional/immutable-data: "error" */\nconst a = [1]\na.push(2)\n'

    assert engine.analyze(source, sanitize(layers.functional()), "test.ts") == []

    args = captured["args"]
    assert "--no-inline-config" in args
    assert args.index("--no-inline-config") < args.index("--stdin")


def test_eslint_engine_config_matches_typescript_snippets(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}
    monkeypatch.setattr("lintpresets.engine.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("lintpresets.engine.subprocess.run", _fake_run(captured, returncode=0, stdout="[]"))

    EslintEngine(root=tmp_path).analyze("const x = 1\n", sanitize(layers.base()), "component.tsx")

    assert '"**/*.tsx"' in captured["module"]
    assert '"**/*.jsx"' in captured["module"]
