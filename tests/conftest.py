# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import re
from collections.abc import Sequence

import pytest

from lintpresets.composer import EffectiveConfiguration
from lintpresets.diagnostics import Diagnostic
from lintpresets.severity import DiagnosticSeverity, RuleSeverity

_IMPORT = re.compile(r"^\s*import\s.*?from\s+[\"']([^\"']+)[\"']", re.MULTILINE)
_LET = re.compile(r"^\s*let\s")
_TRIGGER = re.compile(r"//\s*trigger:\s*(\S+)")
_PAIRS = {")": "(", "]": "[", "}": "{"}


class ScriptedEngine:
    """Analysis engine double emulating a handful of rules.

    It honours the rule settings of the configuration it receives, reports
    unbalanced brackets as a fatal parse failure, and reports any enabled rule
    named in a ``// trigger: <rule-id>`` comment.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, EffectiveConfiguration, str]] = []

    def analyze(self, source: str, config: EffectiveConfiguration, filename: str) -> Sequence[Diagnostic]:
        self.calls.append((source, config, filename))
        if (line := _unbalanced_line(source)) is not None:
            return [Diagnostic.parse_failure("Parsing error: unexpected end of input", line=line, column=1)]
        diagnostics: list[Diagnostic] = []
        sources = _IMPORT.findall(source)
        if sources != sorted(sources):
            self._report(diagnostics, config, "simple-import-sort/imports", "Run autofix to sort these imports!", 1)
        for number, text in enumerate(source.splitlines(), start=1):
            if _LET.match(text):
                self._report(diagnostics, config, "functional/no-let", "Unexpected let, use const instead.", number)
            for rule_id in _TRIGGER.findall(text):
                self._report(diagnostics, config, rule_id, f"triggered {rule_id}", number)
        return diagnostics

    @staticmethod
    def _report(
        diagnostics: list[Diagnostic],
        config: EffectiveConfiguration,
        rule_id: str,
        message: str,
        line: int,
    ) -> None:
        setting = config.rules.get(rule_id)
        if setting is None or not setting.enabled:
            return
        severity = DiagnosticSeverity.ERROR if setting.severity is RuleSeverity.ERROR else DiagnosticSeverity.WARNING
        diagnostics.append(Diagnostic(rule_id=rule_id, severity=severity, message=message, line=line, column=1))


def _unbalanced_line(source: str) -> int | None:
    stack: list[str] = []
    for number, text in enumerate(source.splitlines(), start=1):
        for char in text:
            if char in "([{":
                stack.append(char)
            elif char in _PAIRS:
                if not stack or stack.pop() != _PAIRS[char]:
                    return number
    return (len(source.splitlines()) or 1) if stack else None


@pytest.fixture
def engine() -> ScriptedEngine:
    """Return a fresh scripted analysis engine."""
    return ScriptedEngine()
