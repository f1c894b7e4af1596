# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Boundary to the external analysis engine (ESLint)."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from .composer import EffectiveConfiguration
from .config import EngineSettings
from .diagnostics import Diagnostic
from .errors import EngineError
from .render import render_flat_config

LOGGER = logging.getLogger(__name__)

# ESLint exits with 1 when lint errors were reported; 2 signals a crash.
_LINT_EXIT_CODES: Final[frozenset[int]] = frozenset({0, 1})


@runtime_checkable
class AnalysisEngine(Protocol):
    """Opaque capability that lints one source text under a configuration."""

    def analyze(self, source: str, config: EffectiveConfiguration, filename: str) -> Sequence[Diagnostic]:
        """Return the diagnostics for ``source`` in emission order.

        Args:
            source: Source text to analyse.
            config: Effective configuration; its fragments are applied in order.
            filename: Virtual filename used for parser selection.

        Returns:
            Sequence[Diagnostic]: Diagnostics, including fatal parse failures.
        """
        ...


class EslintEngine:
    """Run ESLint in a subprocess against a generated flat-config module.

    The configuration module is written next to the project's
    ``node_modules`` so plugin imports resolve, and removed afterwards.
    Inline configuration comments are disabled so a snippet cannot switch a
    rule back on.
    """

    def __init__(self, settings: EngineSettings | None = None, *, root: Path | None = None) -> None:
        self._settings = settings or EngineSettings()
        self._root = (root or Path.cwd()).resolve()

    @property
    def settings(self) -> EngineSettings:
        """Return the engine settings in use."""

        return self._settings

    def analyze(self, source: str, config: EffectiveConfiguration, filename: str) -> Sequence[Diagnostic]:
        cwd = self._settings.resolved_directory(self._root)
        module = render_flat_config(config.fragments)
        with tempfile.NamedTemporaryFile(
            "w",
            dir=cwd,
            prefix=".lintpresets-",
            suffix=".config.mjs",
            delete=False,
            encoding="utf-8",
        ) as handle:
            handle.write(module)
            config_path = Path(handle.name)
        try:
            completed = self._run(config_path, source, filename, cwd)
        finally:
            config_path.unlink(missing_ok=True)
        return parse_eslint_report(completed.stdout)

    def _run(self, config_path: Path, source: str, filename: str, cwd: Path) -> subprocess.CompletedProcess[str]:
        args = [
            *_resolve_executable(self._settings.command),
            "--config",
            str(config_path),
            "--format",
            "json",
            "--no-inline-config",
            "--stdin",
            "--stdin-filename",
            filename,
            *self._settings.extra_args,
        ]
        LOGGER.debug("running analysis engine: %s", " ".join(args))
        completed = subprocess.run(
            args,
            cwd=str(cwd),
            input=source,
            capture_output=True,
            text=True,
            check=False,
        )
        LOGGER.debug("analysis engine exited with %d", completed.returncode)
        if completed.returncode not in _LINT_EXIT_CODES:
            raise EngineError(
                f"analysis engine failed with exit status {completed.returncode}",
                returncode=completed.returncode,
                stderr=completed.stderr,
            )
        return completed


def parse_eslint_report(stdout: str) -> list[Diagnostic]:
    """Parse ``eslint --format json`` output into diagnostics.

    Args:
        stdout: Raw JSON report.

    Returns:
        list[Diagnostic]: Diagnostics of every result entry, in report order.

    Raises:
        EngineError: If the report is not the expected JSON structure.
    """

    try:
        payload = json.loads(stdout or "[]")
    except json.JSONDecodeError as exc:
        raise EngineError(f"analysis engine produced unreadable output: {exc}") from exc
    if not isinstance(payload, list):
        raise EngineError("analysis engine report must be a JSON array")
    results: list[Diagnostic] = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        messages = entry.get("messages")
        if not isinstance(messages, list):
            continue
        results.extend(Diagnostic.from_eslint(message) for message in messages if isinstance(message, dict))
    return results


def _resolve_executable(command: Sequence[str]) -> list[str]:
    head, *rest = command
    if Path(head).is_absolute():
        return [head, *rest]
    resolved = shutil.which(head)
    if resolved is None:
        raise EngineError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


__all__ = ["AnalysisEngine", "EslintEngine", "parse_eslint_report"]
