# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions and advisory records raised while composing lint presets."""

from __future__ import annotations

from dataclasses import dataclass


class ConfigurationError(Exception):
    """Raised when a preset, fragment, or harness input is invalid."""


class EngineError(RuntimeError):
    """Raised when the external analysis engine cannot be executed."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        """Initialise the error with optional process diagnostics.

        Args:
            message: Human-readable description of the failure.
            returncode: Exit status reported by the engine process, if any.
            stderr: Captured standard error output of the engine.
        """

        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


@dataclass(frozen=True, slots=True)
class RuleConflict:
    """Two fragments registered one plugin name with different handles.

    Composition still resolves the collision (the later fragment wins); the
    record exists so conformance checks can surface the smell.
    """

    plugin: str
    first_fragment: str
    second_fragment: str
    first_module: str
    second_module: str

    def describe(self) -> str:
        """Return a one-line description suitable for console output."""

        return (
            f"plugin '{self.plugin}' registered as {self.first_module} by {self.first_fragment} "
            f"and as {self.second_module} by {self.second_fragment}"
        )


__all__ = ["ConfigurationError", "EngineError", "RuleConflict"]
