# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalized diagnostics returned by the verification harness."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .severity import DiagnosticSeverity


class Diagnostic(BaseModel):
    """One finding reported by the analysis engine."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rule_id: str | None = Field(default=None, alias="ruleId")
    severity: DiagnosticSeverity
    message: str
    fatal: bool = False
    line: int | None = None
    column: int | None = None

    @field_validator("message", mode="before")
    @classmethod
    def _strip_message(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _fatal_has_no_rule(self) -> Diagnostic:
        """Ensure parse failures are never attributed to a rule."""
        if self.fatal and self.rule_id is not None:
            raise ValueError("fatal diagnostics must not carry a rule id")
        return self

    @classmethod
    def parse_failure(cls, message: str, *, line: int | None = None, column: int | None = None) -> Diagnostic:
        """Return the fatal diagnostic describing unparsable source."""

        return cls(rule_id=None, severity=DiagnosticSeverity.ERROR, message=message, fatal=True, line=line, column=column)

    @classmethod
    def from_eslint(cls, payload: Mapping[str, object]) -> Diagnostic:
        """Build a diagnostic from one entry of an ESLint JSON ``messages`` list.

        Args:
            payload: Message mapping produced by ``eslint --format json``.

        Returns:
            Diagnostic: Normalized diagnostic.
        """

        fatal = bool(payload.get("fatal", False))
        severity = payload.get("severity")
        level = DiagnosticSeverity.ERROR if fatal or severity == DiagnosticSeverity.ERROR else DiagnosticSeverity.WARNING
        rule_id = payload.get("ruleId")
        line = payload.get("line")
        column = payload.get("column")
        return cls(
            rule_id=None if fatal or not isinstance(rule_id, str) else rule_id,
            severity=level,
            message=str(payload.get("message") or ""),
            fatal=fatal,
            line=line if isinstance(line, int) else None,
            column=column if isinstance(column, int) else None,
        )

    def location(self) -> str:
        """Return ``line:column`` (or ``-`` when unknown)."""

        if self.line is None:
            return "-"
        return f"{self.line}:{self.column or 0}"


def rule_ids(diagnostics: list[Diagnostic] | tuple[Diagnostic, ...]) -> list[str]:
    """Return the non-null rule ids of ``diagnostics`` in emission order."""

    return [diagnostic.rule_id for diagnostic in diagnostics if diagnostic.rule_id is not None]


__all__ = ["Diagnostic", "rule_ids"]
