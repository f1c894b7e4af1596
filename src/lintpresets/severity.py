# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final

from .errors import ConfigurationError


class RuleSeverity(str, Enum):
    """Severity levels a rule can be configured with."""

    OFF = "off"
    WARN = "warn"
    ERROR = "error"

    @property
    def level(self) -> int:
        """Return the numeric level understood by ESLint (0, 1 or 2)."""

        return _LEVELS[self]

    @property
    def enabled(self) -> bool:
        """Return ``True`` unless the rule is switched off."""

        return self is not RuleSeverity.OFF


class DiagnosticSeverity(IntEnum):
    """Severity attached to an emitted diagnostic."""

    WARNING = 1
    ERROR = 2


_LEVELS: Final[dict[RuleSeverity, int]] = {
    RuleSeverity.OFF: 0,
    RuleSeverity.WARN: 1,
    RuleSeverity.ERROR: 2,
}
_BY_LEVEL: Final[dict[int, RuleSeverity]] = {level: severity for severity, level in _LEVELS.items()}


def coerce_rule_severity(value: object, *, context: str = "rule") -> RuleSeverity:
    """Normalise a severity token (``"warn"``, ``2`` ...) into :class:`RuleSeverity`.

    Args:
        value: Raw severity token supplied by a fragment.
        context: Label used in error messages, usually the rule id.

    Returns:
        RuleSeverity: Parsed severity.

    Raises:
        ConfigurationError: If ``value`` is not a recognised severity token.
    """

    if isinstance(value, RuleSeverity):
        return value
    if isinstance(value, bool):
        raise ConfigurationError(f"{context}: severity must be 'off', 'warn', 'error' or 0-2, got {value!r}")
    if isinstance(value, int):
        try:
            return _BY_LEVEL[value]
        except KeyError:
            raise ConfigurationError(f"{context}: numeric severity must be 0, 1 or 2, got {value}") from None
    if isinstance(value, str):
        try:
            return RuleSeverity(value.strip().lower())
        except ValueError:
            raise ConfigurationError(f"{context}: unknown severity '{value}'") from None
    raise ConfigurationError(f"{context}: severity must be 'off', 'warn', 'error' or 0-2, got {value!r}")


__all__ = ["DiagnosticSeverity", "RuleSeverity", "coerce_rule_severity"]
