# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tagged rule settings (``Off | Warn | Error | ErrorWithOptions``)."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from .errors import ConfigurationError
from .severity import RuleSeverity, coerce_rule_severity

JsonValue: TypeAlias = None | bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"]
RawRuleSetting: TypeAlias = str | int | Sequence[JsonValue]


@dataclass(frozen=True, slots=True)
class RuleSetting:
    """Atomic setting assigned to a single rule id.

    A setting is never merged with another one: a later assignment of the
    same rule replaces the earlier value, options included.
    """

    severity: RuleSeverity
    options: tuple[JsonValue, ...] = field(default_factory=tuple)

    @property
    def enabled(self) -> bool:
        """Return ``True`` when the rule reports anything."""

        return self.severity.enabled

    def to_eslint(self) -> JsonValue:
        """Return the canonical ESLint representation of the setting."""

        if not self.options:
            return self.severity.value
        return [self.severity.value, *copy.deepcopy(list(self.options))]

    def __str__(self) -> str:
        if not self.options:
            return self.severity.value
        return f"{self.severity.value} {list(self.options)!r}"


def Off() -> RuleSetting:  # noqa: N802 - tag constructor
    """Return a disabled rule setting."""

    return RuleSetting(RuleSeverity.OFF)


def Warn(*options: JsonValue) -> RuleSetting:  # noqa: N802 - tag constructor
    """Return a warning-level setting with optional rule options."""

    return RuleSetting(RuleSeverity.WARN, tuple(copy.deepcopy(list(options))))


def Error() -> RuleSetting:  # noqa: N802 - tag constructor
    """Return an error-level setting without options."""

    return RuleSetting(RuleSeverity.ERROR)


def ErrorWithOptions(*options: JsonValue) -> RuleSetting:  # noqa: N802 - tag constructor
    """Return an error-level setting carrying rule options."""

    if not options:
        raise ConfigurationError("ErrorWithOptions requires at least one option payload")
    return RuleSetting(RuleSeverity.ERROR, tuple(copy.deepcopy(list(options))))


def parse_rule_setting(raw: RawRuleSetting | RuleSetting, *, rule_id: str = "rule") -> RuleSetting:
    """Parse a raw ESLint rule value into a :class:`RuleSetting`.

    Args:
        raw: ``"off" | "warn" | "error"``, ``0 | 1 | 2`` or ``[severity, *options]``.
        rule_id: Rule identifier used in error messages.

    Returns:
        RuleSetting: Parsed setting.

    Raises:
        ConfigurationError: If ``raw`` is neither a severity token nor a
            ``[severity, options...]`` sequence.
    """

    if isinstance(raw, RuleSetting):
        return raw
    if isinstance(raw, (str, int)):
        return RuleSetting(coerce_rule_severity(raw, context=rule_id))
    if isinstance(raw, Sequence) and not isinstance(raw, (bytes, bytearray)):
        items = list(raw)
        if not items:
            raise ConfigurationError(f"{rule_id}: rule setting list must start with a severity")
        head, *options = items
        for option in options:
            _ensure_json(option, rule_id)
        return RuleSetting(coerce_rule_severity(head, context=rule_id), tuple(copy.deepcopy(options)))
    raise ConfigurationError(f"{rule_id}: rule setting must be a severity or [severity, options], got {raw!r}")


def _ensure_json(value: object, rule_id: str) -> None:
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ConfigurationError(f"{rule_id}: option keys must be strings, got {key!r}")
            _ensure_json(item, rule_id)
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            _ensure_json(item, rule_id)
        return
    raise ConfigurationError(f"{rule_id}: option value {value!r} is not JSON serialisable")


__all__ = [
    "Error",
    "ErrorWithOptions",
    "JsonValue",
    "Off",
    "RawRuleSetting",
    "RuleSetting",
    "Warn",
    "parse_rule_setting",
]
