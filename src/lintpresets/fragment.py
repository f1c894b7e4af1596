# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable configuration fragments and the capability handles they carry."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Literal, TypeAlias

from .errors import ConfigurationError
from .settings import JsonValue, RuleSetting, parse_rule_setting

GlobalAccess: TypeAlias = Literal["readonly", "writable", "off"]

_GLOBAL_ACCESS: Final[frozenset[str]] = frozenset({"readonly", "writable", "off"})
_EMPTY: Final[Mapping[str, object]] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ModuleRef:
    """Reference to an importable JavaScript module (optionally one export of it)."""

    module: str
    export: str | None = None

    def __post_init__(self) -> None:
        if not self.module or not self.module.strip():
            raise ConfigurationError("module reference requires a module specifier")

    def describe(self) -> str:
        """Return ``module`` or ``module#export`` for display."""

        return self.module if self.export is None else f"{self.module}#{self.export}"


@dataclass(frozen=True, slots=True)
class PluginHandle:
    """Capability handle for a lint plugin.

    ``type_aware_rules`` lists the rule ids implemented by the plugin that need
    whole-program type information; the verification harness disables them.
    """

    source: ModuleRef
    type_aware_rules: frozenset[str] = frozenset()

    @classmethod
    def of(cls, module: str, export: str | None = None, *, type_aware_rules: Iterable[str] = ()) -> PluginHandle:
        """Build a handle from a module specifier."""

        return cls(ModuleRef(module, export), frozenset(type_aware_rules))

    def same_capability(self, other: PluginHandle) -> bool:
        """Return ``True`` when both handles load the same plugin object."""

        return self.source == other.source

    def describe(self) -> str:
        """Return the module reference backing the handle."""

        return self.source.describe()


@dataclass(frozen=True, slots=True)
class LanguageOptions:
    """Language and parser options of a fragment.

    ``globals`` and ``parser_options`` are known sub-objects: composition
    unions them instead of replacing them.
    """

    globals: Mapping[str, GlobalAccess] = field(default_factory=lambda: _EMPTY)  # type: ignore[arg-type]
    ecma_version: int | str | None = None
    source_type: Literal["module", "script", "commonjs"] | None = None
    parser: ModuleRef | None = None
    parser_options: Mapping[str, JsonValue] = field(default_factory=lambda: _EMPTY)  # type: ignore[arg-type]

    def __post_init__(self) -> None:
        object.__setattr__(self, "globals", MappingProxyType(_coerce_globals(self.globals)))
        if not isinstance(self.parser_options, Mapping):
            raise ConfigurationError("languageOptions.parserOptions must be a mapping")
        object.__setattr__(self, "parser_options", MappingProxyType(copy.deepcopy(dict(self.parser_options))))
        if self.source_type not in (None, "module", "script", "commonjs"):
            raise ConfigurationError(f"languageOptions.sourceType '{self.source_type}' is not supported")

    def is_empty(self) -> bool:
        """Return ``True`` when no option is set."""

        return (
            not self.globals
            and self.ecma_version is None
            and self.source_type is None
            and self.parser is None
            and not self.parser_options
        )


@dataclass(frozen=True, slots=True)
class Fragment:
    """Immutable unit of lint configuration.

    Every part is optional. ``ignores`` is kept per fragment and never merged
    with other fragments' ignores; the analysis engine applies each list
    against the fragment it belongs to. ``files`` restricts the fragment to
    matching paths in the rendered configuration; composition itself treats
    every fragment as applying to the file being linted.
    """

    name: str
    ignores: tuple[str, ...] | None = None
    files: tuple[str, ...] | None = None
    plugins: Mapping[str, PluginHandle] = field(default_factory=lambda: _EMPTY)  # type: ignore[arg-type]
    rules: Mapping[str, RuleSetting] = field(default_factory=lambda: _EMPTY)  # type: ignore[arg-type]
    language_options: LanguageOptions | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("fragment requires a name")
        if self.ignores is not None:
            object.__setattr__(self, "ignores", _coerce_patterns(self.ignores, self.name, "ignores"))
        if self.files is not None:
            object.__setattr__(self, "files", _coerce_patterns(self.files, self.name, "files"))
        object.__setattr__(self, "plugins", MappingProxyType(_coerce_plugins(self.plugins, self.name)))
        object.__setattr__(self, "rules", MappingProxyType(_coerce_rules(self.rules, self.name)))
        if self.language_options is not None and not isinstance(self.language_options, LanguageOptions):
            raise ConfigurationError(f"{self.name}: languageOptions must be a LanguageOptions instance")

    @property
    def ignores_only(self) -> bool:
        """Return ``True`` for a fragment that only declares global ignores."""

        return (
            self.ignores is not None
            and self.files is None
            and not self.plugins
            and not self.rules
            and (self.language_options is None or self.language_options.is_empty())
        )


def _coerce_patterns(raw: object, name: str, key: str) -> tuple[str, ...]:
    if isinstance(raw, str) or not isinstance(raw, Iterable):
        raise ConfigurationError(f"{name}: {key} must be a sequence of glob patterns")
    patterns: list[str] = []
    for item in raw:
        if not isinstance(item, str) or not item.strip():
            raise ConfigurationError(f"{name}: {key} patterns must be non-empty strings, got {item!r}")
        patterns.append(item)
    if key == "files" and not patterns:
        raise ConfigurationError(f"{name}: files must list at least one pattern")
    return tuple(patterns)


def _coerce_plugins(raw: object, name: str) -> dict[str, PluginHandle]:
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"{name}: plugins must be a mapping of name to plugin handle")
    plugins: dict[str, PluginHandle] = {}
    for key, handle in raw.items():
        if not isinstance(key, str) or not key:
            raise ConfigurationError(f"{name}: plugin names must be non-empty strings, got {key!r}")
        if not isinstance(handle, PluginHandle):
            raise ConfigurationError(f"{name}: plugin '{key}' must be a PluginHandle, got {type(handle).__name__}")
        plugins[key] = handle
    return plugins


def _coerce_rules(raw: object, name: str) -> dict[str, RuleSetting]:
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"{name}: rules must be a mapping of rule id to setting")
    rules: dict[str, RuleSetting] = {}
    for rule_id, value in raw.items():
        if not isinstance(rule_id, str) or not rule_id:
            raise ConfigurationError(f"{name}: rule ids must be non-empty strings, got {rule_id!r}")
        rules[rule_id] = parse_rule_setting(value, rule_id=rule_id)
    return rules


def _coerce_globals(raw: object) -> dict[str, GlobalAccess]:
    if not isinstance(raw, Mapping):
        raise ConfigurationError("languageOptions.globals must be a mapping")
    result: dict[str, GlobalAccess] = {}
    for identifier, access in raw.items():
        # The ``globals`` package encodes writability as a boolean.
        if isinstance(access, bool):
            result[identifier] = "writable" if access else "readonly"
        elif isinstance(access, str) and access in _GLOBAL_ACCESS:
            result[identifier] = access  # type: ignore[assignment]
        else:
            raise ConfigurationError(f"global '{identifier}' has invalid access {access!r}")
    return result


__all__ = ["Fragment", "GlobalAccess", "LanguageOptions", "ModuleRef", "PluginHandle"]
