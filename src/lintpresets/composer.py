# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compose ordered fragments into one effective lint configuration.

Composition is a pure, order-sensitive fold over the fragment sequence:

* ``plugins`` and ``rules`` are overwritten key by key, so the last fragment
  that assigns a key decides its value. Rule settings are atomic and are never
  deep-merged.
* ``languageOptions`` scalars take the last value set. ``globals`` are
  unioned key by key and ``parserOptions`` are merged recursively the way
  ESLint merges them: nested objects are combined, anything else is replaced.
* ``ignores`` stay attached to their fragment. The original ordered fragment
  list is carried on the result for the analysis engine.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .errors import ConfigurationError, RuleConflict
from .fragment import Fragment, LanguageOptions, PluginHandle
from .settings import RuleSetting

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EffectiveConfiguration:
    """Flattened result of composing an ordered fragment sequence."""

    plugins: Mapping[str, PluginHandle]
    rules: Mapping[str, RuleSetting]
    language_options: LanguageOptions
    fragments: tuple[Fragment, ...]

    @property
    def ignores(self) -> tuple[tuple[str, tuple[str, ...]], ...]:
        """Return ``(fragment name, patterns)`` pairs in fragment order."""

        return tuple((fragment.name, fragment.ignores) for fragment in self.fragments if fragment.ignores is not None)

    def enabled_rules(self) -> dict[str, RuleSetting]:
        """Return the subset of rules that are not switched off."""

        return {rule_id: setting for rule_id, setting in self.rules.items() if setting.enabled}

    def type_aware_rules(self) -> frozenset[str]:
        """Return the type-aware rule ids declared by the composed plugins."""

        declared: set[str] = set()
        for handle in self.plugins.values():
            declared.update(handle.type_aware_rules)
        return frozenset(declared)


@dataclass(frozen=True, slots=True)
class RuleAssignment:
    """Provenance entry describing one rule assignment during composition."""

    rule_id: str
    fragment: str
    setting: RuleSetting
    previous: RuleSetting | None

    @property
    def overrides(self) -> bool:
        """Return ``True`` when the assignment replaced an earlier value."""

        return self.previous is not None


def compose(fragments: Sequence[Fragment]) -> EffectiveConfiguration:
    """Fold ``fragments`` into an :class:`EffectiveConfiguration`.

    Args:
        fragments: Non-empty ordered sequence; later fragments take precedence.

    Returns:
        EffectiveConfiguration: Freshly allocated composition result.

    Raises:
        ConfigurationError: If ``fragments`` is empty or holds a non-fragment.
    """

    ordered = _validated(fragments)
    plugins = collect_plugins(ordered)
    rules = collect_rules(ordered)
    language_options = merge_language_options(
        fragment.language_options for fragment in ordered if fragment.language_options is not None
    )
    for conflict in find_plugin_conflicts(ordered):
        LOGGER.warning("plugin conflict resolved by last fragment: %s", conflict.describe())
    LOGGER.debug("composed %d fragments into %d plugins and %d rules", len(ordered), len(plugins), len(rules))
    return EffectiveConfiguration(
        plugins=MappingProxyType(plugins),
        rules=MappingProxyType(rules),
        language_options=language_options,
        fragments=ordered,
    )


def collect_plugins(fragments: Iterable[Fragment]) -> dict[str, PluginHandle]:
    """Return the flattened plugin map (later fragments win on collision)."""

    plugins: dict[str, PluginHandle] = {}
    for fragment in fragments:
        plugins.update(fragment.plugins)
    return plugins


def collect_rules(fragments: Iterable[Fragment]) -> dict[str, RuleSetting]:
    """Return the flattened rule map (later fragments win on collision)."""

    rules: dict[str, RuleSetting] = {}
    for fragment in fragments:
        rules.update(fragment.rules)
    return rules


def merge_language_options(options: Iterable[LanguageOptions]) -> LanguageOptions:
    """Merge language options in order.

    ``globals`` are unioned, ``parserOptions`` are deep-merged (nested objects
    such as ``ecmaFeatures`` combine; arrays and scalars are replaced), and the
    remaining fields take the last value set.

    Args:
        options: Language options in fragment order.

    Returns:
        LanguageOptions: Merged options; scalar fields take the last value set.
    """

    globals_: dict[str, str] = {}
    parser_options: dict[str, object] = {}
    ecma_version = None
    source_type = None
    parser = None
    for entry in options:
        globals_.update(entry.globals)
        _deep_merge(parser_options, entry.parser_options)
        if entry.ecma_version is not None:
            ecma_version = entry.ecma_version
        if entry.source_type is not None:
            source_type = entry.source_type
        if entry.parser is not None:
            parser = entry.parser
    return LanguageOptions(
        globals=globals_,  # type: ignore[arg-type]
        ecma_version=ecma_version,
        source_type=source_type,
        parser=parser,
        parser_options=parser_options,  # type: ignore[arg-type]
    )


def _deep_merge(target: dict[str, object], update: Mapping[str, object]) -> None:
    for key, value in update.items():
        current = target.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged = dict(current)
            _deep_merge(merged, value)
            target[key] = merged
        else:
            target[key] = copy.deepcopy(value)


def find_plugin_conflicts(fragments: Iterable[Fragment]) -> list[RuleConflict]:
    """Return every plugin name bound to two different handles.

    Args:
        fragments: Fragments in composition order.

    Returns:
        list[RuleConflict]: Advisory conflicts in the order they were found.
    """

    seen: dict[str, tuple[str, PluginHandle]] = {}
    conflicts: list[RuleConflict] = []
    for fragment in fragments:
        for name, handle in fragment.plugins.items():
            previous = seen.get(name)
            if previous is not None and not previous[1].same_capability(handle):
                conflicts.append(
                    RuleConflict(
                        plugin=name,
                        first_fragment=previous[0],
                        second_fragment=fragment.name,
                        first_module=previous[1].describe(),
                        second_module=handle.describe(),
                    ),
                )
            seen[name] = (fragment.name, handle)
    return conflicts


def trace_rules(fragments: Sequence[Fragment]) -> list[RuleAssignment]:
    """Return every rule assignment made while composing ``fragments``.

    Args:
        fragments: Ordered fragments to trace.

    Returns:
        list[RuleAssignment]: Assignments in composition order.
    """

    current: dict[str, RuleSetting] = {}
    assignments: list[RuleAssignment] = []
    for fragment in _validated(fragments):
        for rule_id, setting in fragment.rules.items():
            assignments.append(
                RuleAssignment(rule_id=rule_id, fragment=fragment.name, setting=setting, previous=current.get(rule_id)),
            )
            current[rule_id] = setting
    return assignments


def rule_plugin(rule_id: str) -> str | None:
    """Return the plugin namespace of ``rule_id`` (``None`` for core rules).

    ``"simple-import-sort/imports"`` belongs to ``simple-import-sort`` and
    ``"@typescript-eslint/no-explicit-any"`` to ``@typescript-eslint``.
    """

    if "/" not in rule_id:
        return None
    return rule_id.rsplit("/", 1)[0]


def _validated(fragments: Sequence[Fragment]) -> tuple[Fragment, ...]:
    ordered = tuple(fragments)
    if not ordered:
        raise ConfigurationError("cannot compose an empty fragment sequence")
    for fragment in ordered:
        if not isinstance(fragment, Fragment):
            raise ConfigurationError(f"expected Fragment, got {type(fragment).__name__}")
    return ordered


__all__ = [
    "EffectiveConfiguration",
    "RuleAssignment",
    "collect_plugins",
    "collect_rules",
    "compose",
    "find_plugin_conflicts",
    "merge_language_options",
    "rule_plugin",
    "trace_rules",
]
