# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Functional-programming fragments and the functype library preferences."""

from __future__ import annotations

from typing import Final

from ..fragment import Fragment, LanguageOptions, PluginHandle

FUNCTIONAL_PLUGIN: Final[PluginHandle] = PluginHandle.of(
    "eslint-plugin-functional",
    type_aware_rules=(
        "functional/immutable-data",
        "functional/prefer-immutable-types",
        "functional/type-declaration-immutability",
    ),
)
FUNCTYPE_PLUGIN: Final[PluginHandle] = PluginHandle.of("eslint-plugin-functype")

# eslint-config-functype "recommended".
_FUNCTIONAL_RULES: Final[dict[str, object]] = {
    "functional/no-let": "error",
    "functional/immutable-data": "warn",
    "functional/no-loop-statements": "warn",
    "functional/prefer-immutable-types": "warn",
    "functional/no-throw-statements": "off",
    "functional/functional-parameters": "off",
    "prefer-const": "error",
    "no-var": "error",
    "no-param-reassign": "error",
    "prefer-spread": "error",
    "prefer-rest-params": "error",
    "object-shorthand": "error",
    "@typescript-eslint/no-explicit-any": "error",
    "@typescript-eslint/no-floating-promises": "error",
    "@typescript-eslint/await-thenable": "error",
    "@typescript-eslint/no-misused-promises": "error",
    "@typescript-eslint/require-await": "warn",
    "@typescript-eslint/prefer-nullish-coalescing": "warn",
    "@typescript-eslint/prefer-optional-chain": "warn",
    "@typescript-eslint/no-unnecessary-condition": "warn",
    "@typescript-eslint/strict-boolean-expressions": "off",
    "@typescript-eslint/switch-exhaustiveness-check": "error",
    "@typescript-eslint/consistent-type-imports": ["error", {"prefer": "type-imports"}],
}

_LIBRARY_PREFERENCES: Final[tuple[str, ...]] = (
    "functype/prefer-option",
    "functype/prefer-either",
    "functype/prefer-fold",
    "functype/prefer-map",
    "functype/prefer-flatmap",
    "functype/no-imperative-loops",
    "functype/prefer-do-notation",
)


def functional_rules() -> Fragment:
    """Return the purity plugin with its recommended rules.

    Several of the rules need type information, so the fragment requests the
    project service from the parser.
    """

    return Fragment(
        name="functional/recommended",
        plugins={"functional": FUNCTIONAL_PLUGIN},
        language_options=LanguageOptions(parser_options={"projectService": True}),
        rules=_FUNCTIONAL_RULES,
    )


def library_plugin() -> Fragment:
    """Return the fragment registering the functype plugin."""

    return Fragment(name="functype/plugin", plugins={"functype": FUNCTYPE_PLUGIN})


def library_rule_preferences() -> Fragment:
    """Return the functype-specific rule preferences."""

    return Fragment(name="functype/preferences", rules=dict.fromkeys(_LIBRARY_PREFERENCES, "warn"))


__all__ = [
    "FUNCTIONAL_PLUGIN",
    "FUNCTYPE_PLUGIN",
    "functional_rules",
    "library_plugin",
    "library_rule_preferences",
]
