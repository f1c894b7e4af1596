# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed-language defaults contributed by typescript-eslint."""

from __future__ import annotations

from typing import Final

from ..fragment import Fragment, LanguageOptions, ModuleRef, PluginHandle

TYPESCRIPT_PLUGIN: Final[PluginHandle] = PluginHandle.of(
    "typescript-eslint",
    "plugin",
    type_aware_rules=(
        "@typescript-eslint/await-thenable",
        "@typescript-eslint/no-floating-promises",
        "@typescript-eslint/no-misused-promises",
        "@typescript-eslint/no-unnecessary-condition",
        "@typescript-eslint/no-unsafe-argument",
        "@typescript-eslint/no-unsafe-assignment",
        "@typescript-eslint/no-unsafe-call",
        "@typescript-eslint/no-unsafe-member-access",
        "@typescript-eslint/no-unsafe-return",
        "@typescript-eslint/prefer-nullish-coalescing",
        "@typescript-eslint/prefer-optional-chain",
        "@typescript-eslint/require-await",
        "@typescript-eslint/restrict-template-expressions",
        "@typescript-eslint/strict-boolean-expressions",
        "@typescript-eslint/switch-exhaustiveness-check",
    ),
)
TYPESCRIPT_PARSER: Final[ModuleRef] = ModuleRef("typescript-eslint", "parser")
TYPESCRIPT_FILES: Final[tuple[str, ...]] = ("**/*.ts", "**/*.tsx", "**/*.mts", "**/*.cts")

# Core rules the type checker already covers for typed sources.
_CORE_OVERRIDES: Final[dict[str, str]] = {
    "constructor-super": "off",
    "getter-return": "off",
    "no-class-assign": "off",
    "no-const-assign": "off",
    "no-dupe-args": "off",
    "no-dupe-class-members": "off",
    "no-dupe-keys": "off",
    "no-func-assign": "off",
    "no-import-assign": "off",
    "no-new-native-nonconstructor": "off",
    "no-obj-calls": "off",
    "no-redeclare": "off",
    "no-setter-return": "off",
    "no-this-before-super": "off",
    "no-undef": "off",
    "no-unreachable": "off",
    "no-unsafe-negation": "off",
    "no-var": "error",
    "no-with": "off",
    "prefer-const": "error",
    "prefer-rest-params": "error",
    "prefer-spread": "error",
}

_RECOMMENDED: Final[dict[str, str]] = {
    "@typescript-eslint/ban-ts-comment": "error",
    "no-array-constructor": "off",
    "@typescript-eslint/no-array-constructor": "error",
    "@typescript-eslint/no-duplicate-enum-values": "error",
    "@typescript-eslint/no-empty-object-type": "error",
    "@typescript-eslint/no-explicit-any": "error",
    "@typescript-eslint/no-extra-non-null-assertion": "error",
    "@typescript-eslint/no-misused-new": "error",
    "@typescript-eslint/no-namespace": "error",
    "@typescript-eslint/no-non-null-asserted-optional-chain": "error",
    "@typescript-eslint/no-require-imports": "error",
    "@typescript-eslint/no-this-alias": "error",
    "@typescript-eslint/no-unnecessary-type-constraint": "error",
    "@typescript-eslint/no-unsafe-declaration-merging": "error",
    "@typescript-eslint/no-unsafe-function-type": "error",
    "no-unused-expressions": "off",
    "@typescript-eslint/no-unused-expressions": "error",
    "no-unused-vars": "off",
    "@typescript-eslint/no-unused-vars": "error",
    "@typescript-eslint/no-wrapper-object-types": "error",
    "@typescript-eslint/prefer-as-const": "error",
    "@typescript-eslint/prefer-namespace-keyword": "error",
    "@typescript-eslint/triple-slash-reference": "error",
}


def typed_language_defaults() -> tuple[Fragment, ...]:
    """Return the typescript-eslint recommended fragments in upstream order."""

    return (
        Fragment(
            name="typescript-eslint/base",
            plugins={"@typescript-eslint": TYPESCRIPT_PLUGIN},
            language_options=LanguageOptions(parser=TYPESCRIPT_PARSER, source_type="module"),
        ),
        Fragment(name="typescript-eslint/eslint-recommended", files=TYPESCRIPT_FILES, rules=_CORE_OVERRIDES),
        Fragment(name="typescript-eslint/recommended", rules=_RECOMMENDED),
    )


__all__ = ["TYPESCRIPT_FILES", "TYPESCRIPT_PARSER", "TYPESCRIPT_PLUGIN", "typed_language_defaults"]
