# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared ignores and the core recommended rule set."""

from __future__ import annotations

from typing import Final

from ..fragment import Fragment

SHARED_IGNORES: Final[tuple[str, ...]] = (
    "**/.gitignore",
    "**/.eslintignore",
    "**/node_modules",
    "**/.DS_Store",
    "**/dist-ssr",
    "**/*.local",
    "**/tsconfig.json",
)

# @eslint/js "recommended"; every rule reports at error level.
_CORE_RECOMMENDED: Final[tuple[str, ...]] = (
    "constructor-super",
    "for-direction",
    "getter-return",
    "no-async-promise-executor",
    "no-case-declarations",
    "no-class-assign",
    "no-compare-neg-zero",
    "no-cond-assign",
    "no-const-assign",
    "no-constant-binary-expression",
    "no-constant-condition",
    "no-control-regex",
    "no-debugger",
    "no-delete-var",
    "no-dupe-args",
    "no-dupe-class-members",
    "no-dupe-else-if",
    "no-dupe-keys",
    "no-duplicate-case",
    "no-empty",
    "no-empty-character-class",
    "no-empty-pattern",
    "no-empty-static-block",
    "no-ex-assign",
    "no-extra-boolean-cast",
    "no-fallthrough",
    "no-func-assign",
    "no-global-assign",
    "no-import-assign",
    "no-invalid-regexp",
    "no-irregular-whitespace",
    "no-loss-of-precision",
    "no-misleading-character-class",
    "no-new-native-nonconstructor",
    "no-nonoctal-decimal-escape",
    "no-obj-calls",
    "no-octal",
    "no-prototype-builtins",
    "no-redeclare",
    "no-regex-spaces",
    "no-self-assign",
    "no-setter-return",
    "no-shadow-restricted-names",
    "no-sparse-arrays",
    "no-this-before-super",
    "no-undef",
    "no-unexpected-multiline",
    "no-unreachable",
    "no-unsafe-finally",
    "no-unsafe-negation",
    "no-unsafe-optional-chaining",
    "no-unused-labels",
    "no-unused-private-class-members",
    "no-unused-vars",
    "no-useless-backreference",
    "no-useless-catch",
    "no-useless-escape",
    "no-with",
    "require-yield",
    "use-isnan",
    "valid-typeof",
)


def shared_ignores() -> Fragment:
    """Return the global ignore fragment shared by every layer."""

    return Fragment(name="shared-ignores", ignores=SHARED_IGNORES)


def core_recommended() -> Fragment:
    """Return the upstream recommended core rules."""

    return Fragment(name="core/recommended", rules=dict.fromkeys(_CORE_RECOMMENDED, "error"))


__all__ = ["SHARED_IGNORES", "core_recommended", "shared_ignores"]
