# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project-level defaults: import sorting, runtime globals and overrides."""

from __future__ import annotations

from typing import Final

from ..environments import merged_globals
from ..fragment import Fragment, LanguageOptions, PluginHandle

IMPORT_SORT_PLUGIN: Final[PluginHandle] = PluginHandle.of("eslint-plugin-simple-import-sort")


def import_sort_and_project_defaults() -> Fragment:
    """Return the fragment that closes the base layer."""

    return Fragment(
        name="project/import-sort",
        plugins={"simple-import-sort": IMPORT_SORT_PLUGIN},
        language_options=LanguageOptions(
            globals=merged_globals("browser", "amd", "node"),
            ecma_version=2020,
            source_type="module",
        ),
        rules={
            "prettier/prettier": ["error", {}, {"usePrettierrc": True}],
            "@typescript-eslint/no-unused-vars": "off",
            "@typescript-eslint/explicit-function-return-type": "off",
            "simple-import-sort/imports": "error",
            "simple-import-sort/exports": "error",
        },
    )


__all__ = ["IMPORT_SORT_PLUGIN", "import_sort_and_project_defaults"]
