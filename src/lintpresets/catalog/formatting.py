# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Formatter integration: the formatter reports as one more lint plugin."""

from __future__ import annotations

from typing import Final

from ..fragment import Fragment, PluginHandle

PRETTIER_PLUGIN: Final[PluginHandle] = PluginHandle.of("eslint-plugin-prettier")


def formatting_integration() -> Fragment:
    """Return the recommended formatter fragment.

    Stylistic core rules that fight the formatter are switched off.
    """

    return Fragment(
        name="prettier/recommended",
        plugins={"prettier": PRETTIER_PLUGIN},
        rules={
            "prettier/prettier": "error",
            "arrow-body-style": "off",
            "prefer-arrow-callback": "off",
        },
    )


__all__ = ["PRETTIER_PLUGIN", "formatting_integration"]
