# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render composed presets as ESLint flat-config modules or JSON snapshots."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from .composer import EffectiveConfiguration
from .fragment import Fragment, LanguageOptions, ModuleRef

_INDENT = "  "


def render_flat_config(fragments: Sequence[Fragment]) -> str:
    """Return an ES module whose default export is the flat-config array.

    Every distinct module referenced by a plugin or parser handle is imported
    once; fragments are emitted in order so per-fragment ignores keep their
    scope.

    Args:
        fragments: Ordered fragments, typically ``EffectiveConfiguration.fragments``.

    Returns:
        str: JavaScript source text.
    """

    aliases: dict[str, str] = {}
    for fragment in fragments:
        for handle in fragment.plugins.values():
            aliases.setdefault(handle.source.module, f"m{len(aliases)}")
        options = fragment.language_options
        if options is not None and options.parser is not None:
            aliases.setdefault(options.parser.module, f"m{len(aliases)}")
    lines = [f"import {alias} from {json.dumps(module)}" for module, alias in aliases.items()]
    lines.append("")
    lines.append("export default [")
    for fragment in fragments:
        lines.append(f"{_INDENT}{_render_fragment(fragment, aliases)},")
    lines.append("]")
    return "\n".join(lines) + "\n"


def _render_fragment(fragment: Fragment, aliases: dict[str, str]) -> str:
    parts = [f"name: {json.dumps(fragment.name)}"]
    if fragment.files is not None:
        parts.append(f"files: {json.dumps(list(fragment.files))}")
    if fragment.ignores is not None:
        parts.append(f"ignores: {json.dumps(list(fragment.ignores))}")
    if fragment.plugins:
        plugins = ", ".join(
            f"{json.dumps(name)}: {_reference(handle.source, aliases)}" for name, handle in fragment.plugins.items()
        )
        parts.append(f"plugins: {{ {plugins} }}")
    options = fragment.language_options
    if options is not None and not options.is_empty():
        parts.append(f"languageOptions: {_render_language_options(options, aliases)}")
    if fragment.rules:
        rules = {rule_id: setting.to_eslint() for rule_id, setting in fragment.rules.items()}
        parts.append(f"rules: {json.dumps(rules)}")
    return "{ " + ", ".join(parts) + " }"


def _render_language_options(options: LanguageOptions, aliases: dict[str, str]) -> str:
    parts: list[str] = []
    payload = _language_options_payload(options)
    for key, value in payload.items():
        parts.append(f"{key}: {json.dumps(value)}")
    if options.parser is not None:
        parts.append(f"parser: {_reference(options.parser, aliases)}")
    return "{ " + ", ".join(parts) + " }"


def _reference(ref: ModuleRef, aliases: dict[str, str]) -> str:
    alias = aliases[ref.module]
    return alias if ref.export is None else f"{alias}.{ref.export}"


def _language_options_payload(options: LanguageOptions) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    if options.globals:
        payload["globals"] = dict(options.globals)
    if options.ecma_version is not None:
        payload["ecmaVersion"] = options.ecma_version
    if options.source_type is not None:
        payload["sourceType"] = options.source_type
    if options.parser_options:
        payload["parserOptions"] = dict(options.parser_options)
    return payload


def to_dict(config: EffectiveConfiguration) -> dict[str, Any]:
    """Return a JSON-serialisable snapshot of ``config``.

    Capability handles are represented by their module reference.
    """

    language = _language_options_payload(config.language_options)
    if config.language_options.parser is not None:
        language["parser"] = config.language_options.parser.describe()
    return {
        "plugins": {name: handle.describe() for name, handle in config.plugins.items()},
        "rules": {rule_id: setting.to_eslint() for rule_id, setting in config.rules.items()},
        "languageOptions": language,
        "ignores": [{"fragment": name, "patterns": list(patterns)} for name, patterns in config.ignores],
        "files": [
            {"fragment": fragment.name, "patterns": list(fragment.files)}
            for fragment in config.fragments
            if fragment.files is not None
        ],
        "fragments": [fragment.name for fragment in config.fragments],
    }


__all__ = ["render_flat_config", "to_dict"]
