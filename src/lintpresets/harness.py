# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Verification harness: lint snippets through a composed preset.

The harness checks one file at a time without a program-wide type checker,
so before every run it strips the parser options that request type
information and forces every type-aware rule off. Type-aware rules come from
two places: the hand-maintained :data:`TYPE_AWARE_RULES` list and the
``type_aware_rules`` metadata declared by each composed plugin handle.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath
from typing import Final

from .composer import EffectiveConfiguration, compose
from .config import load_settings
from .diagnostics import Diagnostic
from .engine import AnalysisEngine, EslintEngine
from .errors import ConfigurationError
from .fragment import Fragment
from .settings import Off

LOGGER = logging.getLogger(__name__)

TYPE_AWARE_RULES: Final[frozenset[str]] = frozenset(
    {
        "@typescript-eslint/no-floating-promises",
        "@typescript-eslint/await-thenable",
        "@typescript-eslint/no-misused-promises",
        "@typescript-eslint/require-await",
        "@typescript-eslint/prefer-nullish-coalescing",
        "@typescript-eslint/prefer-optional-chain",
        "@typescript-eslint/no-unnecessary-condition",
        "@typescript-eslint/strict-boolean-expressions",
        "@typescript-eslint/switch-exhaustiveness-check",
        "functional/prefer-immutable-types",
        "functional/immutable-data",
    },
)

TYPE_INFORMATION_OPTIONS: Final[tuple[str, ...]] = ("project", "projectService", "programs")

RECOGNIZED_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {".js", ".mjs", ".cjs", ".jsx", ".ts", ".mts", ".cts", ".tsx"},
)

SANITIZER_FRAGMENT_NAME: Final[str] = "harness/type-aware-off"

# Every accepted filename must match a ``files`` pattern or ESLint skips it.
SANITIZER_FILES: Final[tuple[str, ...]] = tuple(f"**/*{suffix}" for suffix in sorted(RECOGNIZED_EXTENSIONS))


def check_filename(filename: str) -> str:
    """Return ``filename`` if its extension selects a known parser.

    Raises:
        ConfigurationError: If the extension is not recognised.
    """

    suffix = PurePosixPath(filename.replace("\\", "/")).suffix.lower()
    if suffix not in RECOGNIZED_EXTENSIONS:
        known = ", ".join(sorted(RECOGNIZED_EXTENSIONS))
        raise ConfigurationError(f"unrecognized extension for '{filename}' (expected one of {known})")
    return filename


def disabled_rules(config: EffectiveConfiguration) -> frozenset[str]:
    """Return the rule ids the harness forces off for ``config``."""

    return TYPE_AWARE_RULES | config.type_aware_rules()


def sanitize(config: EffectiveConfiguration) -> EffectiveConfiguration:
    """Return a copy of ``config`` runnable without type information.

    Args:
        config: Composed configuration to sanitise.

    Returns:
        EffectiveConfiguration: New configuration whose fragments no longer
        request type information and which ends with a fragment switching
        every type-aware rule off.
    """

    fragments = [_strip_type_information(fragment) for fragment in config.fragments]
    rules = disabled_rules(config)
    fragments.append(
        Fragment(
            name=SANITIZER_FRAGMENT_NAME,
            files=SANITIZER_FILES,
            rules={rule_id: Off() for rule_id in sorted(rules)},
        ),
    )
    LOGGER.debug("sanitised configuration: %d type-aware rules disabled", len(rules))
    return compose(fragments)


def verify(
    source: str,
    config: EffectiveConfiguration,
    filename: str = "test.ts",
    *,
    engine: AnalysisEngine | None = None,
) -> list[Diagnostic]:
    """Lint ``source`` under ``config`` and return the engine's diagnostics.

    Diagnostics keep the engine's emission order; nothing is reordered,
    deduplicated or filtered. Unparsable source yields a single fatal
    diagnostic rather than an exception.

    Args:
        source: Source text of the snippet.
        config: Composed configuration, e.g. ``layers.base()``.
        filename: Virtual filename; its extension selects the parser.
        engine: Analysis engine; defaults to :class:`EslintEngine`.

    Returns:
        list[Diagnostic]: Diagnostics for the snippet.

    Raises:
        ConfigurationError: If ``filename`` has an unrecognised extension.
    """

    check_filename(filename)
    return _analyze(source, sanitize(config), filename, engine or default_engine())


def verify_many(
    snippets: Iterable[tuple[str, str]],
    config: EffectiveConfiguration,
    *,
    engine: AnalysisEngine | None = None,
) -> list[list[Diagnostic]]:
    """Verify a batch of ``(source, filename)`` snippets under one configuration.

    Filenames are validated before anything runs. A snippet that fails to
    parse only contributes its fatal diagnostic; the rest of the batch runs.

    Returns:
        list[list[Diagnostic]]: Diagnostics per snippet, in input order.
    """

    batch = [(source, check_filename(filename)) for source, filename in snippets]
    sanitized = sanitize(config)
    active = engine or default_engine()
    return [_analyze(source, sanitized, filename, active) for source, filename in batch]


def default_engine(root: Path | None = None) -> EslintEngine:
    """Return an :class:`EslintEngine` configured for ``root`` (default: cwd)."""

    project_root = root or Path.cwd()
    return EslintEngine(load_settings(project_root), root=project_root)


def _analyze(source: str, config: EffectiveConfiguration, filename: str, engine: AnalysisEngine) -> list[Diagnostic]:
    diagnostics = list(engine.analyze(source, config, filename))
    if any(diagnostic.fatal for diagnostic in diagnostics):
        LOGGER.debug("engine could not parse %s", filename)
    return diagnostics


def _strip_type_information(fragment: Fragment) -> Fragment:
    options = fragment.language_options
    if options is None or not any(key in options.parser_options for key in TYPE_INFORMATION_OPTIONS):
        return fragment
    kept = {key: value for key, value in options.parser_options.items() if key not in TYPE_INFORMATION_OPTIONS}
    LOGGER.debug("stripping type-information parser options from %s", fragment.name)
    return dataclasses.replace(fragment, language_options=dataclasses.replace(options, parser_options=kept))


__all__ = [
    "RECOGNIZED_EXTENSIONS",
    "SANITIZER_FILES",
    "SANITIZER_FRAGMENT_NAME",
    "TYPE_AWARE_RULES",
    "TYPE_INFORMATION_OPTIONS",
    "check_filename",
    "default_engine",
    "disabled_rules",
    "sanitize",
    "verify",
    "verify_many",
]
