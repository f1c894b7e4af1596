# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered lint presets, their composer and the verification harness."""

from __future__ import annotations

from importlib import metadata

from .composer import EffectiveConfiguration, compose
from .diagnostics import Diagnostic, rule_ids
from .errors import ConfigurationError, EngineError, RuleConflict
from .fragment import Fragment, LanguageOptions, ModuleRef, PluginHandle
from .harness import TYPE_AWARE_RULES, sanitize, verify, verify_many
from .layers import LayerName, base, build_layer, functional, functional_library, get_layer
from .settings import Error, ErrorWithOptions, Off, RuleSetting, Warn

__all__ = [
    "TYPE_AWARE_RULES",
    "ConfigurationError",
    "Diagnostic",
    "EffectiveConfiguration",
    "EngineError",
    "Error",
    "ErrorWithOptions",
    "Fragment",
    "LanguageOptions",
    "LayerName",
    "ModuleRef",
    "Off",
    "PluginHandle",
    "RuleConflict",
    "RuleSetting",
    "Warn",
    "__version__",
    "base",
    "build_layer",
    "compose",
    "functional",
    "functional_library",
    "get_layer",
    "rule_ids",
    "sanitize",
    "verify",
    "verify_many",
]

try:
    __version__ = metadata.version("lintpresets")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
