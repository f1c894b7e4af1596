# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Upstream and project fragments the named layers are assembled from."""

from __future__ import annotations

from .core import SHARED_IGNORES, core_recommended, shared_ignores
from .formatting import formatting_integration
from .functional import (
    FUNCTIONAL_PLUGIN,
    FUNCTYPE_PLUGIN,
    functional_rules,
    library_plugin,
    library_rule_preferences,
)
from .project import import_sort_and_project_defaults
from .typescript import TYPESCRIPT_FILES, TYPESCRIPT_PLUGIN, typed_language_defaults

__all__ = [
    "FUNCTIONAL_PLUGIN",
    "FUNCTYPE_PLUGIN",
    "SHARED_IGNORES",
    "TYPESCRIPT_FILES",
    "TYPESCRIPT_PLUGIN",
    "core_recommended",
    "formatting_integration",
    "functional_rules",
    "import_sort_and_project_defaults",
    "library_plugin",
    "library_rule_preferences",
    "shared_ignores",
    "typed_language_defaults",
]
