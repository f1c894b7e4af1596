# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry of the named, append-only preset layers.

``functional`` extends ``base`` and ``functional-library`` extends
``functional`` by appending fragments, never by removing them. The tables are
built lazily on first access and are read-only afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Final, Literal

from . import catalog
from .composer import EffectiveConfiguration, compose
from .errors import ConfigurationError
from .fragment import Fragment

LOGGER = logging.getLogger(__name__)


class LayerName(str, Enum):
    """Names of the shareable preset layers."""

    BASE = "base"
    FUNCTIONAL = "functional"
    FUNCTIONAL_LIBRARY = "functional-library"


_PARENT: Final[dict[LayerName, LayerName]] = {
    LayerName.FUNCTIONAL: LayerName.BASE,
    LayerName.FUNCTIONAL_LIBRARY: LayerName.FUNCTIONAL,
}

FindingKind = Literal["missing-rule", "missing-plugin", "narrowed-rule", "not-prefix"]


@dataclass(frozen=True, slots=True)
class ExtensionFinding:
    """Violation (or advisory narrowing) of the layer extension property."""

    kind: FindingKind
    parent: LayerName
    child: LayerName
    subject: str

    @property
    def fatal(self) -> bool:
        """Return ``True`` for findings that break the extension invariant."""

        return self.kind != "narrowed-rule"

    def describe(self) -> str:
        """Return a one-line description of the finding."""

        return f"{self.child.value} <- {self.parent.value}: {self.kind} {self.subject}"


def resolve_layer_name(name: str | LayerName) -> LayerName:
    """Return the :class:`LayerName` matching ``name``.

    Raises:
        ConfigurationError: If ``name`` is not a known layer.
    """

    if isinstance(name, LayerName):
        return name
    try:
        return LayerName(name)
    except ValueError:
        known = ", ".join(layer.value for layer in LayerName)
        raise ConfigurationError(f"unknown layer '{name}' (known: {known})") from None


def available_layers() -> tuple[LayerName, ...]:
    """Return the layer names in extension order."""

    return tuple(LayerName)


def build_layer(name: str | LayerName) -> tuple[Fragment, ...]:
    """Return the ordered fragments of layer ``name``.

    Args:
        name: ``"base"``, ``"functional"`` or ``"functional-library"``.

    Returns:
        tuple[Fragment, ...]: Immutable ordered fragment sequence.

    Raises:
        ConfigurationError: If ``name`` is unknown.
    """

    return _layer_fragments(resolve_layer_name(name))


def get_layer(name: str | LayerName) -> EffectiveConfiguration:
    """Return the composed configuration of layer ``name``."""

    return _layer_configuration(resolve_layer_name(name))


def base() -> EffectiveConfiguration:
    """Return the composed ``base`` layer."""

    return get_layer(LayerName.BASE)


def functional() -> EffectiveConfiguration:
    """Return the composed ``functional`` layer."""

    return get_layer(LayerName.FUNCTIONAL)


def functional_library() -> EffectiveConfiguration:
    """Return the composed ``functional-library`` layer."""

    return get_layer(LayerName.FUNCTIONAL_LIBRARY)


@lru_cache(maxsize=None)
def _layer_fragments(name: LayerName) -> tuple[Fragment, ...]:
    if name is LayerName.BASE:
        fragments: tuple[Fragment, ...] = (
            catalog.shared_ignores(),
            catalog.core_recommended(),
            *catalog.typed_language_defaults(),
            catalog.formatting_integration(),
            catalog.import_sort_and_project_defaults(),
        )
    elif name is LayerName.FUNCTIONAL:
        fragments = (*_layer_fragments(LayerName.BASE), catalog.functional_rules())
    else:
        fragments = (
            *_layer_fragments(LayerName.FUNCTIONAL),
            catalog.library_plugin(),
            catalog.library_rule_preferences(),
        )
    LOGGER.debug("built layer %s from %d fragments", name.value, len(fragments))
    return fragments


@lru_cache(maxsize=None)
def _layer_configuration(name: LayerName) -> EffectiveConfiguration:
    return compose(_layer_fragments(name))


def check_extension(
    layers: Sequence[LayerName] | None = None,
    *,
    strict: bool = False,
) -> list[ExtensionFinding]:
    """Check that every layer extends its parent without deleting anything.

    Rule and plugin keys of a parent must be present in the child, and the
    child's fragment list must start with the parent's. A rule switched off
    by the child is reported as an advisory ``narrowed-rule``: overriding an
    inherited rule to ``off`` is an allowed, explicit override.

    Args:
        layers: Child layers to check; defaults to every layer with a parent.
        strict: Raise instead of returning when a fatal finding exists.

    Returns:
        list[ExtensionFinding]: Findings in layer order.

    Raises:
        ConfigurationError: In strict mode, when a fatal finding exists.
    """

    selected = available_layers() if layers is None else layers
    children = [layer for layer in selected if layer in _PARENT]
    findings: list[ExtensionFinding] = []
    for child in children:
        parent = _PARENT[child]
        findings.extend(_compare(parent, child))
    if strict and (fatal := [finding for finding in findings if finding.fatal]):
        raise ConfigurationError("; ".join(finding.describe() for finding in fatal))
    return findings


def _compare(parent: LayerName, child: LayerName) -> list[ExtensionFinding]:
    parent_fragments = build_layer(parent)
    child_fragments = build_layer(child)
    parent_cfg = get_layer(parent)
    child_cfg = get_layer(child)
    findings: list[ExtensionFinding] = []
    if child_fragments[: len(parent_fragments)] != parent_fragments:
        findings.append(ExtensionFinding("not-prefix", parent, child, "fragments"))
    for plugin in sorted(parent_cfg.plugins.keys() - child_cfg.plugins.keys()):
        findings.append(ExtensionFinding("missing-plugin", parent, child, plugin))
    for rule_id, setting in parent_cfg.rules.items():
        inherited = child_cfg.rules.get(rule_id)
        if inherited is None:
            findings.append(ExtensionFinding("missing-rule", parent, child, rule_id))
        elif setting.enabled and not inherited.enabled:
            findings.append(ExtensionFinding("narrowed-rule", parent, child, rule_id))
    return findings


__all__ = [
    "ExtensionFinding",
    "LayerName",
    "available_layers",
    "base",
    "build_layer",
    "check_extension",
    "functional",
    "functional_library",
    "get_layer",
    "resolve_layer_name",
]
