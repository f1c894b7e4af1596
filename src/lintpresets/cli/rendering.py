# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for the preset CLI commands."""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.table import Table

from ..composer import EffectiveConfiguration, RuleAssignment
from ..diagnostics import Diagnostic
from ..layers import LayerName, build_layer, get_layer


def build_layers_table(layers: Sequence[LayerName]) -> Table:
    """Return a table summarising each layer's composition.

    Args:
        layers: Layer names in display order.

    Returns:
        Table: Rich table ready for rendering.
    """

    table = Table(title="Layers", box=box.SIMPLE, expand=False)
    table.add_column("Layer", style="bold")
    table.add_column("Fragments", justify="right")
    table.add_column("Plugins", justify="right")
    table.add_column("Rules", justify="right")
    table.add_column("Enabled", justify="right")
    for layer in layers:
        config = get_layer(layer)
        table.add_row(
            layer.value,
            str(len(build_layer(layer))),
            str(len(config.plugins)),
            str(len(config.rules)),
            str(len(config.enabled_rules())),
        )
    return table


def build_rules_table(config: EffectiveConfiguration, *, title: str, include_off: bool) -> Table:
    """Return a table listing the effective rule settings."""

    table = Table(title=title, box=box.SIMPLE, expand=True)
    table.add_column("Rule", style="bold")
    table.add_column("Setting", overflow="fold")
    for rule_id in sorted(config.rules):
        setting = config.rules[rule_id]
        if not include_off and not setting.enabled:
            continue
        table.add_row(rule_id, str(setting))
    return table


def build_trace_table(assignments: Sequence[RuleAssignment], *, title: str) -> Table:
    """Return a table of rule assignments in composition order."""

    table = Table(title=title, box=box.SIMPLE, expand=True)
    table.add_column("Rule", style="bold")
    table.add_column("Fragment")
    table.add_column("Setting", overflow="fold")
    table.add_column("Replaces", overflow="fold")
    for assignment in assignments:
        table.add_row(
            assignment.rule_id,
            assignment.fragment,
            str(assignment.setting),
            "-" if assignment.previous is None else str(assignment.previous),
        )
    return table


def build_diagnostics_table(diagnostics: Sequence[Diagnostic], *, title: str) -> Table:
    """Return a table of diagnostics in emission order."""

    table = Table(title=title, box=box.SIMPLE, expand=True)
    table.add_column("Location")
    table.add_column("Severity")
    table.add_column("Rule", style="bold")
    table.add_column("Message", overflow="fold")
    for diagnostic in diagnostics:
        table.add_row(
            diagnostic.location(),
            "error" if diagnostic.severity == 2 else "warning",
            diagnostic.rule_id or ("fatal" if diagnostic.fatal else "-"),
            diagnostic.message,
        )
    return table


__all__ = [
    "build_diagnostics_table",
    "build_layers_table",
    "build_rules_table",
    "build_trace_table",
]
