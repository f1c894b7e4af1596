# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the preset commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from ..composer import find_plugin_conflicts, trace_rules
from ..diagnostics import rule_ids
from ..harness import default_engine, verify
from ..layers import available_layers, build_layer, check_extension, get_layer, resolve_layer_name
from ..logging import configure_logging, info, ok, section, warn
from ..presets import PRESETS, preset_payload
from ..render import render_flat_config, to_dict
from ..severity import DiagnosticSeverity
from .rendering import build_diagnostics_table, build_layers_table, build_rules_table, build_trace_table
from .shared import CLIContext, CLIError, cli_errors, context_from

app = typer.Typer(help="Shareable lint presets and their verification harness.", no_args_is_help=True)

LayerArgument = Annotated[str, typer.Argument(help="Layer name: base, functional or functional-library.")]


@app.callback()
def root(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji prefixes.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Store presentation preferences for the invoked command."""

    configure_logging(verbose=verbose)
    ctx.obj = CLIContext(use_color=not no_color, use_emoji=not no_emoji)


@app.command("layers")
def layers_command(ctx: typer.Context) -> None:
    """List the preset layers and their composition sizes."""

    cli = context_from(ctx)
    cli.console.print(build_layers_table(available_layers()))


@app.command("show")
def show_command(
    ctx: typer.Context,
    layer: LayerArgument,
    trace: Annotated[bool, typer.Option("--trace", help="Show every rule assignment with its fragment.")] = False,
    include_off: Annotated[bool, typer.Option("--include-off", help="Also list rules switched off.")] = False,
) -> None:
    """Show the effective rules of a layer."""

    cli = context_from(ctx)
    with cli_errors(cli):
        name = resolve_layer_name(layer)
        if trace:
            cli.console.print(build_trace_table(trace_rules(build_layer(name)), title=f"{name.value} provenance"))
            return
        config = get_layer(name)
        cli.console.print(build_rules_table(config, title=f"{name.value} rules", include_off=include_off))
        plugins = ", ".join(f"{plugin} ({handle.describe()})" for plugin, handle in config.plugins.items())
        info(f"plugins: {plugins}", use_emoji=cli.use_emoji, use_color=cli.use_color)


@app.command("check")
def check_command(
    ctx: typer.Context,
    strict: Annotated[bool, typer.Option("--strict", help="Treat narrowed rules and plugin conflicts as failures.")] = False,
) -> None:
    """Check the layer extension invariant and plugin conflicts."""

    cli = context_from(ctx)
    with cli_errors(cli):
        section("Extension invariant", use_color=cli.use_color)
        findings = check_extension()
        conflicts = [conflict for layer in available_layers() for conflict in find_plugin_conflicts(build_layer(layer))]
        failures = 0
        for finding in findings:
            warn(finding.describe(), use_emoji=cli.use_emoji, use_color=cli.use_color)
            failures += 1 if finding.fatal or strict else 0
        for conflict in conflicts:
            warn(conflict.describe(), use_emoji=cli.use_emoji, use_color=cli.use_color)
            failures += 1 if strict else 0
        if failures:
            raise CLIError(f"{failures} layer check(s) failed")
        ok("every layer extends its parent", use_emoji=cli.use_emoji, use_color=cli.use_color)


@app.command("export")
def export_command(
    ctx: typer.Context,
    layer: LayerArgument,
    output_format: Annotated[str, typer.Option("--format", "-f", help="js (flat-config module) or json.")] = "js",
) -> None:
    """Print a layer as an ESLint flat-config module or as JSON."""

    cli = context_from(ctx)
    with cli_errors(cli):
        name = resolve_layer_name(layer)
        if output_format == "js":
            typer.echo(render_flat_config(build_layer(name)), nl=False)
        elif output_format == "json":
            typer.echo(json.dumps(to_dict(get_layer(name)), indent=2))
        else:
            raise CLIError(f"unsupported export format '{output_format}'", exit_code=2)


@app.command("verify")
def verify_command(
    ctx: typer.Context,
    layer: LayerArgument,
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Source file to lint.")],
    root_dir: Annotated[
        Optional[Path],
        typer.Option("--root", help="Project root holding node_modules and pyproject.toml."),
    ] = None,
) -> None:
    """Lint a source file through a layer with the verification harness."""

    cli = context_from(ctx)
    with cli_errors(cli):
        config = get_layer(resolve_layer_name(layer))
        engine = default_engine(root_dir or Path.cwd())
        diagnostics = verify(path.read_text(encoding="utf-8"), config, path.name, engine=engine)
        if not diagnostics:
            ok(f"{path.name}: no diagnostics", use_emoji=cli.use_emoji, use_color=cli.use_color)
            return
        cli.console.print(build_diagnostics_table(diagnostics, title=path.name))
        errors = [diagnostic for diagnostic in diagnostics if diagnostic.severity == DiagnosticSeverity.ERROR]
        info(f"rules reported: {', '.join(sorted(set(rule_ids(diagnostics)))) or '-'}", use_emoji=cli.use_emoji)
        if errors:
            raise CLIError(f"{len(errors)} error(s) reported for {path.name}")


@app.command("preset")
def preset_command(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help=f"One of: {', '.join(sorted(PRESETS))}.")],
) -> None:
    """Print a formatter or build preset as JSON."""

    cli = context_from(ctx)
    with cli_errors(cli):
        typer.echo(json.dumps(preset_payload(name), indent=2))


def main() -> None:
    """Run the CLI application."""

    app()


__all__ = ["app", "main"]
