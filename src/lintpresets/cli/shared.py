# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (errors, console access)."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import typer
from rich.console import Console

from ..errors import ConfigurationError, EngineError
from ..logging import fail, get_console


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLIContext:
    """Presentation preferences shared by every command."""

    use_color: bool = True
    use_emoji: bool = True

    @property
    def console(self) -> Console:
        """Return the console matching the presentation preferences."""

        return get_console(color=self.use_color, emoji=self.use_emoji)


def context_from(ctx: typer.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root callback."""

    obj = ctx.obj
    return obj if isinstance(obj, CLIContext) else CLIContext()


@contextmanager
def cli_errors(cli: CLIContext) -> Iterator[None]:
    """Translate domain errors into a logged message and a typer exit."""

    try:
        yield
    except CLIError as exc:
        fail(str(exc), use_emoji=cli.use_emoji, use_color=cli.use_color)
        raise typer.Exit(code=exc.exit_code) from exc
    except ConfigurationError as exc:
        fail(f"configuration error: {exc}", use_emoji=cli.use_emoji, use_color=cli.use_color)
        raise typer.Exit(code=2) from exc
    except EngineError as exc:
        detail = f": {exc.stderr.strip()}" if exc.stderr.strip() else ""
        fail(f"{exc}{detail}", use_emoji=cli.use_emoji, use_color=cli.use_color)
        raise typer.Exit(code=3) from exc


__all__ = ["CLIContext", "CLIError", "cli_errors", "context_from"]
