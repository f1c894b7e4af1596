# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output for the CLI and the log handler used by the library.

Library modules log through :mod:`logging` only. The CLI prints status lines
with :func:`info`, :func:`ok`, :func:`warn` and :func:`fail`, which share one
rich console per colour/emoji combination.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Final, Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

MessageKind = Literal["info", "ok", "warn", "fail"]

# Prefix glyph and rich style per message kind.
_MESSAGE_STYLES: Final[dict[str, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "red"),
}


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=None)
def get_console(*, color: bool, emoji: bool) -> Console:
    """Return the shared console for a colour and emoji preference.

    Colour is only enabled when stdout is a terminal, whatever ``color`` says.

    Args:
        color: ``True`` when ANSI colour output is requested.
        emoji: ``True`` when rich should render emoji codes.

    Returns:
        Console: Cached console writing to the current ``sys.stdout``.
    """

    enabled = color and _stdout_is_tty()
    color_system: Literal["auto"] | None = "auto" if enabled else None
    return Console(color_system=color_system, no_color=not enabled, emoji=emoji, soft_wrap=True)


def _emit(kind: MessageKind, msg: str, *, use_emoji: bool, use_color: bool | None) -> None:
    symbol, style = _MESSAGE_STYLES[kind]
    color_enabled = _stdout_is_tty() if use_color is None else use_color
    text = Text(f"{symbol if use_emoji else ''}{msg}")
    if color_enabled:
        text.stylize(style)
    get_console(color=color_enabled, emoji=use_emoji).print(text)


def section(title: str, *, use_color: bool) -> None:
    """Print a header separating blocks of command output.

    Args:
        title: Header text.
        use_color: Render a rich rule when ``True``, a plain dashed line otherwise.
    """

    console = get_console(color=use_color, emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an informational line.

    Args:
        msg: Message text.
        use_emoji: Prefix the line with an emoji glyph.
        use_color: Explicit colour flag; ``None`` follows TTY detection.
    """

    _emit("info", msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a success line.

    Args:
        msg: Message text.
        use_emoji: Prefix the line with an emoji glyph.
        use_color: Explicit colour flag; ``None`` follows TTY detection.
    """

    _emit("ok", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a warning line.

    Args:
        msg: Message text.
        use_emoji: Prefix the line with an emoji glyph.
        use_color: Explicit colour flag; ``None`` follows TTY detection.
    """

    _emit("warn", msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an error line.

    Args:
        msg: Message text.
        use_emoji: Prefix the line with an emoji glyph.
        use_color: Explicit colour flag; ``None`` follows TTY detection.
    """

    _emit("fail", msg, use_emoji=use_emoji, use_color=use_color)


def configure_logging(*, verbose: bool) -> None:
    """Route library logging to stderr through rich.

    Args:
        verbose: Log at DEBUG when ``True``, WARNING otherwise.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


__all__ = ["configure_logging", "fail", "get_console", "info", "ok", "section", "warn"]
