# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for inspecting and verifying the preset layers.

The typer application itself lives in :mod:`lintpresets.cli.app`.
"""

from __future__ import annotations

from typing import Final

from .app import main

__all__: Final[list[str]] = ["main"]
