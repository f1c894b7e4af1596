# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the formatter and build presets."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintpresets.errors import ConfigurationError
from lintpresets.presets import CLI_BANNER, bundler_preset, packaging_preset, preset_payload, prettier_options


def test_prettier_options() -> None:
    assert prettier_options().to_dict() == {
        "semi": False,
        "trailingComma": "all",
        "singleQuote": False,
        "printWidth": 120,
        "tabWidth": 2,
        "endOfLine": "auto",
    }


@pytest.mark.parametrize(("node_env", "minify"), [("production", True), ("development", False), (None, False)])
def test_bundler_minify_follows_node_env(tmp_path: Path, node_env: str | None, minify: bool) -> None:
    env = {} if node_env is None else {"NODE_ENV": node_env}

    preset = bundler_preset(env=env, cwd=tmp_path)

    assert preset.build.minify is minify


def test_bundler_preset_payload(tmp_path: Path) -> None:
    payload = bundler_preset(env={}, cwd=tmp_path).to_dict()

    assert payload["build"] == {"outDir": "dist", "sourcemap": True, "target": "es2020", "minify": False}
    assert payload["resolve"] == {"alias": {"@": str((tmp_path / "src").resolve())}}


def test_packaging_preset_targets() -> None:
    preset = packaging_preset()

    (library,) = preset.library_targets()
    (cli,) = preset.cli_targets()
    assert library.entry == ("src/tsup.config.base.ts", "src/vitest.config.base.ts")
    assert library.clean and library.banner is None
    assert cli.entry == ("src/cli.ts",)
    assert cli.banner == CLI_BANNER
    assert cli.to_dict()["skipNodeModulesBundle"] is True


def test_preset_payload_unknown() -> None:
    with pytest.raises(ConfigurationError, match="unknown preset"):
        preset_payload("webpack")
