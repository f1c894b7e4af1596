# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Formatter and build presets shipped alongside the lint layers.

These are pass-through value objects: they are returned as-is and have no
merge semantics of their own.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .errors import ConfigurationError

CLI_BANNER: Final[str] = "#!/usr/bin/env node"


class _Preset(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the preset with tool-native (camelCase) keys."""

        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class PrettierOptions(_Preset):
    """Shareable formatter options."""

    semi: bool = False
    trailing_comma: Literal["all", "es5", "none"] = "all"
    single_quote: bool = False
    print_width: int = 120
    tab_width: int = 2
    end_of_line: Literal["auto", "lf", "crlf", "cr"] = "auto"


class BundlerBuild(_Preset):
    """Build section of the single-page-application bundler preset."""

    out_dir: str = "dist"
    sourcemap: bool = True
    target: str = "es2020"
    minify: bool = False


class BundlerPreset(_Preset):
    """Bundler preset: build options plus a source-root path alias."""

    build: BundlerBuild = Field(default_factory=BundlerBuild)
    alias: dict[str, str] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        return {"build": payload["build"], "resolve": {"alias": payload["alias"]}}


class PackagingTarget(_Preset):
    """One output target of the packaging preset."""

    entry: tuple[str, ...]
    format: tuple[str, ...] = ("esm",)
    dts: bool = False
    clean: bool = False
    out_dir: str = "dist"
    splitting: bool = False
    sourcemap: bool = False
    minify: bool = False
    bundle: bool = False
    skip_node_modules_bundle: bool = True
    target: str = "es2022"
    out_extension: str = ".js"
    banner: str | None = None

    @property
    def executable(self) -> bool:
        """Return ``True`` for the command-line target."""

        return self.banner is not None and self.banner.startswith("#!")


class PackagingPreset(_Preset):
    """Packaging preset with library and command-line targets."""

    targets: tuple[PackagingTarget, ...]

    def library_targets(self) -> tuple[PackagingTarget, ...]:
        """Return targets that build library entry points."""

        return tuple(target for target in self.targets if not target.executable)

    def cli_targets(self) -> tuple[PackagingTarget, ...]:
        """Return targets that build an executable entry point."""

        return tuple(target for target in self.targets if target.executable)


def prettier_options() -> PrettierOptions:
    """Return the shareable formatter options."""

    return PrettierOptions()


def bundler_preset(*, env: Mapping[str, str] | None = None, cwd: Path | None = None) -> BundlerPreset:
    """Return the bundler preset.

    Args:
        env: Environment; minification is on when ``NODE_ENV`` is ``production``.
        cwd: Directory the ``@`` alias is resolved against; defaults to cwd.
    """

    environ = os.environ if env is None else env
    root = cwd or Path.cwd()
    return BundlerPreset(
        build=BundlerBuild(minify=environ.get("NODE_ENV") == "production"),
        alias={"@": str((root / "src").resolve())},
    )


def packaging_preset() -> PackagingPreset:
    """Return the packaging preset: config entry points plus the CLI."""

    return PackagingPreset(
        targets=(
            PackagingTarget(entry=("src/tsup.config.base.ts", "src/vitest.config.base.ts"), clean=True),
            PackagingTarget(entry=("src/cli.ts",), banner=CLI_BANNER),
        ),
    )


PRESETS: Final[dict[str, str]] = {
    "prettier": "formatter options",
    "bundler": "single-page application bundler preset",
    "packaging": "library and command-line packaging preset",
}


def preset_payload(name: str) -> dict[str, Any]:
    """Return the named preset as a tool-native mapping.

    Raises:
        ConfigurationError: If ``name`` is not a known preset.
    """

    if name == "prettier":
        return prettier_options().to_dict()
    if name == "bundler":
        return bundler_preset().to_dict()
    if name == "packaging":
        return {"targets": [target.to_dict() for target in packaging_preset().targets]}
    known = ", ".join(sorted(PRESETS))
    raise ConfigurationError(f"unknown preset '{name}' (known: {known})")


__all__ = [
    "CLI_BANNER",
    "PRESETS",
    "BundlerBuild",
    "BundlerPreset",
    "PackagingPreset",
    "PackagingTarget",
    "PrettierOptions",
    "bundler_preset",
    "packaging_preset",
    "preset_payload",
    "prettier_options",
]
