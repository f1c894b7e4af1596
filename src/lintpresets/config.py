# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Engine settings loaded from ``[tool.lintpresets]`` and the environment."""

from __future__ import annotations

import os
import shlex
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintpresets"
ENGINE_ENV_VAR: Final[str] = "LINTPRESETS_ESLINT"
DEFAULT_ENGINE_COMMAND: Final[tuple[str, ...]] = ("npx", "--no-install", "eslint")


class EngineSettings(BaseModel):
    """How to launch the external analysis engine."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    command: tuple[str, ...] = DEFAULT_ENGINE_COMMAND
    working_directory: Path | None = None
    extra_args: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("command", "extra_args", mode="before")
    @classmethod
    def _split_strings(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(shlex.split(value))
        return value

    @field_validator("command")
    @classmethod
    def _require_command(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("engine command must not be empty")
        return value

    def resolved_directory(self, root: Path) -> Path:
        """Return the directory the engine runs in (relative paths anchor at ``root``)."""

        if self.working_directory is None:
            return root.resolve()
        if self.working_directory.is_absolute():
            return self.working_directory
        return (root / self.working_directory).resolve()


def load_settings(root: Path, *, env: Mapping[str, str] | None = None) -> EngineSettings:
    """Load engine settings for the project at ``root``.

    ``[tool.lintpresets]`` in ``pyproject.toml`` is read first; the
    ``LINTPRESETS_ESLINT`` environment variable then overrides the command.

    Args:
        root: Project root containing an optional ``pyproject.toml``.
        env: Environment mapping; defaults to ``os.environ``.

    Returns:
        EngineSettings: Validated settings.

    Raises:
        ConfigurationError: If the settings table is malformed.
    """

    environ = os.environ if env is None else env
    payload = dict(_pyproject_section(root / "pyproject.toml"))
    if override := environ.get(ENGINE_ENV_VAR, "").strip():
        payload["command"] = override
    try:
        return EngineSettings.model_validate(_normalise_keys(payload))
    except ValidationError as exc:
        raise ConfigurationError(f"invalid [tool.{PYPROJECT_SECTION_KEY}] settings: {exc}") from exc


def _pyproject_section(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"cannot parse {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def _normalise_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in payload.items()}


__all__ = ["DEFAULT_ENGINE_COMMAND", "ENGINE_ENV_VAR", "EngineSettings", "load_settings"]
