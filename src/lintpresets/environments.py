# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Named sets of global identifiers predefined by common runtimes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .errors import ConfigurationError
from .fragment import GlobalAccess


def _readonly(*names: str) -> dict[str, GlobalAccess]:
    return {name: "readonly" for name in names}


_BROWSER: Final[dict[str, GlobalAccess]] = {
    **_readonly(
        "AbortController",
        "AbortSignal",
        "Blob",
        "CustomEvent",
        "DOMParser",
        "Event",
        "EventTarget",
        "File",
        "FileReader",
        "FormData",
        "HTMLElement",
        "Headers",
        "IntersectionObserver",
        "MutationObserver",
        "Request",
        "Response",
        "URL",
        "URLSearchParams",
        "WebSocket",
        "Worker",
        "alert",
        "atob",
        "btoa",
        "cancelAnimationFrame",
        "clearInterval",
        "clearTimeout",
        "console",
        "crypto",
        "customElements",
        "document",
        "fetch",
        "history",
        "indexedDB",
        "localStorage",
        "location",
        "navigator",
        "performance",
        "queueMicrotask",
        "requestAnimationFrame",
        "sessionStorage",
        "setInterval",
        "setTimeout",
        "structuredClone",
        "window",
    ),
    "onload": "writable",
    "onerror": "writable",
}

_AMD: Final[dict[str, GlobalAccess]] = _readonly("define", "require")

_NODE: Final[dict[str, GlobalAccess]] = {
    **_readonly(
        "AbortController",
        "Buffer",
        "URL",
        "URLSearchParams",
        "__dirname",
        "__filename",
        "clearImmediate",
        "clearInterval",
        "clearTimeout",
        "console",
        "fetch",
        "global",
        "process",
        "queueMicrotask",
        "require",
        "setImmediate",
        "setInterval",
        "setTimeout",
        "structuredClone",
    ),
    "exports": "writable",
    "module": "readonly",
}

ENVIRONMENTS: Final[Mapping[str, Mapping[str, GlobalAccess]]] = MappingProxyType(
    {
        "browser": MappingProxyType(_BROWSER),
        "amd": MappingProxyType(_AMD),
        "node": MappingProxyType(_NODE),
    },
)


def merged_globals(*names: str) -> dict[str, GlobalAccess]:
    """Return the union of the named environments (later names win per key).

    Args:
        names: Environment names such as ``"browser"`` or ``"node"``.

    Returns:
        dict[str, GlobalAccess]: Global identifier to access mapping.

    Raises:
        ConfigurationError: If an environment name is unknown.
    """

    merged: dict[str, GlobalAccess] = {}
    for name in names:
        try:
            merged.update(ENVIRONMENTS[name])
        except KeyError:
            known = ", ".join(sorted(ENVIRONMENTS))
            raise ConfigurationError(f"unknown globals environment '{name}' (known: {known})") from None
    return merged


__all__ = ["ENVIRONMENTS", "merged_globals"]
