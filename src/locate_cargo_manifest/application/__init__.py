"""Application-layer use-case, ports and option objects."""

from __future__ import annotations

from locate_cargo_manifest.application.options import (
    CARGO_ENV_VAR,
    LocatorOptions,
    resolve_locator_options,
)
from locate_cargo_manifest.application.ports import CommandRunner
from locate_cargo_manifest.application.results import InvocationResult
from locate_cargo_manifest.application.use_cases import locate_manifest

__all__ = [
    "CARGO_ENV_VAR",
    "CommandRunner",
    "InvocationResult",
    "LocatorOptions",
    "locate_manifest",
    "resolve_locator_options",
]
