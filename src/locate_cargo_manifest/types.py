"""Shared type aliases for the manifest locator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Literal, TypeAlias

ErrorKind: TypeAlias = Literal[
    "io",
    "cargo_execution",
    "string_conversion",
    "parse_json",
    "no_root",
]
Environ: TypeAlias = Mapping[str, str]
CommandLine: TypeAlias = Sequence[str]
