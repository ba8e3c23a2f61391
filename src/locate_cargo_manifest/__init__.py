"""Retrieve the Cargo manifest path by parsing ``cargo locate-project``.

Example
-------
>>> from locate_cargo_manifest import locate_manifest
>>> manifest_path = locate_manifest()  # doctest: +SKIP
>>> manifest_path.name  # doctest: +SKIP
'Cargo.toml'
"""

from __future__ import annotations

from locate_cargo_manifest.api import locate_manifest
from locate_cargo_manifest.errors import (
    CargoExecutionError,
    CargoIoError,
    LocateManifestError,
    NoRootError,
    ParseJsonError,
    StringConversionError,
)

__version__ = "0.1.0"

__all__ = [
    "locate_manifest",
    "LocateManifestError",
    "CargoIoError",
    "CargoExecutionError",
    "StringConversionError",
    "ParseJsonError",
    "NoRootError",
]
