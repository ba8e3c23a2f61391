"""Public locator API (delegates to the application use-case)."""

from __future__ import annotations

import os
from pathlib import Path

from locate_cargo_manifest.application.options import resolve_locator_options
from locate_cargo_manifest.application.use_cases import locate_manifest as _locate


def locate_manifest() -> Path:
    """Return the Cargo manifest path of the surrounding crate.

    The path is retrieved by parsing the output of ``cargo locate-project``.
    ``$CARGO`` is read on every call and, when non-empty, replaces ``cargo``
    as the program to run.

    Returns
    -------
    Path
        Path to ``Cargo.toml`` as reported by cargo. It is not checked
        against the filesystem.

    Raises
    ------
    LocateManifestError
        One of its subclasses, depending on which step failed.
    """
    return _locate(options=resolve_locator_options(os.environ))
