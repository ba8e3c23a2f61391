"""Application use-case locating the Cargo manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from locate_cargo_manifest.application.options import LocatorOptions
from locate_cargo_manifest.application.ports import CommandRunner
from locate_cargo_manifest.errors import (
    CargoExecutionError,
    CargoIoError,
    NoRootError,
    ParseJsonError,
    StringConversionError,
)
from locate_cargo_manifest.infrastructure.process import SubprocessCommandRunner
from locate_cargo_manifest.schemas import LocateProjectOutput

logger = logging.getLogger(__name__)


def locate_manifest(
    *,
    options: LocatorOptions,
    runner: CommandRunner | None = None,
) -> Path:
    """Use-case: run ``cargo locate-project`` and return the ``root`` path.

    Parameters
    ----------
    options : LocatorOptions
        Cargo program and arguments to run.
    runner : CommandRunner | None, default=None
        Process runner; defaults to :class:`SubprocessCommandRunner`.

    Returns
    -------
    Path
        The manifest path exactly as reported by cargo.

    Raises
    ------
    CargoIoError
        If cargo could not be started.
    CargoExecutionError
        If cargo exited with a failure status.
    StringConversionError
        If cargo's output is not valid UTF-8.
    ParseJsonError
        If cargo's output is not valid JSON.
    NoRootError
        If the JSON lacks a string ``root`` field.
    """
    runner = runner or SubprocessCommandRunner()
    argv = options.command_line()

    logger.debug("running %s", argv)
    try:
        result = runner.run(argv)
    except OSError as exc:
        raise CargoIoError(exc) from exc
    logger.debug("%s exited with status %d", argv[0], result.returncode)

    if not result.success:
        raise CargoExecutionError(result.stderr)

    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise StringConversionError(result.stdout, exc) from exc

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseJsonError(exc) from exc

    try:
        output = LocateProjectOutput.model_validate(parsed)
    except ValidationError:
        raise NoRootError() from None

    return Path(output.root)
