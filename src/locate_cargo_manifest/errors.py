"""Error taxonomy for manifest location failures."""

from __future__ import annotations

from typing import ClassVar

from locate_cargo_manifest.types import ErrorKind

_COMMAND = "`cargo locate-project`"


class LocateManifestError(Exception):
    """Base class for errors raised while retrieving the Cargo manifest path.

    Every subclass carries a ``kind`` tag so callers can dispatch on the
    failure without importing each class.
    """

    kind: ClassVar[ErrorKind]


class CargoIoError(LocateManifestError):
    """The cargo process could not be started.

    The underlying :class:`OSError` is available as ``__cause__``.
    """

    kind: ClassVar[ErrorKind] = "io"

    def __init__(self, cause: OSError) -> None:
        super().__init__(
            f"An I/O error occurred while trying to execute {_COMMAND}: {cause}"
        )


class CargoExecutionError(LocateManifestError):
    """``cargo locate-project`` did not exit successfully.

    Attributes
    ----------
    stderr : bytes
        Standard error output of the command, exactly as captured.
    """

    kind: ClassVar[ErrorKind] = "cargo_execution"

    def __init__(self, stderr: bytes) -> None:
        self.stderr = stderr
        super().__init__(
            f"The command {_COMMAND} did not exit successfully.\n"
            f"Stderr: {stderr.decode('utf-8', errors='replace')}"
        )


class StringConversionError(LocateManifestError):
    """The output of ``cargo locate-project`` was not valid UTF-8.

    Attributes
    ----------
    data : bytes
        The standard output bytes that failed to decode.
    """

    kind: ClassVar[ErrorKind] = "string_conversion"

    def __init__(self, data: bytes, cause: UnicodeDecodeError) -> None:
        self.data = data
        super().__init__(f"The output of {_COMMAND} was not valid UTF-8: {cause}")


class ParseJsonError(LocateManifestError):
    """The output of ``cargo locate-project`` was not valid JSON."""

    kind: ClassVar[ErrorKind] = "parse_json"

    def __init__(self, cause: ValueError) -> None:
        super().__init__(f"The output of {_COMMAND} was not valid JSON: {cause}")


class NoRootError(LocateManifestError):
    """The JSON output did not contain the expected ``root`` string."""

    kind: ClassVar[ErrorKind] = "no_root"

    def __init__(self) -> None:
        super().__init__(
            f'The JSON output of {_COMMAND} did not contain the expected "root" string.'
        )


__all__ = [
    "LocateManifestError",
    "CargoIoError",
    "CargoExecutionError",
    "StringConversionError",
    "ParseJsonError",
    "NoRootError",
]
