"""Process runner adapter implementation."""

from __future__ import annotations

import subprocess

from locate_cargo_manifest.application.results import InvocationResult
from locate_cargo_manifest.types import CommandLine


class SubprocessCommandRunner:
    """Default runner backed by :func:`subprocess.run`."""

    def run(self, argv: CommandLine) -> InvocationResult:
        """Run a command synchronously and capture both output streams.

        Parameters
        ----------
        argv : Sequence[str]
            Program followed by its arguments.

        Returns
        -------
        InvocationResult
            Exit status with raw stdout and stderr bytes.

        Raises
        ------
        OSError
            If the program cannot be executed.
        """
        completed = subprocess.run(
            list(argv),
            capture_output=True,
            check=False,
        )
        return InvocationResult(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
