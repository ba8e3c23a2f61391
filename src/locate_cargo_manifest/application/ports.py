"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol

from locate_cargo_manifest.application.results import InvocationResult
from locate_cargo_manifest.types import CommandLine


class CommandRunner(Protocol):
    """Run an external command to completion and capture its output."""

    def run(self, argv: CommandLine) -> InvocationResult:
        """Run ``argv``; raise ``OSError`` if it cannot be started."""
