"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InvocationResult:
    """Captured outcome of one external command run."""

    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        return self.returncode == 0
