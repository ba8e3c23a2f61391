"""Typed locator options and their resolution from the environment."""

from __future__ import annotations

from dataclasses import dataclass

from locate_cargo_manifest.schemas import DEFAULT_CARGO, LocatorConfig
from locate_cargo_manifest.types import Environ

CARGO_ENV_VAR = "CARGO"
LOCATE_PROJECT_ARGS: tuple[str, ...] = ("locate-project",)


@dataclass(frozen=True)
class LocatorOptions:
    """Command used to ask cargo for the manifest path."""

    cargo: str = DEFAULT_CARGO
    arguments: tuple[str, ...] = LOCATE_PROJECT_ARGS

    def command_line(self) -> list[str]:
        """Return the argv passed to the process runner."""
        return [self.cargo, *self.arguments]


def resolve_locator_options(environ: Environ) -> LocatorOptions:
    """Build locator options from an environment mapping.

    Parameters
    ----------
    environ : Mapping[str, str]
        Environment to read, usually ``os.environ``.

    Returns
    -------
    LocatorOptions
        Options using ``$CARGO`` when set and non-empty, ``cargo`` otherwise.
    """
    config = LocatorConfig(cargo=environ.get(CARGO_ENV_VAR))
    return LocatorOptions(cargo=config.cargo)
