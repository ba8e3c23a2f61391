"""Pydantic schemas for locator configuration and cargo output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_CARGO = "cargo"


class LocatorConfig(BaseModel):
    """Validated locator configuration resolved from the environment."""

    model_config = ConfigDict(extra="forbid")

    cargo: str = DEFAULT_CARGO

    @field_validator("cargo", mode="before")
    @classmethod
    def _default_blank_cargo(cls, value: object) -> object:
        if value is None or value == "":
            return DEFAULT_CARGO
        return value


class LocateProjectOutput(BaseModel):
    """JSON object printed by ``cargo locate-project``.

    Only ``root`` is read. Strict mode keeps a non-string ``root`` from being
    coerced.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    root: str
