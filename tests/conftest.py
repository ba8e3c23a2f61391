"""Shared pytest configuration, marker assignment and cargo stubs."""

from __future__ import annotations

import stat
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

StubFactory: TypeAlias = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def stub_cargo(tmp_path: Path) -> StubFactory:
    """Return a factory writing executable shell stubs that stand in for cargo.

    The stub ignores its arguments, writes ``stdout``/``stderr`` with
    ``printf`` (octal escapes allowed) and exits with ``exit_code``.
    """

    def _make(
        stdout: str = "",
        stderr: str = "",
        exit_code: int = 0,
        name: str = "fake-cargo",
    ) -> Path:
        script = tmp_path / name
        lines = ["#!/bin/sh"]
        if stdout:
            lines.append(f"printf '{stdout}'")
        if stderr:
            lines.append(f"printf '{stderr}' >&2")
        lines.append(f"exit {exit_code}")
        script.write_text("\n".join(lines) + "\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make
