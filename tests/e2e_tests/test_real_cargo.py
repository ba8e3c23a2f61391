"""End-to-end tests against an installed cargo toolchain."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

import locate_cargo_manifest
from locate_cargo_manifest import CargoExecutionError, locate_manifest

pytestmark = pytest.mark.skipif(
    shutil.which("cargo") is None, reason="cargo is not installed"
)

_MANIFEST = """\
[package]
name = "demo"
version = "0.1.0"
edition = "2021"
"""


@pytest.fixture
def crate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a minimal crate and make a nested directory the working dir."""
    root = tmp_path / "demo"
    (root / "src" / "nested").mkdir(parents=True)
    (root / "Cargo.toml").write_text(_MANIFEST, encoding="utf-8")
    (root / "src" / "lib.rs").write_text("", encoding="utf-8")
    monkeypatch.delenv("CARGO", raising=False)
    monkeypatch.chdir(root / "src" / "nested")
    return root


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert locate_cargo_manifest.__version__


def test_locates_surrounding_manifest(crate: Path) -> None:
    """Find the manifest of the crate enclosing the working directory."""
    manifest_path = locate_manifest()

    assert manifest_path.name == "Cargo.toml"
    assert manifest_path.resolve() == (crate / "Cargo.toml").resolve()


def test_outside_any_crate_fails_with_stderr(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Report cargo's own diagnostic when no manifest exists."""
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.delenv("CARGO", raising=False)
    monkeypatch.chdir(empty)

    with pytest.raises(CargoExecutionError) as excinfo:
        locate_manifest()

    assert b"Cargo.toml" in excinfo.value.stderr
