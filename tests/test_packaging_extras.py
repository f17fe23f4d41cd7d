"""Tests for packaging metadata and optional dependencies."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, cast

import pytest

tomllib = pytest.importorskip("tomllib")


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return cast(dict[str, Any], tomllib.load(fh))


def test_runtime_dependencies() -> None:
    deps = _load_pyproject()["project"]["dependencies"]
    names = {d.split(">")[0].split("=")[0].strip().lower() for d in deps}
    assert {"numpy", "pydantic", "pyyaml", "typer"}.issubset(names)


def test_dev_extra_has_pytest() -> None:
    extras = _load_pyproject()["project"]["optional-dependencies"]
    assert any(dep.startswith("pytest") for dep in extras["dev"])


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject()["project"]["scripts"]
    assert scripts["protokit"] == "protokit.cli:app"


def test_defaults_shipped_as_package_data() -> None:
    data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "defaults.yml" in data["protokit.config"]


def test_import_smoke() -> None:
    importlib.import_module("protokit")
    importlib.import_module("protokit.cli")
