from __future__ import annotations

from importlib import resources
from typing import Any

import yaml

from protokit.config import ToolboxConfig
from protokit.config.schema import deep_merge_dicts


def _defaults() -> dict[str, Any]:
    text = resources.files("protokit.config").joinpath("defaults.yml").read_text("utf-8")
    return yaml.safe_load(text)


def test_seed_override_keeps_sibling_defaults() -> None:
    defaults = _defaults()
    merged = deep_merge_dicts(defaults, {"generation": {"seed": 5}})
    assert merged["generation"]["seed"] == 5
    assert merged["generation"]["default_alphabet"] == defaults["generation"]["default_alphabet"]
    assert merged["execute"] == defaults["execute"]
    # defaults are left untouched
    assert defaults["generation"]["seed"] is None
    assert ToolboxConfig.model_validate(merged).generation.seed == 5


def test_scalar_override_replaces_section() -> None:
    merged = deep_merge_dicts({"logging": {"level": "INFO", "trace": False}}, {"logging": None})
    assert merged == {"logging": None}
