"""Typed configuration schema and loader for the protokit package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, constr, field_validator

from ..numtypes import int_type
from ..utils.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Log level and trace output switch."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    trace: bool = False

    model_config = ConfigDict(extra="forbid")


class GenerationSettings(BaseModel):
    """Defaults for random data generation."""

    default_alphabet: constr(min_length=1)
    default_int_type: str
    seed: int | None = None
    seed_env: str

    model_config = ConfigDict(extra="forbid")

    @field_validator("default_int_type")
    @classmethod
    def _known_int_type(cls, value: str) -> str:
        try:
            int_type(value)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from None
        return value


class ExecuteSettings(BaseModel):
    """Settings for running external commands."""

    timeout_seconds: confloat(gt=0.0) | None = None
    encoding: str = "utf-8"

    model_config = ConfigDict(extra="forbid")


class ToolboxConfig(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    logging: LoggingSettings
    generation: GenerationSettings
    execute: ExecuteSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ToolboxConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable for the generation seed.
    """

    with (
        importlib_resources.files("protokit.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ToolboxConfig.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.generation.seed_env
    if seed_env in environ:
        raw = environ[seed_env].strip()
        try:
            cfg.generation.seed = int(raw)
        except ValueError:
            raise ConfigurationError(f"{seed_env} must be an integer, got '{raw}'") from None

    return cfg


__all__ = [
    "ToolboxConfig",
    "LoggingSettings",
    "GenerationSettings",
    "ExecuteSettings",
    "deep_merge_dicts",
    "load_config",
]
