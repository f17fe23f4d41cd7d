"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable seed referenced by ``generation.seed_env``
"""

from .schema import ToolboxConfig, load_config

__all__ = ["ToolboxConfig", "load_config"]
