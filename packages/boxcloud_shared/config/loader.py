"""Configuration loading with deterministic precedence.

The cascade is always:
1) explicit params
2) Environment variables
3) ~/.config/boxcloud/boxcloud.yaml (or the given ``config_path``)
4) Built-in defaults

Environment variable format:
- Prefix: ``BOXCLOUD_``
- Nested keys: ``__`` separator
- Example: ``BOXCLOUD_API__TOKEN=abc`` -> ``api.token = "abc"``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import DEFAULT_CONFIG_PATH, BoxCloudSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> BoxCloudSettings:
    """Resolve settings, reading YAML from ``config_path`` when given."""
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    class _PathBoundSettings(BoxCloudSettings):
        model_config = SettingsConfigDict(yaml_file=resolved)

    return _PathBoundSettings(**dict(cli_params or {}))
