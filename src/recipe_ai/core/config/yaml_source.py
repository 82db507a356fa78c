"""YAML settings source merging base and per-environment configuration files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic_settings import PydanticBaseSettingsSource


if TYPE_CHECKING:
    from pydantic.fields import FieldInfo


CONFIG_DIR_ENV_VAR = "RECIPE_AI_CONFIG_DIR"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge override into base dict.

    Args:
        base: Base dictionary to merge into.
        override: Dictionary with values to override.

    Returns:
        New dictionary with merged values.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_directory(directory: Path) -> dict[str, Any]:
    """Load and merge every ``*.yaml`` file of a directory in name order."""
    merged: dict[str, Any] = {}
    if not directory.exists():
        return merged

    for yaml_file in sorted(directory.glob("*.yaml")):
        with yaml_file.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        merged = deep_merge(merged, data)
    return merged


class MultiYamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load and merge multiple YAML files based on APP_ENV.

    Files are read from ``config/base/`` first, then deep-merged with
    ``config/environments/{APP_ENV}/``. The config directory defaults to the
    project root and can be relocated with ``RECIPE_AI_CONFIG_DIR``.
    """

    def __init__(self, settings_cls: type[Any]) -> None:
        super().__init__(settings_cls)
        self._config_dir = self._find_config_dir()
        self._app_env = os.getenv("APP_ENV", "development")
        self._yaml_data = deep_merge(
            load_yaml_directory(self._config_dir / "base"),
            load_yaml_directory(self._config_dir / "environments" / self._app_env),
        )

    def _find_config_dir(self) -> Path:
        override = os.getenv(CONFIG_DIR_ENV_VAR)
        if override:
            return Path(override)

        # src/recipe_ai/core/config/yaml_source.py -> project root
        project_root = Path(__file__).resolve().parents[4]
        return project_root / "config"

    def get_field_value(
        self,
        _field: FieldInfo,
        field_name: str,
    ) -> tuple[Any, str, bool]:
        """Get the value for a specific field from YAML data."""
        value = self._yaml_data.get(field_name)
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, Any]:
        return self._yaml_data
