"""Layered YAML configuration.

``config/base`` holds the defaults for every deployment; the files under
``config/environments/<APP_ENV>`` override individual keys of them.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic_settings import PydanticBaseSettingsSource


if TYPE_CHECKING:
    from pydantic.fields import FieldInfo

# src/recipes_api/core/config/yaml_source.py -> <root>/config
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[4] / "config"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged in; nested mappings merge by key."""
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


def read_yaml_layer(directory: Path) -> dict[str, Any]:
    """Merge every ``*.yaml`` file of ``directory`` in file name order.

    A missing directory is an empty layer.

    Raises:
        ValueError: If a file's top level is not a mapping.
    """
    layer: dict[str, Any] = {}
    if not directory.is_dir():
        return layer

    for path in sorted(directory.glob("*.yaml")):
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            continue
        if not isinstance(data, dict):
            msg = f"{path} must contain a mapping at the top level"
            raise ValueError(msg)
        layer = deep_merge(layer, data)
    return layer


def load_layered_config(config_dir: Path, app_env: str) -> dict[str, Any]:
    """Base layer with the ``app_env`` layer on top."""
    return deep_merge(
        read_yaml_layer(config_dir / "base"),
        read_yaml_layer(config_dir / "environments" / app_env),
    )


class MultiYamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the layered YAML configuration.

    ``APP_ENV`` selects the environment layer (default ``development``) and
    ``RECIPES_CONFIG_DIR`` replaces the config directory.
    """

    def __init__(self, settings_cls: type[Any]) -> None:
        super().__init__(settings_cls)
        config_dir = Path(os.getenv("RECIPES_CONFIG_DIR") or DEFAULT_CONFIG_DIR)
        self._yaml_data = load_layered_config(
            config_dir, os.getenv("APP_ENV", "development")
        )

    def get_field_value(
        self,
        _field: FieldInfo,
        field_name: str,
    ) -> tuple[Any, str, bool]:
        value = self._yaml_data.get(field_name)
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, Any]:
        return self._yaml_data
