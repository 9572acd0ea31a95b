"""
Configuration Loader - Layered YAML Configuration.

Builds a DetectorConfig from up to three layers, later layers winning key
by key:

    1. default.yaml shipped inside this package
    2. an optional user YAML file (``--config``)
    3. explicit overrides (``--output``)

The merged mapping is validated once, so an invalid value in any layer
fails the whole load.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from spreader_detector.config.models import DetectorConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yaml")

ConfigLayer = Dict[str, Any]


class ConfigLoader:
    """Merges configuration layers and validates the result."""

    def __init__(self, defaults_path: Optional[Path] = DEFAULT_CONFIG_PATH) -> None:
        """
        Initialize config loader.

        Args:
            defaults_path: Bottom layer file, None to rely on model defaults
        """
        self.defaults_path = defaults_path

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        overrides: Optional[ConfigLayer] = None,
    ) -> DetectorConfig:
        """
        Load the layered configuration.

        Args:
            config_path: User YAML file merged over the defaults
            overrides: Nested values merged over everything else

        Returns:
            Validated DetectorConfig object

        Raises:
            FileNotFoundError: If a layer file doesn't exist
            yaml.YAMLError: If a layer file is not valid YAML
            ValueError: If a layer root is not a mapping
            ValidationError: If the merged config is invalid
        """
        layers: List[ConfigLayer] = []
        if self.defaults_path is not None:
            layers.append(read_layer(self.defaults_path))
        if config_path is not None:
            layers.append(read_layer(Path(config_path)))
        if overrides:
            layers.append(overrides)

        merged: ConfigLayer = {}
        for layer in layers:
            merged = merge_layers(merged, layer)

        logger.debug(f"Merged {len(layers)} configuration layers")
        return DetectorConfig.model_validate(merged)


def read_layer(path: Path) -> ConfigLayer:
    """Read one YAML layer. An empty file is an empty layer."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return data


def merge_layers(base: ConfigLayer, overlay: ConfigLayer) -> ConfigLayer:
    """Deep merge ``overlay`` into a copy of ``base``."""
    result = dict(base)
    for key, value in overlay.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_layers(result[key], value)
        else:
            result[key] = value
    return result
