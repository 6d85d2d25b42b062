"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files and validates using Pydantic models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from product_filter.config.models import FilterConfig


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(self, config_path: Union[str, Path]) -> FilterConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            Validated FilterConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        return FilterConfig.model_validate(self._load_yaml(path))

    def load_from_dict(self, config_dict: Dict[str, Any]) -> FilterConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated FilterConfig object
        """
        return FilterConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def load_config(
    config_path: Union[str, Path],
    base_path: Optional[Path] = None,
) -> FilterConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        base_path: Base path for resolving relative paths

    Returns:
        Validated FilterConfig object
    """
    return ConfigLoader(base_path=base_path).load(config_path)
