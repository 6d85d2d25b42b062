"""
Configuration Package - Models and Loaders.

    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Screen builder compiling allowed values into composite criteria

Configuration Structure:
    - FilterConfig: Root configuration object
    - ProductConfig: Catalogue entry
    - ScreenConfig: Allowed colors / sizes and excluded names
"""

from product_filter.config.loader import ConfigLoader, load_config
from product_filter.config.models import FilterConfig, ProductConfig, ScreenConfig
from product_filter.config.screens import build_criterion

__all__ = [
    "ConfigLoader",
    "FilterConfig",
    "ProductConfig",
    "ScreenConfig",
    "build_criterion",
    "load_config",
]
