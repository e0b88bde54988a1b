"""Configuration management package.

This package provides a small configuration system with support for:
- Built-in defaults merged with an optional JSON file
- Environment variable overrides (optionally loaded from .env)
- JSON schema validation

Usage:
    from case_study_importer.utils.config import ConfigManager

    config = ConfigManager()
    indent = config.get("output.indent", 2)
"""

from .manager import ConfigManager, DEFAULT_CONFIG_FILE
from .schema_validation import SchemaValidator
from .environment import EnvironmentHandler
from .defaults import DEFAULT_CONFIG, CONFIG_SCHEMA, get_default_config, merge_configs

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG_FILE',
    'SchemaValidator',
    'EnvironmentHandler',
    'DEFAULT_CONFIG',
    'CONFIG_SCHEMA',
    'get_default_config',
    'merge_configs',
]
