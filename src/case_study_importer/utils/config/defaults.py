"""
Built-in configuration defaults and the schema they are validated against.

A configuration file only needs to list the keys it changes; everything
else falls back to ``DEFAULT_CONFIG``.
"""

from copy import deepcopy
from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "0.1.0",
    "logging": {
        "level": "INFO",
        "format": "standard",
    },
    "output": {
        "indent": 2,
        "ensure_ascii": False,
    },
}

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "version": {"type": "string"},
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                },
                "format": {
                    "type": "string",
                    "enum": ["standard", "json", "detailed"],
                },
            },
            "additionalProperties": False,
        },
        "output": {
            "type": "object",
            "properties": {
                "indent": {"type": "integer", "minimum": 0, "maximum": 8},
                "ensure_ascii": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


def get_default_config() -> Dict[str, Any]:
    """Return a fresh copy of the built-in defaults."""
    return deepcopy(DEFAULT_CONFIG)


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge two configuration dictionaries.

    Nested dictionaries are merged key by key; any other value in
    ``override`` replaces the one in ``base``. Neither input is modified.
    """
    result = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result
