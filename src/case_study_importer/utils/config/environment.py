"""
Environment variable handling for configuration management.

This module maps ``CASE_STUDY_*`` environment variables onto configuration
keys and converts their string values to the types the schema expects.
"""

import json
import logging
import os
from copy import deepcopy
from typing import Any, Dict, Optional, Tuple

from ...exceptions.config_exceptions import EnvironmentVariableError


logger = logging.getLogger(__name__)


class EnvironmentHandler:
    """
    Environment variable handling for configuration management.

    Handles environment variable overrides and type conversion.
    """

    def __init__(self) -> None:
        """Initialize environment handler."""
        self.logger = logger

    def get_env_mapping(self) -> Dict[str, Tuple[str, str]]:
        """
        Get mapping of environment variable names to configuration keys.

        Returns:
            Dictionary mapping env var names to (config key, target type)
        """
        return {
            'CASE_STUDY_LOG_LEVEL': ('logging.level', 'upper'),
            'CASE_STUDY_LOG_FORMAT': ('logging.format', 'lower'),
            'CASE_STUDY_JSON_INDENT': ('output.indent', 'integer'),
            'CASE_STUDY_ENSURE_ASCII': ('output.ensure_ascii', 'boolean'),
        }

    def convert_env_value(self, value: str, target_type: str = 'string', variable_name: Optional[str] = None) -> Any:
        """
        Convert environment variable string to appropriate Python type.

        Args:
            value: Environment variable value (always string)
            target_type: Target type ('string', 'upper', 'lower', 'boolean', 'integer', 'json')
            variable_name: Variable name for error reporting

        Returns:
            Converted value

        Raises:
            EnvironmentVariableError: If conversion fails
        """
        try:
            if target_type == 'boolean':
                return value.strip().lower() in ('true', '1', 'yes', 'on', 'enabled')
            elif target_type == 'integer':
                return int(value)
            elif target_type == 'json':
                return json.loads(value)
            elif target_type == 'upper':
                return value.strip().upper()
            elif target_type == 'lower':
                return value.strip().lower()
            else:  # string
                return value
        except (ValueError, json.JSONDecodeError) as e:
            raise EnvironmentVariableError(
                f"Failed to convert environment variable value '{value}' to {target_type}: {e}",
                variable_name
            ) from e

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Args:
            config: Base configuration dictionary

        Returns:
            Configuration with environment overrides applied

        Raises:
            EnvironmentVariableError: If a set variable cannot be converted
        """
        result = deepcopy(config)

        for env_var, (config_key, target_type) in self.get_env_mapping().items():
            env_value = os.getenv(env_var)
            if env_value is None or env_value == "":
                continue

            converted_value = self.convert_env_value(env_value, target_type, env_var)
            self._set_nested_value(result, config_key, converted_value)
            self.logger.debug(f"Applied environment override: {env_var} -> {config_key}")

        return result

    def active_overrides(self) -> Dict[str, str]:
        """Return the environment variables currently set, by config key."""
        return {
            config_key: env_var
            for env_var, (config_key, _) in self.get_env_mapping().items()
            if os.getenv(env_var)
        }

    def _set_nested_value(self, config: Dict[str, Any], key_path: str, value: Any) -> None:
        """
        Set a nested value in configuration using dot notation.

        Args:
            config: Configuration dictionary to modify
            key_path: Dot-separated key path (e.g., 'logging.level')
            value: Value to set
        """
        keys = key_path.split('.')
        current = config

        for key in keys[:-1]:
            if key not in current or not isinstance(current[key], dict):
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value
