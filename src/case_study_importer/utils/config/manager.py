"""
Main configuration manager for the case study importer.

This module provides the ConfigManager class that merges built-in defaults,
an optional JSON configuration file and environment variable overrides,
and validates the result.
"""

import json
import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)
from .defaults import get_default_config, merge_configs
from .environment import EnvironmentHandler
from .schema_validation import SchemaValidator


logger = logging.getLogger(__name__)

_MISSING = object()

DEFAULT_CONFIG_FILE = "casestudy.config.json"
ENV_FILE = ".env"


class ConfigManager:
    """
    Configuration manager for the case study importer.

    Handles loading, validation, and merging of configuration from multiple sources:
    - Built-in defaults
    - User configuration file (``casestudy.config.json``)
    - Environment variables (``CASE_STUDY_*``, optionally from ``.env``)
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
    ) -> None:
        """
        Initialize the ConfigManager.

        Args:
            config_file: Path to configuration file (default: casestudy.config.json).
                An explicitly given file must exist; the default file is optional.
            project_root: Project root directory (default: current working directory)
            load_env: Whether to load environment variables from .env file
        """
        self.project_root = Path(project_root or os.getcwd()).resolve()
        self.explicit_config_file = config_file is not None
        self.config_file = config_file or DEFAULT_CONFIG_FILE

        self._config: Dict[str, Any] = {}
        self._loaded = False

        self.logger = logger

        self.schema_validator = SchemaValidator()
        self.env_handler = EnvironmentHandler()

        if load_env:
            self._load_env_file()

    def _resolve(self, path: Union[str, Path]) -> Path:
        path_obj = Path(path)
        if path_obj.is_absolute():
            return path_obj
        return (self.project_root / path_obj).resolve()

    def _load_env_file(self) -> None:
        """Load CASE_STUDY_* variables from a .env file in the project root, if any."""
        env_path = self._resolve(ENV_FILE)
        if env_path.exists():
            self.logger.debug(f"Loading environment variables from {env_path}")
            load_dotenv(env_path)

    def _read_config_file(self, path: Path) -> Dict[str, Any]:
        """
        Read a JSON configuration file.

        Raises:
            ConfigurationError: If the file is not valid JSON, cannot be read,
                or does not hold an object
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file: {e}", str(path)) from e
        except PermissionError as e:
            raise ConfigurationError(f"Permission denied reading configuration file: {e}", str(path)) from e

        if not isinstance(data, dict):
            raise ConfigurationError("Configuration file must contain a JSON object", str(path))
        return data

    @property
    def config(self) -> Dict[str, Any]:
        """Get the current configuration. Loads if not already loaded."""
        if not self._loaded:
            self.load_config()
        return deepcopy(self._config)

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._loaded

    @property
    def config_path(self) -> Path:
        """Resolved path of the configuration file."""
        return self._resolve(self.config_file)

    def load_config(self, force_reload: bool = False, validate: bool = True) -> Dict[str, Any]:
        """
        Load configuration from all sources.

        Args:
            force_reload: Force reloading even if already loaded
            validate: Whether to validate configuration against schema

        Returns:
            Loaded configuration dictionary

        Raises:
            ConfigurationFileNotFoundError: If an explicitly given file is missing
            ConfigurationValidationError: If validation fails
            ConfigurationError: If loading fails for another reason
        """
        if self._loaded and not force_reload:
            self.logger.debug("Configuration already loaded, returning cached version")
            return deepcopy(self._config)

        config = get_default_config()

        if self.config_path.exists():
            self.logger.debug(f"Merging configuration file: {self.config_path}")
            config = merge_configs(config, self._read_config_file(self.config_path))
        elif self.explicit_config_file:
            raise ConfigurationFileNotFoundError(
                f"Configuration file not found: {self.config_path}",
                str(self.config_path),
            )
        else:
            self.logger.debug(f"No configuration file at {self.config_path}, using defaults")

        config = self.env_handler.apply_environment_overrides(config)

        if validate:
            self.schema_validator.validate_config(config, str(self.config_path))

        self._config = config
        self._loaded = True
        self.logger.debug("Configuration loaded successfully")
        return deepcopy(self._config)

    def reload_config(self) -> Dict[str, Any]:
        """Force reload configuration from all sources."""
        return self.load_config(force_reload=True)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key using dot notation.

        Args:
            key: Configuration key (supports dot notation like 'logging.level')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        config = self.config
        try:
            for k in key.split('.'):
                config = config[k]
            return config
        except (KeyError, TypeError):
            return default

    def has(self, key: str) -> bool:
        """Check if a configuration key exists."""
        return self.get(key, _MISSING) is not _MISSING

    def reset(self) -> None:
        """Reset configuration state, forcing reload on next access."""
        self._config = {}
        self._loaded = False

    def get_config_summary(self) -> Dict[str, Any]:
        """
        Get a summary of the current configuration state.

        Returns:
            Dictionary with configuration summary
        """
        summary: Dict[str, Any] = {
            "loaded": self._loaded,
            "config_file": str(self.config_path),
            "config_file_exists": self.config_path.exists(),
            "project_root": str(self.project_root),
            "config_keys": [],
            "environment_overrides": self.env_handler.active_overrides(),
        }
        if self._loaded:
            summary["config_keys"] = self._get_all_keys(self._config)
        return summary

    def _get_all_keys(self, config: Dict[str, Any], prefix: str = "") -> List[str]:
        """Get all configuration keys using dot notation."""
        keys = []
        for key, value in config.items():
            full_key = f"{prefix}.{key}" if prefix else key
            keys.append(full_key)
            if isinstance(value, dict):
                keys.extend(self._get_all_keys(value, full_key))
        return keys
