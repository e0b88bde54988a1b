"""
Schema validation for configuration management.

This module validates configuration dictionaries against the built-in
JSON schema and reports every violation at once.
"""

import logging
from typing import Any, Dict, List, Optional

import jsonschema

from ...exceptions.config_exceptions import ConfigurationValidationError
from .defaults import CONFIG_SCHEMA


logger = logging.getLogger(__name__)


class SchemaValidator:
    """
    Schema validation for configuration management.

    Handles JSON schema validation and user-friendly error reporting.
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize schema validator.

        Args:
            schema: JSON schema to validate against (default: built-in schema)
        """
        self.schema = schema or CONFIG_SCHEMA
        self.logger = logger

    def collect_errors(self, config: Dict[str, Any]) -> List[str]:
        """Return one message per schema violation, prefixed with its field path."""
        validator = jsonschema.Draft7Validator(self.schema)
        messages = []
        for error in sorted(validator.iter_errors(config), key=lambda e: list(e.absolute_path)):
            field_path = ".".join(str(p) for p in error.absolute_path)
            messages.append(f"{field_path}: {error.message}" if field_path else error.message)
        return messages

    def validate_config(
        self,
        config: Dict[str, Any],
        config_file: Optional[str] = None
    ) -> bool:
        """
        Validate configuration against schema.

        Args:
            config: Configuration to validate
            config_file: Configuration file name for error reporting

        Returns:
            True if validation passes

        Raises:
            ConfigurationValidationError: If validation fails
        """
        errors = self.collect_errors(config)
        if errors:
            self.logger.debug(f"Configuration failed schema validation: {errors}")
            raise ConfigurationValidationError(errors, config_file)
        return True
