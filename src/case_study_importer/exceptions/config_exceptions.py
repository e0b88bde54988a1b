"""
Configuration exceptions for the case study importer.

Raised while reading ``casestudy.config.json``, applying ``CASE_STUDY_*``
environment overrides, or checking the merged result against the
configuration schema. The CLI prints ``str(error)`` for all of them.
"""

from typing import List, Optional


class ConfigurationError(Exception):
    """Base exception for configuration errors."""

    def __init__(self, message: str, config_file: Optional[str] = None) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error description
            config_file: Configuration file path that caused the error
        """
        super().__init__(message)
        self.config_file = config_file

    def __str__(self) -> str:
        msg = super().__str__()
        if self.config_file:
            msg = f"{msg}\nConfig file: {self.config_file}"
        return msg


class ConfigurationFileNotFoundError(ConfigurationError):
    """Raised when a configuration file named with --config-path does not exist."""
    pass


class ConfigurationValidationError(ConfigurationError):
    """Raised when the merged configuration breaks the schema."""

    def __init__(self, validation_errors: List[str], config_file: Optional[str] = None) -> None:
        super().__init__(
            f"Configuration validation failed with {len(validation_errors)} error(s)",
            config_file,
        )
        self.validation_errors = list(validation_errors)

    def __str__(self) -> str:
        lines = [super().__str__()]
        lines.extend(f"  {i}. {error}" for i, error in enumerate(self.validation_errors, 1))
        return "\n".join(lines)


class EnvironmentVariableError(ConfigurationError):
    """Raised when a CASE_STUDY_* value cannot be converted to its target type."""

    def __init__(self, message: str, variable_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.variable_name = variable_name

    def __str__(self) -> str:
        msg = super().__str__()
        if self.variable_name:
            msg = f"{self.variable_name}: {msg}"
        return msg
