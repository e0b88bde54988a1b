"""
Exceptions package for the case study importer.

This package contains custom exception classes for import failures,
document tree decoding and configuration loading.
"""

from .import_exceptions import (
    CaseStudyImportError,
    MissingFrontmatterError,
    CaseStudyValidationError,
    DocumentTreeError,
)

from .config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationValidationError,
    EnvironmentVariableError,
)

__all__ = [
    # Import exceptions
    "CaseStudyImportError",
    "MissingFrontmatterError",
    "CaseStudyValidationError",
    "DocumentTreeError",
    # Configuration exceptions
    "ConfigurationError",
    "ConfigurationFileNotFoundError",
    "ConfigurationValidationError",
    "EnvironmentVariableError",
]
