"""
Import-related exceptions for the case study importer.

The extractor reports failures as data (``ExtractionResult``); these
exceptions are raised when a caller asks for a failure to be raised, and at
the JSON boundary when a document tree is structurally invalid.
"""

from typing import List, Optional


class CaseStudyImportError(Exception):
    """Base exception for case study import errors."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        """
        Initialize import error.

        Args:
            message: Error description
            errors: Individual problems found in the import file
            suggestions: List of suggested fixes
        """
        super().__init__(message)
        self.errors = errors or []
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        """Return formatted error message with details and suggestions."""
        msg = super().__str__()

        if self.errors:
            msg += "\n\nProblems:"
            for i, error in enumerate(self.errors, 1):
                msg += f"\n  {i}. {error}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for i, suggestion in enumerate(self.suggestions, 1):
                msg += f"\n  {i}. {suggestion}"

        return msg


class MissingFrontmatterError(CaseStudyImportError):
    """Raised when the file does not start with a ``---`` delimited block."""

    def __init__(self, message: str) -> None:
        suggestions = [
            "Make sure the very first line of the file is exactly ---",
            "Close the metadata block with a second line containing only ---",
            "Start from the downloadable import template",
        ]
        super().__init__(message, suggestions=suggestions)


class CaseStudyValidationError(CaseStudyImportError):
    """Raised when required fields are missing or enumerations are invalid."""

    def __init__(self, errors: List[str]) -> None:
        super().__init__(
            f"Case study failed validation with {len(errors)} error(s)",
            errors=errors,
        )


class DocumentTreeError(CaseStudyImportError):
    """Raised when editor JSON cannot be read as a document tree."""
    pass
