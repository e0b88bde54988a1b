"""
Core modules for the case study importer.

This package contains the import pipeline: frontmatter and section
extraction, Markdown compilation and document tree normalization.
"""

from .document_processor import (
    CaseStudyExtractor,
    extract,
    compile_blocks,
    markdown_to_document,
    parse_inline,
    normalize_document,
    normalize_json,
    EXAMPLE_TEMPLATE,
    build_template,
)

__all__ = [
    "CaseStudyExtractor",
    "extract",
    "compile_blocks",
    "markdown_to_document",
    "parse_inline",
    "normalize_document",
    "normalize_json",
    "EXAMPLE_TEMPLATE",
    "build_template",
]
