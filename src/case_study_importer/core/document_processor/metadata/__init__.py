"""
Metadata Extraction Module

Frontmatter parsing and validation for case study import files.

Components:
- frontmatter: ``---`` block detection and line-based parsing
- schema: record array layouts, required fields and enumeration checks
"""

from .frontmatter import (
    FrontmatterParser,
    FrontmatterResult,
    unquote_scalar,
    strip_edge_quotes,
)

from .schema import (
    RecordSchema,
    ARRAY_FIELD_SCHEMAS,
    RESULTS_SCHEMA,
    FAQS_SCHEMA,
    REQUIRED_FIELDS,
    validate_frontmatter,
)

__all__ = [
    # Frontmatter
    'FrontmatterParser',
    'FrontmatterResult',
    'unquote_scalar',
    'strip_edge_quotes',

    # Schema
    'RecordSchema',
    'ARRAY_FIELD_SCHEMAS',
    'RESULTS_SCHEMA',
    'FAQS_SCHEMA',
    'REQUIRED_FIELDS',
    'validate_frontmatter',
]
