"""
Document Processor Package

Markdown import pipeline for case studies. Turns an author's import file
into validated metadata plus one rich-document tree per section, and
repairs editor trees whose text still holds raw Markdown.

Components:
- extractor: frontmatter + section extraction and validation
- markdown_compiler: block segmentation into document tree nodes
- inline_marks: inline mark tokenizer (bold, italic, strike, code, link)
- normalizer: repair pass for editor content with pasted Markdown
- template: the downloadable author template
- metadata/: frontmatter parsing and schema
- structure/: ``##`` section splitting and the heading table
"""

# Extraction
from .extractor import (
    CaseStudyExtractor,
    MISSING_FRONTMATTER_MESSAGE,
    extract,
)

# Block compilation
from .markdown_compiler import (
    LineKind,
    classify_line,
    compile_blocks,
    contains_block_markdown,
    markdown_to_document,
)

# Inline marks
from .inline_marks import (
    InlinePattern,
    INLINE_PATTERNS,
    has_inline_markdown,
    parse_inline,
)

# Normalization
from .normalizer import (
    flatten_text,
    normalize_document,
    normalize_json,
    normalize_node,
)

# Template
from .template import (
    EXAMPLE_TEMPLATE,
    build_template,
)

# Metadata and structure
from .metadata import (
    FrontmatterParser,
    FrontmatterResult,
    ARRAY_FIELD_SCHEMAS,
    REQUIRED_FIELDS,
    validate_frontmatter,
)

from .structure import (
    SectionHeading,
    SectionSplitter,
    SECTION_HEADINGS,
    HEADING_TO_KEY,
    SECTION_KEYS,
    extract_sections,
)

__all__ = [
    # Extraction
    'CaseStudyExtractor',
    'MISSING_FRONTMATTER_MESSAGE',
    'extract',

    # Block compilation
    'LineKind',
    'classify_line',
    'compile_blocks',
    'contains_block_markdown',
    'markdown_to_document',

    # Inline marks
    'InlinePattern',
    'INLINE_PATTERNS',
    'has_inline_markdown',
    'parse_inline',

    # Normalization
    'flatten_text',
    'normalize_document',
    'normalize_json',
    'normalize_node',

    # Template
    'EXAMPLE_TEMPLATE',
    'build_template',

    # Metadata and structure
    'FrontmatterParser',
    'FrontmatterResult',
    'ARRAY_FIELD_SCHEMAS',
    'REQUIRED_FIELDS',
    'validate_frontmatter',
    'SectionHeading',
    'SectionSplitter',
    'SECTION_HEADINGS',
    'HEADING_TO_KEY',
    'SECTION_KEYS',
    'extract_sections',
]
