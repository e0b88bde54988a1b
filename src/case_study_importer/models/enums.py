"""
Enumeration types for case study metadata and document trees.

This module defines the closed vocabularies shared by the extractor, the
markdown compiler and the import template.
"""

from enum import Enum
from typing import List


class Category(Enum):
    """Case study category (closed set, validated on import)."""
    DIGITAL_BRANDING = "Digital Branding"
    OPERATIONS = "Operations"
    AI_ARCHIVES = "AI Archives"
    SOFTWARE_DEV = "Software Dev"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> List[str]:
        """Return the accepted string values in declaration order."""
        return [member.value for member in cls]


class Industry(Enum):
    """Client industry (closed set, validated on import when present)."""
    AUDIT = "Audit"
    RETAIL = "Retail"
    MANUFACTURING = "Manufacturing"
    HEALTHCARE = "Healthcare"
    FINTECH = "Fintech"
    LEGAL = "Legal"
    EDUCATION = "Education"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> List[str]:
        """Return the accepted string values in declaration order."""
        return [member.value for member in cls]


class NodeType(Enum):
    """Node types produced by the markdown compiler."""
    DOC = "doc"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "codeBlock"
    HORIZONTAL_RULE = "horizontalRule"
    HARD_BREAK = "hardBreak"
    TEXT = "text"

    def __str__(self) -> str:
        return self.value


class MarkType(Enum):
    """Inline mark types produced by the inline tokenizer."""
    BOLD = "bold"
    ITALIC = "italic"
    STRIKE = "strike"
    CODE = "code"
    LINK = "link"

    def __str__(self) -> str:
        return self.value


class FailureKind(Enum):
    """Why an extraction did not produce a case study."""
    MISSING_FRONTMATTER = "missing_frontmatter"
    VALIDATION = "validation"

    def __str__(self) -> str:
        return self.value
