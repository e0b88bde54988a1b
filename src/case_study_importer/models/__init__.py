"""
Models package for the case study importer.

Contains the document tree node types, the case study records and the
closed enumerations they are validated against.
"""

from .enums import Category, Industry, NodeType, MarkType, FailureKind
from .document_tree import DocumentNode, Mark, empty_document
from .case_study import ResultItem, FAQItem, ParsedCaseStudy, ExtractionResult

__all__ = [
    "Category",
    "Industry",
    "NodeType",
    "MarkType",
    "FailureKind",
    "DocumentNode",
    "Mark",
    "empty_document",
    "ResultItem",
    "FAQItem",
    "ParsedCaseStudy",
    "ExtractionResult",
]
