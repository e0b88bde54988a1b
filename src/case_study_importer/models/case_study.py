"""
Case study data models.

Typed records for the metadata extracted from an import file and the
result container returned by the extractor.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..exceptions.import_exceptions import (
    CaseStudyValidationError,
    MissingFrontmatterError,
)
from .document_tree import DocumentNode
from .enums import Category, FailureKind, Industry


@dataclass(frozen=True)
class ResultItem:
    """A headline result: what was measured, the outcome, optional context."""
    label: str
    value: str
    context: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        data = {"label": self.label, "value": self.value}
        if self.context is not None:
            data["context"] = self.context
        return data


@dataclass(frozen=True)
class FAQItem:
    """A question/answer pair rendered as FAQ schema on the page."""
    question: str
    answer: str

    def to_dict(self) -> Dict[str, str]:
        return {"question": self.question, "answer": self.answer}


@dataclass
class ParsedCaseStudy:
    """A fully validated case study ready to persist.

    Attributes:
        title: Case study title
        slug: URL slug
        category: Validated category
        short_description: Card/search summary
        industry: Validated industry, if given
        section_content: Compiled document tree per section key
        raw_sections: Raw markdown per section key, before compilation
        frontmatter: Every parsed frontmatter key, including unknown ones
    """
    title: str
    slug: str
    category: Category
    short_description: str
    industry: Optional[Industry] = None
    client_type: Optional[str] = None
    services: Optional[List[str]] = None
    tech_stack: Optional[List[str]] = None
    stat_value: Optional[str] = None
    stat_metric: Optional[str] = None
    results: Optional[List[ResultItem]] = None
    faqs: Optional[List[FAQItem]] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    related_services: Optional[List[str]] = None
    related_case_studies: Optional[List[str]] = None
    section_content: Dict[str, DocumentNode] = field(default_factory=dict)
    raw_sections: Dict[str, str] = field(default_factory=dict)
    frontmatter: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self, include_raw_sections: bool = False) -> Dict[str, Any]:
        """Serialize to the persistence payload.

        Optional fields that were not supplied are omitted, and
        ``section_content`` is omitted when no section was recognized.
        """
        data: Dict[str, Any] = {
            "title": self.title,
            "slug": self.slug,
            "category": self.category.value,
            "short_description": self.short_description,
        }
        if self.industry is not None:
            data["industry"] = self.industry.value

        for name in (
            "client_type", "services", "tech_stack", "stat_value", "stat_metric",
            "meta_title", "meta_description", "related_services", "related_case_studies",
        ):
            value = getattr(self, name)
            if value is not None:
                data[name] = list(value) if isinstance(value, list) else value

        if self.results is not None:
            data["results"] = [item.to_dict() for item in self.results]
        if self.faqs is not None:
            data["faqs"] = [item.to_dict() for item in self.faqs]

        if self.section_content:
            data["section_content"] = {
                key: tree.to_dict() for key, tree in self.section_content.items()
            }
        if include_raw_sections and self.raw_sections:
            data["raw_sections"] = dict(self.raw_sections)
        return data


@dataclass
class ExtractionResult:
    """Outcome of extracting a case study from an import file.

    Either ``data`` is set and ``errors`` is empty, or ``data`` is None and
    ``errors`` lists every problem found; a partial case study is never
    returned.
    """
    data: Optional[ParsedCaseStudy] = None
    errors: List[str] = field(default_factory=list)
    failure_kind: Optional[FailureKind] = None

    def __post_init__(self):
        if self.data is not None and self.errors:
            raise ValueError("A successful extraction cannot carry errors")
        if self.data is None and not self.errors:
            raise ValueError("A failed extraction must carry at least one error")

    @property
    def success(self) -> bool:
        return self.data is not None

    @classmethod
    def ok(cls, data: ParsedCaseStudy) -> "ExtractionResult":
        return cls(data=data)

    @classmethod
    def failure(cls, kind: FailureKind, errors: List[str]) -> "ExtractionResult":
        return cls(errors=list(errors), failure_kind=kind)

    def raise_for_failure(self) -> ParsedCaseStudy:
        """Return the case study, or raise the exception matching the failure."""
        if self.data is not None:
            return self.data
        if self.failure_kind is FailureKind.MISSING_FRONTMATTER:
            raise MissingFrontmatterError(self.errors[0])
        raise CaseStudyValidationError(self.errors)
