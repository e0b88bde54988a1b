"""
Case Study Extractor

Turns the raw text of an import file into a validated ``ParsedCaseStudy``:

1. the ``---`` frontmatter block is parsed (missing block: fatal),
2. every required-field and enumeration problem is collected (any problem:
   fatal, reported all at once),
3. the body is split into recognized ``##`` sections,
4. each section's Markdown is compiled into a document tree.

Failures are returned as data in an ``ExtractionResult``; callers that
prefer exceptions use ``ExtractionResult.raise_for_failure``.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ...models.case_study import ExtractionResult, FAQItem, ParsedCaseStudy, ResultItem
from ...models.enums import Category, FailureKind, Industry
from .markdown_compiler import markdown_to_document
from .metadata.frontmatter import FrontmatterParser
from .metadata.schema import (
    FAQS_SCHEMA,
    OPTIONAL_TEXT_FIELDS,
    RESULTS_SCHEMA,
    STRING_LIST_FIELDS,
    string_list_field,
    text_field,
    validate_frontmatter,
)
from .structure.sections import SectionSplitter

logger = logging.getLogger(__name__)

MISSING_FRONTMATTER_MESSAGE = (
    "Invalid markdown file: missing or malformed frontmatter (content between --- markers)"
)


def _records(frontmatter: Mapping[str, Any], key: str) -> Optional[List[Mapping[str, str]]]:
    value = frontmatter.get(key)
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, Mapping)]


def _result_items(frontmatter: Mapping[str, Any]) -> Optional[List[ResultItem]]:
    records = _records(frontmatter, RESULTS_SCHEMA.key)
    if records is None:
        return None
    return [
        ResultItem(label=item["label"], value=item["value"], context=item.get("context") or None)
        for item in records
    ]


def _faq_items(frontmatter: Mapping[str, Any]) -> Optional[List[FAQItem]]:
    records = _records(frontmatter, FAQS_SCHEMA.key)
    if records is None:
        return None
    return [FAQItem(question=item["question"], answer=item["answer"]) for item in records]


class CaseStudyExtractor:
    """Extracts case studies from Markdown import files.

    Example:
        >>> result = CaseStudyExtractor().extract(text)
        >>> if result.success:
        ...     payload = result.data.to_dict()
    """

    def __init__(
        self,
        frontmatter_parser: Optional[FrontmatterParser] = None,
        section_splitter: Optional[SectionSplitter] = None
    ) -> None:
        self.frontmatter_parser = frontmatter_parser or FrontmatterParser()
        self.section_splitter = section_splitter or SectionSplitter()

    def extract(self, raw: str) -> ExtractionResult:
        """
        Extract and validate a case study.

        Args:
            raw: Full text of the import file

        Returns:
            ExtractionResult holding either the case study or every error
        """
        parsed = self.frontmatter_parser.parse(raw)
        if not parsed.has_frontmatter:
            logger.debug("Import file does not open with a frontmatter block")
            return ExtractionResult.failure(
                FailureKind.MISSING_FRONTMATTER, [MISSING_FRONTMATTER_MESSAGE]
            )

        for warning in parsed.warnings:
            logger.debug(warning)

        frontmatter = parsed.metadata
        errors = validate_frontmatter(frontmatter)
        if errors:
            logger.debug(f"Frontmatter validation failed with {len(errors)} error(s)")
            return ExtractionResult.failure(FailureKind.VALIDATION, errors)

        raw_sections = self.section_splitter.extract(parsed.content_without_frontmatter)
        section_content = {
            key: markdown_to_document(text) for key, text in raw_sections.items()
        }

        case_study = self._build_case_study(frontmatter, raw_sections, section_content)
        logger.info(
            f"Extracted case study '{case_study.slug}' with {len(section_content)} section(s)"
        )
        return ExtractionResult.ok(case_study)

    def _build_case_study(
        self,
        frontmatter: Dict[str, Any],
        raw_sections: Dict[str, str],
        section_content: Dict[str, Any]
    ) -> ParsedCaseStudy:
        industry = frontmatter.get("industry")

        optional_fields: Dict[str, Any] = {
            name: text_field(frontmatter, name) for name in OPTIONAL_TEXT_FIELDS
        }
        optional_fields.update({
            name: string_list_field(frontmatter, name) for name in STRING_LIST_FIELDS
        })

        return ParsedCaseStudy(
            title=frontmatter["title"],
            slug=frontmatter["slug"],
            category=Category(frontmatter["category"]),
            short_description=frontmatter["short_description"],
            industry=Industry(industry) if industry else None,
            results=_result_items(frontmatter),
            faqs=_faq_items(frontmatter),
            section_content=section_content,
            raw_sections=raw_sections,
            frontmatter=dict(frontmatter),
            **optional_fields,
        )


def extract(raw: str) -> ExtractionResult:
    """Extract a case study with the default parser and section headings."""
    return CaseStudyExtractor().extract(raw)
