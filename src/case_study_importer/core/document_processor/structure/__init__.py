"""Section structure of case study import files."""

from .sections import (
    SectionHeading,
    RawSection,
    SectionSplitter,
    SECTION_HEADINGS,
    HEADING_TO_KEY,
    SECTION_KEYS,
    extract_sections,
)

__all__ = [
    "SectionHeading",
    "RawSection",
    "SectionSplitter",
    "SECTION_HEADINGS",
    "HEADING_TO_KEY",
    "SECTION_KEYS",
    "extract_sections",
]
