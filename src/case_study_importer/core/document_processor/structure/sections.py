"""
Section Splitting Module

Splits the body of an import file into the fixed set of long-form case
study sections. A section starts at a ``## Heading`` line whose text is in
``SECTION_HEADINGS`` and runs until the next ``##`` heading or the end of
the body.

``SECTION_HEADINGS`` is the single contract between the author template,
the extractor and the documentation; the template is generated from it.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

SECTION_HEADING_PATTERN = re.compile(r"^## (.+)$", re.MULTILINE)


@dataclass(frozen=True)
class SectionHeading:
    """A recognized section heading and the key it is stored under."""
    heading: str
    key: str


SECTION_HEADINGS: Tuple[SectionHeading, ...] = (
    SectionHeading("Client & Context", "context"),
    SectionHeading("Problem", "problem"),
    SectionHeading("Goals / Success Criteria", "goals"),
    SectionHeading("Solution", "solution"),
    SectionHeading("Implementation", "implementation"),
    SectionHeading("Results Narrative", "results_narrative"),
    SectionHeading("Next Steps / CTA", "next_steps"),
)

HEADING_TO_KEY: Dict[str, str] = {entry.heading: entry.key for entry in SECTION_HEADINGS}
SECTION_KEYS: Tuple[str, ...] = tuple(entry.key for entry in SECTION_HEADINGS)


@dataclass(frozen=True)
class RawSection:
    """A ``##`` section found in the body.

    Attributes:
        heading: Heading text, trimmed
        key: Section key, or None when the heading is not recognized
        content: Text between this heading and the next, trimmed
        line_number: 1-indexed line of the heading within the body
    """
    heading: str
    key: Optional[str]
    content: str
    line_number: int

    @property
    def recognized(self) -> bool:
        return self.key is not None


class SectionSplitter:
    """Splits a markdown body on ``##`` headings."""

    def __init__(self, heading_to_key: Optional[Dict[str, str]] = None) -> None:
        self.heading_to_key = dict(heading_to_key or HEADING_TO_KEY)

    def split(self, body: str) -> List[RawSection]:
        """Return every ``##`` section in order, recognized or not."""
        matches = list(SECTION_HEADING_PATTERN.finditer(body))
        sections: List[RawSection] = []

        for position, match in enumerate(matches):
            end = matches[position + 1].start() if position + 1 < len(matches) else len(body)
            heading = match.group(1).strip()
            sections.append(RawSection(
                heading=heading,
                key=self.heading_to_key.get(heading),
                content=body[match.end():end].strip(),
                line_number=body.count("\n", 0, match.start()) + 1,
            ))

        return sections

    def extract(self, body: str) -> Dict[str, str]:
        """
        Map recognized section keys to their raw text.

        Unrecognized headings are dropped without error; keys with no
        heading in the body are absent from the result.
        """
        sections: Dict[str, str] = {}
        for section in self.split(body):
            if section.recognized:
                sections[section.key] = section.content
            else:
                logger.debug(
                    f"Dropping unrecognized section '{section.heading}' at line {section.line_number}"
                )
        return sections


def extract_sections(body: str) -> Dict[str, str]:
    """Map recognized section keys to raw text using the standard headings."""
    return SectionSplitter().extract(body)
