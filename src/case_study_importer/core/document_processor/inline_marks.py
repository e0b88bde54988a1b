"""
Inline Mark Tokenizer

Converts a line of Markdown-flavored text into a flat list of text nodes
carrying inline marks (bold, italic, strikethrough, code, link).

The tokenizer scans once, left to right. At each position the inline
patterns are tried in priority order and the first one anchored at that
position is consumed whole; characters no pattern claims accumulate into
plain text runs. Matched spans therefore never overlap, and concatenating
the node texts gives back the input minus the delimiter characters.

Usage:
    >>> [n.text for n in parse_inline("**Bold** and *italic*")]
    ['Bold', ' and ', 'italic']
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ...models.document_tree import DocumentNode, Mark
from ...models.enums import MarkType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InlinePattern:
    """An inline mark pattern and the marks it applies.

    Attributes:
        name: Descriptive identifier (``bold_italic``, ``bold``...)
        regex: Compiled pattern; group 1 is the marked text
        marks: Mark types applied to the matched text
    """
    name: str
    regex: re.Pattern[str]
    marks: Tuple[MarkType, ...]

    def match_at(self, text: str, pos: int) -> Optional[re.Match[str]]:
        return self.regex.match(text, pos)

    def build_marks(self, match: re.Match[str]) -> Tuple[Mark, ...]:
        if self.marks == (MarkType.LINK,):
            return (Mark.link(match.group(2)),)
        return tuple(Mark.of(mark_type) for mark_type in self.marks)


# Priority order: longer delimiters first so *** is not read as ** + *.
INLINE_PATTERNS: Tuple[InlinePattern, ...] = (
    InlinePattern("bold_italic", re.compile(r"\*\*\*(.+?)\*\*\*"), (MarkType.BOLD, MarkType.ITALIC)),
    InlinePattern("bold", re.compile(r"\*\*(.+?)\*\*"), (MarkType.BOLD,)),
    InlinePattern("italic", re.compile(r"\*(.+?)\*"), (MarkType.ITALIC,)),
    InlinePattern("strike", re.compile(r"~~(.+?)~~"), (MarkType.STRIKE,)),
    InlinePattern("code", re.compile(r"`(.+?)`"), (MarkType.CODE,)),
    InlinePattern("link", re.compile(r"\[(.+?)\]\((.+?)\)"), (MarkType.LINK,)),
)

# Characters that can open an inline pattern.
_OPENER = re.compile(r"[*~`\[]")

# Cheap test for "this text might contain inline markdown".
INLINE_MARKDOWN_DETECTOR = re.compile(r"\*\*.*?\*\*|\*.*?\*|~~.*?~~|`.*?`|\[.*?\]\(.*?\)")


def has_inline_markdown(text: str) -> bool:
    """Return True if text contains anything that looks like inline mark syntax."""
    if not text:
        return False
    return INLINE_MARKDOWN_DETECTOR.search(text) is not None


def _match_at(text: str, pos: int) -> Optional[Tuple[InlinePattern, re.Match[str]]]:
    for pattern in INLINE_PATTERNS:
        match = pattern.match_at(text, pos)
        if match is not None:
            return pattern, match
    return None


def parse_inline(text: str) -> List[DocumentNode]:
    """
    Tokenize text into marked and unmarked text nodes.

    Args:
        text: A single block's worth of text

    Returns:
        Text nodes in source order. An empty string yields an empty list;
        text without mark syntax yields one unmarked node.
    """
    if not text:
        return []

    nodes: List[DocumentNode] = []
    plain_start = 0
    pos = 0

    while pos < len(text):
        opener = _OPENER.search(text, pos)
        if opener is None:
            break

        pos = opener.start()
        token = _match_at(text, pos)
        if token is None:
            pos += 1
            continue

        pattern, match = token
        if pos > plain_start:
            nodes.append(DocumentNode.text_node(text[plain_start:pos]))
        nodes.append(DocumentNode.text_node(match.group(1), pattern.build_marks(match)))
        logger.debug(f"Inline pattern '{pattern.name}' matched at {pos}-{match.end()}")

        pos = match.end()
        plain_start = pos

    if plain_start < len(text):
        nodes.append(DocumentNode.text_node(text[plain_start:]))

    return nodes
