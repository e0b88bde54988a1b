"""
Markdown-to-Tree Compiler - Block Segmentation

This module converts a block of Markdown-flavored plain text into document
tree block nodes. Input is processed line by line, top to bottom; each
stripped line is classified, and runs of same-kind lines are grouped into a
single block (consecutive quote lines into one blockquote, consecutive list
lines into one list, consecutive plain lines into one paragraph).

Classification order (first match wins):

    heading -> blockquote -> code fence -> horizontal rule
            -> bullet list -> ordered list -> paragraph

Nothing in here raises on odd input: whatever cannot be read as structure
degrades to paragraph text.

Usage:
    >>> doc = markdown_to_document("# Title\\n\\nSome **bold** text.")
    >>> [node.type for node in doc.content]
    ['heading', 'paragraph']
"""

import logging
import re
from enum import Enum
from typing import List, Optional

from ...models.document_tree import DocumentNode, empty_document
from ...models.enums import NodeType
from .inline_marks import parse_inline

logger = logging.getLogger(__name__)


class LineKind(Enum):
    """Classification of a single stripped input line."""
    BLANK = "blank"
    HEADING = "heading"
    BLOCKQUOTE = "blockquote"
    CODE_FENCE = "code_fence"
    HORIZONTAL_RULE = "horizontal_rule"
    BULLET_ITEM = "bullet_item"
    ORDERED_ITEM = "ordered_item"
    PARAGRAPH = "paragraph"


HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+)$")
QUOTE_PREFIX = "> "
CODE_FENCE_PATTERN = re.compile(r"^```([^`]*)$")
CLOSING_FENCE_PATTERN = re.compile(r"^`{3,}$")
HORIZONTAL_RULE_PATTERN = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
BULLET_PATTERN = re.compile(r"^[-*]\s+")
ORDERED_PATTERN = re.compile(r"^\d+\.\s+")

# Line kinds that turn a pasted paragraph into real block structure.
BLOCK_MARKDOWN_KINDS = frozenset({
    LineKind.HEADING,
    LineKind.BLOCKQUOTE,
    LineKind.BULLET_ITEM,
    LineKind.ORDERED_ITEM,
})


def classify_line(line: str) -> LineKind:
    """Classify an already stripped line."""
    if not line:
        return LineKind.BLANK
    if HEADING_PATTERN.match(line):
        return LineKind.HEADING
    if line.startswith(QUOTE_PREFIX):
        return LineKind.BLOCKQUOTE
    if CODE_FENCE_PATTERN.match(line):
        return LineKind.CODE_FENCE
    if HORIZONTAL_RULE_PATTERN.match(line):
        return LineKind.HORIZONTAL_RULE
    if BULLET_PATTERN.match(line):
        return LineKind.BULLET_ITEM
    if ORDERED_PATTERN.match(line):
        return LineKind.ORDERED_ITEM
    return LineKind.PARAGRAPH


def contains_block_markdown(text: str) -> bool:
    """Return True if any line of text is a heading, list item or quote."""
    return any(
        classify_line(line.strip()) in BLOCK_MARKDOWN_KINDS
        for line in text.split("\n")
    )


def _paragraph(text: str) -> DocumentNode:
    return DocumentNode.block(NodeType.PARAGRAPH, parse_inline(text))


def _list_item(text: str) -> DocumentNode:
    return DocumentNode.block(NodeType.LIST_ITEM, [_paragraph(text)])


class _BlockCompiler:
    """Single-use cursor over the lines of one compile call."""

    def __init__(self, text: str) -> None:
        self.lines = text.split("\n")
        self.index = 0

    def _current(self) -> str:
        return self.lines[self.index].strip()

    def _has_closing_fence(self) -> bool:
        return any(
            CLOSING_FENCE_PATTERN.match(line.strip())
            for line in self.lines[self.index + 1:]
        )

    def _current_kind(self) -> LineKind:
        kind = classify_line(self._current())
        # A fence that is never closed is plain text.
        if kind is LineKind.CODE_FENCE and not self._has_closing_fence():
            return LineKind.PARAGRAPH
        return kind

    def _take_run(self, kind: LineKind) -> List[str]:
        """Consume consecutive lines of the given kind, returning them stripped."""
        run = []
        while self.index < len(self.lines) and self._current_kind() is kind:
            run.append(self._current())
            self.index += 1
        return run

    def compile(self) -> List[DocumentNode]:
        blocks: List[DocumentNode] = []

        while self.index < len(self.lines):
            line = self._current()
            kind = self._current_kind()

            if kind is LineKind.BLANK:
                self.index += 1
            elif kind is LineKind.HEADING:
                match = HEADING_PATTERN.match(line)
                blocks.append(DocumentNode.block(
                    NodeType.HEADING,
                    parse_inline(match.group(2)),
                    level=len(match.group(1)),
                ))
                self.index += 1
            elif kind is LineKind.BLOCKQUOTE:
                quoted = [entry[len(QUOTE_PREFIX):] for entry in self._take_run(kind)]
                blocks.append(DocumentNode.block(
                    NodeType.BLOCKQUOTE, [_paragraph(" ".join(quoted))]
                ))
            elif kind is LineKind.CODE_FENCE:
                blocks.append(self._code_block())
            elif kind is LineKind.HORIZONTAL_RULE:
                blocks.append(DocumentNode.leaf(NodeType.HORIZONTAL_RULE))
                self.index += 1
            elif kind is LineKind.BULLET_ITEM:
                items = [BULLET_PATTERN.sub("", entry, count=1) for entry in self._take_run(kind)]
                blocks.append(DocumentNode.block(
                    NodeType.BULLET_LIST, [_list_item(item) for item in items]
                ))
            elif kind is LineKind.ORDERED_ITEM:
                # Numbers are discarded; lists are never renumbered or checked.
                items = [ORDERED_PATTERN.sub("", entry, count=1) for entry in self._take_run(kind)]
                blocks.append(DocumentNode.block(
                    NodeType.ORDERED_LIST, [_list_item(item) for item in items]
                ))
            else:
                blocks.append(_paragraph(" ".join(self._take_run(LineKind.PARAGRAPH))))

        return blocks

    def _code_block(self) -> DocumentNode:
        language = CODE_FENCE_PATTERN.match(self._current()).group(1).strip()
        self.index += 1

        code_lines = []
        while not CLOSING_FENCE_PATTERN.match(self._current()):
            code_lines.append(self.lines[self.index])
            self.index += 1
        self.index += 1

        code = "\n".join(code_lines)
        content = [DocumentNode.text_node(code)] if code else []
        attrs = {"language": language} if language else {}
        return DocumentNode.block(NodeType.CODE_BLOCK, content, **attrs)


def compile_blocks(text: Optional[str]) -> List[DocumentNode]:
    """
    Segment Markdown text into block nodes.

    Args:
        text: Markdown-flavored text

    Returns:
        Block nodes in source order; input without any block yields a
        single empty paragraph
    """
    blocks = _BlockCompiler((text or "").replace("\r\n", "\n")).compile()
    if not blocks:
        return list(empty_document().content)
    logger.debug(f"Compiled {len(blocks)} block(s) from {len(text)} characters")
    return blocks


def markdown_to_document(markdown: Optional[str]) -> DocumentNode:
    """
    Convert Markdown text into a ``doc`` tree.

    The result always holds at least one block: empty input yields a doc
    with a single empty paragraph.
    """
    return DocumentNode.doc(compile_blocks((markdown or "").strip()))
