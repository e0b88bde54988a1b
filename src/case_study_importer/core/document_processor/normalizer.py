"""
Document Tree Normalizer

Repairs editor content whose text leaves still hold raw Markdown, e.g. an
author pasting ``**bold**`` or a ``# Heading`` line into a rich-text field.

For each paragraph:

- if its flattened text has a heading, list or quote line, the paragraph is
  replaced by the blocks compiled from that text (one paragraph may become
  several siblings);
- otherwise each text leaf *without* marks that contains inline mark syntax
  is replaced by the tokenized nodes. Leaves that already carry marks were
  formatted through the editor and are left alone.

Other nodes are rebuilt around their normalized children. Unchanged
subtrees are shared with the input, which is never mutated.
"""

import logging
from typing import Any, Dict, List, Mapping

from ...models.document_tree import DocumentNode
from ...models.enums import NodeType
from .inline_marks import has_inline_markdown, parse_inline
from .markdown_compiler import compile_blocks, contains_block_markdown

logger = logging.getLogger(__name__)


def flatten_text(nodes: tuple) -> str:
    """Plain text of a run of inline nodes; hard breaks read as newlines."""
    parts = []
    for node in nodes:
        if node.is_text:
            parts.append(node.text or "")
        elif node.type == NodeType.HARD_BREAK.value:
            parts.append("\n")
        elif node.content:
            parts.append(flatten_text(node.content))
    return "".join(parts)


def _repair_inline(nodes: tuple) -> List[DocumentNode]:
    repaired: List[DocumentNode] = []
    for node in nodes:
        if node.is_text and node.text and not node.has_marks and has_inline_markdown(node.text):
            repaired.extend(parse_inline(node.text))
        else:
            repaired.append(node)
    return repaired


def _normalize_children(node: DocumentNode) -> DocumentNode:
    children: List[DocumentNode] = []
    changed = False
    for child in node.content:
        replacement = _normalize_pass(child)
        if len(replacement) != 1 or replacement[0] is not child:
            changed = True
        children.extend(replacement)
    return node.with_content(children) if changed else node


def _normalize_pass(node: DocumentNode) -> List[DocumentNode]:
    """One normalization pass over a node; returns its replacement node(s)."""
    if node.type == NodeType.PARAGRAPH.value and node.content:
        flattened = flatten_text(node.content)
        if contains_block_markdown(flattened):
            logger.debug("Promoting paragraph with block markdown to structured blocks")
            return compile_blocks(flattened)

        repaired = _repair_inline(node.content)
        if repaired == list(node.content):
            return [node]
        return [node.with_content(repaired)]

    if node.content:
        return [_normalize_children(node)]

    return [node]


def normalize_node(node: DocumentNode) -> List[DocumentNode]:
    """
    Normalize a single node until it reaches a fixed point.

    Args:
        node: Any document node

    Returns:
        The node(s) replacing it. A paragraph may expand into several blocks.
    """
    current = [node]
    while True:
        following: List[DocumentNode] = []
        for item in current:
            following.extend(_normalize_pass(item))
        # Every changing pass strips delimiters or block prefixes from
        # paragraph text, so this converges.
        if following == current:
            return current
        current = following


def normalize_document(tree: DocumentNode) -> DocumentNode:
    """
    Normalize a ``doc`` tree so that no text leaf holds convertible Markdown.

    Non-``doc`` roots are returned unchanged. Re-running on the result is a
    no-op: ``normalize_document(normalize_document(t)) == normalize_document(t)``.

    Args:
        tree: Document root

    Returns:
        A new tree (or the input itself when nothing needed repair)
    """
    if tree.type != NodeType.DOC.value or not tree.content:
        return tree

    (normalized,) = normalize_node(tree)
    if normalized is not tree:
        logger.debug("Normalized document tree with raw markdown content")
    return normalized


def normalize_json(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Normalize editor JSON and return editor JSON."""
    return normalize_document(DocumentNode.from_dict(data)).to_dict()
