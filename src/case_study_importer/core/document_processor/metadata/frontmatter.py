"""
Frontmatter Parsing Module

Handles extraction of the ``---`` delimited metadata block at the top of a
case study import file and parses its restricted YAML-like syntax:

    title: "Scalar value"          # quotes stripped, nothing else unescaped
    services:                      # flat string list
      - "AI Automation"
    results:                       # record list, see ARRAY_FIELD_SCHEMAS
      - label: "Speed"
        value: "2x"

This is deliberately not a general YAML parser: indentation is fixed (two
spaces before ``-``, four before record sub-fields) and nothing nests
deeper than the record lists.
"""

import logging
import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .schema import ARRAY_FIELD_SCHEMAS, RecordSchema

logger = logging.getLogger(__name__)

FRONTMATTER_MARKER = "---"

KEY_PATTERN = re.compile(r"^([a-z_]+):\s*(.*)$", re.IGNORECASE)
TOP_LEVEL_KEY_PATTERN = re.compile(r"^[a-z_]+:", re.IGNORECASE)
ARRAY_START_PATTERN = re.compile(r"^\s{2}-")
STRING_ITEM_PATTERN = re.compile(r"^\s{2}-\s")
NESTED_LINE_PATTERN = re.compile(r"^\s{4}")
EDGE_QUOTES_PATTERN = re.compile(r"^[\"']|[\"']$")


def unquote_scalar(value: str) -> str:
    """Strip one pair of matching single or double quotes."""
    trimmed = value.strip()
    if len(trimmed) >= 2 and trimmed[0] == trimmed[-1] and trimmed[0] in ("'", '"'):
        return trimmed[1:-1]
    return trimmed


def strip_edge_quotes(value: str) -> str:
    """Strip a leading and a trailing quote character, matched or not."""
    return EDGE_QUOTES_PATTERN.sub("", value.strip()).strip()


def _is_comment_or_blank(line: str) -> bool:
    return line.startswith("#") or not line.strip()


@dataclass
class FrontmatterResult:
    """Result container for frontmatter parsing operations.

    Attributes:
        has_frontmatter: True if a delimited block was found at the top
        metadata: Parsed key/value mapping
        content_without_frontmatter: Body text after the closing marker
        parse_time_ms: Time taken to parse frontmatter in milliseconds
        warnings: Soft problems, such as dropped incomplete array items
    """
    has_frontmatter: bool
    metadata: Dict[str, Any] = field(default_factory=dict)
    content_without_frontmatter: str = ""
    parse_time_ms: Optional[float] = None
    warnings: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate result data after creation."""
        if not isinstance(self.metadata, dict):
            raise ValueError(f"metadata must be a dictionary, got {type(self.metadata)}")
        if not isinstance(self.content_without_frontmatter, str):
            raise ValueError(
                f"content_without_frontmatter must be a string, got {type(self.content_without_frontmatter)}"
            )


class FrontmatterParser:
    """Parser for case study frontmatter blocks."""

    def split(self, content: str) -> Optional[Tuple[List[str], str]]:
        """Split content into frontmatter lines and body.

        The first line must be the ``---`` marker and the closing marker
        must come at least one line later; two adjacent markers are not a block.

        Returns:
            (frontmatter lines, body) or None when no block is present
        """
        lines = content.split("\n")
        if not lines or lines[0].rstrip() != FRONTMATTER_MARKER:
            return None

        for index in range(2, len(lines)):
            if lines[index].rstrip() == FRONTMATTER_MARKER:
                return lines[1:index], "\n".join(lines[index + 1:])

        return None

    def parse(self, content: str) -> FrontmatterResult:
        """Parse frontmatter from content.

        Args:
            content: Full import file text

        Returns:
            FrontmatterResult; ``has_frontmatter`` is False when the file
            does not open with a delimited block
        """
        if not isinstance(content, str):
            raise ValueError("Content must be a string")

        start_time = time.time()
        normalized = content.replace("\r\n", "\n")
        split = self.split(normalized)

        if split is None:
            return FrontmatterResult(
                has_frontmatter=False,
                content_without_frontmatter=normalized,
                parse_time_ms=(time.time() - start_time) * 1000,
            )

        block_lines, body = split
        warnings: List[str] = []
        metadata = self.parse_lines(block_lines, warnings)

        return FrontmatterResult(
            has_frontmatter=True,
            metadata=metadata,
            content_without_frontmatter=body,
            parse_time_ms=(time.time() - start_time) * 1000,
            warnings=warnings,
        )

    def parse_lines(self, lines: List[str], warnings: Optional[List[str]] = None) -> Dict[str, Any]:
        """Parse the lines between the markers into a metadata mapping."""
        if warnings is None:
            warnings = []

        metadata: Dict[str, Any] = {}
        index = 0

        while index < len(lines):
            line = lines[index]

            if _is_comment_or_blank(line):
                index += 1
                continue

            key_match = KEY_PATTERN.match(line)
            if not key_match:
                index += 1
                continue

            key = key_match.group(1)
            inline_value = key_match.group(2).strip()
            starts_array = (
                index + 1 < len(lines) and ARRAY_START_PATTERN.match(lines[index + 1])
            )

            if not inline_value and starts_array:
                schema = ARRAY_FIELD_SCHEMAS.get(key)
                if schema is not None:
                    metadata[key], index = self._parse_record_array(lines, index + 1, schema, warnings)
                else:
                    metadata[key], index = self._parse_string_array(lines, index + 1)
            elif inline_value:
                metadata[key] = unquote_scalar(inline_value)
                index += 1
            else:
                index += 1

        logger.debug(f"Parsed {len(metadata)} frontmatter key(s)")
        return metadata

    def _parse_string_array(self, lines: List[str], start: int) -> Tuple[List[str], int]:
        """Read ``  - value`` lines; returns the items and the index to resume at."""
        items: List[str] = []
        index = start

        while index < len(lines):
            line = lines[index]
            if STRING_ITEM_PATTERN.match(line):
                items.append(strip_edge_quotes(STRING_ITEM_PATTERN.sub("", line, count=1)))
            elif NESTED_LINE_PATTERN.match(line):
                pass
            elif not line.strip() or TOP_LEVEL_KEY_PATTERN.match(line) or line.startswith("#"):
                break
            index += 1

        return items, index

    def _parse_record_array(
        self,
        lines: List[str],
        start: int,
        schema: RecordSchema,
        warnings: List[str]
    ) -> Tuple[List[Dict[str, str]], int]:
        """Read record items laid out per ``schema``.

        The array ends at the first non-indented line that is neither blank
        nor a comment. Items missing a required sub-field are dropped.
        """
        opening = re.compile(rf"^\s{{2}}-\s*{schema.opening_field}:\s*(.*)$")
        continuations = [
            (name, re.compile(rf"^\s{{4}}{name}:\s*(.*)$"))
            for name in schema.fields if name != schema.opening_field
        ]

        items: List[Dict[str, str]] = []
        current: Optional[Dict[str, str]] = None
        index = start

        def flush() -> None:
            if current is None:
                return
            if schema.is_complete(current):
                items.append(current)
            else:
                message = f"Dropped incomplete '{schema.key}' item: {current}"
                logger.debug(message)
                warnings.append(message)

        while index < len(lines):
            line = lines[index]

            opening_match = opening.match(line)
            if opening_match:
                flush()
                current = {schema.opening_field: strip_edge_quotes(opening_match.group(1))}
                index += 1
                continue

            if line and not line[0].isspace() and not line.startswith("#"):
                break

            for name, pattern in continuations:
                field_match = pattern.match(line)
                if field_match and current is not None:
                    value = strip_edge_quotes(field_match.group(1))
                    if value or name in schema.required:
                        current[name] = value
                    break

            index += 1

        flush()
        return items, index
