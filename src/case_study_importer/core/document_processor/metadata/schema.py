"""
Frontmatter Schema Module

Static description of the case study frontmatter: which keys hold
record-shaped arrays (and with which sub-fields), which keys are plain
string lists, which fields are required, and the closed enumerations.

Array shapes are resolved by key through ``ARRAY_FIELD_SCHEMAS``; any key
not listed there is read as a flat list of strings.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ....models.enums import Category, Industry


@dataclass(frozen=True)
class RecordSchema:
    """Sub-fields of a record-shaped array item.

    The first required field opens an item (``  - label: ...``); the other
    fields continue it on four-space-indented lines (``    value: ...``).

    Attributes:
        key: Frontmatter key holding the array
        required: Sub-fields every item must have, opening field first
        optional: Sub-fields an item may have
    """
    key: str
    required: Tuple[str, ...]
    optional: Tuple[str, ...] = ()

    @property
    def opening_field(self) -> str:
        return self.required[0]

    @property
    def fields(self) -> Tuple[str, ...]:
        return self.required + self.optional

    def is_complete(self, item: Mapping[str, str]) -> bool:
        return all(item.get(name) for name in self.required)


RESULTS_SCHEMA = RecordSchema(key="results", required=("label", "value"), optional=("context",))
FAQS_SCHEMA = RecordSchema(key="faqs", required=("question", "answer"))

ARRAY_FIELD_SCHEMAS: Dict[str, RecordSchema] = {
    schema.key: schema for schema in (RESULTS_SCHEMA, FAQS_SCHEMA)
}


REQUIRED_FIELDS: Tuple[str, ...] = ("title", "slug", "category", "short_description")

OPTIONAL_TEXT_FIELDS: Tuple[str, ...] = (
    "client_type",
    "stat_value",
    "stat_metric",
    "meta_title",
    "meta_description",
)

STRING_LIST_FIELDS: Tuple[str, ...] = (
    "services",
    "tech_stack",
    "related_services",
    "related_case_studies",
)


def _option_list(values: List[str]) -> str:
    return ", ".join(values)


def validate_frontmatter(frontmatter: Mapping[str, Any]) -> List[str]:
    """
    Check required fields and enumerations, collecting every problem.

    Args:
        frontmatter: Parsed frontmatter mapping

    Returns:
        Human-readable error messages; empty when the frontmatter is valid
    """
    errors: List[str] = []

    for name in REQUIRED_FIELDS:
        value = frontmatter.get(name)
        if not value:
            errors.append(f"Missing required field: {name}")
        elif not isinstance(value, str):
            errors.append(f"Invalid value for {name}: expected a single value, not a list")

    category = frontmatter.get("category")
    if category and isinstance(category, str) and category not in Category.values():
        errors.append(
            f'Invalid category: "{category}". Valid options: {_option_list(Category.values())}'
        )

    industry = frontmatter.get("industry")
    if industry and (not isinstance(industry, str) or industry not in Industry.values()):
        errors.append(
            f'Invalid industry: "{industry}". Valid options: {_option_list(Industry.values())}'
        )

    return errors


def text_field(frontmatter: Mapping[str, Any], name: str) -> Optional[str]:
    """Read an optional scalar field; empty and non-string values read as absent."""
    value = frontmatter.get(name)
    return value if isinstance(value, str) and value else None


def string_list_field(frontmatter: Mapping[str, Any], name: str) -> Optional[List[str]]:
    """Read an optional string-list field; a lone scalar becomes a one-item list.

    Empty entries (the template's ``- ""`` placeholders) are left out.
    """
    value = frontmatter.get(name)
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return [value]
    return [item for item in value if isinstance(item, str) and item]
