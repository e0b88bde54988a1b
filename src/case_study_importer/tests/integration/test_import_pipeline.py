"""
Integration tests for the complete import pipeline.

Runs import files through extraction, compilation and normalization
together, the way the CMS import flow uses them.
"""

import json

import pytest

from case_study_importer.core.document_processor import (
    EXAMPLE_TEMPLATE,
    extract,
    markdown_to_document,
    normalize_document,
    normalize_json,
    parse_inline,
)
from case_study_importer.models import DocumentNode, FailureKind, NodeType

pytestmark = pytest.mark.integration


class TestImportScenarios:
    """End-to-end import scenarios."""

    def test_minimal_case_study(self, make_case_study):
        """Test required fields plus two sections import cleanly."""
        result = extract(make_case_study(body="## Problem\nThings were slow.\n## Solution\nWe fixed it."))

        assert result.success
        sections = result.data.section_content
        assert set(sections) == {"problem", "solution"}
        assert [node.type for node in sections["problem"].content] == ["paragraph"]
        assert sections["problem"].plain_text() == "Things were slow."
        assert sections["solution"].plain_text() == "We fixed it."

    def test_results_record_array(self, make_case_study):
        """Test a results array round-trips into the payload."""
        raw = make_case_study(
            extra_frontmatter='results:\n  - label: "Speed"\n    value: "2x"\n    context: "monthly"'
        )

        payload = extract(raw).data.to_dict()

        assert payload["results"] == [{"label": "Speed", "value": "2x", "context": "monthly"}]

    def test_inline_marks_in_section(self, make_case_study):
        """Test inline marks inside a section body."""
        raw = make_case_study(body="## Solution\n**Bold** and *italic* and `code` and [link](https://x.com)")

        (paragraph,) = extract(raw).data.section_content["solution"].content

        assert [(node.text, node.mark_types()) for node in paragraph.content] == [
            ("Bold", ["bold"]),
            (" and ", []),
            ("italic", ["italic"]),
            (" and ", []),
            ("code", ["code"]),
            (" and ", []),
            ("link", ["link"]),
        ]

    def test_normalize_pasted_heading(self):
        """Test a pasted heading in editor JSON becomes structure."""
        data = {
            "type": "doc",
            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "# Heading\nSome text"}]}],
        }

        assert normalize_json(data) == {
            "type": "doc",
            "content": [
                {"type": "heading", "attrs": {"level": 1}, "content": [{"type": "text", "text": "Heading"}]},
                {"type": "paragraph", "content": [{"type": "text", "text": "Some text"}]},
            ],
        }

    def test_missing_frontmatter_stops_pipeline(self):
        """Test a body without frontmatter is rejected before sections are read."""
        result = extract("## Problem\nThings were slow.")

        assert result.failure_kind is FailureKind.MISSING_FRONTMATTER
        assert len(result.errors) == 1


class TestPipelineProperties:
    """Properties that hold across the compiler and normalizer."""

    def test_full_case_study_payload_is_json_serializable(self, full_case_study):
        """Test the complete payload serializes and keeps every section."""
        payload = extract(full_case_study).data.to_dict(include_raw_sections=True)

        decoded = json.loads(json.dumps(payload, ensure_ascii=False))

        assert decoded["results"][0]["value"] == "8 days → 2 days"
        assert len(decoded["section_content"]) == 7
        assert "Internal Notes" not in json.dumps(decoded["raw_sections"])

    def test_compiled_sections_are_already_normal(self, full_case_study):
        """Test normalizing compiler output changes nothing."""
        for tree in extract(full_case_study).data.section_content.values():
            assert normalize_document(tree) == tree

    def test_editor_round_trip_then_normalize_is_stable(self, full_case_study):
        """Test compiled trees survive the editor JSON boundary and stay normal."""
        for tree in extract(full_case_study).data.section_content.values():
            reloaded = DocumentNode.from_dict(json.loads(json.dumps(tree.to_dict())))

            once = normalize_document(reloaded)

            assert once == tree
            assert normalize_document(once) == once

    @pytest.mark.parametrize("markdown", [
        "# Title\n\nIntro **bold**\n\n- one\n- two\n\n> quote",
        "1. first\n2. second\n\n```\n# not a heading\n```",
        "plain *italic* ~~strike~~ `code` [link](https://x.com)",
        "",
    ])
    def test_markdown_to_document_then_normalize(self, markdown):
        """Test the compiler's output is a fixed point of the normalizer."""
        tree = markdown_to_document(markdown)

        assert normalize_document(tree) is tree

    def test_paragraph_of_pasted_markdown_matches_compiler(self):
        """Test repairing a flat paragraph gives what compiling the text would."""
        markdown = "## Plan\n- **Phase** one\n- Phase two\n> Quote"
        flat = DocumentNode.doc([
            DocumentNode.block(NodeType.PARAGRAPH, [DocumentNode.text_node(markdown)])
        ])

        assert normalize_document(flat) == markdown_to_document(markdown)

    def test_inline_tokens_cover_input(self):
        """Test the tokenizer never loses characters outside delimiters."""
        nodes = parse_inline("Saved **40%** of *every* month")

        assert "".join(node.text for node in nodes) == "Saved 40% of every month"

    def test_template_rejected_until_filled(self):
        """Test the shipped template fails only on required fields."""
        result = extract(EXAMPLE_TEMPLATE)

        assert result.failure_kind is FailureKind.VALIDATION
        assert all(error.startswith("Missing required field") for error in result.errors)
