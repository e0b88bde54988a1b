"""
Case study import template.

The downloadable file authors start from. It documents every frontmatter
field, the two record-shaped array formats and the section headings, and
is generated from the same tables the extractor reads (``SECTION_HEADINGS``
and the ``Category``/``Industry`` enumerations) so that the three stay in
step.

Every value in the template is empty, so importing it unchanged fails with
one "Missing required field" error per required field.
"""

from typing import Dict, Iterable, List

from ...models.enums import Category, Industry
from .structure.sections import SECTION_HEADINGS

RULE = "# " + "═" * 79

SERVICE_OPTIONS = (
    "Document Digitization",
    "AI Automation",
    "Custom Software Development",
    "Digital Transformation",
)

RELATED_SERVICE_OPTIONS = (
    "document-digitization",
    "ai-automation",
    "custom-software-development",
    "digital-transformation",
)

SECTION_INSTRUCTIONS_MARKER = "[INSTRUCTIONS - DELETE THIS BLOCK AND REPLACE WITH YOUR CONTENT]"

# Section key -> (lead lines, list title, list entries, "do not include" entries)
SECTION_GUIDANCE: Dict[str, tuple] = {
    "context": (
        ["Provide background about the client without revealing confidential information."],
        "INCLUDE",
        [
            "Industry and sector",
            "Company size/scope (without naming)",
            "Relevant context that led to this project",
        ],
        [
            "Client name or identifiable details",
            "Specific locations (unless authorized)",
            "Confidential business information",
        ],
    ),
    "problem": (
        ["Describe the challenge or pain point the client faced."],
        "INCLUDE",
        [
            "The specific business problem",
            "Impact on operations/revenue/efficiency",
            "Why existing solutions weren't working",
            "Urgency or timeline pressures",
        ],
        [],
    ),
    "goals": (
        ["Define what success looked like for this project."],
        "INCLUDE",
        [
            "Measurable targets (percentages, time savings, cost reduction)",
            "Qualitative goals (user experience, reliability)",
            "Must-have vs. nice-to-have requirements",
        ],
        [],
    ),
    "solution": (
        ["Explain how you solved the problem."],
        "INCLUDE",
        [
            "Overall approach and strategy",
            "Key technical decisions",
            "Why this approach was chosen",
            "Unique aspects of your solution",
        ],
        [],
    ),
    "implementation": (
        ["Describe the technical approach and process."],
        "INCLUDE",
        [
            "Project phases and timeline",
            "Key milestones",
            "Challenges overcome",
            "Team collaboration approach",
        ],
        [],
    ),
    "results_narrative": (
        [
            "Provide a detailed narrative of outcomes and impact.",
            'This complements the quantitative "results" in the frontmatter.',
        ],
        "INCLUDE",
        [
            "Qualitative improvements",
            "Client feedback/testimonials (if available)",
            "Unexpected benefits",
            "Long-term impact",
        ],
        [],
    ),
    "next_steps": (
        ["Describe future plans or include a call to action."],
        "OPTIONS",
        [
            "Planned expansions of the solution",
            "How similar results can be achieved for readers",
            "Contact information or next steps",
        ],
        [],
    ),
}


def _banner(title: str) -> List[str]:
    return [RULE, f"# {title}", RULE]


def _options(values: Iterable[str]) -> List[str]:
    return [f'#   - "{value}"' for value in values]


def _header() -> List[str]:
    return [
        RULE,
        "# CASE STUDY IMPORT TEMPLATE",
        RULE,
        "#",
        "# HOW TO USE THIS FILE:",
        "# 1. Fill in all fields between the --- markers (YAML frontmatter)",
        "# 2. Replace [INSTRUCTIONS] blocks with your actual content",
        "# 3. Delete instruction comments before importing",
        "# 4. Save as .md file and upload to the CMS",
        "#",
        "# WHAT GETS IMPORTED:",
        "# ✓ All frontmatter fields (metadata, results, FAQs, SEO)",
        f"# ✓ All content sections ({SECTION_HEADINGS[0].heading}, {SECTION_HEADINGS[1].heading}, etc.)",
        "#",
        "# WHAT MUST BE ADDED MANUALLY AFTER IMPORT:",
        "# ✗ Thumbnail image",
        "# ✗ Gallery images",
        "# ✗ Display order",
        "# ✗ Publish status",
        "#",
        RULE,
        "",
        "",
    ]


def _required_fields() -> List[str]:
    return [
        *_banner("REQUIRED FIELDS"),
        "",
        "# Title of the case study (displayed as H1 on the page)",
        'title: ""',
        "",
        "# URL-friendly slug (lowercase, hyphens only, must be unique)",
        '# Example format: "client-name-project-type" or "industry-solution-type"',
        'slug: ""',
        "",
        "# Category - SELECT ONE of these exact values:",
        *_options(Category.values()),
        'category: ""',
        "",
        "# Brief summary (1-2 sentences, shown on cards and in search results)",
        "# Keep under 160 characters for optimal SEO",
        'short_description: ""',
        "",
        "",
    ]


def _metadata_fields() -> List[str]:
    return [
        *_banner("METADATA"),
        "",
        "# Industry - SELECT ONE of these exact values:",
        *_options(Industry.values()),
        'industry: ""',
        "",
        "# Non-identifying client descriptor (no PII)",
        '# Examples: "Fortune 500 Retailer", "Mid-size Audit Firm (India)", "Global Logistics Provider"',
        'client_type: ""',
        "",
        "# Services provided - SELECT from these options (can select multiple):",
        *_options(SERVICE_OPTIONS),
        "services:",
        '  - ""',
        "",
        "# Technologies used (free-form list)",
        "# Examples: Python, TensorFlow, React, Node.js, Supabase, AWS",
        "tech_stack:",
        '  - ""',
        "",
        "",
    ]


def _results_fields() -> List[str]:
    item = ['  - label: ""', '    value: ""', '    context: ""']
    return [
        *_banner("KEY RESULTS (2-4 items recommended)"),
        "# Each result should have:",
        '#   - label: What was measured (e.g., "Processing time reduced")',
        '#   - value: The result (e.g., "8 hours → 45 minutes", "99.2%", "$2.4M")',
        '#   - context: (optional) Additional context (e.g., "per 1,000 invoices", "annually")',
        "",
        "results:",
        *item,
        *item,
        "",
        "",
    ]


def _stat_fields() -> List[str]:
    return [
        *_banner("CARD STATISTICS"),
        "# These appear prominently on the case study card in listings",
        "",
        '# The headline number/metric (e.g., "94%", "10x", "$2.4M")',
        'stat_value: ""',
        "",
        '# What the stat measures (e.g., "Time Saved", "ROI Increase", "Cost Reduction")',
        'stat_metric: ""',
        "",
        "",
    ]


def _seo_fields() -> List[str]:
    return [
        *_banner("SEO (Search Engine Optimization)"),
        "",
        "# Custom page title (leave empty to auto-generate from title)",
        '# Recommended format: "Case Study: [Title] | Your Company"',
        "# Keep under 60 characters",
        'meta_title: ""',
        "",
        "# Meta description for search results",
        "# Summarize the case study in 1-2 sentences",
        "# Keep between 120-160 characters for optimal display",
        'meta_description: ""',
        "",
        "",
    ]


def _related_fields() -> List[str]:
    return [
        *_banner("RELATED CONTENT (for internal linking)"),
        "# Note: Related content improves SEO through internal linking.",
        "# Use slugs (URL paths) to reference other content.",
        "",
        "# Related service page slugs - SELECT from:",
        *_options(RELATED_SERVICE_OPTIONS),
        "related_services:",
        '  - ""',
        "",
        "# Related case study slugs (enter slugs of 2-3 other published case studies)",
        '# Example: "healthcare-records-digitization"',
        "related_case_studies:",
        '  - ""',
        "",
        "",
    ]


def _faq_fields() -> List[str]:
    item = ['  - question: ""', '    answer: ""']
    return [
        *_banner("FAQs (3-5 recommended for SEO)"),
        "# FAQs generate FAQ Schema markup which improves search visibility.",
        "# Write questions that potential clients might ask about this project.",
        "# Example questions:",
        '#   - "How long did the implementation take?"',
        '#   - "What was the ROI timeline?"',
        '#   - "How was data security handled?"',
        '#   - "Can this solution scale?"',
        "",
        "faqs:",
        *item,
        *item,
        *item,
        "",
    ]


def _section(heading: str, key: str) -> List[str]:
    lead, list_title, entries, excluded = SECTION_GUIDANCE[key]
    lines = [f"## {heading}", "", SECTION_INSTRUCTIONS_MARKER, "", *lead, "", f"{list_title}:"]
    lines.extend(f"- {entry}" for entry in entries)
    if excluded:
        lines.extend(["", "DO NOT INCLUDE:"])
        lines.extend(f"- {entry}" for entry in excluded)
    return lines


def build_template() -> str:
    """Render the import template."""
    lines = ["---"]
    for part in (
        _header, _required_fields, _metadata_fields, _results_fields,
        _stat_fields, _seo_fields, _related_fields, _faq_fields,
    ):
        lines.extend(part())
    lines.extend(["---", ""])

    sections = [
        "\n".join(_section(entry.heading, entry.key)) for entry in SECTION_HEADINGS
    ]
    return "\n".join(lines) + "\n" + "\n\n\n".join(sections) + "\n"


EXAMPLE_TEMPLATE = build_template()
