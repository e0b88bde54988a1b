"""Shared test fixtures and configuration for case study importer tests."""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

CASE_STUDY_ENV_VARS = (
    "CASE_STUDY_LOG_LEVEL",
    "CASE_STUDY_LOG_FORMAT",
    "CASE_STUDY_JSON_INDENT",
    "CASE_STUDY_ENSURE_ASCII",
)

VALID_FRONTMATTER = {
    "title": '"Demo"',
    "slug": "demo",
    "category": '"Operations"',
    "short_description": '"A test."',
}


@pytest.fixture(autouse=True)
def clean_case_study_environment(monkeypatch):
    """
    Keep CASE_STUDY_* variables from leaking between tests.

    Variables loaded from a .env file by python-dotenv bypass monkeypatch,
    so they are removed explicitly after each test.
    """
    for name in CASE_STUDY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    yield

    for name in CASE_STUDY_ENV_VARS:
        os.environ.pop(name, None)


@pytest.fixture
def workspace(tmp_path, monkeypatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and levels changed by logging setup."""
    root_logger = logging.getLogger()
    package_logger = logging.getLogger("case_study_importer")
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    saved_package_level = package_logger.level

    yield

    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    package_logger.setLevel(saved_package_level)


def build_case_study(
    fields: Optional[Dict[str, str]] = None,
    body: str = "",
    extra_frontmatter: str = "",
) -> str:
    """Assemble an import file from scalar fields, raw frontmatter lines and a body."""
    values = dict(VALID_FRONTMATTER if fields is None else fields)
    lines = ["---"]
    lines.extend(f"{key}: {value}" for key, value in values.items())
    if extra_frontmatter:
        lines.append(extra_frontmatter.rstrip("\n"))
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture
def make_case_study() -> Callable[..., str]:
    """Factory for import file text; see ``build_case_study``."""
    return build_case_study


@pytest.fixture
def full_case_study() -> str:
    """A complete, valid import file exercising every field and section."""
    return """---
# Case study for the ledger automation project
title: "Automating Month-End Close"
slug: month-end-close
category: "AI Archives"
short_description: "Cut month-end close from eight days to two."

industry: "Fintech"
client_type: "Mid-size Audit Firm (India)"
services:
  - "AI Automation"
  - "Document Digitization"
tech_stack:
  - Python
  - 'PostgreSQL'

results:
  - label: "Close duration"
    value: "8 days → 2 days"
    context: "per month"
  - label: "Manual entries"
    value: "-85%"

stat_value: "4x"
stat_metric: "Faster Close"

meta_title: "Case Study: Month-End Close | Example"
meta_description: "How an audit firm automated reconciliation."

related_services:
  - "ai-automation"
related_case_studies:
  - "healthcare-records-digitization"

faqs:
  - question: "How long did it take?"
    answer: "Twelve weeks."
  - question: "Was data secure?"
    answer: "Yes, everything ran on-premise."
campaign: spring
---

## Client & Context

A **mid-size** audit firm with *forty* accountants.

## Problem

Reconciliation was manual:

- Export ledgers
- Match entries by hand
- Chase ~~email~~ approvals

## Goals / Success Criteria

1. Close in under three days
2. Zero missed entries

## Internal Notes

This heading is not part of the published case study.

## Solution

> We automated matching, not judgement.

```python
match(ledger, bank)
```

## Implementation

### Phase one

Rolled out to one team first, see [the plan](https://example.com/plan).

---

Then everyone else.

## Results Narrative

The team now closes in `two` days.

## Next Steps / CTA

***Talk to us*** about your close.
"""
