"""Shared fixtures for the content linter tests.

- compliant_frontmatter / compliant_body: a post that passes every rule
- compose: joins a front matter mapping and a body into a document
- content_tree: a small content directory on disk
"""

from __future__ import annotations

import pytest
import yaml

COMPLIANT_FILENAME = "2025-01-15-gtm-as-code.md"

COMPLIANT_BODY = """\
GTM as code means treating every launch page, changelog entry, and blog post like software. \
Marketing copy lives in the repository next to the product it describes. \
Every change goes through review before it ships.

Teams that work this way catch broken links, missing summaries, and sloppy headings long before readers do. \
Start with the [content workflow guide](/guides/content-workflow) to see how reviews are organized.

## Why Reviews Matter

Reviewers look at structure and tone together. \
A second pair of eyes keeps the voice consistent across authors and releases.

### What The Linter Checks

The checks cover front matter, heading order, links, images, and readability. \
Each finding explains what failed and how to repair it.

## Getting Started

Add the lint step to your pull request pipeline and fix findings as they appear. \
Over time the backlog shrinks and new posts arrive clean.
"""


def _compliant_frontmatter() -> dict:
    return {
        "title": "GTM as Code: Shipping Marketing Like Software Teams Do",
        "date": "2025-01-15",
        "category": "gtm",
        "summary": (
            "Learn how GTM as code turns marketing pages into reviewed, tested, "
            "versioned content with SEO guard rails that run in every pull request."
        ),
        "Readtime": "5 min read",
        "tags": [],
    }


def compose_document(frontmatter: dict | None, body: str) -> str:
    if frontmatter is None:
        return body
    block = yaml.safe_dump(frontmatter, sort_keys=False, allow_unicode=True, width=1000)
    return f"---\n{block}---\n\n{body}"


@pytest.fixture
def compliant_frontmatter() -> dict:
    return _compliant_frontmatter()


@pytest.fixture
def compliant_body() -> str:
    return COMPLIANT_BODY


@pytest.fixture
def compose():
    return compose_document


@pytest.fixture
def compliant_document() -> str:
    return compose_document(_compliant_frontmatter(), COMPLIANT_BODY)


@pytest.fixture
def content_tree(tmp_path):
    """content/ with one clean post, one failing post, drafts, and noise."""
    root = tmp_path / "content"
    (root / "posts").mkdir(parents=True)
    (root / "drafts").mkdir()
    (root / "node_modules" / "pkg").mkdir(parents=True)

    (root / COMPLIANT_FILENAME).write_text(
        compose_document(_compliant_frontmatter(), COMPLIANT_BODY), encoding="utf-8"
    )
    (root / "posts" / "2025-02-01-quick-note.mdx").write_text(
        compose_document(
            {"title": "Quick note", "date": "2025-02-01", "category": "misc", "tags": ["notes"]},
            "# Quick note\n\nShort body with no links.\n",
        ),
        encoding="utf-8",
    )
    (root / "drafts" / "2025-03-01-unfinished.md").write_text("Draft body\n", encoding="utf-8")
    (root / "wip.draft.md").write_text("Work in progress\n", encoding="utf-8")
    (root / "node_modules" / "pkg" / "readme.md").write_text("Vendored readme\n", encoding="utf-8")
    (root / "notes.txt").write_text("Not content\n", encoding="utf-8")
    return root
