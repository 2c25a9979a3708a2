"""Tests for content discovery and front matter parsing."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from seo_guard.errors import ContentLoadError
from seo_guard.loaders import (
    expand_targets,
    filter_content_files,
    get_content_statistics,
    load_content_files,
    load_single_content_file,
    parse_frontmatter,
    sort_content_files,
)


def _names(files) -> list[str]:
    return [f.path.name for f in files]


# ---------------------------------------------------------------------------
# parse_frontmatter
# ---------------------------------------------------------------------------


class TestParseFrontmatter:
    def test_valid_block(self) -> None:
        parsed = parse_frontmatter("---\ntitle: Hello\ndate: 2025-01-15\n---\nBody\n")
        assert parsed.ok
        assert parsed.data == {"title": "Hello", "date": date(2025, 1, 15)}
        assert parsed.body == "Body\n"

    def test_no_block(self) -> None:
        parsed = parse_frontmatter("Just text\n")
        assert parsed.ok
        assert parsed.data == {}
        assert parsed.body == "Just text\n"

    def test_block_must_open_the_document(self) -> None:
        parsed = parse_frontmatter("Intro\n---\ntitle: x\n---\n")
        assert parsed.data == {}

    def test_empty_block(self) -> None:
        parsed = parse_frontmatter("---\n---\nBody\n")
        assert parsed.ok
        assert parsed.data == {}
        assert parsed.body == "Body\n"

    def test_invalid_yaml(self) -> None:
        parsed = parse_frontmatter("---\ntitle: [unclosed\n---\nBody\n")
        assert not parsed.ok
        assert parsed.data == {}
        assert parsed.error.startswith("Invalid front matter")
        assert parsed.body == "Body\n"

    @pytest.mark.parametrize("value", ["2025-02-30", "2025-13-01"])
    def test_impossible_date(self, value: str) -> None:
        parsed = parse_frontmatter(f"---\ntitle: Hello\ndate: {value}\n---\n\nBody.\n")
        assert not parsed.ok
        assert parsed.data == {}
        assert parsed.error.startswith("Invalid front matter")
        assert parsed.body == "\nBody.\n"

    def test_non_mapping_yaml(self) -> None:
        parsed = parse_frontmatter("---\n- a\n- b\n---\nBody\n")
        assert not parsed.ok
        assert parsed.data == {}


# ---------------------------------------------------------------------------
# load_content_files
# ---------------------------------------------------------------------------


class TestLoadContentFiles:
    def test_directory_skips_drafts_and_noise(self, content_tree) -> None:
        files = load_content_files(content_tree, include_drafts=False)
        assert _names(files) == ["2025-01-15-gtm-as-code.md", "2025-02-01-quick-note.mdx"]

    def test_include_drafts(self, content_tree) -> None:
        files = load_content_files(content_tree, include_drafts=True)
        assert sorted(_names(files)) == [
            "2025-01-15-gtm-as-code.md",
            "2025-02-01-quick-note.mdx",
            "2025-03-01-unfinished.md",
            "wip.draft.md",
        ]

    def test_non_recursive(self, content_tree) -> None:
        files = load_content_files(content_tree, recursive=False, include_drafts=False)
        assert _names(files) == ["2025-01-15-gtm-as-code.md"]

    def test_extensions(self, content_tree) -> None:
        files = load_content_files(content_tree, extensions=(".mdx",), include_drafts=False)
        assert _names(files) == ["2025-02-01-quick-note.mdx"]

    def test_max_files(self, content_tree) -> None:
        assert len(load_content_files(content_tree, include_drafts=True, max_files=1)) == 1

    def test_single_file(self, content_tree) -> None:
        [loaded] = load_content_files(content_tree / "2025-01-15-gtm-as-code.md")
        assert loaded.frontmatter["category"] == "gtm"
        assert loaded.content.startswith("---\n")
        assert loaded.body.lstrip().startswith("GTM as code")
        assert isinstance(loaded.last_modified, datetime)

    def test_missing_path(self, tmp_path) -> None:
        with pytest.raises(ContentLoadError):
            load_content_files(tmp_path / "nope")

    def test_bad_frontmatter_warns_and_loads(self, tmp_path, capsys) -> None:
        path = tmp_path / "2025-01-15-broken.md"
        path.write_text("---\ntitle: [unclosed\n---\nBody\n", encoding="utf-8")
        [loaded] = load_content_files(path)
        assert loaded.frontmatter == {}
        assert "Invalid front matter" in capsys.readouterr().err

    def test_impossible_date_does_not_stop_directory_load(self, content_tree, capsys) -> None:
        (content_tree / "2025-02-30-hello.md").write_text(
            "---\ntitle: Hello\ndate: 2025-02-30\n---\n\nBody.\n", encoding="utf-8"
        )
        files = load_content_files(content_tree, include_drafts=False)
        assert _names(files) == [
            "2025-01-15-gtm-as-code.md",
            "2025-02-30-hello.md",
            "2025-02-01-quick-note.mdx",
        ]
        assert files[1].frontmatter == {}
        assert "2025-02-30-hello.md: Invalid front matter" in capsys.readouterr().err

    def test_load_single_content_file(self, content_tree, tmp_path) -> None:
        assert load_single_content_file(content_tree / "2025-01-15-gtm-as-code.md") is not None
        assert load_single_content_file(tmp_path / "missing.md") is None


class TestExpandTargets:
    def test_glob(self, content_tree) -> None:
        expanded = expand_targets([str(content_tree / "**" / "*.mdx")])
        assert expanded == [str(content_tree / "posts" / "2025-02-01-quick-note.mdx")]

    def test_plain_paths_pass_through(self) -> None:
        assert expand_targets(["content", "missing/file.md"]) == ["content", "missing/file.md"]


# ---------------------------------------------------------------------------
# Filtering, sorting, statistics
# ---------------------------------------------------------------------------


class TestFilterAndSort:
    def test_filter_by_category(self, content_tree) -> None:
        files = load_content_files(content_tree, include_drafts=False)
        assert _names(filter_content_files(files, category="gtm")) == ["2025-01-15-gtm-as-code.md"]
        assert _names(filter_content_files(files, category=["gtm", "misc"])) == _names(files)

    def test_filter_by_tag(self, content_tree) -> None:
        files = load_content_files(content_tree, include_drafts=False)
        assert _names(filter_content_files(files, tag="notes")) == ["2025-02-01-quick-note.mdx"]

    def test_filter_by_date_range(self, content_tree) -> None:
        files = load_content_files(content_tree, include_drafts=False)
        kept = filter_content_files(files, start=date(2025, 1, 20), end=date(2025, 12, 31))
        assert _names(kept) == ["2025-02-01-quick-note.mdx"]

    def test_filter_by_status(self, content_tree) -> None:
        files = load_content_files(content_tree, include_drafts=False)
        assert filter_content_files(files, status="published") == []

    def test_sort_by_date(self, content_tree) -> None:
        files = load_content_files(content_tree, include_drafts=False)
        assert _names(sort_content_files(files)) == [
            "2025-02-01-quick-note.mdx",
            "2025-01-15-gtm-as-code.md",
        ]
        assert _names(sort_content_files(files, order="asc"))[0] == "2025-01-15-gtm-as-code.md"

    def test_sort_by_title(self, content_tree) -> None:
        files = load_content_files(content_tree, include_drafts=False)
        assert _names(sort_content_files(files, sort_by="title", order="asc"))[0] == "2025-01-15-gtm-as-code.md"

    def test_unknown_sort_key(self, content_tree) -> None:
        with pytest.raises(ValueError):
            sort_content_files([], sort_by="popularity")


class TestStatistics:
    def test_statistics(self, content_tree) -> None:
        stats = get_content_statistics(load_content_files(content_tree, include_drafts=False))
        assert stats["total_files"] == 2
        assert stats["total_words"] > 0
        assert stats["categories"] == {"gtm": 1, "misc": 1}
        assert stats["tags"] == {"notes": 1}
        assert stats["date_range"] == {"earliest": date(2025, 1, 15), "latest": date(2025, 2, 1)}

    def test_empty(self) -> None:
        stats = get_content_statistics([])
        assert stats["total_files"] == 0
        assert stats["average_words"] == 0
