#!/usr/bin/env python3
"""Audit a content directory and the site's public metadata files.

Usage:
    python audit.py --content              # Average lint score across content/
    python audit.py --technical            # Check robots.txt / sitemap.xml exist
    python audit.py --all                  # Both
    python audit.py --stats --category gtm # Word counts, categories, tags, date range
    python audit.py --all --content-dir posts --public-dir static
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from seo_guard.config import CONTENT_DIR, PUBLIC_DIR, ROBOTS_FILENAME, SITEMAP_FILENAME
from seo_guard.errors import ContentLoadError
from seo_guard.linting import lint_files
from seo_guard.linting.runner import FileLintError
from seo_guard.loaders import (
    filter_content_files,
    get_content_statistics,
    load_content_files,
    sort_content_files,
)

LATEST_POSTS = 5


def audit_content_directory(content_dir: str | Path) -> dict:
    """Lint every file and aggregate failing-rule counts and scores.

    A file whose lint run crashes counts as one issue with a score of 0.
    """
    root = Path(content_dir)
    if not root.exists():
        return {"file_count": 0, "issue_count": 0, "average_score": 0.0}

    files = load_content_files(root, include_drafts=True)
    issues = 0
    total_score = 0.0
    for outcome in lint_files(files):
        if isinstance(outcome, FileLintError):
            issues += 1
            continue
        issues += len(outcome.failures)
        total_score += outcome.score

    return {
        "file_count": len(files),
        "issue_count": issues,
        "average_score": total_score / len(files) if files else 0.0,
    }


def audit_technical(public_dir: str | Path) -> list[str]:
    public = Path(public_dir)
    issues = []
    if not (public / ROBOTS_FILENAME).exists():
        issues.append(f"Missing {ROBOTS_FILENAME} file")
    if not (public / SITEMAP_FILENAME).exists():
        issues.append(f"Missing {SITEMAP_FILENAME} file")
    return issues


def content_statistics(content_dir: str | Path, category: str | None = None) -> tuple[dict, list]:
    """Statistics for the (optionally category-filtered) content plus the newest posts."""
    files = load_content_files(content_dir)
    if category:
        files = filter_content_files(files, category=category)
    latest = sort_content_files(files, sort_by="date", order="desc")[:LATEST_POSTS]
    return get_content_statistics(files), latest


def print_statistics(stats: dict, latest: list):
    print(f"  ✓ {stats['total_files']} files, {stats['total_words']} words ({stats['average_words']} avg)")
    dates = stats["date_range"]
    if dates["earliest"]:
        print(f"    Date range: {dates['earliest']} to {dates['latest']}")
    for label, counts in (("Categories", stats["categories"]), ("Tags", stats["tags"])):
        if counts:
            listed = ", ".join(f"{name} ({n})" for name, n in sorted(counts.items()))
            print(f"    {label}: {listed}")
    if latest:
        print("    Latest:")
        for f in latest:
            print(f"      - {f.path.name}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Audit content SEO and site metadata files")
    parser.add_argument("--content", action="store_true", help="Audit content SEO")
    parser.add_argument("--technical", action="store_true", help="Check robots.txt and sitemap.xml")
    parser.add_argument("--all", action="store_true", help="Run every audit")
    parser.add_argument("--stats", action="store_true", help="Show content statistics")
    parser.add_argument("--category", type=str, default="", help="Limit --stats to one category")
    parser.add_argument("--content-dir", type=str, default=str(CONTENT_DIR))
    parser.add_argument("--public-dir", type=str, default=str(PUBLIC_DIR))
    args = parser.parse_args(argv)

    if not (args.content or args.technical or args.all or args.stats):
        parser.print_help()
        return 1

    print("SEO Guard Rails Auditor")

    if args.content or args.all:
        print("  Auditing content SEO...")
        try:
            result = audit_content_directory(args.content_dir)
        except ContentLoadError as e:
            print(f"  ✖ Audit failed: {e}")
            return 1
        print(
            f"  ✓ Content audit complete: {result['file_count']} files, "
            f"{result['issue_count']} issues, {result['average_score']:.1f}% average score"
        )

    if args.stats or args.all:
        print("  Collecting content statistics...")
        try:
            stats, latest = content_statistics(args.content_dir, args.category or None)
        except ContentLoadError as e:
            print(f"  ✖ Statistics failed: {e}")
            return 1
        print_statistics(stats, latest)

    if args.technical or args.all:
        print("  Auditing technical SEO...")
        issues = audit_technical(args.public_dir)
        if not issues:
            print("  ✓ Technical SEO audit complete: No issues found")
        else:
            print(f"  ⚠ Technical SEO audit complete: {len(issues)} issues found")
            for issue in issues:
                print(f"    - {issue}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
