#!/usr/bin/env python3
"""Lint Markdown/MDX content against the SEO guard rails.

Usage:
    python lint.py                              # Lint everything under content/
    python lint.py posts/ notes/intro.md        # Specific files or directories
    python lint.py "content/**/*.mdx"           # Glob patterns are expanded
    python lint.py --format json                # Machine-readable findings
    python lint.py --format html --output lint.html   # Saved under output/reports/
    python lint.py --fail-on-error              # Exit 1 on error-severity findings
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from seo_guard.config import CONTENT_DIR, INCLUDE_DRAFTS, REPORT_OUTPUT_DIR
from seo_guard.errors import ContentLoadError
from seo_guard.linting import (
    count_errors,
    format_console,
    format_markdown_report,
    lint_files,
    markdown_to_html,
    reports_to_json,
    should_fail,
    split_outcomes,
)
from seo_guard.loaders import ContentFile, expand_targets, load_content_files

FORMATS = ("console", "json", "markdown", "html")


def _progress(message: str):
    # stdout is reserved for the report itself (JSON must stay parseable)
    print(message, file=sys.stderr)


def collect_files(targets: list[str], include_drafts: bool = False) -> list[ContentFile]:
    """Load every target, reporting the ones that cannot be loaded."""
    files = []
    for target in expand_targets(targets):
        try:
            files.extend(load_content_files(target, include_drafts=include_drafts))
        except ContentLoadError as e:
            _progress(f"  ⚠ Failed to load {target}: {e}")
    return files


def render(outcomes: list, fmt: str) -> str:
    if fmt == "json":
        return reports_to_json(outcomes)
    if fmt == "markdown":
        return format_markdown_report(outcomes)
    if fmt == "html":
        return markdown_to_html(format_markdown_report(outcomes))
    return format_console(outcomes)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lint markdown content for SEO guard rails")
    parser.add_argument("paths", nargs="*", default=[str(CONTENT_DIR)],
                        help="Files, directories, or glob patterns to lint (default: content dir)")
    parser.add_argument("-f", "--format", choices=FORMATS, default="console",
                        help="Output format")
    parser.add_argument("-o", "--output", type=str, default="",
                        help="Write the report to this file instead of stdout")
    parser.add_argument("--fail-on-error", action="store_true",
                        help="Exit with status 1 when an error-severity rule fails")
    parser.add_argument("--include-drafts", action="store_true", default=INCLUDE_DRAFTS,
                        help="Also lint drafts/ directories and *.draft.* files")
    args = parser.parse_args(argv)

    _progress("Loading content...")
    files = collect_files(args.paths, include_drafts=args.include_drafts)
    if not files:
        _progress("No content files found to lint")
        return 1

    _progress(f"  → Linting {len(files)} content files...")
    outcomes = lint_files(files)
    output = render(outcomes, args.format)

    if args.output:
        out_path = Path(args.output)
        if not out_path.parent.parts:
            out_path = REPORT_OUTPUT_DIR / out_path
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output, encoding="utf-8")
        _progress(f"  ✓ Saved to {out_path}")
    else:
        print(output)

    reports, failures = split_outcomes(outcomes)
    _progress(f"  Total: {len(outcomes)} files, {count_errors(reports)} errors, {len(failures)} failed to lint")

    return 1 if should_fail(outcomes, args.fail_on_error) else 0


if __name__ == "__main__":
    sys.exit(main())
