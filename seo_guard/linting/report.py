"""Human-readable and machine-readable renderings of lint reports."""

from __future__ import annotations

import json
import os
from typing import Iterable, Optional

import markdown as md_lib

from seo_guard.linting.models import LintReport
from seo_guard.linting.runner import FileLintError, LintOutcome, split_outcomes


def _status(ok: bool) -> str:
    return "PASS" if ok else "FAIL"


def _marker(report: LintReport) -> str:
    if report.summary.errors > 0:
        return "✖"
    if report.summary.warnings > 0:
        return "⚠"
    return "✓"


def _display_path(path: str, base_dir: Optional[str] = None) -> str:
    try:
        relative = os.path.relpath(path, base_dir or os.getcwd())
    except ValueError:
        return path
    return relative or path


# ── Console ───────────────────────────────────────────────────────────────


def format_lint_report(report: LintReport, base_dir: Optional[str] = None) -> str:
    """Format one file's results as a CLI block."""
    s = report.summary
    lines = [
        f"{'='*60}",
        f"{_marker(report)} {_display_path(report.file, base_dir)} ({report.score:.1f}%)",
        f"{'='*60}",
        f"   errors: {s.errors} | warnings: {s.warnings} | passed: {s.passed}",
        "",
    ]

    for result in report.results:
        lines.append(f"  [{_status(result.passed)}] {result.rule_id} {result.name}: {result.message}")

    failures = report.failures
    if failures:
        lines.append(f"\nFINDINGS ({len(failures)}):")
        for result in failures:
            where = f" (line {result.line})" if result.line else ""
            lines.append(f"  - [{result.severity}] {result.rule_id}: {result.message}{where}")
            if result.suggestion:
                lines.append(f"    suggestion: {result.suggestion}")
    else:
        lines.append("\nAll checks passed!")

    return "\n".join(lines)


def format_file_error(failure: FileLintError, base_dir: Optional[str] = None) -> str:
    return f"✖ {_display_path(failure.file, base_dir)}: lint failed ({failure.error})"


def format_console(outcomes: Iterable[LintOutcome], base_dir: Optional[str] = None) -> str:
    blocks = []
    for outcome in outcomes:
        if isinstance(outcome, FileLintError):
            blocks.append(format_file_error(outcome, base_dir))
        else:
            blocks.append(format_lint_report(outcome, base_dir))
    return "\n\n".join(blocks)


# ── JSON ──────────────────────────────────────────────────────────────────


def reports_to_json(outcomes: Iterable[LintOutcome]) -> str:
    """``[{file, summary, score, findings}, ...]``; crashed files as ``{file, error}``."""
    return json.dumps([o.to_dict() for o in outcomes], indent=2, default=str)


def count_errors(reports: Iterable[LintReport]) -> int:
    return sum(r.summary.errors for r in reports)


# ── Markdown / HTML ───────────────────────────────────────────────────────


def format_markdown_report(outcomes: Iterable[LintOutcome], title: str = "Content Lint Report") -> str:
    reports, failures = split_outcomes(outcomes)

    lines = [
        f"# {title}",
        "",
        "| File | Score | Errors | Warnings | Passed |",
        "| --- | ---: | ---: | ---: | ---: |",
    ]
    for r in reports:
        s = r.summary
        lines.append(f"| `{r.file}` | {r.score:.1f}% | {s.errors} | {s.warnings} | {s.passed} |")

    if failures:
        lines += ["", "## Files that could not be linted", ""]
        for f in failures:
            lines.append(f"- `{f.file}`: {f.error}")

    for r in reports:
        if not r.failures:
            continue
        lines += ["", f"## {r.file}", ""]
        for result in r.failures:
            lines.append(f"- **{result.severity}** `{result.rule_id}` {result.name}: {result.message}")
            if result.suggestion:
                lines.append(f"    - Suggestion: {result.suggestion}")

    return "\n".join(lines) + "\n"


def markdown_to_html(text: str) -> str:
    return md_lib.markdown(text, extensions=["extra", "sane_lists"])
