"""Run the rule registry against one document and aggregate the verdicts."""

from __future__ import annotations

import os
from typing import Iterable, Optional, Union

from seo_guard.linting.models import LintOptions, LintReport, LintResult, LintSummary
from seo_guard.linting.rules import SEO_RULES
from seo_guard.loaders.content import parse_frontmatter


def _normalize_options(options: Union[LintOptions, str, None]) -> LintOptions:
    if isinstance(options, str):
        return LintOptions(filename=options)
    return options or LintOptions()


def _resolve_filename(options: LintOptions) -> Optional[str]:
    if options.filename:
        return options.filename
    if options.file_path:
        return os.path.basename(options.file_path)
    return None


def lint_content(
    raw_content: str,
    options: Union[LintOptions, str, None] = None,
) -> list[LintResult]:
    """Run every registered rule against one document.

    ``options`` may be a LintOptions or just a filename. When no front matter
    is supplied it is parsed from ``raw_content``; unparsable front matter is
    linted as an empty mapping. Exceptions raised by a rule propagate.

    Returns one LintResult per rule, in registry order.
    """
    opts = _normalize_options(options)

    frontmatter = opts.frontmatter
    if frontmatter is None:
        parsed = parse_frontmatter(raw_content)
        frontmatter = parsed.data if parsed.ok else {}

    filename = _resolve_filename(opts)

    return [
        LintResult.from_verdict(rule, rule.check(raw_content, frontmatter, filename))
        for rule in SEO_RULES
    ]


def summarize_lint_results(results: Iterable[LintResult]) -> tuple[LintSummary, float]:
    """Count passes, failed errors and failed warnings; score is percent passed.

    A failed ``info`` rule lands in no bucket but still lowers the score.
    """
    results = list(results)
    errors = warnings = passed = 0
    for result in results:
        if result.passed:
            passed += 1
        elif result.severity == "error":
            errors += 1
        elif result.severity == "warning":
            warnings += 1

    score = passed / len(results) * 100 if results else 100.0
    return LintSummary(errors=errors, warnings=warnings, passed=passed), score


def create_lint_report(
    raw_content: str,
    options: Union[LintOptions, str, None] = None,
) -> LintReport:
    opts = _normalize_options(options)
    results = lint_content(raw_content, opts)
    summary, score = summarize_lint_results(results)
    return LintReport(
        file=opts.file_path or opts.filename or "unknown",
        results=tuple(results),
        score=score,
        summary=summary,
    )
