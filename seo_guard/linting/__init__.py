"""Content linting: rule registry, evaluator, summaries, and report formatting."""

from seo_guard.linting.models import (
    LintOptions,
    LintReport,
    LintResult,
    LintSummary,
    Rule,
    RuleVerdict,
)
from seo_guard.linting.rules import (
    SEO_RULES,
    get_rule_by_id,
    get_rules_by_severity,
    get_all_rule_ids,
)
from seo_guard.linting.engine import lint_content, summarize_lint_results, create_lint_report
from seo_guard.linting.runner import FileLintError, lint_files, should_fail, split_outcomes
from seo_guard.linting.report import (
    count_errors,
    format_lint_report,
    format_console,
    reports_to_json,
    format_markdown_report,
    markdown_to_html,
)

__all__ = [
    "LintOptions",
    "LintReport",
    "LintResult",
    "LintSummary",
    "Rule",
    "RuleVerdict",
    "SEO_RULES",
    "get_rule_by_id",
    "get_rules_by_severity",
    "get_all_rule_ids",
    "lint_content",
    "summarize_lint_results",
    "create_lint_report",
    "FileLintError",
    "lint_files",
    "should_fail",
    "split_outcomes",
    "count_errors",
    "format_lint_report",
    "format_console",
    "reports_to_json",
    "format_markdown_report",
    "markdown_to_html",
]
