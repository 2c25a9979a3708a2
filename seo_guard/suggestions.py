"""Turn failing lint results into a prioritized fix plan.

The plan is built from lint output only: each failing rule becomes a
FixSuggestion with a priority, category, and rough time estimate, and the
whole set is summarized into recommendations and next steps.
"""

from __future__ import annotations

import os
import re
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from seo_guard.linting.models import LintReport, LintResult

AUTO_FIXABLE_RULES = ("SEO-001", "SEO-002", "SEO-004", "SEO-011", "SEO-020")
CRITICAL_RULES = ("SEO-001", "SEO-002", "SEO-004")

PRIORITY_ORDER = {"critical": 4, "high": 3, "medium": 2, "low": 1}
CONFIDENCE_ORDER = {"high": 3, "medium": 2, "low": 1}

FIX_TEXT = {
    "SEO-001": "Expand the title to be between 45-70 characters and include your primary keyword near the beginning.",
    "SEO-002": "Update the date to use ISO format (YYYY-MM-DD).",
    "SEO-004": "Adjust the summary to be between 120-160 characters to optimize for search engine snippets.",
    "SEO-011": "Fix the heading hierarchy by ensuring proper H2→H3→H4 flow without skipping levels.",
    "SEO-012": "Add your primary keyword within the first 100 words of the content.",
    "SEO-013": "Add at least one internal link to related content on your site.",
    "SEO-020": "Add descriptive alt text to all images for accessibility and SEO.",
}

IMPACT_TEXT = {
    "SEO-001": "Significant impact on search rankings and click-through rates",
    "SEO-002": "Improves content organization and crawling",
    "SEO-004": "Better search engine snippet display and user engagement",
    "SEO-011": "Improved content structure and user experience",
    "SEO-012": "Enhanced keyword relevance and topical authority",
    "SEO-013": "Better site structure and user navigation",
    "SEO-020": "Improved accessibility and image search visibility",
}

TIME_ESTIMATE_RE = re.compile(r"(\d+)(?:-(\d+))?\s*min")
DEFAULT_MINUTES = 15
WORKDAY_MINUTES = 480


@dataclass
class FixSuggestion:
    id: str
    file: str
    rule_id: str
    issue: str
    priority: str
    category: str
    suggestion: str
    auto_fixable: bool
    confidence: str
    impact: str
    difficulty: str
    estimated_time: str
    before_example: Optional[str] = None
    after_example: Optional[str] = None


@dataclass
class PlanSummary:
    total_issues: int
    auto_fixable_issues: int
    manual_review_issues: int
    estimated_total_time: str
    priority_breakdown: dict = field(default_factory=dict)


@dataclass
class ExecutionPlan:
    summary: PlanSummary
    fixes: list[FixSuggestion]
    recommendations: list[str]
    next_steps: list[str]


# ── Classification ────────────────────────────────────────────────────────


def determine_priority(rule_id: str, severity: str) -> str:
    if severity == "error":
        return "critical" if rule_id in CRITICAL_RULES else "high"
    if severity == "warning":
        return "medium"
    return "low"


def determine_category(rule_id: str) -> str:
    if rule_id.startswith("SEO-00"):
        return "seo"
    if rule_id.startswith("SEO-01"):
        return "content"
    if rule_id.startswith("SEO-02"):
        return "structure"
    return "technical"


def build_fix_suggestions(file_path: str, results: Iterable[LintResult]) -> list[FixSuggestion]:
    """One FixSuggestion per failing result, in result order."""
    basename = os.path.basename(file_path)
    failures = [r for r in results if not r.passed]
    fixes = []
    for index, result in enumerate(failures):
        auto = result.rule_id in AUTO_FIXABLE_RULES
        fixes.append(FixSuggestion(
            id=f"{result.rule_id}-{basename}-{index}",
            file=file_path,
            rule_id=result.rule_id,
            issue=result.message,
            priority=determine_priority(result.rule_id, result.severity),
            category=determine_category(result.rule_id),
            suggestion=FIX_TEXT.get(result.rule_id, f"Fix the {result.rule_id} issue: {result.message}"),
            auto_fixable=auto,
            confidence="high" if auto else "medium",
            impact=IMPACT_TEXT.get(result.rule_id, "Moderate SEO improvement"),
            difficulty="easy" if auto else "medium",
            estimated_time="2-5 min" if auto else "10-30 min",
            before_example=f"Current state violates {result.rule_id}: {result.message}",
            after_example=f"Resolved {result.rule_id} by applying recommended fix.",
        ))
    return fixes


def prioritize_fixes(fixes: Iterable[FixSuggestion]) -> list[FixSuggestion]:
    """Priority first, then auto-fixable before manual, then confidence."""
    return sorted(
        fixes,
        key=lambda f: (
            -PRIORITY_ORDER[f.priority],
            not f.auto_fixable,
            -CONFIDENCE_ORDER[f.confidence],
        ),
    )


# ── Time estimates ────────────────────────────────────────────────────────


def parse_time_estimate(text: str) -> float:
    """``"2-5 min"`` -> 3.5; unparsable estimates count as 15 minutes."""
    match = TIME_ESTIMATE_RE.search(text)
    if not match:
        return DEFAULT_MINUTES
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    return (low + high) / 2


def format_total_time(minutes: float) -> str:
    if minutes < 60:
        return f"{int(minutes + 0.5)} minutes"
    if minutes < WORKDAY_MINUTES:
        return f"{round(minutes / 60, 1):g} hours"
    return f"{round(minutes / WORKDAY_MINUTES, 1):g} days"


# ── Plan ──────────────────────────────────────────────────────────────────


def _recommendations(fixes: list[FixSuggestion]) -> list[str]:
    recs = []
    auto = [f for f in fixes if f.auto_fixable]
    critical = [f for f in fixes if f.priority == "critical"]
    seo = [f for f in fixes if f.category == "seo"]

    if auto:
        recs.append(f"Start with {len(auto)} auto-fixable issues to get quick wins")
    if critical:
        recs.append(f"Address {len(critical)} critical issues first to prevent SEO penalties")
    if len(seo) > len(fixes) * 0.5:
        recs.append("Focus on SEO fundamentals - over 50% of issues are SEO-related")

    recs.append("Review and test changes in staging before applying to production")
    recs.append("Re-run the linter in CI so new content is checked before it ships")
    return recs


def _next_steps(auto_fixable: int, manual: int) -> list[str]:
    steps = []
    if auto_fixable:
        steps.append(f"Apply the {auto_fixable} auto-fixable changes listed first in this plan")
    if manual:
        steps.append(f"Review {manual} issues requiring manual attention (marked in execution plan below)")
    steps.append("Re-run 'python audit.py --content' after applying fixes to measure improvement")
    return steps


def create_execution_plan(fixes: Iterable[FixSuggestion]) -> ExecutionPlan:
    ordered = prioritize_fixes(fixes)
    auto_fixable = sum(1 for f in ordered if f.auto_fixable)
    manual = len(ordered) - auto_fixable

    breakdown: dict[str, int] = {}
    for f in ordered:
        breakdown[f.priority] = breakdown.get(f.priority, 0) + 1

    total_minutes = sum(parse_time_estimate(f.estimated_time) for f in ordered)

    return ExecutionPlan(
        summary=PlanSummary(
            total_issues=len(ordered),
            auto_fixable_issues=auto_fixable,
            manual_review_issues=manual,
            estimated_total_time=format_total_time(total_minutes),
            priority_breakdown=breakdown,
        ),
        fixes=ordered,
        recommendations=_recommendations(ordered),
        next_steps=_next_steps(auto_fixable, manual),
    )


def generate_execution_plan(reports: Iterable[LintReport]) -> ExecutionPlan:
    fixes = []
    for report in reports:
        fixes.extend(build_fix_suggestions(report.file, report.results))
    return create_execution_plan(fixes)


def plan_to_dict(plan: ExecutionPlan) -> dict:
    return asdict(plan)


# ── Markdown ──────────────────────────────────────────────────────────────


def _fix_block(fix: FixSuggestion, manual: bool) -> str:
    lines = [
        f"#### {fix.priority.upper()}: {fix.issue}",
        f"- **File:** `{fix.file}`",
        f"- **Rule:** {fix.rule_id}",
        f"- **Category:** {fix.category}",
    ]
    if manual:
        lines.append(f"- **Difficulty:** {fix.difficulty}")
    lines.append(f"- **Impact:** {fix.impact}")
    if manual:
        lines.append(f"- **Confidence:** {fix.confidence}")
    lines.append(f"- **Time:** {fix.estimated_time}")
    lines.append(f"- **{'Suggestion' if manual else 'Fix'}:** {fix.suggestion}")
    if fix.before_example:
        lines.append(f"- **{'Current' if manual else 'Before'}:** `{fix.before_example}`")
    if fix.after_example:
        lines.append(f"- **{'Suggested' if manual else 'After'}:** `{fix.after_example}`")
    return "\n".join(lines)


def format_plan_markdown(plan: ExecutionPlan, generated_at: Optional[datetime] = None) -> str:
    generated_at = generated_at or datetime.now()
    s = plan.summary
    auto = [f for f in plan.fixes if f.auto_fixable]
    manual = [f for f in plan.fixes if not f.auto_fixable]

    lines = [
        "# Content Optimization Execution Plan",
        "",
        f"*Generated on {generated_at:%Y-%m-%d} at {generated_at:%H:%M:%S}*",
        "",
        "## Executive Summary",
        "",
        f"- **Total Issues Found:** {s.total_issues}",
        f"- **Auto-fixable Issues:** {s.auto_fixable_issues}",
        f"- **Manual Review Required:** {s.manual_review_issues}",
        f"- **Estimated Total Time:** {s.estimated_total_time}",
        "",
        "### Priority Breakdown",
    ]
    for priority, count in s.priority_breakdown.items():
        lines.append(f"- **{priority.capitalize()}:** {count} issues")

    lines += ["", "## Key Recommendations", ""]
    lines += [f"- {rec}" for rec in plan.recommendations]

    lines += ["", "## Next Steps", ""]
    lines += [f"{i}. {step}" for i, step in enumerate(plan.next_steps, 1)]

    lines += ["", "## Detailed Execution Plan", "", f"### Auto-Fixable Issues ({len(auto)} items)", ""]
    lines.append("\n\n---\n\n".join(_fix_block(f, manual=False) for f in auto))

    lines += ["", f"### Manual Review Required ({len(manual)} items)", ""]
    lines.append("\n\n---\n\n".join(_fix_block(f, manual=True) for f in manual))

    return "\n".join(lines) + "\n"
