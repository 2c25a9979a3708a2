"""Tests for the fix plan built from lint findings."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

from seo_guard.linting.engine import create_lint_report
from seo_guard.linting.models import LintOptions
from seo_guard.suggestions import (
    FixSuggestion,
    build_fix_suggestions,
    create_execution_plan,
    determine_category,
    determine_priority,
    format_plan_markdown,
    format_total_time,
    generate_execution_plan,
    parse_time_estimate,
    plan_to_dict,
    prioritize_fixes,
)

QUICK_NOTE = "2025-02-01-quick-note.mdx"


@pytest.fixture
def quick_note_report(compose):
    content = compose(
        {"title": "Quick note", "date": "2025-02-01", "category": "misc", "tags": ["notes"]},
        "# Quick note\n\nShort body with no links.\n",
    )
    return create_lint_report(content, LintOptions(file_path=f"posts/{QUICK_NOTE}"))


def _fix(priority: str, auto: bool, confidence: str = "medium", fix_id: str = "x") -> FixSuggestion:
    return FixSuggestion(
        id=fix_id, file="a.md", rule_id="SEO-900", issue="", priority=priority, category="seo",
        suggestion="", auto_fixable=auto, confidence=confidence, impact="", difficulty="",
        estimated_time="2-5 min" if auto else "10-30 min",
    )


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassification:
    @pytest.mark.parametrize(
        ("rule_id", "severity", "expected"),
        [
            ("SEO-001", "error", "critical"),
            ("SEO-004", "error", "critical"),
            ("SEO-010", "error", "high"),
            ("SEO-012", "warning", "medium"),
            ("SEO-040", "info", "low"),
        ],
    )
    def test_priority(self, rule_id: str, severity: str, expected: str) -> None:
        assert determine_priority(rule_id, severity) == expected

    @pytest.mark.parametrize(
        ("rule_id", "expected"),
        [("SEO-003", "seo"), ("SEO-013", "content"), ("SEO-020", "structure"), ("SEO-031", "technical")],
    )
    def test_category(self, rule_id: str, expected: str) -> None:
        assert determine_category(rule_id) == expected


class TestBuildFixSuggestions:
    def test_one_per_failure(self, quick_note_report) -> None:
        fixes = build_fix_suggestions(quick_note_report.file, quick_note_report.results)
        assert [f.rule_id for f in fixes] == [
            "SEO-001", "SEO-003", "SEO-004", "SEO-005", "SEO-010", "SEO-012", "SEO-013",
        ]
        assert fixes[0].id == f"SEO-001-{QUICK_NOTE}-0"
        assert fixes[-1].id == f"SEO-013-{QUICK_NOTE}-6"

    def test_auto_fixable_details(self, quick_note_report) -> None:
        title, category = build_fix_suggestions(quick_note_report.file, quick_note_report.results)[:2]
        assert title.auto_fixable and title.confidence == "high" and title.estimated_time == "2-5 min"
        assert not category.auto_fixable and category.estimated_time == "10-30 min"
        assert category.suggestion.startswith("Fix the SEO-003 issue:")


class TestPrioritize:
    def test_order(self) -> None:
        fixes = [
            _fix("medium", False, fix_id="m"),
            _fix("high", False, fix_id="h-manual"),
            _fix("critical", True, "high", fix_id="c"),
            _fix("high", True, "high", fix_id="h-auto"),
        ]
        assert [f.id for f in prioritize_fixes(fixes)] == ["c", "h-auto", "h-manual", "m"]

    def test_stable_for_ties(self) -> None:
        fixes = [_fix("high", False, fix_id=str(i)) for i in range(5)]
        assert [f.id for f in prioritize_fixes(fixes)] == ["0", "1", "2", "3", "4"]


# ---------------------------------------------------------------------------
# Time estimates
# ---------------------------------------------------------------------------


class TestTimeEstimates:
    @pytest.mark.parametrize(
        ("text", "minutes"),
        [("2-5 min", 3.5), ("10-30 min", 20), ("7 min", 7), ("soon", 15)],
    )
    def test_parse(self, text: str, minutes: float) -> None:
        assert parse_time_estimate(text) == minutes

    @pytest.mark.parametrize(
        ("minutes", "expected"),
        [(0, "0 minutes"), (30, "30 minutes"), (90, "1.5 hours"), (120, "2 hours"), (960, "2 days")],
    )
    def test_format(self, minutes: float, expected: str) -> None:
        assert format_total_time(minutes) == expected


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------


class TestExecutionPlan:
    def test_summary(self, quick_note_report) -> None:
        plan = generate_execution_plan([quick_note_report])
        s = plan.summary
        assert s.total_issues == 7
        assert s.auto_fixable_issues == 2
        assert s.manual_review_issues == 5
        assert s.priority_breakdown == {"critical": 2, "high": 3, "medium": 2}
        # 2 x 3.5 + 5 x 20 minutes
        assert s.estimated_total_time == "1.8 hours"
        assert [f.rule_id for f in plan.fixes][:2] == ["SEO-001", "SEO-004"]

    def test_recommendations_and_next_steps(self, quick_note_report) -> None:
        plan = generate_execution_plan([quick_note_report])
        assert plan.recommendations[0] == "Start with 2 auto-fixable issues to get quick wins"
        assert "Address 2 critical issues first to prevent SEO penalties" in plan.recommendations
        assert len(plan.next_steps) == 3

    def test_clean_content(self, compliant_document) -> None:
        plan = generate_execution_plan([create_lint_report(compliant_document, "2025-01-15-gtm-as-code.md")])
        assert plan.summary.total_issues == 0
        assert plan.summary.estimated_total_time == "0 minutes"
        assert plan.fixes == []
        assert len(plan.next_steps) == 1

    def test_empty_plan(self) -> None:
        assert create_execution_plan([]).summary.priority_breakdown == {}

    def test_to_dict_is_json_ready(self, quick_note_report) -> None:
        data = json.loads(json.dumps(plan_to_dict(generate_execution_plan([quick_note_report]))))
        assert data["summary"]["total_issues"] == 7
        assert data["fixes"][0]["rule_id"] == "SEO-001"

    def test_markdown(self, quick_note_report) -> None:
        plan = generate_execution_plan([quick_note_report])
        text = format_plan_markdown(plan, generated_at=datetime(2025, 1, 15, 9, 30))
        assert text.startswith("# Content Optimization Execution Plan\n")
        assert "*Generated on 2025-01-15 at 09:30:00*" in text
        assert "- **Critical:** 2 issues" in text
        assert "### Auto-Fixable Issues (2 items)" in text
        assert "### Manual Review Required (5 items)" in text
        assert "#### CRITICAL: Title length is 10 chars (should be 45-70)" in text
