#!/usr/bin/env python3
"""Build a prioritized fix plan from the linter's findings.

Usage:
    python plan_fixes.py                       # Plan for content/, saved as fix-execution-plan.md
    python plan_fixes.py posts/ --format json  # Saved as fix-execution-plan.json
    python plan_fixes.py --preview             # Print the plan, don't save
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from seo_guard.config import CONTENT_DIR, DEFAULT_PLAN_PATH
from seo_guard.errors import ContentLoadError
from seo_guard.linting import lint_files
from seo_guard.linting.runner import split_outcomes
from seo_guard.loaders import load_content_files
from seo_guard.suggestions import ExecutionPlan, format_plan_markdown, generate_execution_plan, plan_to_dict


def print_plan_summary(plan: ExecutionPlan):
    s = plan.summary
    print("\nExecution Plan Summary")
    print("─" * 50)
    print(f"  Auto-fixable issues:      {s.auto_fixable_issues}")
    print(f"  Manual review required:   {s.manual_review_issues}")
    print(f"  Estimated total time:     {s.estimated_total_time}")
    if s.priority_breakdown:
        print("\nPriority Breakdown:")
        for priority, count in s.priority_breakdown.items():
            print(f"  {priority}: {count} issues")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a fix plan from lint findings")
    parser.add_argument("path", nargs="?", default=str(CONTENT_DIR), help="Content directory or file")
    parser.add_argument("-o", "--output", type=str, default=DEFAULT_PLAN_PATH,
                        help="Output file for the execution plan")
    parser.add_argument("--format", choices=("markdown", "json"), default="markdown")
    parser.add_argument("--preview", action="store_true", help="Print the plan without saving it")
    args = parser.parse_args(argv)

    try:
        files = load_content_files(args.path)
    except ContentLoadError as e:
        print(f"Error: {e}")
        return 1
    if not files:
        print("No content files found")
        return 1

    print(f"Analyzing {len(files)} content files...")
    reports, failures = split_outcomes(lint_files(files))
    for failure in failures:
        print(f"  ⚠ Skipped {failure.file}: {failure.error}")

    plan = generate_execution_plan(reports)
    print(f"  ✓ Generated execution plan with {plan.summary.total_issues} optimization opportunities")
    print_plan_summary(plan)

    if args.format == "json":
        rendered = json.dumps(plan_to_dict(plan), indent=2)
    else:
        rendered = format_plan_markdown(plan)

    if args.preview:
        print("\nPreview mode - no files saved\n")
        print(rendered)
        return 0

    out_path = Path(args.output)
    if args.format == "json" and out_path.suffix == ".md":
        out_path = out_path.with_suffix(".json")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(rendered, encoding="utf-8")
    print(f"\n  ✓ Execution plan saved to: {out_path}")

    if plan.next_steps:
        print("\nRecommended Next Steps:")
        for i, step in enumerate(plan.next_steps, 1):
            print(f"  {i}. {step}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
