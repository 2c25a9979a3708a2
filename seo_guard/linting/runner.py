"""Lint a batch of loaded content files, isolating failures per file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from seo_guard.linting.engine import create_lint_report
from seo_guard.linting.models import LintOptions, LintReport
from seo_guard.loaders.content import ContentFile


@dataclass(frozen=True)
class FileLintError:
    """A file whose lint run raised instead of producing a report."""

    file: str
    error: str

    def to_dict(self) -> dict:
        return {"file": self.file, "error": self.error}


LintOutcome = Union[LintReport, FileLintError]


def lint_file(content_file: ContentFile) -> LintReport:
    return create_lint_report(
        content_file.content,
        LintOptions(
            file_path=str(content_file.path),
            frontmatter=content_file.frontmatter,
        ),
    )


def lint_files(files: Iterable[ContentFile]) -> list[LintOutcome]:
    """Lint each file; a rule crash on one file becomes a FileLintError."""
    outcomes: list[LintOutcome] = []
    for content_file in files:
        try:
            outcomes.append(lint_file(content_file))
        except Exception as e:
            outcomes.append(FileLintError(file=str(content_file.path), error=f"{type(e).__name__}: {e}"))
    return outcomes


def split_outcomes(outcomes: Iterable[LintOutcome]) -> tuple[list[LintReport], list[FileLintError]]:
    reports, failures = [], []
    for outcome in outcomes:
        if isinstance(outcome, FileLintError):
            failures.append(outcome)
        else:
            reports.append(outcome)
    return reports, failures


def should_fail(outcomes: Iterable[LintOutcome], fail_on_error: bool) -> bool:
    """Strict mode fails on error-severity findings or crashed files only."""
    if not fail_on_error:
        return False
    reports, failures = split_outcomes(outcomes)
    return bool(failures) or any(r.summary.errors > 0 for r in reports)
