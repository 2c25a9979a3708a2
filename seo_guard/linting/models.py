"""Value objects shared by the rule registry, evaluator, and reporters."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, Literal, Mapping, Optional

Severity = Literal["error", "warning", "info"]


@dataclass(frozen=True)
class RuleVerdict:
    """Outcome of a single rule check. ``message`` is set even on a pass."""

    passed: bool
    message: str
    suggestion: Optional[str] = None
    line: Optional[int] = None


CheckFn = Callable[[str, Mapping[str, Any], Optional[str]], RuleVerdict]


@dataclass(frozen=True)
class Rule:
    id: str
    name: str
    description: str
    severity: Severity
    check: CheckFn


@dataclass(frozen=True)
class LintResult:
    """A RuleVerdict tagged with the rule that produced it."""

    rule_id: str
    name: str
    severity: Severity
    passed: bool
    message: str
    suggestion: Optional[str] = None
    line: Optional[int] = None

    @classmethod
    def from_verdict(cls, rule: Rule, verdict: RuleVerdict) -> "LintResult":
        return cls(
            rule_id=rule.id,
            name=rule.name,
            severity=rule.severity,
            passed=verdict.passed,
            message=verdict.message,
            suggestion=verdict.suggestion,
            line=verdict.line,
        )

    def to_dict(self) -> dict:
        data = {
            "rule": self.rule_id,
            "name": self.name,
            "severity": self.severity,
            "passed": self.passed,
            "message": self.message,
        }
        if self.suggestion is not None:
            data["suggestion"] = self.suggestion
        if self.line is not None:
            data["line"] = self.line
        return data


@dataclass(frozen=True)
class LintSummary:
    errors: int = 0
    warnings: int = 0
    passed: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class LintReport:
    file: str
    results: tuple[LintResult, ...]
    score: float
    summary: LintSummary

    @property
    def failures(self) -> list[LintResult]:
        return [r for r in self.results if not r.passed]

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "summary": self.summary.to_dict(),
            "score": self.score,
            "findings": [r.to_dict() for r in self.results],
        }


@dataclass(frozen=True)
class LintOptions:
    """Inputs to a lint call besides the raw text.

    ``frontmatter=None`` means "parse it from the content"; an empty dict
    is used as-is.
    """

    file_path: Optional[str] = None
    filename: Optional[str] = None
    frontmatter: Optional[Mapping[str, Any]] = None
