"""Lint Issue and Report Models.

Shared result types for the Tinybird parsers and the object literal
linter. Scanners produce LintIssue records; directory drivers aggregate
them into a LintReport and optionally forward each one to an IssueSink.

JPL Power of Ten Compliance:
- Rule #2: Fixed upper bounds (MAX_ISSUES)
- Rule #9: Complete type hints
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

# JPL Rule #2: Fixed upper bounds
MAX_ISSUES = 1_000  # Maximum issues per report


class IssueSeverity(Enum):
    """Lint issue severity levels."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class LintIssue:
    """Immutable naming issue.

    ``column`` holds the offending identifier, whether it is a column,
    an alias or an object key.
    """

    file: str
    line: int
    column: str
    issue: str
    severity: IssueSeverity = IssueSeverity.ERROR
    rule_id: str = ""
    expected: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "issue": self.issue,
            "severity": self.severity.value,
            "rule_id": self.rule_id,
            "expected": self.expected,
        }


# Receives each issue as soon as a scanner reports it
IssueSink = Callable[[LintIssue], None]


@dataclass
class LintReport:
    """Lint scan report."""

    scan_path: str
    issues: List[LintIssue] = field(default_factory=list)
    files_scanned: int = 0
    passed_files: List[str] = field(default_factory=list)
    scan_duration_ms: float = 0.0
    started_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    completed_at: Optional[str] = None
    truncated: bool = False

    @property
    def error_count(self) -> int:
        """Count of error severity issues."""
        return sum(1 for i in self.issues if i.severity == IssueSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        """Count of warning severity issues."""
        return sum(1 for i in self.issues if i.severity == IssueSeverity.WARNING)

    @property
    def exit_code(self) -> int:
        """Get CI exit code.

        Returns:
            0 = no issues, 1 = at least one issue
        """
        return 0 if not self.issues else 1

    def add_issue(self, issue: LintIssue) -> bool:
        """Add issue to report.

        Returns:
            True if added, False if at capacity.

        Rule #2: Enforce MAX_ISSUES.
        """
        if len(self.issues) >= MAX_ISSUES:
            self.truncated = True
            return False
        self.issues.append(issue)
        return True

    def record_file(
        self,
        file_path: str,
        issues: List[LintIssue],
        sink: Optional[IssueSink] = None,
    ) -> bool:
        """Record the result of one scanned file.

        The sink only sees issues the report accepted, so both always
        agree.

        Args:
            file_path: File that was scanned.
            issues: Issues found in it.
            sink: Called once per accepted issue.

        Returns:
            False once the report is full and scanning should stop.
        """
        self.files_scanned += 1
        if not issues:
            self.passed_files.append(file_path)

        for issue in issues:
            if not self.add_issue(issue):
                return False
            if sink is not None:
                sink(issue)
        return not self.truncated

    def merge(self, other: "LintReport") -> None:
        """Fold another report's results into this one."""
        for issue in other.issues:
            if not self.add_issue(issue):
                break
        self.files_scanned += other.files_scanned
        self.passed_files.extend(other.passed_files)
        self.truncated = self.truncated or other.truncated

    def complete(self, duration_ms: float) -> None:
        """Mark report as completed.

        Args:
            duration_ms: Scan duration in milliseconds.
        """
        self.completed_at = datetime.now(timezone.utc).isoformat()
        self.scan_duration_ms = duration_ms

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "scan_path": self.scan_path,
            "summary": {
                "total_issues": len(self.issues),
                "errors": self.error_count,
                "warnings": self.warning_count,
                "exit_code": self.exit_code,
            },
            "files_scanned": self.files_scanned,
            "passed_files": list(self.passed_files),
            "scan_duration_ms": self.scan_duration_ms,
            "started_at": self.started_at,
            "completed_at": self.completed_at,
            "truncated": self.truncated,
            "issues": [i.to_dict() for i in self.issues],
        }
