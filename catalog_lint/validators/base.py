"""Base classes for validation results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a validation issue."""

    ERROR = "error"
    WARNING = "warning"


class IssueKind(str, Enum):
    """Which check produced an issue."""

    SCHEMA = "schema"
    REFERENCE = "reference"


@dataclass
class ValidationIssue:
    """A single problem found in a catalog document."""

    kind: IssueKind
    resource_key: str
    message: str
    source_file: str
    field: str | None = None
    rule_id: str | None = None
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        location = f" [{self.field}]" if self.field else ""
        rule = f" ({self.rule_id})" if self.rule_id else ""
        return (
            f"{self.severity.value.upper()}: {self.resource_key}{location}"
            f" - {self.message}{rule}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "resource": self.resource_key,
            "field": self.field,
            "message": self.message,
            "file": self.source_file,
            "rule": self.rule_id,
            "severity": self.severity.value,
        }


@dataclass
class ValidationResult:
    """Result of running validation on a catalog."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @property
    def is_valid(self) -> bool:
        """Check if the catalog is valid (no errors)."""
        return not self.has_errors

    def extend(self, issues: list[ValidationIssue]) -> None:
        """Add several issues to the result."""
        self.issues.extend(issues)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)

    def by_file(self) -> dict[str, list[ValidationIssue]]:
        """Group issues by source file, keeping first-seen order."""
        grouped: dict[str, list[ValidationIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.source_file, []).append(issue)
        return grouped
