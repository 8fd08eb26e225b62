"""Documentation best-practice checks."""

from typing import Iterable

from ..schema.resources import ParsedResource, ResourceType
from .base import IssueKind, ValidationResult, ValidationIssue
from .schema_validator import RULE_OWNER_REQUIRED, RULE_SUMMARY_REQUIRED

# Users and teams are the owners; they are not owned themselves
UNOWNED_TYPES = frozenset({ResourceType.USER, ResourceType.TEAM})


def _issue(resource: ParsedResource, field: str, message: str, rule: str) -> ValidationIssue:
    return ValidationIssue(
        kind=IssueKind.SCHEMA,
        resource_key=resource.resource_key,
        field=field,
        message=message,
        source_file=resource.file.relative_path,
        rule_id=rule,
    )


def validate_best_practices(resources: Iterable[ParsedResource]) -> list[ValidationIssue]:
    """Check that resources carry a summary and at least one owner."""
    issues: list[ValidationIssue] = []

    for resource in resources:
        if resource.resource_type in UNOWNED_TYPES:
            continue
        frontmatter = resource.frontmatter

        summary = frontmatter.get("summary")
        if not summary or (isinstance(summary, str) and not summary.strip()):
            issues.append(
                _issue(
                    resource,
                    "summary",
                    "Summary is required for better documentation",
                    RULE_SUMMARY_REQUIRED,
                )
            )

        owners = frontmatter.get("owners")
        if not isinstance(owners, list) or not owners:
            issues.append(
                _issue(resource, "owners", "At least one owner is required", RULE_OWNER_REQUIRED)
            )

    return issues


def check_best_practices(resources: Iterable[ParsedResource]) -> ValidationResult:
    """Run best-practice checks and wrap the issues in a ValidationResult."""
    result = ValidationResult()
    result.extend(validate_best_practices(resources))
    return result
