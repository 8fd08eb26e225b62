"""Output formatting for lint reports."""

import json
from typing import Literal

from ..validators.base import Severity, ValidationIssue
from ..validators.runner import LintReport


def format_lint_report(
    report: LintReport,
    format: Literal["text", "json"] = "text",
    verbose: bool = False,
) -> str:
    """Format a lint report for output.

    Args:
        report: The lint report to format.
        format: Output format ("text" or "json").
        verbose: Include the resource key of each issue in text output.

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(report)
    return _format_text(report, verbose)


def _format_text(report: LintReport, verbose: bool) -> str:
    """Format report as human-readable text, grouped by file."""
    lines: list[str] = []

    for source_file, issues in report.result.by_file().items():
        lines.append(source_file)
        for issue in issues:
            lines.append(f"  {_format_issue_text(issue, verbose)}")
        lines.append("")

    if report.parse_failures:
        lines.append("PARSE ERRORS:")
        for failure in report.parse_failures:
            lines.append(f"  ✘ {failure.file.relative_path}: {failure.message}")
        lines.append("")

    errors = len(report.result.errors) + len(report.parse_failures)
    warnings = len(report.result.warnings)
    if errors == 0 and warnings == 0:
        lines.append(f"✔ No problems found ({report.file_count} file(s) checked)")
    else:
        lines.append(
            f"✘ {errors + warnings} problem(s) ({errors} error(s), {warnings} warning(s))"
        )

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue, verbose: bool) -> str:
    """Format a single issue as text."""
    symbol = "✘" if issue.severity == Severity.ERROR else "⚠"
    rule = f"{issue.rule_id}: " if issue.rule_id else ""
    location = f"[{issue.resource_key}] " if verbose else ""
    return f"{symbol} {rule}{location}{issue.message}"


def _format_json(report: LintReport) -> str:
    """Format report as JSON."""
    data = {
        "valid": not report.has_errors,
        "file_count": report.file_count,
        "error_count": len(report.result.errors) + len(report.parse_failures),
        "warning_count": len(report.result.warnings),
        "issues": [issue.to_dict() for issue in report.result.issues],
        "parse_errors": [
            {"file": failure.file.relative_path, "message": failure.message}
            for failure in report.parse_failures
        ],
    }
    return json.dumps(data, indent=2)
