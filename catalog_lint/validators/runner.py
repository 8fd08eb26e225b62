"""Validation runner that orchestrates all validators."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from ..config import LinterConfig, apply_rule_severity, get_effective_rules, load_config
from ..schema.loader import ParseFailure, parse_all_files, scan_catalog
from ..schema.resources import ParsedResource
from .base import ValidationResult
from .best_practices import check_best_practices
from .references import check_reference_integrity
from .schema_validator import check_schemas

log = logging.getLogger(__name__)


@dataclass
class LintReport:
    """Everything a lint run produced."""

    result: ValidationResult = field(default_factory=ValidationResult)
    parse_failures: list[ParseFailure] = field(default_factory=list)
    file_count: int = 0

    @property
    def has_errors(self) -> bool:
        return self.result.has_errors or bool(self.parse_failures)

    @property
    def has_warnings(self) -> bool:
        return self.result.has_warnings


def validate_catalog(resources: Sequence[ParsedResource]) -> ValidationResult:
    """Run all validators on a set of parsed resources.

    Args:
        resources: Every parsed resource in the catalog.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    result.merge(check_schemas(resources))

    # References are checked against the whole catalog, not per file
    result.merge(check_reference_integrity(resources))

    result.merge(check_best_practices(resources))

    return result


def apply_config(result: ValidationResult, config: LinterConfig) -> ValidationResult:
    """Apply per-file rule severities, dropping issues for disabled rules."""
    configured = ValidationResult()
    for source_file, issues in result.by_file().items():
        rules = get_effective_rules(source_file, config)
        configured.extend(apply_rule_severity(issues, rules))
    return configured


def lint_catalog(root: str | Path, config: LinterConfig | None = None) -> LintReport:
    """Scan, parse and validate a catalog directory.

    Args:
        root: The catalog root directory.
        config: Linter config; loaded from the root when omitted.

    Returns:
        A LintReport with configured issues and parse failures.

    Raises:
        CatalogLoadError: If the root is not a directory.
    """
    root = Path(root)
    if config is None:
        config = load_config(root)

    files = scan_catalog(root, config.ignore_patterns)
    resources, failures = parse_all_files(files)
    log.debug("Parsed %d file(s), %d failed", len(resources), len(failures))

    result = apply_config(validate_catalog(resources), config)
    return LintReport(result=result, parse_failures=failures, file_count=len(files))
