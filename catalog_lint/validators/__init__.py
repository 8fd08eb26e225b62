"""Validators for catalog frontmatter and cross-resource references."""

from .base import IssueKind, Severity, ValidationIssue, ValidationResult
from .best_practices import check_best_practices, validate_best_practices
from .index import ResourceIndex, canonical_id
from .references import (
    ReferenceInfo,
    check_reference_integrity,
    extract_references,
    validate_references,
)
from .schema_validator import check_schemas, validate_all_schemas, validate_schema
from .versions import is_version_satisfied

__all__ = [
    "IssueKind",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_best_practices",
    "validate_best_practices",
    "ResourceIndex",
    "canonical_id",
    "ReferenceInfo",
    "check_reference_integrity",
    "extract_references",
    "validate_references",
    "check_schemas",
    "validate_all_schemas",
    "validate_schema",
    "is_version_satisfied",
]
