"""Frontmatter shape validation against the per-type pydantic models."""

from typing import Any, Iterable

from pydantic import ValidationError

from ..schema.models import SCHEMAS
from ..schema.resources import ParsedResource
from .base import IssueKind, ValidationIssue, ValidationResult

RULE_REQUIRED_FIELDS = "schema/required-fields"
RULE_VALID_SEMVER = "schema/valid-semver"
RULE_VALID_EMAIL = "schema/valid-email"
RULE_SUMMARY_REQUIRED = "best-practices/summary-required"
RULE_OWNER_REQUIRED = "best-practices/owner-required"

_EXPECTED_NAMES = {
    "string_type": "string",
    "int_type": "number",
    "int_parsing": "number",
    "float_type": "number",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
}

_RECEIVED_NAMES = {
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    list: "array",
    dict: "object",
    type(None): "null",
}


def schema_rule_for(field: str | None, message: str) -> str:
    """Name the lint rule a schema problem falls under."""
    if field == "summary":
        return RULE_SUMMARY_REQUIRED
    if field == "owners":
        return RULE_OWNER_REQUIRED
    lowered = message.lower()
    if "email" in lowered:
        return RULE_VALID_EMAIL
    if "version" in lowered or "semantic" in lowered:
        return RULE_VALID_SEMVER
    return RULE_REQUIRED_FIELDS


def _describe(error: dict[str, Any]) -> str:
    error_type = error["type"]
    if error_type == "missing":
        return "Required"
    if error_type in _EXPECTED_NAMES:
        input_type = type(error.get("input"))
        received = _RECEIVED_NAMES.get(input_type, input_type.__name__)
        return f"Expected {_EXPECTED_NAMES[error_type]}, but received {received}"
    if error_type == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    return error["msg"]


def validate_schema(resource: ParsedResource) -> list[ValidationIssue]:
    """Validate one resource's frontmatter against its type's model."""
    schema = SCHEMAS[resource.resource_type]
    issues: list[ValidationIssue] = []

    try:
        schema.model_validate(resource.frontmatter)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(x) for x in error["loc"]) or None
            message = _describe(error)
            issues.append(
                ValidationIssue(
                    kind=IssueKind.SCHEMA,
                    resource_key=resource.resource_key,
                    field=field,
                    message=f"{field}: {message}" if field else message,
                    source_file=resource.file.relative_path,
                    rule_id=schema_rule_for(field, message),
                )
            )

    return issues


def validate_all_schemas(resources: Iterable[ParsedResource]) -> list[ValidationIssue]:
    """Validate the frontmatter of every resource."""
    issues: list[ValidationIssue] = []
    for resource in resources:
        issues.extend(validate_schema(resource))
    return issues


def check_schemas(resources: Iterable[ParsedResource]) -> ValidationResult:
    """Run schema validation and wrap the issues in a ValidationResult."""
    result = ValidationResult()
    result.extend(validate_all_schemas(resources))
    return result
