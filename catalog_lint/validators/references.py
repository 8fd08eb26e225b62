"""Cross-resource reference validator."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from ..schema.resources import (
    MESSAGE_TYPES,
    ParsedResource,
    ResourceReference,
    ResourceType,
)
from .base import IssueKind, ValidationIssue, ValidationResult
from .index import ResourceIndex
from .versions import is_version_satisfied

log = logging.getLogger(__name__)

RULE_RESOURCE_EXISTS = "refs/resource-exists"
RULE_OWNER_EXISTS = "refs/owner-exists"
RULE_VALID_VERSION_RANGE = "refs/valid-version-range"

OWNER_TYPES = (ResourceType.USER, ResourceType.TEAM)


@dataclass(frozen=True)
class ReferenceInfo:
    """A reference declared by a resource and the types it may point at."""

    ref: ResourceReference
    possible_types: tuple[ResourceType, ...]
    field: str


# (declaring type, frontmatter list field, target types)
LIST_REFERENCE_FIELDS: tuple[tuple[ResourceType, str, tuple[ResourceType, ...]], ...] = (
    (ResourceType.DOMAIN, "services", (ResourceType.SERVICE,)),
    (ResourceType.DOMAIN, "domains", (ResourceType.DOMAIN,)),
    (ResourceType.DOMAIN, "entities", (ResourceType.ENTITY,)),
    (ResourceType.SERVICE, "sends", MESSAGE_TYPES),
    (ResourceType.SERVICE, "receives", MESSAGE_TYPES),
    (ResourceType.SERVICE, "entities", (ResourceType.ENTITY,)),
)


def _list_field(frontmatter: dict[str, Any], name: str) -> list:
    value = frontmatter.get(name)
    return value if isinstance(value, list) else []


def _collect(
    references: list[ReferenceInfo],
    item: Any,
    possible_types: tuple[ResourceType, ...],
    field: str,
) -> None:
    ref = ResourceReference.coerce(item)
    if ref is not None:
        references.append(ReferenceInfo(ref, possible_types, field))


def extract_references(resource: ParsedResource) -> list[ReferenceInfo]:
    """List the references a resource declares in its frontmatter.

    Missing or wrongly shaped fields are skipped; the schema validator
    reports those.

    Args:
        resource: The parsed resource.

    Returns:
        References in declaration order.
    """
    frontmatter = resource.frontmatter
    resource_type = resource.resource_type
    references: list[ReferenceInfo] = []

    for declaring_type, name, possible_types in LIST_REFERENCE_FIELDS:
        if resource_type != declaring_type:
            continue
        for item in _list_field(frontmatter, name):
            _collect(references, item, possible_types, name)

    if resource_type == ResourceType.FLOW:
        for i, step in enumerate(_list_field(frontmatter, "steps")):
            if not isinstance(step, dict):
                continue
            if step.get("message"):
                _collect(references, step["message"], MESSAGE_TYPES, f"steps[{i}].message")
            if step.get("service"):
                _collect(
                    references, step["service"], (ResourceType.SERVICE,), f"steps[{i}].service"
                )

    if resource_type == ResourceType.ENTITY:
        for i, prop in enumerate(_list_field(frontmatter, "properties")):
            if isinstance(prop, dict) and isinstance(prop.get("references"), str):
                _collect(
                    references,
                    prop["references"],
                    (ResourceType.ENTITY,),
                    f"properties[{i}].references",
                )

    for owner in _list_field(frontmatter, "owners"):
        _collect(references, owner, OWNER_TYPES, "owners")

    if resource_type == ResourceType.TEAM:
        for member in _list_field(frontmatter, "members"):
            _collect(references, member, (ResourceType.USER,), "members")

    return references


def resolves(ref: ResourceReference, resource_type: ResourceType, index: ResourceIndex) -> bool:
    """Check whether a reference resolves against one resource type."""
    return is_version_satisfied(ref.version, index.versions(resource_type, ref.id))


def _rule_for(info: ReferenceInfo) -> str:
    if info.field == "owners":
        return RULE_OWNER_EXISTS
    if info.ref.version:
        return RULE_VALID_VERSION_RANGE
    return RULE_RESOURCE_EXISTS


def _unresolved_issue(resource: ParsedResource, info: ReferenceInfo) -> ValidationIssue:
    types = "/".join(t.value for t in info.possible_types)
    version = f" (version: {info.ref.version})" if info.ref.version else ""
    return ValidationIssue(
        kind=IssueKind.REFERENCE,
        resource_key=resource.resource_key,
        field=info.field,
        message=f'Referenced {types} "{info.ref.id}"{version} does not exist',
        source_file=resource.file.relative_path,
        rule_id=_rule_for(info),
    )


def validate_references(
    resources: Sequence[ParsedResource], index: ResourceIndex | None = None
) -> list[ValidationIssue]:
    """Check that every reference in the catalog points at an existing resource.

    A reference resolves when any of its possible types has the id at a
    version satisfying the requested one. Circular references are allowed.

    Args:
        resources: Every parsed resource in the catalog.
        index: A prebuilt index of the same resources; built when omitted.

    Returns:
        One issue per unresolved reference, in resource then declaration order.
    """
    if index is None:
        index = ResourceIndex.build(resources)

    issues: list[ValidationIssue] = []
    checked = 0

    for resource in resources:
        for info in extract_references(resource):
            checked += 1
            if not any(resolves(info.ref, t, index) for t in info.possible_types):
                issues.append(_unresolved_issue(resource, info))

    log.debug("Checked %d reference(s), %d unresolved", checked, len(issues))
    return issues


def check_reference_integrity(resources: Iterable[ParsedResource]) -> ValidationResult:
    """Run reference validation and wrap the issues in a ValidationResult."""
    result = ValidationResult()
    result.extend(validate_references(list(resources)))
    return result
