"""Version-aware index of every resource in a catalog."""

import logging
from collections import defaultdict
from typing import Iterable, Mapping

from ..schema.resources import ParsedResource, ResourceType
from .versions import LATEST

log = logging.getLogger(__name__)

# These types may declare an id that differs from their file or directory name
CANONICAL_ID_TYPES = frozenset({ResourceType.USER, ResourceType.TEAM, ResourceType.DOMAIN})


def canonical_id(resource: ParsedResource) -> str:
    """Get the id other resources must use to refer to this one.

    Users, teams and domains may declare an ``id`` in their frontmatter
    (``aSmith.mdx`` declaring ``id: asmith``); that id replaces the
    storage-derived one. Every other type is known by where it is stored.
    """
    declared = resource.frontmatter.get("id")
    if resource.resource_type in CANONICAL_ID_TYPES and isinstance(declared, str) and declared:
        return declared
    return resource.resource_id


class ResourceIndex:
    """Read-only lookup of the versions each (type, id) exists under.

    A missing entry means the resource does not exist anywhere in the
    catalog; a present entry always has at least one version. Resources
    without a string ``version`` are recorded under ``latest``.
    """

    def __init__(self, entries: Mapping[ResourceType, Mapping[str, frozenset[str]]]):
        self._entries = {
            resource_type: dict(ids) for resource_type, ids in entries.items()
        }

    @classmethod
    def build(cls, resources: Iterable[ParsedResource]) -> "ResourceIndex":
        """Build the index from parsed resources. Never fails."""
        collected: dict[ResourceType, dict[str, set[str]]] = defaultdict(
            lambda: defaultdict(set)
        )

        for resource in resources:
            version = resource.frontmatter.get("version")
            if not isinstance(version, str) or not version:
                version = LATEST
            collected[resource.resource_type][canonical_id(resource)].add(version)

        index = cls(
            {
                resource_type: {rid: frozenset(versions) for rid, versions in ids.items()}
                for resource_type, ids in collected.items()
            }
        )
        log.debug("Indexed %d resource id(s)", len(index))
        return index

    def versions(self, resource_type: ResourceType, resource_id: str) -> frozenset[str]:
        """Get the known versions of a resource, empty if it does not exist."""
        return self._entries.get(resource_type, {}).get(resource_id, frozenset())

    def contains(self, resource_type: ResourceType, resource_id: str) -> bool:
        return resource_id in self._entries.get(resource_type, {})

    def ids(self, resource_type: ResourceType) -> list[str]:
        """Get all indexed ids of a type."""
        return list(self._entries.get(resource_type, {}))

    def __len__(self) -> int:
        return sum(len(ids) for ids in self._entries.values())
