"""Resource types and parsed catalog documents."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class ResourceType(str, Enum):
    """Kinds of resource documented in a catalog."""

    DOMAIN = "domain"
    SERVICE = "service"
    EVENT = "event"
    COMMAND = "command"
    QUERY = "query"
    CHANNEL = "channel"
    FLOW = "flow"
    ENTITY = "entity"
    USER = "user"
    TEAM = "team"


COLLECTION_DIRS: dict[str, ResourceType] = {
    "domains": ResourceType.DOMAIN,
    "services": ResourceType.SERVICE,
    "events": ResourceType.EVENT,
    "commands": ResourceType.COMMAND,
    "queries": ResourceType.QUERY,
    "channels": ResourceType.CHANNEL,
    "flows": ResourceType.FLOW,
    "entities": ResourceType.ENTITY,
    "users": ResourceType.USER,
    "teams": ResourceType.TEAM,
}

MESSAGE_TYPES = (ResourceType.EVENT, ResourceType.COMMAND, ResourceType.QUERY)


@dataclass(frozen=True)
class CatalogFile:
    """A discovered catalog document and the resource it describes."""

    path: Path
    relative_path: str
    resource_type: ResourceType
    resource_id: str


@dataclass
class ParsedResource:
    """A catalog document with its frontmatter loaded."""

    file: CatalogFile
    frontmatter: dict[str, Any] = field(default_factory=dict)
    content: str = ""
    raw: str = ""

    @property
    def resource_type(self) -> ResourceType:
        return self.file.resource_type

    @property
    def resource_id(self) -> str:
        return self.file.resource_id

    @property
    def resource_key(self) -> str:
        """Storage-derived key, e.g. ``service/OrdersService``."""
        return f"{self.file.resource_type.value}/{self.file.resource_id}"


@dataclass(frozen=True)
class ResourceReference:
    """A pointer from one resource to another, optionally pinned to a version."""

    id: str
    version: str | None = None

    @classmethod
    def coerce(cls, value: Any) -> "ResourceReference | None":
        """Build a reference from a frontmatter item.

        Accepts ``{id, version?}`` mappings and bare id strings. Anything
        else is malformed and yields None so the caller can skip it.
        """
        if isinstance(value, str):
            return cls(id=value)
        if isinstance(value, dict) and isinstance(value.get("id"), str):
            version = value.get("version")
            if not isinstance(version, str) or not version:
                version = None
            return cls(id=value["id"], version=version)
        return None
