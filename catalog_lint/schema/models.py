"""Pydantic models describing the frontmatter of each resource type."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .resources import ResourceType

SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Frontmatter(BaseModel):
    """Base for all frontmatter models. Unknown keys are allowed."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Reference(Frontmatter):
    """A ``{id, version?}`` pointer to another resource."""

    id: str
    version: str | None = None


class Badge(Frontmatter):
    content: str
    backgroundColor: str | None = None
    textColor: str | None = None


class BaseResource(Frontmatter):
    """Fields shared by every versioned resource."""

    id: str
    name: str
    version: str
    summary: str | None = None
    owners: list[str] = Field(default_factory=list)
    badges: list[Badge] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def check_semver(cls, value: str) -> str:
        if not SEMVER_RE.match(value):
            raise ValueError(f"Version must be a valid semantic version, got '{value}'")
        return value


class Domain(BaseResource):
    services: list[Reference] = Field(default_factory=list)
    domains: list[Reference] = Field(default_factory=list)
    entities: list[Reference] = Field(default_factory=list)


class Service(BaseResource):
    sends: list[Reference] = Field(default_factory=list)
    receives: list[Reference] = Field(default_factory=list)
    entities: list[Reference] = Field(default_factory=list)


class Message(BaseResource):
    """Events, commands and queries share one shape."""

    schemaPath: str | None = None
    channels: list[Reference] = Field(default_factory=list)


class Channel(BaseResource):
    address: str | None = None
    protocols: list[str] = Field(default_factory=list)
    parameters: dict[str, dict] = Field(default_factory=dict)


class FlowStep(Frontmatter):
    id: str | int
    title: str
    summary: str | None = None
    message: Reference | None = None
    service: Reference | None = None
    next_step: str | int | dict | None = None
    next_steps: list[str | int | dict] = Field(default_factory=list)


class Flow(BaseResource):
    steps: list[FlowStep] = Field(default_factory=list)


class Property(Frontmatter):
    name: str
    type: str
    required: bool = False
    description: str | None = None
    references: str | None = None
    relationType: str | None = None


class Entity(BaseResource):
    aggregateRoot: bool = False
    identifier: str | None = None
    properties: list[Property] = Field(default_factory=list)


class User(Frontmatter):
    id: str
    name: str
    email: str | None = None
    avatarUrl: str | None = None
    role: str | None = None
    slackDirectMessageUrl: str | None = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        if value is not None and not EMAIL_RE.match(value):
            raise ValueError("Invalid email address")
        return value


class Team(Frontmatter):
    id: str
    name: str
    summary: str | None = None
    email: str | None = None
    members: list[str] = Field(default_factory=list)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        if value is not None and not EMAIL_RE.match(value):
            raise ValueError("Invalid email address")
        return value


SCHEMAS: dict[ResourceType, type[Frontmatter]] = {
    ResourceType.DOMAIN: Domain,
    ResourceType.SERVICE: Service,
    ResourceType.EVENT: Message,
    ResourceType.COMMAND: Message,
    ResourceType.QUERY: Message,
    ResourceType.CHANNEL: Channel,
    ResourceType.FLOW: Flow,
    ResourceType.ENTITY: Entity,
    ResourceType.USER: User,
    ResourceType.TEAM: Team,
}
