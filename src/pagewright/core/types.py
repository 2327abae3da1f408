"""Core data types for pagewright."""

from datetime import UTC, date, datetime, time
from typing import Any

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field, field_validator


def to_utc(value: datetime | date) -> datetime:
    """Coerce a date or datetime to an aware UTC datetime.

    Naive values are assumed to already be in UTC.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class FrontMatter(BaseModel):
    """Metadata block at the top of a content document.

    Unknown keys are kept so templates can still read them.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    title: str | None = None
    draft: bool = False
    date: datetime | None = None
    canonical_link: str | None = Field(default=None, alias="canonicalLink")
    published_at: str | None = Field(default=None, alias="publishedAt")
    issue: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> datetime | None:
        if value is None or value == "":
            return None
        if isinstance(value, str):
            value = date_parser.parse(value)
        if isinstance(value, date):
            return to_utc(value)
        return value

    @field_validator("title", "issue", "canonical_link", "published_at", mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any) -> Any:
        # YAML reads `title: 404` as an int and `publishedAt: 2020-01-01` as a date.
        if value is None or isinstance(value, str | list | dict):
            return value
        return str(value)

    @field_validator("draft", mode="before")
    @classmethod
    def _none_is_not_draft(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return [str(tag) for tag in value if tag is not None]


class NodeFields(BaseModel):
    """Fields derived from a content item's path and front matter."""

    model_config = ConfigDict(frozen=True)

    slug: str | None = None
    locale: str | None = None
    anchor: str | None = None
    title: str | None = None
    package: bool = False
    released: bool | None = None
    published_at: str | None = None


class ContentItem(BaseModel):
    """One source document read from a content collection."""

    model_config = ConfigDict(frozen=True)

    relative_path: str
    collection: str
    frontmatter: FrontMatter = Field(default_factory=FrontMatter)
    body: str = ""
    fields: NodeFields = Field(default_factory=NodeFields)

    @property
    def slug(self) -> str | None:
        return self.fields.slug

    @property
    def is_draft(self) -> bool:
        return self.frontmatter.draft

    @property
    def is_released(self) -> bool:
        return bool(self.fields.released)


class NavLink(BaseModel):
    """A sidebar entry used as a previous/next document reference."""

    model_config = ConfigDict(frozen=True)

    title: str
    link: str


class TagGroup(BaseModel):
    """Original tag spellings collapsed under one normalized key."""

    model_config = ConfigDict(frozen=True)

    key: str
    tags: tuple[str, ...]


class PageSpec(BaseModel):
    """A page to register: where it mounts, what renders it, and its context."""

    model_config = ConfigDict(frozen=True)

    path: str
    template: str
    context: dict[str, Any] = Field(default_factory=dict)


class ContentQuery(BaseModel):
    """Query against the content graph: every item, newest first, capped."""

    model_config = ConfigDict(frozen=True)

    limit: int = Field(default=10000, gt=0)


class QueryResult(BaseModel):
    """Items returned by a content query, or the errors that made it fail."""

    items: list[ContentItem] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
