"""Domain entities for docstash."""
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Interpret naive datetimes as UTC so stored and queried instants compare."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Author of a document. Identity is the id."""
    id: str
    name: str | None = None

    model_config = {"frozen": True}


class Document(BaseModel):
    """A stored unit of content.

    ``id`` and ``created`` stay ``None`` until the document is saved.
    """
    id: str | None = Field(default=None, min_length=1)
    title: str
    content: str
    author: Author
    created: datetime | None = None

    model_config = {"frozen": True}

    @field_validator("created")
    @classmethod
    def _normalize_created(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None and self.created is not None


class SearchRequest(BaseModel):
    """Composite filter over stored documents.

    Every criterion group is optional; ``None`` means the group does not
    filter. Within a group any listed value may match.
    """
    title_prefixes: tuple[str, ...] | None = None
    contains_contents: tuple[str, ...] | None = None
    author_ids: tuple[str, ...] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    model_config = {"frozen": True}

    @field_validator("created_from", "created_to")
    @classmethod
    def _normalize_bounds(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)

    def is_empty(self) -> bool:
        """Return True when no criterion group is set."""
        return all(
            value is None
            for value in (
                self.title_prefixes,
                self.contains_contents,
                self.author_ids,
                self.created_from,
                self.created_to,
            )
        )
