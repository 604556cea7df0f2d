"""Document, author and search request models"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return value as an aware UTC datetime; naive values are taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Author(BaseModel):
    """Immutable author reference; only id takes part in search."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored record. id is assigned by the store on first save."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None

    normalize_created = field_validator("created")(as_utc)


class SearchRequest(BaseModel):
    """Independently optional filters: OR within a list, AND across fields.

    Both created bounds are exclusive.
    """
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None
    created_to:        Optional[datetime] = None

    normalize_bounds = field_validator("created_from", "created_to")(as_utc)
