"""Document, author and search request models"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from docstore.core.utils.clock import ensure_utc


class Author(BaseModel):
    """Author embedded in a document; has no lifecycle of its own."""
    id: str
    name: Optional[str] = None


class Document(BaseModel):
    """A stored document. id and created are filled in by the store on save."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None     # immutable once first stored

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)


class SearchRequest(BaseModel):
    """Filter criteria; every field is optional.

    List fields are OR-matched within themselves and the groups are ANDed.
    None and [] both mean "no constraint", never "match nothing".
    """
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes: Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids: Optional[list[str]] = None
    created_from: Optional[datetime] = None    # inclusive
    created_to: Optional[datetime] = None      # inclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

    def is_unconstrained(self) -> bool:
        """True when no field narrows the result set."""
        return not (
            self.title_prefixes or self.contains_contents or self.author_ids
            or self.created_from is not None or self.created_to is not None
        )
