"""
Collection-related Pydantic schemas.
"""

from datetime import datetime
from typing import Annotated

from pydantic import Field, StringConstraints

from encore.shared.models.collection import Collection
from encore.shared.schemas.common import BaseSchema


class CollectionCreate(BaseSchema):
    """Request to create an empty collection."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)] = Field(
        description="Setlist name"
    )


class CollectionRename(CollectionCreate):
    """Request to rename a collection."""


class CollectionResponse(BaseSchema):
    """Response for a collection with its member count."""

    id: int
    name: str
    member_count: int = Field(default=0, description="Number of items in the collection")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: dict) -> "CollectionResponse":
        """Build from a {"collection", "member_count"} dict returned by the service."""
        collection: Collection = row["collection"]
        return cls(
            id=collection.id,
            name=collection.name,
            member_count=row["member_count"],
            created_at=collection.created_at,
            updated_at=collection.updated_at,
        )
