"""
Membership-related Pydantic schemas.

Reorder Payload:
================
    PUT /collections/{id}/members/reorder
    {
        "members": [
            {"itemId": 9, "position": 0},
            {"itemId": 7, "position": 1}
        ]
    }

Positions are sort keys: the service receives the item ids sorted by
position and assigns 0..N-1 itself. They must be distinct and >= 0.
"""

from datetime import datetime
from typing import List

from pydantic import Field, field_validator

from encore.shared.models.enums import FontSize, TextAlign
from encore.shared.models.membership import Membership
from encore.shared.schemas.common import MAX_ID, BaseSchema


class AddMemberRequest(BaseSchema):
    """Request to append an item to a collection."""

    item_id: int = Field(gt=0, le=MAX_ID, description="Id of the item to add")


class ReorderEntry(BaseSchema):
    """One member's place in a reorder request."""

    item_id: int = Field(gt=0, le=MAX_ID)
    position: int = Field(ge=0)


class ReorderRequest(BaseSchema):
    """Full new ordering of a collection."""

    members: List[ReorderEntry] = Field(min_length=1)

    @field_validator("members")
    @classmethod
    def positions_distinct(cls, members: List[ReorderEntry]) -> List[ReorderEntry]:
        positions = [m.position for m in members]
        if len(set(positions)) != len(positions):
            raise ValueError("positions must be distinct")
        return members

    def ordering(self) -> List[int]:
        """Item ids sorted by their requested position."""
        return [m.item_id for m in sorted(self.members, key=lambda m: m.position)]


class MemberResponse(BaseSchema):
    """An item as it appears inside a collection."""

    id: int
    title: str
    body: str
    text_align: TextAlign
    font_size: FontSize
    created_at: datetime
    position: int
    added_at: datetime

    @classmethod
    def from_membership(cls, membership: Membership) -> "MemberResponse":
        item = membership.item
        return cls(
            id=item.id,
            title=item.title,
            body=item.body,
            text_align=item.text_align,
            font_size=item.font_size,
            created_at=item.created_at,
            position=membership.position,
            added_at=membership.added_at,
        )
