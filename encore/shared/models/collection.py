"""
Collection Entity Model

A named, ordered group of items (a "setlist").

The ordering itself lives on the membership rows, see membership.py.

SAMPLE COLLECTION RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 3                                                         │
│ name             │ "Friday acoustic set"                                     │
│ created_at       │ 2024-01-15T10:30:00Z                                      │
│ updated_at       │ 2024-01-16T14:45:30Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from encore.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from encore.shared.models.membership import Membership


class Collection(Base, TimestampMixin):
    """
    Collection model - a user-curated setlist.

    Attributes:
        id: Surrogate key assigned by the database
        name: Display name

    Relationships:
        memberships: Ordered member rows (deleted with the collection)
    """

    __tablename__ = "collections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    memberships: Mapped[list["Membership"]] = relationship(
        "Membership",
        back_populates="collection",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Membership.position",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Collection(id={self.id}, name={self.name!r})>"
