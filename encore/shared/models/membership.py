"""
Membership Entity Model

Junction table linking Items to Collections at an ordinal position.

This is the many-to-many relationship table that also carries the
ordering of a collection. Constraints enforced by the schema:

    PRIMARY KEY (collection_id, item_id)     ← an item appears once per collection
    UNIQUE (collection_id, position)         ← no two members share a position
    FOREIGN KEY ... ON DELETE CASCADE        ← no membership outlives its parents

SAMPLE MEMBERSHIP RECORDS (collection 3):
┌───────────────┬─────────┬──────────┬──────────────────────┐
│ collection_id │ item_id │ position │ added_at             │
├───────────────┼─────────┼──────────┼──────────────────────┤
│ 3             │ 12      │ 0        │ 2024-01-15T10:30:00Z │
│ 3             │ 7       │ 1        │ 2024-01-15T10:31:02Z │
│ 3             │ 9       │ 3        │ 2024-01-15T10:35:40Z │  ← gap after a removal
└───────────────┴─────────┴──────────┴──────────────────────┘

Only a reorder makes positions dense (0..N-1). A removal leaves a gap and
an add appends at MAX(position)+1, so gaps persist across adds until the
next reorder. Readers only rely on ascending order.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from encore.shared.models.base import Base


if TYPE_CHECKING:
    from encore.shared.models.collection import Collection
    from encore.shared.models.item import Item


class Membership(Base):
    """
    Membership model - places an item in a collection at a position.

    Attributes:
        collection_id: The collection (part of composite PK)
        item_id: The member item (part of composite PK)
        position: Zero-based rank within the collection
        added_at: When the item joined the collection

    Relationships:
        collection: The parent collection
        item: The member item
    """

    __tablename__ = "collection_memberships"
    __table_args__ = (UniqueConstraint("collection_id", "position"),)

    # ═══════════════════════════════════════════════════════════════════════════
    # COMPOSITE PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    collection_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("collections.id", ondelete="CASCADE"),
        primary_key=True,
    )

    item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("items.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # ORDERING
    # ═══════════════════════════════════════════════════════════════════════════

    position: Mapped[int] = mapped_column(Integer, nullable=False)

    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    collection: Mapped["Collection"] = relationship(
        "Collection",
        back_populates="memberships",
    )

    item: Mapped["Item"] = relationship(
        "Item",
        back_populates="memberships",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<Membership(collection_id={self.collection_id}, "
            f"item_id={self.item_id}, position={self.position})>"
        )
