"""
Item Entity Model

A catalog entry ("song") that collections reference.

SAMPLE ITEM RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7                                                         │
│ title            │ "Wonderwall"                                              │
│ body             │ "Today is gonna be the day..."                            │
│ text_align       │ left                                                      │
│ font_size        │ M                                                         │
│ created_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum as SQLEnum, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from encore.shared.models.base import Base
from encore.shared.models.enums import FontSize, TextAlign


if TYPE_CHECKING:
    from encore.shared.models.membership import Membership


class Item(Base):
    """
    Item model - a song in the shared catalog.

    Attributes:
        id: Surrogate key assigned by the database
        title: Display title
        body: Lyrics / text content
        text_align: Display alignment of the body
        font_size: Display font size of the body
        created_at: Creation timestamp

    Relationships:
        memberships: Collections this item belongs to (deleted with the item)
    """

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(Text, nullable=False)

    body: Mapped[str] = mapped_column(Text, nullable=False)

    text_align: Mapped[TextAlign] = mapped_column(
        SQLEnum(
            TextAlign,
            native_enum=False,
            length=8,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=TextAlign.LEFT,
        server_default=TextAlign.LEFT.value,
    )

    font_size: Mapped[FontSize] = mapped_column(
        SQLEnum(
            FontSize,
            native_enum=False,
            length=4,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=FontSize.MEDIUM,
        server_default=FontSize.MEDIUM.value,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    # Rows are removed by ON DELETE CASCADE, the ORM never loads them for deletion
    memberships: Mapped[list["Membership"]] = relationship(
        "Membership",
        back_populates="item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Item(id={self.id}, title={self.title!r})>"
