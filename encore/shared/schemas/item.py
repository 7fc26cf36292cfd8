"""
Item-related Pydantic schemas.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from encore.shared.models.enums import FontSize, TextAlign
from encore.shared.schemas.common import BaseSchema


NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ItemCreate(BaseSchema):
    """Request to add an item to the catalog."""

    title: NonBlankStr = Field(description="Song title")
    body: NonBlankStr = Field(description="Lyrics or chart text")
    text_align: TextAlign = Field(default=TextAlign.LEFT, description="Body alignment")
    font_size: FontSize = Field(default=FontSize.MEDIUM, description="Body font size")


class ItemUpdate(BaseSchema):
    """
    Request to replace an item's content.

    Omitted formatting fields keep their current value.
    """

    title: NonBlankStr
    body: NonBlankStr
    text_align: Optional[TextAlign] = None
    font_size: Optional[FontSize] = None


class ItemResponse(BaseSchema):
    """Response for a catalog item."""

    id: int
    title: str
    body: str
    text_align: TextAlign
    font_size: FontSize
    created_at: datetime
