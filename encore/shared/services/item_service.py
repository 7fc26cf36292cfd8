"""
Item service.
Business logic for catalog items (songs).

Deleting an item removes it from every collection through ON DELETE CASCADE.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from encore.shared.core.exceptions import ItemNotFoundError
from encore.shared.core.logging import logger
from encore.shared.models.enums import FontSize, TextAlign
from encore.shared.models.item import Item
from encore.shared.repositories.item_repository import ItemRepository


class ItemService:
    """Service for catalog item business logic."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.item_repo = ItemRepository(session)

    async def list_items(self) -> List[Item]:
        """All items, newest first."""
        return await self.item_repo.list_newest_first()

    async def get_item(self, item_id: int) -> Item:
        """
        Get an item by id.

        Raises:
            ItemNotFoundError: If the item does not exist
        """
        item = await self.item_repo.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    async def create_item(
        self,
        title: str,
        body: str,
        text_align: TextAlign = TextAlign.LEFT,
        font_size: FontSize = FontSize.MEDIUM,
    ) -> Item:
        """
        Add an item to the catalog.

        Returns:
            The created Item
        """
        item = await self.item_repo.create(
            title=title,
            body=body,
            text_align=text_align,
            font_size=font_size,
        )
        logger.info("Item created", item_id=item.id)
        return item

    async def update_item(
        self,
        item_id: int,
        title: str,
        body: str,
        text_align: Optional[TextAlign] = None,
        font_size: Optional[FontSize] = None,
    ) -> Item:
        """
        Replace an item's content.

        Formatting fields left as None keep their current value.

        Raises:
            ItemNotFoundError: If the item does not exist
        """
        item = await self.item_repo.update(
            item_id,
            title=title,
            body=body,
            text_align=text_align,
            font_size=font_size,
        )
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    async def delete_item(self, item_id: int) -> None:
        """
        Delete an item and its memberships.

        Raises:
            ItemNotFoundError: If the item does not exist
        """
        if not await self.item_repo.delete(item_id):
            raise ItemNotFoundError(item_id)
        logger.info("Item deleted", item_id=item_id)
