"""
Item repository for data access.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from encore.shared.models.item import Item
from encore.shared.repositories.base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """Repository for Item entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Item, session)

    async def list_newest_first(self) -> list[Item]:
        """All catalog items, most recently created first."""
        return await self.list(order_by="created_at", order_desc=True)
