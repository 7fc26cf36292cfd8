"""
Collection Repository

Database operations for collections (setlists).

Common Operations:
==================
- get_with_member_count()      → One collection plus its member count
- list_with_member_counts()    → All collections plus member counts
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from encore.shared.models.collection import Collection
from encore.shared.models.membership import Membership
from encore.shared.repositories.base import BaseRepository


class CollectionRepository(BaseRepository[Collection]):
    """
    Repository for Collection database operations.

    Membership rows themselves are handled by MembershipRepository.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize CollectionRepository.

        Args:
            session: Async database session
        """
        super().__init__(Collection, session)

    def _with_counts(self):
        return (
            select(
                Collection,
                func.count(Membership.item_id).label("member_count"),
            )
            .outerjoin(Membership, Collection.id == Membership.collection_id)
            .group_by(Collection.id)
        )

    async def list_with_member_counts(self) -> List[dict]:
        """
        Get all collections with their member counts.

        Returns:
            List of dicts with collection and member_count, newest first
        """
        result = await self.session.execute(
            self._with_counts().order_by(Collection.created_at.desc(), Collection.id.desc())
        )
        return [
            {"collection": row.Collection, "member_count": row.member_count}
            for row in result.all()
        ]

    async def get_with_member_count(self, collection_id: int) -> Optional[dict]:
        """
        Get one collection with its member count.

        Args:
            collection_id: Collection id

        Returns:
            Dict with collection and member_count, or None if not found
        """
        result = await self.session.execute(
            self._with_counts().where(Collection.id == collection_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return {"collection": row.Collection, "member_count": row.member_count}
