"""
Collection service.
Business logic for collection (setlist) catalog operations.

Membership and ordering live in MembershipService; this service only
creates, renames, lists and deletes the collections themselves.
Deleting a collection removes its memberships through ON DELETE CASCADE.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from encore.shared.core.exceptions import CollectionNotFoundError
from encore.shared.core.logging import logger
from encore.shared.repositories.collection_repository import CollectionRepository


class CollectionService:
    """Service for collection-related business logic."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.collection_repo = CollectionRepository(session)

    async def list_collections(self) -> List[dict]:
        """
        Get all collections with member counts, newest first.

        Returns:
            List of dicts with collection and member_count
        """
        return await self.collection_repo.list_with_member_counts()

    async def get_collection(self, collection_id: int) -> dict:
        """
        Get a collection with its member count.

        Raises:
            CollectionNotFoundError: If the collection does not exist
        """
        result = await self.collection_repo.get_with_member_count(collection_id)
        if result is None:
            raise CollectionNotFoundError(collection_id)
        return result

    async def create_collection(self, name: str) -> dict:
        """
        Create an empty collection.

        Args:
            name: Display name (already trimmed by the request schema)

        Returns:
            Dict with collection and member_count (always 0)
        """
        collection = await self.collection_repo.create(name=name)
        logger.info("Collection created", collection_id=collection.id)
        return {"collection": collection, "member_count": 0}

    async def rename_collection(self, collection_id: int, name: str) -> dict:
        """
        Rename a collection.

        Raises:
            CollectionNotFoundError: If the collection does not exist
        """
        collection = await self.collection_repo.update(collection_id, name=name)
        if collection is None:
            raise CollectionNotFoundError(collection_id)
        return await self.get_collection(collection_id)

    async def delete_collection(self, collection_id: int) -> None:
        """
        Delete a collection and, by cascade, all of its memberships.

        Raises:
            CollectionNotFoundError: If the collection does not exist
        """
        if not await self.collection_repo.delete(collection_id):
            raise CollectionNotFoundError(collection_id)
        logger.info("Collection deleted", collection_id=collection_id)
