"""
Membership Service

Business rules for the ordered membership of items in collections.

Service Pattern:
================
    membership_handler → MembershipService → MembershipRepository
                                          ↘ CollectionRepository / ItemRepository
                                            (existence checks)

Rules enforced here:
====================
- Collection and item must exist before membership is touched
- An item joins a collection at most once, always at the tail
- A reorder must name every current member exactly once; otherwise the
  whole reorder is rejected and nothing is written
- After a successful reorder positions are exactly 0..N-1

Removal leaves a gap in the positions. The gap is invisible to readers
(members are always returned sorted) and is closed by the next reorder.
"""

from collections import Counter
from typing import List, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from encore.shared.core.exceptions import (
    AlreadyMemberError,
    CollectionNotFoundError,
    ConflictError,
    ConstraintViolationError,
    ItemNotFoundError,
    MembershipNotFoundError,
    OrderingMismatchError,
)
from encore.shared.core.logging import logger
from encore.shared.models.membership import Membership
from encore.shared.repositories.collection_repository import CollectionRepository
from encore.shared.repositories.item_repository import ItemRepository
from encore.shared.repositories.membership_repository import MembershipRepository


class MembershipService:
    """
    Service for collection membership business logic.

    Attributes:
        session: Database session
        collections: CollectionRepository instance
        items: ItemRepository instance
        memberships: MembershipRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize MembershipService.

        Args:
            session: Async database session
        """
        self.session = session
        self.collections = CollectionRepository(session)
        self.items = ItemRepository(session)
        self.memberships = MembershipRepository(session)

    async def _require_collection(self, collection_id: int) -> None:
        if not await self.collections.exists(collection_id):
            raise CollectionNotFoundError(collection_id)

    async def _require_item(self, item_id: int) -> None:
        if not await self.items.exists(item_id):
            raise ItemNotFoundError(item_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_members(self, collection_id: int) -> List[Membership]:
        """
        Get the members of a collection in order.

        Args:
            collection_id: Collection id

        Returns:
            Memberships (with Item loaded) sorted by ascending position

        Raises:
            CollectionNotFoundError: If the collection does not exist
        """
        await self._require_collection(collection_id)
        return await self.memberships.list_ordered(collection_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # ADD / REMOVE
    # ═══════════════════════════════════════════════════════════════════════════

    async def add_to_collection(self, collection_id: int, item_id: int) -> Membership:
        """
        Append an item to the end of a collection.

        Args:
            collection_id: Collection id
            item_id: Item id

        Returns:
            The new Membership with its Item loaded

        Raises:
            CollectionNotFoundError: If the collection does not exist
            ItemNotFoundError: If the item does not exist
            AlreadyMemberError: If the item is already in the collection
            ConflictError: If a concurrent write took the tail position first
        """
        await self._require_collection(collection_id)
        await self._require_item(item_id)

        if await self.memberships.exists(collection_id, item_id):
            raise AlreadyMemberError(collection_id, item_id)

        try:
            membership = await self.memberships.insert(collection_id, item_id)
        except ConstraintViolationError as e:
            # Lost a race with another writer; work out which one
            if await self.memberships.exists(collection_id, item_id):
                raise AlreadyMemberError(collection_id, item_id) from e
            raise ConflictError(
                "Collection was modified concurrently, please retry",
                details={"collection_id": collection_id, "item_id": item_id},
            ) from e

        logger.info(
            "Item added to collection",
            collection_id=collection_id,
            item_id=item_id,
            position=membership.position,
        )
        return membership

    async def remove_from_collection(self, collection_id: int, item_id: int) -> None:
        """
        Remove an item from a collection.

        Remaining members keep their relative order.

        Raises:
            CollectionNotFoundError: If the collection does not exist
            ItemNotFoundError: If the item does not exist
            MembershipNotFoundError: If the item is not in the collection
        """
        await self._require_collection(collection_id)
        await self._require_item(item_id)

        if not await self.memberships.remove(collection_id, item_id):
            raise MembershipNotFoundError(collection_id, item_id)

        logger.info(
            "Item removed from collection",
            collection_id=collection_id,
            item_id=item_id,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # REORDER
    # ═══════════════════════════════════════════════════════════════════════════

    async def reorder(self, collection_id: int, ordering: Sequence[int]) -> List[Membership]:
        """
        Replace the order of a collection.

        Args:
            collection_id: Collection id
            ordering: Every member's item id, in the desired order

        Returns:
            The members in their new order, positions 0..N-1

        Raises:
            CollectionNotFoundError: If the collection does not exist
            OrderingMismatchError: If ordering has duplicates, misses a member,
                or names an item that is not a member
        """
        await self._require_collection(collection_id)

        requested = list(ordering)
        current = await self.memberships.member_ids(collection_id)

        duplicates = sorted(item_id for item_id, n in Counter(requested).items() if n > 1)
        if duplicates:
            raise OrderingMismatchError(
                "Ordering lists an item more than once",
                details={"duplicate_item_ids": duplicates},
            )

        missing = sorted(set(current) - set(requested))
        unknown = sorted(set(requested) - set(current))
        if missing or unknown:
            raise OrderingMismatchError(
                details={"missing_item_ids": missing, "unknown_item_ids": unknown},
            )

        try:
            await self.memberships.set_positions(
                collection_id,
                [(item_id, index) for index, item_id in enumerate(requested)],
            )
        except ConstraintViolationError as e:
            # Membership changed between the read above and the update
            raise ConflictError(
                "Collection was modified concurrently, please retry",
                details={"collection_id": collection_id},
            ) from e

        logger.info(
            "Collection reordered",
            collection_id=collection_id,
            size=len(requested),
        )
        return await self.memberships.list_ordered(collection_id)
