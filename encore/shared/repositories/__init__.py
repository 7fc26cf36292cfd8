"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD for integer-keyed entities
         │
         ├── ItemRepository             ← Catalog items (songs)
         └── CollectionRepository       ← Collections (setlists) with member counts

    MembershipRepository                ← Ordered membership rows (composite key)

Usage Example:
==============
    from encore.shared.repositories import CollectionRepository, MembershipRepository

    async def first_member(db: AsyncSession, collection_id: int):
        if not await CollectionRepository(db).exists(collection_id):
            return None
        members = await MembershipRepository(db).list_ordered(collection_id)
        return members[0] if members else None
"""

from encore.shared.repositories.base import BaseRepository
from encore.shared.repositories.item_repository import ItemRepository
from encore.shared.repositories.collection_repository import CollectionRepository
from encore.shared.repositories.membership_repository import MembershipRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "ItemRepository",
    "CollectionRepository",
    "MembershipRepository",
]
