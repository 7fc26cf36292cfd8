"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Raise EncoreException subclasses for domain failures
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- ItemService: Catalog items (songs)
- CollectionService: Collections (setlists) themselves
- MembershipService: Adding, removing and reordering collection members

Usage:
======
    from encore.shared.services import MembershipService

    service = MembershipService(db)
    members = await service.reorder(collection_id, [9, 12, 7])
"""

from encore.shared.services.item_service import ItemService
from encore.shared.services.collection_service import CollectionService
from encore.shared.services.membership_service import MembershipService

__all__ = [
    "ItemService",
    "CollectionService",
    "MembershipService",
]
