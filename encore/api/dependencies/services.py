"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from encore.api.dependencies.services import get_membership_service

    @router.put("/reorder")
    async def reorder(
        data: ReorderRequest,
        service: MembershipService = Depends(get_membership_service)
    ):
        return await service.reorder(collection_id, data.ordering())
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from encore.api.dependencies.database import get_db
from encore.shared.services.collection_service import CollectionService
from encore.shared.services.item_service import ItemService
from encore.shared.services.membership_service import MembershipService


async def get_item_service(
    db: AsyncSession = Depends(get_db),
) -> ItemService:
    """
    Dependency to get ItemService instance.

    Creates a new service instance per request with the request's db session.
    """
    return ItemService(db)


async def get_collection_service(
    db: AsyncSession = Depends(get_db),
) -> CollectionService:
    """
    Dependency to get CollectionService instance.
    """
    return CollectionService(db)


async def get_membership_service(
    db: AsyncSession = Depends(get_db),
) -> MembershipService:
    """
    Dependency to get MembershipService instance.
    """
    return MembershipService(db)
