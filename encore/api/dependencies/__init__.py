"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(db: AsyncSession = Depends(get_db)):

    # Write this:
    async def handler(db: DbSession):

Usage:
======
    from encore.api.dependencies import get_membership_service

    @router.get("")
    async def list_members(
        collection_id: int,
        service: MembershipService = Depends(get_membership_service),
    ):
        return await service.list_members(collection_id)
"""

from encore.api.dependencies.database import (
    get_db,
    DbSession,
)
from encore.api.dependencies.services import (
    get_item_service,
    get_collection_service,
    get_membership_service,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Services
    "get_item_service",
    "get_collection_service",
    "get_membership_service",
]
