"""
Database Dependency

FastAPI dependency for database sessions.

This module provides the get_db dependency that yields async database sessions
to route handlers. The session is automatically committed on success and
rolled back on error.

Usage:
======
    from fastapi import Depends
    from sqlalchemy.ext.asyncio import AsyncSession
    from encore.api.dependencies.database import get_db, DbSession

    # Using type alias (recommended)
    @router.get("/items")
    async def list_items(db: DbSession):
        repo = ItemRepository(db)
        return await repo.list()

    # Using explicit Depends
    @router.get("/items/{id}")
    async def get_item(id: int, db: AsyncSession = Depends(get_db)):
        repo = ItemRepository(db)
        return await repo.get(id)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from encore.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields an async database session for the duration of the request.
    The session is automatically:
    - Committed on success
    - Rolled back on exception
    - Closed after the request

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
