"""
Base Repository

This module provides a generic base repository with common CRUD operations
for entities keyed by an integer surrogate id. Catalog repositories inherit
from this class; MembershipRepository (composite key) does not.

What This Provides:
===================
- get(id)        → Fetch single record by id
- list()         → List records ordered by a column
- exists()       → Check if record exists
- create()       → Create new record
- update()       → Update existing record
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class ItemRepository(BaseRepository[Item]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(Item, session)

    repo = ItemRepository(db)
    item = await repo.get(7)  # Returns Item, not Any

flush() vs commit():
====================
- flush(): Sends SQL to database but doesn't commit transaction
  - Changes are visible within the same session
  - Can be rolled back if error occurs later

- commit(): Permanently saves all changes
  - Called by get_db() after the request handler completes
  - Repository methods only flush, the request owns the transaction
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from encore.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., Item, Collection)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by its id.

        Args:
            record_id: Primary key of the record

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM items WHERE id = 7
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def list(
        self,
        *,
        order_by: Optional[str] = None,
        order_desc: bool = True,
    ) -> list[ModelType]:
        """
        List all records, optionally ordered by a column.

        The id is used as a secondary sort key so rows created within the
        same timestamp still come back in a stable order.

        Args:
            order_by: Field name to order results by
            order_desc: If True, order descending; if False, ascending

        Returns:
            List of model instances
        """
        query = select(self.model)

        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            query = query.order_by(order_field.desc() if order_desc else order_field)
        query = query.order_by(self.model.id.desc() if order_desc else self.model.id)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def exists(self, record_id: int) -> bool:
        """
        Check if a record exists without loading it.

        Args:
            record_id: The id to check

        Returns:
            True if record exists, False otherwise

        SQL Generated:
            SELECT COUNT(*) FROM collections WHERE id = 3
        """
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Flushes to obtain the generated id and refreshes to load server
        defaults (timestamps).

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: int,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Update a record by id.

        Only updates fields that are provided and not None.

        Args:
            record_id: Id of the record to update
            **kwargs: Fields to update (None values are ignored)

        Returns:
            Updated model instance, or None if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field) and value is not None:
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: int) -> bool:
        """
        Hard delete a record by id.

        Dependent membership rows are removed by the database
        (ON DELETE CASCADE).

        Args:
            record_id: Id of the record to delete

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
