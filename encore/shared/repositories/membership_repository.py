"""
Membership Repository

Durable storage for the ordered (collection, item, position) rows.

This repository owns the two position algorithms:

Tail Insertion:
===============
    INSERT INTO collection_memberships (collection_id, item_id, position)
    SELECT :collection_id, :item_id, COALESCE(MAX(position) + 1, 0)
    FROM collection_memberships
    WHERE collection_id = :collection_id

    The max and the insert are one statement, so a concurrent writer can
    not slip a row in between them. If two inserts still race to the same
    position, UNIQUE (collection_id, position) rejects the second one.

Bulk Position Update:
=====================
    Rewriting positions row by row would collide with the UNIQUE
    (collection_id, position) constraint halfway through (moving C to 0
    while A still holds 0). The update therefore runs in two phases
    inside one SAVEPOINT:

        1. every affected row moves to -(position + 1)   ← disjoint, negative
        2. each row gets its target position

    Any failure rolls the savepoint back, so either every row has its new
    position or every row keeps its old one.

Removal:
========
    remove() only deletes the row. It leaves a gap in the positions which
    the next reorder closes; ordered reads are unaffected.
"""

from typing import Iterable, List, Optional, Tuple

from sqlalchemy import Integer, delete, func, insert, literal, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager
from sqlalchemy.sql.functions import count as sql_count

from encore.shared.core.exceptions import ConstraintViolationError
from encore.shared.core.logging import get_logger
from encore.shared.models.membership import Membership


log = get_logger("encore.repositories.membership")


class MembershipRepository:
    """
    Repository for Membership rows.

    Membership has a composite key, so this repository does not derive from
    BaseRepository. All methods are scoped to one collection.

    Attributes:
        session: Async database session
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize MembershipRepository.

        Args:
            session: Async database session
        """
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def _ordered_query(self, collection_id: int):
        # populate_existing: positions may have been rewritten by a bulk UPDATE
        # after the rows were first loaded into this session
        return (
            select(Membership)
            .join(Membership.item)
            .options(contains_eager(Membership.item))
            .where(Membership.collection_id == collection_id)
            .order_by(Membership.position.asc(), Membership.item_id.asc())
            .execution_options(populate_existing=True)
        )

    async def list_ordered(self, collection_id: int) -> List[Membership]:
        """
        Get the members of a collection in position order.

        Each Membership has its Item loaded. An empty collection yields
        an empty list.

        Args:
            collection_id: Collection id

        Returns:
            List of Membership ordered by ascending position
        """
        result = await self.session.execute(self._ordered_query(collection_id))
        return list(result.scalars().all())

    async def get(self, collection_id: int, item_id: int) -> Optional[Membership]:
        """
        Get a single membership with its Item loaded.

        Returns:
            Membership if the item is in the collection, None otherwise
        """
        result = await self.session.execute(
            self._ordered_query(collection_id).where(Membership.item_id == item_id)
        )
        return result.scalar_one_or_none()

    async def exists(self, collection_id: int, item_id: int) -> bool:
        """Check whether the item is a member of the collection."""
        result = await self.session.execute(
            select(sql_count())
            .select_from(Membership)
            .where(
                Membership.collection_id == collection_id,
                Membership.item_id == item_id,
            )
        )
        return (result.scalar() or 0) > 0

    async def member_ids(self, collection_id: int) -> List[int]:
        """
        Get the item ids of a collection in position order.

        Returns:
            List of item ids
        """
        result = await self.session.execute(
            select(Membership.item_id)
            .where(Membership.collection_id == collection_id)
            .order_by(Membership.position.asc())
        )
        return list(result.scalars().all())

    async def count(self, collection_id: int) -> int:
        """Count the members of a collection."""
        result = await self.session.execute(
            select(sql_count())
            .select_from(Membership)
            .where(Membership.collection_id == collection_id)
        )
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def insert(self, collection_id: int, item_id: int) -> Membership:
        """
        Append an item at the tail of a collection.

        Args:
            collection_id: Collection id
            item_id: Item id

        Returns:
            The new Membership with its Item loaded

        Raises:
            ConstraintViolationError: The membership or its position already
                exists, or a referenced row is missing
        """
        next_position = func.coalesce(func.max(Membership.position) + 1, 0)
        source = select(
            literal(collection_id, Integer),
            literal(item_id, Integer),
            next_position,
        ).where(Membership.collection_id == collection_id)

        stmt = insert(Membership.__table__).from_select(
            ["collection_id", "item_id", "position"],
            source,
        )

        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            log.info(
                "Membership insert rejected",
                collection_id=collection_id,
                item_id=item_id,
                error=str(e.orig),
            )
            raise ConstraintViolationError(
                "Membership could not be inserted",
                details={"collection_id": collection_id, "item_id": item_id},
            ) from e

        membership = await self.get(collection_id, item_id)
        if membership is None:
            raise ConstraintViolationError(
                "Membership could not be read back after insert",
                details={"collection_id": collection_id, "item_id": item_id},
            )
        return membership

    async def remove(self, collection_id: int, item_id: int) -> bool:
        """
        Delete a membership. Remaining positions are left untouched.

        Returns:
            True if a row was deleted, False if there was none
        """
        result = await self.session.execute(
            delete(Membership)
            .where(
                Membership.collection_id == collection_id,
                Membership.item_id == item_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def set_positions(
        self,
        collection_id: int,
        positions: Iterable[Tuple[int, int]],
    ) -> None:
        """
        Overwrite the position of exactly the given members, all-or-nothing.

        Args:
            collection_id: Collection id
            positions: (item_id, position) pairs

        Raises:
            ConstraintViolationError: A given item is not a member, or a target
                position collides with another row. Nothing is changed.
        """
        targets = list(positions)
        if not targets:
            return

        item_ids = [item_id for item_id, _ in targets]

        try:
            async with self.session.begin_nested():
                # Phase 1: park the affected rows on distinct negative positions
                await self.session.execute(
                    update(Membership)
                    .where(
                        Membership.collection_id == collection_id,
                        Membership.item_id.in_(item_ids),
                    )
                    .values(position=-Membership.position - 1)
                    .execution_options(synchronize_session=False)
                )

                # Phase 2: write the final positions
                for item_id, position in targets:
                    result = await self.session.execute(
                        update(Membership)
                        .where(
                            Membership.collection_id == collection_id,
                            Membership.item_id == item_id,
                        )
                        .values(position=position)
                        .execution_options(synchronize_session=False)
                    )
                    if result.rowcount != 1:
                        raise ConstraintViolationError(
                            "Cannot position an item that is not a member",
                            details={"collection_id": collection_id, "item_id": item_id},
                        )
        except IntegrityError as e:
            log.warning(
                "Position update rejected",
                collection_id=collection_id,
                error=str(e.orig),
            )
            raise ConstraintViolationError(
                "Position update violates collection ordering",
                details={"collection_id": collection_id},
            ) from e
