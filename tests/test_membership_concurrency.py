"""
Membership writes racing each other.

Each test commits its seed data, then drives two independent sessions
(two API requests) against the same collection. The writer that acts on
an outdated view of the membership must fail with a 409-class error and
leave the stored order alone.
"""

import pytest
import pytest_asyncio

from encore.shared.core.exceptions import (
    AlreadyMemberError,
    ConflictError,
    ConstraintViolationError,
)
from encore.shared.repositories.membership_repository import MembershipRepository
from encore.shared.services.membership_service import MembershipService


@pytest_asyncio.fixture
async def catalog(session, collection, items):
    """Committed collection and items, visible to every session."""
    await session.commit()
    return collection.id, [item.id for item in items]


async def _stored_order(session_factory, collection_id):
    async with session_factory() as check:
        members = await MembershipRepository(check).list_ordered(collection_id)
        return [(m.item_id, m.position) for m in members]


# ═══════════════════════════════════════════════════════════════════════════════
# REORDER
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_reorder_after_concurrent_removal_conflicts(session_factory, catalog, monkeypatch):
    collection_id, (a, b, c) = catalog
    async with session_factory() as setup:
        service = MembershipService(setup)
        for item_id in (a, b, c):
            await service.add_to_collection(collection_id, item_id)
        await setup.commit()

    async with session_factory() as session_a:
        service_a = MembershipService(session_a)
        seen_by_a = await service_a.memberships.member_ids(collection_id)
        await session_a.commit()

        async with session_factory() as session_b:
            await MembershipService(session_b).remove_from_collection(collection_id, b)
            await session_b.commit()

        async def outdated_member_ids(cid):
            return seen_by_a

        monkeypatch.setattr(service_a.memberships, "member_ids", outdated_member_ids)

        with pytest.raises(ConflictError) as exc_info:
            await service_a.reorder(collection_id, [c, b, a])
        await session_a.rollback()

    assert not isinstance(exc_info.value, AlreadyMemberError)
    assert exc_info.value.status_code == 409
    assert await _stored_order(session_factory, collection_id) == [(a, 0), (c, 2)]


# ═══════════════════════════════════════════════════════════════════════════════
# ADD
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_add_after_concurrent_add_of_same_item(session_factory, catalog, monkeypatch):
    collection_id, (a, _, _) = catalog

    async with session_factory() as session_b:
        await MembershipService(session_b).add_to_collection(collection_id, a)
        await session_b.commit()

    async with session_factory() as session_a:
        service_a = MembershipService(session_a)
        real_exists = service_a.memberships.exists
        checks = []

        async def exists_checked_before_b_committed(cid, item_id):
            checks.append(item_id)
            if len(checks) == 1:
                return False
            return await real_exists(cid, item_id)

        monkeypatch.setattr(service_a.memberships, "exists", exists_checked_before_b_committed)

        with pytest.raises(AlreadyMemberError):
            await service_a.add_to_collection(collection_id, a)
        await session_a.rollback()

    assert checks == [a, a]
    assert await _stored_order(session_factory, collection_id) == [(a, 0)]


@pytest.mark.asyncio
async def test_add_losing_tail_position_conflicts(session_factory, catalog, monkeypatch):
    collection_id, (a, b, _) = catalog

    async with session_factory() as setup:
        await MembershipService(setup).add_to_collection(collection_id, a)
        await setup.commit()

    async with session_factory() as session_a:
        service_a = MembershipService(session_a)

        async def tail_taken(cid, item_id):
            raise ConstraintViolationError(
                "Membership could not be inserted",
                details={"collection_id": cid, "item_id": item_id},
            )

        monkeypatch.setattr(service_a.memberships, "insert", tail_taken)

        with pytest.raises(ConflictError) as exc_info:
            await service_a.add_to_collection(collection_id, b)
        await session_a.rollback()

    assert not isinstance(exc_info.value, AlreadyMemberError)
    assert exc_info.value.details == {"collection_id": collection_id, "item_id": b}
    assert await _stored_order(session_factory, collection_id) == [(a, 0)]
