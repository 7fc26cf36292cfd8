"""
Membership repository tests.

Covers tail insertion, the two-phase bulk position update and its
all-or-nothing behaviour on SQLite (savepoints + foreign keys enabled).
"""

import pytest

from encore.shared.core.exceptions import ConstraintViolationError
from encore.shared.repositories import MembershipRepository


@pytest.fixture
def repo(session):
    return MembershipRepository(session)


def _ids(memberships):
    return [m.item_id for m in memberships]


@pytest.mark.asyncio
async def test_insert_appends_at_tail(repo, collection, items):
    a, b, c = items

    first = await repo.insert(collection.id, a.id)
    second = await repo.insert(collection.id, b.id)
    third = await repo.insert(collection.id, c.id)

    assert [first.position, second.position, third.position] == [0, 1, 2]
    assert third.item.title == "C"
    assert third.added_at is not None


@pytest.mark.asyncio
async def test_list_ordered_empty_collection(repo, collection):
    assert await repo.list_ordered(collection.id) == []
    assert await repo.count(collection.id) == 0


@pytest.mark.asyncio
async def test_insert_duplicate_raises_and_keeps_session_usable(repo, collection, items):
    a = items[0]
    await repo.insert(collection.id, a.id)

    with pytest.raises(ConstraintViolationError):
        await repo.insert(collection.id, a.id)

    assert await repo.count(collection.id) == 1
    assert await repo.member_ids(collection.id) == [a.id]


@pytest.mark.asyncio
async def test_insert_unknown_item_rejected_by_foreign_key(repo, collection):
    with pytest.raises(ConstraintViolationError):
        await repo.insert(collection.id, 999_999)

    assert await repo.count(collection.id) == 0


@pytest.mark.asyncio
async def test_remove_keeps_relative_order(repo, collection, items):
    a, b, c = items
    for item in items:
        await repo.insert(collection.id, item.id)

    assert await repo.remove(collection.id, b.id) is True
    assert await repo.remove(collection.id, b.id) is False

    assert _ids(await repo.list_ordered(collection.id)) == [a.id, c.id]


@pytest.mark.asyncio
async def test_insert_after_remove_goes_to_tail(repo, collection, items):
    a, b, c = items
    for item in items:
        await repo.insert(collection.id, item.id)

    await repo.remove(collection.id, b.id)
    await repo.insert(collection.id, b.id)

    assert _ids(await repo.list_ordered(collection.id)) == [a.id, c.id, b.id]


@pytest.mark.asyncio
async def test_set_positions_rotates_without_unique_violation(repo, collection, items):
    a, b, c = items
    for item in items:
        await repo.insert(collection.id, item.id)

    # C takes A's position while A still holds it
    await repo.set_positions(collection.id, [(c.id, 0), (a.id, 1), (b.id, 2)])

    members = await repo.list_ordered(collection.id)
    assert _ids(members) == [c.id, a.id, b.id]
    assert [m.position for m in members] == [0, 1, 2]


@pytest.mark.asyncio
async def test_set_positions_non_member_rolls_back_everything(repo, collection, items):
    a, b, c = items
    for item in (a, b):
        await repo.insert(collection.id, item.id)

    with pytest.raises(ConstraintViolationError):
        await repo.set_positions(collection.id, [(b.id, 0), (a.id, 1), (c.id, 2)])

    members = await repo.list_ordered(collection.id)
    assert _ids(members) == [a.id, b.id]
    assert [m.position for m in members] == [0, 1]


@pytest.mark.asyncio
async def test_set_positions_collision_with_untouched_row_rolls_back(repo, collection, items):
    a, b, c = items
    for item in items:
        await repo.insert(collection.id, item.id)

    # Position 2 is held by C, which is not part of the update
    with pytest.raises(ConstraintViolationError):
        await repo.set_positions(collection.id, [(b.id, 0), (a.id, 2)])

    members = await repo.list_ordered(collection.id)
    assert _ids(members) == [a.id, b.id, c.id]
    assert [m.position for m in members] == [0, 1, 2]


@pytest.mark.asyncio
async def test_set_positions_empty_is_noop(repo, collection, items):
    await repo.insert(collection.id, items[0].id)

    await repo.set_positions(collection.id, [])

    assert await repo.member_ids(collection.id) == [items[0].id]
