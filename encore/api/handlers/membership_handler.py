"""
Membership handler.
Ordered membership of items in a collection.

Routes (mounted under /collections/{collection_id}/members):
============================================================
    GET    ""            → members in order
    POST   ""            → append an item at the tail
    DELETE "/{item_id}"  → remove an item
    PUT    "/reorder"    → replace the whole ordering at once

Structural problems (non-positive ids, malformed reorder payloads) are
rejected by FastAPI/pydantic with 400 before the service is called. A
well-formed reorder that does not match the current members is rejected
by the service with 422.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from encore.api.dependencies.services import get_membership_service
from encore.shared.schemas.common import MAX_ID
from encore.shared.schemas.membership import (
    AddMemberRequest,
    MemberResponse,
    ReorderRequest,
)
from encore.shared.services.membership_service import MembershipService

router = APIRouter()


@router.get("", response_model=List[MemberResponse])
async def list_members(
    collection_id: int = Path(gt=0, le=MAX_ID),
    membership_service: MembershipService = Depends(get_membership_service),
):
    """
    List the items of a collection in order.

    Each entry is the item plus its position and when it was added.
    """
    members = await membership_service.list_members(collection_id)
    return [MemberResponse.from_membership(m) for m in members]


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
async def add_member(
    data: AddMemberRequest,
    collection_id: int = Path(gt=0, le=MAX_ID),
    membership_service: MembershipService = Depends(get_membership_service),
):
    """Append an item to the end of a collection."""
    membership = await membership_service.add_to_collection(collection_id, data.item_id)
    return MemberResponse.from_membership(membership)


@router.put("/reorder", response_model=List[MemberResponse])
async def reorder_members(
    data: ReorderRequest,
    collection_id: int = Path(gt=0, le=MAX_ID),
    membership_service: MembershipService = Depends(get_membership_service),
):
    """
    Replace the ordering of a collection.

    The request must list every current member exactly once. Positions in
    the request are only used to sort; the stored positions become 0..N-1.
    """
    members = await membership_service.reorder(collection_id, data.ordering())
    return [MemberResponse.from_membership(m) for m in members]


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def remove_member(
    collection_id: int = Path(gt=0, le=MAX_ID),
    item_id: int = Path(gt=0, le=MAX_ID),
    membership_service: MembershipService = Depends(get_membership_service),
):
    """Remove an item from a collection."""
    await membership_service.remove_from_collection(collection_id, item_id)
