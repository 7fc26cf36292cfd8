"""
Collection handler.
Handles collection (setlist) CRUD.

ARCHITECTURE NOTE:
This handler follows the proper layered architecture:
  Handler → Service → Repository → Model

Membership of a collection is served by membership_handler.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from encore.api.dependencies.services import get_collection_service
from encore.shared.schemas.common import MAX_ID
from encore.shared.schemas.collection import (
    CollectionCreate,
    CollectionRename,
    CollectionResponse,
)
from encore.shared.services.collection_service import CollectionService

router = APIRouter()


@router.get("", response_model=List[CollectionResponse])
async def list_collections(
    collection_service: CollectionService = Depends(get_collection_service),
):
    """
    List collections.

    Returns every collection with its member count, newest first.
    """
    rows = await collection_service.list_collections()
    return [CollectionResponse.from_row(row) for row in rows]


@router.post("", response_model=CollectionResponse, status_code=status.HTTP_201_CREATED)
async def create_collection(
    data: CollectionCreate,
    collection_service: CollectionService = Depends(get_collection_service),
):
    """Create an empty collection."""
    row = await collection_service.create_collection(data.name)
    return CollectionResponse.from_row(row)


@router.get("/{collection_id}", response_model=CollectionResponse)
async def get_collection(
    collection_id: int = Path(gt=0, le=MAX_ID),
    collection_service: CollectionService = Depends(get_collection_service),
):
    """Get a collection with its member count."""
    row = await collection_service.get_collection(collection_id)
    return CollectionResponse.from_row(row)


@router.put("/{collection_id}", response_model=CollectionResponse)
async def rename_collection(
    data: CollectionRename,
    collection_id: int = Path(gt=0, le=MAX_ID),
    collection_service: CollectionService = Depends(get_collection_service),
):
    """Rename a collection."""
    row = await collection_service.rename_collection(collection_id, data.name)
    return CollectionResponse.from_row(row)


@router.delete(
    "/{collection_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_collection(
    collection_id: int = Path(gt=0, le=MAX_ID),
    collection_service: CollectionService = Depends(get_collection_service),
):
    """
    Delete a collection.

    Its memberships go with it; the items stay in the catalog.
    """
    await collection_service.delete_collection(collection_id)
