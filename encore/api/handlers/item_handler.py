"""
Item handler.
Catalog CRUD for items (songs).

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from encore.api.dependencies.services import get_item_service
from encore.shared.schemas.common import MAX_ID
from encore.shared.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from encore.shared.services.item_service import ItemService

router = APIRouter()


@router.get("", response_model=List[ItemResponse])
async def list_items(
    item_service: ItemService = Depends(get_item_service),
):
    """List catalog items, newest first."""
    items = await item_service.list_items()
    return [ItemResponse.model_validate(item) for item in items]


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    data: ItemCreate,
    item_service: ItemService = Depends(get_item_service),
):
    """Add an item to the catalog."""
    item = await item_service.create_item(
        title=data.title,
        body=data.body,
        text_align=data.text_align,
        font_size=data.font_size,
    )
    return ItemResponse.model_validate(item)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: int = Path(gt=0, le=MAX_ID),
    item_service: ItemService = Depends(get_item_service),
):
    """Get a single item."""
    item = await item_service.get_item(item_id)
    return ItemResponse.model_validate(item)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    data: ItemUpdate,
    item_id: int = Path(gt=0, le=MAX_ID),
    item_service: ItemService = Depends(get_item_service),
):
    """
    Replace an item's title and body.

    Formatting fields left out of the request keep their current value.
    """
    item = await item_service.update_item(
        item_id,
        title=data.title,
        body=data.body,
        text_align=data.text_align,
        font_size=data.font_size,
    )
    return ItemResponse.model_validate(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_item(
    item_id: int = Path(gt=0, le=MAX_ID),
    item_service: ItemService = Depends(get_item_service),
):
    """Delete an item. It is removed from every collection that contains it."""
    await item_service.delete_item(item_id)
