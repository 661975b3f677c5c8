"""
Item catalog endpoints.
Design: public reads, owner-only writes; thin controller over ItemService.
"""

from fastapi import APIRouter, status

from rentkaro.core.dependencies import CurrentUserId
from rentkaro.db.repositories.item_repository import ItemRepository
from rentkaro.db.session import DbSession
from rentkaro.schemas.base import CreatedResponse, OkResponse
from rentkaro.schemas.item import ItemCreate, ItemEnvelope, ItemListResponse, ItemUpdate
from rentkaro.services.item_service import ItemService

router = APIRouter()


def _get_item_service(session: DbSession) -> ItemService:
    return ItemService(ItemRepository(session))


@router.get("", response_model=ItemListResponse)
async def list_items(session: DbSession):
    """Whole catalog, newest first."""
    return ItemListResponse(items=await _get_item_service(session).list_items())


@router.get("/{item_id}", response_model=ItemEnvelope)
async def get_item(session: DbSession, item_id: int):
    return ItemEnvelope(item=await _get_item_service(session).get(item_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_item(session: DbSession, data: ItemCreate, user_id: CurrentUserId):
    """List a new item owned by the caller."""
    return CreatedResponse(id=await _get_item_service(session).create(user_id, data))


@router.patch("/{item_id}", response_model=OkResponse)
async def update_item(session: DbSession, item_id: int, data: ItemUpdate, user_id: CurrentUserId):
    await _get_item_service(session).update(user_id, item_id, data)
    return OkResponse()


@router.delete("/{item_id}", response_model=OkResponse)
async def delete_item(session: DbSession, item_id: int, user_id: CurrentUserId):
    await _get_item_service(session).delete(user_id, item_id)
    return OkResponse()
