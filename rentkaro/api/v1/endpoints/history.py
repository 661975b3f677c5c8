"""
Browse history endpoints (authenticated).
"""

from fastapi import APIRouter, status

from rentkaro.core.dependencies import CurrentUserId
from rentkaro.db.repositories.history_repository import HistoryRepository
from rentkaro.db.session import DbSession
from rentkaro.schemas.base import CreatedResponse
from rentkaro.schemas.history import HistoryCreate, HistoryListResponse
from rentkaro.services.history_service import HistoryService

router = APIRouter()


@router.get("", response_model=HistoryListResponse)
async def list_history(session: DbSession, user_id: CurrentUserId):
    svc = HistoryService(HistoryRepository(session))
    return HistoryListResponse(history=await svc.list_for_user(user_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def record_history(session: DbSession, data: HistoryCreate, user_id: CurrentUserId):
    svc = HistoryService(HistoryRepository(session))
    return CreatedResponse(id=await svc.record(user_id, data.query, data.item_id))
