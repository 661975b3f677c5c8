"""
Liveness and readiness checks for the load balancer.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from rentkaro.config import get_settings
from rentkaro.db.session import DbSession

logger = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(db: DbSession):
    """Ready once the database answers a trivial query."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("readiness check failed: %s", e)
        return JSONResponse(status_code=503, content={"error": "Database unavailable"})
    return {"status": "ready", "database": "ok"}
