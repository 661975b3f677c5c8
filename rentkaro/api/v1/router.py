"""
API v1 router - aggregates all endpoint modules.
"""

from fastapi import APIRouter

from rentkaro.api.v1.endpoints import auth, health, history, items, payments, rentals

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(history.router, prefix="/history", tags=["history"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
api_router.include_router(rentals.router, prefix="/rentals", tags=["rentals"])
api_router.include_router(payments.router, prefix="/pay", tags=["payments"])
