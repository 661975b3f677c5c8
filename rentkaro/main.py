"""
FastAPI application entry point.
Mounts routes, middleware (request id, CORS, Prometheus) and error handlers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from rentkaro.api.errors import register_exception_handlers
from rentkaro.api.v1.router import api_router
from rentkaro.cache.redis_client import close_redis
from rentkaro.config import get_settings
from rentkaro.core.logging_config import configure_logging
from rentkaro.core.middleware import RequestIDMiddleware
from rentkaro.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Shutdown: release the Redis pool and database connections."""
    logger.info("starting %s", app.title)
    yield
    await close_redis()
    await engine.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="Peer-to-peer rental marketplace: accounts, catalog, browse history, rentals and mock payments.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
