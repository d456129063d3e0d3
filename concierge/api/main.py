"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, concierge.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from concierge.api.deps.dependencies import get_service_cache
from concierge.boundary.db.connection import get_async_engine
from concierge.configs import get_settings
from concierge.observability import configure_logging
from .routers import chat_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Warms the chat model on startup; disposes the engine pool on shutdown.
    """
    cache = get_service_cache()
    if cache.chat_model is None:
        logger.warning("Starting without a chat model; POST /chat will return 500")

    yield

    cache.clear()
    await get_async_engine().dispose()
    logger.info("Service cache cleared and database pool disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Lending Concierge Chat API",
        description="Borrower chat assistant with persisted chat sessions",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "concierge.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
