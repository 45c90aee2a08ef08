# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.clock import Clock, SystemClock
from app.core.config import Settings, get_settings
from app.core.exceptions import StoreError
from app.core.logging_config import configure_logging
from app.integrations.setup import build_adapters, build_credential_store, build_rate_limiter
from app.routes import dashboard, health
from app.routes.products import router as products_router
from app.routes.sync import router as sync_router
from app.services.sync_service import SyncOrchestrator
from app.store.json_store import ProductStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Make sure the products document exists before the first request
    await app.state.store.ensure()
    logger.info(f"Product store ready at {app.state.store.path}")
    yield


def create_app(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> FastAPI:
    """
    Build the application and the process-wide sync state.

    The rate limiter and credential store live on `app.state` for the life of
    the process and are shared by every request.
    """
    settings = settings or get_settings()
    clock = clock or SystemClock()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Product Sync Service",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = ProductStore(settings.DATA_FILE)
    rate_limiter = build_rate_limiter(settings, clock)
    credentials = build_credential_store(settings, clock)
    adapters = build_adapters(settings, rate_limiter, credentials)

    app.state.settings = settings
    app.state.clock = clock
    app.state.store = store
    app.state.rate_limiter = rate_limiter
    app.state.credentials = credentials
    app.state.orchestrator = SyncOrchestrator(store, adapters, clock=clock)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.exception(f"Store failure handling {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Store unavailable", "message": str(exc)})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error", "message": str(exc)})

    app.include_router(dashboard.router, tags=["dashboard"])
    app.include_router(products_router)
    app.include_router(sync_router)
    app.include_router(health.router)  # Health check should be accessible without auth

    return app


app = create_app()
