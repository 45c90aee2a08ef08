"""
FastAPI dependency providers.

Everything here reads the objects built once in the application lifespan
(`app.state`), so a request never creates its own rate limiter or credential
store. Tests replace these through `app.dependency_overrides`.
"""

from fastapi import Depends, Request

from app.integrations.credentials import CredentialStore
from app.integrations.rate_limiter import RateLimiter
from app.services.product_service import ProductService
from app.services.sync_service import SyncOrchestrator
from app.store.json_store import ProductStore


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limiter


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credentials


def get_orchestrator(request: Request) -> SyncOrchestrator:
    return request.app.state.orchestrator


def get_product_service(
    request: Request,
    store: ProductStore = Depends(get_store),
) -> ProductService:
    return ProductService(store, clock=request.app.state.clock)
