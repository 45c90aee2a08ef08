# app/routes/sync.py
"""
API routes for pushing products to the external platforms.

This module provides endpoints for:
- Syncing one product to one platform
- Resetting the short-video rate limit window (manual override)
- Issuing photo-share access tokens

Business failures (quota, credentials, payload contract) come back as a 200
with `success: false`; only unknown products (404), unknown platforms (400)
and infrastructure errors (500) use error status codes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from app.core.enums import PlatformName
from app.core.exceptions import InvalidPlatformError, ProductNotFoundError
from app.dependencies import get_credential_store, get_orchestrator, get_rate_limiter
from app.integrations.base import SyncContext
from app.integrations.credentials import CredentialStore
from app.integrations.rate_limiter import RateLimiter
from app.schemas.sync import MessageResponse, SyncRequest, SyncResponse, TokenResponse
from app.services.sync_service import SyncOrchestrator

router = APIRouter(prefix="/api", tags=["sync"])

logger = logging.getLogger(__name__)


@router.post("/sync/{platform}/{product_id}", response_model=SyncResponse)
async def sync_product(
    platform: str,
    product_id: str,
    body: Optional[SyncRequest] = None,
    orchestrator: SyncOrchestrator = Depends(get_orchestrator),
):
    """Sync a product to a platform and return the recorded status"""
    context = SyncContext(token=body.token if body else None)
    try:
        return await orchestrator.sync_product(product_id, platform, context)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    except InvalidPlatformError:
        raise HTTPException(status_code=400, detail="Invalid platform")


@router.post("/ratelimit/{platform}/reset", response_model=MessageResponse)
async def reset_rate_limit(platform: str, rate_limiter: RateLimiter = Depends(get_rate_limiter)):
    if PlatformName.from_slug(platform) != PlatformName.SHORTVIDEO:
        raise HTTPException(status_code=400, detail=f"Platform {platform} is not rate limited")
    rate_limiter.reset()
    logger.info("Short-video rate limit reset via API")
    return MessageResponse(message="Short-video rate limit reset")


@router.post("/credential/issue", response_model=TokenResponse)
async def issue_credential(credentials: CredentialStore = Depends(get_credential_store)):
    token = credentials.issue()
    # Milliseconds, as the UI has always expected
    expires_in = int(credentials.expiry.total_seconds() * 1000)
    return TokenResponse(token=token, expires_in=expires_in)


# Endpoints the first version of the UI called
@router.post("/tiktok/reset", response_model=MessageResponse, include_in_schema=False)
async def legacy_reset_rate_limit(rate_limiter: RateLimiter = Depends(get_rate_limiter)):
    return await reset_rate_limit(PlatformName.SHORTVIDEO.value, rate_limiter)


@router.post("/instagram/token", response_model=TokenResponse, include_in_schema=False)
async def legacy_issue_credential(credentials: CredentialStore = Depends(get_credential_store)):
    return await issue_credential(credentials)
