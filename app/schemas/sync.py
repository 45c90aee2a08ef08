"""
Request / response bodies for the sync, rate-limit and credential endpoints.
"""

from typing import Any, Dict, Optional

from app.schemas.base import BaseSchema
from app.schemas.product import PlatformSyncStatus


class SyncRequest(BaseSchema):
    # Only the photo-share platform needs a token
    token: Optional[str] = None


class SyncResponse(BaseSchema):
    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    reason: Optional[str] = None
    retry_after: Optional[int] = None
    sync_status: Optional[PlatformSyncStatus] = None


class TokenResponse(BaseSchema):
    token: str
    expires_in: int


class MessageResponse(BaseSchema):
    message: str


class DeleteResponse(BaseSchema):
    success: bool
    message: str
