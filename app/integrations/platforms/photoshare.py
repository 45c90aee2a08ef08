"""
Photo-share platform adapter.

An expired token is not a user-facing failure: the adapter obtains a fresh
one, completes the sync and hands the new token back so the caller can replace
its stale copy. Only a missing token, or one we never issued, fails.
"""

import logging

from app.core.enums import FailureReason, PlatformName
from app.integrations.base import PlatformAdapter, SyncContext, SyncFailure, SyncOutcome, SyncSuccess
from app.integrations.credentials import CredentialStore
from app.schemas.product import Product

logger = logging.getLogger(__name__)


class PhotoSharePlatform(PlatformAdapter):
    platform = PlatformName.PHOTOSHARE

    def __init__(self, credentials: CredentialStore, latency: float = 0.0):
        super().__init__(latency)
        self.credentials = credentials

    async def sync(self, product: Product, context: SyncContext) -> SyncOutcome:
        await self._simulate_latency()

        token = context.token
        if not self.credentials.was_issued(token):
            logger.warning(f"Photo-share sync for {product.id} rejected: unknown or missing token")
            return SyncFailure(
                reason=FailureReason.AUTHENTICATION_FAILED,
                message="Authentication failed: invalid token",
                retryable=False,
            )

        new_credential = None
        if not self.credentials.is_valid(token):
            new_credential = self.credentials.refresh(token)

        return SyncSuccess(
            external_id=f"photoshare_{product.id}",
            message="Product synced to photo-share platform successfully",
            new_credential=new_credential,
        )
