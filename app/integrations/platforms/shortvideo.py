import logging

from app.core.enums import FailureReason, PlatformName
from app.integrations.base import PlatformAdapter, SyncContext, SyncFailure, SyncOutcome, SyncSuccess
from app.integrations.rate_limiter import RateLimiter
from app.schemas.product import Product

logger = logging.getLogger(__name__)


class ShortVideoPlatform(PlatformAdapter):
    platform = PlatformName.SHORTVIDEO

    def __init__(self, rate_limiter: RateLimiter, latency: float = 0.0):
        super().__init__(latency)
        self.rate_limiter = rate_limiter

    async def sync(self, product: Product, context: SyncContext) -> SyncOutcome:
        await self._simulate_latency()

        # No await between the quota check and the success result
        if not self.rate_limiter.try_acquire():
            retry_after = self.rate_limiter.time_until_reset().total_seconds()
            logger.warning(f"Short-video quota exhausted, retry in {retry_after:.1f}s")
            return SyncFailure(
                reason=FailureReason.RATE_LIMITED,
                message="Rate limit exceeded",
                retryable=True,
                retry_after=retry_after,
            )

        return SyncSuccess(
            external_id=f"shortvideo_{product.id}",
            message="Product synced to short-video platform successfully",
        )
