"""
Sync orchestration: push one product to one platform and record the result.

The adapter call happens outside the store lock (it has simulated network
latency); only the final status write is a locked read-modify-write, and it
replaces nothing but the targeted platform's entry. Two syncs for different
platforms on the same product therefore both survive, whatever order they
finish in.
"""

import logging
import math
from typing import Dict, Optional, Union

from app.core.clock import Clock, SystemClock
from app.core.enums import PlatformName, SyncState
from app.core.exceptions import InvalidPlatformError
from app.integrations.base import PlatformAdapter, SyncContext, SyncFailure, SyncOutcome, SyncSuccess
from app.schemas.product import PlatformSyncStatus, Product
from app.schemas.sync import SyncResponse
from app.store.json_store import ProductStore

logger = logging.getLogger(__name__)


def retry_after_seconds(outcome: SyncFailure) -> Optional[int]:
    """Whole seconds for clients; never 0 so 'retry now' is not suggested while still denied"""
    if outcome.retry_after is None:
        return None
    return max(1, math.ceil(outcome.retry_after))


def describe_failure(outcome: SyncFailure) -> str:
    retry_after = retry_after_seconds(outcome)
    if retry_after is not None:
        return f"{outcome.message} (retry after {retry_after}s)"
    return outcome.message


class SyncOrchestrator:
    def __init__(
        self,
        store: ProductStore,
        adapters: Dict[PlatformName, PlatformAdapter],
        clock: Optional[Clock] = None,
    ):
        self.store = store
        self.adapters = adapters
        self.clock = clock or SystemClock()

    def resolve_platform(self, platform: Union[str, PlatformName]) -> PlatformName:
        if isinstance(platform, PlatformName):
            resolved = platform
        else:
            resolved = PlatformName.from_slug(platform)
        if resolved is None or resolved not in self.adapters:
            raise InvalidPlatformError(str(platform))
        return resolved

    async def sync_product(
        self,
        product_id: str,
        platform: Union[str, PlatformName],
        context: Optional[SyncContext] = None,
    ) -> SyncResponse:
        """
        Sync a product to a platform and persist the new status.

        Raises:
            ProductNotFoundError: Unknown product (also if it is deleted mid-sync)
            InvalidPlatformError: Unknown platform
            StoreError: The products document could not be read or written
        """
        product = await self.store.get(product_id)
        platform_name = self.resolve_platform(platform)
        adapter = self.adapters[platform_name]

        logger.info(f"Syncing product {product_id} to {platform_name.value}")
        outcome = await adapter.sync(product, context or SyncContext())

        def apply_outcome(current: Product) -> Product:
            status = self._next_status(current.sync_status.get(platform_name), outcome)
            return current.model_copy(
                update={"sync_status": current.sync_status.with_status(platform_name, status)}
            )

        updated = await self.store.mutate(product_id, apply_outcome)
        status = updated.sync_status.get(platform_name)

        if isinstance(outcome, SyncSuccess):
            logger.info(f"Product {product_id} synced to {platform_name.value} as {outcome.external_id}")
            data = {"externalId": outcome.external_id, "message": outcome.message}
            if outcome.new_credential:
                data["newCredential"] = outcome.new_credential
            return SyncResponse(success=True, data=data, sync_status=status)

        logger.warning(
            f"Sync of product {product_id} to {platform_name.value} failed: {outcome.reason.value}"
        )
        return SyncResponse(
            success=False,
            error=status.error,
            reason=outcome.reason.value,
            retry_after=retry_after_seconds(outcome),
            sync_status=status,
        )

    def _next_status(self, previous: PlatformSyncStatus, outcome: SyncOutcome) -> PlatformSyncStatus:
        if isinstance(outcome, SyncSuccess):
            return PlatformSyncStatus(
                state=SyncState.SUCCESS,
                error=None,
                last_success_at=self.clock.now(),
            )
        # A failure keeps the last known good sync time
        return PlatformSyncStatus(
            state=SyncState.FAILED,
            error=describe_failure(outcome),
            last_success_at=previous.last_success_at,
        )
