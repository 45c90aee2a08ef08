"""
Commerce platform adapter.

The remote product API is strict about its payload: `price` must be sent as a
JSON number. A price stored as formatted text is sent as is and the remote
rejection is reported; it is never coerced, so the record gets fixed at the
source.
"""

import logging
import math
from typing import Any, Dict

from app.core.enums import FailureReason, PlatformName
from app.integrations.base import PlatformAdapter, SyncContext, SyncFailure, SyncOutcome, SyncSuccess
from app.schemas.product import Product

logger = logging.getLogger(__name__)


def is_numeric_price(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value)


class CommercePlatform(PlatformAdapter):
    platform = PlatformName.COMMERCE

    def build_payload(self, product: Product) -> Dict[str, Any]:
        return {
            "id": product.id,
            "title": product.name,
            "price": product.price,
            "description": product.description,
            "productType": product.category,
        }

    async def create_remote_product(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Mocked remote call; enforces the same contract the real API does"""
        if not is_numeric_price(payload.get("price")):
            return {"success": False, "error": "Invalid data type: price must be a number"}
        return {"success": True}

    async def sync(self, product: Product, context: SyncContext) -> SyncOutcome:
        await self._simulate_latency()

        response = await self.create_remote_product(self.build_payload(product))
        if not response["success"]:
            logger.warning(f"Commerce platform rejected {product.id}: {response['error']}")
            return SyncFailure(
                reason=FailureReason.INVALID_PRICE_TYPE,
                message=response["error"],
                retryable=False,
            )

        return SyncSuccess(
            external_id=f"commerce_{product.id}",
            message="Product synced to commerce platform successfully",
        )
