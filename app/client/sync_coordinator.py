"""
Client-side coordinator for the sync API.

Holds the caller's view of the catalog: the product list, one in-flight flag
per (product, platform) pair and the current photo-share token. Both maps are
read-only snapshots that are replaced by merged copies, so finishing one sync
can never drop another pair's flag or another platform's status.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import httpx

from app.core.enums import PlatformName
from app.schemas.product import PlatformSyncStatus, Product
from app.schemas.sync import SyncResponse

logger = logging.getLogger(__name__)

SyncKey = Tuple[str, str]


class SyncCoordinator:
    DEFAULT_BASE_URL = "http://localhost:5000/api"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._owns_client = client is None
        self.products: Mapping[str, Product] = MappingProxyType({})
        self.in_flight: Mapping[SyncKey, bool] = MappingProxyType({})
        self.token: Optional[str] = None

    async def __aenter__(self) -> "SyncCoordinator":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # --- local state -------------------------------------------------------

    def is_syncing(self, product_id: str, platform: Union[str, PlatformName]) -> bool:
        return self.in_flight.get(self._key(product_id, platform), False)

    @staticmethod
    def _key(product_id: str, platform: Union[str, PlatformName]) -> SyncKey:
        resolved = PlatformName.from_slug(platform.value if isinstance(platform, PlatformName) else platform)
        return product_id, resolved.value if resolved else str(platform)

    def _mark_in_flight(self, key: SyncKey) -> None:
        self.in_flight = MappingProxyType({**self.in_flight, key: True})

    def _clear_in_flight(self, key: SyncKey) -> None:
        self.in_flight = MappingProxyType({k: v for k, v in self.in_flight.items() if k != key})

    def _merge_product(self, product: Product) -> None:
        self.products = MappingProxyType({**self.products, product.id: product})

    async def _merge_status(self, product_id: str, platform: str, status: PlatformSyncStatus) -> None:
        resolved = PlatformName.from_slug(platform)
        if resolved is None:
            return
        product = self.products.get(product_id)
        if product is None:
            try:
                product = await self.fetch_product(product_id)
            except httpx.HTTPError as e:
                logger.warning(f"Could not fetch {product_id} to merge its {platform} status: {e}")
                return
            if product is None:
                return
        self._merge_product(
            product.model_copy(update={"sync_status": product.sync_status.with_status(resolved, status)})
        )

    # --- API calls ---------------------------------------------------------

    async def load_products(self) -> List[Product]:
        response = await self._client.get("/products")
        response.raise_for_status()
        products = [Product.model_validate(raw) for raw in response.json()]
        self.products = MappingProxyType({p.id: p for p in products})
        return products

    async def fetch_product(self, product_id: str) -> Optional[Product]:
        response = await self._client.get(f"/products/{product_id}")
        if response.status_code == 404:
            return None
        response.raise_for_status()
        product = Product.model_validate(response.json())
        self._merge_product(product)
        return product

    async def create_product(self, **fields: Any) -> Product:
        response = await self._client.post("/products", json=fields)
        response.raise_for_status()
        product = Product.model_validate(response.json())
        self._merge_product(product)
        return product

    async def delete_product(self, product_id: str) -> bool:
        response = await self._client.delete(f"/products/{product_id}")
        if response.status_code == 404:
            return False
        response.raise_for_status()
        self.products = MappingProxyType({k: v for k, v in self.products.items() if k != product_id})
        return True

    async def issue_credential(self) -> str:
        response = await self._client.post("/credential/issue")
        response.raise_for_status()
        self.token = response.json()["token"]
        return self.token

    async def reset_rate_limit(self) -> str:
        response = await self._client.post(f"/ratelimit/{PlatformName.SHORTVIDEO.value}/reset")
        response.raise_for_status()
        return response.json()["message"]

    async def sync(self, product_id: str, platform: Union[str, PlatformName]) -> SyncResponse:
        """
        Sync one (product, platform) pair.

        Never raises for HTTP or transport errors: they come back as a failed
        SyncResponse. The pair's in-flight flag is cleared on every exit path.
        """
        key = self._key(product_id, platform)
        self._mark_in_flight(key)
        try:
            payload: Dict[str, Any] = {}
            if key[1] == PlatformName.PHOTOSHARE.value:
                payload["token"] = self.token

            response = await self._client.post(f"/sync/{key[1]}/{product_id}", json=payload)
            try:
                body = response.json()
            except ValueError:
                body = {}

            if response.status_code != 200:
                message = body.get("detail") or body.get("error") or f"HTTP {response.status_code}"
                logger.warning(f"Sync {key} rejected by server: {message}")
                return SyncResponse(success=False, error=message)

            result = SyncResponse.model_validate(body)
            if result.data and result.data.get("newCredential"):
                self.token = result.data["newCredential"]
            if result.sync_status is not None:
                await self._merge_status(product_id, key[1], result.sync_status)
            return result
        except httpx.HTTPError as e:
            logger.warning(f"Sync {key} failed in transport: {e}")
            return SyncResponse(success=False, error=f"Network error: {e}")
        finally:
            self._clear_in_flight(key)
