"""
Purpose: The central service for managing the core Product entity.

Provides the CRUD operations the UI needs (list, get, create, delete). New
products start with a full sync-status map, every platform `pending`; after
creation only the SyncOrchestrator touches `syncStatus`.
"""

import logging
import uuid
from typing import List, Optional

from app.core.clock import Clock, SystemClock
from app.schemas.product import Product, ProductCreate, SyncStatusMap
from app.store.json_store import ProductStore

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, store: ProductStore, clock: Optional[Clock] = None):
        self.store = store
        self.clock = clock or SystemClock()

    async def list_products(self) -> List[Product]:
        return await self.store.list()

    async def get_product(self, product_id: str) -> Product:
        """
        Raises:
            ProductNotFoundError: If no product has this id
        """
        return await self.store.get(product_id)

    async def create_product(self, product_data: ProductCreate) -> Product:
        """
        Creates a product with a fresh id and an all-pending sync status map.

        Args:
            product_data: Validated product data

        Returns:
            The stored product
        """
        product = Product(
            id=str(uuid.uuid4()),
            name=product_data.name,
            price=product_data.price,
            description=product_data.description,
            category=product_data.category,
            created_at=self.clock.now(),
            sync_status=SyncStatusMap(),
        )
        await self.store.add(product)
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    async def delete_product(self, product_id: str) -> Product:
        """
        Deletes exactly the product whose id matches.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        removed = await self.store.delete(product_id)
        logger.info(f"Deleted product {product_id}")
        return removed
