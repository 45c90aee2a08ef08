# app/store/json_store.py
"""
Whole-document product store.

All products live in a single JSON document `{"products": [...]}` that is
read in full and written back in full. Every read-modify-write cycle runs
under one asyncio.Lock so two concurrent writers (for example two platform
syncs on the same product) never overwrite each other's changes. Writes go to
a sibling temp file which then replaces the document.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple, Union

import aiofiles
import aiofiles.os
from pydantic import ValidationError

from app.core.exceptions import ProductNotFoundError, StoreError
from app.schemas.product import Product

logger = logging.getLogger(__name__)


class ProductStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def ensure(self) -> None:
        """Create the document (and its directory) if it does not exist yet"""
        if await aiofiles.os.path.exists(self.path):
            return
        await self._write_document({"products": []})
        logger.info(f"Created empty product store at {self.path}")

    async def list(self) -> List[Product]:
        document = await self._read_document()
        return [self._parse(raw) for raw in document["products"]]

    async def get(self, product_id: str) -> Product:
        document = await self._read_document()
        _, raw = self._find(document, product_id)
        return self._parse(raw)

    async def add(self, product: Product) -> Product:
        async with self._lock:
            document = await self._read_document()
            document["products"].append(product.to_document())
            await self._write_document(document)
        return product

    async def mutate(self, product_id: str, fn: Callable[[Product], Product]) -> Product:
        """
        Re-read the document, apply `fn` to one product and write it back.

        `fn` must be synchronous; the whole cycle holds the store lock.
        Products other than `product_id` are written back untouched.
        """
        async with self._lock:
            document = await self._read_document()
            index, raw = self._find(document, product_id)
            updated = fn(self._parse(raw))
            document["products"][index] = updated.to_document()
            await self._write_document(document)
        return updated

    async def delete(self, product_id: str) -> Product:
        """Remove the product whose id matches, wherever it sits in the list"""
        async with self._lock:
            document = await self._read_document()
            index, raw = self._find(document, product_id)
            removed = document["products"].pop(index)
            await self._write_document(document)
        return self._parse(removed)

    @staticmethod
    def _find(document: Dict[str, Any], product_id: str) -> Tuple[int, Dict[str, Any]]:
        for index, raw in enumerate(document["products"]):
            if raw.get("id") == product_id:
                return index, raw
        raise ProductNotFoundError(product_id)

    @staticmethod
    def _parse(raw: Dict[str, Any]) -> Product:
        try:
            return Product.model_validate(raw)
        except ValidationError as e:
            raise StoreError(f"Malformed product record {raw.get('id')!r}: {e}") from e

    async def _read_document(self) -> Dict[str, Any]:
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as fh:
                content = await fh.read()
        except FileNotFoundError:
            return {"products": []}
        except OSError as e:
            raise StoreError(f"Cannot read product store {self.path}: {e}") from e

        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise StoreError(f"Product store {self.path} is not valid JSON: {e}") from e

        if not isinstance(document, dict) or not isinstance(document.get("products"), list):
            raise StoreError(f"Product store {self.path} has no 'products' list")
        return document

    async def _write_document(self, document: Dict[str, Any]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as fh:
                await fh.write(json.dumps(document, indent=2))
            await aiofiles.os.replace(tmp_path, self.path)
        except OSError as e:
            raise StoreError(f"Cannot write product store {self.path}: {e}") from e
