# app/routes/products.py
"""
Product CRUD endpoints used by the UI.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.core.exceptions import ProductNotFoundError
from app.dependencies import get_product_service
from app.schemas.product import Product, ProductCreate
from app.schemas.sync import DeleteResponse
from app.services.product_service import ProductService

router = APIRouter(prefix="/api", tags=["products"])

logger = logging.getLogger(__name__)


@router.get("/products", response_model=List[Product])
async def list_products(service: ProductService = Depends(get_product_service)):
    return await service.list_products()


@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    try:
        return await service.get_product(product_id)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")


@router.post("/products", response_model=Product, status_code=201)
async def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    return await service.create_product(product_data)


@router.delete("/products/{product_id}", response_model=DeleteResponse)
async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    try:
        await service.delete_product(product_id)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    return DeleteResponse(success=True, message="Product deleted successfully")
