from fastapi import APIRouter, Depends, Request
import logging

from app.core.enums import PlatformName
from app.core.templates import templates
from app.dependencies import get_product_service
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/")
async def dashboard(request: Request, service: ProductService = Depends(get_product_service)):
    """Single-page UI; the initial product list is rendered server side"""
    products = await service.list_products()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "products": [product.to_document() for product in products],
            "platforms": [p.value for p in PlatformName],
        },
    )
