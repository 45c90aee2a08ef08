from fastapi import APIRouter, Depends

from app.dependencies import get_store
from app.store.json_store import ProductStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Basic health check"""
    return {"status": "healthy", "service": "Product Sync Service"}


@router.get("/health/store")
async def store_health(store: ProductStore = Depends(get_store)):
    """Check the products document can be read"""
    try:
        products = await store.list()
        return {
            "status": "healthy",
            "store": str(store.path),
            "products_count": len(products),
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "store": str(store.path),
            "error": str(e),
        }
