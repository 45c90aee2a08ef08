"""
Schema exports for the application.
"""

from .base import BaseSchema

from .product import (
    PlatformSyncStatus,
    SyncStatusMap,
    Product,
    ProductCreate
)

from .sync import (
    SyncRequest,
    SyncResponse,
    TokenResponse,
    MessageResponse,
    DeleteResponse
)
