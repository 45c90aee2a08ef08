"""
Schemas for products and their per-platform sync status.
"""

import math
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import Field, field_validator, model_validator

from app.core.enums import PlatformName, SyncState
from app.schemas.base import BaseSchema


class PlatformSyncStatus(BaseSchema):
    state: SyncState = SyncState.PENDING
    error: Optional[str] = None
    last_success_at: Optional[datetime] = None


class SyncStatusMap(BaseSchema):
    """
    Fixed-key map from platform to sync status.

    Every platform has an entry from creation onward; the map is never
    partially populated.
    """
    commerce: PlatformSyncStatus = Field(default_factory=PlatformSyncStatus)
    shortvideo: PlatformSyncStatus = Field(default_factory=PlatformSyncStatus)
    photoshare: PlatformSyncStatus = Field(default_factory=PlatformSyncStatus)

    @model_validator(mode="before")
    @classmethod
    def upgrade_legacy_document(cls, data: Any) -> Any:
        """
        Accept documents written by the first version of the server, which
        keyed entries by shopify/tiktok/instagram and stored
        {status, error, lastSync}.
        """
        if not isinstance(data, dict):
            return data
        upgraded = {}
        for key, value in data.items():
            platform = PlatformName.from_slug(key)
            if platform is None:
                continue
            if isinstance(value, dict) and "status" in value and "state" not in value:
                value = {
                    "state": value.get("status") or SyncState.PENDING.value,
                    "error": value.get("error"),
                    "lastSuccessAt": value.get("lastSync"),
                }
            upgraded[platform.value] = value
        return upgraded

    def get(self, platform: PlatformName) -> PlatformSyncStatus:
        return getattr(self, platform.value)

    def with_status(self, platform: PlatformName, status: PlatformSyncStatus) -> "SyncStatusMap":
        """Copy of this map with only `platform`'s entry replaced"""
        return self.model_copy(update={platform.value: status})


class Product(BaseSchema):
    """
    A product as stored in the products document.

    `price` is normally a float. Documents edited by hand or written by older
    clients may carry a formatted string instead; it is kept as-is so the
    commerce adapter can refuse it rather than silently coercing it.
    """
    id: str
    name: str
    price: Union[float, str]
    description: str
    category: str
    created_at: datetime
    sync_status: SyncStatusMap = Field(default_factory=SyncStatusMap)


class ProductCreate(BaseSchema):
    name: str
    price: float
    description: str
    category: str

    @field_validator('name', 'description', 'category', mode='before')
    @classmethod
    def validate_required_text(cls, v):
        if v is None or not str(v).strip():
            raise ValueError('All fields are required')
        return str(v).strip()

    @field_validator('price', mode='before')
    @classmethod
    def validate_price(cls, v):
        """Accept numbers or numeric strings; store a positive finite float"""
        if v is None or v == '' or isinstance(v, bool):
            raise ValueError('Price is required')
        try:
            price = float(v)
        except (ValueError, TypeError):
            raise ValueError(f'Price must be a valid number, got: {v}')
        if not math.isfinite(price) or price <= 0:
            raise ValueError('Price must be a positive number')
        return price
