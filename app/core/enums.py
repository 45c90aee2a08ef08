"""
Shared enums and constants used across the application.
"""

from enum import Enum
from typing import Optional


class PlatformName(str, Enum):
    COMMERCE = "commerce"
    SHORTVIDEO = "shortvideo"
    PHOTOSHARE = "photoshare"

    @property
    def slug(self):
        return self.value

    @classmethod
    def from_slug(cls, value: str) -> Optional["PlatformName"]:
        """
        Resolve a path segment to a platform.

        Accepts the generic identifiers as well as the legacy names the first
        version of the UI used (shopify / tiktok / instagram).
        """
        if value is None:
            return None
        key = value.strip().lower()
        key = LEGACY_PLATFORM_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


LEGACY_PLATFORM_ALIASES = {
    "shopify": PlatformName.COMMERCE.value,
    "tiktok": PlatformName.SHORTVIDEO.value,
    "instagram": PlatformName.PHOTOSHARE.value,
}


class SyncState(str, Enum):
    """Per-platform sync state stored on each product"""
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class FailureReason(str, Enum):
    """Machine readable reasons carried by a failed adapter outcome"""
    INVALID_PRICE_TYPE = "invalid_price_type"
    RATE_LIMITED = "rate_limited"
    AUTHENTICATION_FAILED = "authentication_failed"
