"""
Wiring for the platform adapters and the shared state they consult.

Called once from the application lifespan (and from the CLI); the rate limiter
and credential store built here are process-wide and shared by every request.
"""

import logging
from datetime import timedelta
from typing import Dict, Optional

from app.core.clock import Clock, SystemClock
from app.core.config import Settings
from app.core.enums import PlatformName
from app.integrations.base import PlatformAdapter
from app.integrations.credentials import CredentialStore
from app.integrations.platforms import CommercePlatform, PhotoSharePlatform, ShortVideoPlatform
from app.integrations.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


def build_rate_limiter(settings: Settings, clock: Optional[Clock] = None) -> RateLimiter:
    return RateLimiter(
        limit=settings.SHORTVIDEO_RATE_LIMIT,
        window=timedelta(seconds=settings.SHORTVIDEO_RATE_WINDOW_SECONDS),
        clock=clock or SystemClock(),
    )


def build_credential_store(settings: Settings, clock: Optional[Clock] = None) -> CredentialStore:
    return CredentialStore(
        expiry=timedelta(seconds=settings.PHOTOSHARE_TOKEN_EXPIRY_SECONDS),
        clock=clock or SystemClock(),
    )


def build_adapters(
    settings: Settings,
    rate_limiter: RateLimiter,
    credentials: CredentialStore,
) -> Dict[PlatformName, PlatformAdapter]:
    """Instantiate one adapter per platform"""
    adapters: Dict[PlatformName, PlatformAdapter] = {
        PlatformName.COMMERCE: CommercePlatform(latency=settings.COMMERCE_LATENCY_SECONDS),
        PlatformName.SHORTVIDEO: ShortVideoPlatform(rate_limiter, latency=settings.SHORTVIDEO_LATENCY_SECONDS),
        PlatformName.PHOTOSHARE: PhotoSharePlatform(credentials, latency=settings.PHOTOSHARE_LATENCY_SECONDS),
    }
    for name in adapters:
        logger.info(f"Registered {name.value} platform adapter")
    return adapters
