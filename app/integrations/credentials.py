"""
Short-lived access tokens for the photo-share platform.

Tokens stay in memory for the life of the process; they are never pruned
because validity is always recomputed from the issue time.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Dict, Optional

from app.core.clock import Clock

logger = logging.getLogger(__name__)


class CredentialStore:
    TOKEN_PREFIX = "photoshare_token_"

    def __init__(self, expiry: timedelta, clock: Clock):
        self.expiry = expiry
        self.clock = clock
        self._issued: Dict[str, datetime] = {}

    def issue(self) -> str:
        token = f"{self.TOKEN_PREFIX}{uuid.uuid4().hex}"
        self._issued[token] = self.clock.now()
        logger.debug("Issued new photo-share token")
        return token

    def was_issued(self, token: Optional[str]) -> bool:
        return bool(token) and token in self._issued

    def is_valid(self, token: Optional[str]) -> bool:
        if not self.was_issued(token):
            return False
        return self.clock.now() - self._issued[token] < self.expiry

    def refresh(self, old_token: Optional[str]) -> str:
        """Issue a replacement token; the old one is left to expire on its own"""
        token = self.issue()
        logger.info("Refreshed expired photo-share token")
        return token
