import asyncio
from abc import ABC, abstractmethod
from typing import Literal, Optional, Union

from pydantic import BaseModel

from app.core.enums import FailureReason, PlatformName
from app.schemas.product import Product


class SyncContext(BaseModel):
    """Per-request inputs an adapter may need beyond the product itself"""
    token: Optional[str] = None


class SyncSuccess(BaseModel):
    ok: Literal[True] = True
    external_id: str
    message: str
    # Set when the adapter had to obtain a fresh credential on the caller's behalf
    new_credential: Optional[str] = None


class SyncFailure(BaseModel):
    ok: Literal[False] = False
    reason: FailureReason
    message: str
    retryable: bool
    retry_after: Optional[float] = None  # seconds


SyncOutcome = Union[SyncSuccess, SyncFailure]


class PlatformAdapter(ABC):
    """
    One external platform we push products to.

    Adapters never raise for business failures (quota, credentials, payload
    contract); they return a SyncFailure instead.
    """
    platform: PlatformName

    def __init__(self, latency: float = 0.0):
        self.latency = latency

    async def _simulate_latency(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    @abstractmethod
    async def sync(self, product: Product, context: SyncContext) -> SyncOutcome:
        """Push a product to the platform"""
        pass
