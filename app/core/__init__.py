"""
Core module exports.
"""
from .enums import (
    PlatformName,
    SyncState,
    FailureReason
)

from .exceptions import (
    BaseServiceError,
    ProductServiceError,
    ProductNotFoundError,
    PlatformServiceError,
    InvalidPlatformError,
    StoreError
)

from .clock import (
    Clock,
    SystemClock
)
