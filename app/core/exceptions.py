class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class ProductServiceError(BaseServiceError):
    """Base exception for product service errors."""
    pass

class ProductNotFoundError(ProductServiceError):
    """Raised when product is not found."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")

class PlatformServiceError(BaseServiceError):
    """Base exception for platform service errors."""
    pass

class InvalidPlatformError(PlatformServiceError):
    """Raised when a platform identifier is not one we sync to."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"Invalid platform: {platform}")

class StoreError(BaseServiceError):
    """Raised when the product document cannot be read or written."""
    pass
