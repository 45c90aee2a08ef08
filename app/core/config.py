# app/core/config.py

import os
from functools import lru_cache
from typing import List
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    # Storage
    DATA_FILE: str = "data/products.json"

    # Short-video platform quota (deliberately small so exhaustion is easy to see)
    SHORTVIDEO_RATE_LIMIT: int = 3
    SHORTVIDEO_RATE_WINDOW_SECONDS: float = 60.0

    # Photo-share access tokens
    PHOTOSHARE_TOKEN_EXPIRY_SECONDS: float = 60.0

    # Simulated remote latency per platform
    COMMERCE_LATENCY_SECONDS: float = 1.2
    SHORTVIDEO_LATENCY_SECONDS: float = 1.5
    PHOTOSHARE_LATENCY_SECONDS: float = 1.0

    # UI
    PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env') if os.path.exists('.env') else None,
        case_sensitive=True,
        extra="ignore"
    )


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every request"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
