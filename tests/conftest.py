# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.integrations.setup import build_adapters, build_credential_store, build_rate_limiter
from app.main import create_app
from app.services.product_service import ProductService
from app.services.sync_service import SyncOrchestrator
from app.store.json_store import ProductStore
from tests.mocks.clock import ManualClock


@pytest.fixture
def clock():
    """Frozen at 2024-01-01 12:00 UTC until a test advances it"""
    return ManualClock()


@pytest.fixture
def settings(tmp_path):
    """Provide test settings: store in tmp_path, no simulated latency"""
    return Settings(
        DATA_FILE=str(tmp_path / "products.json"),
        SHORTVIDEO_RATE_LIMIT=3,
        SHORTVIDEO_RATE_WINDOW_SECONDS=60,
        PHOTOSHARE_TOKEN_EXPIRY_SECONDS=60,
        COMMERCE_LATENCY_SECONDS=0,
        SHORTVIDEO_LATENCY_SECONDS=0,
        PHOTOSHARE_LATENCY_SECONDS=0,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def store(settings):
    return ProductStore(settings.DATA_FILE)


@pytest.fixture
def rate_limiter(settings, clock):
    return build_rate_limiter(settings, clock)


@pytest.fixture
def credentials(settings, clock):
    return build_credential_store(settings, clock)


@pytest.fixture
def adapters(settings, rate_limiter, credentials):
    return build_adapters(settings, rate_limiter, credentials)


@pytest.fixture
def product_service(store, clock):
    return ProductService(store, clock=clock)


@pytest.fixture
def orchestrator(store, adapters, clock):
    return SyncOrchestrator(store, adapters, clock=clock)


@pytest.fixture
def app(settings, clock):
    return create_app(settings=settings, clock=clock)


@pytest.fixture
def test_client(app):
    """Provide a test client; entering it runs the app lifespan"""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_product_data():
    """Provide sample product data for tests"""
    return {
        "name": "Test Guitar",
        "price": 999.99,
        "description": "A test guitar",
        "category": "Instruments",
    }
