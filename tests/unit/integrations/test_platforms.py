# tests/unit/integrations/test_platforms.py
import asyncio
from datetime import timedelta

import pytest

from app.core.enums import FailureReason, PlatformName
from app.integrations.base import SyncContext, SyncFailure, SyncSuccess
from app.integrations.credentials import CredentialStore
from app.integrations.platforms import CommercePlatform, PhotoSharePlatform, ShortVideoPlatform
from app.integrations.platforms.commerce import is_numeric_price
from app.integrations.rate_limiter import RateLimiter
from app.schemas.product import Product


def make_product(price=19.99, product_id="p-1"):
    return Product(
        id=product_id,
        name="Mug",
        price=price,
        description="Blue mug",
        category="Kitchen",
        created_at="2024-01-01T12:00:00+00:00",
    )


"""
1. Commerce adapter
"""

@pytest.mark.asyncio
async def test_commerce_sends_numeric_price(mocker):
    adapter = CommercePlatform()
    spy = mocker.spy(adapter, "create_remote_product")

    outcome = await adapter.sync(make_product(19.99), SyncContext())

    assert isinstance(outcome, SyncSuccess)
    assert outcome.external_id == "commerce_p-1"
    payload = spy.call_args.args[-1]
    assert payload["price"] == 19.99
    assert isinstance(payload["price"], float)


@pytest.mark.asyncio
async def test_commerce_reports_remote_rejection_of_text_price(mocker):
    adapter = CommercePlatform()
    spy = mocker.spy(adapter, "create_remote_product")

    product = make_product("19.99")
    assert product.price == "19.99"

    outcome = await adapter.sync(product, SyncContext())

    assert isinstance(outcome, SyncFailure)
    assert outcome.reason == FailureReason.INVALID_PRICE_TYPE
    assert outcome.retryable is False
    assert outcome.message == "Invalid data type: price must be a number"
    spy.assert_called_once()
    assert spy.call_args.args[-1]["price"] == "19.99"


@pytest.mark.asyncio
async def test_commerce_remote_contract_rejects_string_payload():
    adapter = CommercePlatform()
    response = await adapter.create_remote_product({"price": "19.99"})
    assert response == {"success": False, "error": "Invalid data type: price must be a number"}


@pytest.mark.parametrize("value,expected", [
    (10, True),
    (10.5, True),
    ("10.5", False),
    (True, False),
    (None, False),
    (float("nan"), False),
    (float("inf"), False),
])
def test_is_numeric_price(value, expected):
    assert is_numeric_price(value) is expected


"""
2. Short-video adapter
"""

@pytest.mark.asyncio
async def test_shortvideo_denied_after_limit(clock):
    limiter = RateLimiter(limit=2, window=timedelta(seconds=60), clock=clock)
    adapter = ShortVideoPlatform(limiter)
    product = make_product()

    assert isinstance(await adapter.sync(product, SyncContext()), SyncSuccess)
    assert isinstance(await adapter.sync(product, SyncContext()), SyncSuccess)

    clock.advance(15)
    outcome = await adapter.sync(product, SyncContext())

    assert isinstance(outcome, SyncFailure)
    assert outcome.reason == FailureReason.RATE_LIMITED
    assert outcome.retryable is True
    assert outcome.retry_after == pytest.approx(45)


@pytest.mark.asyncio
async def test_shortvideo_quota_is_shared_across_products(clock):
    limiter = RateLimiter(limit=1, window=timedelta(seconds=60), clock=clock)
    adapter = ShortVideoPlatform(limiter)

    first = await adapter.sync(make_product(product_id="a"), SyncContext())
    second = await adapter.sync(make_product(product_id="b"), SyncContext())

    assert isinstance(first, SyncSuccess)
    assert first.external_id == "shortvideo_a"
    assert isinstance(second, SyncFailure)


"""
3. Photo-share adapter
"""

@pytest.fixture
def credential_store(clock):
    return CredentialStore(expiry=timedelta(seconds=60), clock=clock)


@pytest.mark.asyncio
async def test_photoshare_valid_token(credential_store):
    adapter = PhotoSharePlatform(credential_store)
    token = credential_store.issue()

    outcome = await adapter.sync(make_product(), SyncContext(token=token))

    assert isinstance(outcome, SyncSuccess)
    assert outcome.external_id == "photoshare_p-1"
    assert outcome.new_credential is None


@pytest.mark.asyncio
async def test_photoshare_expired_token_is_refreshed(credential_store, clock):
    adapter = PhotoSharePlatform(credential_store)
    token = credential_store.issue()
    clock.advance(61)

    outcome = await adapter.sync(make_product(), SyncContext(token=token))

    assert isinstance(outcome, SyncSuccess)
    assert outcome.new_credential is not None
    assert outcome.new_credential != token
    assert credential_store.is_valid(outcome.new_credential)


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "", "photoshare_token_forged"])
async def test_photoshare_unknown_token_fails(credential_store, token):
    adapter = PhotoSharePlatform(credential_store)

    outcome = await adapter.sync(make_product(), SyncContext(token=token))

    assert isinstance(outcome, SyncFailure)
    assert outcome.reason == FailureReason.AUTHENTICATION_FAILED
    assert outcome.retryable is False


@pytest.mark.asyncio
async def test_adapters_wait_for_latency(credential_store):
    adapter = PhotoSharePlatform(credential_store, latency=0.05)
    loop = asyncio.get_running_loop()

    started = loop.time()
    await adapter.sync(make_product(), SyncContext(token=credential_store.issue()))

    assert loop.time() - started >= 0.04
    assert adapter.platform == PlatformName.PHOTOSHARE
