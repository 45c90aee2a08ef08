# tests/unit/store/test_json_store.py
import asyncio
import json

import pytest

from app.core.enums import PlatformName, SyncState
from app.core.exceptions import ProductNotFoundError, StoreError
from app.schemas.product import PlatformSyncStatus, Product
from app.store.json_store import ProductStore


def make_product(product_id, name="Item"):
    return Product(
        id=product_id,
        name=name,
        price=10.0,
        description="desc",
        category="cat",
        created_at="2024-01-01T12:00:00+00:00",
    )


@pytest.mark.asyncio
async def test_missing_file_reads_as_empty(tmp_path):
    store = ProductStore(tmp_path / "nested" / "products.json")
    assert await store.list() == []


@pytest.mark.asyncio
async def test_ensure_creates_empty_document(tmp_path):
    path = tmp_path / "data" / "products.json"
    store = ProductStore(path)

    await store.ensure()

    assert json.loads(path.read_text()) == {"products": []}


@pytest.mark.asyncio
async def test_ensure_keeps_existing_document(tmp_path):
    path = tmp_path / "products.json"
    store = ProductStore(path)
    await store.add(make_product("a"))

    await store.ensure()

    assert [p.id for p in await store.list()] == ["a"]


@pytest.mark.asyncio
async def test_document_uses_camel_case(store):
    await store.add(make_product("a"))

    raw = json.loads(store.path.read_text())["products"][0]

    assert "syncStatus" in raw and "createdAt" in raw
    assert set(raw["syncStatus"]) == {"commerce", "shortvideo", "photoshare"}
    assert raw["syncStatus"]["commerce"] == {"state": "pending", "error": None, "lastSuccessAt": None}


@pytest.mark.asyncio
async def test_get_unknown_raises(store):
    with pytest.raises(ProductNotFoundError):
        await store.get("missing")


@pytest.mark.asyncio
@pytest.mark.parametrize("victim", ["a", "b", "c"])
async def test_delete_removes_matching_id_only(store, victim):
    for product_id in ("a", "b", "c"):
        await store.add(make_product(product_id, name=f"name-{product_id}"))

    removed = await store.delete(victim)

    assert removed.id == victim
    remaining = await store.list()
    assert [p.id for p in remaining] == [x for x in ("a", "b", "c") if x != victim]
    for product in remaining:
        assert (await store.get(product.id)).name == f"name-{product.id}"


@pytest.mark.asyncio
async def test_delete_unknown_raises_and_keeps_document(store):
    await store.add(make_product("a"))
    with pytest.raises(ProductNotFoundError):
        await store.delete("zzz")
    assert len(await store.list()) == 1


@pytest.mark.asyncio
async def test_mutate_leaves_other_products_untouched(store):
    await store.add(make_product("a"))
    await store.add(make_product("b"))
    before_b = json.loads(store.path.read_text())["products"][1]

    def mark(product):
        status = PlatformSyncStatus(state=SyncState.FAILED, error="boom")
        return product.model_copy(
            update={"sync_status": product.sync_status.with_status(PlatformName.COMMERCE, status)}
        )

    updated = await store.mutate("a", mark)

    assert updated.sync_status.commerce.state == SyncState.FAILED
    assert (await store.get("a")).sync_status.commerce.error == "boom"
    assert json.loads(store.path.read_text())["products"][1] == before_b


@pytest.mark.asyncio
async def test_concurrent_mutations_do_not_lose_updates(store):
    await store.add(make_product("a"))

    def set_state(platform):
        def apply(product):
            status = PlatformSyncStatus(state=SyncState.SUCCESS)
            return product.model_copy(update={"sync_status": product.sync_status.with_status(platform, status)})
        return apply

    await asyncio.gather(*(store.mutate("a", set_state(p)) for p in PlatformName))

    product = await store.get("a")
    assert all(product.sync_status.get(p).state == SyncState.SUCCESS for p in PlatformName)


@pytest.mark.asyncio
async def test_corrupt_document_raises_store_error(store):
    store.path.write_text("{not json")
    with pytest.raises(StoreError):
        await store.list()


@pytest.mark.asyncio
async def test_document_without_products_list_raises(store):
    store.path.write_text(json.dumps({"items": []}))
    with pytest.raises(StoreError):
        await store.get("a")


@pytest.mark.asyncio
async def test_no_temp_file_left_behind(store):
    await store.add(make_product("a"))
    assert sorted(p.name for p in store.path.parent.iterdir()) == ["products.json"]
