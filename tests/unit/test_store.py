import pytest

from contacts_api.app.core.db import init_db
from contacts_api.app.core.errors import ConflictError, StoreError
from contacts_api.app.schemas.contact import ContactIn


def _contact(**overrides):
    data = {"name": "Alice", "mobile": "111", "email": "a@x.com"}
    data.update(overrides)
    return ContactIn.model_validate(data)


def test_init_db_is_idempotent(conn):
    init_db(conn)
    versions = [row["version"] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    assert versions == [1, 2]


@pytest.mark.asyncio
async def test_insert_assigns_identifier(store):
    created = await store.insert(_contact())
    assert len(created.id) == 24
    assert created.name == "Alice"
    assert await store.find_by_id(created.id) == created


@pytest.mark.asyncio
async def test_find_all_keeps_insertion_order(store):
    first = await store.insert(_contact(name="Zed", mobile="1"))
    second = await store.insert(_contact(name="Amy", mobile="2"))
    assert [c.id for c in await store.find_all()] == [first.id, second.id]


@pytest.mark.asyncio
async def test_find_one_by_field(store):
    created = await store.insert(_contact())
    assert await store.find_one("mobile", "111") == created
    assert await store.find_one("mobile", "222") is None


@pytest.mark.asyncio
async def test_find_one_rejects_unknown_field(store):
    with pytest.raises(StoreError):
        await store.find_one("mobile; DROP TABLE contacts", "x")


@pytest.mark.asyncio
async def test_unique_mobile_is_enforced_by_store(store):
    await store.insert(_contact())
    with pytest.raises(ConflictError) as exc_info:
        await store.insert(_contact(name="Bob"))
    assert exc_info.value.message == "Mobile is Already exists"
    assert len(await store.find_all()) == 1


@pytest.mark.asyncio
async def test_update_replaces_all_fields(store):
    created = await store.insert(_contact(company="Acme", title="CTO"))
    updated = await store.update_by_id(created.id, _contact(name="Alice B", email=None))
    assert updated.id == created.id
    assert updated.name == "Alice B"
    assert updated.email is None
    assert updated.company is None
    assert updated.title is None


@pytest.mark.asyncio
async def test_update_missing_returns_none(store):
    assert await store.update_by_id("65a1b2c3d4e5f60718293a4b", _contact()) is None
    assert await store.find_all() == []


@pytest.mark.asyncio
async def test_delete_returns_snapshot(store):
    created = await store.insert(_contact())
    assert await store.delete_by_id(created.id) == created
    assert await store.find_by_id(created.id) is None
    assert await store.delete_by_id(created.id) is None


@pytest.mark.asyncio
async def test_closed_connection_raises_store_error(store, conn):
    conn.close()
    with pytest.raises(StoreError):
        await store.find_all()
