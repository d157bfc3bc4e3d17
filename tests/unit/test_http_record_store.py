"""Unit tests for the HttpRecordStore client adapter."""

import json

import httpx
import pytest

from portfolio.domain.entities import CollectionRecord, RecordStatus
from portfolio.domain.exceptions import EntityNotFoundError, StoreError
from portfolio.infrastructure.http import HttpRecordStore


# ── Helpers ──


def _record_json(record_id: str = "abc", order_key: int = 0) -> dict:
    return {
        "id": record_id,
        "kind": "education",
        "fields": {"institution": "MIT"},
        "category": None,
        "order_key": order_key,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }


def _store(handler) -> HttpRecordStore:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpRecordStore("education", token="secret", base_url="http://api/api/v1", http_client=client)


# ── Tests ──


@pytest.mark.asyncio
async def test_list_parses_records_and_sends_credential():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[_record_json("a", 0), _record_json("b", 1)])

    records = await _store(handler).list()

    assert [r.id for r in records] == ["a", "b"]
    assert all(r.status is RecordStatus.CLEAN for r in records)
    assert seen[0].url.path == "/api/v1/collections/education"
    assert seen[0].headers["Authorization"] == "Bearer secret"


@pytest.mark.asyncio
async def test_insert_posts_payload_without_scope():
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured.update(json.loads(request.content))
        return httpx.Response(201, json=_record_json("new", 3))

    record = CollectionRecord(kind="education", fields={"institution": "MIT"}, order_key=3, owner_scope="spoof")
    inserted = await _store(handler).insert(record)

    assert inserted.id == "new"
    assert captured == {"fields": {"institution": "MIT"}, "category": None, "order_key": 3}


@pytest.mark.asyncio
async def test_update_404_raises_not_found():
    store = _store(lambda request: httpx.Response(404, json={"detail": "education with id 'gone' not found"}))
    with pytest.raises(EntityNotFoundError):
        await store.update("gone", {"order_key": 1})


@pytest.mark.asyncio
async def test_update_server_error_raises_store_error():
    store = _store(lambda request: httpx.Response(500, json={"detail": "boom"}))
    with pytest.raises(StoreError) as exc:
        await store.update("abc", {"order_key": 1})
    assert exc.value.status_code == 500


@pytest.mark.asyncio
async def test_delete_absent_record_is_success():
    store = _store(lambda request: httpx.Response(404, json={"detail": "education with id 'gone' not found"}))
    assert await store.delete("gone") is False


@pytest.mark.asyncio
async def test_delete_404_for_unknown_route_raises_store_error():
    store = _store(lambda request: httpx.Response(404, json={"detail": "Not Found"}))
    with pytest.raises(StoreError) as exc:
        await store.delete("abc")
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_404_for_unknown_kind_raises_store_error():
    store = _store(lambda request: httpx.Response(404, json={"detail": "EntityKind with id 'hobbies' not found"}))
    with pytest.raises(StoreError):
        await store.delete("abc")


@pytest.mark.asyncio
async def test_update_404_for_unknown_route_raises_store_error():
    store = _store(lambda request: httpx.Response(404, text="not here"))
    with pytest.raises(StoreError):
        await store.update("abc", {"order_key": 1})


@pytest.mark.asyncio
async def test_transport_error_becomes_store_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(StoreError):
        await _store(handler).delete("abc")
