"""Unit tests for the server-side CollectionRecordService."""

import pytest

from portfolio.application.schemas import CollectionRecordCreate, CollectionRecordUpdate
from portfolio.application.services import CollectionRecordService
from portfolio.domain.entities import get_entity_kind
from portfolio.domain.exceptions import EntityNotFoundError, RecordValidationError
from tests.unit.fakes import FakeRemoteRecordStore


@pytest.fixture
def remote() -> FakeRemoteRecordStore:
    return FakeRemoteRecordStore()


@pytest.fixture
def service(remote: FakeRemoteRecordStore) -> CollectionRecordService:
    return CollectionRecordService(get_entity_kind("projects"), remote)


@pytest.mark.asyncio
async def test_create_appends_with_defaults(service: CollectionRecordService):
    first = await service.create_record(CollectionRecordCreate(fields={"title": "Portfolio"}))
    second = await service.create_record(CollectionRecordCreate(fields={"title": "Blog"}))

    assert (first.order_key, second.order_key) == (0, 1)
    assert second.fields == {"title": "Blog", "technologies": [], "featured": False}


@pytest.mark.asyncio
async def test_create_rejects_missing_required_field(service: CollectionRecordService, remote):
    with pytest.raises(RecordValidationError):
        await service.create_record(CollectionRecordCreate(fields={"description": "No title"}))
    assert remote.calls_of("insert") == []


@pytest.mark.asyncio
async def test_update_rejects_blanking_required_field(service: CollectionRecordService):
    record = await service.create_record(CollectionRecordCreate(fields={"title": "Portfolio"}))
    with pytest.raises(RecordValidationError):
        await service.update_record(record.id, CollectionRecordUpdate(fields={"title": " "}))


@pytest.mark.asyncio
async def test_update_only_sends_set_fields(service: CollectionRecordService, remote):
    record = await service.create_record(CollectionRecordCreate(fields={"title": "Portfolio"}))
    await service.update_record(record.id, CollectionRecordUpdate(order_key=4))
    assert remote.calls_of("update") == [("update", record.id, {"order_key": 4})]


@pytest.mark.asyncio
async def test_update_missing_record(service: CollectionRecordService):
    with pytest.raises(EntityNotFoundError):
        await service.update_record("nope", CollectionRecordUpdate(order_key=1))


@pytest.mark.asyncio
async def test_delete_is_idempotent(service: CollectionRecordService):
    record = await service.create_record(CollectionRecordCreate(fields={"title": "Portfolio"}))
    assert await service.delete_record(record.id) is True
    assert await service.delete_record(record.id) is False
