"""Tests for CollectionEditor reconciling straight against SQLAlchemyRecordStore."""

import pytest

from portfolio.application.services import CollectionEditor
from portfolio.domain.entities import RecordStatus, get_entity_kind
from portfolio.domain.exceptions import EntityNotFoundError, StoreError
from portfolio.infrastructure.database.repositories import SQLAlchemyRecordStore


def _editor(session, kind: str = "projects") -> CollectionEditor:
    store = SQLAlchemyRecordStore(session, kind, "test-owner")
    return CollectionEditor(get_entity_kind(kind), "test-owner", store)


@pytest.mark.asyncio
async def test_failed_insert_does_not_poison_siblings(session_factory):
    async with session_factory() as session:
        editor = _editor(session)
        await editor.load()
        editor.add({"title": "Broken", "tags": {"not", "json"}})
        good = editor.add({"title": "Site"})

        report = await editor.save()

        assert len(report.failed) == 1
        assert len(report.succeeded) == 1
        assert good.is_persisted
        assert good.status is RecordStatus.CLEAN

        await session.commit()

    async with session_factory() as session:
        titles = [r.fields["title"] for r in await SQLAlchemyRecordStore(session, "projects", "test-owner").list()]
        assert titles == ["Site"]


@pytest.mark.asyncio
async def test_move_on_a_shared_session(session_factory):
    async with session_factory() as session:
        editor = _editor(session)
        await editor.load()
        for title in ("A", "B", "C"):
            editor.add({"title": title})
        assert (await editor.save()).all_succeeded

        report = await editor.move(0, 2)

        assert report.all_succeeded
        assert len(report) == 3
        await session.commit()

    async with session_factory() as session:
        fresh = _editor(session)
        await fresh.load()
        assert [r.fields["title"] for r in fresh.records()] == ["B", "C", "A"]
        assert [r.order_key for r in fresh.records()] == [0, 1, 2]


@pytest.mark.asyncio
async def test_session_stays_usable_after_a_failed_update(session_factory):
    async with session_factory() as session:
        store = SQLAlchemyRecordStore(session, "projects", "test-owner")
        editor = _editor(session)
        await editor.load()
        editor.add({"title": "Site"})
        await editor.save()
        record_id = editor.records()[0].id

        with pytest.raises(StoreError):
            await store.update(record_id, {"fields": {"tags": {"bad"}}})

        updated = await store.update(record_id, {"fields": {"demo_url": "https://example.com"}})
        assert updated.fields["demo_url"] == "https://example.com"
        assert "tags" not in updated.fields


@pytest.mark.asyncio
async def test_update_and_delete_are_scoped_to_kind_and_owner(session_factory):
    async with session_factory() as session:
        editor = _editor(session)
        await editor.load()
        editor.add({"title": "Site"})
        await editor.save()
        record_id = editor.records()[0].id

        other_owner = SQLAlchemyRecordStore(session, "projects", "someone-else")
        other_kind = SQLAlchemyRecordStore(session, "skills", "test-owner")

        with pytest.raises(EntityNotFoundError):
            await other_owner.update(record_id, {"order_key": 3})
        assert await other_kind.delete(record_id) is False
        assert [r.id for r in await SQLAlchemyRecordStore(session, "projects", "test-owner").list()] == [record_id]
