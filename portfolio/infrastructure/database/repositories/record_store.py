"""Concrete remote store for collection records backed by SQLAlchemy."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.application.interfaces import PublicRecordReader, RemoteRecordStore
from portfolio.domain.entities import CollectionRecord, RecordStatus
from portfolio.domain.exceptions import EntityNotFoundError, StoreError
from portfolio.infrastructure.database.models import CollectionRecordModel

logger = logging.getLogger(__name__)

_UPDATABLE = ("fields", "category", "order_key")


def _to_entity(model: CollectionRecordModel) -> CollectionRecord:
    """Map ORM model → domain entity."""
    return CollectionRecord(
        id=model.id,
        kind=model.kind,
        owner_scope=model.owner_scope,
        order_key=model.order_key,
        category=model.category,
        fields=dict(model.fields or {}),
        status=RecordStatus.CLEAN,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class SQLAlchemyRecordStore(RemoteRecordStore):
    """Implements the RemoteRecordStore port for one (kind, owner scope) pair.

    Every write runs in its own SAVEPOINT, so a failed call rolls back only
    itself and leaves the session usable for the calls that follow. Calls are
    serialized because an AsyncSession must not be used concurrently.
    """

    def __init__(self, session: AsyncSession, kind: str, owner_scope: str):
        self._session = session
        self._kind = kind
        self._owner_scope = owner_scope
        self._lock = asyncio.Lock()

    async def _get_model(self, record_id: str) -> CollectionRecordModel | None:
        model = await self._session.get(CollectionRecordModel, record_id)
        if model is None or model.kind != self._kind or model.owner_scope != self._owner_scope:
            return None
        return model

    async def list(self) -> list[CollectionRecord]:
        stmt = (
            select(CollectionRecordModel)
            .where(
                CollectionRecordModel.kind == self._kind,
                CollectionRecordModel.owner_scope == self._owner_scope,
            )
            .order_by(CollectionRecordModel.order_key, CollectionRecordModel.created_at)
        )
        async with self._lock:
            try:
                result = await self._session.execute(stmt)
            except SQLAlchemyError as exc:
                raise StoreError("list", str(exc)) from exc
            return [_to_entity(row) for row in result.scalars().all()]

    async def insert(self, record: CollectionRecord) -> CollectionRecord:
        model = CollectionRecordModel(
            id=str(uuid4()),
            kind=self._kind,
            owner_scope=self._owner_scope,
            order_key=record.order_key,
            category=record.category,
            fields=dict(record.fields),
        )
        async with self._lock:
            try:
                async with self._session.begin_nested():
                    self._session.add(model)
                    await self._session.flush()
            except SQLAlchemyError as exc:
                raise StoreError("insert", str(exc)) from exc
            return _to_entity(model)

    async def update(self, record_id: str, changes: dict[str, Any]) -> CollectionRecord:
        async with self._lock:
            try:
                async with self._session.begin_nested():
                    model = await self._get_model(record_id)
                    if model is None:
                        raise EntityNotFoundError(self._kind, record_id)
                    for name in _UPDATABLE:
                        if name not in changes:
                            continue
                        if name == "fields":
                            model.fields = {**(model.fields or {}), **(changes["fields"] or {})}
                        else:
                            setattr(model, name, changes[name])
                    await self._session.flush()
            except SQLAlchemyError as exc:
                raise StoreError("update", str(exc)) from exc
            return _to_entity(model)

    async def delete(self, record_id: str) -> bool:
        async with self._lock:
            try:
                async with self._session.begin_nested():
                    model = await self._get_model(record_id)
                    if model is None:
                        logger.debug("Delete of absent %s %s treated as success", self._kind, record_id)
                        return False
                    await self._session.delete(model)
                    await self._session.flush()
            except SQLAlchemyError as exc:
                raise StoreError("delete", str(exc)) from exc
            return True


class SQLAlchemyPublicRecordReader(PublicRecordReader):
    """Owner-independent, read-only listing for the public site."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list(self, kind: str) -> list[CollectionRecord]:
        stmt = (
            select(CollectionRecordModel)
            .where(CollectionRecordModel.kind == kind)
            .order_by(CollectionRecordModel.order_key, CollectionRecordModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [_to_entity(row) for row in result.scalars().all()]
