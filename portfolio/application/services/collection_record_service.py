"""Application service (use case) for server-side collection record operations."""

from portfolio.application.interfaces import RemoteRecordStore
from portfolio.application.schemas import CollectionRecordCreate, CollectionRecordUpdate
from portfolio.domain.collection import group_by_category
from portfolio.domain.entities import CollectionRecord, EntityKind
from portfolio.domain.entities.entity_kind import is_blank
from portfolio.domain.exceptions import RecordValidationError


class CollectionRecordService:
    """CRUD over one owner's list of a single kind. Depends on the store port (DI)."""

    def __init__(self, kind: EntityKind, store: RemoteRecordStore):
        self._kind = kind
        self._store = store

    async def list_records(self) -> list[CollectionRecord]:
        return await self._store.list()

    async def grouped_records(self) -> dict[str, list[CollectionRecord]]:
        return group_by_category(await self._store.list())

    async def create_record(self, data: CollectionRecordCreate) -> CollectionRecord:
        fields = self._kind.with_defaults(data.fields)
        self._kind.validate(fields, data.category)

        order_key = data.order_key
        if order_key is None:
            order_key = len(await self._store.list())

        record = CollectionRecord(
            kind=self._kind.name,
            fields=fields,
            order_key=order_key,
            category=data.category,
        )
        return await self._store.insert(record)

    async def update_record(self, record_id: str, data: CollectionRecordUpdate) -> CollectionRecord:
        changes = data.model_dump(exclude_unset=True)
        patched = {**(changes.get("fields") or {})}
        if "category" in changes:
            patched["category"] = changes["category"]
        blanked = [
            name for name in self._kind.required_fields
            if name in patched and is_blank(patched[name])
        ]
        if blanked:
            raise RecordValidationError(self._kind.label, blanked, record_id)
        return await self._store.update(record_id, changes)

    async def delete_record(self, record_id: str) -> bool:
        return await self._store.delete(record_id)
