"""Application service (use case) behind one list-style editor.

Each editor owns its own CollectionStore; two editors never share one.
Local edits (add, edit, grouped preview) never touch the remote store.
Removes and moves persist immediately, and ``save`` persists everything else.
"""

import logging
from typing import Any

from portfolio.application.interfaces import RemoteRecordStore
from portfolio.application.services.persistence_synchronizer import PersistenceSynchronizer
from portfolio.domain.collection import CollectionStore, apply_reorder, group_by_category
from portfolio.domain.entities import CollectionRecord, EntityKind, SyncOutcome, SyncReport

logger = logging.getLogger(__name__)


class CollectionEditor:
    """Editing session over one owner's list of a single entity kind."""

    def __init__(self, kind: EntityKind, owner_scope: str, remote: RemoteRecordStore):
        self.kind = kind
        self.store = CollectionStore(kind, owner_scope)
        self._remote = remote
        self._sync = PersistenceSynchronizer(self.store, remote)

    async def load(self) -> list[CollectionRecord]:
        """Seed the store from the remote store, the source of truth."""
        self.store.replace_all(await self._remote.list())
        logger.debug("Loaded %d %s records", len(self.store), self.kind.name)
        return self.store.list()

    def records(self) -> list[CollectionRecord]:
        return self.store.list()

    def add(self, fields: dict[str, Any] | None = None, category: str | None = None) -> CollectionRecord:
        return self.store.add(fields, category)

    def edit(
        self,
        reference: str,
        fields: dict[str, Any] | None = None,
        category: str | None = ...,  # type: ignore[assignment]
    ) -> CollectionRecord:
        return self.store.update(reference, fields, category)

    async def remove(self, reference: str) -> SyncOutcome | None:
        """Remove locally, then fire the remote delete.

        Returns None when the record was never persisted.
        """
        record = self.store.remove(reference)
        if not record.is_persisted:
            return None
        return await self._sync.delete(record)

    async def move(self, source: int, destination: int) -> SyncReport:
        """Apply a drag gesture and persist every order key that changed."""
        changed = apply_reorder(self.store, source, destination)
        return await self._sync.persist_order(changed)

    async def save(self) -> SyncReport:
        """Batch-persist all pending changes.

        The store is refreshed from the remote store only when every call
        succeeded. After a partial failure the unresolved local state is kept
        so the caller can retry.
        """
        report = await self._sync.save()
        if report.all_succeeded:
            await self.load()
        return report

    def grouped(self) -> dict[str, list[CollectionRecord]]:
        return group_by_category(self.store.list())
