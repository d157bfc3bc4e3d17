"""In-memory mirror of one editable list.

A CollectionStore belongs to exactly one editor. It never talks to the
remote store; the PersistenceSynchronizer reads its pending records and
reports results back through ``resolve_*``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from portfolio.domain.entities.collection_record import CollectionRecord, RecordStatus
from portfolio.domain.entities.entity_kind import EntityKind
from portfolio.domain.exceptions import EntityNotFoundError


class CollectionStore:
    """Ordered, locally-edited list of records plus their sync status."""

    def __init__(self, kind: EntityKind, owner_scope: str):
        self.kind = kind
        self.owner_scope = owner_scope
        self._records: list[CollectionRecord] = []

    def __len__(self) -> int:
        return len(self.list())

    def list(self) -> list[CollectionRecord]:
        """Visible records in display order (pending deletes excluded)."""
        return [r for r in self._records if r.status is not RecordStatus.PENDING_DELETE]

    def pending(self) -> list[CollectionRecord]:
        """Every record whose state differs from the remote store."""
        return [r for r in self._records if r.status is not RecordStatus.CLEAN]

    def get(self, reference: str) -> CollectionRecord:
        """Find a record by remote id or local ref, pending deletes included."""
        for record in self._records:
            if record.id == reference or record.local_ref == reference:
                return record
        raise EntityNotFoundError(self.kind.label, reference)

    def add(self, fields: dict[str, Any] | None = None, category: str | None = None) -> CollectionRecord:
        record = CollectionRecord(
            kind=self.kind.name,
            fields=self.kind.with_defaults(fields or {}),
            order_key=len(self.list()),
            owner_scope=self.owner_scope,
            category=category,
            status=RecordStatus.DIRTY,
        )
        self._records.append(record)
        return record

    def update(
        self,
        reference: str,
        fields: dict[str, Any] | None = None,
        category: str | None = ...,  # type: ignore[assignment]
    ) -> CollectionRecord:
        record = self.get(reference)
        record.merge(fields, category)
        return record

    def remove(self, reference: str) -> CollectionRecord:
        """Hide a record from ``list()``.

        A record that was never persisted has no remote counterpart and is
        dropped outright; a persisted one stays as ``pending_delete`` until
        the synchronizer confirms the remote delete.
        """
        record = self.get(reference)
        if record.is_persisted:
            record.mark_pending_delete()
        else:
            self._records = [r for r in self._records if r is not record]
        return record

    def replace_all(self, records: list[CollectionRecord]) -> None:
        """Seed from a remote fetch. Every record becomes ``clean``."""
        seeded = []
        for record in sorted(records, key=lambda r: r.order_key):
            copy = replace(record, fields=dict(record.fields), changes=set())
            copy.mark_clean()
            seeded.append(copy)
        self._records = seeded

    def set_order(self, ordered: list[CollectionRecord]) -> None:
        """Install a new visible ordering, keeping pending deletes at the tail."""
        hidden = [r for r in self._records if r.status is RecordStatus.PENDING_DELETE]
        self._records = list(ordered) + hidden

    def resolve_inserted(self, record: CollectionRecord, remote_id: str) -> None:
        record.id = remote_id
        record.mark_clean()

    def resolve_deleted(self, record: CollectionRecord) -> None:
        self._records = [r for r in self._records if r is not record]
