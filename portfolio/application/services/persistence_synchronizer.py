"""Reconciles a CollectionStore against its remote store.

Two triggers exist:

* immediate — ``persist_order`` after a reorder and ``delete`` after a
  remove. One remote call per record, issued in display order and run
  concurrently. Completion order is not relied upon.
* batch — ``save`` walks every non-clean record and inserts, updates or
  deletes it.

No trigger is atomic. Each call's result is collected into a SyncReport;
a failed call leaves its record ``dirty`` / ``pending_delete`` for a later
retry and never rolls back its siblings.
"""

import asyncio
import logging

from portfolio.application.interfaces import RemoteRecordStore
from portfolio.domain.collection import CollectionStore, renumber
from portfolio.domain.entities import (
    CollectionRecord,
    RecordStatus,
    SyncOperation,
    SyncOutcome,
    SyncReport,
)
from portfolio.domain.exceptions import EntityNotFoundError, StoreError

logger = logging.getLogger("portfolio.sync")


class PersistenceSynchronizer:
    """Issues independent per-record remote calls on behalf of one store."""

    def __init__(self, store: CollectionStore, remote: RemoteRecordStore):
        self._store = store
        self._remote = remote

    # ── Immediate triggers ──────────────────────────────────────────

    async def persist_order(self, records: list[CollectionRecord]) -> SyncReport:
        """Write the new ``order_key`` of each persisted record.

        Records without an id only hold a tentative local position and are
        skipped; their order is written when they are inserted.
        """
        calls = [self._update_order(r) for r in records if r.is_persisted]
        report = SyncReport(list(await asyncio.gather(*calls)))
        self._log_report("reorder", report)
        return report

    async def delete(self, record: CollectionRecord) -> SyncOutcome:
        """Delete a ``pending_delete`` record. Absent remote records count as deleted."""
        try:
            existed = await self._remote.delete(record.id)
        except StoreError as exc:
            logger.warning("Delete of %s %s failed: %s", record.kind, record.id, exc)
            return SyncOutcome(record, SyncOperation.DELETE, False, error=str(exc))

        if not existed:
            logger.debug("%s %s was already absent remotely", record.kind, record.id)
        self._store.resolve_deleted(record)
        return SyncOutcome(record, SyncOperation.DELETE, True)

    # ── Batch trigger ───────────────────────────────────────────────

    async def save(self) -> SyncReport:
        """Reconcile every pending record, one independent call each.

        Visible records are first renumbered to their current positions so
        the persisted order matches what the owner sees. Validation runs for
        all inserts and updates before any remote call is issued.
        """
        renumber(self._store.list())
        pending = self._store.pending()
        for record in pending:
            if record.status is not RecordStatus.PENDING_DELETE:
                self._store.kind.validate(record.fields, record.category, record.reference)

        report = SyncReport()
        for record in pending:
            report.outcomes.append(await self._reconcile(record))
        self._log_report("save", report)
        return report

    async def _reconcile(self, record: CollectionRecord) -> SyncOutcome:
        if record.status is RecordStatus.PENDING_DELETE:
            return await self.delete(record)
        if not record.is_persisted:
            return await self._insert(record)
        return await self._update(record)

    async def _insert(self, record: CollectionRecord) -> SyncOutcome:
        try:
            inserted = await self._remote.insert(record)
        except StoreError as exc:
            return SyncOutcome(record, SyncOperation.INSERT, False, error=str(exc))
        logger.debug("Inserted %s %s at %d", record.kind, inserted.id, record.order_key)
        self._store.resolve_inserted(record, inserted.id)
        return SyncOutcome(record, SyncOperation.INSERT, True)

    async def _update(self, record: CollectionRecord) -> SyncOutcome:
        changes = record.pending_changes() or {
            "fields": dict(record.fields),
            "category": record.category,
            "order_key": record.order_key,
        }
        try:
            await self._remote.update(record.id, changes)
        except (EntityNotFoundError, StoreError) as exc:
            return SyncOutcome(record, SyncOperation.UPDATE, False, error=str(exc))
        logger.debug("Updated %s %s: %s", record.kind, record.id, sorted(changes))
        record.mark_clean()
        return SyncOutcome(record, SyncOperation.UPDATE, True)

    async def _update_order(self, record: CollectionRecord) -> SyncOutcome:
        order_key = record.order_key
        try:
            await self._remote.update(record.id, {"order_key": order_key})
        except (EntityNotFoundError, StoreError) as exc:
            return SyncOutcome(record, SyncOperation.UPDATE, False, error=str(exc))
        record.confirm_order_key(order_key)
        return SyncOutcome(record, SyncOperation.UPDATE, True)

    def _log_report(self, trigger: str, report: SyncReport) -> None:
        if report.failed:
            logger.warning(
                "%s of %s: %d/%d calls failed",
                trigger,
                self._store.kind.name,
                len(report.failed),
                len(report),
            )
        else:
            logger.info("%s of %s: %d calls succeeded", trigger, self._store.kind.name, len(report))
