"""Domain entity for one row of a user-reorderable portfolio list."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class RecordStatus(str, Enum):
    """Reconciliation state of a record relative to the remote store."""

    CLEAN = "clean"
    DIRTY = "dirty"
    PENDING_DELETE = "pending_delete"


@dataclass
class CollectionRecord:
    """An education entry, a job, a project or a skill.

    ``fields`` is the kind-specific payload and is opaque to the collection
    core. ``local_ref`` identifies the record inside one editor before the
    remote store has assigned it an ``id``. ``changes`` names the parts of
    the record (``fields``, ``category``, ``order_key``) modified since the
    last successful write.
    """

    kind: str
    fields: dict[str, Any] = field(default_factory=dict)
    order_key: int = 0
    id: str | None = None
    owner_scope: str | None = None
    category: str | None = None
    status: RecordStatus = RecordStatus.DIRTY
    local_ref: str = field(default_factory=lambda: uuid4().hex)
    changes: set[str] = field(default_factory=set)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def reference(self) -> str:
        """Stable handle: the remote id once assigned, the local ref before."""
        return self.id or self.local_ref

    def merge(
        self,
        fields: dict[str, Any] | None = None,
        category: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Merge partial fields and mark the record dirty."""
        if fields:
            self.fields = {**self.fields, **fields}
            self.changes.add("fields")
        if category is not ...:
            self.category = category
            self.changes.add("category")
        self.updated_at = datetime.now(timezone.utc)
        self.mark_dirty()

    def move_to(self, order_key: int) -> bool:
        """Set a new order key. Returns True when the key actually changed."""
        if order_key == self.order_key:
            return False
        self.order_key = order_key
        self.changes.add("order_key")
        self.mark_dirty()
        return True

    def pending_changes(self) -> dict[str, Any]:
        """Partial payload for a remote update covering only what changed."""
        payload: dict[str, Any] = {}
        if "fields" in self.changes:
            payload["fields"] = dict(self.fields)
        if "category" in self.changes:
            payload["category"] = self.category
        if "order_key" in self.changes:
            payload["order_key"] = self.order_key
        return payload

    def mark_dirty(self) -> None:
        if self.status is not RecordStatus.PENDING_DELETE:
            self.status = RecordStatus.DIRTY

    def mark_clean(self) -> None:
        self.status = RecordStatus.CLEAN
        self.changes.clear()

    def mark_pending_delete(self) -> None:
        self.status = RecordStatus.PENDING_DELETE

    def confirm_order_key(self, order_key: int) -> None:
        """Acknowledge a persisted order key unless a later move superseded it."""
        if self.order_key != order_key:
            return
        self.changes.discard("order_key")
        if not self.changes and self.status is RecordStatus.DIRTY:
            self.status = RecordStatus.CLEAN
