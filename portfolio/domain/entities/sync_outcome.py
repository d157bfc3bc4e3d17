"""Per-record results of reconciling a collection against the remote store."""

from dataclasses import dataclass, field
from enum import Enum

from .collection_record import CollectionRecord


class SyncOperation(str, Enum):
    """Remote call issued for a record."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


@dataclass
class SyncOutcome:
    """Result of one remote call. A failure leaves the record unresolved."""

    record: CollectionRecord
    operation: SyncOperation
    success: bool
    error: str | None = None


@dataclass
class SyncReport:
    """Outcome list of one synchronization round; never atomic."""

    outcomes: list[SyncOutcome] = field(default_factory=list)

    def __iter__(self):
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> list[SyncOutcome]:
        return [o for o in self.outcomes if o.success]

    @property
    def failed(self) -> list[SyncOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def all_succeeded(self) -> bool:
        return not self.failed
