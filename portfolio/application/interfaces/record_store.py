"""Abstract remote store interface (port) for list-style portfolio records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from portfolio.domain.entities import CollectionRecord


class RemoteRecordStore(ABC):
    """Port for one entity kind's persisted list — implemented in the infrastructure layer.

    Implementations are bound to a single kind and owner scope; the scope is
    never read from the records passed in.
    """

    @abstractmethod
    async def list(self) -> list[CollectionRecord]:
        """Return the owner's records ordered by ``order_key``."""
        ...

    @abstractmethod
    async def insert(self, record: CollectionRecord) -> CollectionRecord:
        """Persist a record without an id and return it with the generated id."""
        ...

    @abstractmethod
    async def update(self, record_id: str, changes: dict[str, Any]) -> CollectionRecord:
        """Apply a partial update (``fields``, ``category``, ``order_key``).

        Raises EntityNotFoundError when the id is absent, StoreError on failure.
        """
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if it was already absent."""
        ...


class PublicRecordReader(ABC):
    """Read-only, owner-independent view used by the public portfolio pages."""

    @abstractmethod
    async def list(self, kind: str) -> list[CollectionRecord]:
        """Return every record of *kind* in display order."""
        ...
