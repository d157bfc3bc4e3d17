"""Reorder engine: array-move semantics over an ordered list of records.

``compute_reorder`` is pure and works on copies, so identical inputs always
yield identical output. ``apply_reorder`` installs the result in a
CollectionStore and reports which records need their order persisted.
"""

from collections.abc import Sequence
from dataclasses import replace

from portfolio.domain.collection.store import CollectionStore
from portfolio.domain.entities.collection_record import CollectionRecord
from portfolio.domain.exceptions import IndexOutOfRangeError


def compute_reorder(
    records: Sequence[CollectionRecord],
    source: int,
    destination: int,
) -> list[CollectionRecord]:
    """Move the element at *source* to *destination* and renumber densely.

    Elements between the two positions shift by one; every other element
    keeps its relative order.
    """
    length = len(records)
    for index in (source, destination):
        if not 0 <= index < length:
            raise IndexOutOfRangeError(index, length)

    moved = [replace(r, fields=dict(r.fields), changes=set(r.changes)) for r in records]
    item = moved.pop(source)
    moved.insert(destination, item)
    for position, record in enumerate(moved):
        record.order_key = position
    return moved


def renumber(records: Sequence[CollectionRecord]) -> list[CollectionRecord]:
    """Assign ``0..n-1`` in current order; return the records whose key changed."""
    return [record for position, record in enumerate(records) if record.move_to(position)]


def apply_reorder(store: CollectionStore, source: int, destination: int) -> list[CollectionRecord]:
    """Apply a move gesture to *store*.

    Returns the records whose ``order_key`` changed, in their new display
    order. Those records are marked dirty.
    """
    current = store.list()
    by_ref = {record.local_ref: record for record in current}
    ordered = [by_ref[r.local_ref] for r in compute_reorder(current, source, destination)]
    changed = renumber(ordered)
    store.set_order(ordered)
    return changed
