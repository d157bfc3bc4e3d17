from .store import CollectionStore
from .reorder import apply_reorder, compute_reorder, renumber
from .grouping import UNCATEGORIZED, group_by_category

__all__ = [
    "CollectionStore",
    "apply_reorder",
    "compute_reorder",
    "renumber",
    "UNCATEGORIZED",
    "group_by_category",
]
