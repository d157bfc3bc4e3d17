"""Read-only category projection used by the skills preview and public page."""

from collections.abc import Iterable

from portfolio.domain.entities.collection_record import CollectionRecord

UNCATEGORIZED = "uncategorized"


def group_by_category(
    records: Iterable[CollectionRecord],
    default: str = UNCATEGORIZED,
) -> dict[str, list[CollectionRecord]]:
    """Group records by category, in order of each category's first appearance.

    Records keep their relative order inside a group. A missing or blank
    category falls under *default*.
    """
    groups: dict[str, list[CollectionRecord]] = {}
    for record in records:
        key = record.category.strip() if record.category and record.category.strip() else default
        groups.setdefault(key, []).append(record)
    return groups
