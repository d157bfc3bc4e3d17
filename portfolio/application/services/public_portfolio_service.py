"""Application service for the public, read-only portfolio pages."""

from portfolio.application.interfaces import PublicRecordReader
from portfolio.domain.collection import group_by_category
from portfolio.domain.entities import CollectionRecord, get_entity_kind


class PublicPortfolioService:
    def __init__(self, reader: PublicRecordReader):
        self._reader = reader

    async def list_records(self, kind: str) -> list[CollectionRecord]:
        return await self._reader.list(get_entity_kind(kind).name)

    async def grouped_records(self, kind: str) -> dict[str, list[CollectionRecord]]:
        return group_by_category(await self.list_records(kind))
