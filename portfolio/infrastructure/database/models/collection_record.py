"""SQLAlchemy ORM model for list-style portfolio records."""

from sqlalchemy import Index, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.infrastructure.database.base import Base, TimestampMixin


class CollectionRecordModel(TimestampMixin, Base):
    """ORM model — maps to the 'collection_records' table.

    Education, experience, projects and skills share this table and are
    told apart by ``kind``.
    """

    __tablename__ = "collection_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    kind: Mapped[str] = mapped_column(String(50), nullable=False)
    owner_scope: Mapped[str] = mapped_column(String(255), nullable=False)
    order_key: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    fields: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    __table_args__ = (
        Index("ix_collection_records_scope_order", "kind", "owner_scope", "order_key"),
    )

    def __repr__(self) -> str:
        return (
            f"<CollectionRecordModel(id={self.id}, kind='{self.kind}', "
            f"order_key={self.order_key})>"
        )
