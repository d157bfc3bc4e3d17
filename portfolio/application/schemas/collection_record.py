"""Pydantic DTOs (Data Transfer Objects) for list-style portfolio records."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class CollectionRecordCreate(BaseModel):
    """Schema for inserting a record. The owner scope is never accepted from clients."""

    fields: dict[str, Any] = Field(
        ..., examples=[{"institution": "HCMUS", "degree": "BSc", "start_date": "2019-09-01"}],
    )
    category: str | None = Field(None, max_length=100, examples=["Backend"])
    order_key: int | None = Field(None, ge=0)


class CollectionRecordUpdate(BaseModel):
    """Schema for a partial update — all fields optional."""

    fields: dict[str, Any] | None = None
    category: str | None = Field(None, max_length=100)
    order_key: int | None = Field(None, ge=0)


class CollectionRecordResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    kind: str
    fields: dict[str, Any]
    category: str | None
    order_key: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CategoryGroupResponse(BaseModel):
    """One category of the grouping view, records in display order."""

    category: str
    records: list[CollectionRecordResponse]
