"""Pydantic DTOs (Data Transfer Objects) for the BlogPost feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from portfolio.domain.entities import LifecycleState


class BlogPostCreate(BaseModel):
    """Schema for creating a new post. The slug is derived from the title when omitted."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Điện Biên Phủ Street"])
    content: str = Field(..., min_length=1, examples=["# Hello\n\nFirst post."])
    slug: str | None = Field(None, max_length=255, examples=["dien-bien-phu-street"])
    excerpt: str | None = None
    category: str | None = Field(None, max_length=100)
    lifecycle_state: LifecycleState = LifecycleState.DRAFT


class BlogPostUpdate(BaseModel):
    """Schema for updating an existing post — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    slug: str | None = Field(None, min_length=1, max_length=255)
    excerpt: str | None = None
    category: str | None = Field(None, max_length=100)
    lifecycle_state: LifecycleState | None = None


class BlogPostResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    slug: str
    content: str
    excerpt: str | None
    category: str | None
    lifecycle_state: LifecycleState
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
