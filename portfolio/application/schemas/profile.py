"""Pydantic DTOs for the owner profile."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProfileUpsert(BaseModel):
    """Full replacement of the profile. Omitted optional fields are cleared."""

    full_name: str = Field(..., max_length=255, examples=["Nguyễn Văn An"])
    title: str = Field(..., max_length=255, examples=["Backend Engineer"])
    bio: str | None = None
    avatar_url: str | None = Field(None, max_length=500)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    location: str | None = Field(None, max_length=255)
    github_url: str | None = Field(None, max_length=500)
    linkedin_url: str | None = Field(None, max_length=500)
    twitter_url: str | None = Field(None, max_length=500)
    website_url: str | None = Field(None, max_length=500)


class ProfileResponse(BaseModel):
    """Schema returned to the client."""

    full_name: str
    title: str
    bio: str | None
    avatar_url: str | None
    email: str | None
    phone: str | None
    location: str | None
    github_url: str | None
    linkedin_url: str | None
    twitter_url: str | None
    website_url: str | None
    updated_at: datetime

    model_config = {"from_attributes": True}
