"""Domain entity for the owner's profile shown in the site header and about section."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from portfolio.domain.entities.entity_kind import is_blank

PROFILE_FIELDS = (
    "full_name",
    "title",
    "bio",
    "avatar_url",
    "email",
    "phone",
    "location",
    "github_url",
    "linkedin_url",
    "twitter_url",
    "website_url",
)
REQUIRED_PROFILE_FIELDS = ("full_name", "title")


@dataclass
class Profile:
    """One profile per owner scope. Writes replace it wholesale (upsert)."""

    owner_scope: str
    full_name: str
    title: str
    bio: str | None = None
    avatar_url: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    twitter_url: str | None = None
    website_url: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_PROFILE_FIELDS if is_blank(getattr(self, name))]

    def replace_with(self, values: dict[str, Any]) -> None:
        """Overwrite every profile field; fields absent from *values* are cleared."""
        for name in PROFILE_FIELDS:
            value = values.get(name)
            # Blank optional inputs are stored as NULL, not as empty strings
            if name not in REQUIRED_PROFILE_FIELDS and is_blank(value):
                value = None
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
