"""Application service (use case) for the owner profile."""

import logging

from portfolio.application.interfaces import ProfileRepository
from portfolio.application.schemas import ProfileUpsert
from portfolio.domain.entities import Profile
from portfolio.domain.exceptions import EntityNotFoundError, RecordValidationError

logger = logging.getLogger(__name__)


class ProfileService:
    """Reads and upserts the single profile of an owner scope."""

    def __init__(self, repository: ProfileRepository, owner_scope: str | None = None):
        self._repository = repository
        self._owner_scope = owner_scope

    async def get_profile(self) -> Profile:
        profile = await self._repository.get_by_owner(self._owner_scope)
        if profile is None:
            raise EntityNotFoundError("Profile", self._owner_scope)
        return profile

    async def get_public_profile(self) -> Profile:
        profile = await self._repository.get_first()
        if profile is None:
            raise EntityNotFoundError("Profile", "public")
        return profile

    async def upsert_profile(self, data: ProfileUpsert) -> Profile:
        """Create the owner's profile or replace it. The scope never comes from *data*."""
        values = data.model_dump()
        profile = await self._repository.get_by_owner(self._owner_scope)
        if profile is None:
            profile = Profile(owner_scope=self._owner_scope, full_name="", title="")
        profile.replace_with(values)

        missing = profile.missing_fields()
        if missing:
            raise RecordValidationError("Profile", missing)

        saved = await self._repository.save(profile)
        logger.info("Saved profile for %s", self._owner_scope)
        return saved
