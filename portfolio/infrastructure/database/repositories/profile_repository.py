"""Concrete repository implementation for the owner profile backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.application.interfaces import ProfileRepository
from portfolio.domain.entities import PROFILE_FIELDS, Profile
from portfolio.infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository(ProfileRepository):
    """Implements the ProfileRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Map ORM model → domain entity."""
        return Profile(
            id=model.id,
            owner_scope=model.owner_scope,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in PROFILE_FIELDS},
        )

    async def get_by_owner(self, owner_scope: str) -> Profile | None:
        stmt = select(ProfileModel).where(ProfileModel.owner_scope == owner_scope)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_first(self) -> Profile | None:
        stmt = select(ProfileModel).order_by(ProfileModel.created_at, ProfileModel.id).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save(self, profile: Profile) -> Profile:
        model = await self._session.get(ProfileModel, profile.id) if profile.id else None
        if model is None:
            model = ProfileModel(owner_scope=profile.owner_scope)
            self._session.add(model)
        for name in PROFILE_FIELDS:
            setattr(model, name, getattr(profile, name))
        model.updated_at = profile.updated_at
        await self._session.flush()
        return self._to_entity(model)
