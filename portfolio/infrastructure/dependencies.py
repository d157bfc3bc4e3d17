"""FastAPI dependency injection — wires infrastructure to application layer."""

import secrets
from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.config import get_settings
from portfolio.application.services import (
    BlogPostService,
    CollectionRecordService,
    ProfileService,
    PublicPortfolioService,
)
from portfolio.domain.entities import EntityKind, get_entity_kind
from portfolio.domain.exceptions import EntityNotFoundError
from portfolio.infrastructure.database.session import get_db_session
from portfolio.infrastructure.database.repositories import (
    SQLAlchemyBlogPostRepository,
    SQLAlchemyProfileRepository,
    SQLAlchemyPublicRecordReader,
    SQLAlchemyRecordStore,
)

_bearer = HTTPBearer(auto_error=False)


async def get_owner_scope(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str:
    """Resolve the owner scope from the session credential, never from the request body."""
    settings = get_settings()
    if (
        credentials is None
        or not settings.owner_token
        or not secrets.compare_digest(credentials.credentials, settings.owner_token)
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return settings.owner_scope


def get_kind(kind: str) -> EntityKind:
    """Resolve the ``{kind}`` path parameter to a registered entity kind."""
    try:
        return get_entity_kind(kind)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


async def get_collection_record_service(
    kind: EntityKind = Depends(get_kind),
    owner_scope: str = Depends(get_owner_scope),
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CollectionRecordService, None]:
    """Provides a CollectionRecordService bound to the owner's list of one kind."""
    store = SQLAlchemyRecordStore(session, kind.name, owner_scope)
    yield CollectionRecordService(kind, store)


async def get_public_portfolio_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PublicPortfolioService, None]:
    """Provides the read-only service behind the public pages."""
    yield PublicPortfolioService(SQLAlchemyPublicRecordReader(session))


async def get_blog_post_service(
    owner_scope: str = Depends(get_owner_scope),
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[BlogPostService, None]:
    """Provides an owner-scoped BlogPostService instance."""
    yield BlogPostService(SQLAlchemyBlogPostRepository(session), owner_scope=owner_scope)


async def get_public_blog_post_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[BlogPostService, None]:
    """Provides a BlogPostService for published-only reads."""
    yield BlogPostService(SQLAlchemyBlogPostRepository(session))


async def get_profile_service(
    owner_scope: str = Depends(get_owner_scope),
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProfileService, None]:
    """Provides a ProfileService bound to the owner's profile."""
    yield ProfileService(SQLAlchemyProfileRepository(session), owner_scope=owner_scope)


async def get_public_profile_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProfileService, None]:
    """Provides a ProfileService for the public profile read."""
    yield ProfileService(SQLAlchemyProfileRepository(session))
