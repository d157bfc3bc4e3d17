"""Concrete repository implementation for BlogPost backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.application.interfaces import BlogPostRepository
from portfolio.domain.entities import BlogPost, LifecycleState
from portfolio.domain.exceptions import DuplicateEntityError
from portfolio.infrastructure.database.models import BlogPostModel


class SQLAlchemyBlogPostRepository(BlogPostRepository):
    """Implements the BlogPostRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: BlogPostModel) -> BlogPost:
        """Map ORM model → domain entity."""
        return BlogPost(
            id=model.id,
            title=model.title,
            slug=model.slug,
            content=model.content,
            excerpt=model.excerpt,
            category=model.category,
            lifecycle_state=LifecycleState(model.lifecycle_state),
            published_at=model.published_at,
            owner_scope=model.owner_scope,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: BlogPost) -> BlogPostModel:
        """Map domain entity → ORM model (for creation)."""
        return BlogPostModel(
            title=entity.title,
            slug=entity.slug,
            content=entity.content,
            excerpt=entity.excerpt,
            category=entity.category,
            lifecycle_state=entity.lifecycle_state.value,
            published_at=entity.published_at,
            owner_scope=entity.owner_scope,
        )

    async def get_by_id(self, post_id: int) -> BlogPost | None:
        result = await self._session.get(BlogPostModel, post_id)
        return self._to_entity(result) if result else None

    async def get_by_slug(self, slug: str, *, published_only: bool = False) -> BlogPost | None:
        stmt = select(BlogPostModel).where(BlogPostModel.slug == slug)
        if published_only:
            stmt = stmt.where(BlogPostModel.lifecycle_state == LifecycleState.PUBLISHED.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(
        self,
        *,
        owner_scope: str | None = None,
        published_only: bool = False,
        category: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[BlogPost]:
        stmt = select(BlogPostModel)
        if owner_scope is not None:
            stmt = stmt.where(BlogPostModel.owner_scope == owner_scope)
        if category is not None:
            stmt = stmt.where(BlogPostModel.category == category)
        if published_only:
            stmt = stmt.where(
                BlogPostModel.lifecycle_state == LifecycleState.PUBLISHED.value
            ).order_by(BlogPostModel.published_at.desc())
        else:
            stmt = stmt.order_by(BlogPostModel.created_at.desc())
        stmt = stmt.offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, post: BlogPost) -> BlogPost:
        model = self._to_model(post)
        self._session.add(model)
        await self._flush(post.slug)
        return self._to_entity(model)

    async def update(self, post: BlogPost) -> BlogPost:
        model = await self._session.get(BlogPostModel, post.id)
        if model is None:
            raise ValueError(f"BlogPost {post.id} not found in database")
        model.title = post.title
        model.slug = post.slug
        model.content = post.content
        model.excerpt = post.excerpt
        model.category = post.category
        model.lifecycle_state = post.lifecycle_state.value
        model.published_at = post.published_at
        model.updated_at = post.updated_at
        await self._flush(post.slug)
        return self._to_entity(model)

    async def delete(self, post_id: int) -> bool:
        model = await self._session.get(BlogPostModel, post_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _flush(self, slug: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError("BlogPost", "slug", slug) from exc
