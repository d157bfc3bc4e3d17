"""Application service (use case) for BlogPost operations."""

from portfolio.application.interfaces import BlogPostRepository
from portfolio.application.schemas import BlogPostCreate, BlogPostUpdate
from portfolio.domain.entities import BlogPost
from portfolio.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    RecordValidationError,
)
from portfolio.domain.slug import is_valid_slug, slugify


class BlogPostService:
    """Orchestrates blog post business logic. Depends on the repository port (DI).

    ``owner_scope`` binds writes to the authenticated owner; the public
    read methods ignore it.
    """

    def __init__(self, repository: BlogPostRepository, owner_scope: str | None = None):
        self._repository = repository
        self._owner_scope = owner_scope

    async def get_post(self, post_id: int) -> BlogPost:
        post = await self._repository.get_by_id(post_id)
        if post is None or (self._owner_scope and post.owner_scope != self._owner_scope):
            raise EntityNotFoundError("BlogPost", post_id)
        return post

    async def list_posts(self, skip: int = 0, limit: int = 100) -> list[BlogPost]:
        return await self._repository.get_all(owner_scope=self._owner_scope, skip=skip, limit=limit)

    async def list_published(
        self, skip: int = 0, limit: int = 100, category: str | None = None
    ) -> list[BlogPost]:
        return await self._repository.get_all(
            published_only=True, category=category, skip=skip, limit=limit
        )

    async def get_published_by_slug(self, slug: str) -> BlogPost:
        post = await self._repository.get_by_slug(slug, published_only=True)
        if post is None:
            raise EntityNotFoundError("BlogPost", slug)
        return post

    async def create_post(self, data: BlogPostCreate) -> BlogPost:
        slug = data.slug or slugify(data.title)
        await self._check_slug(slug)
        post = BlogPost(
            title=data.title,
            content=data.content,
            slug=slug,
            excerpt=data.excerpt,
            category=data.category,
            owner_scope=self._owner_scope,
        )
        post.transition_to(data.lifecycle_state)
        return await self._repository.create(post)

    async def update_post(self, post_id: int, data: BlogPostUpdate) -> BlogPost:
        post = await self.get_post(post_id)
        previous_slug = post.slug
        post.update(
            title=data.title,
            slug=data.slug,
            content=data.content,
            excerpt=data.excerpt,
            category=data.category,
            lifecycle_state=data.lifecycle_state,
        )
        if post.slug != previous_slug:
            await self._check_slug(post.slug, exclude_id=post.id)
        return await self._repository.update(post)

    async def delete_post(self, post_id: int) -> bool:
        """Delete a post. Deleting an absent post is not an error."""
        post = await self._repository.get_by_id(post_id)
        if post is None:
            return False
        if self._owner_scope and post.owner_scope != self._owner_scope:
            raise EntityNotFoundError("BlogPost", post_id)
        return await self._repository.delete(post_id)

    async def _check_slug(self, slug: str, exclude_id: int | None = None) -> None:
        if not is_valid_slug(slug):
            raise RecordValidationError("BlogPost", ["slug"], slug)
        existing = await self._repository.get_by_slug(slug)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateEntityError("BlogPost", "slug", slug)
