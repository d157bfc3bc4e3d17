"""Abstract repository interface (port) for BlogPost persistence."""

from abc import ABC, abstractmethod

from portfolio.domain.entities import BlogPost


class BlogPostRepository(ABC):
    """Port for blog post persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, post_id: int) -> BlogPost | None:
        """Retrieve a single post by its ID."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str, *, published_only: bool = False) -> BlogPost | None:
        """Retrieve a single post by its slug."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        owner_scope: str | None = None,
        published_only: bool = False,
        category: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[BlogPost]:
        """Retrieve a filtered, paginated list of posts, newest first."""
        ...

    @abstractmethod
    async def create(self, post: BlogPost) -> BlogPost:
        """Persist a new post and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, post: BlogPost) -> BlogPost:
        """Update an existing post."""
        ...

    @abstractmethod
    async def delete(self, post_id: int) -> bool:
        """Delete a post. Returns True if deleted, False if not found."""
        ...
