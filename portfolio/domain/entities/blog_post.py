"""Domain entity for blog posts: content records with a slug and a lifecycle."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from portfolio.domain.slug import slugify


class LifecycleState(str, Enum):
    """Publication state of a content record."""

    DRAFT = "draft"
    PUBLISHED = "published"


@dataclass
class BlogPost:
    """A blog post owned by the portfolio owner.

    The slug follows the title until the post is first published. After
    that only an explicit slug edit changes it. ``published_at`` is set
    once, on the first transition into ``published``, and never cleared.
    """

    title: str
    content: str
    slug: str = ""
    excerpt: str | None = None
    category: str | None = None
    lifecycle_state: LifecycleState = LifecycleState.DRAFT
    published_at: datetime | None = None
    owner_scope: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.slug:
            self.slug = slugify(self.title)

    @property
    def has_been_published(self) -> bool:
        return self.published_at is not None

    @property
    def is_published(self) -> bool:
        return self.lifecycle_state is LifecycleState.PUBLISHED

    def retitle(self, title: str) -> None:
        """Change the title, re-deriving the slug only for never-published posts."""
        self.title = title
        if not self.has_been_published:
            self.slug = slugify(title)

    def transition_to(self, state: LifecycleState) -> None:
        self.lifecycle_state = state
        if state is LifecycleState.PUBLISHED and self.published_at is None:
            self.published_at = datetime.now(timezone.utc)

    def update(
        self,
        title: str | None = None,
        slug: str | None = None,
        content: str | None = None,
        excerpt: str | None = None,
        category: str | None = None,
        lifecycle_state: LifecycleState | None = None,
    ) -> None:
        """Apply an owner edit and refresh the updated_at timestamp."""
        if title is not None and title != self.title:
            self.retitle(title)
        if slug is not None:
            self.slug = slug
        if content is not None:
            self.content = content
        if excerpt is not None:
            self.excerpt = excerpt
        if category is not None:
            self.category = category
        if lifecycle_state is not None:
            self.transition_to(lifecycle_state)
        self.updated_at = datetime.now(timezone.utc)
