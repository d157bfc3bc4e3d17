"""In-memory fakes of the application ports for unit testing."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from portfolio.application.interfaces import BlogPostRepository, ProfileRepository, RemoteRecordStore
from portfolio.domain.entities import BlogPost, CollectionRecord, Profile, RecordStatus
from portfolio.domain.exceptions import EntityNotFoundError, StoreError


class FakeRemoteRecordStore(RemoteRecordStore):
    """In-memory remote store that records every call and can be told to fail."""

    def __init__(self):
        self.rows: dict[str, CollectionRecord] = {}
        self.calls: list[tuple[str, str | None, Any]] = []
        self.failing_ids: set[str] = set()
        self.failing_insert_fields: dict[str, Any] = {}
        self._next_id = 1

    def seed(self, *records: CollectionRecord) -> list[CollectionRecord]:
        seeded = []
        for record in records:
            stored = replace(record, id=f"r{self._next_id}", changes=set(), status=RecordStatus.CLEAN)
            self._next_id += 1
            self.rows[stored.id] = stored
            seeded.append(stored)
        return seeded

    def order(self) -> list[str]:
        return [r.id for r in sorted(self.rows.values(), key=lambda r: r.order_key)]

    async def list(self) -> list[CollectionRecord]:
        self.calls.append(("list", None, None))
        ordered = sorted(self.rows.values(), key=lambda r: r.order_key)
        return [replace(r, fields=dict(r.fields), changes=set()) for r in ordered]

    async def insert(self, record: CollectionRecord) -> CollectionRecord:
        self.calls.append(("insert", None, dict(record.fields)))
        for name, value in self.failing_insert_fields.items():
            if record.fields.get(name) == value:
                raise StoreError("insert", "constraint violation")
        stored = replace(
            record,
            id=f"r{self._next_id}",
            fields=dict(record.fields),
            changes=set(),
            status=RecordStatus.CLEAN,
        )
        self._next_id += 1
        self.rows[stored.id] = stored
        return replace(stored)

    async def update(self, record_id: str, changes: dict[str, Any]) -> CollectionRecord:
        self.calls.append(("update", record_id, dict(changes)))
        if record_id in self.failing_ids:
            raise StoreError("update", "network unreachable")
        stored = self.rows.get(record_id)
        if stored is None:
            raise EntityNotFoundError("record", record_id)
        if "fields" in changes:
            stored.fields = {**stored.fields, **changes["fields"]}
        if "category" in changes:
            stored.category = changes["category"]
        if "order_key" in changes:
            stored.order_key = changes["order_key"]
        return replace(stored)

    async def delete(self, record_id: str) -> bool:
        self.calls.append(("delete", record_id, None))
        if record_id in self.failing_ids:
            raise StoreError("delete", "network unreachable")
        return self.rows.pop(record_id, None) is not None

    def calls_of(self, operation: str) -> list[tuple[str, str | None, Any]]:
        return [call for call in self.calls if call[0] == operation]


class FakeBlogPostRepository(BlogPostRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._posts: dict[int, BlogPost] = {}
        self._next_id = 1

    async def get_by_id(self, post_id: int) -> BlogPost | None:
        return self._posts.get(post_id)

    async def get_by_slug(self, slug: str, *, published_only: bool = False) -> BlogPost | None:
        for post in self._posts.values():
            if post.slug == slug and (post.is_published or not published_only):
                return post
        return None

    async def get_all(
        self,
        *,
        owner_scope: str | None = None,
        published_only: bool = False,
        category: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[BlogPost]:
        posts = [
            p for p in self._posts.values()
            if (owner_scope is None or p.owner_scope == owner_scope)
            and (p.is_published or not published_only)
            and (category is None or p.category == category)
        ]
        return posts[skip : skip + limit]

    async def create(self, post: BlogPost) -> BlogPost:
        post.id = self._next_id
        self._next_id += 1
        self._posts[post.id] = post
        return post

    async def update(self, post: BlogPost) -> BlogPost:
        if post.id not in self._posts:
            raise ValueError(f"BlogPost {post.id} not found")
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: int) -> bool:
        return self._posts.pop(post_id, None) is not None


class FakeProfileRepository(ProfileRepository):
    """In-memory profile store keyed by owner scope, in insertion order."""

    def __init__(self):
        self.profiles: dict[str, Profile] = {}
        self._next_id = 1

    async def get_by_owner(self, owner_scope: str) -> Profile | None:
        return self.profiles.get(owner_scope)

    async def get_first(self) -> Profile | None:
        return next(iter(self.profiles.values()), None)

    async def save(self, profile: Profile) -> Profile:
        if profile.id is None:
            profile.id = self._next_id
            self._next_id += 1
        self.profiles[profile.owner_scope] = profile
        return profile
