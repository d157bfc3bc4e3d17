from .collection_record import (
    CollectionRecordCreate,
    CollectionRecordUpdate,
    CollectionRecordResponse,
    CategoryGroupResponse,
)
from .blog_post import BlogPostCreate, BlogPostUpdate, BlogPostResponse
from .profile import ProfileUpsert, ProfileResponse

__all__ = [
    "CollectionRecordCreate",
    "CollectionRecordUpdate",
    "CollectionRecordResponse",
    "CategoryGroupResponse",
    "BlogPostCreate",
    "BlogPostUpdate",
    "BlogPostResponse",
    "ProfileUpsert",
    "ProfileResponse",
]
