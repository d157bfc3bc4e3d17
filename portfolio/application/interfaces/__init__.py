from .record_store import PublicRecordReader, RemoteRecordStore
from .blog_post_repository import BlogPostRepository
from .profile_repository import ProfileRepository

__all__ = [
    "RemoteRecordStore",
    "PublicRecordReader",
    "BlogPostRepository",
    "ProfileRepository",
]
