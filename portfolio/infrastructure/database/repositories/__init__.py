from .record_store import SQLAlchemyPublicRecordReader, SQLAlchemyRecordStore
from .blog_post_repository import SQLAlchemyBlogPostRepository
from .profile_repository import SQLAlchemyProfileRepository

__all__ = [
    "SQLAlchemyRecordStore",
    "SQLAlchemyPublicRecordReader",
    "SQLAlchemyBlogPostRepository",
    "SQLAlchemyProfileRepository",
]
