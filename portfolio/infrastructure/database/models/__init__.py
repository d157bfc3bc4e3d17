from .collection_record import CollectionRecordModel
from .blog_post import BlogPostModel
from .profile import ProfileModel

__all__ = [
    "CollectionRecordModel",
    "BlogPostModel",
    "ProfileModel",
]
