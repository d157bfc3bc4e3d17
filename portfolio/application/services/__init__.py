from .blog_post_service import BlogPostService
from .collection_editor import CollectionEditor
from .collection_record_service import CollectionRecordService
from .persistence_synchronizer import PersistenceSynchronizer
from .profile_service import ProfileService
from .public_portfolio_service import PublicPortfolioService

__all__ = [
    "BlogPostService",
    "CollectionEditor",
    "CollectionRecordService",
    "PersistenceSynchronizer",
    "ProfileService",
    "PublicPortfolioService",
]
