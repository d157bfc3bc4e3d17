from .collection_record import CollectionRecord, RecordStatus
from .entity_kind import ENTITY_KINDS, EntityKind, get_entity_kind
from .blog_post import BlogPost, LifecycleState
from .profile import PROFILE_FIELDS, Profile
from .sync_outcome import SyncOperation, SyncOutcome, SyncReport

__all__ = [
    "CollectionRecord",
    "RecordStatus",
    "ENTITY_KINDS",
    "EntityKind",
    "get_entity_kind",
    "BlogPost",
    "LifecycleState",
    "PROFILE_FIELDS",
    "Profile",
    "SyncOperation",
    "SyncOutcome",
    "SyncReport",
]
