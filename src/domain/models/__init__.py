"""Domain model package.

All domain objects are pure Pydantic models with no ORM or infrastructure
dependencies.  Each entity kind provides three shapes: the persisted record,
the pending-create payload and the pending-update payload.
"""

from .posts import PendingPost, Post, PostUpdate
from .users import PendingUser, User, UserUpdate

__all__ = [
    # Users
    "User",
    "PendingUser",
    "UserUpdate",
    # Posts
    "Post",
    "PendingPost",
    "PostUpdate",
]
