"""ORM model registry. Imports every table module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from src.infrastructure.persistence.models.users import User
from src.infrastructure.persistence.models.posts import Post

__all__ = [
    "User",
    "Post",
]
